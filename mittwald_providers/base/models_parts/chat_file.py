"""
File attachment model for chat messages.

Images are sent to the vendor as ``image_url`` blocks and PDFs as ``file``
blocks, both embedding the bytes as a base64 data URL.
"""
from __future__ import annotations

import base64
import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import Union


@dataclass
class ChatFile:
    """A binary attachment carried by a chat message.

    Attributes:
        filename: Display file name sent alongside PDF content.
        mime_type: MIME type, e.g. ``"image/png"`` or ``"application/pdf"``.
        data: Raw file bytes.
    """

    filename: str
    mime_type: str
    data: bytes

    @property
    def is_image(self) -> bool:
        """Return True when the attachment is an image."""
        return self.mime_type.startswith("image/")

    @property
    def is_pdf(self) -> bool:
        """Return True when the attachment is a PDF document."""
        return self.mime_type == "application/pdf"

    def as_base64_data_url(self) -> str:
        """Return the attachment as a ``data:<mime>;base64,...`` URL."""
        encoded = base64.b64encode(self.data).decode("ascii")
        return f"data:{self.mime_type};base64,{encoded}"

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "ChatFile":
        """Read a file from disk, guessing its MIME type from the extension."""
        p = Path(path)
        mime, _ = mimetypes.guess_type(p.name)
        return cls(filename=p.name, mime_type=mime or "application/octet-stream", data=p.read_bytes())


__all__ = ["ChatFile"]
