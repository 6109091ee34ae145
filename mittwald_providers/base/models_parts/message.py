"""
Chat message DTO.

Defines the `ChatMessage` dataclass and the `Role` literal. A message carries
plain text plus optional attachments, and optionally the tool call bookkeeping
needed to replay a tool-using conversation.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal, Optional

from .chat_file import ChatFile
from .tool_call import ToolCall


# Message roles used by the vendor API.
Role = Literal["system", "user", "assistant", "tool"]


@dataclass
class ChatMessage:
    """A chat message in a conversation.

    Attributes:
        role: The role of the message author.
        text: Text content (may be empty for pure tool call messages).
        files: Attachments (images, PDFs) embedded as base64 content blocks.
        tool_call_id: Set on ``tool`` messages answering a tool call.
        tool_calls: Set on ``assistant`` messages that requested tools.
    """

    role: Role
    text: str = ""
    files: List[ChatFile] = field(default_factory=list)
    tool_call_id: Optional[str] = None
    tool_calls: List[ToolCall] = field(default_factory=list)


__all__ = [
    "ChatMessage",
    "Role",
]
