"""
Pydantic DTOs validating inbound chat input given as plain mappings.

Purpose
-------
Hosts that build chat input from JSON (for instance the CLI) validate it with
:class:`ChatInputDTO` before it reaches the request builder, then convert it
with :meth:`ChatInputDTO.to_chat_input`.

External dependencies: Pydantic only. Validation either succeeds or raises
``pydantic.ValidationError``.
"""

from __future__ import annotations

import base64
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field, model_validator

from ..models import ChatFile, ChatInput, ChatMessage, ToolCall, ToolFunction


Role = Literal["system", "user", "assistant", "tool"]


class FileDTO(BaseModel):
    """An attachment with base64 encoded ``data``."""

    filename: str = Field(..., min_length=1)
    mime_type: str = Field(..., min_length=1)
    data: str

    def to_file(self) -> ChatFile:
        return ChatFile(filename=self.filename, mime_type=self.mime_type, data=base64.b64decode(self.data))


class ToolCallDTO(BaseModel):
    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    arguments: Dict[str, Any] = Field(default_factory=dict)


class MessageDTO(BaseModel):
    """A chat message.

    Rules:
        - ``tool`` messages must carry ``tool_call_id``.
        - ``user`` and ``system`` messages need text or at least one file.
    """

    role: Role
    text: str = ""
    files: List[FileDTO] = Field(default_factory=list)
    tool_call_id: Optional[str] = None
    tool_calls: List[ToolCallDTO] = Field(default_factory=list)

    @model_validator(mode="after")
    def _validate_content(self) -> "MessageDTO":
        if self.role == "tool" and not self.tool_call_id:
            raise ValueError("tool messages require tool_call_id")
        if self.role in ("user", "system") and not self.text.strip() and not self.files:
            raise ValueError(f"{self.role} message must include text or files")
        return self


class ToolSpecDTO(BaseModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    parameters: Dict[str, Any] = Field(default_factory=lambda: {"type": "object", "properties": {}})


class ChatInputDTO(BaseModel):
    """Validated chat input.

    Parameters:
        messages: Non-empty ordered conversation.
        tools: Optional tool specifications.
        json_schema: Optional ``json_schema`` response format body; must
            contain ``name`` and ``schema``.
    """

    messages: List[MessageDTO] = Field(..., min_length=1)
    tools: List[ToolSpecDTO] = Field(default_factory=list)
    json_schema: Optional[Dict[str, Any]] = None

    @model_validator(mode="after")
    def _validate_schema(self) -> "ChatInputDTO":
        if self.json_schema is not None and not {"name", "schema"} <= set(self.json_schema):
            raise ValueError("json_schema requires 'name' and 'schema'")
        return self

    def to_chat_input(self) -> ChatInput:
        """Convert to the dataclass input consumed by the adapter."""
        tools = [ToolFunction(name=t.name, description=t.description, parameters=t.parameters) for t in self.tools]
        by_name = {t.name: t for t in tools}
        messages = [
            ChatMessage(
                role=m.role,
                text=m.text,
                files=[f.to_file() for f in m.files],
                tool_call_id=m.tool_call_id,
                tool_calls=[
                    ToolCall(id=c.id, name=c.name, arguments=c.arguments, function=by_name.get(c.name))
                    for c in m.tool_calls
                ],
            )
            for m in self.messages
        ]
        return ChatInput(messages=messages, tools=tools, json_schema=self.json_schema)


__all__ = [
    "Role",
    "FileDTO",
    "ToolCallDTO",
    "MessageDTO",
    "ToolSpecDTO",
    "ChatInputDTO",
]
