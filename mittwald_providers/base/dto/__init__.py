"""DTO validation package."""

from .adapter_params import AdapterParams
from .chat import ChatInputDTO, FileDTO, MessageDTO, Role, ToolCallDTO, ToolSpecDTO

__all__ = [
    "AdapterParams",
    "ChatInputDTO",
    "FileDTO",
    "MessageDTO",
    "Role",
    "ToolCallDTO",
    "ToolSpecDTO",
]
