"""Request payload construction for the mittwald endpoint.

:class:`PayloadBuilder` turns operation-agnostic input into the
OpenAI-compatible payload the vendor expects. It performs no I/O and returns
a fresh dictionary per call.

Chat payload rules
------------------
- Base options (adapter configuration, then per-call options) are merged
  first; ``model`` and ``messages`` always win over them.
- A configured system role is prepended as a ``system`` message, or as a
  ``user`` message for o1/o3-style models, which reject the system role.
- Every message carries a list of content blocks: one ``text`` block, then
  images as ``image_url`` data URLs and PDFs as ``file`` blocks.
- Reasoning models (``gpt-oss-*``) get ``reasoning_effort``; other models
  never carry it.
- Tools are sent with ``function.strict = False``.
- Streaming adds ``stream_options.include_usage = True`` so the final chunk
  reports usage.
"""

from __future__ import annotations

import copy
import re
from typing import Any, Dict, List, Mapping, Optional, Union

from ..base.errors import NotImplementedOperationError
from ..base.models import ChatInput, ChatMessage, EmbeddingsInput, OperationType
from ..config.defaults import (
    DEFAULT_EMBEDDINGS_MODEL,
    DEFAULT_REASONING_EFFORT,
    PROVIDER_NAME,
    REASONING_EFFORT_VALUES,
)

REASONING_MODEL_PREFIX = "gpt-oss-"
SYSTEM_AS_USER_PATTERN = re.compile(r"(o1|o3)", re.IGNORECASE)
# Options the named embedding model rejects even when configured globally.
EMBEDDINGS_STRIPPED_OPTIONS: Dict[str, tuple] = {DEFAULT_EMBEDDINGS_MODEL: ("dimensions",)}
# Control keys consumed by the adapter; never forwarded to the vendor.
_CONTROL_OPTIONS = ("stream",)

REASONING_EFFORT_SETTING: Dict[str, Any] = {
    "type": "select",
    "label": "Reasoning Effort",
    "description": "Constrains effort on reasoning for reasoning models.",
    "default": DEFAULT_REASONING_EFFORT,
    "constraints": {"options": list(REASONING_EFFORT_VALUES)},
}


def is_reasoning_model(model_id: str) -> bool:
    """Return True for models exposing a reasoning effort control."""
    return model_id.lower().startswith(REASONING_MODEL_PREFIX)


def system_role_for(model_id: str) -> str:
    """Return the role a configured system prompt is sent with for ``model_id``."""
    return "user" if SYSTEM_AS_USER_PATTERN.search(model_id) else "system"


def render_message(message: ChatMessage) -> Dict[str, Any]:
    """Render one :class:`ChatMessage` as a vendor message."""
    content: List[Dict[str, Any]] = [{"type": "text", "text": message.text}]
    for file in message.files:
        if file.is_image:
            content.append({"type": "image_url", "image_url": {"url": file.as_base64_data_url()}})
        elif file.is_pdf:
            content.append(
                {
                    "type": "file",
                    "file": {"filename": file.filename, "file_data": file.as_base64_data_url()},
                }
            )
    rendered: Dict[str, Any] = {"role": message.role, "content": content}
    if message.tool_call_id:
        rendered["tool_call_id"] = message.tool_call_id
    if message.tool_calls:
        rendered["tool_calls"] = [call.render() for call in message.tool_calls]
    return rendered


class PayloadBuilder:
    """Build vendor payloads for chat and embeddings calls.

    Args:
        base_options: Options merged into every payload (configuration level).
        system_role: Optional system prompt prepended to chat conversations.
    """

    def __init__(self, base_options: Optional[Mapping[str, Any]] = None, system_role: Optional[str] = None) -> None:
        self.base_options: Dict[str, Any] = dict(base_options or {})
        self.system_role = system_role

    def build(
        self,
        operation_type: Union[OperationType, str],
        model_id: str,
        input: Any,
        options: Optional[Mapping[str, Any]] = None,
        *,
        stream: bool = False,
    ) -> Dict[str, Any]:
        """Return the payload for one call.

        Raises:
            NotImplementedOperationError: For operation types without a
                payload mapping.
            ValueError: For an unknown operation type or an invalid
                ``reasoning_effort``.
        """
        op = OperationType(operation_type)
        if op is OperationType.CHAT:
            return self.build_chat(model_id, input, options, stream=stream)
        if op is OperationType.EMBEDDINGS:
            return self.build_embeddings(model_id, input, options)
        raise NotImplementedOperationError(
            message=f"{op.value} is not implemented", provider=PROVIDER_NAME, model=model_id
        )

    def _merged_options(self, options: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        merged = copy.deepcopy(self.base_options)
        merged.update(copy.deepcopy(dict(options or {})))
        for key in _CONTROL_OPTIONS:
            merged.pop(key, None)
        return merged

    def build_messages(self, model_id: str, input: Union[ChatInput, str]) -> List[Dict[str, Any]]:
        """Render the conversation, including the configured system role."""
        if isinstance(input, str):
            input = ChatInput(messages=[ChatMessage(role="user", text=input)])
        messages: List[Dict[str, Any]] = []
        if self.system_role:
            messages.append({"role": system_role_for(model_id), "content": self.system_role})
        messages.extend(render_message(m) for m in input.messages)
        return messages

    def build_chat(
        self,
        model_id: str,
        input: Union[ChatInput, str],
        options: Optional[Mapping[str, Any]] = None,
        *,
        stream: bool = False,
    ) -> Dict[str, Any]:
        payload = self._merged_options(options)
        effort = payload.pop("reasoning_effort", None)
        if is_reasoning_model(model_id):
            effort = effort or DEFAULT_REASONING_EFFORT
            if effort not in REASONING_EFFORT_VALUES:
                raise ValueError(
                    f"reasoning_effort must be one of {', '.join(REASONING_EFFORT_VALUES)}; got {effort!r}"
                )
            payload["reasoning_effort"] = effort

        payload["model"] = model_id
        payload["messages"] = self.build_messages(model_id, input)

        if isinstance(input, ChatInput):
            if input.tools:
                tools = [tool.render() for tool in input.tools]
                for tool in tools:
                    tool["function"]["strict"] = False
                payload["tools"] = tools
            if input.json_schema:
                payload["response_format"] = {"type": "json_schema", "json_schema": copy.deepcopy(input.json_schema)}

        if stream:
            stream_options = dict(payload.get("stream_options") or {})
            stream_options["include_usage"] = True
            payload["stream_options"] = stream_options
        else:
            payload.pop("stream_options", None)
        return payload

    def build_embeddings(
        self,
        model_id: str,
        input: Union[EmbeddingsInput, str],
        options: Optional[Mapping[str, Any]] = None,
    ) -> Dict[str, Any]:
        payload = self._merged_options(options)
        for key in EMBEDDINGS_STRIPPED_OPTIONS.get(model_id, ()):
            payload.pop(key, None)
        payload.pop("reasoning_effort", None)
        payload["model"] = model_id
        payload["input"] = input.prompt if isinstance(input, EmbeddingsInput) else str(input)
        return payload

    @staticmethod
    def get_model_settings(model_id: str, general_config: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """Return the per-model settings definition shown to hosts.

        Reasoning models gain a ``reasoning_effort`` select; the settings the
        embeddings payload strips for a model are removed here as well.
        """
        settings = copy.deepcopy(dict(general_config or {}))
        for key in EMBEDDINGS_STRIPPED_OPTIONS.get(model_id, ()):
            settings.pop(key, None)
        if is_reasoning_model(model_id):
            settings["reasoning_effort"] = copy.deepcopy(REASONING_EFFORT_SETTING)
        return settings


__all__ = [
    "PayloadBuilder",
    "REASONING_EFFORT_SETTING",
    "is_reasoning_model",
    "render_message",
    "system_role_for",
]
