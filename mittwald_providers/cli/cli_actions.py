"""CLI action handlers.

Each handler takes the parsed arguments and a provider instance and returns a
process exit code. Output goes to stdout; errors are reported as JSON on
stderr with a non-zero exit code.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Callable, Dict, Optional, TextIO, Union

from ..base.dto import ChatInputDTO
from ..base.errors import ProviderError
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.models import ChatInput, ChatOutput
from ..base.streaming import StreamedChatOutput
from ..mittwald import MittwaldProvider

ProviderFactory = Callable[[Dict[str, Any]], MittwaldProvider]

_logger = get_logger("cli")


def default_provider_factory(overrides: Dict[str, Any]) -> MittwaldProvider:
    from .. import create

    return create(**overrides)


def connection_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """Collect configuration overrides from common connection flags."""
    out: Dict[str, Any] = {}
    if getattr(args, "host", None):
        out["host"] = args.host
    if getattr(args, "api_key_name", None):
        out["api_key"] = args.api_key_name
    if getattr(args, "system", None):
        out["system_message"] = args.system
    return out


def _report_error(exc: Exception, command: str, stderr: TextIO) -> int:
    payload: Dict[str, Any] = {"command": command, "error": str(exc), "type": type(exc).__name__}
    if isinstance(exc, ProviderError):
        payload["code"] = exc.code.value
    normalized_log_event(
        _logger,
        "cli.error",
        LogContext(operation=command),
        phase="error",
        error_code=payload.get("code"),
        emitted=False,
        error=str(exc),
    )
    stderr.write(json.dumps(payload) + "\n")
    return 1


def handle_models(args: argparse.Namespace, provider: MittwaldProvider, stdout: TextIO = sys.stdout) -> int:
    try:
        models = provider.get_configured_models(args.operation, args.capabilities)
    except Exception as exc:
        return _report_error(exc, "models", sys.stderr)
    if args.json:
        stdout.write(json.dumps(models) + "\n")
    else:
        for model_id in models:
            stdout.write(model_id + "\n")
    return 0


def handle_setup(args: argparse.Namespace, provider: MittwaldProvider, stdout: TextIO = sys.stdout) -> int:
    problem = provider.validate_credentials()
    if problem:
        sys.stderr.write(problem + "\n")
        return 1
    try:
        warning = provider.post_setup()
    except Exception as exc:
        return _report_error(exc, "setup", sys.stderr)
    result = dict(provider.get_setup_data())
    result["rate_limit_warning"] = warning
    stdout.write(json.dumps(result, indent=2) + "\n")
    return 0


def _write_output(output: ChatOutput, as_json: bool, stdout: TextIO) -> None:
    if as_json:
        stdout.write(json.dumps(output.to_dict()) + "\n")
    else:
        stdout.write(output.message.text + "\n")


def load_chat_input(path: str) -> ChatInput:
    """Read a JSON chat input file and validate it with :class:`ChatInputDTO`.

    Raises:
        OSError: When the file cannot be read.
        ValueError: For invalid JSON or input that fails validation
            (``pydantic.ValidationError`` is a ``ValueError``).
    """
    with open(path, "r", encoding="utf-8") as fh:
        data = json.load(fh)
    return ChatInputDTO.model_validate(data).to_chat_input()


def handle_chat(args: argparse.Namespace, provider: MittwaldProvider, stdout: TextIO = sys.stdout) -> int:
    try:
        chat_input: Union[ChatInput, str] = load_chat_input(args.input_file) if args.input_file else args.prompt
        result = provider.chat(chat_input, args.model, {"stream": bool(args.stream)})
        if isinstance(result, StreamedChatOutput):
            if args.json:
                output = result.reconstruct_output()
            else:
                for chunk in result:
                    if chunk.content:
                        stdout.write(chunk.content)
                        stdout.flush()
                stdout.write("\n")
                return 0
        else:
            output = result
    except Exception as exc:
        return _report_error(exc, "chat", sys.stderr)
    _write_output(output, args.json, stdout)
    return 0


HANDLERS: Dict[str, Callable[..., int]] = {
    "models": handle_models,
    "setup": handle_setup,
    "chat": handle_chat,
}


def dispatch(
    args: argparse.Namespace,
    provider_factory: Optional[ProviderFactory] = None,
    stdout: TextIO = sys.stdout,
) -> int:
    """Build the provider for ``args`` and run the selected handler."""
    handler = HANDLERS[args.cmd]
    factory = provider_factory or default_provider_factory
    provider = factory(connection_overrides(args))
    return handler(args, provider, stdout)


__all__ = [
    "HANDLERS",
    "connection_overrides",
    "default_provider_factory",
    "dispatch",
    "handle_chat",
    "handle_models",
    "handle_setup",
    "load_chat_input",
]
