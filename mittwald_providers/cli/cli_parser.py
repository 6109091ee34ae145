"""CLI parser construction for mittwald-cli.

This module wires subparsers but contains no execution logic. Subcommand
handlers live in ``cli_actions``.
"""

from __future__ import annotations

import argparse
from typing import Optional

from ..base.models import ModelCapability, OperationType
from ..config.defaults import CLI_DEFAULT_PROMPT, DEFAULT_CHAT_MODEL


def _str2bool(v: Optional[str]) -> bool:
    """Best-effort conversion of common truthy/falsey strings to bool.

    ``None`` (flag given without a value) means ``True``.
    """
    if v is None:
        return True
    val = v.strip().lower()
    if val in {"1", "t", "true", "y", "yes", "on"}:
        return True
    return False if val in {"0", "f", "false", "n", "no", "off"} else bool(val)


def add_stream_flags(parser: argparse.ArgumentParser) -> None:
    """Attach ``--stream``/``--no-stream`` flags to a parser.

    ``--stream`` accepts an optional boolean (``--stream``, ``--stream false``);
    ``--no-stream`` is an explicit negation alias.
    """
    grp = parser.add_mutually_exclusive_group()
    grp.add_argument("--stream", nargs="?", const=True, type=_str2bool, default=False)
    grp.add_argument("--no-stream", dest="stream", action="store_false")


def _add_connection_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--host", default=None, help="Endpoint override (default: mittwald AI hosting)")
    parser.add_argument(
        "--api-key-name",
        dest="api_key_name",
        default=None,
        help="Credential identifier; the secret is read from the upper-cased environment variable",
    )


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level CLI parser with ``models``, ``setup`` and ``chat``.

    No I/O or network calls occur here.
    """
    p = argparse.ArgumentParser(prog="mittwald-cli", description="mittwald AI hosting provider CLI")
    p.add_argument(
        "--log-level",
        dest="log_level",
        type=str.lower,
        default=None,
        choices=["debug", "info", "warning", "error", "critical"],
        help="Level of the JSON log on stderr (default: MITTWALD_LOG_LEVEL or info)",
    )
    sub = p.add_subparsers(dest="cmd")

    p_models = sub.add_parser("models", help="List models usable for an operation type")
    _add_connection_flags(p_models)
    p_models.add_argument("--operation", default=OperationType.CHAT.value, choices=[o.value for o in OperationType])
    p_models.add_argument(
        "--capability",
        dest="capabilities",
        action="append",
        default=[],
        choices=[c.value for c in ModelCapability],
    )
    p_models.add_argument("--json", action="store_true")

    p_setup = sub.add_parser("setup", help="Validate the credential, probe rate limits, print default models")
    _add_connection_flags(p_setup)

    p_chat = sub.add_parser("chat", help="Send one prompt")
    _add_connection_flags(p_chat)
    p_chat.add_argument("--model", default=DEFAULT_CHAT_MODEL)
    p_chat.add_argument("--prompt", default=CLI_DEFAULT_PROMPT)
    p_chat.add_argument(
        "--input-file",
        dest="input_file",
        default=None,
        help="JSON chat input (messages, tools, json_schema); replaces --prompt",
    )
    p_chat.add_argument("--system", default=None, help="System role text")
    add_stream_flags(p_chat)
    p_chat.add_argument("--json", action="store_true")

    return p


__all__ = ["build_parser", "add_stream_flags", "_str2bool"]
