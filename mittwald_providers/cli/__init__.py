"""mittwald provider CLI (package entrypoint).

Argument parsing lives in ``cli_parser`` and subcommand handlers in
``cli_actions``; this module only wires them together.
"""

from __future__ import annotations

import sys
from typing import List, Optional, TextIO

from ..base.logging import configure_logger
from .cli_actions import ProviderFactory, dispatch
from .cli_parser import build_parser


def main(
    argv: Optional[List[str]] = None,
    *,
    provider_factory: Optional[ProviderFactory] = None,
    stdout: TextIO = sys.stdout,
) -> int:
    """CLI entrypoint.

    Parameters
    ----------
    argv: Optional[list[str]]
        Argument vector; when ``None`` uses ``sys.argv[1:]``.
    provider_factory:
        Builds the provider from configuration overrides; tests inject fakes.

    Returns
    -------
    int
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.cmd:
        parser.print_help()
        return 2
    if args.log_level:
        configure_logger(args.log_level)
    return dispatch(args, provider_factory, stdout)


__all__ = ["main"]
