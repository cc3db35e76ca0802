"""
Client launcher CLI parsing.

This module contains only the client flag schema; defaults are applied later
by the default merger so that "not supplied" stays distinguishable.
"""

from __future__ import annotations

import argparse
from typing import Sequence

from campuslaunch.common.option_parser import (
    LauncherArgumentParser,
    commonArgs_populate,
    partialOptions_build,
    port_parse,
    secureArgs_populate,
)
from campuslaunch.common.types import PartialOptions, Role

__all__ = ["parser_create", "arguments_parse", "partialOptions_parse"]


def parser_create() -> LauncherArgumentParser:
    """
    Create fully populated client argument parser.

    Returns:
        Configured argument parser.
    """
    parser: LauncherArgumentParser = LauncherArgumentParser(
        prog="campuslaunch-client",
        description="Launch the campus client with a resolved runtime environment",
    )
    parser.add_argument(
        "-s",
        "--server",
        type=str,
        default=None,
        metavar="HOST:PORT",
        help="Server address (default: 127.0.0.1:5000)",
    )
    parser.add_argument(
        "--low-gfx",
        action="store_true",
        default=None,
        dest="low_graphics",
        help="Disable HDR/shadows",
    )
    parser.add_argument(
        "--no-vsync",
        action="store_true",
        default=None,
        dest="vsync_disabled",
        help="Disable VSync",
    )
    parser.add_argument(
        "--client-port",
        type=port_parse,
        default=None,
        dest="client_port",
        metavar="N",
        help="Local UDP port to bind (default: OS assigns)",
    )
    commonArgs_populate(parser)
    secureArgs_populate(parser)
    return parser


def arguments_parse(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """
    Parse client command-line arguments.

    Args:
        argv: Argument list without the program name (default: sys.argv[1:]).

    Returns:
        Parsed client CLI namespace.

    Raises:
        UsageError: On unknown flags or missing/invalid values.
    """
    return parser_create().parse_args(argv)


def partialOptions_parse(argv: Sequence[str] | None = None) -> tuple[PartialOptions, argparse.Namespace]:
    """
    Parse client arguments into a partial options record.

    Args:
        argv: Argument list without the program name.

    Returns:
        Tuple of `(partial_options, namespace)`; the namespace carries the
        launcher-only flags (`config`, `dry_run`, `verify_key`).
    """
    args: argparse.Namespace = arguments_parse(argv)
    return partialOptions_build(Role.CLIENT, args), args
