"""
Server launcher CLI parsing.

The server accepts address and port separately; they are joined into the
`host:port` network address by the default merger.
"""

from __future__ import annotations

import argparse
from typing import Sequence

from campuslaunch.common.option_parser import (
    LauncherArgumentParser,
    commonArgs_populate,
    partialOptions_build,
    secureArgs_populate,
)
from campuslaunch.common.types import PartialOptions, Role

__all__ = ["parser_create", "arguments_parse", "partialOptions_parse", "bindArgs_populate"]


def parser_create() -> LauncherArgumentParser:
    """
    Create fully populated server argument parser.

    Returns:
        Configured argument parser.
    """
    parser: LauncherArgumentParser = LauncherArgumentParser(
        prog="campuslaunch-server",
        description="Launch the campus server with a resolved runtime environment",
        epilog=(
            "Environment defaults set by launcher (override by exporting them): "
            "WGPU_BACKEND=vk, WGPU_ALLOW_SOFTWARE=1"
        ),
    )
    bindArgs_populate(parser)
    commonArgs_populate(parser)
    secureArgs_populate(parser)
    return parser


def bindArgs_populate(parser: argparse.ArgumentParser) -> None:
    """
    Populate bind/advertise address arguments.

    Args:
        parser: Target argument parser.
    """
    parser.add_argument(
        "-a",
        "--address",
        type=str,
        default=None,
        help="Bind/advertise address (default: 0.0.0.0)",
    )
    # Kept as text: the executable owns address/port validation
    parser.add_argument(
        "-p",
        "--port",
        type=str,
        default=None,
        help="UDP port (default: 5000)",
    )


def arguments_parse(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """
    Parse server command-line arguments.

    Args:
        argv: Argument list without the program name (default: sys.argv[1:]).

    Returns:
        Parsed argparse namespace for server launch.

    Raises:
        UsageError: On unknown flags or missing values.
    """
    return parser_create().parse_args(argv)


def partialOptions_parse(argv: Sequence[str] | None = None) -> tuple[PartialOptions, argparse.Namespace]:
    """
    Parse server arguments into a partial options record.

    Args:
        argv: Argument list without the program name.

    Returns:
        Tuple of `(partial_options, namespace)`.
    """
    args: argparse.Namespace = arguments_parse(argv)
    return partialOptions_build(Role.SERVER, args), args
