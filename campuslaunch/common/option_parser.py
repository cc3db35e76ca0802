"""
Shared argument-parser construction for both launcher roles.

This module owns the parser subclass that turns argparse failures into
`UsageError` and the flag groups common to the client and server launchers.
"""

from __future__ import annotations

import argparse
from typing import NoReturn

from campuslaunch import __version__
from campuslaunch.common.errors import UsageError
from campuslaunch.common.types import PartialOptions, Role

__all__ = [
    "LauncherArgumentParser",
    "commonArgs_populate",
    "secureArgs_populate",
    "port_parse",
    "partialOptions_build",
]


class LauncherArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises `UsageError` instead of exiting with status 2"""

    def __init__(self, *args, **kwargs) -> None:
        kwargs.setdefault("allow_abbrev", False)
        super().__init__(*args, **kwargs)

    def error(self, message: str) -> NoReturn:
        """
        Report a malformed invocation.

        Args:
            message: argparse diagnostic text.

        Raises:
            UsageError: Always, carrying the full help text for display.
        """
        raise UsageError(message, usage=self.format_help())


def port_parse(value: str) -> int:
    """
    Parse a UDP port argument.

    Args:
        value: Raw argument text.

    Returns:
        Port number in the range 0-65535.

    Raises:
        argparse.ArgumentTypeError: When the value is not a valid port.
    """
    try:
        port: int = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid port number: {value!r}") from exc
    if not 0 <= port <= 65535:
        raise argparse.ArgumentTypeError(f"port out of range: {port}")
    return port


def commonArgs_populate(parser: argparse.ArgumentParser) -> None:
    """
    Populate flags shared by both roles.

    Args:
        parser: Target argument parser.
    """
    parser.add_argument("--version", action="version", version=f"campuslaunch {__version__}")
    parser.add_argument(
        "-l",
        "--log",
        type=str,
        default=None,
        dest="log_level",
        metavar="LOG",
        help="RUST_LOG level (default: warn)",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to launcher config file (default: search standard locations)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Resolve environment and launch target, print them, and exit",
    )


def secureArgs_populate(parser: argparse.ArgumentParser) -> None:
    """
    Populate authenticated-transport flags.

    Args:
        parser: Target argument parser.
    """
    parser.add_argument(
        "--secure",
        action="store_true",
        default=None,
        dest="secure_mode",
        help="Enable Secure auth (requires --key or --key-file)",
    )
    parser.add_argument(
        "--key",
        type=str,
        default=None,
        metavar="HEX",
        help="64-hex shared key (with or without 0x)",
    )
    parser.add_argument(
        "--key-file",
        type=str,
        default=None,
        dest="key_file",
        metavar="PATH",
        help="Path to key file (32B binary or HEX string)",
    )
    parser.add_argument(
        "--verify-key",
        action="store_true",
        dest="verify_key",
        help="Check key material format before launching (secure mode only)",
    )


def partialOptions_build(role: Role, args: argparse.Namespace) -> PartialOptions:
    """
    Convert a parsed namespace into a role-tagged partial options record.

    Args:
        role: Launcher role.
        args: Parsed CLI namespace.

    Returns:
        PartialOptions with `None` for every flag not supplied.
    """
    return PartialOptions(
        role=role,
        server_address=getattr(args, "server", None),
        address=getattr(args, "address", None),
        port=getattr(args, "port", None),
        log_level=args.log_level,
        low_graphics=getattr(args, "low_graphics", None),
        vsync_disabled=getattr(args, "vsync_disabled", None),
        client_local_port=getattr(args, "client_port", None),
        secure_mode=args.secure_mode,
        key=args.key,
        key_file=args.key_file,
    )
