"""campuslaunch unified command-line interface"""

import argparse
import sys
from typing import NoReturn, Optional, Sequence

from campuslaunch import __version__
from campuslaunch.common.errors import UsageError
from campuslaunch.common.option_parser import LauncherArgumentParser
from campuslaunch.common.types import Role


def arguments_parse(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parse role selection, leaving role flags for the role parser

    Args:
        argv: Arguments without program name (default: sys.argv[1:])

    Returns:
        Namespace with `role` and the remaining `args`
    """
    parser = LauncherArgumentParser(
        prog="campuslaunch",
        description="Launch the campus client or server with a resolved runtime environment",
    )
    parser.add_argument("--version", action="version", version=f"campuslaunch {__version__}")
    parser.add_argument(
        "role",
        choices=[role.value for role in Role],
        help="Which executable to launch",
    )
    parser.add_argument(
        "args",
        nargs=argparse.REMAINDER,
        help="Role flags (see `campuslaunch client --help`)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> NoReturn:
    """Main entry point for unified campuslaunch command"""
    try:
        args = arguments_parse(argv)
    except UsageError as e:
        print(f"Error: {e}", file=sys.stderr)
        if e.usage:
            print(e.usage, file=sys.stderr)
        sys.exit(e.exit_code)

    try:
        if Role(args.role) is Role.SERVER:
            from campuslaunch.server.main import server_run

            sys.exit(server_run(args.args))

        from campuslaunch.client.main import client_run

        sys.exit(client_run(args.args))

    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    main()
