"""campuslaunch server launcher entry point"""

import sys
from typing import NoReturn, Optional, Sequence

from campuslaunch.common.bootstrap import launcher_run
from campuslaunch.common.types import Role
from campuslaunch.server.server_cli import partialOptions_parse


def server_run(argv: Optional[Sequence[str]] = None) -> int:
    """
    Resolve server options and replace this process with the server

    Args:
        argv: Arguments without program name (default: sys.argv[1:])

    Returns:
        Exit code when launching stops before process replacement
    """
    return launcher_run(Role.SERVER, partialOptions_parse, argv)


def main() -> NoReturn:
    """Console entry point for campuslaunch-server"""
    try:
        sys.exit(server_run())
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    main()
