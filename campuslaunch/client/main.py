"""campuslaunch client launcher entry point"""

import sys
from typing import NoReturn, Optional, Sequence

from campuslaunch.client.client_cli import partialOptions_parse
from campuslaunch.common.bootstrap import launcher_run
from campuslaunch.common.types import Role


def client_run(argv: Optional[Sequence[str]] = None) -> int:
    """
    Resolve client options and replace this process with the client

    Args:
        argv: Arguments without program name (default: sys.argv[1:])

    Returns:
        Exit code when launching stops before process replacement
    """
    return launcher_run(Role.CLIENT, partialOptions_parse, argv)


def main() -> NoReturn:
    """Console entry point for campuslaunch-client"""
    try:
        sys.exit(client_run())
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    main()
