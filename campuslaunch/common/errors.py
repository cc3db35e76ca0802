"""Launcher exception hierarchy and the exit codes they map to"""

from __future__ import annotations

EXIT_OK: int = 0
EXIT_USAGE: int = 1
EXIT_MISSING_CREDENTIAL: int = 2


class LaunchError(Exception):
    """Base class for failures that terminate a launcher invocation"""

    exit_code: int = EXIT_USAGE


class UsageError(LaunchError):
    """Malformed invocation: unknown flag, missing value, bad value"""

    exit_code = EXIT_USAGE

    def __init__(self, message: str, usage: str | None = None) -> None:
        self.usage: str | None = usage
        super().__init__(message)


class MissingCredentialError(LaunchError):
    """Secure mode requested without any key material source"""

    exit_code = EXIT_MISSING_CREDENTIAL


class KeyMaterialError(LaunchError):
    """Key material failed eager validation (`--verify-key`)"""

    exit_code = EXIT_USAGE


class LaunchTargetNotFound(LaunchError):
    """No prebuilt executable candidate matched; triggers the build fallback"""

    def __init__(self, candidates: list[str]) -> None:
        self.candidates: list[str] = candidates
        super().__init__(f"Executable not found (searched: {', '.join(candidates)})")
