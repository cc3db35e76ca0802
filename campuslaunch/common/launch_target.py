"""
Launch target resolution and dispatch.

Resolution is pure apart from filesystem probing and returns a
`LaunchAction`; `launchAction_dispatch` is the only place that replaces the
launcher process.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Callable, Mapping, NoReturn

from campuslaunch.common.errors import LaunchTargetNotFound
from campuslaunch.common.settings import settings
from campuslaunch.common.types import LaunchAction, Role, RunBuildFallback, RunExecutable

logger = logging.getLogger(__name__)

__all__ = [
    "executableName_get",
    "candidates_list",
    "candidate_isExecutable",
    "executable_find",
    "buildFallback_create",
    "launchTarget_resolve",
    "launchAction_dispatch",
]


def executableName_get(binary: str, host_os: str | None = None) -> str:
    """
    Host-specific executable file name.

    Args:
        binary: Binary base name.
        host_os: `os.name` override (default: current host).

    Returns:
        Name with `.exe` appended on Windows hosts.
    """
    if (host_os or os.name) == "nt" and not binary.lower().endswith(".exe"):
        return f"{binary}.exe"
    return binary


def candidates_list(project_dir: Path, binary: str) -> list[Path]:
    """
    Ordered candidate paths for the executable.

    Args:
        project_dir: Directory containing the launcher.
        binary: Binary base name.

    Returns:
        `[<dir>/<binary>, <dir>/target/release/<binary>]`.
    """
    name: str = executableName_get(binary)
    return [
        project_dir / name,
        project_dir.joinpath(*settings.RELEASE_DIR_PARTS) / name,
    ]


def candidate_isExecutable(path: Path) -> bool:
    """Check that path exists, is a file, and is executable"""
    return path.is_file() and os.access(path, os.X_OK)


def executable_find(candidates: list[Path]) -> Path:
    """
    Return the first executable candidate.

    Args:
        candidates: Ordered candidate paths.

    Returns:
        First matching path.

    Raises:
        LaunchTargetNotFound: When no candidate is executable.
    """
    for candidate in candidates:
        if candidate_isExecutable(candidate):
            return candidate
    raise LaunchTargetNotFound([str(candidate) for candidate in candidates])


def buildFallback_create(role: Role, server_binary: str = "server") -> RunBuildFallback:
    """
    Build-and-run fallback command for a role.

    The client runs the package's default binary; the server selects its
    binary explicitly.

    Args:
        role: Launcher role.
        server_binary: Cargo binary target name for the server.

    Returns:
        RunBuildFallback action.
    """
    argv: tuple[str, ...] = settings.BUILD_COMMAND
    if role is Role.SERVER:
        argv = argv + ("--bin", server_binary)
    return RunBuildFallback(argv=argv)


def launchTarget_resolve(
    role: Role,
    project_dir: Path,
    client_binary: str = "bevy-online-campus",
    server_binary: str = "server",
) -> LaunchAction:
    """
    Choose what to run in place of the launcher.

    Args:
        role: Launcher role.
        project_dir: Directory containing the launcher.
        client_binary: Client executable base name.
        server_binary: Server executable base name.

    Returns:
        RunExecutable for the first matching candidate, otherwise the
        role's RunBuildFallback.
    """
    binary: str = server_binary if role is Role.SERVER else client_binary
    try:
        executable: Path = executable_find(candidates_list(project_dir, binary))
    except LaunchTargetNotFound as e:
        fallback: RunBuildFallback = buildFallback_create(role, server_binary)
        # Reaches stderr regardless of the launcher log level
        print(f"{e}. Falling back to {' '.join(fallback.argv)}", file=sys.stderr)
        logger.debug(f"fallback selected for {role.value}")
        return fallback
    return RunExecutable(path=str(executable.resolve()))


def launchAction_dispatch(
    action: LaunchAction,
    environment: Mapping[str, str],
    execve: Callable[..., NoReturn] = os.execve,
    execvpe: Callable[..., NoReturn] = os.execvpe,
) -> NoReturn:
    """
    Replace the current process with the selected launch target.

    Args:
        action: Resolved launch action.
        environment: Complete child environment.
        execve: Exec primitive for absolute paths (injectable for tests).
        execvpe: PATH-searching exec primitive (injectable for tests).

    Raises:
        OSError: When the process could not be replaced.
    """
    env: dict[str, str] = dict(environment)
    if isinstance(action, RunExecutable):
        logger.debug(f"exec {action.path}")
        execve(action.path, [action.path], env)
    else:
        logger.debug(f"exec {' '.join(action.argv)}")
        execvpe(action.argv[0], list(action.argv), env)
    raise OSError(f"exec returned unexpectedly for {action}")
