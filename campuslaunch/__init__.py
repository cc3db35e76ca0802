"""
campuslaunch: launcher for the campus client/server pair
Resolves CLI flags into the executables' environment contract and execs them
"""

import subprocess
from importlib import metadata
from pathlib import Path

_FALLBACK_RELEASE = "1.0.0"


def _release_get() -> str:
    """Installed distribution version, or the source-tree release"""
    try:
        return metadata.version("campuslaunch")
    except metadata.PackageNotFoundError:
        return _FALLBACK_RELEASE


def _gitRevision_get() -> str:
    """Abbreviated commit of a source checkout, 'dev' elsewhere"""
    checkout = Path(__file__).resolve().parent.parent
    if not (checkout / ".git").exists():
        return "dev"
    try:
        completed = subprocess.run(
            ["git", "rev-parse", "--short=7", "HEAD"],
            cwd=checkout,
            capture_output=True,
            text=True,
            timeout=1,
        )
    except (OSError, subprocess.SubprocessError):
        return "dev"
    return completed.stdout.strip() if completed.returncode == 0 else "dev"


__version__ = f"{_release_get()}+{_gitRevision_get()}"
__author__ = "campuslaunch contributors"
