"""
Launcher logging policy.

This module centralizes launcher logging setup and campuslaunch version
injection into log message formats. It configures the launcher's own
diagnostics only; the executable's verbosity travels through RUST_LOG.
"""

from __future__ import annotations

import logging

from campuslaunch import __version__

__all__ = ["logging_setup", "logFormatWithVersion_get"]


def logging_setup(level: str, log_format: str, log_file: str | None) -> None:
    """
    Configure logging handlers and version-tagged format string.

    Args:
        level:
            Log level name (for example `INFO` or `DEBUG`).
        log_format:
            Base formatter string.
        log_file:
            Optional log file path.
    """
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=logFormatWithVersion_get(log_format),
        handlers=handlers,
    )


def logFormatWithVersion_get(log_format: str) -> str:
    """
    Inject runtime version tag into timestamped log format.

    Args:
        log_format:
            Base formatter string.

    Returns:
        Formatter string with embedded version token.
    """
    return log_format.replace("%(asctime)s", f"%(asctime)s [v{__version__}]")
