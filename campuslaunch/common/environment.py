"""Materialization of launch options into the executable's environment contract"""

from __future__ import annotations

from typing import Mapping

from campuslaunch.common.settings import settings
from campuslaunch.common.types import (
    EnvironmentPlan,
    InlineHex,
    KeyFilePath,
    LaunchOptions,
    Role,
)

__all__ = ["environment_materialize", "assignmentValue_display", "environmentSummary_format"]


def environment_materialize(
    options: LaunchOptions,
    inherited: Mapping[str, str],
    wgpu_backend: str = "vk",
    wgpu_allow_software: str = "1",
) -> EnvironmentPlan:
    """
    Map resolved options to environment assignments and removals.

    Unset options become removals so the executable's own defaults apply.
    `inherited` is only consulted for the server's WGPU hints, which the
    caller's environment may override.

    Args:
        options: Resolved launch options.
        inherited: Launcher's environment.
        wgpu_backend: Default graphics backend hint (server only).
        wgpu_allow_software: Default software-adapter hint (server only).

    Returns:
        EnvironmentPlan for the child process.
    """
    assignments: dict[str, str] = {
        settings.ENV_SERVER_ADDR: options.network_address,
        settings.ENV_LOG: options.log_level,
    }
    removals: list[str] = []

    def _toggle(name: str, enabled: bool) -> None:
        if enabled:
            assignments[name] = settings.FLAG_ON
        else:
            removals.append(name)

    if options.role is Role.CLIENT:
        _toggle(settings.ENV_LOW_GFX, options.low_graphics)
        _toggle(settings.ENV_NO_VSYNC, options.vsync_disabled)
        if options.client_local_port:
            assignments[settings.ENV_CLIENT_PORT] = str(options.client_local_port)
        else:
            removals.append(settings.ENV_CLIENT_PORT)
    else:
        assignments[settings.ENV_WGPU_BACKEND] = inherited.get(
            settings.ENV_WGPU_BACKEND, wgpu_backend
        )
        assignments[settings.ENV_WGPU_ALLOW_SOFTWARE] = inherited.get(
            settings.ENV_WGPU_ALLOW_SOFTWARE, wgpu_allow_software
        )

    key_material = options.key_material if options.secure_mode else None
    _toggle(settings.ENV_SECURE, key_material is not None)

    # The executable prefers NETCODE_KEY, so a stale one must not shadow a key file
    if isinstance(key_material, InlineHex):
        assignments[settings.ENV_NETCODE_KEY] = key_material.value
    else:
        removals.append(settings.ENV_NETCODE_KEY)
    if isinstance(key_material, KeyFilePath):
        assignments[settings.ENV_NETCODE_KEY_FILE] = key_material.path
    else:
        removals.append(settings.ENV_NETCODE_KEY_FILE)

    return EnvironmentPlan(assignments=assignments, removals=tuple(removals))


def assignmentValue_display(name: str, value: str) -> str:
    """
    Value of an assignment as shown in logs and dry-run output.

    Args:
        name: Variable name.
        value: Variable value.

    Returns:
        The value, or a placeholder for the inline key.
    """
    if name == settings.ENV_NETCODE_KEY:
        return "<redacted>"
    return value


def environmentSummary_format(plan: EnvironmentPlan) -> str:
    """
    One-line summary of the plan, key values masked.

    Args:
        plan: Materialized environment plan.

    Returns:
        `NAME=value` pairs separated by spaces.
    """
    return " ".join(
        f"{name}={assignmentValue_display(name, value)}" for name, value in plan.assignments.items()
    )
