"""Typed records flowing through the launcher pipeline"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Role(Enum):
    """Which side of the client/server pair is being launched"""
    CLIENT = "client"
    SERVER = "server"


@dataclass(frozen=True)
class InlineHex:
    """Key material given inline as a hex string (passed through verbatim)"""
    value: str


@dataclass(frozen=True)
class KeyFilePath:
    """Key material read by the executable from a file (binary or hex text)"""
    path: str


KeyMaterial = Union[InlineHex, KeyFilePath]


@dataclass(frozen=True)
class PartialOptions:
    """
    Parser output before defaults are applied.

    Every field is `None` when the corresponding flag was not supplied.
    Booleans are `True` when the flag was present and `None` otherwise.
    """

    role: Role
    server_address: str | None = None
    address: str | None = None
    port: str | None = None
    log_level: str | None = None
    low_graphics: bool | None = None
    vsync_disabled: bool | None = None
    client_local_port: int | None = None
    secure_mode: bool | None = None
    key: str | None = None
    key_file: str | None = None


@dataclass(frozen=True)
class LaunchDefaults:
    """Built-in (or config-provided) defaults for a role"""

    client_server_address: str = "127.0.0.1:5000"
    server_address: str = "0.0.0.0"
    server_port: str = "5000"
    log_level: str = "warn"


@dataclass(frozen=True)
class LaunchOptions:
    """Resolved, validated launch configuration for one invocation"""

    role: Role
    network_address: str
    log_level: str
    low_graphics: bool = False
    vsync_disabled: bool = False
    client_local_port: int | None = None
    secure_mode: bool = False
    key_material: KeyMaterial | None = None


@dataclass(frozen=True)
class EnvironmentPlan:
    """
    Environment changes handed to the external executable.

    Variables in `removals` must be absent from the child environment,
    never present with an empty value.
    """

    assignments: dict[str, str]
    removals: tuple[str, ...]

    def apply(self, inherited: dict[str, str]) -> dict[str, str]:
        """Return a new environment mapping with this plan applied"""
        environment: dict[str, str] = {
            name: value for name, value in inherited.items() if name not in self.removals
        }
        environment.update(self.assignments)
        return environment


@dataclass(frozen=True)
class RunExecutable:
    """Replace the launcher with a prebuilt executable, no arguments"""
    path: str


@dataclass(frozen=True)
class RunBuildFallback:
    """Replace the launcher with the build-and-run command"""
    argv: tuple[str, ...]


LaunchAction = Union[RunExecutable, RunBuildFallback]
