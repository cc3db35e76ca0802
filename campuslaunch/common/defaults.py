"""Default merging for parsed launcher options"""

from __future__ import annotations

from dataclasses import replace

from campuslaunch.common.errors import UsageError
from campuslaunch.common.types import LaunchDefaults, PartialOptions, Role

__all__ = ["options_merge", "networkAddress_get", "networkAddress_require"]


def options_merge(partial: PartialOptions, defaults: LaunchDefaults | None = None) -> PartialOptions:
    """
    Fill every unset field with its default.

    Pure and total. Merging an already-merged record returns an equal record.
    A client port of 0 is normalized to `None` (OS-assigned).

    Args:
        partial: Parser output.
        defaults: Role defaults (built-in when omitted).

    Returns:
        Fully populated options record.
    """
    defaults = defaults or LaunchDefaults()

    def _pick(value, fallback):
        return fallback if value is None else value

    merged: PartialOptions = replace(
        partial,
        log_level=_pick(partial.log_level, defaults.log_level),
        low_graphics=bool(partial.low_graphics),
        vsync_disabled=bool(partial.vsync_disabled),
        client_local_port=partial.client_local_port or None,
        secure_mode=bool(partial.secure_mode),
    )

    if partial.role is Role.SERVER:
        address: str = _pick(partial.address, defaults.server_address)
        port: str = _pick(partial.port, defaults.server_port)
        return replace(merged, address=address, port=port, server_address=f"{address}:{port}")

    return replace(
        merged,
        server_address=_pick(partial.server_address, defaults.client_server_address),
    )


def networkAddress_get(merged: PartialOptions) -> str:
    """
    Return the resolved `host:port` network address of a merged record.

    Args:
        merged: Output of `options_merge`.

    Returns:
        Network address string (possibly empty if the user passed one).
    """
    return merged.server_address or ""


def networkAddress_require(merged: PartialOptions) -> str:
    """
    Return the network address, rejecting empty components.

    Args:
        merged: Output of `options_merge`.

    Returns:
        Non-empty network address.

    Raises:
        UsageError: When the address (or, for the server, host or port) is empty.
    """
    if merged.role is Role.SERVER:
        if not merged.address:
            raise UsageError("server address must not be empty")
        if not merged.port:
            raise UsageError("server port must not be empty")

    network_address: str = networkAddress_get(merged)
    if not network_address:
        raise UsageError("server address must not be empty")
    return network_address
