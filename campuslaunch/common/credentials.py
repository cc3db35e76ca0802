"""
Credential resolution and optional key-material verification.

`keyMaterial_resolve` decides which key source is forwarded to the
executable; it performs no file I/O. `keyMaterial_verify` implements the
executable's decoding rules and is only used for the opt-in `--verify-key`
pre-flight check.
"""

from __future__ import annotations

import binascii
import logging
from pathlib import Path

from campuslaunch.common.defaults import networkAddress_require
from campuslaunch.common.errors import KeyMaterialError, MissingCredentialError
from campuslaunch.common.settings import settings
from campuslaunch.common.types import (
    InlineHex,
    KeyFilePath,
    KeyMaterial,
    LaunchOptions,
    PartialOptions,
    Role,
)

logger = logging.getLogger(__name__)

__all__ = [
    "credentialSource_require",
    "keyMaterial_resolve",
    "launchOptions_resolve",
    "hexKey_parse",
    "keyMaterial_verify",
]


def credentialSource_require(secure_mode: bool, key: str | None, key_file: str | None) -> None:
    """
    Reject secure mode without any key source.

    Needs nothing but the parsed flags, so it runs before config loading.

    Args:
        secure_mode: Whether authenticated transport was requested.
        key: Raw `--key` value, if any.
        key_file: Raw `--key-file` value, if any.

    Raises:
        MissingCredentialError: Secure mode with neither source.
    """
    if secure_mode and not key and not key_file:
        raise MissingCredentialError("--secure is set but no --key/--key-file provided")


def keyMaterial_resolve(secure_mode: bool, key: str | None, key_file: str | None) -> KeyMaterial | None:
    """
    Select the key material source.

    `--key` takes priority over `--key-file` when both are given.

    Args:
        secure_mode: Whether authenticated transport was requested.
        key: Raw `--key` value, if any.
        key_file: Raw `--key-file` value, if any.

    Returns:
        Selected source, or None when secure mode is off.

    Raises:
        MissingCredentialError: Secure mode with neither source.
    """
    if not secure_mode:
        if key or key_file:
            logger.warning("--key/--key-file given without --secure; ignoring key material")
        return None

    credentialSource_require(secure_mode, key, key_file)
    if key:
        if key_file:
            logger.warning(f"Both --key and --key-file given; using --key and ignoring {key_file}")
        return InlineHex(key)
    return KeyFilePath(key_file or "")


def launchOptions_resolve(merged: PartialOptions) -> LaunchOptions:
    """
    Produce the final validated options from a merged record.

    Args:
        merged: Output of `options_merge`.

    Returns:
        Immutable LaunchOptions.

    Raises:
        UsageError: Empty network address.
        MissingCredentialError: Secure mode without key material.
    """
    network_address: str = networkAddress_require(merged)
    key_material: KeyMaterial | None = keyMaterial_resolve(
        bool(merged.secure_mode), merged.key, merged.key_file
    )

    if merged.role is Role.SERVER:
        return LaunchOptions(
            role=Role.SERVER,
            network_address=network_address,
            log_level=merged.log_level or "",
            secure_mode=bool(merged.secure_mode),
            key_material=key_material,
        )

    return LaunchOptions(
        role=Role.CLIENT,
        network_address=network_address,
        log_level=merged.log_level or "",
        low_graphics=bool(merged.low_graphics),
        vsync_disabled=bool(merged.vsync_disabled),
        client_local_port=merged.client_local_port or None,
        secure_mode=bool(merged.secure_mode),
        key_material=key_material,
    )


def hexKey_parse(text: str) -> bytes:
    """
    Decode a hex key the way the executable does.

    Surrounding whitespace and one leading `0x` are stripped; exactly 64 hex
    characters must remain.

    Args:
        text: Hex key text.

    Returns:
        32 key bytes.

    Raises:
        KeyMaterialError: Wrong length or non-hex characters.
    """
    stripped: str = text.strip()
    if stripped.startswith(settings.KEY_HEX_PREFIX):
        stripped = stripped[len(settings.KEY_HEX_PREFIX):]

    expected_chars: int = settings.KEY_LENGTH_BYTES * 2
    if len(stripped) != expected_chars:
        raise KeyMaterialError(
            f"hex key must be {expected_chars} hex characters (got {len(stripped)})"
        )
    try:
        return binascii.unhexlify(stripped)
    except (binascii.Error, ValueError) as exc:
        raise KeyMaterialError("hex key contains non-hex characters") from exc


def keyMaterial_verify(key_material: KeyMaterial) -> bytes:
    """
    Eagerly validate key material.

    Args:
        key_material: Source selected by `keyMaterial_resolve`.

    Returns:
        The decoded 32-byte key (for verification only; never forwarded).

    Raises:
        KeyMaterialError: Unreadable file or malformed key.
    """
    if isinstance(key_material, InlineHex):
        return hexKey_parse(key_material.value)

    try:
        data: bytes = Path(key_material.path).read_bytes()
    except OSError as exc:
        raise KeyMaterialError(f"cannot read key file {key_material.path}: {exc}") from exc

    if len(data) == settings.KEY_LENGTH_BYTES:
        return data
    return hexKey_parse(data.decode("utf-8", errors="replace"))
