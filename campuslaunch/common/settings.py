"""Launcher settings singleton - single source of truth for configuration

This module provides a singleton Settings class that consolidates:
1. Contract constants shared with the external executable (variable names)
2. Launch constants (build command, release directory)
3. Runtime configuration from the optional launcher YAML file

Usage:
    from campuslaunch.common.settings import settings

    config = ConfigLoader.config_load()
    settings.initialize(config)

    binary_dir = project_dir.joinpath(*settings.RELEASE_DIR_PARTS)
"""

from typing import Optional

from campuslaunch.common.config import Config


class Settings:
    """Singleton settings manager combining launcher config and contract constants

    This class provides:
    - Environment variable names that the wrapped executable reads
    - Build-and-run fallback command pieces
    - Access to runtime configuration loaded from campuslaunch.yml

    The singleton pattern ensures the client and server launchers resolve
    against the same constants and the same loaded configuration.
    """

    _instance: Optional["Settings"] = None

    def __new__(cls) -> "Settings":
        """Ensure only one Settings instance exists"""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        """Initialize settings singleton (only runs once)"""
        if hasattr(self, "_initialized"):
            return
        self._initialized = True
        self._config: Optional[Config] = None

    def initialize(self, config: Config) -> None:
        """
        Initialize with loaded configuration

        Args:
            config: Loaded launcher configuration
        """
        self._config = config

    # =========================================================================
    # Executable Environment Contract
    # =========================================================================

    ENV_SERVER_ADDR: str = "SERVER_ADDR"
    ENV_LOG: str = "RUST_LOG"
    """Log filter variable read by the executable's logging backend"""

    ENV_LOW_GFX: str = "LOW_GFX"
    ENV_NO_VSYNC: str = "NO_VSYNC"
    ENV_CLIENT_PORT: str = "CLIENT_PORT"
    ENV_SECURE: str = "SECURE"
    ENV_NETCODE_KEY: str = "NETCODE_KEY"
    ENV_NETCODE_KEY_FILE: str = "NETCODE_KEY_FILE"
    ENV_WGPU_BACKEND: str = "WGPU_BACKEND"
    ENV_WGPU_ALLOW_SOFTWARE: str = "WGPU_ALLOW_SOFTWARE"

    FLAG_ON: str = "1"
    """Value exported for enabled boolean toggles"""

    # =========================================================================
    # Launch Constants
    # =========================================================================

    RELEASE_DIR_PARTS: tuple[str, ...] = ("target", "release")
    """Release-build output directory, relative to the project directory"""

    BUILD_COMMAND: tuple[str, ...] = ("cargo", "run", "--release")
    """Build-and-run fallback used when no prebuilt executable is found

    The server role appends `--bin <server_binary>` so the fallback still
    starts the server rather than the default (client) binary.
    """

    # =========================================================================
    # Key Material Constants
    # =========================================================================

    KEY_LENGTH_BYTES: int = 32
    """Shared secret length required by the authenticated transport"""

    KEY_HEX_PREFIX: str = "0x"

    # =========================================================================
    # Runtime Configuration Access
    # =========================================================================

    @property
    def config(self) -> Config:
        """
        Get loaded configuration object

        Raises:
            RuntimeError: If initialize() has not been called
        """
        if self._config is None:
            raise RuntimeError("Settings not initialized. Call settings.initialize(config) first.")
        return self._config


# Global singleton instance
settings = Settings()
"""Global settings singleton instance

Import this anywhere in the launcher:
    from campuslaunch.common.settings import settings
"""
