"""Launcher configuration file loading and management"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from campuslaunch.common.types import LaunchDefaults


@dataclass
class ClientConfig:
    """Client launcher defaults"""
    server_address: str = "127.0.0.1:5000"
    log_level: str = "warn"


@dataclass
class ServerConfig:
    """Server launcher defaults"""
    address: str = "0.0.0.0"
    port: str = "5000"
    log_level: str = "warn"
    wgpu_backend: str = "vk"
    wgpu_allow_software: str = "1"


@dataclass
class LaunchConfig:
    """Executable search settings"""
    project_dir: Optional[str] = None
    client_binary: str = "bevy-online-campus"
    server_binary: str = "server"


@dataclass
class LoggingConfig:
    """Launcher's own logging settings (independent of RUST_LOG)"""
    level: str = "INFO"
    file: Optional[str] = None
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class Config:
    """Complete launcher configuration"""
    client: ClientConfig = field(default_factory=ClientConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    launch: LaunchConfig = field(default_factory=LaunchConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def launchDefaults_get(self, role_log_level: str) -> LaunchDefaults:
        """
        Build the default-merger input from this configuration

        Args:
            role_log_level: Log level default for the role being launched

        Returns:
            LaunchDefaults carrying config-provided values
        """
        return LaunchDefaults(
            client_server_address=self.client.server_address,
            server_address=self.server.address,
            server_port=self.server.port,
            log_level=role_log_level,
        )


class ConfigLoader:
    """Loads and parses launcher configuration from YAML files"""

    DEFAULT_CONFIG_PATHS = [
        "campuslaunch.yml",
        "~/.config/campuslaunch/config.yml",
        "/etc/campuslaunch/config.yml",
    ]

    @staticmethod
    def configFile_find() -> Optional[Path]:
        """
        Find configuration file in standard locations

        Returns:
            Path to config file, or None if not found
        """
        for config_path in ConfigLoader.DEFAULT_CONFIG_PATHS:
            path = Path(config_path).expanduser().resolve()
            if path.exists() and path.is_file():
                return path
        return None

    @staticmethod
    def yaml_load(file_path: Path) -> Dict[str, Any]:
        """
        Load YAML configuration file

        Args:
            file_path: Path to YAML file

        Returns:
            Parsed configuration dictionary (empty for an empty file)

        Raises:
            FileNotFoundError: If file does not exist
            yaml.YAMLError: If file is not valid YAML
            ValueError: If the document is not a mapping
        """
        with open(file_path, "r") as f:
            data = yaml.safe_load(f)

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file {file_path} must contain a YAML dictionary")

        return data

    @staticmethod
    def section_get(data: Dict[str, Any], name: str) -> Dict[str, Any]:
        """
        Fetch an optional top-level section

        Args:
            data: Raw configuration dictionary
            name: Section key

        Returns:
            Section dictionary, empty when absent

        Raises:
            ValueError: If the section is present but not a mapping
        """
        section = data.get(name) or {}
        if not isinstance(section, dict):
            raise ValueError(f"Config section '{name}' must be a YAML dictionary")
        return section

    @staticmethod
    def value_get(section: Dict[str, Any], key: str, default: str) -> str:
        """
        Fetch an optional scalar as text

        A key present with no value (YAML null) counts as missing.

        Args:
            section: Section dictionary
            key: Key name
            default: Value used when the key is missing or null

        Returns:
            Value as a string
        """
        value = section.get(key)
        return default if value is None else str(value)

    @staticmethod
    def config_parse(data: Dict[str, Any]) -> Config:
        """
        Parse configuration dictionary into Config object

        All sections and keys are optional; missing values keep the
        built-in launcher defaults.

        Args:
            data: Raw configuration dictionary

        Returns:
            Parsed Config object
        """
        defaults = Config()

        client_data = ConfigLoader.section_get(data, "client")
        client = ClientConfig(
            server_address=ConfigLoader.value_get(client_data, "server_address", defaults.client.server_address),
            log_level=ConfigLoader.value_get(client_data, "log_level", defaults.client.log_level),
        )

        # Ports are commonly written as bare integers in YAML
        server_data = ConfigLoader.section_get(data, "server")
        server = ServerConfig(
            address=ConfigLoader.value_get(server_data, "address", defaults.server.address),
            port=ConfigLoader.value_get(server_data, "port", defaults.server.port),
            log_level=ConfigLoader.value_get(server_data, "log_level", defaults.server.log_level),
            wgpu_backend=ConfigLoader.value_get(server_data, "wgpu_backend", defaults.server.wgpu_backend),
            wgpu_allow_software=ConfigLoader.value_get(
                server_data, "wgpu_allow_software", defaults.server.wgpu_allow_software
            ),
        )

        launch_data = ConfigLoader.section_get(data, "launch")
        project_dir = launch_data.get("project_dir")
        launch = LaunchConfig(
            project_dir=str(project_dir) if project_dir is not None else None,
            client_binary=ConfigLoader.value_get(launch_data, "client_binary", defaults.launch.client_binary),
            server_binary=ConfigLoader.value_get(launch_data, "server_binary", defaults.launch.server_binary),
        )

        logging_data = ConfigLoader.section_get(data, "logging")
        logging = LoggingConfig(
            level=ConfigLoader.value_get(logging_data, "level", defaults.logging.level),
            file=logging_data.get("file"),
            format=ConfigLoader.value_get(logging_data, "format", defaults.logging.format),
        )

        return Config(client=client, server=server, launch=launch, logging=logging)

    @staticmethod
    def config_load(file_path: Optional[Path] = None) -> Config:
        """
        Load configuration from file

        Args:
            file_path: Optional explicit path. If None, searches standard
                locations and falls back to built-in defaults when none exist.

        Returns:
            Parsed Config object

        Raises:
            FileNotFoundError: If an explicit file_path does not exist
            ValueError: If config file is invalid
        """
        if file_path is None:
            file_path = ConfigLoader.configFile_find()
            if file_path is None:
                return Config()

        data = ConfigLoader.yaml_load(file_path)
        return ConfigLoader.config_parse(data)
