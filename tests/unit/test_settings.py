"""Unit tests for settings singleton"""

import pytest

from campuslaunch.common.config import Config
from campuslaunch.common.settings import Settings, settings


class TestSettingsSingleton:
    """Test Settings singleton pattern"""

    def test_singleton_same_instance(self, reset_settings):
        """Test that Settings() returns same instance"""
        assert Settings() is Settings()

    def test_global_settings_is_singleton(self, reset_settings):
        """Test that global 'settings' is the singleton"""
        assert settings is Settings()


class TestSettingsConstants:
    """Contract constants shared with the executable"""

    def test_environment_names(self):
        """Variable names match the executable's contract exactly"""
        assert settings.ENV_SERVER_ADDR == "SERVER_ADDR"
        assert settings.ENV_LOG == "RUST_LOG"
        assert settings.ENV_NETCODE_KEY == "NETCODE_KEY"
        assert settings.ENV_NETCODE_KEY_FILE == "NETCODE_KEY_FILE"

    def test_launch_constants(self):
        """Build fallback and release directory"""
        assert settings.BUILD_COMMAND == ("cargo", "run", "--release")
        assert settings.RELEASE_DIR_PARTS == ("target", "release")
        assert settings.KEY_LENGTH_BYTES == 32


class TestSettingsInitialization:
    """Test settings initialization with config"""

    def test_initialize_with_config(self, reset_settings):
        """Test settings can be initialized with config"""
        config = Config()
        settings.initialize(config)
        assert settings.config is config

    def test_config_property_before_init_raises(self, reset_settings):
        """Test accessing config before initialization raises error"""
        with pytest.raises(RuntimeError, match="Settings not initialized"):
            _ = settings.config
