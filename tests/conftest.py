"""Pytest configuration and shared fixtures for campuslaunch tests

This module provides common fixtures and test utilities used across
the unit tests.
"""

import logging
from pathlib import Path
from typing import Generator

import pytest

from campuslaunch.common.config import ConfigLoader
from campuslaunch.common.settings import settings

HEX_KEY = "aa" * 32


@pytest.fixture
def hex_key() -> str:
    """64-character hex key accepted by the executable"""
    return HEX_KEY


@pytest.fixture
def reset_settings() -> Generator[None, None, None]:
    """Reset settings singleton between tests

    This fixture ensures each test gets a fresh Settings instance.
    """
    settings._initialized = False
    settings._config = None
    yield
    settings._initialized = False
    settings._config = None


@pytest.fixture(autouse=True)
def no_standard_config(monkeypatch) -> None:
    """Keep tests independent of config files on the host"""
    monkeypatch.setattr(ConfigLoader, "DEFAULT_CONFIG_PATHS", [])


@pytest.fixture(autouse=True)
def setup_logging(caplog):
    """Setup logging for tests"""
    caplog.set_level(logging.DEBUG)


@pytest.fixture
def project_dir(tmp_path) -> Path:
    """Empty launcher directory (no executables)"""
    directory = tmp_path / "campus"
    directory.mkdir()
    return directory


def executable_create(path: Path) -> Path:
    """Create an executable stub file at path"""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("#!/bin/sh\n")
    path.chmod(0o755)
    return path


@pytest.fixture
def make_executable():
    """Factory creating executable stub files"""
    return executable_create


class RecordingDispatch:
    """Dispatch stand-in that records the action instead of exec'ing"""

    def __init__(self) -> None:
        self.calls: list = []

    def __call__(self, action, environment) -> None:
        self.calls.append((action, dict(environment)))


@pytest.fixture
def recording_dispatch() -> RecordingDispatch:
    """Fresh recording dispatch"""
    return RecordingDispatch()
