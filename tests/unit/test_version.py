"""Tests for the package version string"""

import subprocess
from importlib import metadata

import campuslaunch


class TestVersion:
    """Test release and revision lookup"""

    def test_version_has_release_and_revision(self):
        """Version joins release and revision with '+'"""
        release, _, revision = campuslaunch.__version__.partition("+")
        assert release
        assert revision

    def test_release_falls_back_when_not_installed(self, monkeypatch):
        """Uninstalled source tree reports the built-in release"""

        def version_missing(name):
            raise metadata.PackageNotFoundError(name)

        monkeypatch.setattr(metadata, "version", version_missing)
        assert campuslaunch._release_get() == campuslaunch._FALLBACK_RELEASE

    def test_revision_dev_when_git_unavailable(self, monkeypatch):
        """Missing git binary yields 'dev' instead of an error"""

        def git_missing(*args, **kwargs):
            raise FileNotFoundError("git")

        monkeypatch.setattr(subprocess, "run", git_missing)
        assert campuslaunch._gitRevision_get() == "dev"
