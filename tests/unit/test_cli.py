"""Unit tests for the unified campuslaunch command"""

from __future__ import annotations

import pytest

from campuslaunch import cli


class TestArgumentsParse:
    """Role selection"""

    def test_role_and_remainder(self):
        """Role flags are passed through untouched"""
        args = cli.arguments_parse(["server", "-p", "6000", "--secure"])
        assert args.role == "server"
        assert args.args == ["-p", "6000", "--secure"]

    def test_role_help_is_forwarded(self):
        """--help after the role belongs to the role parser"""
        args = cli.arguments_parse(["client", "--help"])
        assert args.args == ["--help"]


class TestMain:
    """Exit codes of the unified entry point"""

    def test_unknown_role_exits_one(self, capsys):
        """Invalid role is a usage error, not argparse's status 2"""
        with pytest.raises(SystemExit) as excinfo:
            cli.main(["desktop"])
        assert excinfo.value.code == 1
        assert "usage:" in capsys.readouterr().err

    def test_dispatches_to_client(self, monkeypatch):
        """client role runs the client launcher"""
        seen = []
        monkeypatch.setattr(
            "campuslaunch.client.main.client_run", lambda argv: seen.append(argv) or 0
        )
        with pytest.raises(SystemExit) as excinfo:
            cli.main(["client", "--low-gfx"])
        assert excinfo.value.code == 0
        assert seen == [["--low-gfx"]]

    def test_dispatches_to_server(self, monkeypatch):
        """server role runs the server launcher and propagates its code"""
        monkeypatch.setattr("campuslaunch.server.main.server_run", lambda argv: 2)
        with pytest.raises(SystemExit) as excinfo:
            cli.main(["server", "--secure"])
        assert excinfo.value.code == 2
