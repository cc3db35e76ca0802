"""Unit tests for client and server launcher argument parsing"""

import pytest

from campuslaunch.client import client_cli
from campuslaunch.common.errors import EXIT_USAGE, UsageError
from campuslaunch.common.types import PartialOptions, Role
from campuslaunch.server import server_cli


class TestClientArgumentParsing:
    """Client flag schema"""

    def test_no_flags_leaves_everything_unset(self):
        """Unsupplied flags stay None so defaults can be applied later"""
        partial, args = client_cli.partialOptions_parse([])
        assert partial == PartialOptions(role=Role.CLIENT)
        assert args.dry_run is False
        assert args.verify_key is False
        assert args.config is None

    def test_short_and_long_forms_are_equivalent(self):
        """-s/--server and -l/--log map to the same fields"""
        short, _ = client_cli.partialOptions_parse(["-s", "10.0.0.2:6000", "-l", "debug"])
        long, _ = client_cli.partialOptions_parse(["--server", "10.0.0.2:6000", "--log", "debug"])
        assert short == long
        assert short.server_address == "10.0.0.2:6000"
        assert short.log_level == "debug"

    def test_boolean_flags_set_true(self):
        """Boolean flags take no argument"""
        partial, _ = client_cli.partialOptions_parse(["--low-gfx", "--no-vsync", "--secure"])
        assert partial.low_graphics is True
        assert partial.vsync_disabled is True
        assert partial.secure_mode is True

    def test_client_port_is_integer(self):
        """--client-port parses as an int"""
        partial, _ = client_cli.partialOptions_parse(["--client-port", "40000"])
        assert partial.client_local_port == 40000

    @pytest.mark.parametrize("value", ["abc", "-1", "70000"])
    def test_invalid_client_port_is_usage_error(self, value):
        """Non-numeric or out-of-range ports are rejected"""
        with pytest.raises(UsageError):
            client_cli.partialOptions_parse(["--client-port", value])

    def test_order_independent(self):
        """Flag order does not change the result"""
        a, _ = client_cli.partialOptions_parse(
            ["--secure", "--key", "ab", "-s", "h:1", "--low-gfx"]
        )
        b, _ = client_cli.partialOptions_parse(
            ["--low-gfx", "-s", "h:1", "--key", "ab", "--secure"]
        )
        assert a == b

    def test_repeated_value_flag_last_wins(self):
        """A repeated value flag keeps its last value"""
        partial, _ = client_cli.partialOptions_parse(["-s", "first:1", "--server", "second:2"])
        assert partial.server_address == "second:2"

    def test_missing_value_fails_immediately(self):
        """A value flag at the end of argv is a usage error"""
        with pytest.raises(UsageError) as excinfo:
            client_cli.partialOptions_parse(["--key"])
        assert excinfo.value.exit_code == EXIT_USAGE

    def test_unknown_flag_is_usage_error_with_usage_text(self):
        """Unknown flags raise UsageError carrying help text"""
        with pytest.raises(UsageError) as excinfo:
            client_cli.partialOptions_parse(["--bogus"])
        assert "--bogus" in str(excinfo.value)
        assert excinfo.value.usage is not None
        assert "--client-port" in excinfo.value.usage

    def test_abbreviated_flag_is_rejected(self):
        """Prefix matching of long flags is disabled"""
        with pytest.raises(UsageError):
            client_cli.partialOptions_parse(["--sec"])

    def test_positional_argument_is_rejected(self):
        """Stray positional arguments are usage errors"""
        with pytest.raises(UsageError):
            client_cli.partialOptions_parse(["extra"])

    def test_server_only_flags_rejected(self):
        """Client does not accept --port"""
        with pytest.raises(UsageError):
            client_cli.partialOptions_parse(["--port", "5000"])

    def test_help_exits_zero(self, capsys):
        """-h prints usage and exits successfully"""
        with pytest.raises(SystemExit) as excinfo:
            client_cli.partialOptions_parse(["-h"])
        assert excinfo.value.code == 0
        assert "--low-gfx" in capsys.readouterr().out


class TestServerArgumentParsing:
    """Server flag schema"""

    def test_address_and_port(self):
        """-a/-p are kept as text"""
        partial, _ = server_cli.partialOptions_parse(["-a", "192.168.1.10", "-p", "5001"])
        assert partial.role is Role.SERVER
        assert partial.address == "192.168.1.10"
        assert partial.port == "5001"

    def test_long_forms(self):
        """--address/--port/--log long forms"""
        partial, _ = server_cli.partialOptions_parse(
            ["--address", "::", "--port", "7000", "--log", "info"]
        )
        assert partial.address == "::"
        assert partial.port == "7000"
        assert partial.log_level == "info"

    def test_secure_flags(self):
        """Secure flags are shared with the client"""
        partial, args = server_cli.partialOptions_parse(
            ["--secure", "--key-file", "/etc/key", "--verify-key"]
        )
        assert partial.secure_mode is True
        assert partial.key_file == "/etc/key"
        assert args.verify_key is True

    @pytest.mark.parametrize("flag", ["--low-gfx", "--no-vsync", "--server"])
    def test_client_only_flags_rejected(self, flag):
        """Graphics and connect flags belong to the client"""
        with pytest.raises(UsageError):
            server_cli.partialOptions_parse([flag])

    def test_missing_port_value(self):
        """-p without a value is a usage error"""
        with pytest.raises(UsageError):
            server_cli.partialOptions_parse(["-p"])

    def test_help_mentions_wgpu_defaults(self, capsys):
        """Server help documents the WGPU environment defaults"""
        with pytest.raises(SystemExit) as excinfo:
            server_cli.partialOptions_parse(["--help"])
        assert excinfo.value.code == 0
        assert "WGPU_BACKEND" in capsys.readouterr().out
