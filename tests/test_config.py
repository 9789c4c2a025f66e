"""Tests for run configuration."""

from pathlib import Path

import pytest

from generate_x_mcp.config import SyncOptions
from generate_x_mcp.errors import ConfigurationError


class TestSyncOptions:
    """Tests for SyncOptions."""

    def test_defaults(self):
        """Only the server url is required."""
        options = SyncOptions.from_sources(environ={}, server_url="http://localhost:8000/mcp")
        assert options.openapi_file == Path("openapi.yaml")
        assert options.headers == {}
        assert options.connect_delay == 1.0
        assert options.timeout == 30.0
        assert options.replace_empty is False

    def test_explicit_values(self):
        """Explicit values are used as given."""
        options = SyncOptions.from_sources(
            environ={},
            server_url="https://mcp.example.com/mcp",
            openapi_file="api/spec.yaml",
            headers={"X-A": "1"},
            connect_delay=0,
            timeout=5,
            replace_empty=True,
        )
        assert options.openapi_file == Path("api/spec.yaml")
        assert options.headers == {"X-A": "1"}
        assert options.connect_delay == 0
        assert options.timeout == 5
        assert options.replace_empty is True

    def test_environment_fallbacks(self):
        """Unset values fall back to environment variables."""
        environ = {
            "XMCP_OPENAPI_FILE": "from-env.yaml",
            "XMCP_CONNECT_DELAY": "2.5",
            "XMCP_TIMEOUT": "10",
            "XMCP_REPLACE_EMPTY": "true",
        }
        options = SyncOptions.from_sources(environ=environ, server_url="http://a", openapi_file=None)
        assert options.openapi_file == Path("from-env.yaml")
        assert options.connect_delay == 2.5
        assert options.timeout == 10.0
        assert options.replace_empty is True

    def test_explicit_beats_environment(self):
        """Command-line values win over the environment."""
        options = SyncOptions.from_sources(
            environ={"XMCP_OPENAPI_FILE": "from-env.yaml"}, server_url="http://a", openapi_file="cli.yaml"
        )
        assert options.openapi_file == Path("cli.yaml")

    def test_reads_os_environ_by_default(self, monkeypatch):
        """os.environ is consulted when no mapping is passed."""
        monkeypatch.setenv("XMCP_TIMEOUT", "7")
        options = SyncOptions.from_sources(server_url="http://a")
        assert options.timeout == 7.0

    def test_rejects_non_http_url(self):
        """Only http and https urls are accepted."""
        with pytest.raises(ConfigurationError, match="server_url"):
            SyncOptions.from_sources(environ={}, server_url="ftp://example.com")

    def test_rejects_negative_delay(self):
        """The connect delay cannot be negative."""
        with pytest.raises(ConfigurationError, match="connect_delay"):
            SyncOptions.from_sources(environ={}, server_url="http://a", connect_delay=-1)

    def test_rejects_bad_environment_value(self):
        """Unparseable environment values are reported."""
        with pytest.raises(ConfigurationError) as exc_info:
            SyncOptions.from_sources(environ={"XMCP_TIMEOUT": "soon"}, server_url="http://a")
        assert exc_info.value.suggestion
        assert "timeout" in exc_info.value.to_message()
