"""Tests for configuration and log sinks."""

import logging

import pytest

from unifi_rest.config import Config, Settings
from unifi_rest.logging import discard_logs, get_logger, log_extra_fields, logger_sink


class TestConfig:
    """Tests for Config."""

    def test_defaults(self) -> None:
        """Test that Config has sensible defaults."""
        config = Config(user="admin", password="secret", url="https://127.0.0.1:8443")
        assert config.verify_ssl is True
        assert config.new is False
        assert config.error_log is discard_logs
        assert config.debug_log is discard_logs
        assert config.timeout == 60
        assert config.auth_retry is True

    def test_none_sinks_fall_back_to_discard(self) -> None:
        """Test that unset sinks become discard_logs."""
        config = Config(user="u", password="p", url="https://h", error_log=None, debug_log=None)
        assert config.error_log is discard_logs
        assert config.debug_log is discard_logs

    def test_trailing_slash_stripped(self) -> None:
        """Test that the base URL loses its trailing slash."""
        assert Config(user="u", password="p", url="https://h:8443/").url == "https://h:8443"

    def test_empty_url(self) -> None:
        """Test that an empty URL is rejected."""
        with pytest.raises(ValueError, match="url"):
            Config(user="u", password="p", url="")

    def test_bad_timeout(self) -> None:
        """Test that a non-positive timeout is rejected."""
        with pytest.raises(ValueError, match="timeout"):
            Config(user="u", password="p", url="https://h", timeout=0)


class TestSettings:
    """Tests for environment-loaded Settings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that settings have sensible defaults."""
        for name in ("UNIFI_USER", "UNIFI_PASS", "UNIFI_URL", "UNIFI_VERIFY_SSL", "UNIFI_NEW", "UNIFI_TIMEOUT"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)
        assert settings.URL == "https://127.0.0.1:8443"
        assert settings.VERIFY_SSL is True
        assert settings.NEW is False

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that settings can be loaded from environment variables."""
        monkeypatch.setenv("UNIFI_USER", "poller")
        monkeypatch.setenv("UNIFI_PASS", "hunter2")
        monkeypatch.setenv("UNIFI_URL", "https://10.0.0.1/")
        monkeypatch.setenv("UNIFI_VERIFY_SSL", "false")
        monkeypatch.setenv("UNIFI_NEW", "true")
        monkeypatch.setenv("UNIFI_TIMEOUT", "15")

        debug_log = logger_sink(get_logger("test"))
        config = Settings(_env_file=None).to_config(debug_log=debug_log)

        assert config.user == "poller"
        assert config.password == "hunter2"
        assert config.url == "https://10.0.0.1"
        assert config.verify_ssl is False
        assert config.new is True
        assert config.timeout == 15
        assert config.debug_log is debug_log
        assert config.error_log is discard_logs


class TestLogging:
    """Tests for logger helpers."""

    def test_get_logger_namespace(self) -> None:
        """Test that loggers live under the package namespace."""
        assert get_logger().name == "unifi_rest"
        assert get_logger("unifi_rest.api_client").name == "unifi_rest.api_client"
        assert get_logger("poller").name == "unifi_rest.poller"

    def test_logger_sink(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that a sink formats printf-style arguments into a log record."""
        sink = logger_sink(get_logger("sink"), logging.ERROR)
        with caplog.at_level(logging.ERROR, logger="unifi_rest.sink"):
            sink("failed %d of %s", 3, "sites")
        assert caplog.records[0].getMessage() == "failed 3 of sites"
        assert caplog.records[0].levelno == logging.ERROR

    def test_log_extra_fields(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that extra fields are logged, and their absence noted, at DEBUG."""
        logger = get_logger("extra")
        with caplog.at_level(logging.DEBUG, logger="unifi_rest.extra"):
            log_extra_fields(logger, "Client", "aa:bb", {"satisfaction": 98, "note": "x" * 10},
                             max_length=5)
            log_extra_fields(logger, "Client", "cc:dd", {})
        messages = [r.getMessage() for r in caplog.records]
        assert messages[0].startswith("Extra fields for Client aa:bb: {\n")
        assert '"satisfaction": 98' in messages[0]
        assert "xxxxx... [truncated]" in messages[0]
        assert messages[1] == "No extra fields for Client cc:dd"

    def test_discard_logs(self) -> None:
        """Test that the default sink accepts anything."""
        assert discard_logs("anything %s %s", 1, 2) is None
