"""
Tests for logging configuration, log prefixes and secret redaction.
"""
import json

import pytest
from loguru import logger

from ambari_extras.core.exceptions import InvalidConfigError
from ambari_extras.utils import log_config
from ambari_extras.utils.log_config import (
    LogConfig,
    LogLevel,
    get_log_config,
    load_log_config,
)
from ambari_extras.utils.logger import log_prefix, setup_logger, use_emoji_logs
from ambari_extras.utils.security import redact_config, redact_sensitive_info


class TestLogLevel:
    """Tests for LogLevel enum."""

    def test_valid_levels(self):
        assert LogLevel.from_string("debug") == LogLevel.DEBUG
        assert LogLevel.from_string("INFO") == LogLevel.INFO

    def test_level_aliases(self):
        assert LogLevel.from_string("WARN") == LogLevel.WARNING
        assert LogLevel.from_string("FATAL") == LogLevel.CRITICAL

    def test_invalid_level(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            LogLevel.from_string("INVALID")


class TestLogConfig:
    """Tests for LogConfig dataclass."""

    def test_default_log_dir(self):
        config = LogConfig()

        assert config.log_dir.endswith("logs")
        assert config.log_path.name == "ambari-extras.log"

    def test_invalid_values(self):
        with pytest.raises(ValueError, match="console_level"):
            LogConfig(console_level="LOUD")
        with pytest.raises(ValueError, match="compression"):
            LogConfig(compression="rar")
        with pytest.raises(ValueError, match="size"):
            LogConfig(rotation_size="10")
        with pytest.raises(ValueError, match="unit"):
            LogConfig(rotation_size="10 PB")

    def test_from_dict_ignores_unknown(self):
        config = LogConfig.from_dict({"file_level": "INFO", "unknown": 1})

        assert config.file_level == "INFO"

    def test_env_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setattr(log_config, "CONFIG_FILE", tmp_path / "missing.json")
        monkeypatch.setenv("AMBARI_EXTRAS_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("AMBARI_EXTRAS_LOG_JSON", "yes")
        monkeypatch.setenv("AMBARI_EXTRAS_LOG_COMPRESSION", "none")

        config = load_log_config()

        assert config.console_level == "DEBUG"
        assert config.json_logs is True
        assert config.compression is None
        assert config.log_dir == str(tmp_path / "logs")

    def test_settings_file(self, monkeypatch, tmp_path):
        settings = tmp_path / "log_config.json"
        settings.write_text(json.dumps({"file_level": "ERROR", "json_logs": True}))
        monkeypatch.setattr(log_config, "CONFIG_FILE", settings)

        config = get_log_config()

        assert config.file_level == "ERROR"
        assert config.json_logs is True
        assert config.load_warnings == []
        assert get_log_config() is config

    def test_environment_wins_over_file(self, monkeypatch, tmp_path):
        settings = tmp_path / "log_config.json"
        settings.write_text(json.dumps({"console_level": "ERROR"}))
        monkeypatch.setattr(log_config, "CONFIG_FILE", settings)
        monkeypatch.setenv("AMBARI_EXTRAS_LOG_LEVEL", "info")

        assert load_log_config().console_level == "info"

    def test_corrupt_file_reported(self, monkeypatch, tmp_path):
        """An unreadable settings file falls back to defaults with a warning."""
        settings = tmp_path / "log_config.json"
        settings.write_text("{not json")
        monkeypatch.setattr(log_config, "CONFIG_FILE", settings)

        config = load_log_config()

        assert config.file_level == "DEBUG"
        assert len(config.load_warnings) == 1
        assert str(settings) in config.load_warnings[0]

    def test_invalid_value_is_config_error(self, monkeypatch, tmp_path):
        monkeypatch.setattr(log_config, "CONFIG_FILE", tmp_path / "missing.json")
        monkeypatch.setenv("AMBARI_EXTRAS_LOG_LEVEL", "LOUD")

        with pytest.raises(InvalidConfigError, match="console_level"):
            load_log_config()


class TestLogPrefix:
    """Tests for log_prefix and USE_EMOJI_LOGS."""

    def test_emoji_by_default(self, monkeypatch):
        monkeypatch.delenv("USE_EMOJI_LOGS", raising=False)

        assert use_emoji_logs()
        assert log_prefix("🚀") == "🚀"

    @pytest.mark.parametrize("value", ["0", "false", "no", "off"])
    def test_ascii_when_disabled(self, monkeypatch, value):
        monkeypatch.setenv("USE_EMOJI_LOGS", value)

        assert not use_emoji_logs()
        assert log_prefix("🚀") == "[DEPLOY]"
        assert log_prefix("❌") == "[ERROR]"
        assert log_prefix("🦄") == ""


class TestRedaction:
    """Tests for secret redaction."""

    def test_key_value(self):
        text = "db_root_password=s3cret db_host=mysql"

        assert redact_sensitive_info(text) == "db_root_password=[REDACTED] db_host=mysql"

    def test_dict_repr(self):
        text = "{'db_password': 'rangerpass', 'db_user': 'rangeradmin'}"

        redacted = redact_sensitive_info(text)

        assert "rangerpass" not in redacted
        assert "'db_user': 'rangeradmin'" in redacted

    def test_connection_string(self):
        assert redact_sensitive_info("mysql://root:hunter22@db:3306") == "mysql://root:[REDACTED]@db:3306"

    def test_extra_secrets(self):
        assert redact_sensitive_info("token is abcdef", ["abcdef"]) == "token is [REDACTED]"

    def test_empty(self):
        assert redact_sensitive_info("") == ""

    def test_redact_config(self):
        config = {"admin-properties": {"db_password": "x", "db_root_password": "", "db_host": "h"}}

        assert redact_config(config) == {
            "admin-properties": {"db_password": "[REDACTED]", "db_root_password": "", "db_host": "h"}
        }


class TestSetupLogger:
    """Tests for setup_logger."""

    def test_file_sink_redacts(self, tmp_path):
        config = LogConfig(log_dir=str(tmp_path), compression=None)
        setup_logger(config=config)

        logger.info("connecting with db_password=hunter22")
        logger.complete()

        content = config.log_path.read_text()
        assert "db_password=[REDACTED]" in content
        assert "hunter22" not in content

    def test_json_logs(self, tmp_path):
        config = LogConfig(log_dir=str(tmp_path), compression=None, json_logs=True)
        setup_logger(config=config)

        logger.info("structured {value}", value=1)
        logger.complete()

        entry = json.loads(config.log_path.read_text().splitlines()[-1])
        assert entry["message"] == "structured 1"
        assert entry["level"] == "INFO"

    def test_load_warnings_logged(self, tmp_path):
        config = LogConfig(log_dir=str(tmp_path), compression=None)
        config.load_warnings = ["Ignoring unreadable log settings /etc/broken.json"]
        setup_logger(config=config)
        logger.complete()

        content = config.log_path.read_text()
        assert "WARNING" in content
        assert "/etc/broken.json" in content
