"""
Logging configuration for ambari-extras.

Settings come from three layers, later ones winning:

1. defaults of ``LogConfig``
2. ``~/.ambari-extras/log_config.json``
3. ``AMBARI_EXTRAS_LOG_*`` environment variables

A bad value in any layer is a configuration error. A settings file that
cannot be read or parsed is skipped, and the problem is reported once
the log sinks exist (see ``LogConfig.load_warnings``).
"""
import json
import os
from dataclasses import dataclass, field, fields
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

from ambari_extras.core.exceptions import InvalidConfigError

CONFIG_FILE = Path.home() / ".ambari-extras" / "log_config.json"

ENV_PREFIX = "AMBARI_EXTRAS_LOG_"

# env suffix -> LogConfig field
ENV_FIELDS = {
    "DIR": "log_dir",
    "LEVEL": "console_level",
    "FILE_LEVEL": "file_level",
    "ROTATION_SIZE": "rotation_size",
    "RETENTION": "retention",
    "COMPRESSION": "compression",
    "JSON": "json_logs",
    "CONSOLE": "console_enabled",
}

_TRUTHY = ("1", "true", "yes", "on")
_SIZE_UNITS = ("B", "KB", "MB", "GB", "TB")
_COMPRESSIONS = ("gz", "zip", None)


class LogLevel(str, Enum):
    """Loguru level names."""
    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    SUCCESS = "SUCCESS"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    @classmethod
    def from_string(cls, level: str) -> "LogLevel":
        """Case-insensitive lookup, accepting WARN/ERR/CRIT/FATAL."""
        name = _LEVEL_ALIASES.get(level.upper(), level.upper())
        try:
            return cls(name)
        except ValueError:
            raise ValueError(f"Unknown log level: {level}") from None


_LEVEL_ALIASES = {"WARN": "WARNING", "ERR": "ERROR", "CRIT": "CRITICAL", "FATAL": "CRITICAL"}


def _check_size(size: str) -> None:
    amount, _, unit = size.strip().partition(" ")
    if not unit:
        raise ValueError(f"Invalid size format: {size!r} (expected e.g. '10 MB')")
    try:
        positive = float(amount) > 0
    except ValueError:
        raise ValueError(f"Invalid size value: {amount!r}") from None
    if not positive:
        raise ValueError(f"Size must be positive: {size!r}")
    if unit.strip().upper() not in _SIZE_UNITS:
        raise ValueError(f"Invalid size unit: {unit!r} (one of {', '.join(_SIZE_UNITS)})")


@dataclass
class LogConfig:
    """
    Sink settings used by ``setup_logger``.

    Attributes:
        log_dir: Directory of the log file (default: ~/.ambari-extras/logs)
        app_log_name: Log file name
        console_level: Minimum level on stderr
        file_level: Minimum level in the log file
        rotation_size: File size that triggers rotation, e.g. "10 MB"
        retention: Age after which rotated files are removed
        compression: "gz", "zip" or None for rotated files
        json_logs: One JSON object per line in the log file
        console_enabled: Log to stderr even without --verbose
        load_warnings: Problems met while loading, logged by setup_logger
    """
    log_dir: str = ""
    app_log_name: str = "ambari-extras.log"
    console_level: str = "WARNING"
    file_level: str = "DEBUG"
    rotation_size: str = "10 MB"
    retention: str = "1 week"
    compression: Optional[str] = "gz"
    json_logs: bool = False
    console_enabled: bool = False
    load_warnings: List[str] = field(default_factory=list, repr=False, compare=False)

    def __post_init__(self):
        if not self.log_dir:
            self.log_dir = str(Path.home() / ".ambari-extras" / "logs")

        for name in ("console_level", "file_level"):
            try:
                LogLevel.from_string(getattr(self, name))
            except ValueError as e:
                raise ValueError(f"Invalid {name}: {e}") from e

        if self.compression not in _COMPRESSIONS:
            raise ValueError(f"compression must be gz, zip or None, got: {self.compression!r}")

        _check_size(self.rotation_size)

    @property
    def log_path(self) -> Path:
        return Path(self.log_dir) / self.app_log_name

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LogConfig":
        """Build from settings, dropping keys that are not settings."""
        settable = {f.name for f in fields(cls) if f.name != "load_warnings"}
        return cls(**{k: v for k, v in data.items() if k in settable})


def _read_settings_file(path: Path, warnings: List[str]) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        warnings.append(f"Ignoring unreadable log settings {path}: {e}")
        return {}
    if not isinstance(data, dict):
        warnings.append(f"Ignoring log settings {path}: expected a JSON object")
        return {}
    return data


def _env_settings() -> Dict[str, Any]:
    settings: Dict[str, Any] = {}
    for suffix, name in ENV_FIELDS.items():
        value = os.environ.get(ENV_PREFIX + suffix)
        if value is None:
            continue
        if name in ("json_logs", "console_enabled"):
            settings[name] = value.lower() in _TRUTHY
        elif name == "compression":
            settings[name] = None if value.lower() in ("", "none") else value
        else:
            settings[name] = value
    return settings


def load_log_config() -> LogConfig:
    """
    Load logging settings from the settings file and the environment.

    Raises:
        InvalidConfigError: If a setting has an invalid value.
    """
    warnings: List[str] = []
    settings = _read_settings_file(CONFIG_FILE, warnings)
    settings.update(_env_settings())

    try:
        config = LogConfig.from_dict(settings)
    except (TypeError, ValueError) as e:
        raise InvalidConfigError(f"Invalid logging configuration: {e}", {"file": str(CONFIG_FILE)}) from e

    config.load_warnings = warnings
    return config


def get_log_config() -> LogConfig:
    """Loaded settings, cached after the first call."""
    global _cached_config
    if _cached_config is None:
        _cached_config = load_log_config()
    return _cached_config


def reset_log_config() -> None:
    global _cached_config
    _cached_config = None


_cached_config: Optional[LogConfig] = None
