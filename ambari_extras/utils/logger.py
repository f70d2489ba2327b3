"""
Centralized logging for ambari-extras.

Provides:
- Configurable log levels and rotation
- Sensitive data redaction
- Multiple output targets (file, console)

The library itself stays silent until an application calls
``setup_logger`` (the CLI does) or ``logger.enable("ambari_extras")``.
Configuration is loaded from ~/.ambari-extras/log_config.json or
environment variables, see log_config.py.
"""
import json
import os
import sys
from pathlib import Path
from typing import Any, Optional

from loguru import logger

from ambari_extras.utils.security import redact_sensitive_info


def use_emoji_logs() -> bool:
    """
    Check if emoji prefixes should be used in log messages.

    Returns True unless USE_EMOJI_LOGS environment variable is set to "0" or "false".
    """
    value = os.environ.get("USE_EMOJI_LOGS", "1").lower()
    return value not in ("0", "false", "no", "off")


_EMOJI_TO_ASCII = {
    "🔗": "[MAP]",
    "🧩": "[EXT]",
    "🚀": "[DEPLOY]",
    "⏭️": "[SKIP]",
    "🛡️": "[RANGER]",
    "📄": "[FILE]",
    "📐": "[BLUEPRINT]",
    "⚠️": "[WARN]",
    "✅": "[OK]",
    "❌": "[ERROR]",
}


def log_prefix(emoji: str) -> str:
    """
    Return the appropriate log prefix based on USE_EMOJI_LOGS setting.

    Args:
        emoji: The emoji to use when emoji logs are enabled.

    Returns:
        The emoji if USE_EMOJI_LOGS is enabled, otherwise the ASCII equivalent
        (or empty string if no mapping exists).
    """
    if use_emoji_logs():
        return emoji
    return _EMOJI_TO_ASCII.get(emoji, "")


def _get_log_config():
    """Get log configuration (lazy import to avoid circular deps)."""
    from ambari_extras.utils.log_config import get_log_config
    return get_log_config()


def redaction_patcher(record) -> None:
    """Redact secrets from every log message before it reaches a sink."""
    try:
        record["message"] = redact_sensitive_info(record["message"])
    except Exception:
        record["message"] = "[REDACTED]"


def setup_logger(verbose: bool = False, config: Optional[Any] = None) -> None:
    """
    Configure loguru sinks for ambari-extras.

    Rules:
    1. FILE: Always log to the configured log file (rotated).
    2. CONSOLE: Log to stderr when verbose (DEBUG+) or when enabled in config.

    Args:
        verbose: Enable DEBUG console logging
        config: Optional LogConfig override (for testing)

    Raises:
        InvalidConfigError: If the stored or environment settings are invalid.
    """
    if config is None:
        config = _get_log_config()

    logger.remove()

    log_dir = Path(config.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    def format_record(record):
        """Format a file log record, as JSON when configured."""
        if config.json_logs:
            log_entry = {
                "timestamp": record["time"].isoformat(),
                "level": record["level"].name,
                "message": record["message"],
                "module": record["name"],
                "function": record["function"],
                "line": record["line"],
            }
            # Escape braces: loguru formats the returned string again
            return json.dumps(log_entry).replace("{", "{{").replace("}", "}}") + "\n"
        return "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}\n"

    logger.add(
        log_dir / config.app_log_name,
        rotation=config.rotation_size,
        retention=config.retention,
        level=config.file_level,
        format=format_record,
        compression=config.compression,
        enqueue=True,
    )

    if verbose or config.console_enabled:
        console_format = (
            "<green>{time:HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        )
        logger.add(
            sys.stderr,
            format=console_format,
            level="DEBUG" if verbose else config.console_level,
            colorize=True,
        )

    logger.configure(patcher=redaction_patcher)
    logger.enable("ambari_extras")

    for warning in getattr(config, "load_warnings", ()):
        logger.warning(f"{log_prefix('⚠️')} {warning}")


__all__ = ["log_prefix", "logger", "redaction_patcher", "setup_logger", "use_emoji_logs"]
