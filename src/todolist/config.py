"""Configuration management for todolist."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

TODOLIST_HOME = Path(os.environ.get("TODOLIST_HOME", Path.home() / ".todolist"))
CONFIG_FILE = TODOLIST_HOME / "config" / "todolist.conf"

PRIORITIES = ("low", "medium", "high")
FILTERS = ("all", "active", "completed")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """Session defaults."""

    default_priority: str = "medium"
    default_filter: str = "all"
    date_format: str = "%d %b"
    log_level: str = "WARNING"


def _unquote(value: str) -> str:
    """Strip surrounding quotes, or an inline comment from an unquoted value."""
    if value.startswith('"') or value.startswith("'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def _choice(key: str, value: str, allowed: tuple[str, ...], default: str) -> str:
    if value in allowed:
        return value
    logger.warning(f"Invalid {key.upper()} {value!r}, using {default!r}")
    return default


def load_config(path: Path | None = None) -> Config:
    """Load configuration from todolist.conf file."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "default_priority":
                config.default_priority = _choice(key, value.lower(), PRIORITIES, config.default_priority)
            case "default_filter":
                config.default_filter = _choice(key, value.lower(), FILTERS, config.default_filter)
            case "date_format":
                config.date_format = value
            case "log_level":
                config.log_level = _choice(key, value.upper(), LOG_LEVELS, config.log_level)

    return config
