"""
Centralized configuration module for application-wide settings.

Every value is read from the environment at call time so tests can
override it with monkeypatch. A local `.env` file is honored through
python-dotenv; variables already present in the environment win.
"""

import logging
import os
from typing import Any, Dict

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

load_dotenv(override=False)

TRUTHY_VALUES = ("true", "1", "yes", "on")

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_DIR = "logs"
DEFAULT_DIP_DATABASE_URL = "sqlite:///:memory:"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 5000

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in TRUTHY_VALUES


# ===========================
# Logging Configuration
# ===========================


def get_log_level() -> str:
    """
    Get the log level name from environment variable.

    Environment Variables:
        LOG_LEVEL: One of DEBUG, INFO, WARNING, ERROR, CRITICAL
            Default: 'INFO'

    Examples:
        >>> # In .env file:
        >>> # LOG_LEVEL=DEBUG
        >>> get_log_level()
        'DEBUG'
    """
    level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    if level not in VALID_LOG_LEVELS:
        logger.warning(
            f"Invalid log level '{level}' specified in LOG_LEVEL. "
            f"Falling back to {DEFAULT_LOG_LEVEL}."
        )
        return DEFAULT_LOG_LEVEL
    return level


def get_log_json() -> bool:
    """Whether console logs are emitted as JSON (LOG_JSON, default off)."""
    return _env_flag("LOG_JSON")


def get_log_to_file() -> bool:
    """Whether rotating log files are written (LOG_TO_FILE, default off)."""
    return _env_flag("LOG_TO_FILE")


def get_log_dir() -> str:
    """Directory for rotating log files (LOG_DIR, default './logs')."""
    return os.getenv("LOG_DIR", DEFAULT_LOG_DIR)


# ===========================
# DIP Example Configuration
# ===========================


def get_dip_database_url() -> str:
    """
    Get the database URL used by the SQLAlchemy-backed employee store.

    Environment Variables:
        DIP_DATABASE_URL: Any SQLAlchemy URL
            Default: 'sqlite:///:memory:' (nothing written to disk)
    """
    return os.getenv("DIP_DATABASE_URL", DEFAULT_DIP_DATABASE_URL)


# ===========================
# Server Configuration
# ===========================


def get_host() -> str:
    return os.getenv("HOST", DEFAULT_HOST)


def get_port() -> int:
    """
    Get the HTTP port from environment variable.

    Falls back to 5000 when PORT is missing or not a valid port number.
    """
    raw = os.getenv("PORT")
    if raw is None:
        return DEFAULT_PORT
    try:
        port = int(raw)
    except ValueError:
        logger.warning(
            f"Invalid port '{raw}' specified in PORT. Falling back to {DEFAULT_PORT}."
        )
        return DEFAULT_PORT
    if not 0 < port < 65536:
        logger.warning(
            f"Port {port} out of range. Falling back to {DEFAULT_PORT}."
        )
        return DEFAULT_PORT
    return port


def load_settings() -> Dict[str, Any]:
    """Collect every setting into a dict suitable for Flask's app.config."""
    return {
        "LOG_LEVEL": get_log_level(),
        "LOG_JSON": get_log_json(),
        "LOG_TO_FILE": get_log_to_file(),
        "LOG_DIR": get_log_dir(),
        "DIP_DATABASE_URL": get_dip_database_url(),
        "HOST": get_host(),
        "PORT": get_port(),
    }


def log_config(settings: Dict[str, Any]) -> None:
    """
    Log the active configuration.

    Should be called during application startup to provide visibility
    into the settings being used.
    """
    logger.info(
        "Configuration initialized",
        extra={"context": dict(settings)},
    )
