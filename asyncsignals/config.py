"""
asyncsignals Configuration Module

Centralized configuration from environment variables.
Controls how signals notify their subscribers and how the package logs.
"""

import logging
import os
from typing import Optional

from pydantic import BaseModel, field_validator


_TRUTHY = ("true", "1", "yes")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class NotificationConfig(BaseModel):
    """Subscriber notification behaviour for every Signal."""
    skip_equal: bool = True
    notify_on_subscribe: bool = True
    raise_subscriber_errors: bool = False


class AsyncSignalsConfig(BaseModel):
    """Main configuration container."""
    notifications: NotificationConfig
    debug: bool = False
    log_level: str = "INFO"
    
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = v.upper()
        if v not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return v


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in _TRUTHY


def load_config() -> AsyncSignalsConfig:
    """
    Load configuration from environment variables.
    
    Environment Variables:
        ASYNCSIGNALS_SKIP_EQUAL: Skip notifying when an equal value is set (default: true)
        ASYNCSIGNALS_NOTIFY_ON_SUBSCRIBE: Call new listeners with the current value (default: true)
        ASYNCSIGNALS_RAISE_SUBSCRIBER_ERRORS: Re-raise listener failures (default: false)
        ASYNCSIGNALS_DEBUG: Enable debug mode (default: false)
        ASYNCSIGNALS_LOG_LEVEL: Log level (default: INFO)
    """
    notifications = NotificationConfig(
        skip_equal=_env_flag("ASYNCSIGNALS_SKIP_EQUAL", "true"),
        notify_on_subscribe=_env_flag("ASYNCSIGNALS_NOTIFY_ON_SUBSCRIBE", "true"),
        raise_subscriber_errors=_env_flag("ASYNCSIGNALS_RAISE_SUBSCRIBER_ERRORS", "false"),
    )
    
    return AsyncSignalsConfig(
        notifications=notifications,
        debug=_env_flag("ASYNCSIGNALS_DEBUG", "false"),
        log_level=os.getenv("ASYNCSIGNALS_LOG_LEVEL", "INFO"),
    )


# Singleton config instance
_config: Optional[AsyncSignalsConfig] = None


def get_config() -> AsyncSignalsConfig:
    """Get the global configuration (lazy-loaded singleton)."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Reset configuration (useful for testing)."""
    global _config
    _config = None


def configure_logging(config: Optional[AsyncSignalsConfig] = None) -> None:
    """Apply the configured log level with the standard format."""
    config = config or get_config()
    level = "DEBUG" if config.debug else config.log_level
    logging.basicConfig(level=level, format=LOG_FORMAT)
