"""Configuration helpers for date-tasks.

Exposes `load_config`, which reads environment variables and returns a
typed `AppConfig` instance, and the structlog setup functions.
"""

from .env import AppConfig, LocalZoneSettings, default_local_zone, load_config
from .logging import configure_logging, configure_logging_from_config

__all__ = [
    "AppConfig",
    "LocalZoneSettings",
    "default_local_zone",
    "load_config",
    "configure_logging",
    "configure_logging_from_config",
]
