"""Environment configuration for date-tasks.

Settings are read from environment variables prefixed with ``DATE_TASKS_``
(and a ``.env`` file when present):

```bash
export DATE_TASKS_LOCAL_TIMEZONE="Europe/London"
export DATE_TASKS_LOG_LEVEL=DEBUG
export DATE_TASKS_LOG_JSON=true
```

they are rendered to the AppConfig class and can be accessed like this:

```python
from date_tasks.config import load_config
cfg = load_config()
print(cfg.local_tzinfo)
```
"""

from __future__ import annotations

import logging
from datetime import tzinfo
from functools import lru_cache
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LocalZoneSettings(BaseSettings):
    """The one setting the parsers read: DATE_TASKS_LOCAL_TIMEZONE."""

    local_timezone: Optional[str] = Field(
        default=None,
        description="IANA zone for local-time construction; system local when unset",
    )

    # pydantic-settings v2 config
    model_config = SettingsConfigDict(
        env_prefix="DATE_TASKS_",
        case_sensitive=False,
        env_file=(".env",),  # will read if present
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,  # make settings immutable
    )

    @field_validator("local_timezone", mode="before")
    @classmethod
    def _check_zone(cls, v):
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        try:
            ZoneInfo(str(v).strip())
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown timezone: {v}") from exc
        return str(v).strip()

    @property
    def local_tzinfo(self) -> Optional[tzinfo]:
        """Zone used for local wall-clock construction, None for system local."""
        if self.local_timezone:
            return ZoneInfo(self.local_timezone)
        return None


class AppConfig(LocalZoneSettings):
    """Application configuration settings loaded from environment variables.

    All environment variables are prefixed with DATE_TASKS_ (e.g.,
    DATE_TASKS_LOCAL_TIMEZONE).
    """

    # ---- logging ----
    log_level: str = Field(
        default="WARNING", description="Level applied to the date_tasks logger"
    )
    log_json: bool = Field(
        default=False, description="Render log lines as JSON instead of console text"
    )

    # ---- validators ----
    @field_validator("log_level", mode="before")
    @classmethod
    def _check_level(cls, v):
        name = str(v).strip().upper()
        if name not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return name

    # ---- derived conveniences (no mutation) ----
    @property
    def log_level_number(self) -> int:
        return logging.getLevelNamesMapping()[self.log_level]


def load_config() -> AppConfig:
    """Load and validate application configuration from environment variables.

    • All variables are prefixed with DATE_TASKS_ (e.g., DATE_TASKS_LOG_LEVEL).
    • Missing values fall back to the documented defaults.
    """
    return AppConfig()


@lru_cache(maxsize=1)
def default_local_zone() -> Optional[tzinfo]:
    """Configured local zone, read once per process.

    Only DATE_TASKS_LOCAL_TIMEZONE is consulted, so logging settings never
    affect parsing. Call ``default_local_zone.cache_clear()`` after changing
    the environment.
    """
    return LocalZoneSettings().local_tzinfo
