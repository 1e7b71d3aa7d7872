from __future__ import annotations

import os
from dataclasses import dataclass

from loe_status.core.constants import DEFAULT_TIMEZONE


@dataclass(frozen=True)
class Settings:
    app_host: str = "0.0.0.0"
    app_port: int = 8000
    log_level: str = "INFO"

    timezone_name: str = DEFAULT_TIMEZONE
    default_group: str = "1.2"

    enable_metrics: bool = True


def _env(name: str, default: str) -> str:
    value = os.getenv(name, "").strip()
    return value or default


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name, "").strip().lower()
    if not value:
        return default
    return value in {"1", "true", "yes", "on"}


def load_settings() -> Settings:
    defaults = Settings()
    return Settings(
        app_host=_env("APP_HOST", defaults.app_host),
        app_port=int(_env("APP_PORT", str(defaults.app_port))),
        log_level=_env("LOG_LEVEL", defaults.log_level).upper(),
        timezone_name=_env("TIMEZONE", defaults.timezone_name),
        default_group=_env("DEFAULT_GROUP", defaults.default_group),
        enable_metrics=_env_flag("ENABLE_METRICS", defaults.enable_metrics),
    )
