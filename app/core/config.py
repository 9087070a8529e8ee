from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Literal

AppEnv = Literal["dev", "test", "prod"]
LogLevel = Literal["debug", "info", "warning", "error"]

_TRUTHY = ("1", "true", "yes", "on")


def _getenv(name: str, default: str) -> str:
    # Centralize env access so it’s easy to extend later (type casting, required vars)
    return os.environ.get(name, default).strip()


@dataclass(frozen=True)
class Settings:
    app_env: AppEnv
    log_level: LogLevel
    log_json: bool
    port: int
    database_url: str | None
    cors_origins: tuple[str, ...]
    default_course_price: float
    currency: str

    @property
    def is_dev(self) -> bool:
        return self.app_env == "dev"

    @property
    def is_test(self) -> bool:
        return self.app_env == "test"

    @property
    def is_prod(self) -> bool:
        return self.app_env == "prod"


def load_settings() -> Settings:
    app_env_raw = _getenv("APP_ENV", "dev").lower()
    log_level_raw = _getenv("LOG_LEVEL", "info").lower()
    port_raw = _getenv("PORT", "8000")
    price_raw = _getenv("DEFAULT_COURSE_PRICE", "399.0")

    if app_env_raw not in ("dev", "test", "prod"):
        raise ValueError(f"APP_ENV must be dev|test|prod (got {app_env_raw!r})")

    if log_level_raw not in ("debug", "info", "warning", "error"):
        raise ValueError(
            f"LOG_LEVEL must be debug|info|warning|error (got {log_level_raw!r})"
        )

    try:
        port = int(port_raw)
    except ValueError:
        raise ValueError(f"PORT must be an integer (got {port_raw!r})") from None

    try:
        default_course_price = float(price_raw)
    except ValueError:
        raise ValueError(
            f"DEFAULT_COURSE_PRICE must be a number (got {price_raw!r})"
        ) from None
    if default_course_price < 0:
        raise ValueError(
            f"DEFAULT_COURSE_PRICE must not be negative (got {price_raw!r})"
        )

    currency = _getenv("CURRENCY", "INR").upper()
    if not currency:
        raise ValueError("CURRENCY must be non-empty")

    cors_origins = tuple(
        o.strip() for o in _getenv("CORS_ORIGINS", "*").split(",") if o.strip()
    )

    return Settings(  # type: ignore[arg-type]
        app_env=app_env_raw,
        log_level=log_level_raw,
        log_json=_getenv("LOG_JSON", "false").lower() in _TRUTHY,
        port=port,
        database_url=_getenv("DATABASE_URL", "") or None,
        cors_origins=cors_origins or ("*",),
        default_course_price=default_course_price,
        currency=currency,
    )


# Optional: module-level singleton so imports are cheap
SETTINGS = load_settings()
