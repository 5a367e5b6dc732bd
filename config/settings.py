"""Глобальные настройки каталога токенов.

Настройки разделены по доменам (БД, кеш, каталог, логирование), все значения
загружаются из переменных окружения через Pydantic Settings. Вложенные секции
задаются через разделитель ``__``, например ``CACHE__TVL_TTL_SECONDS=10``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, PositiveFloat, PositiveInt, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent
ACCESSIBLE_ENV_FILE = BASE_DIR / "config" / "runtime.env"
DEFAULT_ENV_FILE = BASE_DIR / ".env"
ENV_FILE = ACCESSIBLE_ENV_FILE if ACCESSIBLE_ENV_FILE.exists() else DEFAULT_ENV_FILE


class DatabaseSettings(BaseModel):
    """SQLModel + aiosqlite (по умолчанию) и готовность к Postgres."""

    dsn: str = Field(
        "sqlite+aiosqlite:///./database/catalog.db",
        description="Строка подключения SQLAlchemy/SQLModel",
    )
    echo: bool = False


class CacheSettings(BaseModel):
    """Настройки кеша TVL (aiocache поддерживает memory / redis)."""

    backend: Literal["memory", "redis"] = "memory"
    tvl_ttl_seconds: PositiveFloat = 5.0
    redis_dsn: str | None = None


class CatalogSettings(BaseModel):
    """Пагинация и нативный актив сети."""

    default_page_size: PositiveInt = 10
    max_page_size: PositiveInt = 100
    native_token_address: str = "0x000000000000000000000000000000000000800a"
    native_token_l1_address: str = "0x0000000000000000000000000000000000000000"
    native_token_symbol: str = "ETH"
    native_token_name: str = "Ether"
    native_token_decimals: int = Field(18, ge=0)
    native_token_icon_url: str = (
        "https://assets.coingecko.com/coins/images/279/large/ethereum.png?1698873266"
    )

    @field_validator("native_token_address", "native_token_l1_address")
    @classmethod
    def _lower_address(cls, value: str) -> str:
        return value.strip().lower()


class LoggingSettings(BaseModel):
    level: str = "INFO"
    json_format: bool = False


class AppSettings(BaseSettings):
    """Главный контейнер настроек каталога."""

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE),
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    environment: Literal["dev", "prod"] = "dev"
    database: DatabaseSettings = DatabaseSettings()
    cache: CacheSettings = CacheSettings()
    catalog: CatalogSettings = CatalogSettings()
    logging: LoggingSettings = LoggingSettings()

    @property
    def is_production(self) -> bool:
        """True, если сервис запущен в продовой среде."""

        return self.environment == "prod"


# Ленивый синглтон (избегаем глобальных переменных в модулях).
_settings: AppSettings | None = None


def get_settings() -> AppSettings:
    """Возвращает единый экземпляр настроек.

    Значения кэшируются, поэтому .env читается ровно один раз за процесс.
    """

    global _settings
    if _settings is None:
        _settings = AppSettings()
    return _settings


__all__ = [
    "AppSettings",
    "CacheSettings",
    "CatalogSettings",
    "DatabaseSettings",
    "LoggingSettings",
    "get_settings",
]
