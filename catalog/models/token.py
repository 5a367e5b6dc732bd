"""Токены каталога и производные записи TVL."""

from __future__ import annotations

from typing import Optional

from sqlmodel import Field, SQLModel

from config.settings import CatalogSettings, get_settings
from .types import BigIntString

TVL_L2_ADDRESS = "0x1TVLTVLTVLTVLTVLTVLTVLTVLTVLTVLTVLTVLTVL"
TVL_L1_ADDRESS = "0x0TVLTVLTVLTVLTVLTVLTVLTVLTVLTVLTVLTVLTVL"
TVL_SYMBOL = "__TVL__"


def normalize_address(address: str) -> str:
    """Канонический вид адреса: без пробелов, в нижнем регистре."""

    return address.strip().lower()


class TokenBase(SQLModel):
    l2_address: str = Field(primary_key=True, max_length=42)
    l1_address: Optional[str] = Field(default=None, max_length=42, index=True)
    symbol: str = ""
    name: str = ""
    decimals: int = Field(default=0, ge=0)
    icon_url: Optional[str] = None
    liquidity: Optional[float] = Field(default=None, index=True)
    usd_price: Optional[float] = Field(default=None)
    total_supply: int = Field(default=0, sa_type=BigIntString, nullable=False)
    network_key: Optional[str] = Field(default=None, max_length=64, index=True)
    block_number: int = Field(default=0, index=True)
    log_index: int = Field(default=0)


class Token(TokenBase, table=True):
    """Запись каталога. Пишется только индексатором, здесь только читается."""

    __tablename__ = "tokens"


class TokenTvl(TokenBase):
    """Токен с вкладом в TVL (целое число в виде десятичной строки)."""

    tvl: str = "0"


def build_native_token(settings: CatalogSettings | None = None) -> Token:
    """Собирает синтетическую запись нативного актива.

    Каждый вызов возвращает новый объект, общий экземпляр не существует.
    """

    settings = settings or get_settings().catalog
    return Token(
        l2_address=settings.native_token_address,
        l1_address=settings.native_token_l1_address,
        symbol=settings.native_token_symbol,
        name=settings.native_token_name,
        decimals=settings.native_token_decimals,
        icon_url=settings.native_token_icon_url,
    )


def resolve_native_token(address: str, settings: CatalogSettings | None = None) -> Token | None:
    """Fallback для промаха в хранилище: нативный актив или ``None``."""

    settings = settings or get_settings().catalog
    if normalize_address(address) != normalize_address(settings.native_token_address):
        return None
    return build_native_token(settings)


def build_tvl_record(total: int) -> TokenTvl:
    """Итоговая запись TVL под зарезервированными адресами."""

    return TokenTvl(
        l2_address=TVL_L2_ADDRESS,
        l1_address=TVL_L1_ADDRESS,
        symbol=TVL_SYMBOL,
        name=TVL_SYMBOL,
        decimals=18,
        icon_url="",
        liquidity=0,
        usd_price=0,
        tvl=str(total),
    )


__all__ = [
    "TVL_L1_ADDRESS",
    "TVL_L2_ADDRESS",
    "TVL_SYMBOL",
    "Token",
    "TokenBase",
    "TokenTvl",
    "build_native_token",
    "build_tvl_record",
    "normalize_address",
    "resolve_native_token",
]
