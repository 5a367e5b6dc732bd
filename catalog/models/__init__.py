"""SQLModel сущности каталога."""

from .token import (  # noqa: F401
    TVL_L1_ADDRESS,
    TVL_L2_ADDRESS,
    TVL_SYMBOL,
    Token,
    TokenBase,
    TokenTvl,
    build_native_token,
    build_tvl_record,
    normalize_address,
    resolve_native_token,
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
