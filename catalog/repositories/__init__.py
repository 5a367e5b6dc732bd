"""Репозитории для работы с БД."""

from .token_repo import (
    build_tokens_query,
    get_token_by_address,
    list_all_tokens,
    paginate_tokens,
    token_exists,
)

__all__ = [
    "build_tokens_query",
    "get_token_by_address",
    "list_all_tokens",
    "paginate_tokens",
    "token_exists",
]
