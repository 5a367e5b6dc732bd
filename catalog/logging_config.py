"""Настройка loguru по секции ``logging`` из настроек."""

from __future__ import annotations

import sys
from typing import Any

from loguru import logger

from config.settings import LoggingSettings

TEXT_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level:<7} | {name}:{function} | {message}"
JSON_FORMAT = (
    "{{\"time\":\"{time:YYYY-MM-DDTHH:mm:ss}\","
    "\"level\":\"{level}\","
    "\"logger\":\"{name}\","
    "\"message\":\"{message}\"}}"
)


def setup_logging(settings: LoggingSettings, sink: Any = None) -> int:
    """Заменяет все sink'и одним; возвращает его id для ``logger.remove``."""

    logger.remove()
    return logger.add(
        sink if sink is not None else sys.stdout,
        format=JSON_FORMAT if settings.json_format else TEXT_FORMAT,
        level=settings.level.upper(),
        colorize=False if settings.json_format else None,
        backtrace=False,
        enqueue=True,
    )


__all__ = ["setup_logging"]
