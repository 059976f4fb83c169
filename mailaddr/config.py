"""Загрузка настроек командной строки из переменных окружения."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from mailaddr.modules.options import Options


@dataclass(frozen=True)
class ParsingSettings:
    """Параметры грамматики по умолчанию."""

    minimum_sub_domains: int
    allow_domain_literal: bool
    allow_display_text: bool

    def options(self) -> Options:
        """Формирует ``Options`` для разбора адресов."""
        return Options(
            minimum_sub_domains=self.minimum_sub_domains,
            allow_domain_literal=self.allow_domain_literal,
            allow_display_text=self.allow_display_text,
        )


@dataclass(frozen=True)
class Settings:
    """Глобальные настройки приложения."""

    log_level: int
    parsing: ParsingSettings

    def options(self) -> Options:
        return self.parsing.options()


def _env(key: str, default: str = "") -> str:
    """Возвращает значение переменной окружения или значение по умолчанию."""
    return os.getenv(key, default).strip()


def _env_bool(key: str, default: bool = False) -> bool:
    value = os.getenv(key)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(key: str, default: int) -> int:
    value = _env(key)
    if not value:
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise ValueError(f"{key} must be an integer, got {value!r}") from exc


def _log_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {name!r}")
    return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Загружает настройки один раз и кэширует их для повторного использования."""
    minimum_sub_domains = max(_env_int("MAILADDR_MINIMUM_SUB_DOMAINS", 0), 0)
    if _env_bool("MAILADDR_REQUIRE_TLD"):
        minimum_sub_domains = max(minimum_sub_domains, 2)

    parsing = ParsingSettings(
        minimum_sub_domains=minimum_sub_domains,
        allow_domain_literal=_env_bool("MAILADDR_ALLOW_DOMAIN_LITERAL", True),
        allow_display_text=_env_bool("MAILADDR_ALLOW_DISPLAY_TEXT", True),
    )

    return Settings(
        log_level=_log_level(_env("MAILADDR_LOG_LEVEL", "INFO")),
        parsing=parsing,
    )
