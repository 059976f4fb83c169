"""Общие фикстуры для тестов."""

from typing import Iterator

import pytest

from mailaddr.config import get_settings

ENV_KEYS = (
    "MAILADDR_MINIMUM_SUB_DOMAINS",
    "MAILADDR_REQUIRE_TLD",
    "MAILADDR_ALLOW_DOMAIN_LITERAL",
    "MAILADDR_ALLOW_DISPLAY_TEXT",
    "MAILADDR_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def default_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Очищает переменные окружения и кэш настроек перед каждым тестом."""
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()  # type: ignore[attr-defined]
    yield
    get_settings.cache_clear()  # type: ignore[attr-defined]
