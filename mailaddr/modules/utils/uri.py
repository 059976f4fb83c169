"""Представление адреса в виде URI ``mailto:``."""

from __future__ import annotations

from urllib.parse import unquote

from mailaddr.modules.constants import MAILTO_URI_PREFIX, URI_RESERVED


def encode_uri_component(value: str) -> str:
    """Процентно кодирует зарезервированные символы URI (кроме ``@``)."""
    return "".join(f"%{ord(c):02X}" if c in URI_RESERVED else c for c in value)


def to_mailto(email: str) -> str:
    return f"{MAILTO_URI_PREFIX}{encode_uri_component(email)}"


def strip_mailto(uri: str) -> str:
    """Убирает префикс ``mailto:`` и параметры ``?...``, затем декодирует адрес."""
    value = (uri or "").strip()
    if value[: len(MAILTO_URI_PREFIX)].lower() == MAILTO_URI_PREFIX:
        value = value[len(MAILTO_URI_PREFIX):]
    if "?" in value:
        value = value.split("?", 1)[0]
    return unquote(value)
