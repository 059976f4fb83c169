"""Сериализация адресов в JSON и обратно."""

from __future__ import annotations

import json
import logging
from typing import Any

from mailaddr.modules.address import EmailAddress
from mailaddr.modules.errors import EmailAddressError
from mailaddr.modules.options import Options

LOGGER = logging.getLogger("mailaddr.serialization")


class DeserializationError(ValueError):
    """Значение не удалось превратить в корректный адрес."""


class EmailAddressJSONEncoder(json.JSONEncoder):
    """Кодирует ``EmailAddress`` как обычную строку."""

    def default(self, o: Any) -> Any:
        if isinstance(o, EmailAddress):
            return o.as_str()
        return super().default(o)


def serialize_address(address: EmailAddress) -> str:
    return address.as_str()


def deserialize_address(value: Any, options: Options | None = None) -> EmailAddress:
    """Восстанавливает адрес из строки с полной повторной проверкой."""
    if not isinstance(value, str):
        raise DeserializationError(
            f"invalid type: {type(value).__name__}, expected a string"
        )
    try:
        return EmailAddress.parse(value, options)
    except EmailAddressError as exc:
        LOGGER.debug("Не удалось десериализовать адрес %r: %s", value, exc.kind.value)
        raise DeserializationError(
            f'invalid value: string "{value}", expected {exc.kind.message}'
        ) from exc


def dumps_address(address: EmailAddress) -> str:
    """Возвращает JSON-строку с адресом."""
    return json.dumps(serialize_address(address), ensure_ascii=False)


def loads_address(payload: str | bytes, options: Options | None = None) -> EmailAddress:
    """Читает адрес из JSON-документа, содержащего одну строку."""
    try:
        value = json.loads(payload)
    except json.JSONDecodeError as exc:
        raise DeserializationError(f"invalid JSON: {exc.msg}") from exc
    return deserialize_address(value, options)
