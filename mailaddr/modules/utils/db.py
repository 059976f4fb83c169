"""Хранение адресов в БД через SQLAlchemy."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import Text
from sqlalchemy.engine import Dialect
from sqlalchemy.types import TypeDecorator

from mailaddr.modules.address import EmailAddress
from mailaddr.modules.options import DEFAULT_OPTIONS, Options
from mailaddr.modules.serialization import deserialize_address, serialize_address

LOGGER = logging.getLogger("mailaddr.db")


class EmailAddressType(TypeDecorator):
    """Колонка, хранящая ``EmailAddress`` как текст.

    При записи строка проходит проверку, при чтении адрес проверяется заново
    с теми же настройками.
    """

    impl = Text
    cache_ok = True

    def __init__(self, options: Options | None = None, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.options = options or DEFAULT_OPTIONS

    def process_bind_param(self, value: Any, dialect: Dialect) -> str | None:
        if value is None:
            return None
        if isinstance(value, EmailAddress):
            return serialize_address(value)
        LOGGER.debug("Проверка адреса перед записью в БД: %r", value)
        return serialize_address(deserialize_address(value, self.options))

    def process_result_value(self, value: str | None, dialect: Dialect) -> EmailAddress | None:
        if value is None:
            return None
        return deserialize_address(value, self.options)

    @property
    def python_type(self) -> type:
        return EmailAddress
