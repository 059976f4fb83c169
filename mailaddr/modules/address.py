"""Проверенный e-mail адрес и его представления."""

from __future__ import annotations

from typing import Tuple

from mailaddr.modules.constants import AT
from mailaddr.modules.errors import EmailAddressError
from mailaddr.modules.options import DEFAULT_OPTIONS, Options
from mailaddr.modules.parser import parse_domain, parse_local_part, split_parts, validate_address
from mailaddr.modules.utils.uri import strip_mailto, to_mailto


class EmailAddress:
    """Адрес, прошедший проверку синтаксиса.

    Хранит исходный текст целиком (вместе с display-name) и вычисляет
    local-part, домен и остальные представления по запросу. Local-part
    сравнивается с учётом регистра (RFC 5321 2.4), домен — без учёта.
    Настройки разбора в объекте не сохраняются.
    """

    __slots__ = ("_text",)

    def __init__(self, text: str, options: Options | None = None) -> None:
        if not isinstance(text, str):
            raise TypeError(f"EmailAddress expects str, got {type(text).__name__}")
        validate_address(text, options or DEFAULT_OPTIONS)
        object.__setattr__(self, "_text", text)

    @classmethod
    def parse(cls, text: str, options: Options | None = None) -> "EmailAddress":
        """Проверяет ``text`` и возвращает адрес или бросает ``EmailAddressError``."""
        return cls(text, options)

    @classmethod
    def new_unchecked(cls, text: str) -> "EmailAddress":
        """Создаёт адрес без проверки. Только для заведомо корректных значений."""
        instance = cls.__new__(cls)
        object.__setattr__(instance, "_text", text)
        return instance

    @classmethod
    def from_uri(cls, uri: str, options: Options | None = None) -> "EmailAddress":
        """Разбирает URI ``mailto:``, полученный, например, из ``to_uri``."""
        return cls(strip_mailto(uri), options)

    @staticmethod
    def is_valid(text: str, options: Options | None = None) -> bool:
        try:
            validate_address(text, options or DEFAULT_OPTIONS)
        except EmailAddressError:
            return False
        return True

    @staticmethod
    def is_valid_local_part(part: str) -> bool:
        try:
            parse_local_part(part)
        except EmailAddressError:
            return False
        return True

    @staticmethod
    def is_valid_domain(part: str, options: Options | None = None) -> bool:
        try:
            parse_domain(part, options or DEFAULT_OPTIONS)
        except EmailAddressError:
            return False
        return True

    def _parts(self) -> Tuple[str, str, str]:
        return split_parts(self._text)

    @property
    def local_part(self) -> str:
        return self._parts()[0]

    @property
    def domain(self) -> str:
        return self._parts()[1]

    @property
    def display_part(self) -> str:
        """Display-name без окружающих пробелов или пустая строка."""
        return self._parts()[2]

    @property
    def email(self) -> str:
        """Адрес без обёртки ``Name <...>``."""
        local_part, domain, _ = self._parts()
        return f"{local_part}{AT}{domain}"

    def as_str(self) -> str:
        return self._text

    def to_uri(self) -> str:
        """URI вида ``mailto:name@example.org`` с кодированием зарезервированных символов."""
        return to_mailto(self.email)

    def to_display(self, display_name: str) -> str:
        """Строка ``Name <email>`` для заголовков письма."""
        return f"{display_name} <{self.email}>"

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"EmailAddress({self._text!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EmailAddress):
            return NotImplemented
        return self._comparison_key() == other._comparison_key()

    def __hash__(self) -> int:
        return hash(self._comparison_key())

    def _comparison_key(self) -> Tuple[str, str]:
        local_part, domain, _ = self._parts()
        return local_part, domain.lower()

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (EmailAddress.new_unchecked, (self._text,))


def parse_address(text: str, options: Options | None = None) -> EmailAddress:
    """Сокращение для ``EmailAddress.parse``."""
    return EmailAddress.parse(text, options)
