"""Разбор адреса: выделение display-name, local-part и домена."""

from __future__ import annotations

import logging
from typing import Tuple

from mailaddr.modules.charclass import (
    is_alphanumeric,
    is_atom,
    is_dot_atom_text,
    is_dtext,
    is_qcontent,
)
from mailaddr.modules.constants import (
    AT,
    DISPLAY_END,
    DISPLAY_SEP,
    DISPLAY_START,
    DOMAIN_MAX_LENGTH,
    DOT,
    DQUOTE,
    LBRACKET,
    LOCAL_PART_MAX_LENGTH,
    RBRACKET,
    SUB_DOMAIN_MAX_LENGTH,
)
from mailaddr.modules.errors import EmailAddressError, ErrorKind
from mailaddr.modules.options import DEFAULT_OPTIONS, Options

LOGGER = logging.getLogger("mailaddr.parser")


def split_display_email(text: str) -> Tuple[str, str]:
    """Отделяет display-name от адреса в форме ``Name <addr>``."""
    display, sep, rest = text.rpartition(DISPLAY_SEP)
    if not sep:
        return "", text
    enclosed = rest.strip()
    if not enclosed.endswith(DISPLAY_END):
        raise EmailAddressError(ErrorKind.MISSING_END_BRACKET)
    return display.strip(), enclosed[: -len(DISPLAY_END)]


def split_at(email: str) -> Tuple[str, str]:
    """Делит адрес по последнему символу ``@``."""
    local_part, sep, domain = email.rpartition(AT)
    if not sep:
        raise EmailAddressError(ErrorKind.MISSING_SEPARATOR)
    return local_part, domain


def split_parts(text: str) -> Tuple[str, str, str]:
    """Возвращает ``(local_part, domain, display_name)`` без проверки грамматики."""
    display, email = split_display_email(text)
    local_part, domain = split_at(email)
    return local_part, domain, display


def check_display(local_part: str, display: str, options: Options = DEFAULT_OPTIONS) -> None:
    """Сверяет наличие display-name с настройками."""
    if not display:
        if local_part.startswith(DISPLAY_START):
            if not options.allow_display_text:
                raise EmailAddressError(ErrorKind.INVALID_CHARACTER)
            raise EmailAddressError(ErrorKind.MISSING_DISPLAY_NAME)
    elif not options.allow_display_text:
        raise EmailAddressError(ErrorKind.UNSUPPORTED_DISPLAY_NAME)


def parse_local_part(part: str, options: Options = DEFAULT_OPTIONS) -> None:
    """Проверяет local-part в форме dot-atom или quoted-string."""
    if not part:
        raise EmailAddressError(ErrorKind.LOCAL_PART_EMPTY)
    if len(part) > LOCAL_PART_MAX_LENGTH:
        raise EmailAddressError(ErrorKind.LOCAL_PART_TOO_LONG)
    if part.startswith(DQUOTE) and part.endswith(DQUOTE):
        # <= 2 покрывает и одиночную кавычку
        if len(part) <= 2:
            raise EmailAddressError(ErrorKind.LOCAL_PART_EMPTY)
        if not is_qcontent(part[1:-1]):
            raise EmailAddressError(ErrorKind.INVALID_CHARACTER)
        return
    if not is_dot_atom_text(part):
        raise EmailAddressError(ErrorKind.INVALID_CHARACTER)


def parse_domain(part: str, options: Options = DEFAULT_OPTIONS) -> None:
    """Проверяет домен: текстовый (метки через точку) или domain-literal."""
    if not part:
        raise EmailAddressError(ErrorKind.DOMAIN_EMPTY)
    if len(part) > DOMAIN_MAX_LENGTH:
        raise EmailAddressError(ErrorKind.DOMAIN_TOO_LONG)
    if part.startswith(LBRACKET) and part.endswith(RBRACKET):
        if not options.allow_domain_literal:
            raise EmailAddressError(ErrorKind.UNSUPPORTED_DOMAIN_LITERAL)
        _parse_literal_domain(part[1:-1])
        return
    _parse_text_domain(part, options)


def _parse_text_domain(part: str, options: Options) -> None:
    sub_domains = 0
    for label in part.split(DOT):
        if not label:
            raise EmailAddressError(ErrorKind.SUB_DOMAIN_EMPTY)
        # метка начинается и заканчивается let-dig (RFC 1034 3.5, WHATWG)
        if not is_alphanumeric(label[0]) or not is_alphanumeric(label[-1]):
            raise EmailAddressError(ErrorKind.INVALID_CHARACTER)
        if len(label) > SUB_DOMAIN_MAX_LENGTH:
            raise EmailAddressError(ErrorKind.SUB_DOMAIN_TOO_LONG)
        if not is_atom(label):
            raise EmailAddressError(ErrorKind.INVALID_CHARACTER)
        sub_domains += 1
    if sub_domains < options.minimum_sub_domains:
        raise EmailAddressError(ErrorKind.DOMAIN_TOO_FEW)


def _parse_literal_domain(part: str) -> None:
    # Содержимое не проверяется как IPv4/IPv6, достаточно dtext.
    if not all(is_dtext(c) for c in part):
        raise EmailAddressError(ErrorKind.INVALID_CHARACTER)


def validate_address(text: str, options: Options = DEFAULT_OPTIONS) -> Tuple[str, str, str]:
    """Полная проверка адреса, возвращает ``(local_part, domain, display_name)``."""
    try:
        local_part, domain, display = split_parts(text)
        check_display(local_part, display, options)
        parse_local_part(local_part, options)
        parse_domain(domain, options)
    except EmailAddressError as exc:
        LOGGER.debug("Адрес %r отклонён: %s", text, exc.kind.value)
        raise
    return local_part, domain, display
