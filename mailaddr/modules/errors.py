"""Перечень причин отказа при разборе адреса."""

from __future__ import annotations

from enum import Enum

from mailaddr.modules.constants import (
    AT,
    DOMAIN_MAX_LENGTH,
    DOT,
    LOCAL_PART_MAX_LENGTH,
    SUB_DOMAIN_MAX_LENGTH,
)


class ErrorKind(Enum):
    """Закрытый набор нарушений грамматики или настроек."""

    INVALID_CHARACTER = "InvalidCharacter"
    MISSING_SEPARATOR = "MissingSeparator"
    LOCAL_PART_EMPTY = "LocalPartEmpty"
    LOCAL_PART_TOO_LONG = "LocalPartTooLong"
    DOMAIN_EMPTY = "DomainEmpty"
    DOMAIN_TOO_LONG = "DomainTooLong"
    SUB_DOMAIN_EMPTY = "SubDomainEmpty"
    SUB_DOMAIN_TOO_LONG = "SubDomainTooLong"
    DOMAIN_TOO_FEW = "DomainTooFew"
    DOMAIN_INVALID_SEPARATOR = "DomainInvalidSeparator"
    UNBALANCED_QUOTES = "UnbalancedQuotes"
    INVALID_COMMENT = "InvalidComment"
    INVALID_IP_ADDRESS = "InvalidIPAddress"
    UNSUPPORTED_DOMAIN_LITERAL = "UnsupportedDomainLiteral"
    UNSUPPORTED_DISPLAY_NAME = "UnsupportedDisplayName"
    MISSING_DISPLAY_NAME = "MissingDisplayName"
    MISSING_END_BRACKET = "MissingEndBracket"

    @property
    def message(self) -> str:
        """Человекочитаемое описание ошибки."""
        return _MESSAGES[self]


_MESSAGES = {
    ErrorKind.INVALID_CHARACTER: "Invalid character.",
    ErrorKind.MISSING_SEPARATOR: f"Missing separator character '{AT}'.",
    ErrorKind.LOCAL_PART_EMPTY: "Local part is empty.",
    ErrorKind.LOCAL_PART_TOO_LONG: (
        f"Local part is too long. Length limit: {LOCAL_PART_MAX_LENGTH}"
    ),
    ErrorKind.DOMAIN_EMPTY: "Domain is empty.",
    ErrorKind.DOMAIN_TOO_LONG: f"Domain is too long. Length limit: {DOMAIN_MAX_LENGTH}",
    ErrorKind.SUB_DOMAIN_EMPTY: "A sub-domain is empty.",
    ErrorKind.SUB_DOMAIN_TOO_LONG: (
        f"A sub-domain is too long. Length limit: {SUB_DOMAIN_MAX_LENGTH}"
    ),
    ErrorKind.DOMAIN_TOO_FEW: "Too few parts in the domain",
    ErrorKind.DOMAIN_INVALID_SEPARATOR: (
        f"Invalid placement of the domain separator '{DOT}'"
    ),
    ErrorKind.UNBALANCED_QUOTES: "Quotes around the local-part are unbalanced.",
    ErrorKind.INVALID_COMMENT: "A comment was badly formed.",
    ErrorKind.INVALID_IP_ADDRESS: "Invalid IP Address specified for domain.",
    ErrorKind.UNSUPPORTED_DOMAIN_LITERAL: "Domain literals are not supported.",
    ErrorKind.UNSUPPORTED_DISPLAY_NAME: "Display names are not supported.",
    ErrorKind.MISSING_DISPLAY_NAME: "Display name was not supplied, but email starts with '<'.",
    ErrorKind.MISSING_END_BRACKET: "Terminating '>' is missing.",
}


class EmailAddressError(ValueError):
    """Адрес не прошёл проверку синтаксиса."""

    def __init__(self, kind: ErrorKind) -> None:
        super().__init__(kind.message)
        self.kind = kind

    def __reduce__(self):
        return (type(self), (self.kind,))
