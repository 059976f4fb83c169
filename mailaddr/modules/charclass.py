"""Классы символов грамматик RFC 5322 и RFC 6531."""

from __future__ import annotations

import regex

from mailaddr.modules.constants import ATEXT_SYMBOLS, DOT, ESC, HTAB, SP, SPECIALS

_LET_DIG = regex.compile(r"[\p{Alphabetic}\p{N}]")


def is_utf8_non_ascii(c: str) -> bool:
    """Проверяет, что UTF-8 представление символа — допустимый UTF8-non-ascii (RFC 6531)."""
    if c < "\x80":
        return False
    data = c.encode("utf-8", errors="surrogatepass")
    if len(data) == 2:
        # UTF8-2 = %xC2-DF UTF8-tail
        return 0xC2 <= data[0] <= 0xDF and _is_tail(data[1])
    if len(data) == 3:
        # UTF8-3 = %xE0 %xA0-BF UTF8-tail / %xE1-EC 2( UTF8-tail ) /
        #          %xED %x80-9F UTF8-tail / %xEE-EF 2( UTF8-tail )
        lead, second, third = data
        if not _is_tail(third):
            return False
        if lead == 0xE0:
            return 0xA0 <= second <= 0xBF
        if 0xE1 <= lead <= 0xEC or 0xEE <= lead <= 0xEF:
            return _is_tail(second)
        if lead == 0xED:
            return 0x80 <= second <= 0x9F
        return False
    if len(data) == 4:
        # UTF8-4 = %xF0 %x90-BF 2( UTF8-tail ) / %xF1-F3 3( UTF8-tail ) /
        #          %xF4 %x80-8F 2( UTF8-tail )
        lead, second, third, fourth = data
        if not (_is_tail(third) and _is_tail(fourth)):
            return False
        if lead == 0xF0:
            return 0x90 <= second <= 0xBF
        if 0xF1 <= lead <= 0xF3:
            return _is_tail(second)
        if lead == 0xF4:
            return 0x80 <= second <= 0x8F
    return False


def _is_tail(byte: int) -> bool:
    return 0x80 <= byte <= 0xBF


def is_alphanumeric(c: str) -> bool:
    """Буква или цифра любого алфавита (let-dig для краёв метки домена).

    Свойство Alphabetic включает Other_Alphabetic (например, знаки гласных
    деванагари), но не одиночные комбинируемые знаки вроде U+0301.
    """
    return _LET_DIG.fullmatch(c) is not None


def is_atext(c: str) -> bool:
    return is_alphanumeric(c) or c in ATEXT_SYMBOLS or is_utf8_non_ascii(c)


def is_qtext(c: str) -> bool:
    return (
        c == "\x21"
        or "\x23" <= c <= "\x5b"
        or "\x5d" <= c <= "\x7e"
        or is_utf8_non_ascii(c)
    )


def is_vchar(c: str) -> bool:
    return "\x21" <= c <= "\x7e"


def is_wsp(c: str) -> bool:
    return c == SP or c == HTAB


def is_dtext(c: str) -> bool:
    return "\x21" <= c <= "\x5a" or "\x5e" <= c <= "\x7e" or is_utf8_non_ascii(c)


def is_ctext(c: str) -> bool:
    """Текст комментария RFC 5322 (без скобок и обратной косой черты)."""
    return (
        "\x21" <= c <= "\x27"
        or "\x2a" <= c <= "\x5b"
        or "\x5d" <= c <= "\x7e"
        or is_utf8_non_ascii(c)
    )


def is_special(c: str) -> bool:
    return c in SPECIALS


def is_atom(value: str) -> bool:
    """Непустая последовательность символов atext."""
    return bool(value) and all(is_atext(c) for c in value)


def is_dot_atom_text(value: str) -> bool:
    return all(is_atom(segment) for segment in value.split(DOT))


def is_qcontent(value: str) -> bool:
    """Проверяет содержимое quoted-string с учётом quoted-pair."""
    chars = iter(value)
    for c in chars:
        if c == ESC:
            escaped = next(chars, None)
            if escaped is None or not is_vchar(escaped):
                return False
        elif not (is_wsp(c) or is_qtext(c)):
            return False
    return True
