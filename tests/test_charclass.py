"""Тесты классов символов."""

from mailaddr.modules.charclass import (
    is_alphanumeric,
    is_atext,
    is_atom,
    is_ctext,
    is_dot_atom_text,
    is_dtext,
    is_qcontent,
    is_qtext,
    is_special,
    is_utf8_non_ascii,
    is_vchar,
    is_wsp,
)


def test_atext_accepts_letters_digits_and_symbols() -> None:
    for c in "aZ09!#$%&'*+-/=?^_`{|}~":
        assert is_atext(c), c
    for c in ' .@"(),:;<>[]\\':
        assert not is_atext(c), c


def test_atext_accepts_non_ascii() -> None:
    assert is_atext("ü")
    assert is_atext("用")
    assert is_atext("€")


def test_utf8_non_ascii_byte_patterns() -> None:
    assert not is_utf8_non_ascii("a")
    assert not is_utf8_non_ascii("\x7f")
    # UTF8-2
    assert is_utf8_non_ascii("\x80")
    assert is_utf8_non_ascii("ü")
    # UTF8-3: E0 A0-BF, E1-EC, ED 80-9F, EE-EF
    assert is_utf8_non_ascii("\u0800")
    assert is_utf8_non_ascii("€")
    assert is_utf8_non_ascii("\ud7ff")
    assert is_utf8_non_ascii("\ue000")
    assert is_utf8_non_ascii("\uffff")
    # UTF8-4: F0 90-BF, F1-F3, F4 80-8F
    assert is_utf8_non_ascii("\U00010000")
    assert is_utf8_non_ascii("😀")
    assert is_utf8_non_ascii("\U00040000")
    assert is_utf8_non_ascii("\U0010ffff")


def test_utf8_non_ascii_rejects_surrogates() -> None:
    assert not is_utf8_non_ascii("\ud800")
    assert not is_utf8_non_ascii("\udfff")
    assert not is_atext("\ud800")
    assert not is_qtext("\udc00")


def test_qtext_excludes_quote_and_backslash() -> None:
    assert is_qtext("!")
    assert is_qtext("@")
    assert is_qtext("~")
    assert is_qtext("ö")
    assert not is_qtext('"')
    assert not is_qtext("\\")
    assert not is_qtext(" ")
    assert not is_qtext("\x7f")


def test_dtext_excludes_brackets_and_backslash() -> None:
    assert is_dtext("1")
    assert is_dtext(":")
    assert is_dtext("^")
    assert not is_dtext("[")
    assert not is_dtext("]")
    assert not is_dtext("\\")
    assert not is_dtext(" ")


def test_vchar_and_wsp() -> None:
    assert is_vchar("!")
    assert is_vchar("~")
    assert not is_vchar(" ")
    assert not is_vchar("\x7f")
    assert is_wsp(" ")
    assert is_wsp("\t")
    assert not is_wsp("\n")


def test_ctext_and_specials() -> None:
    assert is_ctext("a")
    assert not is_ctext("(")
    assert not is_ctext(")")
    assert not is_ctext("\\")
    assert is_special("@")
    assert is_special('"')
    assert not is_special("a")


def test_alphanumeric_follows_alphabetic_property() -> None:
    assert is_alphanumeric("a")
    assert is_alphanumeric("7")
    assert is_alphanumeric("ा")  # DEVANAGARI VOWEL SIGN AA, Other_Alphabetic
    assert not is_alphanumeric("\u0301")  # COMBINING ACUTE ACCENT
    assert not is_alphanumeric("\u094d")  # DEVANAGARI SIGN VIRAMA
    assert not is_alphanumeric("-")
    assert not is_alphanumeric("_")


def test_atoms_and_dot_atoms() -> None:
    assert is_atom("abc")
    assert not is_atom("")
    assert not is_atom("a.b")
    assert is_dot_atom_text("a.b.c")
    assert not is_dot_atom_text(".a")
    assert not is_dot_atom_text("a.")
    assert not is_dot_atom_text("a..b")


def test_qcontent_handles_quoted_pairs() -> None:
    assert is_qcontent("john..doe")
    assert is_qcontent("a b\tc")
    assert is_qcontent('a\\"b')
    assert is_qcontent("a\\\\b")
    assert not is_qcontent('a"b')
    assert not is_qcontent("abc\\")
    assert not is_qcontent("a\\ b")
