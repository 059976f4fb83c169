"""Общие константы грамматики адресов."""

from __future__ import annotations

LOCAL_PART_MAX_LENGTH = 64
# RFC 3696 errata 1690
DOMAIN_MAX_LENGTH = 254
SUB_DOMAIN_MAX_LENGTH = 63

SP = " "
HTAB = "\t"
ESC = "\\"

AT = "@"
DOT = "."
DQUOTE = '"'
LBRACKET = "["
RBRACKET = "]"
LPAREN = "("
RPAREN = ")"
LT = "<"
GT = ">"

DISPLAY_SEP = " <"
DISPLAY_START = LT
DISPLAY_END = GT

ATEXT_SYMBOLS = frozenset("!#$%&'*+-/=?^_`{|}~")
SPECIALS = frozenset('()<>[]:;@\\,."')

MAILTO_URI_PREFIX = "mailto:"

# '@' допустим в схеме mailto и не кодируется.
URI_RESERVED = frozenset("!#$%&'()*+,/:;=?[]")
