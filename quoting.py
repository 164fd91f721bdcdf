"""Per-format quoting of exported field values.

Every function returns a ``Quoted`` result. When the value can be written as
it is, ``Quoted.value`` is the very object that was passed in and
``borrowed`` is True; otherwise a new ``bytes`` object holds the escaped text.
"""

from typing import NamedTuple, Optional

from char_width import char_size

NULL_SENTINEL = "\u2205".encode("utf-8")

_DQUOTE = 0x22
_SQUOTE = 0x27
_CSV_SPECIALS = frozenset(b'",\t\r\n')
_IDENT_CHARS = frozenset(b"abcdefghijklmnopqrstuvwxyz0123456789_")
_DIGITS = frozenset(b"0123456789")


class Quoted(NamedTuple):
    value: Optional[bytes]
    borrowed: bool

    @property
    def is_null(self) -> bool:
        return self.value is None


def _is_null_sentinel(value, force8bit: bool) -> bool:
    return not force8bit and len(value) == 3 and value == NULL_SENTINEL


def _wrap(value, quote: int, force8bit: bool) -> bytes:
    buf = bytearray()
    buf.append(quote)
    pos = 0
    while pos < len(value):
        size = char_size(value, pos, force8bit)
        if value[pos] == quote:
            buf.append(quote)
        buf += value[pos : pos + size]
        pos += size
    buf.append(quote)
    return bytes(buf)


def _scan(value, force8bit: bool, accept) -> bool:
    """True when accept() holds for the lead byte of every character."""
    pos = 0
    while pos < len(value):
        if not accept(value[pos]):
            return False
        pos += char_size(value, pos, force8bit)
    return True


def csv_format(value, force8bit: bool = False, empty_string_is_null: bool = False) -> Quoted:
    if _is_null_sentinel(value, force8bit):
        return Quoted(None, False)

    if len(value) == 0:
        if empty_string_is_null:
            return Quoted(None, False)
        return Quoted(b'""', False)

    if _scan(value, force8bit, lambda b: b not in _CSV_SPECIALS):
        return Quoted(value, True)

    return Quoted(_wrap(value, _DQUOTE, force8bit), False)


def quote_sql_identifier(value, force8bit: bool = False) -> Quoted:
    if len(value) == 0 or value[0] == _DQUOTE:
        return Quoted(value, True)

    first = value[0]
    if first != 0x20 and not 0x61 <= first <= 0x7A:
        needs_quoting = True
    else:
        needs_quoting = not _scan(value, force8bit, lambda b: b in _IDENT_CHARS)

    if not needs_quoting:
        return Quoted(value, True)

    return Quoted(_wrap(value, _DQUOTE, force8bit), False)


def quote_sql_literal(value, force8bit: bool = False, empty_string_is_null: bool = False) -> Quoted:
    if len(value) == 0:
        if empty_string_is_null:
            return Quoted(b"NULL", False)
        return Quoted(b"''", False)

    if len(value) == 4 and (value == b"NULL" or value == b"null"):
        return Quoted(value, True)

    if _is_null_sentinel(value, force8bit):
        return Quoted(b"NULL", False)

    if _is_numeric(value, force8bit):
        return Quoted(value, True)

    return Quoted(_wrap(value, _SQUOTE, force8bit), False)


def _is_numeric(value, force8bit: bool) -> bool:
    has_dot = False
    pos = 0
    while pos < len(value):
        b = value[pos]
        if b == 0x2E:
            if has_dot:
                return False
            has_dot = True
        elif b not in _DIGITS:
            return False
        pos += char_size(value, pos, force8bit)
    return True
