from typing import Iterator, NamedTuple

from char_width import char_size
from line_iter import FormattedLineIterator


class LineItem(NamedTuple):
    tag: str
    data: memoryview
    xpos: int


def iter_line_items(row, headline: str, force8bit: bool = False) -> Iterator[LineItem]:
    """Split a rendered row into data fields and decoration characters.

    Consecutive 'd' characters are merged into one field; its xpos is the
    position of its last character. The last item is always the 'N' end of
    line marker.
    """
    view = memoryview(row) if row is not None else memoryview(b"")
    field_start = -1
    field_size = 0
    field_xpos = -1

    for ch in FormattedLineIterator(row, headline, force8bit):
        if ch.tag == "d":
            if field_start < 0:
                field_start = ch.start
            field_size += ch.size
            field_xpos = ch.xpos
            continue

        if field_start >= 0:
            yield LineItem("d", view[field_start : field_start + field_size], field_xpos)
            field_start, field_size, field_xpos = -1, 0, -1

        yield LineItem(ch.tag, view[ch.start : ch.start + ch.size], ch.xpos)

    if field_start >= 0:
        yield LineItem("d", view[field_start : field_start + field_size], field_xpos)

    yield LineItem("N", view[0:0], -1)


def trim_str(value, force8bit: bool = False):
    """Strip space padding from both ends; returns a slice of ``value``."""
    start = 0
    end = len(value)
    while start < end and value[start] == 0x20:
        start += 1

    after_last = start
    pos = start
    while pos < end:
        size = char_size(value, pos, force8bit)
        if value[pos] != 0x20:
            after_last = pos + size
        pos += size

    return value[start:after_last]
