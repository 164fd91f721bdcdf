import pytest

from char_width import char_display_width, char_size, display_width, utf8_char_len
from field_assembler import iter_line_items, trim_str
from line_iter import ClassifiedChar, FormattedLineIterator


def test_utf8_char_len_from_lead_byte():
    assert utf8_char_len(ord("a")) == 1
    assert utf8_char_len(0xC5) == 2
    assert utf8_char_len(0xE2) == 3
    assert utf8_char_len(0xF0) == 4
    assert utf8_char_len(0x88) == 1


def test_char_width_of_wide_and_combining_characters():
    wide = "日".encode("utf-8")
    assert char_size(wide, 0) == 3
    assert char_display_width(wide, 0) == 2
    combining = "\u0301".encode("utf-8")
    assert char_display_width(combining, 0) == 0
    assert char_display_width(wide, 0, force8bit=True) == 1
    assert display_width("a日b") == 4
    assert display_width("a日b", force8bit=True) == 5


def test_char_size_is_clamped_to_remaining_bytes():
    assert char_size(b"\xe2\x88", 0) == 2


def test_iterator_classifies_ascii_row():
    items = list(FormattedLineIterator(b"ab|c", "ddId"))
    assert [i.tag for i in items] == ["d", "d", "I", "d"]
    assert [i.xpos for i in items] == [0, 1, 2, 3]
    assert all(i.size == 1 and i.width == 1 for i in items)


def test_iterator_tracks_bytes_and_width_separately():
    row = "日a".encode("utf-8")
    items = list(FormattedLineIterator(row, "ddd"))
    assert items == [
        ClassifiedChar("d", 0, 3, 2, 0),
        ClassifiedChar("d", 3, 1, 1, 2),
    ]


def test_iterator_in_8bit_mode_steps_single_bytes():
    row = "日".encode("utf-8")
    items = list(FormattedLineIterator(row, "ddd", force8bit=True))
    assert [(i.start, i.size, i.width) for i in items] == [(0, 1, 1), (1, 1, 1), (2, 1, 1)]


@pytest.mark.parametrize("headline", ["dN", "d\n"])
def test_iterator_stops_at_end_of_line_marker(headline):
    items = list(FormattedLineIterator(b"abc", headline))
    assert len(items) == 1


def test_iterator_stops_when_either_side_is_exhausted():
    assert len(list(FormattedLineIterator(b"abc", "dd"))) == 2
    assert len(list(FormattedLineIterator(b"a", "dddd"))) == 1
    assert list(FormattedLineIterator(None, "dd")) == []


def test_iter_line_items_merges_data_characters():
    items = [(i.tag, bytes(i.data), i.xpos) for i in iter_line_items(b" a | bb ", "dddIdddd")]
    assert items == [
        ("d", b" a ", 2),
        ("I", b"|", 3),
        ("d", b" bb ", 7),
        ("N", b"", -1),
    ]


def test_iter_line_items_passes_decorations_through():
    items = [(i.tag, bytes(i.data)) for i in iter_line_items(b"| x |", "LdddR")]
    assert items == [("L", b"|"), ("d", b" x "), ("R", b"|"), ("N", b"")]


def test_iter_line_items_multibyte_field_positions():
    row = " 日本 | x".encode("utf-8")
    items = list(iter_line_items(row, "ddddddIdd"))
    assert bytes(items[0].data) == " 日本 ".encode("utf-8")
    assert items[0].xpos == 5
    assert items[1].tag == "I" and items[1].xpos == 6


def test_iter_line_items_always_ends_with_end_of_line():
    items = list(iter_line_items(b"", "ddd"))
    assert [i.tag for i in items] == ["N"]


def test_trim_str():
    assert trim_str(b" hi  ") == b"hi"
    assert trim_str(b"   ") == b""
    assert trim_str(b"") == b""
    assert trim_str(b"a b") == b"a b"
    assert trim_str(" 日本 ".encode("utf-8")) == "日本".encode("utf-8")


def test_trim_str_on_memoryview_never_grows():
    view = memoryview(b"  value   ")
    trimmed = trim_str(view)
    assert bytes(trimmed) == b"value"
    assert len(trimmed) <= len(view)
