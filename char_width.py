import unicodedata


def utf8_char_len(lead: int) -> int:
    if lead < 0x80:
        return 1
    if 0xC0 <= lead < 0xE0:
        return 2
    if 0xE0 <= lead < 0xF0:
        return 3
    if 0xF0 <= lead < 0xF8:
        return 4
    # stray continuation or invalid lead byte
    return 1


def char_size(data, pos: int, force8bit: bool = False) -> int:
    """Byte size of the character starting at data[pos]."""
    if force8bit:
        return 1
    size = utf8_char_len(data[pos])
    return max(1, min(size, len(data) - pos))


def char_display_width(data, pos: int, force8bit: bool = False) -> int:
    if force8bit:
        return 1
    size = char_size(data, pos)
    if size == 1:
        return 1
    try:
        ch = bytes(data[pos : pos + size]).decode("utf-8")
    except UnicodeDecodeError:
        return 1
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in ("W", "F"):
        return 2
    return 1


def display_width(text, force8bit: bool = False) -> int:
    if isinstance(text, str):
        text = text.encode("utf-8")
    if force8bit:
        return len(text)
    width = 0
    pos = 0
    while pos < len(text):
        width += char_display_width(text, pos)
        pos += char_size(text, pos)
    return width
