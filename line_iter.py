from typing import NamedTuple

from char_width import char_display_width, char_size

END_OF_LINE_MARKS = ("N", "\n")


class ClassifiedChar(NamedTuple):
    tag: str
    start: int
    size: int
    width: int
    xpos: int


class FormattedLineIterator:
    """Walks a rendered row together with its headline template.

    Each step yields the template character that classifies the row character
    at the same display position. The row cursor moves by byte size and the
    template cursor by display width.
    """

    def __init__(self, row, headline: str, force8bit: bool = False):
        self.row = row
        self.headline = headline
        self.force8bit = force8bit
        self.pos = 0
        self.hpos = 0
        self.xpos = 0

    def __iter__(self):
        return self

    def __next__(self) -> ClassifiedChar:
        if self.row is None or self.headline is None:
            raise StopIteration
        if self.pos >= len(self.row) or self.hpos >= len(self.headline):
            raise StopIteration

        tag = self.headline[self.hpos]
        if tag in END_OF_LINE_MARKS:
            raise StopIteration

        size = char_size(self.row, self.pos, self.force8bit)
        width = char_display_width(self.row, self.pos, self.force8bit)
        item = ClassifiedChar(tag, self.pos, size, width, self.xpos)

        self.pos += size
        self.hpos += width
        self.xpos += width
        return item
