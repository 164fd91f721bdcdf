from dataclasses import dataclass, field
from enum import IntFlag
from typing import Dict, List, Optional, Tuple


class LineFlag(IntFlag):
    NONE = 0
    BOOKMARK = 1
    FOUNDSTR = 2


@dataclass
class LineInfo:
    mask: LineFlag = LineFlag.NONE
    # (pattern, ignore_case) the FOUNDSTR flag was computed for
    search_key: Optional[Tuple[str, bool]] = None


@dataclass(frozen=True)
class ColumnRange:
    xmin: int  # first data position of the column
    xmax: int  # position of the following separator (exclusive)


@dataclass
class DataDesc:
    """Rendered table as handed over by the pager.

    Row numbers index ``rows``. Geometry fields use -1 when the table has no
    such row.
    """

    rows: List[bytes]
    headline_transl: str
    first_data_row: int
    last_data_row: int
    fixed_rows: int
    columns: int
    cranges: List[ColumnRange] = field(default_factory=list)
    border_top_row: int = -1
    border_bottom_row: int = -1
    border_head_row: int = -1
    footer_row: int = -1
    line_info: Dict[int, LineInfo] = field(default_factory=dict)

    @property
    def last_row(self) -> int:
        return len(self.rows) - 1

    @property
    def data_rows(self) -> int:
        return max(0, self.last_data_row - self.first_data_row + 1)

    def is_data_row(self, rownum: int) -> bool:
        return self.first_data_row <= rownum <= self.last_data_row

    def is_border_row(self, rownum: int) -> bool:
        return rownum in (self.border_top_row, self.border_bottom_row, self.border_head_row)

    def get_line_info(self, rownum: int) -> Optional[LineInfo]:
        return self.line_info.get(rownum)

    def toggle_bookmark(self, data_row: int) -> bool:
        rownum = data_row + self.first_data_row
        info = self.line_info.setdefault(rownum, LineInfo())
        info.mask ^= LineFlag.BOOKMARK
        return bool(info.mask & LineFlag.BOOKMARK)


@dataclass
class ScreenDesc:
    """Interactive selection state; rows are data-relative, columns are display x."""

    selected_first_row: int = -1
    selected_rows: int = 0
    selected_first_column: int = -1
    selected_columns: int = 0
    search_pattern: str = ""

    @property
    def has_selection(self) -> bool:
        return (self.selected_first_row != -1 and self.selected_rows > 0) or (
            self.selected_first_column != -1 and self.selected_columns > 0
        )

    def select_rows(self, first: int, count: int):
        self.selected_first_row = first
        self.selected_rows = count

    def select_columns(self, first_x: int, width: int):
        self.selected_first_column = first_x
        self.selected_columns = width


@dataclass
class ExportOptions:
    force8bit: bool = False
    empty_string_is_null: bool = False
    no_cursor: bool = False
    vertical_cursor: bool = False
    ignore_case: bool = False
    ignore_lower_case: bool = False
