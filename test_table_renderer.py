import numpy as np
import pandas as pd
import pytest

from export_format import ClipboardFormat, ExportCommand
from exporter import export_to_bytes
from table_desc import ColumnRange, ExportOptions, ScreenDesc
from table_renderer import render_dataframe


def _df():
    return pd.DataFrame({"id": [1], "name": ["O'Brien"]})


def test_border_1_layout():
    desc = render_dataframe(_df())
    assert desc.rows == [
        b" id |  name   ",
        b"----+---------",
        b"  1 | O'Brien ",
        b"(1 row)",
    ]
    assert desc.headline_transl == "ddddIddddddddd"
    assert (desc.first_data_row, desc.last_data_row, desc.fixed_rows) == (2, 2, 2)
    assert desc.border_head_row == 1
    assert desc.border_top_row == -1 and desc.border_bottom_row == -1
    assert desc.footer_row == 3
    assert desc.columns == 2
    assert desc.cranges == [ColumnRange(0, 4), ColumnRange(5, 14)]


def test_border_2_layout():
    desc = render_dataframe(_df(), border=2)
    assert desc.rows == [
        b"+----+---------+",
        b"| id |  name   |",
        b"+----+---------+",
        b"|  1 | O'Brien |",
        b"+----+---------+",
        b"(1 row)",
    ]
    assert desc.headline_transl == "LddddIdddddddddR"
    assert desc.border_top_row == 0
    assert desc.border_head_row == 2
    assert desc.border_bottom_row == 4
    assert desc.footer_row == 5
    assert desc.first_data_row == desc.fixed_rows == 3
    assert desc.cranges == [ColumnRange(1, 5), ColumnRange(6, 15)]


def test_border_2_exports_same_csv_as_border_1():
    for border in (1, 2):
        out = export_to_bytes(
            ExportOptions(), ScreenDesc(), render_dataframe(_df(), border=border),
            command=ExportCommand.COPY_ALL_LINES, fmt=ClipboardFormat.CSV,
        )
        assert out == b"id,name\n1,O'Brien\n"


def test_null_values_render_as_sentinel_and_numbers_align_right():
    desc = render_dataframe(pd.DataFrame({"a": [np.nan, 1.5]}))
    assert desc.rows[2] == "   ∅ ".encode("utf-8")
    assert desc.rows[3] == b" 1.5 "
    assert desc.rows[-1] == b"(2 rows)"


def test_custom_null_string_and_no_footer():
    desc = render_dataframe(pd.DataFrame({"a": ["x", None]}), null_string="NULL", footer=False)
    assert desc.rows[-1] == b" NULL "
    assert desc.footer_row == -1


def test_newlines_in_values_are_escaped():
    desc = render_dataframe(pd.DataFrame({"a": ["x\ny"]}))
    assert desc.rows[2] == b" x\\ny "


def test_wide_characters_use_display_width():
    desc = render_dataframe(pd.DataFrame({"a": ["日本"]}))
    assert desc.rows[1] == b"------"
    assert desc.headline_transl == "dddddd "
    assert desc.cranges == [ColumnRange(0, 6)]


def test_empty_frame_with_columns():
    desc = render_dataframe(pd.DataFrame({"a": pd.Series([], dtype=object)}))
    assert desc.data_rows == 0
    assert desc.rows[-1] == b"(0 rows)"


@pytest.mark.parametrize(
    "df, border",
    [
        (pd.DataFrame(), 1),
        (pd.DataFrame({"a": [1]}), 3),
    ],
)
def test_invalid_input_is_rejected(df, border):
    with pytest.raises(ValueError):
        render_dataframe(df, border=border)


def test_headline_covers_footer_wider_than_table():
    desc = render_dataframe(pd.DataFrame({"n": list(range(1, 11))}))
    assert desc.headline_transl == "dddd     "
    out = export_to_bytes(
        ExportOptions(), ScreenDesc(), desc,
        command=ExportCommand.COPY_ALL_LINES, fmt=ClipboardFormat.TEXT,
    )
    assert out.startswith(b" n  \n----\n  1 \n")
    assert out.endswith(b" 10 \n(10 rows)\n")
