import numpy as np
import pandas as pd

from char_width import display_width
from table_desc import ColumnRange, DataDesc

NULL_STRING = "∅"


def _format_value(value, null_string: str) -> str:
    if value is None:
        return null_string
    try:
        if pd.isna(value):
            return null_string
    except (TypeError, ValueError):
        # list-like cells
        pass
    return str(value).replace("\r", "").replace("\n", "\\n")


def _pad(text: str, width: int, align: str) -> str:
    gap = max(0, width - display_width(text))
    if align == "right":
        return " " * gap + text
    if align == "center":
        left = gap // 2
        return " " * left + text + " " * (gap - left)
    return text + " " * gap


def _is_right_aligned(dtype) -> bool:
    return pd.api.types.is_numeric_dtype(dtype) and not pd.api.types.is_bool_dtype(dtype)


def render_dataframe(
    df: pd.DataFrame,
    border: int = 1,
    null_string: str = NULL_STRING,
    footer: bool = True,
    encoding: str = "utf-8",
) -> DataDesc:
    """Render a DataFrame the way psql prints an aligned result set.

    border=1 separates columns with '|' and has no outer frame; border=2 adds
    the frame and top/bottom border rows.
    """
    if border not in (1, 2):
        raise ValueError(f"Unsupported border style {border} (use 1 or 2)")
    if len(df.columns) == 0:
        raise ValueError("Cannot render a table without columns")

    names = [str(c) for c in df.columns]
    cells = df.astype(object).to_numpy()
    texts = np.vectorize(lambda v: _format_value(v, null_string), otypes=[object])(cells)
    if texts.size:
        cell_widths = np.vectorize(display_width, otypes=[int])(texts)
    else:
        cell_widths = np.zeros((0, len(names)), dtype=int)
    header_widths = np.array([display_width(n) for n in names], dtype=int)
    widths = np.maximum(header_widths, cell_widths.max(axis=0, initial=0)).tolist()
    aligns = ["right" if _is_right_aligned(dt) else "left" for dt in df.dtypes]

    def line(parts, inner, left="", right=""):
        return left + inner.join(parts) + right

    outer = ("|", "|") if border == 2 else ("", "")
    corners = ("+", "+") if border == 2 else ("", "")

    header = line(
        [" " + _pad(n, w, "center") + " " for n, w in zip(names, widths)], "|", *outer
    )
    rule = line(["-" * (w + 2) for w in widths], "+", *corners)
    data = [
        line(
            [" " + _pad(t, w, a) + " " for t, w, a in zip(row, widths, aligns)],
            "|",
            *outer,
        )
        for row in texts
    ]
    headline = line(["d" * (w + 2) for w in widths], "I", *(("L", "R") if border == 2 else ("", "")))

    lines = []
    desc_geometry = {}
    if border == 2:
        desc_geometry["border_top_row"] = len(lines)
        lines.append(rule)
    lines.append(header)
    desc_geometry["border_head_row"] = len(lines)
    lines.append(rule)
    first_data_row = len(lines)
    lines.extend(data)
    last_data_row = len(lines) - 1
    if border == 2:
        desc_geometry["border_bottom_row"] = len(lines)
        lines.append(rule)
    if footer:
        desc_geometry["footer_row"] = len(lines)
        count = len(data)
        lines.append(f"({count} {'row' if count == 1 else 'rows'})")

    # footer and other text wider than the table pass through as decoration
    widest = max(display_width(ln) for ln in lines)
    headline += " " * (widest - len(headline))

    cranges = []
    x = 1 if border == 2 else 0
    for w in widths:
        cranges.append(ColumnRange(x, x + w + 2))
        x += w + 3

    return DataDesc(
        rows=[ln.encode(encoding, errors="replace") for ln in lines],
        headline_transl=headline,
        first_data_row=first_data_row,
        last_data_row=last_data_row,
        fixed_rows=first_data_row,
        columns=len(names),
        cranges=cranges,
        **desc_geometry,
    )
