# ~/Apps/tablecopy/exporter.py
"""Export of the rendered table buffer to text, CSV/TSV and SQL INSERT."""

import io
from dataclasses import dataclass
from typing import Optional

from char_width import display_width
from exceptions import ExportValidationError, ExportWriteError, TablecopyError
from export_format import ClipboardFormat, ExportCommand
from export_state import ExportState
from field_assembler import LineItem, iter_line_items, trim_str
from line_search import ensure_line_info
from log_utils import get_logger
from quoting import csv_format, quote_sql_identifier, quote_sql_literal
from table_desc import DataDesc, ExportOptions, LineFlag, ScreenDesc

logger = get_logger(__name__)

# "INSERT INTO " plus the space before the opening parenthesis
INSERT_PREFIX_WIDTH = 13
VALUES_INDENT = b" " * 10


@dataclass
class ExportWindow:
    format: ClipboardFormat
    min_row: int
    max_row: int
    xmin: Optional[int] = None
    xmax: Optional[int] = None
    print_header: bool = True
    print_footer: bool = True
    print_border: bool = True
    print_header_line: bool = True
    save_column_names: bool = False
    copy_line_extended: bool = False

    def set_columns(self, xmin: int, xmax: int):
        if xmax <= xmin:
            raise ExportValidationError(f"empty column range [{xmin}, {xmax})")
        self.xmin = xmin
        self.xmax = xmax


@dataclass
class ExportResult:
    ok: bool
    error: Optional[str] = None
    rows_exported: int = 0

    def __bool__(self):
        return self.ok


# ---------- windowing ----------
def _cursor_row_policy(window, desc, scrdesc, options, cursor_row, command):
    if (
        command.is_single_line
        or (command == ExportCommand.COPY and not options.no_cursor and not scrdesc.has_selection)
    ):
        window.min_row = window.max_row = cursor_row + desc.first_data_row
        window.print_footer = False


def _column_cursor_policy(window, desc, options, cursor_column, command):
    if (command == ExportCommand.COPY and options.vertical_cursor) or command == ExportCommand.COPY_COLUMN:
        if not 0 <= cursor_column < len(desc.cranges):
            raise ExportValidationError(f"cursor column {cursor_column} is outside of the table")
        crange = desc.cranges[cursor_column]
        window.set_columns(crange.xmin, crange.xmax)
        window.print_footer = False


def _cross_cursor_policy(window, options, command):
    # value under the cross of vertical and horizontal cursor
    if command == ExportCommand.COPY and not options.no_cursor and options.vertical_cursor:
        window.print_header = False
        window.print_header_line = False
        window.print_border = False


def _line_count_policy(window, desc, rows, percent, command):
    if not command.needs_row_count:
        return
    if rows < 0 or percent < 0.0:
        raise ExportValidationError('arguments ("rows" or "percent") of export are negative')

    if percent != 0.0:
        rows = int(desc.data_rows * (percent / 100.0))

    if command == ExportCommand.COPY_BOTTOM_LINES:
        skip_data_rows = desc.data_rows - rows
    else:
        skip_data_rows = 0

    window.min_row += skip_data_rows
    window.max_row = desc.first_data_row + rows - 1 + skip_data_rows
    window.print_footer = False


def _selection_policy(window, desc, scrdesc, command):
    if not ((command == ExportCommand.COPY and scrdesc.has_selection) or command == ExportCommand.COPY_SELECTED):
        return

    if scrdesc.selected_first_row != -1:
        window.min_row = scrdesc.selected_first_row + desc.first_data_row
        window.max_row = window.min_row + scrdesc.selected_rows - 1

    if scrdesc.selected_first_column != -1 and scrdesc.selected_columns > 0:
        xmin = scrdesc.selected_first_column
        window.set_columns(xmin, xmin + scrdesc.selected_columns)

    if window.min_row > desc.first_data_row or window.max_row < desc.last_data_row:
        window.print_footer = False


def compute_export_window(
    desc: DataDesc,
    scrdesc: ScreenDesc,
    options: ExportOptions,
    cursor_row: int = 0,
    cursor_column: int = 0,
    rows: int = 0,
    percent: float = 0.0,
    command: ExportCommand = ExportCommand.COPY,
    fmt: ClipboardFormat = ClipboardFormat.TEXT,
) -> ExportWindow:
    """Decide once which rows, columns and decorations an export covers."""
    window = ExportWindow(format=fmt, min_row=desc.first_data_row, max_row=desc.last_row)
    window.copy_line_extended = command == ExportCommand.COPY_LINE_EXTENDED

    if window.copy_line_extended and not fmt.is_dsv:
        window.format = ClipboardFormat.CSV

    if window.copy_line_extended or window.format.is_insert:
        window.save_column_names = True

    _cursor_row_policy(window, desc, scrdesc, options, cursor_row, command)
    _column_cursor_policy(window, desc, options, cursor_column, command)
    _cross_cursor_policy(window, options, command)
    _line_count_policy(window, desc, rows, percent, command)

    if command in (ExportCommand.COPY_MARKED_LINES, ExportCommand.COPY_SEARCHED_LINES):
        window.print_footer = False

    _selection_policy(window, desc, scrdesc, command)

    if window.format != ClipboardFormat.TEXT:
        window.print_border = False
        window.print_footer = False
        window.print_header_line = False

    if window.save_column_names:
        window.print_header = True

    return window


# ---------- emission ----------
def _open_insert_statement(state: ExportState):
    state.write(b"INSERT INTO " + state.table_name)

    names = state.captured_colnames()
    if names:
        state.write(b" (")
        if state.format == ClipboardFormat.INSERT:
            state.write(b", ".join(names))
            state.write(b")")
        else:
            indent = b" " * (display_width(state.table_name, state.force8bit) + INSERT_PREFIX_WIDTH)
            for i, name in enumerate(names):
                if i > 0:
                    state.write(indent)
                state.write(name)
                closing = b"," if i < len(names) - 1 else b")"
                state.write(closing + b"\t\t -- %d.\n" % (i + 1))

    if state.format == ClipboardFormat.INSERT:
        state.write(b" VALUES(")
    else:
        state.write(b"   VALUES(")
    state.statement_open = True


def _process_insert_item(state: ExportState, item: LineItem, is_colname: bool):
    if item.tag == "N":
        if is_colname or not state.statement_open:
            return
        if state.format == ClipboardFormat.INSERT:
            state.write(b");\n")
        else:
            state.write(b");\t\t -- %d. %s\n" % (state.colno, state.colname(state.colno - 1)))
        state.statement_open = False
        return

    if item.tag != "d" or state.outside_window(item.xpos):
        return

    value = trim_str(item.data, state.force8bit)

    if is_colname:
        state.capture_colname(quote_sql_identifier(value, state.force8bit).value)
        return

    if state.colno == 0:
        _open_insert_statement(state)
    elif state.format == ClipboardFormat.INSERT:
        state.write(b", ")
    else:
        state.write(b",\t\t -- %d. %s\n" % (state.colno, state.colname(state.colno - 1)))
        state.write(VALUES_INDENT)

    quoted = quote_sql_literal(value, state.force8bit, state.empty_string_is_null)
    state.write(quoted.value)
    state.colno += 1


def _process_text_item(state: ExportState, item: LineItem):
    if item.tag == "N":
        state.write(b"\n")
        return
    if item.tag in ("I", "d") and state.outside_window(item.xpos):
        return
    state.write(item.data)


def _process_dsv_item(state: ExportState, item: LineItem, is_colname: bool):
    if item.tag == "N":
        if not state.copy_line_extended:
            state.write(b"\n")
        return

    if item.tag != "d" or state.outside_window(item.xpos):
        return

    value = trim_str(item.data, state.force8bit)

    if state.copy_line_extended and is_colname:
        state.capture_colname(value)
        return

    quoted = csv_format(value, state.force8bit, state.empty_string_is_null)

    if state.copy_line_extended:
        state.write(state.colname(state.colno) + b"," + (quoted.value or b"") + b"\n")
    else:
        if state.colno > 0:
            state.write(state.format.separator)
        if not quoted.is_null:
            state.write(quoted.value)

    state.colno += 1


def process_item(state: ExportState, item: LineItem, is_colname: bool = False):
    """Export one segment of a row (a field or a decoration character)."""
    if state.format.is_insert:
        _process_insert_item(state, item, is_colname)
    elif state.format == ClipboardFormat.TEXT:
        _process_text_item(state, item)
    elif state.format.is_dsv:
        _process_dsv_item(state, item, is_colname)


# ---------- row selection ----------
def _skip_data_row(rn, desc, scrdesc, options, window, cursor_row, command) -> bool:
    if rn < window.min_row or rn > window.max_row:
        return True

    if command == ExportCommand.COPY_MARKED_LINES:
        info = desc.get_line_info(rn)
        if info is None or not info.mask & LineFlag.BOOKMARK:
            return True
    elif command == ExportCommand.COPY_LINE:
        if rn - desc.first_data_row != cursor_row:
            return True

    if command == ExportCommand.COPY_SEARCHED_LINES:
        info = ensure_line_info(desc, scrdesc, options, rn)
        if info is None or not info.mask & LineFlag.FOUNDSTR:
            return True

    return False


def _skip_decoration_row(rn, desc, window) -> bool:
    if not window.print_border and rn in (desc.border_top_row, desc.border_bottom_row):
        return True
    if not window.print_header_line and rn == desc.border_head_row:
        return True
    if not window.print_header and rn < desc.fixed_rows:
        return True
    if not window.print_footer and desc.footer_row != -1 and rn >= desc.footer_row:
        return True
    return False


def _encode_table_name(table_name, force8bit: bool) -> bytes:
    if not isinstance(table_name, str):
        return bytes(table_name)
    encoding = "latin-1" if force8bit else "utf-8"
    try:
        return table_name.encode(encoding)
    except UnicodeEncodeError as exc:
        raise ExportValidationError(
            f"table name {table_name!r} cannot be encoded as {encoding}"
        ) from exc


def export_data(
    options: ExportOptions,
    scrdesc: ScreenDesc,
    desc: DataDesc,
    cursor_row: int,
    cursor_column: int,
    fp,
    rows: int = 0,
    percent: float = 0.0,
    table_name=None,
    command: ExportCommand = ExportCommand.COPY,
    fmt: ClipboardFormat = ClipboardFormat.TEXT,
) -> ExportResult:
    """Export the table to the binary stream ``fp`` in the requested format.

    Returns an ``ExportResult``; on failure ``error`` holds the message and
    any output already written stays in ``fp``.
    """
    try:
        window = compute_export_window(
            desc, scrdesc, options, cursor_row, cursor_column, rows, percent, command, fmt
        )
        if window.format.is_insert and not table_name:
            raise ExportValidationError("table name is required for INSERT export")
        table_name_bytes = (
            _encode_table_name(table_name, options.force8bit) if window.format.is_insert else None
        )
    except ExportValidationError as exc:
        logger.warning("Export rejected: %s", exc)
        return ExportResult(ok=False, error=str(exc))

    logger.debug(
        "Export %s as %s: rows %d-%d, columns %s",
        command.value,
        window.format.value,
        window.min_row,
        window.max_row,
        "all" if window.xmin is None else f"[{window.xmin}, {window.xmax})",
    )

    state = ExportState(
        fp=fp,
        format=window.format,
        columns=desc.columns,
        force8bit=options.force8bit,
        empty_string_is_null=options.empty_string_is_null,
        copy_line_extended=window.copy_line_extended,
        xmin=window.xmin,
        xmax=window.xmax,
    )
    if window.format.is_insert:
        state.table_name = quote_sql_identifier(table_name_bytes, options.force8bit).value

    rows_exported = 0
    with state:
        try:
            for rn, rowstr in enumerate(desc.rows):
                is_colname = False
                if desc.is_data_row(rn):
                    if _skip_data_row(rn, desc, scrdesc, options, window, cursor_row, command):
                        continue
                else:
                    is_colname = not desc.is_border_row(rn) and rn < desc.fixed_rows
                    if _skip_decoration_row(rn, desc, window):
                        continue

                state.colno = 0
                state.statement_open = False
                for item in iter_line_items(rowstr, desc.headline_transl, options.force8bit):
                    process_item(state, item, is_colname)
                rows_exported += 1
        except ExportWriteError as exc:
            logger.error("Cannot write (%s)", exc)
            return ExportResult(ok=False, error=f"Cannot write ({exc})", rows_exported=rows_exported)

    return ExportResult(ok=True, rows_exported=rows_exported)


def export_to_bytes(
    options: ExportOptions,
    scrdesc: ScreenDesc,
    desc: DataDesc,
    cursor_row: int = 0,
    cursor_column: int = 0,
    rows: int = 0,
    percent: float = 0.0,
    table_name=None,
    command: ExportCommand = ExportCommand.COPY,
    fmt: ClipboardFormat = ClipboardFormat.TEXT,
) -> bytes:
    buf = io.BytesIO()
    result = export_data(
        options, scrdesc, desc, cursor_row, cursor_column, buf,
        rows=rows, percent=percent, table_name=table_name, command=command, fmt=fmt,
    )
    if not result.ok:
        raise TablecopyError(result.error)
    return buf.getvalue()
