import argparse
import sys

from clipboard import copy_to_clipboard
from config_paths import load_config
from exceptions import TablecopyError
from export_format import ClipboardFormat, ExportCommand
from exporter import export_data, export_to_bytes
from file_type_handler import FileTypeHandler
from log_utils import get_logger
from table_desc import ExportOptions, ScreenDesc
from table_renderer import render_dataframe

try:
    from _version import __version__
except ImportError:
    __version__ = "0.0.0"

logger = get_logger(__name__)


def _parse_range(text: str) -> tuple[int, int]:
    try:
        first, count = text.split(":", 1)
        return int(first), int(count)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected FIRST:COUNT, got '{text}'")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tablecopy",
        description="Export a table rendered the way a pager shows it to text, CSV/TSV or SQL INSERT.",
    )
    parser.add_argument("path", nargs="?", help=".csv, .tsv, .parquet or .xlsx file")
    parser.add_argument("-v", "--version", action="store_true")
    parser.add_argument(
        "--format", "-f",
        default="text",
        choices=[fmt.value for fmt in ClipboardFormat],
    )
    parser.add_argument(
        "--command", "-c",
        default="all",
        choices=[cmd.value for cmd in ExportCommand],
    )
    parser.add_argument("--cursor-row", type=int, default=0)
    parser.add_argument("--cursor-column", type=int, default=0)
    parser.add_argument("--rows", type=int, default=0)
    parser.add_argument("--percent", type=float, default=0.0)
    parser.add_argument("--select-rows", type=_parse_range, metavar="FIRST:COUNT")
    parser.add_argument("--select-columns", type=_parse_range, metavar="X:WIDTH")
    parser.add_argument("--search", default="")
    parser.add_argument("--ignore-case", action="store_true")
    parser.add_argument("--bookmark", type=int, action="append", default=[], metavar="ROW")
    parser.add_argument("--table-name")
    parser.add_argument("--border", type=int, choices=(1, 2))
    parser.add_argument("--force8bit", action="store_true")
    parser.add_argument("--empty-string-is-null", action="store_true")
    parser.add_argument("--vertical-cursor", action="store_true")
    parser.add_argument(
        "--no-cursor",
        action="store_true",
        help="copy every row with -c copy instead of the cursor row",
    )
    target = parser.add_mutually_exclusive_group()
    target.add_argument("--output", "-o")
    target.add_argument("--clipboard", action="store_true")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    if args.version:
        print(__version__)
        return 0

    if not args.path:
        print("tablecopy: a path is required (see -h)", file=sys.stderr)
        return 2

    cfg = load_config()
    options = ExportOptions(
        force8bit=args.force8bit or cfg["FORCE8BIT"],
        empty_string_is_null=args.empty_string_is_null or cfg["EMPTY_STRING_IS_NULL"],
        no_cursor=args.no_cursor,
        vertical_cursor=args.vertical_cursor,
        ignore_case=args.ignore_case,
    )
    scrdesc = ScreenDesc(search_pattern=args.search)
    if args.select_rows:
        scrdesc.select_rows(*args.select_rows)
    if args.select_columns:
        scrdesc.select_columns(*args.select_columns)

    fmt = ClipboardFormat.from_name(args.format)
    command = ExportCommand.from_name(args.command)
    table_name = args.table_name or cfg["DEFAULT_TABLE_NAME"]

    try:
        df = FileTypeHandler(args.path).load()
        desc = render_dataframe(
            df,
            border=args.border or cfg["BORDER"],
            null_string=cfg["NULL_STRING"],
            encoding="latin-1" if options.force8bit else "utf-8",
        )
        for row in args.bookmark:
            desc.toggle_bookmark(row)

        export_args = dict(
            rows=args.rows,
            percent=args.percent,
            table_name=table_name,
            command=command,
            fmt=fmt,
        )
        if args.clipboard:
            data = export_to_bytes(
                options, scrdesc, desc, args.cursor_row, args.cursor_column, **export_args
            )
            copy_to_clipboard(data, cfg["CLIPBOARD_INTERFACE_COMMAND"])
            return 0

        if args.output:
            with open(args.output, "wb") as fp:
                result = export_data(
                    options, scrdesc, desc, args.cursor_row, args.cursor_column, fp, **export_args
                )
        else:
            result = export_data(
                options, scrdesc, desc, args.cursor_row, args.cursor_column,
                sys.stdout.buffer, **export_args
            )
            sys.stdout.buffer.flush()
    except (TablecopyError, OSError, ValueError) as exc:
        print(f"tablecopy: {exc}", file=sys.stderr)
        return 1

    if not result.ok:
        print(f"tablecopy: {result.error}", file=sys.stderr)
        return 1
    logger.debug("Exported %d rows from %s", result.rows_exported, args.path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
