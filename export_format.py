from enum import Enum


class ClipboardFormat(Enum):
    TEXT = "text"
    CSV = "csv"
    TSVC = "tsv"
    INSERT = "insert"
    INSERT_WITH_COMMENTS = "insert-pretty"

    @property
    def is_dsv(self) -> bool:
        return self in (ClipboardFormat.CSV, ClipboardFormat.TSVC)

    @property
    def is_insert(self) -> bool:
        return self in (ClipboardFormat.INSERT, ClipboardFormat.INSERT_WITH_COMMENTS)

    @property
    def separator(self) -> bytes:
        if self == ClipboardFormat.CSV:
            return b","
        if self == ClipboardFormat.TSVC:
            return b"\t"
        return b""

    @classmethod
    def from_name(cls, name: str) -> "ClipboardFormat":
        key = (name or "").strip().lower()
        aliases = {"tsvc": "tsv", "sql": "insert", "insert-comments": "insert-pretty"}
        key = aliases.get(key, key)
        for fmt in cls:
            if fmt.value == key:
                return fmt
        raise ValueError(f"Unknown format '{name}'")


class ExportCommand(Enum):
    COPY = "copy"
    COPY_LINE = "line"
    COPY_LINE_EXTENDED = "line-extended"
    COPY_COLUMN = "column"
    COPY_SELECTED = "selected"
    COPY_ALL_LINES = "all"
    COPY_TOP_LINES = "top"
    COPY_BOTTOM_LINES = "bottom"
    COPY_MARKED_LINES = "marked"
    COPY_SEARCHED_LINES = "searched"

    @property
    def is_single_line(self) -> bool:
        return self in (ExportCommand.COPY_LINE, ExportCommand.COPY_LINE_EXTENDED)

    @property
    def needs_row_count(self) -> bool:
        return self in (ExportCommand.COPY_TOP_LINES, ExportCommand.COPY_BOTTOM_LINES)

    @classmethod
    def from_name(cls, name: str) -> "ExportCommand":
        key = (name or "").strip().lower()
        for cmd in cls:
            if cmd.value == key:
                return cmd
        raise ValueError(f"Unknown command '{name}'")
