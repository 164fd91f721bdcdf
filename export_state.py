from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from exceptions import ExportWriteError
from export_format import ClipboardFormat


@dataclass
class ExportState:
    """Mutable state owned by a single export run."""

    fp: Any
    format: ClipboardFormat
    columns: int
    force8bit: bool = False
    empty_string_is_null: bool = False
    copy_line_extended: bool = False
    xmin: Optional[int] = None
    xmax: Optional[int] = None
    table_name: Optional[bytes] = None

    colno: int = 0
    colnames: Optional[Dict[int, bytes]] = None
    statement_open: bool = False
    closed: bool = field(default=False, repr=False)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def close(self):
        if self.closed:
            return
        self.colnames = None
        self.table_name = None
        self.closed = True

    # ---------- column window ----------
    def outside_window(self, xpos: int) -> bool:
        if self.xmin is None:
            return False
        return xpos < self.xmin or xpos >= self.xmax

    # ---------- column names ----------
    def capture_colname(self, name: bytes):
        if self.colnames is None:
            self.colnames = {}
        if self.colno < self.columns:
            self.colnames[self.colno] = bytes(name)
        self.colno += 1

    def colname(self, index: int) -> bytes:
        if not self.colnames:
            return b""
        return self.colnames.get(index, b"")

    def captured_colnames(self) -> List[bytes]:
        """Captured names left to right, up to the first missing slot."""
        names = []
        if not self.colnames:
            return names
        for i in range(self.columns):
            if i not in self.colnames:
                break
            names.append(self.colnames[i])
        return names

    # ---------- output ----------
    def write(self, data):
        try:
            self.fp.write(data)
        except OSError as exc:
            raise ExportWriteError(exc.strerror or str(exc), exc.errno) from exc
        except ValueError as exc:
            # closed or detached stream
            raise ExportWriteError(str(exc)) from exc
