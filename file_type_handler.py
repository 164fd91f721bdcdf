import os

import pandas as pd

from exceptions import UnsupportedFileTypeError

SUPPORTED_EXTENSIONS = (".csv", ".tsv", ".parquet", ".xlsx")


class FileTypeHandler:
    def __init__(self, path: str):
        self.path = path
        _, ext = os.path.splitext(path)
        self.ext = ext.lower()

        if self.ext not in SUPPORTED_EXTENSIONS:
            raise UnsupportedFileTypeError(
                f"Unsupported file type '{self.ext or path}' (use .csv, .tsv, .parquet, or .xlsx)"
            )

    def load(self, sheet_name=0) -> pd.DataFrame:
        if not os.path.exists(self.path):
            raise FileNotFoundError(self.path)
        if os.path.getsize(self.path) == 0:
            return pd.DataFrame()

        if self.ext == ".csv":
            try:
                return pd.read_csv(self.path)
            except pd.errors.EmptyDataError:
                return pd.DataFrame()
        if self.ext == ".tsv":
            try:
                return pd.read_csv(self.path, sep="\t")
            except pd.errors.EmptyDataError:
                return pd.DataFrame()
        if self.ext == ".parquet":
            self._ensure_parquet_engine()
            return pd.read_parquet(self.path)
        # .xlsx
        self._ensure_excel_engine()
        return pd.read_excel(self.path, sheet_name=sheet_name)

    def _ensure_parquet_engine(self):
        try:
            import pyarrow  # noqa: F401

            return
        except ImportError:
            pass
        raise UnsupportedFileTypeError(
            "Parquet support requires pyarrow. Install via: pip install pyarrow"
        )

    def _ensure_excel_engine(self):
        try:
            import openpyxl  # noqa: F401

            return
        except ImportError:
            pass
        raise UnsupportedFileTypeError(
            "XLSX support requires openpyxl. Install via: pip install openpyxl"
        )
