class TablecopyError(Exception):
    """Base class for errors raised by tablecopy."""


class ExportValidationError(TablecopyError, ValueError):
    pass


class ExportWriteError(TablecopyError):
    def __init__(self, message: str, errno: int | None = None):
        super().__init__(message)
        self.errno = errno


class ClipboardError(TablecopyError):
    pass


class UnsupportedFileTypeError(TablecopyError, ValueError):
    pass
