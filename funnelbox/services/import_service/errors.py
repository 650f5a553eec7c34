"""Exceptions raised by the import service."""


class ImportServiceError(Exception):
    """Base class for import service errors."""


class RowSkipped(ImportServiceError):
    """A row was left out for an expected data-quality reason.

    The processor records the reason as a warning rather than an error.
    """

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class UnsupportedFileType(ImportServiceError):
    """A report file has an extension the importer cannot read."""
