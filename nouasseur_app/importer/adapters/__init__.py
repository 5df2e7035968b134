"""Source adapters for the bulk importers."""

from .spreadsheet import (
    ImportFileError,
    SpreadsheetHeaderError,
    SpreadsheetReader,
    SpreadsheetRow,
    SpreadsheetStatistics,
)

__all__ = [
    "ImportFileError",
    "SpreadsheetHeaderError",
    "SpreadsheetReader",
    "SpreadsheetRow",
    "SpreadsheetStatistics",
]
