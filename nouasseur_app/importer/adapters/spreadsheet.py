"""Spreadsheet adapter for the bulk importers.

Reads the first worksheet of an ``.xlsx`` workbook (openpyxl) or a ``.csv``
file, maps its header row onto a field contract and yields normalized rows.
Columns the contract does not know are ignored and reported in the statistics.
"""

from __future__ import annotations

import csv
import zipfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Sequence

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from nouasseur_app.importer.contracts import FieldSpec, build_alias_map, normalize_header, required_fields

SUPPORTED_SUFFIXES = (".xlsx", ".csv")


class ImportFileError(Exception):
    """Raised when the source file cannot be opened or read."""


class SpreadsheetHeaderError(ImportFileError):
    """Raised when the header row does not satisfy the field contract."""

    def __init__(self, *, missing: Sequence[str] = (), empty: bool = False) -> None:
        if empty:
            message = "Spreadsheet header validation failed. No recognised columns in the header row."
        else:
            message = f"Spreadsheet header validation failed. Missing required columns: {', '.join(sorted(missing))}."
        super().__init__(message)
        self.missing = tuple(missing)


@dataclass(frozen=True)
class SpreadsheetRow:
    """One data row, keyed by canonical field name."""

    sequence_number: int
    raw: dict[str, object | None]
    values: dict[str, object | None]


@dataclass
class SpreadsheetStatistics:
    rows_processed: int = 0
    rows_skipped_blank: int = 0
    unrecognised_headers: list[str] = field(default_factory=list)


def _is_blank(value: object | None) -> bool:
    return value is None or (isinstance(value, str) and value.strip() == "")


class SpreadsheetReader:
    """Stream rows from a workbook or CSV file according to ``field_specs``."""

    def __init__(self, path: str | Path, field_specs: Sequence[FieldSpec], *, skip_blank_rows: bool = True) -> None:
        self.path = Path(path)
        self.field_specs = tuple(field_specs)
        self.skip_blank_rows = skip_blank_rows
        self.statistics = SpreadsheetStatistics()
        self._specs_by_name = {spec.name: spec for spec in self.field_specs}

        suffix = self.path.suffix.lower()
        if suffix not in SUPPORTED_SUFFIXES:
            raise ImportFileError(
                f"Unsupported file type '{self.path.suffix or self.path.name}'. Expected one of: {', '.join(SUPPORTED_SUFFIXES)}."
            )
        if not self.path.is_file():
            raise ImportFileError(f"File not found: {self.path}")

    def _iter_table(self) -> Iterator[Sequence[object | None]]:
        """Yield the header row followed by the data rows"""
        if self.path.suffix.lower() == ".csv":
            try:
                with self.path.open("r", encoding="utf-8-sig", newline="") as handle:
                    yield from csv.reader(handle)
            except (OSError, UnicodeDecodeError, csv.Error) as exc:
                raise ImportFileError(f"Could not read {self.path.name}: {exc}") from exc
            return

        try:
            workbook = load_workbook(self.path, read_only=True, data_only=True)
        except (InvalidFileException, zipfile.BadZipFile, OSError, KeyError) as exc:
            raise ImportFileError(f"Could not open workbook {self.path.name}: {exc}") from exc
        try:
            if not workbook.worksheets:
                return
            yield from workbook.worksheets[0].iter_rows(values_only=True)
        finally:
            workbook.close()

    def _map_headers(self, header_row: Sequence[object | None]) -> dict[str, list[int]]:
        """Column indexes per canonical field, in alias priority order"""
        alias_map = build_alias_map(self.field_specs)
        candidates: dict[str, list[tuple[int, int]]] = {}
        unrecognised = []
        for index, header in enumerate(header_row):
            if _is_blank(header):
                continue
            match = alias_map.get(normalize_header(header))
            if match is None:
                unrecognised.append(str(header).strip())
                continue
            name, priority = match
            candidates.setdefault(name, []).append((priority, index))

        self.statistics.unrecognised_headers = unrecognised
        if not candidates:
            raise SpreadsheetHeaderError(empty=True)
        missing = [name for name in required_fields(self.field_specs) if name not in candidates]
        if missing:
            raise SpreadsheetHeaderError(missing=missing)
        return {name: [index for _, index in sorted(pairs)] for name, pairs in candidates.items()}

    def iter_rows(self) -> Iterator[SpreadsheetRow]:
        table = self._iter_table()
        header_row = next(table, None)
        if header_row is None:
            raise SpreadsheetHeaderError(empty=True)
        columns = self._map_headers(header_row)

        for sequence_number, cells in enumerate(table, start=1):
            cells = list(cells)
            if self.skip_blank_rows and all(_is_blank(cell) for cell in cells):
                self.statistics.rows_skipped_blank += 1
                continue

            raw: dict[str, object | None] = {}
            values: dict[str, object | None] = {}
            for name, indexes in columns.items():
                # First non-blank cell among the columns feeding this field
                cell = next(
                    (cells[index] for index in indexes if index < len(cells) and not _is_blank(cells[index])),
                    None,
                )
                raw[name] = cell
                values[name] = self._specs_by_name[name].normalize(cell)

            self.statistics.rows_processed += 1
            yield SpreadsheetRow(sequence_number=sequence_number, raw=raw, values=values)
