"""Run a bulk import: read, transform and (unless dry-running) replace a collection."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Mapping, Sequence

from nouasseur_app.importer.adapters import SpreadsheetReader
from nouasseur_app.importer.contracts import EVENT_FIELDS, MEMBER_FIELDS, FieldSpec
from nouasseur_app.importer.pipeline import (
    DEFAULT_BATCH_SIZE,
    ImportSummary,
    replace_collection,
    transform_directory_row,
    transform_event_row,
    transform_member_row,
)
from nouasseur_app.models import DirectoryEntry, Event, Member

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImportTarget:
    """How one collection is imported"""

    model: type
    field_specs: Sequence[FieldSpec]
    transform: Callable[[Mapping[str, object]], dict | None]


IMPORT_TARGETS: dict[str, ImportTarget] = {
    "events": ImportTarget(Event, EVENT_FIELDS, transform_event_row),
    "members": ImportTarget(Member, MEMBER_FIELDS, transform_member_row),
    # Directory entries are derived from the member workbook
    "directories": ImportTarget(DirectoryEntry, MEMBER_FIELDS, transform_directory_row),
}


def import_collection(
    collection: str,
    path: str | Path,
    *,
    dry_run: bool = False,
    batch_size: int = DEFAULT_BATCH_SIZE,
) -> ImportSummary:
    """
    Replace ``collection`` with the rows of the spreadsheet at ``path``.

    Must be called inside an application context. Raises ``ImportFileError``
    for unreadable input and ``ImportLoadError`` when the replace is rolled
    back; with ``dry_run`` the store is never touched.
    """
    try:
        target = IMPORT_TARGETS[collection]
    except KeyError:
        raise ValueError(f"Unknown import collection '{collection}'") from None

    reader = SpreadsheetReader(path, target.field_specs)
    summary = ImportSummary(collection=collection, dry_run=dry_run)
    records = []
    for row in reader.iter_rows():
        summary.rows_read += 1
        values = target.transform(row.values)
        if values is None:
            summary.rows_skipped += 1
            logger.warning("Skipping %s row %s: missing required values", collection, row.sequence_number)
            continue
        records.append(values)

    summary.rows_blank = reader.statistics.rows_skipped_blank
    if reader.statistics.unrecognised_headers:
        logger.info("Ignored columns in %s: %s", Path(path).name, ", ".join(reader.statistics.unrecognised_headers))

    if dry_run:
        logger.info("Dry run: %s %s rows prepared, nothing written", len(records), collection)
        return summary

    summary.rows_deleted, summary.rows_inserted = replace_collection(target.model, records, batch_size=batch_size)
    logger.info("Imported %s %s rows (%s skipped)", summary.rows_inserted, collection, summary.rows_skipped)
    return summary
