"""Transactional replace of a whole collection.

The delete and every insert batch share one transaction: either the new rows
replace the old ones completely or the table is left as it was.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Mapping, Sequence

from sqlalchemy.exc import SQLAlchemyError

from nouasseur_app.models import db

logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = 100


class ImportLoadError(Exception):
    """Raised when the replace transaction fails and has been rolled back."""


@dataclass
class ImportSummary:
    """Counters reported at the end of an import run."""

    collection: str
    rows_read: int = 0
    rows_inserted: int = 0
    rows_skipped: int = 0
    rows_blank: int = 0
    rows_deleted: int = 0
    dry_run: bool = False

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


def replace_collection(
    model,
    records: Sequence[Mapping[str, object]],
    *,
    batch_size: int = DEFAULT_BATCH_SIZE,
) -> tuple[int, int]:
    """Delete every ``model`` row and insert ``records``; return (deleted, inserted)."""
    if batch_size < 1:
        raise ValueError("batch_size must be at least 1")

    table_name = model.__tablename__
    total_batches = (len(records) + batch_size - 1) // batch_size
    try:
        deleted = db.session.query(model).delete(synchronize_session=False)
        logger.info("Cleared %s existing rows from %s", deleted, table_name)

        for batch_number, start in enumerate(range(0, len(records), batch_size), start=1):
            batch = records[start : start + batch_size]
            db.session.add_all([model(**values) for values in batch])
            db.session.flush()
            logger.info("Inserted batch %s of %s into %s", batch_number, total_batches, table_name)

        db.session.commit()
    except SQLAlchemyError as exc:
        db.session.rollback()
        logger.error("Import into %s rolled back: %s", table_name, exc, exc_info=True)
        raise ImportLoadError(f"Import into {table_name} failed and was rolled back") from exc

    return deleted, len(records)
