"""Importer pipeline: date handling, row transforms and the transactional load."""

from .dates import normalize_date
from .replace import DEFAULT_BATCH_SIZE, ImportLoadError, ImportSummary, replace_collection
from .transform import (
    build_full_name,
    build_school_history,
    infer_category,
    is_active_status,
    transform_directory_row,
    transform_event_row,
    transform_member_row,
)

__all__ = [
    "DEFAULT_BATCH_SIZE",
    "ImportLoadError",
    "ImportSummary",
    "build_full_name",
    "build_school_history",
    "infer_category",
    "is_active_status",
    "normalize_date",
    "replace_collection",
    "transform_directory_row",
    "transform_event_row",
    "transform_member_row",
]
