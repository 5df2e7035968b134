"""Spreadsheet field contracts for the bulk importers."""

from __future__ import annotations

from .events import EVENT_FIELDS
from .fields import (
    FieldSpec,
    build_alias_map,
    normalize_header,
    normalize_integer,
    normalize_text,
    required_fields,
)
from .members import MEMBER_FIELDS

__all__ = [
    "EVENT_FIELDS",
    "MEMBER_FIELDS",
    "FieldSpec",
    "build_alias_map",
    "normalize_header",
    "normalize_integer",
    "normalize_text",
    "required_fields",
]
