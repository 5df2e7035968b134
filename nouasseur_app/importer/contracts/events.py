"""Event spreadsheet contract.

Event exports come from several hand-maintained workbooks, so each field
accepts its column name, a CamelCase variant and a short label.
"""

from __future__ import annotations

from typing import Tuple

from nouasseur_app.importer.pipeline.dates import normalize_date

from .fields import FieldSpec, normalize_integer


def _event_field(name: str, description: str, *aliases: str, **kwargs) -> FieldSpec:
    return FieldSpec(name=name, description=description, aliases=aliases, **kwargs)


EVENT_FIELDS: Tuple[FieldSpec, ...] = (
    _event_field("event_name", "Event title.", "EventName", "Name", required=True),
    _event_field("event_subtitle", "Secondary title.", "EventSubtitle", "Subtitle"),
    _event_field("event_loc", "Venue or location.", "EventLoc", "Location"),
    _event_field("event_datebeg", "Start date.", "EventDatebeg", "StartDate", normalizer=normalize_date),
    _event_field("event_dateend", "End date.", "EventDateend", "EndDate", normalizer=normalize_date),
    _event_field("event_time", "Free-text time of day.", "EventTime", "Time"),
    _event_field("event_desc", "Description.", "EventDesc", "Description"),
    _event_field("event_photo1", "Photo URL.", "EventPhoto1", "Photo1"),
    _event_field("event_photo2", "Photo URL.", "EventPhoto2", "Photo2"),
    _event_field("event_photo3", "Photo URL.", "EventPhoto3", "Photo3"),
    _event_field("event_photo4", "Photo URL.", "EventPhoto4", "Photo4"),
    _event_field("event_status", "Status label.", "EventStatus", "Status"),
    _event_field("event_sortcode", "Numeric sort code.", "EventSortcode", "SortCode", normalizer=normalize_integer),
)
