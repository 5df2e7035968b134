"""Row transforms turning normalized spreadsheet rows into model values."""

from __future__ import annotations

from typing import Mapping

EVENT_DEFAULT_STATUS = "active"
EVENT_DEFAULT_SORTCODE = 100
EVENT_IMPORT_USER = "import_script"

DEFAULT_ORGANIZATION = "Nouasseur"
UNKNOWN = "Unknown"

# Checked in order; the first keyword found in the type text wins
CATEGORY_KEYWORDS = (
    ("FACULTY", "Faculty"),
    ("STUDENT", "Student"),
    ("STAFF", "Staff"),
    ("DEPENDENT", "Dependent"),
)

INACTIVE_STATUS_MARKERS = ("NOT LOCATED", "DECEASED")

EVENT_COLUMNS = (
    "event_name",
    "event_subtitle",
    "event_loc",
    "event_datebeg",
    "event_dateend",
    "event_time",
    "event_desc",
    "event_photo1",
    "event_photo2",
    "event_photo3",
    "event_photo4",
    "event_status",
    "event_sortcode",
)


def infer_category(type_value: str | None) -> str:
    """Directory category from a free-text member type.

    ``FACULTY-EMERITUS`` gives ``Faculty``; a type with no known keyword is
    kept as written (``VOLUNTEER`` stays ``VOLUNTEER``).
    """
    text = (type_value or "").strip()
    if not text:
        return UNKNOWN
    upper = text.upper()
    for keyword, category in CATEGORY_KEYWORDS:
        if keyword in upper:
            return category
    return text


def build_full_name(first: str | None, middle: str | None, last: str | None, married: str | None = None) -> str:
    """First, middle and last name; the married name stands in for a missing last name."""
    surname = (last or married or "").replace("(", "").replace(")", "").strip()
    parts = [part.strip() for part in (first, middle) if part and part.strip()]
    if surname:
        parts.append(surname)
    return " ".join(parts) or UNKNOWN


def join_lines(*lines: str | None) -> str | None:
    text = "\n".join(line.strip() for line in lines if line and line.strip())
    return text or None


def build_school_history(row: Mapping[str, object]) -> str | None:
    """Graduation year, attendance and other schools as a description block"""
    description = ""
    if row.get("graduation_year"):
        description += f"Graduation Year: {row['graduation_year']}\n"

    if row.get("grades_attended") or row.get("dates_attended"):
        description += f"Grades Attended: {row.get('grades_attended') or UNKNOWN}\n"
        description += f"Dates Attended: {row.get('dates_attended') or UNKNOWN}\n\n"

    for index in (1, 2, 3):
        school = row.get(f"other_school{index}")
        if not school:
            continue
        description += f"Other School: {school}\n"
        dates_grades = row.get(f"dates_grades{index}")
        if dates_grades:
            description += f"Dates/Grades: {dates_grades}\n\n"

    return description.strip() or None


def is_active_status(status: str | None) -> bool:
    upper = (status or "").upper()
    return not any(marker in upper for marker in INACTIVE_STATUS_MARKERS)


def transform_event_row(row: Mapping[str, object]) -> dict | None:
    """Event values for one row, or None when the row has no event name."""
    values = {column: row.get(column) for column in EVENT_COLUMNS}
    if not values["event_name"]:
        return None
    values["event_status"] = values["event_status"] or EVENT_DEFAULT_STATUS
    if values["event_sortcode"] is None:
        values["event_sortcode"] = EVENT_DEFAULT_SORTCODE
    values["event_moduser"] = EVENT_IMPORT_USER
    return values


def transform_member_row(row: Mapping[str, object]) -> dict:
    return dict(row)


def transform_directory_row(row: Mapping[str, object]) -> dict:
    """Directory entry derived from a member spreadsheet row"""
    member_type = row.get("member_type")
    return {
        "name": build_full_name(
            row.get("first_name"),
            row.get("middle_initial"),
            row.get("last_name"),
            row.get("married_name"),
        ),
        "position": member_type,
        "organization": row.get("school") or DEFAULT_ORGANIZATION,
        "department": None,
        "address": join_lines(row.get("address1"), row.get("address2"), row.get("address3")),
        "city": row.get("city"),
        "state": row.get("state"),
        "zip_code": row.get("zip_code"),
        "country": row.get("country"),
        "phone": row.get("home_phone") or row.get("work_phone"),
        "email": row.get("email1") or row.get("email2"),
        "website": None,
        "category": infer_category(member_type),
        "sub_category": member_type,
        "description": build_school_history(row),
        "notes": row.get("comments"),
        "sort_order": row.get("member_id"),
        "is_active": is_active_status(row.get("status")),
    }
