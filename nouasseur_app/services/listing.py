# nouasseur_app/services/listing.py
"""
Filtered, sorted and paginated listings for the members, events and
directories collections.

Every call issues a count query and a slice query against the store. The two
are not wrapped in one transaction, so under concurrent writes the total may be
momentarily out of step with the rows returned. Nothing is cached.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Mapping, Sequence

from sqlalchemy import case, func, or_

from nouasseur_app.models import DirectoryEntry, Event, Member, db

MEMBERS_PAGE_SIZE = 50
EVENTS_PAGE_SIZE = 20
DIRECTORIES_PAGE_SIZE = 10
DEFAULT_MAX_PAGE_SIZE = 100

MEMBER_SEARCH_COLUMNS = (
    Member.first_name,
    Member.last_name,
    Member.married_name,
    Member.school,
    Member.city,
    Member.state,
)
DIRECTORY_SEARCH_COLUMNS = (
    DirectoryEntry.name,
    DirectoryEntry.organization,
    DirectoryEntry.position,
    DirectoryEntry.email,
    DirectoryEntry.department,
    DirectoryEntry.description,
)
EVENT_SEARCH_COLUMNS = (
    Event.event_name,
    Event.event_subtitle,
    Event.event_loc,
    Event.event_desc,
)

# Sorts undated events after every real date inside their own bucket
_FAR_FUTURE = date(9999, 12, 31)


def _parse_positive_int(value: Any, default: int) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number >= 1 else default


@dataclass(frozen=True)
class PageRequest:
    """Normalized listing parameters; invalid input already replaced by defaults."""

    page: int = 1
    page_size: int = MEMBERS_PAGE_SIZE
    search: str | None = None
    category: str | None = None

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    @classmethod
    def from_args(
        cls,
        args: Mapping[str, Any],
        *,
        default_page_size: int,
        max_page_size: int = DEFAULT_MAX_PAGE_SIZE,
    ) -> "PageRequest":
        """Build a request from query-string style arguments.

        Missing or non-numeric ``page``/``pageSize`` values fall back to the
        defaults; ``page`` is floored at 1 and ``pageSize`` is capped at
        ``max_page_size``.
        """
        page = _parse_positive_int(args.get("page"), 1)
        page_size = _parse_positive_int(args.get("pageSize", args.get("page_size")), default_page_size)
        page_size = min(page_size, max_page_size)

        search = (args.get("search") or "").strip() or None
        category = (args.get("category") or "").strip() or None
        return cls(page=page, page_size=page_size, search=search, category=category)

    def link_params(self) -> dict[str, str]:
        """Filter arguments to carry over into pagination links."""
        params = {}
        if self.search:
            params["search"] = self.search
        if self.category:
            params["category"] = self.category
        return params


@dataclass
class PageResult:
    """One page of rows plus the count metadata callers need to paginate."""

    rows: Sequence[Any]
    page: int
    page_size: int
    total_count: int
    extra: dict[str, Any] = field(default_factory=dict)

    @property
    def total_pages(self) -> int:
        if self.total_count <= 0:
            return 0
        return math.ceil(self.total_count / self.page_size)

    @property
    def has_prev(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    def pagination(self) -> dict[str, int]:
        return {
            "page": self.page,
            "pageSize": self.page_size,
            "totalCount": self.total_count,
            "totalPages": self.total_pages,
        }


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so the term matches literally."""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def search_filter(columns: Sequence[Any], term: str):
    """OR-combined, case-insensitive substring match across ``columns``.

    SQLite folds case for ASCII letters only, so accented terms match
    case-sensitively there; PostgreSQL ILIKE folds them too.
    """
    pattern = f"%{escape_like(term)}%"
    return or_(*(column.ilike(pattern, escape="\\") for column in columns))


def paginate(query, page_request: PageRequest, *, order_by: Sequence[Any]) -> PageResult:
    """Run the count and slice queries for ``query``."""
    total_count = query.order_by(None).count()
    rows = query.order_by(*order_by).offset(page_request.offset).limit(page_request.page_size).all()
    return PageResult(
        rows=rows,
        page=page_request.page,
        page_size=page_request.page_size,
        total_count=total_count,
    )


def list_members(page_request: PageRequest) -> PageResult:
    query = Member.query
    if page_request.search:
        query = query.filter(search_filter(MEMBER_SEARCH_COLUMNS, page_request.search))
    return paginate(query, page_request, order_by=(Member.last_name, Member.first_name, Member.id))


def list_directories(page_request: PageRequest) -> PageResult:
    query = DirectoryEntry.query
    if page_request.category:
        query = query.filter(DirectoryEntry.category == page_request.category)
    if page_request.search:
        query = query.filter(search_filter(DIRECTORY_SEARCH_COLUMNS, page_request.search))
    return paginate(
        query,
        page_request,
        order_by=(DirectoryEntry.sort_order, DirectoryEntry.name, DirectoryEntry.id),
    )


def list_directory_categories() -> list[str]:
    rows = (
        db.session.query(DirectoryEntry.category)
        .filter(DirectoryEntry.category.isnot(None))
        .distinct()
        .order_by(DirectoryEntry.category)
        .all()
    )
    return [row[0] for row in rows]


def event_display_order(today: date | None = None) -> tuple:
    """Upcoming (start >= today) first, then undated, then past; each by date then name."""
    today = today or date.today()
    bucket = case(
        (Event.event_datebeg >= today, 0),
        (Event.event_datebeg.is_(None), 1),
        else_=2,
    )
    return (bucket, func.coalesce(Event.event_datebeg, _FAR_FUTURE), Event.event_name, Event.id)


def list_events(page_request: PageRequest, *, today: date | None = None) -> PageResult:
    query = Event.query
    if page_request.search:
        query = query.filter(search_filter(EVENT_SEARCH_COLUMNS, page_request.search))
    return paginate(query, page_request, order_by=event_display_order(today))


def upcoming_events(limit: int, *, today: date | None = None) -> list[Event]:
    """Events starting today or later, plus undated ones, soonest first."""
    today = today or date.today()
    return (
        Event.query.filter(or_(Event.event_datebeg >= today, Event.event_datebeg.is_(None)))
        .order_by(*event_display_order(today))
        .limit(limit)
        .all()
    )
