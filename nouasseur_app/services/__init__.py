"""
Service layer: listing queries shared by the JSON API and the HTML pages.
"""

from .listing import (
    DIRECTORIES_PAGE_SIZE,
    EVENTS_PAGE_SIZE,
    MEMBERS_PAGE_SIZE,
    PageRequest,
    PageResult,
    list_directories,
    list_directory_categories,
    list_events,
    list_members,
    upcoming_events,
)

__all__ = [
    "DIRECTORIES_PAGE_SIZE",
    "EVENTS_PAGE_SIZE",
    "MEMBERS_PAGE_SIZE",
    "PageRequest",
    "PageResult",
    "list_directories",
    "list_directory_categories",
    "list_events",
    "list_members",
    "upcoming_events",
]
