# nouasseur_app/models/__init__.py
"""
Database models package
"""

from .base import BaseModel, db, utcnow
from .directory import DirectoryEntry
from .event import Event
from .member import Member
from .user import User

__all__ = [
    "db",
    "utcnow",
    "BaseModel",
    "User",
    "Member",
    "Event",
    "DirectoryEntry",
]
