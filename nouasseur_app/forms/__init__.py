from .base import PayloadForm, bind_payload, clean_text
from .directory import DirectoryEntryForm
from .event import EventForm
from .member import MemberForm
from .user import LoginForm, RegistrationForm

__all__ = [
    "PayloadForm",
    "bind_payload",
    "clean_text",
    "DirectoryEntryForm",
    "EventForm",
    "MemberForm",
    "LoginForm",
    "RegistrationForm",
]
