"""Core package for CitizenConnect.

This module exposes the application state container and its data models so
that the UI layer can simply import them from ``citizen_connect``.
"""

from .core.models import Activity, Issue, Politician, Update, User
from .core.storage import SessionStore
from .data.models import (
    Filters,
    LoginForm,
    ReportIssueForm,
    SettingsForm,
    SignupForm,
    Snapshot,
    Stats,
)
from .data.store import CitizenStore

__all__ = [
    "Activity",
    "CitizenStore",
    "Filters",
    "Issue",
    "LoginForm",
    "Politician",
    "ReportIssueForm",
    "SessionStore",
    "SettingsForm",
    "SignupForm",
    "Snapshot",
    "Stats",
    "Update",
    "User",
]
