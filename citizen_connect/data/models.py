from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any

from ..core.errors import FormValidationError
from ..core.models import (
    CATEGORIES,
    LOGIN_ROLES,
    SIGNUP_ROLES,
    Activity,
    Issue,
    Politician,
    Update,
    User,
)
from ..core.notifications import Notification

MISSING_FIELDS = "Please fill in all fields."
MISSING_REQUIRED = "Please fill in all required fields."


def derive_display_name(email: str) -> str:
    """``"john.doe@example.com"`` -> ``"John Doe"``."""
    local = email.split("@")[0]
    return " ".join(part[:1].upper() + part[1:] for part in local.split("."))


def _from_fields(cls, values: Mapping[str, Any]):
    known = {f.name for f in fields(cls)}
    return cls(**{k: v for k, v in values.items() if k in known})


_FALSE_WORDS = frozenset({"", "0", "false", "off", "no"})


def _checkbox(value: Any) -> bool:
    """Checkbox fields arrive as bools or as strings like ``"on"``/``"false"``."""
    if isinstance(value, str):
        return value.strip().lower() not in _FALSE_WORDS
    return bool(value)


def _blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value)


# ----------------------------------------------------------------------
# Form records handed over by the UI layer
# ----------------------------------------------------------------------
@dataclass
class LoginForm:
    email: str = ""
    password: str = ""
    role: str = ""

    required = ("email", "password", "role")

    @classmethod
    def from_fields(cls, values: Mapping[str, Any]) -> LoginForm:
        return _from_fields(cls, values)

    def missing_fields(self) -> list[str]:
        return [name for name in self.required if _blank(getattr(self, name))]

    def validate(self) -> None:
        missing = self.missing_fields()
        if missing:
            raise FormValidationError(MISSING_FIELDS, missing)
        if self.role not in LOGIN_ROLES:
            raise FormValidationError("Please select a valid role.", ["role"])

    @property
    def display_name(self) -> str:
        return derive_display_name(self.email)


@dataclass
class SignupForm:
    name: str = ""
    email: str = ""
    password: str = ""
    role: str = ""
    location: str = ""

    required = ("name", "email", "password", "role", "location")

    @classmethod
    def from_fields(cls, values: Mapping[str, Any]) -> SignupForm:
        return _from_fields(cls, values)

    def missing_fields(self) -> list[str]:
        return [name for name in self.required if _blank(getattr(self, name))]

    def validate(self) -> None:
        missing = self.missing_fields()
        if missing:
            raise FormValidationError(MISSING_FIELDS, missing)
        if self.role not in SIGNUP_ROLES:
            raise FormValidationError("Please select a valid role.", ["role"])


@dataclass
class ReportIssueForm:
    title: str = ""
    category: str = ""
    description: str = ""
    location: str = ""  # optional
    urgent: bool = False

    required = ("title", "category", "description")

    @classmethod
    def from_fields(cls, values: Mapping[str, Any]) -> ReportIssueForm:
        form = _from_fields(cls, values)
        form.urgent = _checkbox(form.urgent)
        return form

    def missing_fields(self) -> list[str]:
        return [name for name in self.required if _blank(getattr(self, name))]

    def validate(self) -> None:
        missing = self.missing_fields()
        if missing:
            raise FormValidationError(MISSING_REQUIRED, missing)
        if self.category not in CATEGORIES:
            raise FormValidationError("Please select a valid category.", ["category"])


@dataclass
class SettingsForm:
    name: str = ""
    email: str = ""
    location: str = ""

    @classmethod
    def from_fields(cls, values: Mapping[str, Any]) -> SettingsForm:
        return _from_fields(cls, values)


# ----------------------------------------------------------------------
# View state
# ----------------------------------------------------------------------
@dataclass(frozen=True)
class Filters:
    category: str = ""
    status: str = ""
    search: str = ""


MODAL_KEYS = ("login", "signup", "report")


@dataclass
class ModalVisibility:
    login: bool = False
    signup: bool = False
    report: bool = False

    def set(self, key: str, is_open: bool) -> None:
        if key not in MODAL_KEYS:
            raise KeyError(key)
        setattr(self, key, is_open)

    def is_open(self, key: str) -> bool:
        if key not in MODAL_KEYS:
            raise KeyError(key)
        return getattr(self, key)

    def copy(self) -> ModalVisibility:
        return ModalVisibility(self.login, self.signup, self.report)


@dataclass(frozen=True)
class Stats:
    total_issues: int
    resolved_issues: int
    active_politicians: int


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of the store handed to the UI layer."""

    current_user: User | None
    issues: tuple[Issue, ...]
    visible_issues: tuple[Issue, ...]
    politicians: tuple[Politician, ...]
    updates: tuple[Update, ...]
    activities: tuple[Activity, ...]
    stats: Stats
    filters: Filters
    modals: ModalVisibility
    current_section: str
    update_filter: str = "all"
    notifications: tuple[Notification, ...] = field(default_factory=tuple)
