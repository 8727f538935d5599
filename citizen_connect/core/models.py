"""Data models for CitizenConnect's entities.

The models are implemented using :mod:`pydantic` so that they provide
runtime validation and convenient serialisation to and from JSON. Field
names that the UI layer spells in camelCase (``joinDate``,
``politicianResponse`` ...) are exposed as aliases; Python code uses the
snake_case attribute names.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .ids import new_id

Role = Literal["citizen", "politician", "admin", "moderator"]
Category = Literal[
    "infrastructure", "healthcare", "education", "environment", "safety", "transport"
]
Status = Literal["open", "in-progress", "resolved", "closed", "urgent"]
UpdateType = Literal["policy", "events", "announcements"]
Severity = Literal["success", "error"]

LOGIN_ROLES: tuple[str, ...] = ("citizen", "politician", "admin", "moderator")
SIGNUP_ROLES: tuple[str, ...] = ("citizen", "politician")
CATEGORIES: tuple[str, ...] = (
    "infrastructure",
    "healthcare",
    "education",
    "environment",
    "safety",
    "transport",
)
STATUSES: tuple[str, ...] = ("open", "in-progress", "resolved", "closed", "urgent")
UPDATE_TYPES: tuple[str, ...] = ("policy", "events", "announcements")


class _Entity(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=new_id)


class User(_Entity):
    """The authenticated actor of the session.

    Attributes
    ----------
    id:
        Opaque identifier, kept across settings updates.
    name:
        Display name. Derived from the email address on login.
    email:
        Contact address given at login or signup.
    role:
        One of :data:`LOGIN_ROLES`; signup only offers :data:`SIGNUP_ROLES`.
    location:
        Free-text "City, State".
    join_date:
        Human readable month and year, serialised as ``joinDate``.
    avatar:
        Image URL or data URI; empty when none was chosen.

    """

    name: str
    email: str
    role: Role
    location: str = ""
    join_date: str = Field(default="", alias="joinDate")
    avatar: str = ""


class Issue(_Entity):
    """A civic problem reported by a citizen."""

    title: str
    category: Category
    description: str
    location: str
    status: Status
    author: str
    date: str
    votes: int = Field(default=0, ge=0)
    comments: int = Field(default=0, ge=0)
    politician_response: str | None = Field(default=None, alias="politicianResponse")
    resolution: str | None = None


class Politician(_Entity):
    """Read-only representative profile."""

    name: str
    title: str
    party: str
    messages: int = Field(default=0, ge=0)
    rating: float = Field(default=0.0, ge=0, le=5)
    response_rate: int = Field(default=0, ge=0, le=100, alias="responseRate")
    avatar: str = ""


class Update(_Entity):
    """Read-only announcement, policy or event post."""

    type: UpdateType
    date: str
    title: str
    body: str
    author: str
    likes: int = Field(default=0, ge=0)
    comments: int = Field(default=0, ge=0)


class Activity(_Entity):
    """Entry of the recent activity feed."""

    description: str
    time: str
    icon: str = "circle"
    type: str | None = None
