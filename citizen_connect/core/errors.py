"""Exceptions raised by the decision layer of :mod:`citizen_connect`.

They are caught at the :class:`~citizen_connect.data.store.CitizenStore`
operation boundary and turned into error notifications; none of them escape
to the UI layer.
"""

from __future__ import annotations


class CitizenConnectError(Exception):
    """Base class for recoverable errors."""

    @property
    def message(self) -> str:
        return str(self.args[0]) if self.args else ""


class FormValidationError(CitizenConnectError):
    """A required form field is empty or holds an unknown choice."""

    def __init__(self, message: str, fields: list[str] | None = None) -> None:
        super().__init__(message)
        self.fields = list(fields or [])


class AuthorizationRequired(CitizenConnectError):
    """A mutating action was attempted without a current user.

    ``open_login`` tells the store whether to open the login modal as a
    recovery affordance.
    """

    def __init__(self, message: str, open_login: bool = True) -> None:
        super().__init__(message)
        self.open_login = open_login


class PersistenceReadError(CitizenConnectError):
    """A stored session record exists but cannot be decoded."""
