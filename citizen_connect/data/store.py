"""Application state container for CitizenConnect."""

from __future__ import annotations

import datetime
import logging
import random
from collections.abc import Callable

from ..adapters.memory import MemoryBackend
from ..config import Settings
from ..core.errors import AuthorizationRequired, CitizenConnectError
from ..core.models import UPDATE_TYPES, Activity, Issue, Politician, Update, User
from ..core.notifications import Notifier
from ..core.storage import SessionStore
from . import seed
from .models import (
    MODAL_KEYS,
    Filters,
    LoginForm,
    ModalVisibility,
    ReportIssueForm,
    SettingsForm,
    SignupForm,
    Snapshot,
    Stats,
)
from .repositories import (
    ActivityRepository,
    IssueRepository,
    PoliticianRepository,
    UpdateRepository,
)
from .views import (
    BASE_ACTIVE_POLITICIANS,
    BASE_RESOLVED_ISSUES,
    BASE_TOTAL_ISSUES,
    compute_stats,
    visible_issues,
    visible_updates,
)

log = logging.getLogger(__name__)

SECTIONS = ("dashboard", "issues", "politicians", "updates", "profile")
DEFAULT_SECTION = "dashboard"
NO_LOCATION = "Location not specified"


class CitizenStore:
    """Single source of truth for the UI.

    Every mutation goes through one of the public operations below. An
    operation returns ``None`` on success or the user-facing error message
    when it was rejected; rejected operations leave the state untouched
    apart from the login modal opened as a recovery hint.
    """

    def __init__(
        self,
        session: SessionStore | None = None,
        notifier: Notifier | None = None,
        settings: Settings | None = None,
        clock: Callable[[], datetime.datetime] = datetime.datetime.now,
        rng: random.Random | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self.session = session or SessionStore(
            MemoryBackend(), key=self.settings.session_key
        )
        self.notifier = notifier or Notifier(ttl=self.settings.notification_ttl)
        self.clock = clock
        self.rng = rng or random.Random()

        self._issues = IssueRepository()
        self._politicians = PoliticianRepository()
        self._updates = UpdateRepository()
        self._activities = ActivityRepository(limit=self.settings.activity_limit)
        self._filters = Filters()
        self._modals = ModalVisibility()
        self._section = DEFAULT_SECTION
        self._update_filter = "all"
        self._user: User | None = None

        self._seed()
        self._user = self.session.load()
        if self._user is not None:
            log.info("Restored session for %s", self._user.email)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _seed(self) -> None:
        self._politicians.seed(seed.seed_politicians())
        self._updates.seed(seed.seed_updates())
        self._issues.seed(seed.seed_issues())
        self._activities.seed(seed.seed_activities())

    def _set_user(self, user: User | None) -> None:
        """Replace the current user and mirror the change to the session."""
        self._user = user
        if user is None:
            self.session.clear()
        else:
            self.session.save(user)

    def _require_user(self, message: str, open_login: bool = True) -> User:
        if self._user is None:
            raise AuthorizationRequired(message, open_login=open_login)
        return self._user

    def _reject(self, exc: CitizenConnectError) -> str:
        message = exc.message
        log.warning("Rejected action: %s", message)
        self.notifier.notify(message, "error")
        if isinstance(exc, AuthorizationRequired) and exc.open_login:
            self._modals.login = True
        return message

    def _log_activity(self, kind: str, description: str) -> None:
        self._activities.add(
            Activity(
                type=kind,
                description=description,
                time="Just now",
                icon="plus-circle" if kind == "reported" else "circle",
            )
        )

    # ------------------------------------------------------------------
    # Read side
    # ------------------------------------------------------------------
    @property
    def current_user(self) -> User | None:
        return self._user.model_copy() if self._user is not None else None

    @property
    def issues(self) -> list[Issue]:
        return self._issues.all()

    @property
    def politicians(self) -> list[Politician]:
        return self._politicians.all()

    @property
    def updates(self) -> list[Update]:
        return self._updates.all()

    @property
    def activities(self) -> list[Activity]:
        return self._activities.all()

    @property
    def filters(self) -> Filters:
        return self._filters

    @property
    def modals(self) -> ModalVisibility:
        return self._modals.copy()

    @property
    def current_section(self) -> str:
        return self._section

    @property
    def update_filter(self) -> str:
        return self._update_filter

    @property
    def visible_issues(self) -> list[Issue]:
        return visible_issues(self._issues, self._filters)

    @property
    def visible_updates(self) -> list[Update]:
        return visible_updates(self._updates, self._update_filter)

    @property
    def stats(self) -> Stats:
        return compute_stats(
            BASE_TOTAL_ISSUES,
            BASE_RESOLVED_ISSUES,
            BASE_ACTIVE_POLITICIANS,
            len(self._issues),
        )

    def recent_activity(self, limit: int = 5) -> list[Activity]:
        return self._activities.all()[:limit]

    def snapshot(self) -> Snapshot:
        return Snapshot(
            current_user=self.current_user,
            issues=tuple(self._issues),
            visible_issues=tuple(self.visible_issues),
            politicians=tuple(self._politicians),
            updates=tuple(self._updates),
            activities=tuple(self._activities),
            stats=self.stats,
            filters=self._filters,
            modals=self._modals.copy(),
            current_section=self._section,
            update_filter=self._update_filter,
            notifications=tuple(self.notifier.active()),
        )

    # ------------------------------------------------------------------
    # Session operations
    # ------------------------------------------------------------------
    def login(self, form: LoginForm) -> str | None:
        try:
            form.validate()
        except CitizenConnectError as exc:
            return self._reject(exc)

        user = User(
            name=form.display_name,
            email=form.email,
            role=form.role,
            location=self.settings.default_location,
            join_date=self.settings.default_join_date,
            avatar="",
        )
        self._set_user(user)
        self._modals.login = False
        log.info("User %s logged in as %s", user.email, user.role)
        self.notifier.notify("Login successful! Welcome back.", "success")
        return None

    def signup(self, form: SignupForm) -> str | None:
        try:
            form.validate()
        except CitizenConnectError as exc:
            return self._reject(exc)

        user = User(
            name=form.name,
            email=form.email,
            role=form.role,
            location=form.location,
            join_date=self.clock().strftime("%B %Y"),
            avatar="",
        )
        self._set_user(user)
        self._modals.signup = False
        log.info("User %s signed up as %s", user.email, user.role)
        self.notifier.notify(
            "Account created successfully! Welcome to CitizenConnect.", "success"
        )
        return None

    def logout(self) -> str | None:
        if self._user is not None:
            log.info("User %s logged out", self._user.email)
        self._set_user(None)
        self.notifier.notify("You have been logged out successfully.", "success")
        self._section = DEFAULT_SECTION
        return None

    def update_settings(self, form: SettingsForm) -> str | None:
        try:
            user = self._require_user(
                "Please log in to update settings.", open_login=False
            )
        except CitizenConnectError as exc:
            return self._reject(exc)

        updated = user.model_copy(
            update={"name": form.name, "email": form.email, "location": form.location}
        )
        self._set_user(updated)
        log.info("Settings updated for user %s", updated.id)
        self.notifier.notify("Settings updated successfully!", "success")
        return None

    # ------------------------------------------------------------------
    # Issue operations
    # ------------------------------------------------------------------
    def report_issue(self, form: ReportIssueForm) -> str | None:
        try:
            user = self._require_user("Please log in to report an issue.")
            form.validate()
        except CitizenConnectError as exc:
            return self._reject(exc)

        today = self.clock()
        issue = Issue(
            title=form.title,
            category=form.category,
            description=form.description,
            location=form.location or NO_LOCATION,
            status="urgent" if form.urgent else "open",
            author=user.name,
            date=f"{today.month}/{today.day}/{today.year}",
            votes=self.rng.randint(1, 50),
            comments=self.rng.randint(1, 20),
        )
        self._issues.add(issue)
        self._modals.report = False
        log.info("Issue %s reported by %s: %s", issue.id, user.email, issue.title)
        self.notifier.notify("Issue reported successfully!", "success")
        self._log_activity("reported", f"New issue: {issue.title}")
        return None

    def vote(self, issue_id: str) -> str | None:
        try:
            self._require_user("Please log in to vote on issues.")
        except CitizenConnectError as exc:
            return self._reject(exc)

        if not self._issues.increment_votes(issue_id):
            log.debug("Vote for unknown issue %s ignored", issue_id)
            return None
        log.debug("Vote recorded for issue %s", issue_id)
        self.notifier.notify("Your support has been recorded.", "success")
        self._log_activity("voted", "Supported an issue")
        return None

    # ------------------------------------------------------------------
    # Representative operations
    # ------------------------------------------------------------------
    def message_politician(self, name: str, text: str | None) -> str | None:
        """Send ``text`` to the representative called ``name``.

        The message itself is not stored anywhere; only the activity feed
        records it. An empty or cancelled message is silently ignored.
        """
        try:
            self._require_user("Please log in to send messages.")
        except CitizenConnectError as exc:
            return self._reject(exc)

        if not text:
            return None
        log.info("Message sent to %s", name)
        self.notifier.notify("Message sent successfully!", "success")
        self._log_activity("messaged", f"Sent message to {name}")
        return None

    def follow_politician(self, politician_id: str) -> str | None:
        try:
            self._require_user("Please log in to follow representatives.")
        except CitizenConnectError as exc:
            return self._reject(exc)

        log.info("Following representative %s", politician_id)
        self.notifier.notify("You are now following this representative!", "success")
        self._log_activity("followed", "Started following a representative")
        return None

    # ------------------------------------------------------------------
    # View state
    # ------------------------------------------------------------------
    def change_filters(
        self,
        category: str | None = None,
        status: str | None = None,
        search: str | None = None,
    ) -> None:
        """Merge the given criteria into the active filters."""
        current = self._filters
        self._filters = Filters(
            category=current.category if category is None else category,
            status=current.status if status is None else status,
            search=current.search if search is None else search,
        )
        log.debug("Filters now %s", self._filters)

    def set_update_filter(self, kind: str) -> str | None:
        if kind != "all" and kind not in UPDATE_TYPES:
            log.warning("Unknown update filter %r", kind)
            return "Unknown update type."
        self._update_filter = kind
        return None

    def navigate(self, section: str) -> str | None:
        if section not in SECTIONS:
            log.warning("Unknown section %r", section)
            return "Unknown section."
        self._section = section
        log.debug("Navigated to %s", section)
        return None

    def open_modal(self, key: str) -> str | None:
        return self._toggle_modal(key, True)

    def close_modal(self, key: str) -> str | None:
        return self._toggle_modal(key, False)

    def _toggle_modal(self, key: str, is_open: bool) -> str | None:
        if key not in MODAL_KEYS:
            log.warning("Unknown modal %r", key)
            return "Unknown modal."
        self._modals.set(key, is_open)
        log.debug("Modal %s %s", key, "opened" if is_open else "closed")
        return None
