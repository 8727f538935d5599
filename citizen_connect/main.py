from __future__ import annotations

from .adapters.json_file import JSONFileBackend
from .config import load_settings
from .core.notifications import Notifier
from .core.storage import SessionStore
from .data.store import CitizenStore
from .logging_config import setup_logging


def build_store(settings=None) -> CitizenStore:
    settings = settings or load_settings()
    session = SessionStore(JSONFileBackend(settings.data_path), key=settings.session_key)
    return CitizenStore(
        session=session,
        notifier=Notifier(ttl=settings.notification_ttl),
        settings=settings,
    )


def main() -> int:
    log = setup_logging()
    settings = load_settings()
    store = build_store(settings)
    snap = store.snapshot()
    log.info(
        "Loaded %d issues, %d representatives, %d updates (total reported: %d)",
        len(snap.issues),
        len(snap.politicians),
        len(snap.updates),
        snap.stats.total_issues,
    )
    if snap.current_user is None:
        log.info("No saved session in %s", settings.data_path)
    else:
        log.info("Welcome back, %s", snap.current_user.name)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
