"""Tests for the session persistence layer."""

import json
from pathlib import Path

import pytest

from citizen_connect.adapters.json_file import JSONFileBackend
from citizen_connect.adapters.memory import MemoryBackend
from citizen_connect.core.models import User
from citizen_connect.core.storage import SessionStore


def _user() -> User:
    return User(
        name="John Doe",
        email="john.doe@example.com",
        role="citizen",
        location="Springfield, IL",
        join_date="January 2024",
    )


def test_save_then_load_round_trip() -> None:
    """A saved user comes back equal in every field."""
    store = SessionStore(MemoryBackend())
    user = _user()
    store.save(user)

    loaded = store.load()
    assert loaded == user
    assert loaded is not user


def test_load_missing_record() -> None:
    """No stored record yields ``None``."""
    assert SessionStore(MemoryBackend()).load() is None


def test_load_unparseable_record() -> None:
    """Garbage under the session key is treated as no user."""
    backend = MemoryBackend({"citizen_user": "{not json"})
    assert SessionStore(backend).load() is None


def test_load_record_missing_fields() -> None:
    backend = MemoryBackend({"citizen_user": json.dumps({"name": "x"})})
    assert SessionStore(backend).load() is None


def test_saved_format_uses_camel_case() -> None:
    backend = MemoryBackend()
    SessionStore(backend).save(_user())
    data = json.loads(backend.get("citizen_user"))
    assert data["joinDate"] == "January 2024"
    assert data["email"] == "john.doe@example.com"


def test_save_overwrites_and_clear_removes() -> None:
    backend = MemoryBackend()
    store = SessionStore(backend)
    store.save(_user())
    other = User(name="Ann", email="ann@x.org", role="politician")
    store.save(other)
    assert store.load() == other

    store.clear()
    assert store.load() is None
    assert backend.get("citizen_user") is None
    # clearing twice is harmless
    store.clear()


def test_custom_key() -> None:
    backend = MemoryBackend()
    SessionStore(backend, key="other").save(_user())
    assert SessionStore(backend).load() is None
    assert SessionStore(backend, key="other").load() is not None


def test_persistence_across_instances(tmp_path: Path) -> None:
    """Data survives across multiple backend instances."""
    path = tmp_path / "data.json"
    SessionStore(JSONFileBackend(path)).save(_user())

    assert path.exists()

    loaded = SessionStore(JSONFileBackend(path)).load()
    assert loaded is not None
    assert loaded.name == "John Doe"


def test_json_backend_remove_persists(tmp_path: Path) -> None:
    path = tmp_path / "data.json"
    backend = JSONFileBackend(path)
    backend.set("a", "1")
    backend.set("b", "2")
    backend.remove("a")

    reloaded = JSONFileBackend(path)
    assert reloaded.get("a") is None
    assert reloaded.get("b") == "2"


def test_json_backend_ignores_corrupt_file(tmp_path: Path) -> None:
    path = tmp_path / "data.json"
    path.write_text("[1, 2", encoding="utf-8")
    backend = JSONFileBackend(path)
    assert backend.get("citizen_user") is None
    assert SessionStore(backend).load() is None


def test_json_backend_creates_missing_directory(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "dir" / "data.json"
    SessionStore(JSONFileBackend(path)).save(_user())
    assert path.exists()
    assert SessionStore(JSONFileBackend(path)).load() is not None


def test_json_backend_failed_write_leaves_no_temp_file(tmp_path: Path, monkeypatch) -> None:
    path = tmp_path / "data.json"
    backend = JSONFileBackend(path)
    backend.set("kept", "1")

    def broken_dump(*args, **kwargs):
        raise TypeError("not serialisable")

    monkeypatch.setattr("citizen_connect.adapters.json_file.json.dump", broken_dump)
    with pytest.raises(TypeError):
        backend.set("lost", "2")
    monkeypatch.undo()

    assert not (tmp_path / "data.json.tmp").exists()
    assert JSONFileBackend(path).get("kept") == "1"
    assert JSONFileBackend(path).get("lost") is None
