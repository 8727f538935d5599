import logging

from citizen_connect.config import load_settings
from citizen_connect.logging_config import setup_logging


def test_load_settings(monkeypatch):
    monkeypatch.delenv("CITIZEN_CONNECT_DATA_PATH", raising=False)
    monkeypatch.delenv("CITIZEN_CONNECT_SESSION_KEY", raising=False)
    monkeypatch.delenv("CITIZEN_CONNECT_NOTIFICATION_TTL", raising=False)
    s = load_settings()
    assert s.data_path == "citizen_connect_data.json"
    assert s.session_key == "citizen_user"
    assert s.notification_ttl == 5.0
    assert s.activity_limit == 10

    monkeypatch.setenv("CITIZEN_CONNECT_DATA_PATH", "/tmp/cc.json")
    monkeypatch.setenv("CITIZEN_CONNECT_NOTIFICATION_TTL", "2.5")
    s2 = load_settings()
    assert s2.data_path == "/tmp/cc.json"
    assert s2.notification_ttl == 2.5


def test_load_settings_bad_ttl_falls_back(monkeypatch):
    monkeypatch.setenv("CITIZEN_CONNECT_NOTIFICATION_TTL", "soon")
    assert load_settings().notification_ttl == 5.0
    monkeypatch.setenv("CITIZEN_CONNECT_NOTIFICATION_TTL", "-1")
    assert load_settings().notification_ttl == 5.0


def test_setup_logging_idempotent():
    logger1 = setup_logging(logging.DEBUG)
    logger2 = setup_logging("warning")
    assert logger1 is logger2
    assert logger1.name == "citizen_connect"
    assert logger1.handlers  # at least one handler installed
