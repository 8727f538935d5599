import os
from dataclasses import dataclass

@dataclass(frozen=True)
class Settings:
    data_path: str = "citizen_connect_data.json"
    session_key: str = "citizen_user"
    # seconds a notification stays visible
    notification_ttl: float = 5.0
    activity_limit: int = 10
    # applied to users created by login, which collects no profile data
    default_location: str = "Springfield, IL"
    default_join_date: str = "January 2024"

def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default

def load_settings() -> Settings:
    defaults = Settings()
    return Settings(
        data_path=os.getenv("CITIZEN_CONNECT_DATA_PATH", "").strip() or defaults.data_path,
        session_key=os.getenv("CITIZEN_CONNECT_SESSION_KEY", "").strip() or defaults.session_key,
        notification_ttl=_float_env("CITIZEN_CONNECT_NOTIFICATION_TTL", defaults.notification_ttl),
    )
