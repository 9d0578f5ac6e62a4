import os
from dataclasses import dataclass
from typing import Optional

from app.core.exceptions import ConfigurationError

DEFAULT_INDEX = "tenders"
DEFAULT_CONNECT_TIMEOUT_SEC = 2.0
DEFAULT_READ_TIMEOUT_SEC = 10.0

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _env_str(name: str) -> Optional[str]:
    value = os.getenv(name)
    if value is None:
        return None
    value = value.strip()
    return value or None


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, str(default)))
    except ValueError:
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = (os.getenv(name) or "").strip().lower()
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    return default


@dataclass(frozen=True)
class SearchSettings:
    """
    Everything needed to reach the tender index.
    Passed explicitly into the app factory, nothing reads the environment after startup.
    """
    endpoint: str
    index: str = DEFAULT_INDEX
    connect_timeout_sec: float = DEFAULT_CONNECT_TIMEOUT_SEC
    read_timeout_sec: float = DEFAULT_READ_TIMEOUT_SEC
    verify_tls: bool = True
    username: Optional[str] = None
    password: Optional[str] = None
    api_key: Optional[str] = None

    @classmethod
    def from_env(cls) -> "SearchSettings":
        endpoint = _env_str("SEARCH_ENDPOINT")
        if not endpoint:
            raise ConfigurationError("SEARCH_ENDPOINT is not configured")

        return cls(
            endpoint=endpoint.rstrip("/"),
            index=_env_str("SEARCH_INDEX") or DEFAULT_INDEX,
            connect_timeout_sec=_env_float("SEARCH_CONNECT_TIMEOUT_SEC", DEFAULT_CONNECT_TIMEOUT_SEC),
            read_timeout_sec=_env_float("SEARCH_READ_TIMEOUT_SEC", DEFAULT_READ_TIMEOUT_SEC),
            verify_tls=_env_bool("SEARCH_VERIFY_TLS", True),
            username=_env_str("SEARCH_USERNAME"),
            password=_env_str("SEARCH_PASSWORD"),
            api_key=_env_str("SEARCH_API_KEY"),
        )
