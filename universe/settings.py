from __future__ import annotations

import os

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 3000
DEFAULT_LOG_LEVEL = "info"
DEFAULT_MAX_BODY_BYTES = 65_536
DEFAULT_REQUEST_TIMEOUT_SECONDS = 15.0


def _flag(name: str, default: str = "off") -> bool:
    value = os.getenv(name, default).strip().lower()
    return value in {"1", "true", "yes", "on"}


def _parse_int(raw: str | None, default: int | None) -> int | None:
    if raw is None:
        return default
    raw = raw.strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    if value <= 0:
        return None
    return value


def _parse_float(raw: str | None, default: float | None) -> float | None:
    if raw is None:
        return default
    raw = raw.strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    if value <= 0:
        return None
    return value


def server_host() -> str:
    return (os.getenv("GCD_HOST") or "").strip() or DEFAULT_HOST


def server_port() -> int:
    return _parse_int(os.getenv("GCD_PORT"), DEFAULT_PORT) or DEFAULT_PORT


def log_level() -> str:
    return (os.getenv("GCD_LOG_LEVEL") or "").strip().lower() or DEFAULT_LOG_LEVEL


def log_json() -> bool:
    return _flag("GCD_LOG_JSON", "off")


def max_body_bytes() -> int | None:
    return _parse_int(os.getenv("GCD_MAX_BODY_BYTES"), DEFAULT_MAX_BODY_BYTES)


def request_timeout_seconds() -> float | None:
    return _parse_float(
        os.getenv("GCD_REQUEST_TIMEOUT_SECONDS"), DEFAULT_REQUEST_TIMEOUT_SECONDS
    )
