import json
import logging
import os
from typing import Any, Callable, Optional

import streamlit as st

from core.presets import MAX_STORAGE_BYTES

logger = logging.getLogger(__name__)

STORAGE_FILE = "cma_local_storage.json"

# Storage key -> ``st.session_state`` key.  Only these keys are persisted;
# widgets inject their own keys into ``session_state`` and assigning those on
# the next run raises ``StreamlitAPIException``.
PERSISTED_KEYS = {
    "clients": "clients",
    "versions": "versions",
    "propertyPhotos": "property_photos",
    "auth": "authenticated",
    "userEmail": "user_email",
}
LIST_KEYS = {"clients", "versions", "propertyPhotos"}


class StorageError(Exception):
    """Raised when a value cannot be written to local storage."""


def _serializable(value: Any) -> bool:
    return isinstance(value, (int, float, str, bool, list, dict))


def _read_store() -> dict:
    if not os.path.exists(STORAGE_FILE):
        return {}
    try:
        with open(STORAGE_FILE, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError):
        logger.exception("Discarding unreadable local storage file %s", STORAGE_FILE)
        return {}
    return data if isinstance(data, dict) else {}


def _write_store(data: dict) -> None:
    try:
        with open(STORAGE_FILE, "w", encoding="utf-8") as f:
            json.dump(data, f)
    except OSError as exc:
        raise StorageError("Failed to save data locally") from exc


def store(key: str, value: Any) -> None:
    """Write ``value`` under ``key``; raise ``StorageError`` on failure."""
    try:
        serialized = json.dumps(value)
    except (TypeError, ValueError) as exc:
        raise StorageError("Failed to save data locally") from exc
    if len(serialized.encode("utf-8")) > MAX_STORAGE_BYTES:
        raise StorageError("Data too large to save locally")
    data = _read_store()
    data[key] = json.loads(serialized)
    _write_store(data)


def safe_set(key: str, value: Any, on_error: Optional[Callable[[str], None]] = None) -> bool:
    """Persist ``value``; report failures through ``on_error`` instead of raising."""
    try:
        store(key, value)
    except StorageError as exc:
        logger.error("Error saving to local storage (%s): %s", key, exc)
        if on_error is not None:
            on_error(str(exc))
        return False
    return True


def safe_get(key: str, default: Any = None) -> Any:
    return _read_store().get(key, default)


def remove(key: str) -> None:
    data = _read_store()
    if key in data:
        data.pop(key)
        try:
            _write_store(data)
        except StorageError:
            logger.exception("Failed to remove %s from local storage", key)


def load_state() -> None:
    """Restore persisted keys into ``st.session_state``.

    Malformed values are dropped in favour of the defaults set by the app.
    """
    data = _read_store()
    for storage_key, session_key in PERSISTED_KEYS.items():
        if storage_key not in data:
            continue
        val = data[storage_key]
        if storage_key in LIST_KEYS and not isinstance(val, list):
            continue
        if storage_key == "auth":
            val = val is True
        st.session_state.setdefault(session_key, val)


def save_state(on_error: Optional[Callable[[str], None]] = None) -> bool:
    """Persist the curated session keys."""
    ok = True
    for storage_key, session_key in PERSISTED_KEYS.items():
        val = st.session_state.get(session_key)
        if val is None or not _serializable(val):
            continue
        ok = safe_set(storage_key, val, on_error=on_error) and ok
    return ok
