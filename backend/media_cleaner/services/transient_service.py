"""Transient Service 도메인 서비스 레이어입니다.

리다이렉트 전후로 한 번만 읽히는 짧은 수명의 값을 프로세스 메모리에 보관합니다.
"""

import threading
import time
from typing import Any, Callable

_MISSING = object()

_lock = threading.Lock()
_store: dict[str, tuple[Any, float]] = {}

# 테스트에서 monkeypatch로 교체한다.
clock: Callable[[], float] = time.monotonic


def set_transient(key: str, value: Any, ttl_seconds: int) -> None:
    if ttl_seconds <= 0:
        raise ValueError("ttl_seconds must be positive")
    with _lock:
        _store[key] = (value, clock() + ttl_seconds)


def get_transient(key: str, default: Any = None) -> Any:
    with _lock:
        entry = _store.get(key, _MISSING)
        if entry is _MISSING:
            return default
        value, expires_at = entry
        if clock() >= expires_at:
            del _store[key]
            return default
        return value


def delete_transient(key: str) -> bool:
    with _lock:
        return _store.pop(key, _MISSING) is not _MISSING


def pop_transient(key: str, default: Any = None) -> Any:
    """값을 읽고 즉시 삭제한다 (read-once)."""
    with _lock:
        entry = _store.pop(key, _MISSING)
    if entry is _MISSING:
        return default
    value, expires_at = entry
    if clock() >= expires_at:
        return default
    return value


def clear_transients() -> None:
    with _lock:
        _store.clear()
