"""
In-process credential store with per-key expiry.
"""

from __future__ import annotations

import threading
import time
from typing import Any

from readycash.common.exceptions import CredentialNotFound


class MemoryCredentialStore:
    """Thread-safe TTL key/value store kept in process memory.

    Suitable for a single process; share a networked store between
    processes that should reuse one gateway session.
    """

    def __init__(self) -> None:
        self._data: dict[str, tuple[Any, float]] = {}
        self._lock = threading.Lock()

    def _set(self, key: str, value: Any, ttl: int) -> None:
        with self._lock:
            self._data[key] = (value, time.monotonic() + ttl)

    def _get(self, key: str) -> Any:
        with self._lock:
            entry = self._data.get(key)
            if entry is None:
                msg = f"credential not found: {key}"
                raise CredentialNotFound(msg)
            value, expires_at = entry
            if time.monotonic() >= expires_at:
                del self._data[key]
                msg = f"credential expired: {key}"
                raise CredentialNotFound(msg)
            return value

    def set_string(self, key: str, value: str, ttl: int) -> None:
        self._set(key, value, ttl)

    def set_int(self, key: str, value: int, ttl: int) -> None:
        self._set(key, value, ttl)

    def get_string(self, key: str) -> str:
        return str(self._get(key))

    def get_int(self, key: str) -> int:
        value = self._get(key)
        if not isinstance(value, int) or isinstance(value, bool):
            msg = f"credential is not a number: {key}"
            raise CredentialNotFound(msg)
        return value

    def delete(self, key: str) -> None:
        """Evict a key ahead of its TTL."""
        with self._lock:
            self._data.pop(key, None)

    def __len__(self) -> int:
        """Count the entries that have not expired, for inspection."""
        with self._lock:
            now = time.monotonic()
            return sum(1 for _, expires_at in self._data.values() if expires_at > now)
