"""
Interfaces and protocols for dependency injection.
"""

from __future__ import annotations

from typing import Protocol


class ICredentialStore(Protocol):
    """Protocol for the TTL key/value store holding session credentials.

    Reads of a missing or expired key raise CredentialNotFound. TTLs are in
    whole seconds and every key carries its own.
    """

    def set_string(self, key: str, value: str, ttl: int) -> None: ...

    def set_int(self, key: str, value: int, ttl: int) -> None: ...

    def get_string(self, key: str) -> str: ...

    def get_int(self, key: str) -> int: ...


class ICipher(Protocol):
    """Protocol for the reversible cipher protecting the PIN."""

    def encrypt(self, plaintext: str, key: str) -> str: ...
