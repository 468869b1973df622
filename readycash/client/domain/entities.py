"""Domain layer: Core business entities and rules.
"""

from __future__ import annotations

import dataclasses
import hashlib
import json
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from readycash.common.config import Config
from readycash.common.crypto import DesCipher
from readycash.common.exceptions import EncryptionFailure

if TYPE_CHECKING:
    from readycash.common.interfaces import ICipher


@dataclass(frozen=True)
class Account:
    """Domain entity representing the gateway account a client acts for."""

    user_name: str = ""
    password: str = field(default="", repr=False)
    pin: str = field(default="", repr=False)
    session_length: int = field(
        default_factory=lambda: Config().SESSION_LENGTH
    )  # seconds


@dataclass(frozen=True)
class CacheKeySet:
    """Domain entity naming the store entries of one account's session."""

    token_key: str
    session_id_key: str
    expiration_key: str
    encoded_pin_key: str

    @classmethod
    def derive(cls, base_url: str, login_path: str, user_name: str) -> CacheKeySet:
        """Derive the keys for an account on a gateway endpoint.

        The same inputs always give the same keys, so separate clients for
        one account share the cached session.
        """
        config = Config()
        # JSON keeps the triple unambiguous when a part contains the separator
        identity = json.dumps([base_url, login_path, user_name])
        base = hashlib.sha256(identity.encode()).hexdigest()
        return cls(
            token_key=base + config.TOKEN_KEY_SUFFIX,
            session_id_key=base + config.SESSION_ID_KEY_SUFFIX,
            expiration_key=base + config.EXPIRATION_KEY_SUFFIX,
            encoded_pin_key=base + config.ENCODED_PIN_KEY_SUFFIX,
        )


@dataclass
class SessionState:
    """Domain entity representing the live authenticated session."""

    token: str = ""
    session_id: str = ""
    encrypted_pin: str = ""
    expires_at: float = 0.0  # epoch seconds, 0 when unset

    def is_valid(self) -> bool:
        """Check that every field is set and the expiry is in the future."""
        if not self.expires_at:
            return False
        if not (self.token and self.session_id and self.encrypted_pin):
            return False
        return time.time() < self.expires_at

    def set_pin(self, pin: str, key: str, cipher: ICipher | None = None) -> str:
        """Encrypt the PIN under key and store the ciphertext."""
        cipher = cipher or DesCipher()
        self.encrypted_pin = ""
        try:
            self.encrypted_pin = cipher.encrypt(pin, key)
        except EncryptionFailure:
            raise
        except Exception as e:
            msg = f"could not encrypt pin: {e}"
            raise EncryptionFailure(msg) from e
        return self.encrypted_pin

    def reset(self) -> None:
        """Clear the session."""
        self.token = ""
        self.session_id = ""
        self.encrypted_pin = ""
        self.expires_at = 0.0

    def snapshot(self) -> SessionState:
        """Return an independent copy of the current state."""
        return dataclasses.replace(self)
