"""
Session authentication for the ReadyCash client.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import TYPE_CHECKING

from readycash.client.domain.entities import CacheKeySet, SessionState
from readycash.common.config import Config
from readycash.common.exceptions import LoginFailed, StorageFailure

if TYPE_CHECKING:
    import requests

    from readycash.client.domain.entities import Account
    from readycash.common.interfaces import ICipher, ICredentialStore

logger = logging.getLogger(__name__)


class Authenticator:
    """Keeps a valid gateway session, reusing cached credentials when possible.

    Every call to ensure_authenticated first hydrates the in-memory session
    from the credential store, so clients sharing a store share one login.
    The in-memory expiry is the authority on validity; the store is only a
    cache and may drop fields on its own schedule.
    """

    def __init__(
        self,
        account: Account,
        base_url: str,
        store: ICredentialStore,
        http: requests.Session,
        cipher: ICipher | None = None,
        login_path: str | None = None,
        request_timeout: float | None = None,
    ):
        self.config = Config()
        self.account = account
        self.base_url = base_url
        self.store = store
        self.http = http
        self.cipher = cipher
        self.login_path = login_path or self.config.LOGIN_PATH
        self.request_timeout = (
            request_timeout
            if request_timeout is not None
            else self.config.REQUEST_TIMEOUT
        )
        self.cache_keys = CacheKeySet.derive(
            self.base_url, self.login_path, self.account.user_name
        )
        self.session = SessionState()
        self._rejected: tuple[str, str] | None = None
        self._lock = threading.Lock()

    def ensure_authenticated(self) -> SessionState:
        """Return a valid session, logging in when the cached one is stale."""
        with self._lock:
            self._hydrate()
            if not self.session.is_valid():
                self._login()
            return self.session.snapshot()

    def invalidate(self) -> None:
        """Drop the in-memory session after the gateway rejected it.

        The store entries are left to expire, but the rejected credentials
        are not hydrated again until a fresh login replaces them.
        """
        with self._lock:
            if self.session.token or self.session.session_id:
                self._rejected = (self.session.token, self.session.session_id)
            self.session.reset()
        logger.debug("Session invalidated for %s", self.account.user_name)

    def _hydrate(self) -> None:
        """Copy whatever session fields the store still holds into memory."""
        keys = self.cache_keys
        candidate = self.session.snapshot()
        for key, attr in (
            (keys.token_key, "token"),
            (keys.session_id_key, "session_id"),
            (keys.encoded_pin_key, "encrypted_pin"),
        ):
            try:
                value = self.store.get_string(key)
            except Exception as e:
                logger.debug("Credential %s unavailable: %s", attr, e)
                continue
            if value:
                setattr(candidate, attr, value)

        try:
            expires_at = self.store.get_int(keys.expiration_key)
        except Exception as e:
            logger.debug("Credential expires_at unavailable: %s", e)
        else:
            if expires_at > 0:
                candidate.expires_at = float(expires_at)

        if self._rejected is not None and self._rejected == (
            candidate.token,
            candidate.session_id,
        ):
            logger.debug("Cached session was rejected by the gateway, ignoring it")
            return
        self.session = candidate

    def _login(self) -> None:
        """Log in to the gateway and persist the new session."""
        session_length = int(self.account.session_length)
        login_url = f"{self.base_url}{self.login_path}"
        logger.info("Logging in %s", self.account.user_name)

        r = self.http.post(
            login_url,
            data={
                "userName": self.account.user_name,
                "password": self.account.password,
                "sessionLength": str(session_length),
            },
            timeout=self.request_timeout,
        )
        if r.status_code not in self.config.SUCCESS_CODES:
            logger.error("Login failed with status %s", r.status_code)
            raise LoginFailed(r.text, r.status_code)

        token = r.headers.get(self.config.AUTHORIZATION_HEADER, "")
        session_id = r.headers.get(self.config.SESSION_ID_HEADER, "")
        if not token or not session_id:
            logger.error("Login response is missing session headers")
            raise LoginFailed("login response is missing session headers", r.status_code)

        self.session.reset()
        self.session.token = token
        self.session.session_id = session_id
        self.session.set_pin(self.account.pin, session_id, self.cipher)
        self.session.expires_at = time.time() + session_length

        try:
            self._persist(session_length)
        except StorageFailure:
            self.session.reset()
            raise
        self._rejected = None
        logger.info("Logged in %s", self.account.user_name)

    def _persist(self, ttl: int) -> None:
        """Write the session to the store, stopping at the first failure."""
        keys = self.cache_keys
        writes = (
            (self.store.set_string, keys.token_key, self.session.token),
            (self.store.set_string, keys.session_id_key, self.session.session_id),
            (self.store.set_string, keys.encoded_pin_key, self.session.encrypted_pin),
            (self.store.set_int, keys.expiration_key, int(self.session.expires_at)),
        )
        for write, key, value in writes:
            try:
                write(key, value, ttl)
            except Exception as e:
                logger.error("Could not persist credential %s: %s", key, e)
                msg = f"could not persist credential {key}"
                raise StorageFailure(msg) from e
