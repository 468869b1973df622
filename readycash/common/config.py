"""
Configuration settings for the ReadyCash client.
"""

from __future__ import annotations

import logging
import os


class Config:
    """Central configuration class for all client settings."""

    def __init__(self) -> None:
        # Gateway settings
        self.BASE_URL: str | None = os.getenv("READYCASH_BASE_URL")
        self.REQUEST_TIMEOUT: float = float(
            os.getenv("READYCASH_REQUEST_TIMEOUT", "10")
        )

        # Session settings
        self.SESSION_LENGTH: int = int(
            os.getenv("READYCASH_SESSION_LENGTH", "3600")
        )  # Seconds, also the TTL of cached credentials
        self.MAX_SESSION_RETRIES: int = 1  # Re-runs of an operation after a 403

        # Endpoints
        self.LOGIN_PATH: str = "/rc/rest/agent/login"
        self.BALANCE_PATH: str = "/rc/rest/agent/balance"
        self.TRANSACTIONS_PATH: str = "/rc/rest/agent/tranlist"
        self.USSD_TRANSACTION_PATH: str = "/rc/rest/agent/transact/ussd/cashout"
        self.FETCH_USSD_TRANSACTION_PATH: str = (
            "/rc/rest/agent/transact/ussd/cashout/check"
        )

        # Protocol constants
        self.SUCCESS_CODES: tuple[int, ...] = (200, 201, 202)
        self.SESSION_REJECTED_CODE: int = 403
        self.AUTHORIZATION_HEADER: str = "Authorization"
        self.SESSION_ID_HEADER: str = "X-SessionID"

        # Credential store key suffixes
        self.TOKEN_KEY_SUFFIX: str = "-auth-token"
        self.SESSION_ID_KEY_SUFFIX: str = "-session-id"
        self.EXPIRATION_KEY_SUFFIX: str = "-auth-expiration"
        self.ENCODED_PIN_KEY_SUFFIX: str = "-auth-encoded-pin"

        # Logging
        self.LOG_LEVEL: int = getattr(
            logging, os.getenv("READYCASH_LOG_LEVEL", "ERROR").upper(), logging.ERROR
        )
