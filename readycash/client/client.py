"""
ReadyCash agent gateway client.
"""

from __future__ import annotations

import enum
import json
import logging
from typing import TYPE_CHECKING, Any

import requests
from pydantic import ValidationError

from readycash.client.authenticator import Authenticator
from readycash.common.config import Config
from readycash.common.decorators import retry_on_session_rejected
from readycash.common.exceptions import (
    ConfigurationError,
    EmptyResponse,
    RemoteError,
    ResponseParseError,
    SessionRejected,
)
from readycash.common.logging_utils import get_request_logger, setup_logger
from readycash.common.models import (
    BalanceEnquiryResponse,
    ClientConfig,
    ErrorPayload,
    FetchTransactionOptions,
    UssdTransactionResponse,
    WalletTransaction,
)
from readycash.storage.memory import MemoryCredentialStore

if TYPE_CHECKING:
    from readycash.client.domain.entities import Account, SessionState
    from readycash.common.interfaces import ICipher, ICredentialStore

logger = logging.getLogger("readycash")

MAX_SESSION_RETRIES = Config().MAX_SESSION_RETRIES


class LogLevel(enum.IntEnum):
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    ERROR = logging.ERROR


class ReadyCashClient:
    """Client for the ReadyCash agent gateway.

    Each operation authenticates through the shared Authenticator and is
    re-run once if the gateway rejects the session with a 403.
    """

    def __init__(
        self,
        account: Account | None,
        base_url: str | None = None,
        store: ICredentialStore | None = None,
        http_session: requests.Session | None = None,
        cipher: ICipher | None = None,
        *,
        login_path: str | None = None,
        log_level: int | None = None,
        request_timeout: float | None = None,
    ):
        if (
            account is None
            or not account.user_name
            or not account.password
            or not account.pin
        ):
            msg = "account credentials is required"
            raise ConfigurationError(msg)
        if int(account.session_length) <= 0:
            msg = "account session length must be positive"
            raise ConfigurationError(msg)

        self.config = Config()
        settings = ClientConfig(
            base_url=base_url,
            login_path=login_path,
            log_level=log_level,
            request_timeout=request_timeout,
        )
        resolved_url = settings.base_url or self.config.BASE_URL
        if not resolved_url:
            msg = "gateway base url is required"
            raise ConfigurationError(msg)

        self.account = account
        self.base_url = resolved_url.rstrip("/")
        self.request_timeout = (
            settings.request_timeout
            if settings.request_timeout is not None
            else self.config.REQUEST_TIMEOUT
        )
        self.store = store if store is not None else MemoryCredentialStore()
        self.http = http_session or requests.Session()

        self.set_log_level(
            settings.log_level
            if settings.log_level is not None
            else self.config.LOG_LEVEL
        )

        self.authenticator = Authenticator(
            account=self.account,
            base_url=self.base_url,
            store=self.store,
            http=self.http,
            cipher=cipher,
            login_path=settings.login_path,
            request_timeout=self.request_timeout,
        )

    def set_log_level(self, level: LogLevel | int) -> None:
        """Change the logging level of the client loggers."""
        setup_logger(logger, int(level))

    def ensure_authenticated(self) -> SessionState:
        """Make sure the client holds a valid session."""
        return self.authenticator.ensure_authenticated()

    @retry_on_session_rejected(max_retries=MAX_SESSION_RETRIES)
    def balance_enquiry(self) -> BalanceEnquiryResponse:
        """Return the account balance of the current user."""
        log = get_request_logger(logger, method="balance_enquiry")
        data = self._execute("GET", self.config.BALANCE_PATH, log=log)
        return self._decode(BalanceEnquiryResponse, data, log)

    @retry_on_session_rejected(max_retries=MAX_SESSION_RETRIES)
    def generate_ussd(
        self, reference: str, amount: float, bank_code: str
    ) -> UssdTransactionResponse:
        """Create a USSD code for paying into the wallet."""
        log = get_request_logger(
            logger, method="generate_ussd", reference=reference, bank_code=bank_code
        )
        payload = {"amount": amount, "bankCode": bank_code, "ref": reference}
        data = self._execute(
            "POST", self.config.USSD_TRANSACTION_PATH, payload=payload, log=log
        )
        res = self._decode(UssdTransactionResponse, data, log)
        res.user_defined_reference = reference
        return res

    @retry_on_session_rejected(max_retries=MAX_SESSION_RETRIES)
    def fetch_ussd_transaction(self, reference: str) -> UssdTransactionResponse:
        """Retrieve a USSD transaction by the user defined reference."""
        log = get_request_logger(
            logger, method="fetch_ussd_transaction", reference=reference
        )
        data = self._execute(
            "GET",
            self.config.FETCH_USSD_TRANSACTION_PATH,
            params={"senderRef": reference},
            log=log,
        )
        res = self._decode(UssdTransactionResponse, data, log)
        res.user_defined_reference = reference
        return res

    @retry_on_session_rejected(max_retries=MAX_SESSION_RETRIES)
    def fetch_transactions(
        self, options: FetchTransactionOptions | None = None
    ) -> list[WalletTransaction]:
        """Retrieve the wallet transactions of the current user."""
        params = options.to_params() if options is not None else {}
        log = get_request_logger(logger, method="fetch_transactions", **params)
        data = self._execute(
            "GET", self.config.TRANSACTIONS_PATH, params=params, log=log
        )
        items = self._load_json(data, log)
        if not isinstance(items, list):
            msg = "expected a list of transactions"
            raise ResponseParseError(msg, data)
        return [self._validate(WalletTransaction, item, data, log) for item in items]

    def _execute(
        self,
        method: str,
        path: str,
        params: dict[str, str] | None = None,
        payload: dict[str, Any] | None = None,
        log: logging.LoggerAdapter | None = None,
    ) -> bytes:
        """Send an authenticated request and return the success body."""
        log = log or get_request_logger(logger)
        session = self.authenticator.ensure_authenticated()

        url = f"{self.base_url}{path}"
        headers = {
            self.config.AUTHORIZATION_HEADER: session.token,
            self.config.SESSION_ID_HEADER: session.session_id,
        }
        log.debug("%s %s params=%s", method, url, params)
        r = self.http.request(
            method,
            url,
            params=params or None,
            json=payload,
            headers=headers,
            timeout=self.request_timeout,
        )
        data = r.content
        log.debug("status=%s response=%s", r.status_code, data)

        if r.status_code == self.config.SESSION_REJECTED_CODE:
            log.warning("Session rejected by gateway")
            raise SessionRejected(r.text or None)
        if not data:
            log.error("Empty response received, status=%s", r.status_code)
            raise EmptyResponse()
        if r.status_code not in self.config.SUCCESS_CODES:
            log.error("Status code %s is not success: %s", r.status_code, r.text)
            raise self._to_remote_error(data, log)
        return data

    def _to_remote_error(
        self, data: bytes, log: logging.LoggerAdapter
    ) -> RemoteError:
        """Translate an error body into a RemoteError."""
        payload = self._decode(ErrorPayload, data, log)
        return RemoteError(
            payload.status, payload.code, payload.message, payload.developer_message
        )

    def _decode(self, model: type, data: bytes, log: logging.LoggerAdapter) -> Any:
        return self._validate(model, self._load_json(data, log), data, log)

    @staticmethod
    def _load_json(data: bytes, log: logging.LoggerAdapter) -> Any:
        try:
            return json.loads(data)
        except ValueError as e:
            log.error("Response is not valid JSON: %s", e)
            msg = f"invalid response body: {e}"
            raise ResponseParseError(msg, data) from e

    @staticmethod
    def _validate(
        model: type, obj: Any, data: bytes, log: logging.LoggerAdapter
    ) -> Any:
        try:
            return model.model_validate(obj)
        except ValidationError as e:
            log.error("Could not build %s from response: %s", model.__name__, e)
            msg = f"unexpected response shape for {model.__name__}"
            raise ResponseParseError(msg, data) from e
