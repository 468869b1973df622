"""
Custom exceptions for the ReadyCash client.
"""

from __future__ import annotations

SERVER_ERROR = 500
SESSION_REJECTED = 403


class ReadyCashError(Exception):
    """Base exception for all client failures."""


class ConfigurationError(ReadyCashError):
    """Exception for missing or invalid account or client settings."""


class LoginFailed(ReadyCashError):
    """Exception for a non-success response from the login endpoint."""

    def __init__(self, body: str, status_code: int | None = None) -> None:
        super().__init__(f"could not login to account: {body}")
        self.body = body
        self.status_code = status_code


class StorageFailure(ReadyCashError):
    """Exception for a rejected credential store write."""


class EncryptionFailure(ReadyCashError):
    """Exception for a PIN that could not be encrypted."""


class CredentialNotFound(ReadyCashError):
    """Exception for a missing or expired credential store entry."""


class ResponseParseError(ReadyCashError):
    """Exception for a response body that could not be decoded."""

    def __init__(self, message: str, body: bytes | None = None) -> None:
        super().__init__(message)
        self.body = body


class RemoteError(ReadyCashError):
    """Exception for a structured error returned by the gateway."""

    def __init__(
        self,
        status: int,
        code: int,
        message: str,
        developer_message: str | None = None,
    ) -> None:
        super().__init__(f"Code: {code}, Message: {message}, Status: {status}")
        self.status = status
        self.code = code
        self.message = message
        self.developer_message = developer_message


class EmptyResponse(RemoteError):
    """Exception for a response without the expected body."""

    def __init__(self) -> None:
        super().__init__(SERVER_ERROR, SERVER_ERROR, "Invalid Response Body")


class SessionRejected(RemoteError):
    """Exception for a request the gateway refused under the current session."""

    def __init__(self, developer_message: str | None = None) -> None:
        super().__init__(
            SESSION_REJECTED,
            SESSION_REJECTED,
            "Session is no longer accepted",
            developer_message,
        )
