# ReadyCash agent gateway client

from readycash.client.client import LogLevel, ReadyCashClient
from readycash.client.domain.entities import Account
from readycash.common.exceptions import (
    ConfigurationError,
    CredentialNotFound,
    EmptyResponse,
    EncryptionFailure,
    LoginFailed,
    ReadyCashError,
    RemoteError,
    ResponseParseError,
    SessionRejected,
    StorageFailure,
)
from readycash.common.models import FetchTransactionOptions
from readycash.storage.memory import MemoryCredentialStore

__all__ = [
    "Account",
    "ConfigurationError",
    "CredentialNotFound",
    "EmptyResponse",
    "EncryptionFailure",
    "FetchTransactionOptions",
    "LogLevel",
    "LoginFailed",
    "MemoryCredentialStore",
    "ReadyCashClient",
    "ReadyCashError",
    "RemoteError",
    "ResponseParseError",
    "SessionRejected",
    "StorageFailure",
]
