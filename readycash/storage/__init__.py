# Credential stores
from readycash.storage.memory import MemoryCredentialStore as MemoryCredentialStore

__all__ = ["MemoryCredentialStore"]
