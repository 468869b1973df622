# Common utilities
from readycash.common.crypto import DesCipher as DesCipher
from readycash.common.logging_utils import setup_logger as setup_logger

__all__ = ["DesCipher", "setup_logger"]
