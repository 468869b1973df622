"""Common cryptographic utilities.
"""

from cryptography.hazmat.decrepit.ciphers.algorithms import TripleDES
from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, modes

from readycash.common.exceptions import EncryptionFailure

DES_KEY_SIZE = 8
DES_BLOCK_BITS = 64


class DesCipher:
    """DES-CBC encryption of short secrets, hex encoded.

    The gateway expects the PIN encrypted under the current session id, so
    the key is the session id itself, fitted to the 8-byte DES key size and
    reused as the IV.
    """

    @staticmethod
    def normalize_key(key: str) -> bytes:
        """Fit a key string to 8 bytes by truncating or NUL padding."""
        return key.encode()[:DES_KEY_SIZE].ljust(DES_KEY_SIZE, b"\0")

    def encrypt(self, plaintext: str, key: str) -> str:
        """Encrypt plaintext under key and return the ciphertext as hex."""
        try:
            key_bytes = self.normalize_key(key)
            padder = padding.PKCS7(DES_BLOCK_BITS).padder()
            data = padder.update(plaintext.encode()) + padder.finalize()
            # K1 = K2 = K3 reduces TripleDES to plain DES
            encryptor = Cipher(
                TripleDES(key_bytes * 3), modes.CBC(key_bytes)
            ).encryptor()
            ciphertext = encryptor.update(data) + encryptor.finalize()
        except (AttributeError, TypeError, ValueError) as err:
            msg = f"could not encrypt secret: {err}"
            raise EncryptionFailure(msg) from err
        return ciphertext.hex()
