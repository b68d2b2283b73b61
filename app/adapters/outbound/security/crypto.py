# app/adapters/outbound/security/crypto.py

"""
Reversible encryption of credential values.

Credential values must be read back by their owner, so they are encrypted
with Fernet (AES-128-CBC + HMAC-SHA256) rather than hashed. The key comes
from the ENCRYPTION_KEY setting.
"""

from typing import Union

from cryptography.fernet import Fernet

from app.application.ports.outbound import ICrypto


class FernetCrypto(ICrypto):
    """
    Crypto provider based on cryptography's Fernet recipe.

    Ciphertexts are url-safe base64 strings, so they can be stored as
    plain text attributes of an item.
    """

    def __init__(self, key: Union[str, bytes]):
        """
        Args:
            key: Fernet key, 32 url-safe base64-encoded bytes

        Raises:
            ValueError: If the key is not a valid Fernet key
        """
        self._fernet = Fernet(key.encode() if isinstance(key, str) else key)

    @staticmethod
    def generate_key() -> str:
        """Generate a new key suitable for ENCRYPTION_KEY."""
        return Fernet.generate_key().decode()

    def encrypt(self, plaintext: str) -> str:
        return self._fernet.encrypt(plaintext.encode("utf-8")).decode("ascii")

    def decrypt(self, ciphertext: str) -> str:
        """
        Raises:
            cryptography.fernet.InvalidToken: If the value was not produced
                with this key or was tampered with
        """
        return self._fernet.decrypt(ciphertext.encode("ascii")).decode("utf-8")
