"""
Cryptographic operations for the vault password gate.
"""

import hmac
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.backends import default_backend


class CryptoManager:
    """Handles the digest computations used by the password gate."""

    def __init__(self):
        """Initialize the crypto manager."""
        self.backend = default_backend()

    def hash_passphrase(self, passphrase: str) -> str:
        """
        Compute the SHA-256 digest of a passphrase.

        Args:
            passphrase: The passphrase, hashed exactly as given (including empty)

        Returns:
            64 character lowercase hex digest of the UTF-8 bytes
        """
        digest = hashes.Hash(hashes.SHA256(), backend=self.backend)
        digest.update(passphrase.encode('utf-8'))
        return digest.finalize().hex()

    def secure_compare(self, a: str, b: str) -> bool:
        """Constant-time comparison to prevent timing attacks."""
        return hmac.compare_digest(a.encode('utf-8'), b.encode('utf-8'))
