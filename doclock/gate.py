"""
Password gate: one SHA-256 digest on disk decides whether the vault opens.
"""

import os
import logging
from typing import Optional

from .crypto import CryptoManager
from .exceptions import StorageReadError, StorageWriteError
from .utils import replace_file
from . import config

logger = logging.getLogger(__name__)


class HashGate:
    """Owns the credential file and checks passphrases against it."""

    def __init__(self, filepath: str):
        """
        Initialize the gate.
        Args:
            filepath: Path to the credential file
        """
        self.filepath = filepath
        self.crypto = CryptoManager()

    def has_credential(self) -> bool:
        """True if a credential record can be read from disk."""
        return self._load_digest() is not None

    def set_credential(self, passphrase: str) -> None:
        """
        Store the digest of passphrase, replacing any previous record.
        Raises:
            StorageWriteError: if the credential file cannot be written
        """
        digest = self.crypto.hash_passphrase(passphrase)
        try:
            os.makedirs(os.path.dirname(self.filepath) or ".", exist_ok=True)
            replace_file(self.filepath, digest.encode('ascii'), config.TEMP_FILE_SUFFIX)
        except OSError as e:
            logger.error(f"Error saving credential file {self.filepath}: {e}", exc_info=True)
            raise StorageWriteError(f"Could not save password: {e}", path=self.filepath) from e
        logger.info("Credential record stored")

    def verify(self, passphrase: str) -> bool:
        """
        Check a passphrase against the stored digest.
        Returns:
            False for empty input, a missing record, or a mismatch
        """
        if not passphrase:
            return False
        stored = self._load_digest()
        if stored is None:
            return False
        return self.crypto.secure_compare(self.crypto.hash_passphrase(passphrase), stored)

    def _load_digest(self) -> Optional[str]:
        if not os.path.exists(self.filepath):
            return None
        try:
            with open(self.filepath, 'r', encoding='ascii') as f:
                stored = f.read().strip()
        except (OSError, UnicodeDecodeError) as e:
            error = StorageReadError(f"Unreadable credential file: {e}", path=self.filepath)
            logger.warning(f"{error}; treating as first run", exc_info=True)
            return None
        if not stored:
            return None
        if len(stored) != config.DIGEST_HEX_LENGTH:
            logger.warning(f"Credential file {self.filepath} holds {len(stored)} characters, expected {config.DIGEST_HEX_LENGTH}")
        return stored
