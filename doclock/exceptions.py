"""Exceptions raised by the vault storage core."""

from typing import Optional


class DocLockError(Exception):
    """Base exception for vault storage operations."""

    def __init__(self, message: str, *, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class StorageReadError(DocLockError):
    """A vault file exists but could not be read or parsed."""


class StorageWriteError(DocLockError):
    """Writing the credential file, the catalog or an attachment failed."""


class SourceUnreadableError(DocLockError):
    """The file chosen for import could not be opened."""


class ItemValidationError(DocLockError, ValueError):
    """A stored item does not satisfy the rules of its category."""
