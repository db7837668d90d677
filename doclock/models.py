"""
Data model for items kept in the vault.
"""

import re
import time
import datetime
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable, Container, Dict, Optional

from . import config
from .exceptions import ItemValidationError


class ItemCategory(IntEnum):
    """Kinds of item the vault stores. The integer value is the on-disk form."""
    PHOTO = 0
    DOCUMENT = 1
    TEXT_NOTE = 2
    WEBSITE = 3
    PASSWORD = 4


_URL_RE = re.compile(config.WEBSITE_URL_PATTERN)


def _require_file(content: str) -> Optional[str]:
    if not content:
        return "Please select a file"
    return None


def _require_text(content: str) -> Optional[str]:
    if not content.strip():
        return "Please enter text content"
    return None


def _require_url(content: str) -> Optional[str]:
    if not content.strip():
        return "Please enter website address"
    if not _URL_RE.match(content.strip()):
        return "Please enter a valid URL (starting with http or https)"
    return None


def _require_secret(content: str) -> Optional[str]:
    if not content.strip():
        return "Please enter a password"
    return None


@dataclass(frozen=True)
class CategorySpec:
    """Everything that differs between categories."""
    label: str
    content_label: str
    validate: Callable[[str], Optional[str]]
    requires_file: bool = False
    file_filter: str = ""


CATEGORY_SPECS: Dict[ItemCategory, CategorySpec] = {
    ItemCategory.PHOTO: CategorySpec(
        label="Photo",
        content_label="Selected File Path",
        validate=_require_file,
        requires_file=True,
        file_filter=config.PHOTO_FILE_FILTER,
    ),
    ItemCategory.DOCUMENT: CategorySpec(
        label="Document",
        content_label="Selected File Path",
        validate=_require_file,
        requires_file=True,
        file_filter=config.DOCUMENT_FILE_FILTER,
    ),
    ItemCategory.TEXT_NOTE: CategorySpec(
        label="Text Note",
        content_label="Text content",
        validate=_require_text,
    ),
    ItemCategory.WEBSITE: CategorySpec(
        label="Website",
        content_label="Website URL",
        validate=_require_url,
    ),
    ItemCategory.PASSWORD: CategorySpec(
        label="Password",
        content_label="Password",
        validate=_require_secret,
    ),
}


def category_label(category: ItemCategory) -> str:
    return CATEGORY_SPECS[category].label


def generate_item_id(taken: Container[str] = ()) -> str:
    """Millisecond timestamp id, stepped forward past any id in taken."""
    candidate = time.time_ns() // 1_000_000
    while str(candidate) in taken:
        candidate += 1
    return str(candidate)


@dataclass(frozen=True)
class StoredItem:
    """Represents a single vault item. Items never change once created."""
    id: str
    title: str
    category: ItemCategory
    content: str
    stored_date: datetime.datetime

    @property
    def label(self) -> str:
        return category_label(self.category)

    @property
    def requires_file(self) -> bool:
        return CATEGORY_SPECS[self.category].requires_file

    def validate(self) -> None:
        """
        Check the item against the rules of its category.
        Raises:
            ItemValidationError: if the title is blank or the content is rejected
        """
        if not self.title or not self.title.strip():
            raise ItemValidationError("Please enter a title")
        error = CATEGORY_SPECS[self.category].validate(self.content or "")
        if error:
            raise ItemValidationError(error)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            'id': self.id,
            'title': self.title,
            'category': int(self.category),
            'content': self.content,
            'storedDate': self.stored_date.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'StoredItem':
        """
        Create from dictionary.
        Raises:
            KeyError, ValueError, TypeError: if the record is malformed
        """
        category = data['category']
        # bool is an int subclass; reject it along with floats and strings
        if not isinstance(category, int) or isinstance(category, bool):
            raise TypeError(f"category must be an integer, got {category!r}")
        if not isinstance(data['id'], str) or not isinstance(data['title'], str) \
                or not isinstance(data['content'], str):
            raise TypeError("id, title and content must be strings")
        return cls(
            id=data['id'],
            title=data['title'],
            category=ItemCategory(category),
            content=data['content'],
            stored_date=datetime.datetime.fromisoformat(data['storedDate']),
        )
