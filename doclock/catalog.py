"""
Catalog of stored items, mirrored to a single JSON document.
"""

import os
import json
import logging
from typing import Dict, List, Optional

from .models import StoredItem, ItemCategory, category_label
from .exceptions import StorageReadError, StorageWriteError
from .utils import replace_file
from . import config

logger = logging.getLogger(__name__)


class VaultCatalog:
    """
    Owns the ordered list of items, newest first.

    Every mutation rewrites the whole data file. The in-memory list is the
    source of truth; a failed write leaves memory ahead of disk.
    """

    def __init__(self, filepath: str):
        """
        Args:
            filepath: Path to the JSON catalog file
        """
        self.filepath = filepath
        self._items: List[StoredItem] = []

    def __len__(self) -> int:
        return len(self._items)

    @property
    def items(self) -> List[StoredItem]:
        return list(self._items)

    def load(self) -> None:
        """
        Read the catalog file. A missing or corrupt file yields an empty catalog.
        """
        self._items = []
        if not os.path.exists(self.filepath):
            logger.info(f"No catalog at {self.filepath}, starting empty")
            return

        try:
            with open(self.filepath, 'r', encoding='utf-8') as f:
                data = json.load(f)
            if not isinstance(data, list):
                raise ValueError(f"expected a JSON array, got {type(data).__name__}")
            items = [StoredItem.from_dict(e) for e in data]
        except (OSError, ValueError, KeyError, TypeError, RecursionError) as e:
            error = StorageReadError(f"Unreadable catalog: {e}", path=self.filepath)
            logger.warning(f"{error}; starting with an empty catalog", exc_info=True)
            return

        self._items = items
        logger.info(f"Loaded {len(items)} items")

    def get(self, item_id: str) -> Optional[StoredItem]:
        return next((item for item in self._items if item.id == item_id), None)

    def add(self, item: StoredItem) -> None:
        """
        Insert an item at the front and save.
        Raises:
            ItemValidationError: if the item breaks its category rules
            ValueError: if the id is already in the catalog
            StorageWriteError: if the catalog file cannot be written
        """
        item.validate()
        if self.get(item.id) is not None:
            raise ValueError(f"Duplicate item id {item.id}")
        self._items.insert(0, item)
        self._save()

    def remove(self, item_id: str) -> None:
        """
        Remove the item with item_id and save. Unknown ids are ignored.
        Raises:
            StorageWriteError: if the catalog file cannot be written
        """
        remaining = [e for e in self._items if e.id != item_id]
        if len(remaining) == len(self._items):
            return
        self._items = remaining
        self._save()

    def search(self, query: str) -> List[StoredItem]:
        """Items whose title, content or category label contain query, ignoring case."""
        if not query:
            return list(self._items)
        needle = query.lower()
        return [
            item for item in self._items
            if needle in item.title.lower()
            or needle in item.content.lower()
            or needle in category_label(item.category).lower()
        ]

    def tally(self) -> Dict[ItemCategory, int]:
        """Item count per category; every category is present."""
        counts = {category: 0 for category in ItemCategory}
        for item in self._items:
            counts[item.category] += 1
        return counts

    def _save(self) -> None:
        """
        Save the whole catalog to disk."""
        data = json.dumps([e.to_dict() for e in self._items]).encode('utf-8')
        try:
            os.makedirs(os.path.dirname(self.filepath) or ".", exist_ok=True)
            replace_file(self.filepath, data, config.TEMP_FILE_SUFFIX)
        except OSError as e:
            logger.error(f"Error saving catalog file {self.filepath}: {e}", exc_info=True)
            raise StorageWriteError(f"Could not save items: {e}", path=self.filepath) from e
