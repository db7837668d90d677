"""
Vault session: ties the password gate, the catalog and the attachment
importer to one directory and tracks whether the vault is unlocked.
"""

import os
import datetime
import dataclasses
import logging
from typing import Dict, List, Optional

from .attachments import AttachmentImporter
from .catalog import VaultCatalog
from .gate import HashGate
from .models import StoredItem, ItemCategory, CATEGORY_SPECS, generate_item_id
from . import config

logger = logging.getLogger(__name__)


class Vault:
    """One installation's vault directory, as seen by the user interface."""

    def __init__(self, vault_dir: Optional[str] = None):
        """
        Args:
            vault_dir: Directory holding the vault; defaults to config.get_vault_dir()
        """
        self.vault_dir = vault_dir or config.get_vault_dir()
        os.makedirs(self.vault_dir, exist_ok=True)
        self.gate = HashGate(os.path.join(self.vault_dir, config.PASSWORD_HASH_FILE))
        self.catalog = VaultCatalog(os.path.join(self.vault_dir, config.STORED_ITEMS_FILE))
        self.importer = AttachmentImporter(self.vault_dir)
        self._unlocked = False

    @property
    def is_first_run(self) -> bool:
        return not self.gate.has_credential()

    def is_unlocked(self) -> bool:
        return self._unlocked

    def unlock(self, passphrase: str) -> bool:
        """
        Set the password on first run, otherwise check it.

        Returns:
            True if the vault is now unlocked
        Raises:
            ValueError: if the passphrase is empty
            StorageWriteError: if the first-run password cannot be saved
        """
        entered = passphrase.strip()
        if not entered:
            raise ValueError("Password cannot be empty")

        if self.is_first_run:
            self.gate.set_credential(entered)
        elif not self.gate.verify(entered):
            logger.info("Unlock attempt rejected")
            return False

        if not self._unlocked:
            self.catalog.load()
            self._unlocked = True
            logger.info("Vault unlocked")
        return True

    def _require_unlocked(self) -> None:
        if not self._unlocked:
            raise RuntimeError("Vault is locked")

    @property
    def items(self) -> List[StoredItem]:
        self._require_unlocked()
        return self.catalog.items

    def create_item(self, title: str, category: ItemCategory, content: str = "",
                    source_path: Optional[str] = None, source_name: str = "") -> StoredItem:
        """
        Build a new item and add it to the catalog.

        For Photo and Document items a source_path is copied into the vault
        first and the copy's path becomes the content.

        Raises:
            ItemValidationError: if title or content break the category rules
            SourceUnreadableError, StorageWriteError: from import or save
        """
        self._require_unlocked()
        category = ItemCategory(category)
        imports_file = CATEGORY_SPECS[category].requires_file and bool(source_path)
        item = StoredItem(
            id=generate_item_id({e.id for e in self.catalog.items}),
            title=title.strip(),
            category=category,
            content=source_path if imports_file else content.strip(),
            stored_date=datetime.datetime.now(),
        )

        if imports_file:
            # validate the title before copying anything
            item.validate()
            item = dataclasses.replace(item, content=self.importer.import_file(source_path, source_name))

        self.catalog.add(item)
        logger.info(f"Added {item.label} item {item.id}")
        return item

    def delete_item(self, item_id: str) -> None:
        self._require_unlocked()
        self.catalog.remove(item_id)
        logger.info(f"Deleted item {item_id}")

    def search(self, query: str) -> List[StoredItem]:
        self._require_unlocked()
        return self.catalog.search(query)

    def tally(self) -> Dict[ItemCategory, int]:
        self._require_unlocked()
        return self.catalog.tally()

    def attachment_exists(self, item: StoredItem) -> bool:
        """Whether a file-backed item's copy is still on disk. True for other categories."""
        if not item.requires_file:
            return True
        return os.path.isfile(item.content)
