"""End-to-end tests of the vault session the UI drives."""

import os

import pytest

from doclock import config
from doclock.exceptions import ItemValidationError, SourceUnreadableError
from doclock.models import ItemCategory
from doclock.vault import Vault


@pytest.fixture
def vault(vault_dir):
    return Vault(str(vault_dir))


@pytest.fixture
def unlocked(vault):
    assert vault.unlock("abc123") is True
    return vault


class TestUnlock:

    def test_first_run(self, vault):
        assert vault.is_first_run is True
        assert vault.is_unlocked() is False

    def test_first_unlock_sets_password(self, vault, vault_dir):
        assert vault.unlock("abc123") is True
        assert vault.is_unlocked() is True
        assert (vault_dir / config.PASSWORD_HASH_FILE).exists()
        assert vault.is_first_run is False

    def test_restart_then_verify(self, vault, vault_dir):
        vault.unlock("abc123")
        assert Vault(str(vault_dir)).unlock("abc123") is True
        wrong = Vault(str(vault_dir))
        assert wrong.unlock("ABC123") is False
        assert wrong.is_unlocked() is False

    def test_input_is_trimmed(self, vault, vault_dir):
        vault.unlock("  abc123  ")
        assert Vault(str(vault_dir)).unlock("abc123") is True

    def test_empty_password_rejected(self, vault):
        with pytest.raises(ValueError, match="empty"):
            vault.unlock("   ")
        assert vault.is_first_run is True

    def test_locked_vault_refuses_access(self, vault):
        with pytest.raises(RuntimeError, match="locked"):
            vault.search("")
        with pytest.raises(RuntimeError):
            vault.create_item("t", ItemCategory.TEXT_NOTE, "x")

    def test_default_directory_from_environment(self, tmp_path):
        vault = Vault()
        assert vault.vault_dir == str(tmp_path / "home")
        assert os.path.isdir(vault.vault_dir)


class TestItems:

    def test_wifi_scenario(self, unlocked, vault_dir):
        item = unlocked.create_item("Wifi", ItemCategory.PASSWORD, "secret1")
        assert unlocked.search("wifi") == [item]

        restarted = Vault(str(vault_dir))
        assert restarted.unlock("abc123")
        assert [i.id for i in restarted.search("wifi")] == [item.id]

        restarted.delete_item(item.id)
        assert restarted.search("wifi") == []
        assert restarted.tally()[ItemCategory.PASSWORD] == 0

    def test_items_newest_first_across_restart(self, unlocked, vault_dir):
        a = unlocked.create_item("A", ItemCategory.TEXT_NOTE, "one")
        b = unlocked.create_item("B", ItemCategory.TEXT_NOTE, "two")
        assert a.id != b.id
        restarted = Vault(str(vault_dir))
        restarted.unlock("abc123")
        assert [i.title for i in restarted.items] == ["B", "A"]

    def test_fields_are_trimmed(self, unlocked):
        item = unlocked.create_item("  Bank  ", ItemCategory.WEBSITE, " https://bank.example ")
        assert item.title == "Bank"
        assert item.content == "https://bank.example"

    def test_invalid_item_not_stored(self, unlocked):
        with pytest.raises(ItemValidationError):
            unlocked.create_item("Site", ItemCategory.WEBSITE, "bank.example")
        assert unlocked.items == []

    def test_photo_import(self, unlocked, vault_dir, tmp_path):
        source = tmp_path / "beach.jpg"
        source.write_bytes(b"jpeg bytes")
        item = unlocked.create_item("Holiday", ItemCategory.PHOTO,
                                    source_path=str(source), source_name="beach.jpg")
        assert os.path.dirname(item.content) == str(vault_dir)
        assert item.content.endswith("_beach.jpg")
        with open(item.content, "rb") as f:
            assert f.read() == b"jpeg bytes"
        assert unlocked.attachment_exists(item) is True

    def test_photo_without_file_rejected(self, unlocked):
        with pytest.raises(ItemValidationError, match="select a file"):
            unlocked.create_item("Holiday", ItemCategory.PHOTO)

    def test_failed_import_creates_no_item(self, unlocked, tmp_path):
        with pytest.raises(SourceUnreadableError):
            unlocked.create_item("Scan", ItemCategory.DOCUMENT,
                                 source_path=str(tmp_path / "missing.pdf"))
        assert unlocked.items == []

    def test_blank_title_checked_before_copy(self, unlocked, vault_dir, tmp_path):
        source = tmp_path / "scan.pdf"
        source.write_bytes(b"%PDF")
        with pytest.raises(ItemValidationError):
            unlocked.create_item(" ", ItemCategory.DOCUMENT, source_path=str(source))
        assert sorted(p.name for p in vault_dir.iterdir()) == [config.PASSWORD_HASH_FILE]

    def test_missing_attachment_detected(self, unlocked, tmp_path):
        source = tmp_path / "scan.pdf"
        source.write_bytes(b"%PDF")
        item = unlocked.create_item("Scan", ItemCategory.DOCUMENT, source_path=str(source))
        os.remove(item.content)
        assert unlocked.attachment_exists(item) is False

    def test_non_file_items_always_exist(self, unlocked):
        item = unlocked.create_item("Note", ItemCategory.TEXT_NOTE, "hello")
        assert unlocked.attachment_exists(item) is True

    def test_tally_covers_every_category(self, unlocked):
        unlocked.create_item("Note", ItemCategory.TEXT_NOTE, "hello")
        tally = unlocked.tally()
        assert set(tally) == set(ItemCategory)
        assert sum(tally.values()) == 1
