"""Tests for item categories, validation and serialization."""

import dataclasses
import datetime

import pytest

from doclock.exceptions import ItemValidationError
from doclock.models import (
    CATEGORY_SPECS,
    ItemCategory,
    StoredItem,
    category_label,
    generate_item_id,
)


class TestCategories:

    def test_indices_match_file_format(self):
        assert [int(c) for c in ItemCategory] == [0, 1, 2, 3, 4]
        assert ItemCategory(4) is ItemCategory.PASSWORD

    def test_every_category_has_a_spec(self):
        assert set(CATEGORY_SPECS) == set(ItemCategory)

    def test_labels(self):
        assert [category_label(c) for c in ItemCategory] == [
            "Photo", "Document", "Text Note", "Website", "Password"
        ]

    def test_only_photo_and_document_need_files(self):
        needs_file = {c for c, spec in CATEGORY_SPECS.items() if spec.requires_file}
        assert needs_file == {ItemCategory.PHOTO, ItemCategory.DOCUMENT}


class TestValidation:

    @pytest.mark.parametrize("category", list(ItemCategory))
    def test_blank_content_rejected(self, make_item, category):
        with pytest.raises(ItemValidationError):
            make_item(category=category, content="").validate()

    def test_blank_title_rejected(self, make_item):
        with pytest.raises(ItemValidationError, match="title"):
            make_item(title="   ").validate()

    def test_whitespace_text_rejected(self, make_item):
        with pytest.raises(ItemValidationError):
            make_item(category=ItemCategory.TEXT_NOTE, content=" \n\t").validate()

    @pytest.mark.parametrize("url", [
        "https://example.com",
        "http://sub.example.co.uk/path?q=1",
        "https://my-site.org/#anchor",
    ])
    def test_valid_urls(self, make_item, url):
        make_item(category=ItemCategory.WEBSITE, content=url).validate()

    @pytest.mark.parametrize("url", [
        "example.com",
        "ftp://example.com",
        "https://localhost",
    ])
    def test_invalid_urls(self, make_item, url):
        with pytest.raises(ItemValidationError, match="valid URL"):
            make_item(category=ItemCategory.WEBSITE, content=url).validate()

    def test_validation_error_is_value_error(self, make_item):
        with pytest.raises(ValueError):
            make_item(category=ItemCategory.PASSWORD, content="").validate()


class TestSerialization:

    def test_to_dict_uses_file_keys(self, make_item):
        item = make_item(title="Wifi", category=ItemCategory.PASSWORD, content="secret1", item_id="42")
        assert item.to_dict() == {
            "id": "42",
            "title": "Wifi",
            "category": 4,
            "content": "secret1",
            "storedDate": "2025-03-14T09:26:53.589000",
        }

    def test_from_dict(self):
        item = StoredItem.from_dict({
            "id": "1700000000000",
            "title": "Passport scan",
            "category": 1,
            "content": "/vault/1700000000000_passport.pdf",
            "storedDate": "2023-11-14T22:13:20.000",
        })
        assert item.category is ItemCategory.DOCUMENT
        assert item.stored_date == datetime.datetime(2023, 11, 14, 22, 13, 20)

    def test_from_dict_back_and_forth(self, make_item):
        item = make_item(category=ItemCategory.WEBSITE, content="https://example.com")
        assert StoredItem.from_dict(item.to_dict()) == item

    @pytest.mark.parametrize("record", [
        {"id": "1", "title": "t", "category": 9, "content": "c", "storedDate": "2024-01-01T00:00:00"},
        {"id": "1", "title": "t", "category": "2", "content": "c", "storedDate": "2024-01-01T00:00:00"},
        {"id": "1", "title": "t", "category": True, "content": "c", "storedDate": "2024-01-01T00:00:00"},
        {"id": "1", "title": "t", "category": 2, "content": "c", "storedDate": "yesterday"},
        {"id": 1, "title": "t", "category": 2, "content": "c", "storedDate": "2024-01-01T00:00:00"},
        {"id": "1", "title": "t", "category": 2, "storedDate": "2024-01-01T00:00:00"},
    ])
    def test_from_dict_rejects_malformed(self, record):
        with pytest.raises((KeyError, ValueError, TypeError)):
            StoredItem.from_dict(record)

    def test_items_are_read_only(self, make_item):
        item = make_item(item_id="1")
        with pytest.raises(dataclasses.FrozenInstanceError):
            item.id = "2"
        with pytest.raises(dataclasses.FrozenInstanceError):
            item.stored_date = datetime.datetime.now()
        assert item.id == "1"


class TestItemIds:

    def test_numeric_millisecond_id(self):
        assert generate_item_id().isdigit()

    def test_skips_taken_ids(self):
        first = generate_item_id()
        taken = {str(int(first) + n) for n in range(5)}
        assert generate_item_id(taken) not in taken
