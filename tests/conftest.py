"""
Shared pytest fixtures for the DocLock test suite.

The autouse fixture points DOCLOCK_HOME at a temp directory so no test can
touch the real ~/.doclock vault.
"""

import datetime

import pytest

from doclock import config
from doclock.models import StoredItem, ItemCategory


@pytest.fixture(autouse=True)
def _isolate_vault_home(tmp_path, monkeypatch):
    monkeypatch.setenv(config.VAULT_DIR_ENV, str(tmp_path / "home"))


@pytest.fixture
def vault_dir(tmp_path):
    path = tmp_path / "vault"
    path.mkdir()
    return path


@pytest.fixture
def make_item():
    """Factory for valid items with predictable ids."""
    counter = iter(range(1000, 100000))

    def _make(title="Item", category=ItemCategory.TEXT_NOTE, content="some text", item_id=None):
        return StoredItem(
            id=item_id or str(next(counter)),
            title=title,
            category=category,
            content=content,
            stored_date=datetime.datetime(2025, 3, 14, 9, 26, 53, 589000),
        )

    return _make
