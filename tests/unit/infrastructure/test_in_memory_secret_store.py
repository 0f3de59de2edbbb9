"""
Unit tests for InMemorySecretStore.

Usage:
    pytest tests/unit/infrastructure/test_in_memory_secret_store.py
"""

import threading

import pytest

from gardien.domain.value_objects.secret import Secret
from gardien.infrastructure.storage.in_memory_secret_store import (
    InMemorySecretStore,
)


class TestInMemorySecretStore:
    """Unit tests for InMemorySecretStore."""

    def test_get_preloaded(self):
        """Test preloaded secret is returned unchanged."""
        secret = Secret(key="k" * 64, iv="i" * 32)
        store = InMemorySecretStore({"content-1": secret})

        assert store.get("content-1") is secret

    def test_get_absent(self):
        """Test unknown IPID returns None."""
        store = InMemorySecretStore()

        assert store.get("missing") is None
        assert not store.contains("missing")

    def test_ipid_case_sensitive(self):
        """Test IPIDs are compared exactly."""
        store = InMemorySecretStore({"AbC": Secret(key="k", iv="i")})

        assert store.get("abc") is None

    def test_put_visible_to_later_get(self):
        """Test read-after-write."""
        store = InMemorySecretStore()
        secret = Secret(key="k", iv="i")

        store.put("content-1", secret)

        assert store.get("content-1") == secret
        assert store.count() == 1

    def test_put_replaces(self):
        """Test second put overwrites the first."""
        store = InMemorySecretStore({"content-1": Secret(key="old", iv="old")})

        store.put("content-1", Secret(key="new", iv="new"))

        assert store.get("content-1").key == "new"

    def test_put_empty_ipid(self):
        """Test empty IPID is rejected."""
        store = InMemorySecretStore()

        with pytest.raises(ValueError, match="IPID"):
            store.put("", Secret(key="k", iv="i"))

    def test_delete(self):
        """Test delete removes and reports removal."""
        store = InMemorySecretStore({"content-1": Secret(key="k", iv="i")})

        assert store.delete("content-1") is True
        assert store.get("content-1") is None
        assert store.delete("content-1") is False

    def test_list_all_is_snapshot(self):
        """Test list_all copy is detached from the store."""
        store = InMemorySecretStore({"content-1": Secret(key="k", iv="i")})

        snapshot = store.list_all()
        store.delete("content-1")

        assert "content-1" in snapshot
        assert store.count() == 0

    def test_initial_mapping_not_aliased(self):
        """Test mutating the seed mapping does not affect the store."""
        initial = {"content-1": Secret(key="k", iv="i")}
        store = InMemorySecretStore(initial)

        initial.clear()

        assert store.contains("content-1")

    def test_concurrent_puts(self):
        """Test concurrent writers do not lose entries."""
        store = InMemorySecretStore()

        def writer(offset: int):
            for i in range(100):
                store.put(f"content-{offset}-{i}", Secret(key="k", iv="i"))

        threads = [threading.Thread(target=writer, args=(n,)) for n in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert store.count() == 800
