"""
Tests for the in-memory key-value store.
"""

import pytest

from wavechat.adapters.storage import InMemoryKeyValueStore
from wavechat.core.exceptions import StorageError, StorageKeyError


@pytest.mark.asyncio
async def test_basic_operations():
    store = InMemoryKeyValueStore(initial={"local_conversations": "[]"})
    await store.initialize()

    assert await store.get_item("local_conversations") == "[]"
    await store.set_item("local_messages", "{}")
    assert await store.get_all_keys() == ["local_conversations", "local_messages"]

    await store.remove_item("local_conversations")
    assert await store.get_item("local_conversations") is None


@pytest.mark.asyncio
async def test_validation():
    store = InMemoryKeyValueStore()
    with pytest.raises(StorageKeyError):
        await store.get_item("../etc")
    with pytest.raises(StorageError):
        await store.set_item("key", 42)


@pytest.mark.asyncio
async def test_healthcheck():
    store = InMemoryKeyValueStore()
    assert (await store.healthcheck())["healthy"] is False
    await store.initialize()
    health = await store.healthcheck()
    assert health["healthy"] is True
    assert health["details"]["key_count"] == 0
