"""
Tests for the JSON file key-value store.
"""

import os
import stat

import pytest
import pytest_asyncio

from wavechat.adapters.storage import JSONFileKeyValueStore
from wavechat.core.exceptions import StorageError, StorageKeyError


@pytest_asyncio.fixture
async def store(tmp_path, quiet_logger):
    store = JSONFileKeyValueStore(base_path=str(tmp_path / "store"), logger=quiet_logger)
    await store.initialize()
    return store


@pytest.mark.asyncio
async def test_set_and_get_item(store):
    await store.set_item("local_conversations", '[{"id": "1"}]')
    assert await store.get_item("local_conversations") == '[{"id": "1"}]'


@pytest.mark.asyncio
async def test_missing_key_returns_none(store):
    assert await store.get_item("local_messages") is None


@pytest.mark.asyncio
async def test_overwrite_leaves_no_temporary_file(store):
    await store.set_item("local_messages", "{}")
    await store.set_item("local_messages", '{"1": []}')

    assert await store.get_item("local_messages") == '{"1": []}'
    assert sorted(os.listdir(store.base_path)) == ["local_messages.json"]


@pytest.mark.asyncio
async def test_file_permissions(store):
    await store.set_item("secret", "value")
    mode = stat.S_IMODE(os.stat(os.path.join(store.base_path, "secret.json")).st_mode)
    assert mode == 0o600


@pytest.mark.asyncio
async def test_remove_item(store):
    await store.set_item("local_message_replies", "{}")
    await store.remove_item("local_message_replies")
    assert await store.get_item("local_message_replies") is None

    # Removing a missing key is a no-op
    await store.remove_item("local_message_replies")


@pytest.mark.asyncio
async def test_get_all_keys(store):
    await store.set_item("b_key", "1")
    await store.set_item("a_key", "2")
    assert await store.get_all_keys() == ["a_key", "b_key"]


@pytest.mark.asyncio
@pytest.mark.parametrize("key", ["", "../escape", "has space", "a/b"])
async def test_invalid_keys_rejected(store, key):
    with pytest.raises(StorageKeyError):
        await store.set_item(key, "value")


@pytest.mark.asyncio
async def test_non_string_value_rejected(store):
    with pytest.raises(StorageError):
        await store.set_item("local_messages", {"1": []})


@pytest.mark.asyncio
async def test_requires_initialize(tmp_path, quiet_logger):
    store = JSONFileKeyValueStore(base_path=str(tmp_path / "other"), logger=quiet_logger)
    with pytest.raises(StorageError):
        await store.get_item("local_messages")


@pytest.mark.asyncio
async def test_values_survive_new_instance(store, quiet_logger):
    await store.set_item("local_conversations", "[]")

    reopened = JSONFileKeyValueStore(base_path=store.base_path, logger=quiet_logger)
    await reopened.initialize()
    assert await reopened.get_item("local_conversations") == "[]"


@pytest.mark.asyncio
async def test_base_path_from_config(tmp_path, quiet_logger):
    config_file = tmp_path / "config.yaml"
    config_file.write_text(f"storage:\n  key_value_store:\n    base_path: {tmp_path / 'configured'}\n")

    store = JSONFileKeyValueStore(logger=quiet_logger, config_path=str(config_file))
    assert store.base_path == str(tmp_path / "configured")


@pytest.mark.asyncio
async def test_healthcheck(store, tmp_path, quiet_logger):
    health = await store.healthcheck()
    assert health["healthy"] is True
    assert health["details"]["base_path_writable"] is True

    uninitialized = JSONFileKeyValueStore(base_path=str(tmp_path / "never"), logger=quiet_logger)
    health = await uninitialized.healthcheck()
    assert health["healthy"] is False
    assert health["message"] == "Key-value store not initialized"
