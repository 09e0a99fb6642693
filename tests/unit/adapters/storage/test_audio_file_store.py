"""
Tests for the local audio file store.
"""

import os

import pytest
import pytest_asyncio

from wavechat.adapters.storage import LocalAudioStore
from wavechat.core.exceptions import AudioStorageError


@pytest_asyncio.fixture
async def audio_store(tmp_path, quiet_logger):
    store = LocalAudioStore(directory=str(tmp_path / "audio"), logger=quiet_logger)
    await store.initialize()
    return store


@pytest.mark.asyncio
async def test_initialize_creates_directory(audio_store):
    assert os.path.isdir(audio_store.directory)


@pytest.mark.asyncio
async def test_save_from_copies_recording(audio_store, recording):
    destination = await audio_store.save_from(recording, "voice_1.m4a")

    assert destination == os.path.join(audio_store.directory, "voice_1.m4a")
    assert await audio_store.exists(destination)
    # The temporary recording is copied, not moved
    assert os.path.exists(recording)
    with open(recording, "rb") as src, open(destination, "rb") as dst:
        assert src.read() == dst.read()


@pytest.mark.asyncio
async def test_save_from_missing_source(audio_store, tmp_path):
    with pytest.raises(AudioStorageError):
        await audio_store.save_from(str(tmp_path / "gone.m4a"), "voice_2.m4a")


@pytest.mark.parametrize("file_name", ["", "../voice.m4a", "nested/voice.m4a"])
def test_path_for_rejects_unsafe_names(tmp_path, quiet_logger, file_name):
    store = LocalAudioStore(directory=str(tmp_path), logger=quiet_logger)
    with pytest.raises(AudioStorageError):
        store.path_for(file_name)


@pytest.mark.asyncio
async def test_delete(audio_store, recording):
    destination = await audio_store.save_from(recording, "voice_3.m4a")
    await audio_store.delete(destination)
    assert not await audio_store.exists(destination)

    with pytest.raises(AudioStorageError):
        await audio_store.delete(destination)


@pytest.mark.asyncio
async def test_list_and_clear(audio_store, recording):
    await audio_store.save_from(recording, "voice_b.m4a")
    await audio_store.save_from(recording, "voice_a.m4a")

    assert await audio_store.list_files() == ["voice_a.m4a", "voice_b.m4a"]
    assert await audio_store.clear() == 2
    assert await audio_store.list_files() == []


@pytest.mark.asyncio
async def test_healthcheck(audio_store, tmp_path, quiet_logger):
    assert (await audio_store.healthcheck())["healthy"] is True

    missing = LocalAudioStore(directory=str(tmp_path / "missing"), logger=quiet_logger)
    health = await missing.healthcheck()
    assert health["healthy"] is False
    assert "does not exist" in health["message"]
