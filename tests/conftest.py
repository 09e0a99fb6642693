"""
Shared fixtures for the WaveChat test suite.
"""

import pytest
import pytest_asyncio

from wavechat.adapters.loggers import StructuredLogger
from wavechat.adapters.storage import InMemoryKeyValueStore, JSONFileKeyValueStore, LocalAudioStore
from wavechat.adapters.analysis import MockAudioAnalyzer
from wavechat.adapters.services import DatabaseService


@pytest.fixture
def quiet_logger():
    """A logger that writes nowhere."""
    return StructuredLogger(name="wavechat_tests", console_output=False)


@pytest.fixture
def logger_config(tmp_path):
    """Path of a config file that sets the structured logger to quiet DEBUG."""
    path = tmp_path / "logging.yaml"
    path.write_text(
        "system:\n"
        "  loggers:\n"
        "    structured_logger:\n"
        "      level: DEBUG\n"
        "      console_output: false\n"
    )
    return str(path)


@pytest.fixture
def recording(tmp_path):
    """A fake voice recording, as left behind by the recorder."""
    path = tmp_path / "recording.m4a"
    path.write_bytes(b"\x00\x00\x00\x18ftypM4A fake audio payload")
    return str(path)


@pytest.fixture
def make_service(tmp_path, quiet_logger):
    """Factory for services over tmp_path, without simulated latency unless configured."""

    def factory(store=None, **config):
        return DatabaseService(
            store=store or JSONFileKeyValueStore(base_path=str(tmp_path / "store"), logger=quiet_logger),
            audio_store=LocalAudioStore(directory=str(tmp_path / "audio"), logger=quiet_logger),
            analyzer=MockAudioAnalyzer(seed=42, logger=quiet_logger),
            config={"latency_scale": 0, **config},
            logger=quiet_logger,
        )

    return factory


@pytest_asyncio.fixture
async def service(make_service):
    """A seeded service over on-disk stores."""
    service = make_service()
    await service.initialize()
    return service


@pytest_asyncio.fixture
async def empty_service(make_service):
    """A service over an empty in-memory store, seeding disabled."""
    service = make_service(store=InMemoryKeyValueStore(), seed_data=False)
    await service.initialize()
    return service
