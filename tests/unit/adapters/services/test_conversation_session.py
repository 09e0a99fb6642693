"""
Tests for ConversationSession.
"""

import logging

import pytest

from wavechat.adapters.services import ConversationSession
from wavechat.core.exceptions import DatabaseServiceError


class BrokenService:
    current_user_id = "123"

    async def get_messages(self, conversation_id):
        raise DatabaseServiceError("store unavailable")


@pytest.fixture
def session(service, quiet_logger):
    return ConversationSession(service, "1", logger=quiet_logger)


@pytest.mark.asyncio
async def test_initial_state(session):
    assert session.messages == []
    assert session.loading is True
    assert session.refreshing is False
    assert session.sending is False
    assert session.error is None
    assert session.current_user_id == "123"


@pytest.mark.asyncio
async def test_fetch_messages_marks_conversation_read(session, service):
    result = await session.fetch_messages()

    assert [m["id"] for m in result] == ["101", "102", "103", "104", "105", "106"]
    assert session.messages == result
    assert session.loading is False
    conversations = await service.get_conversations()
    sarah = next(c for c in conversations if c["id"] == "1")
    assert sarah["read"] is True
    assert sarah["unreadCount"] == 0


@pytest.mark.asyncio
async def test_refresh_messages(session, service):
    await session.fetch_messages()
    await service.send_text_message({"conversationId": "1", "text": "From elsewhere", "senderId": "456"})

    result = await session.refresh_messages()

    assert result[-1]["text"] == "From elsewhere"
    assert session.refreshing is False


@pytest.mark.asyncio
async def test_fetch_failure_records_error(quiet_logger):
    session = ConversationSession(BrokenService(), "1", logger=quiet_logger)

    assert await session.fetch_messages() == []
    assert session.error == "Failed to load messages: store unavailable"
    assert session.loading is False
    assert session.refreshing is False


@pytest.mark.asyncio
async def test_send_text_message(session):
    await session.fetch_messages()

    message = await session.send_text_message("Hello Sarah")

    assert message["text"] == "Hello Sarah"
    assert message["senderId"] == "123"
    assert session.messages[-1] == message
    assert session.sending is False
    assert session.error is None


@pytest.mark.asyncio
async def test_send_text_message_failure(session):
    assert await session.send_text_message("") is None
    assert session.error.startswith("Failed to send message:")
    assert session.sending is False
    assert session.messages == []


@pytest.mark.asyncio
async def test_send_audio_message(session, recording):
    message = await session.send_audio_message({"uri": recording, "duration": 7, "waveform": [0.3, 0.6]})

    assert message["type"] == "audio"
    assert message["waveform"] == [0.3, 0.6]
    assert session.messages == [message]


@pytest.mark.asyncio
async def test_send_audio_message_failure(session, tmp_path):
    assert await session.send_audio_message({"uri": str(tmp_path / "missing.m4a"), "duration": 7}) is None
    assert session.error.startswith("Failed to send audio message:")


@pytest.mark.asyncio
async def test_local_edits(session):
    session.add_local_message({"id": "tmp_1", "text": "Sending..."})
    session.add_local_message({"id": "tmp_2", "text": "Other"})

    session.update_local_message("tmp_1", {"text": "Sent", "tags": ["Update"]})
    assert session.messages[0] == {"id": "tmp_1", "text": "Sent", "tags": ["Update"]}

    session.remove_local_message("tmp_2")
    assert [m["id"] for m in session.messages] == ["tmp_1"]


def test_default_logger_follows_config(logger_config):
    session = ConversationSession(BrokenService(), "1", config_path=logger_config)

    assert session.logger.level == logging.DEBUG
    assert session.logger.console_output is False
