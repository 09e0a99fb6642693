"""
Tests for the command-line controller.
"""

import pytest

from wavechat.adapters.controller import command_line_controller


@pytest.fixture
def config_path(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "system:\n"
        "  loggers:\n"
        "    structured_logger:\n"
        "      console_output: false\n"
        "storage:\n"
        "  key_value_store:\n"
        f"    base_path: {tmp_path / 'store'}\n"
        "  audio:\n"
        f"    directory: {tmp_path / 'audio'}\n"
        "database_service:\n"
        "  latency_scale: 1\n"
    )
    return str(path)


async def run(config_path, *args):
    return await command_line_controller(["--config", config_path, "--no-latency", *args])


@pytest.mark.asyncio
async def test_conversations(config_path, capsys):
    assert await run(config_path, "conversations") == 0

    out = capsys.readouterr().out
    assert "[1] Sarah Johnson (2 unread)" in out
    assert "Emma Thompson" in out


@pytest.mark.asyncio
async def test_messages(config_path, capsys):
    assert await run(config_path, "messages", "1") == 0

    out = capsys.readouterr().out
    assert "Sarah Johnson: I'm doing well" in out
    assert "You: 🎤 Voice message (0:08) [Question, Task]" in out
    assert "--- " in out


@pytest.mark.asyncio
async def test_messages_empty(config_path, capsys):
    assert await run(config_path, "messages", "unknown") == 0
    assert "No messages in this conversation." in capsys.readouterr().out


@pytest.mark.asyncio
async def test_send_then_list(config_path, capsys):
    assert await run(config_path, "send", "2", "Hello from the terminal") == 0
    assert "Sent message msg_" in capsys.readouterr().out

    assert await run(config_path, "messages", "2") == 0
    assert "You: Hello from the terminal" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_send_empty_text_fails(config_path, capsys):
    assert await run(config_path, "send", "2", "") == 1
    assert "Error:" in capsys.readouterr().err


@pytest.mark.asyncio
async def test_reset(config_path, capsys):
    await run(config_path, "send", "2", "Temporary")
    assert await run(config_path, "reset") == 0
    assert "All data cleared" in capsys.readouterr().out

    await run(config_path, "messages", "2")
    assert "Temporary" not in capsys.readouterr().out


@pytest.mark.asyncio
async def test_health(config_path, capsys):
    assert await run(config_path, "health") == 0
    out = capsys.readouterr().out
    assert "Overall health: Healthy" in out
    assert "  - store: Healthy" in out


@pytest.mark.asyncio
async def test_requires_subcommand():
    with pytest.raises(SystemExit):
        await command_line_controller([])
