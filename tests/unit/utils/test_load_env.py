"""
Tests for the .env loader.
"""

import os

from wavechat.utils.load_env import load_env


def test_load_env_file(tmp_path, monkeypatch):
    env_file = tmp_path / ".env"
    env_file.write_text("WAVECHAT_TEST_VALUE=from-dotenv\n")
    monkeypatch.setenv("WAVECHAT_TEST_VALUE", "inherited")

    assert load_env(str(env_file)) is True
    assert os.environ["WAVECHAT_TEST_VALUE"] == "from-dotenv"
    monkeypatch.delenv("WAVECHAT_TEST_VALUE")


def test_load_env_missing_file(tmp_path):
    assert load_env(str(tmp_path / "absent.env")) is False
