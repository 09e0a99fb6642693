"""
Tests for MockAudioAnalyzer.
"""

import logging

import pytest

from wavechat.adapters.analysis import MockAudioAnalyzer
from wavechat.adapters.analysis.mock_analyzer import CANNED_TRANSCRIPTS, SEGMENT_LABELS, TRANSCRIPT_PHRASES
from wavechat.core.exceptions import AnalysisError


@pytest.fixture
def analyzer(quiet_logger):
    return MockAudioAnalyzer(seed=7, logger=quiet_logger)


def test_generate_waveform_shape(analyzer):
    waveform = analyzer.generate_waveform(120)

    assert len(waveform) == 120
    assert all(0.1 <= value <= 1.0 for value in waveform)
    assert all(isinstance(value, float) for value in waveform)


def test_generate_waveform_empty(analyzer):
    assert analyzer.generate_waveform(0) == []
    assert analyzer.generate_waveform(-5) == []


def test_seed_makes_waveforms_reproducible(quiet_logger):
    first = MockAudioAnalyzer(seed=1, logger=quiet_logger).generate_waveform(40)
    second = MockAudioAnalyzer(seed=1, logger=quiet_logger).generate_waveform(40)
    assert first == second


@pytest.mark.asyncio
async def test_analyze_waveform_length(analyzer):
    for _ in range(20):
        assert 50 <= len(await analyzer.analyze_waveform("file:///audio/voice.m4a")) <= 149


@pytest.mark.asyncio
async def test_detect_speech_segments(analyzer):
    segments = await analyzer.detect_speech_segments("file:///audio/voice.m4a")

    assert [s["label"] for s in segments] == list(SEGMENT_LABELS)
    timestamps = [s["timestamp"] for s in segments]
    assert timestamps == sorted(timestamps)
    assert 0 <= timestamps[0] <= 3


@pytest.mark.asyncio
async def test_transcribe(analyzer):
    transcript = await analyzer.transcribe("file:///audio/voice.m4a")

    assert transcript["text"].startswith("This is a sample transcription")
    assert len(transcript["segments"]) == 5


@pytest.mark.asyncio
@pytest.mark.parametrize("method", ["analyze_waveform", "detect_speech_segments", "transcribe"])
async def test_invalid_uri(analyzer, method):
    with pytest.raises(AnalysisError):
        await getattr(analyzer, method)("")


@pytest.mark.asyncio
async def test_canned_transcript(analyzer):
    transcript = await analyzer.transcript_for_message("303")

    assert transcript == CANNED_TRANSCRIPTS["303"]
    # Callers get a copy
    transcript["segments"].clear()
    assert len(CANNED_TRANSCRIPTS["303"]["segments"]) == 4


@pytest.mark.asyncio
async def test_random_transcript(analyzer):
    transcript = await analyzer.transcript_for_message("msg_unknown")
    segments = transcript["segments"]

    assert 4 <= len(segments) <= 7
    assert segments[0]["start"] == 0
    for segment in segments:
        assert segment["text"] in TRANSCRIPT_PHRASES
        assert 1 - 1e-9 <= segment["end"] - segment["start"] <= 3 + 1e-9
    for previous, current in zip(segments, segments[1:]):
        assert current["start"] - previous["end"] == pytest.approx(0.2)
    assert transcript["text"] == " ".join(s["text"] for s in segments)


def test_default_logger_follows_config(logger_config):
    analyzer = MockAudioAnalyzer(seed=7, config_path=logger_config)

    assert analyzer.logger.level == logging.DEBUG
    assert analyzer.logger.console_output is False
