"""
Mock audio analysis.

Waveforms are synthesised rather than measured, speech segments and
transcripts are canned or randomly assembled. The shapes match what a real
speech-to-text backend would return so callers do not change when one is
plugged in behind the AudioAnalyzer interface.
"""

from typing import Any, Dict, List, Optional

import numpy as np

from wavechat.core.interfaces import AudioAnalyzer
from wavechat.core.exceptions import AnalysisError
from wavechat.adapters.loggers import StructuredLogger


def _check_audio_uri(audio_uri: str) -> None:
    if not audio_uri or not isinstance(audio_uri, str):
        raise AnalysisError(f"Invalid audio URI: {audio_uri!r}")


SAMPLE_TRANSCRIPTION = {
    "text": (
        "This is a sample transcription of the audio message. In a real app, this would be "
        "the actual transcribed content from a speech-to-text service."
    ),
    "segments": [
        {"text": "This is a sample transcription", "start": 0, "end": 3.2},
        {"text": "of the audio message.", "start": 3.3, "end": 5.1},
        {"text": "In a real app, this would be", "start": 5.2, "end": 7.8},
        {"text": "the actual transcribed content", "start": 7.9, "end": 10.5},
        {"text": "from a speech-to-text service.", "start": 10.6, "end": 13.2},
    ],
}

TRANSCRIPT_PHRASES = [
    "I wanted to discuss the project timeline.",
    "Let's review the main goals for this quarter.",
    "I think we should focus on user acquisition first.",
    "The latest design looks great, but I have a few suggestions.",
    "Can we schedule a follow-up meeting next week?",
    "I'm not sure if we have enough resources for this feature.",
    "The analytics show promising results from our last campaign.",
    "We need to address the performance issues before launch.",
    "I'll send you the updated documentation later today.",
    "Thanks for your help with this, I really appreciate it.",
    "Let me know if you have any questions about the implementation.",
    "I want to highlight a key issue with the current approach.",
    "We should consider alternative solutions for this problem.",
    "The client feedback has been very positive so far.",
    "I'll need your input on the marketing strategy.",
]


def _transcript(*segments) -> Dict[str, Any]:
    return {
        "text": " ".join(text for text, _, _ in segments),
        "segments": [{"text": text, "start": start, "end": end} for text, start, end in segments],
    }


# Transcripts of the seeded voice messages
CANNED_TRANSCRIPTS: Dict[str, Dict[str, Any]] = {
    "103": _transcript(
        ("I have a question about the task assignments.", 0, 2.5),
        ("Can you clarify who's responsible for the UI components?", 2.7, 5.2),
        ("I think there might be some overlap with what Alex is working on.", 5.5, 8.0),
    ),
    "106": _transcript(
        ("I've made good progress on the dashboard component.", 0, 2.8),
        ("All the charts are implemented and I'm now working on the filter functionality.", 3.0, 7.5),
        ("Should be ready for review by tomorrow afternoon.", 7.8, 10.5),
    ),
    "202": _transcript(
        ("Yes, I'm prepared for the presentation tomorrow.", 0, 3.2),
        ("I've reviewed all the slides and practiced the key talking points.", 3.5, 7.8),
        ("I have a couple of questions about the demo section though.", 8.0, 11.5),
        ("Should we include the new feature that's still in beta?", 11.8, 15.2),
        ("Also, do you want to handle the Q&A or should I?", 15.5, 19.0),
    ),
    "303": _transcript(
        ("I'm encountering some issues with the API integration.", 0, 3.5),
        ("The endpoint returns an unexpected data format and I'm getting parsing errors.", 3.8, 8.2),
        ("I've tried different approaches but nothing seems to work consistently.", 8.5, 12.8),
        ("Could you check if the API documentation is up to date?", 13.0, 16.5),
    ),
    "305": _transcript(
        ("I found the solution to your API problem.", 0, 2.5),
        ("The endpoint was recently updated and requires an additional authentication header.", 2.8, 6.5),
        ("You need to include the project ID in the X-Project-Id header.", 6.8, 9.5),
        ("I've updated the documentation to reflect this change.", 9.8, 12.2),
        ("Let me know if you still have issues after making this change.", 12.5, 15.0),
    ),
}

SEGMENT_LABELS = ("Introduction", "Key Point", "Question", "Action Item")

# (offset, spread) in seconds for each detected segment label
_SEGMENT_WINDOWS = ((0, 3), (3, 5), (8, 5), (13, 5))


class MockAudioAnalyzer(AudioAnalyzer):
    """
    AudioAnalyzer returning synthetic results.

    Args:
        seed: Optional seed for reproducible waveforms and transcripts
        logger: Logger instance. If None, creates a new one.
        config_path: Optional configuration file path for the default logger
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        logger: Optional[StructuredLogger] = None,
        config_path: Optional[str] = None,
    ):
        self.rng = np.random.default_rng(seed)
        if logger is None:
            logger = StructuredLogger(name="audio_analyzer")
            logger.initialize(config_path)
        self.logger = logger

    def generate_waveform(self, length: int) -> List[float]:
        """
        Random amplitudes shaped to look like speech: louder in the middle
        third, with occasional peaks and dips, clipped to [0.1, 1.0].
        """
        length = int(length)
        if length <= 0:
            return []

        positions = np.arange(length) / length
        amplitude = 0.1 + self.rng.random(length) * 0.9
        amplitude[(positions > 0.3) & (positions < 0.7)] += 0.1

        peaks = self.rng.random(length) > 0.9
        amplitude[peaks] = np.minimum(amplitude[peaks] + 0.3, 1.0)

        dips = self.rng.random(length) > 0.85
        amplitude[dips] = np.maximum(amplitude[dips] - 0.2, 0.1)

        return np.round(np.clip(amplitude, 0.1, 1.0), 3).tolist()

    async def analyze_waveform(self, audio_uri: str) -> List[float]:
        _check_audio_uri(audio_uri)
        # 50-149 bars regardless of the file contents
        length = int(self.rng.integers(50, 150))
        return self.generate_waveform(length)

    async def detect_speech_segments(self, audio_uri: str) -> List[Dict[str, Any]]:
        _check_audio_uri(audio_uri)
        return [
            {"label": label, "timestamp": round(offset + float(self.rng.random()) * spread, 2)}
            for label, (offset, spread) in zip(SEGMENT_LABELS, _SEGMENT_WINDOWS)
        ]

    async def transcribe(self, audio_uri: str) -> Dict[str, Any]:
        _check_audio_uri(audio_uri)
        return {
            "text": SAMPLE_TRANSCRIPTION["text"],
            "segments": [dict(segment) for segment in SAMPLE_TRANSCRIPTION["segments"]],
        }

    async def transcript_for_message(self, message_id: str) -> Dict[str, Any]:
        if message_id in CANNED_TRANSCRIPTS:
            canned = CANNED_TRANSCRIPTS[message_id]
            return {"text": canned["text"], "segments": [dict(s) for s in canned["segments"]]}

        segment_count = 4 + int(self.rng.integers(0, 4))
        segments = []
        current_time = 0.0
        for _ in range(segment_count):
            end_time = round(current_time + 1 + int(self.rng.integers(0, 3)), 1)
            segments.append({
                "text": TRANSCRIPT_PHRASES[int(self.rng.integers(0, len(TRANSCRIPT_PHRASES)))],
                "start": current_time,
                "end": end_time,
            })
            # Small gap between segments
            current_time = round(end_time + 0.2, 1)

        self.logger.debug({
            "action": "TRANSCRIPT_GENERATED",
            "message": "Generated random transcript",
            "data": {"message_id": message_id, "segment_count": segment_count},
        })
        return {"text": " ".join(s["text"] for s in segments), "segments": segments}
