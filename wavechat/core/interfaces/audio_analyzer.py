from abc import ABC, abstractmethod
from typing import List

from wavechat.core.models import SpeechSegment, TranscriptDocument


class AudioAnalyzer(ABC):
    """
    Interface for analysing voice messages: waveform extraction, speech
    segment detection and speech-to-text.
    """

    @abstractmethod
    def generate_waveform(self, length: int) -> List[float]:
        """
        Produce a waveform of the given number of bars.

        Args:
            length: Number of amplitude values

        Returns:
            List[float]: Amplitudes between 0.1 and 1.0
        """
        pass

    @abstractmethod
    async def analyze_waveform(self, audio_uri: str) -> List[float]:
        """
        Produce a waveform for an audio file.

        Args:
            audio_uri: Path of the audio file

        Returns:
            List[float]: Amplitudes between 0.1 and 1.0

        Raises:
            AnalysisError: If the audio cannot be analysed
        """
        pass

    @abstractmethod
    async def detect_speech_segments(self, audio_uri: str) -> List[SpeechSegment]:
        """
        Detect labelled segments in an audio file for automatic tagging.

        Returns:
            List[SpeechSegment]: Segments as {'label': str, 'timestamp': float}

        Raises:
            AnalysisError: If detection fails
        """
        pass

    @abstractmethod
    async def transcribe(self, audio_uri: str) -> TranscriptDocument:
        """
        Transcribe an audio file.

        Returns:
            TranscriptDocument: {'text': str, 'segments': [{'text', 'start', 'end'}]}

        Raises:
            AnalysisError: If transcription fails
        """
        pass

    @abstractmethod
    async def transcript_for_message(self, message_id: str) -> TranscriptDocument:
        """
        Return the transcript of a stored voice message.

        Returns:
            TranscriptDocument: {'text': str, 'segments': [{'text', 'start', 'end'}]}
        """
        pass
