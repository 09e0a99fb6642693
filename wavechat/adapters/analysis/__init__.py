"""
Audio analysis implementations for WaveChat.
"""

from wavechat.adapters.analysis.mock_analyzer import MockAudioAnalyzer

__all__ = ["MockAudioAnalyzer"]
