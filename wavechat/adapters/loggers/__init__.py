"""
Logger implementations for WaveChat.

This module provides the StructuredLogger implementation of the Logger interface.
"""

from wavechat.adapters.loggers.structured_logger import StructuredLogger

__all__ = ["StructuredLogger"]
