"""
Service module.

The database service over the key-value store and the per-conversation
session cache built on top of it.
"""

from wavechat.adapters.services.database_service import DatabaseService
from wavechat.adapters.services.conversation_session import ConversationSession

__all__ = ["DatabaseService", "ConversationSession"]
