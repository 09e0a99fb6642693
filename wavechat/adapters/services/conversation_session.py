"""
Per-conversation message cache.

Keeps the messages of one conversation in memory for a client, with loading
state flags and optimistic local edits.
"""

from typing import Any, Dict, List, Optional

from wavechat.core.exceptions import WaveChatError
from wavechat.core.models import MESSAGE_TYPE_AUDIO, MESSAGE_TYPE_TEXT
from wavechat.adapters.loggers import StructuredLogger
from wavechat.utils.datetime_utils import utc_now_iso


class ConversationSession:
    """
    Ordered message cache for one conversation.

    Service failures never propagate out of the fetch and send methods: they
    are recorded in `error` and an empty result is returned instead.
    """

    def __init__(
        self,
        service,
        conversation_id: str,
        current_user_id: Optional[str] = None,
        logger: Optional[StructuredLogger] = None,
        config_path: Optional[str] = None,
    ):
        self.service = service
        self.conversation_id = conversation_id
        self.current_user_id = current_user_id or service.current_user_id
        if logger is None:
            logger = StructuredLogger(name="conversation_session")
            logger.initialize(config_path)
        self.logger = logger

        self.messages: List[Dict[str, Any]] = []
        self.loading = True
        self.refreshing = False
        self.sending = False
        self.error: Optional[str] = None

    async def fetch_messages(self, refreshing: bool = False) -> List[Dict[str, Any]]:
        """
        Load the conversation's messages and mark them read.

        Args:
            refreshing: Set the `refreshing` flag instead of `loading` while fetching

        Returns:
            List[Dict[str, Any]]: The messages, or [] if loading failed
        """
        if refreshing:
            self.refreshing = True
        else:
            self.loading = True
        self.error = None

        try:
            result = await self.service.get_messages(self.conversation_id)
            self.messages = list(result)
            self.loading = False
            self.refreshing = False

            await self.service.mark_messages_as_read(self.conversation_id, self.current_user_id)
            return result
        except WaveChatError as e:
            self.logger.error({
                "action": "SESSION_FETCH_FAILED",
                "message": "Error fetching messages",
                "data": {"conversation_id": self.conversation_id},
                "exception": e,
            })
            self.error = f"Failed to load messages: {e}"
            self.loading = False
            self.refreshing = False
            return []

    async def refresh_messages(self) -> List[Dict[str, Any]]:
        return await self.fetch_messages(refreshing=True)

    async def _send(self, message_data: Dict[str, Any], audio: bool) -> Optional[Dict[str, Any]]:
        self.sending = True
        self.error = None
        try:
            if audio:
                new_message = await self.service.send_audio_message(message_data)
            else:
                new_message = await self.service.send_text_message(message_data)
        except WaveChatError as e:
            label = "audio message" if audio else "message"
            self.logger.error({
                "action": "SESSION_SEND_FAILED",
                "message": f"Error sending {label}",
                "data": {"conversation_id": self.conversation_id},
                "exception": e,
            })
            self.error = f"Failed to send {label}: {e}"
            return None
        finally:
            self.sending = False

        self.messages.append(new_message)
        return new_message

    async def send_text_message(self, text: str) -> Optional[Dict[str, Any]]:
        """
        Send a text message as the current user.

        Returns:
            Optional[Dict[str, Any]]: The stored message, or None if sending failed
        """
        return await self._send(
            {
                "conversationId": self.conversation_id,
                "text": text,
                "senderId": self.current_user_id,
                "timestamp": utc_now_iso(),
                "type": MESSAGE_TYPE_TEXT,
            },
            audio=False,
        )

    async def send_audio_message(self, audio_data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Send a recorded voice message as the current user.

        Args:
            audio_data: {'uri', 'duration', 'waveform'} of the recording

        Returns:
            Optional[Dict[str, Any]]: The stored message, or None if sending failed
        """
        return await self._send(
            {
                "conversationId": self.conversation_id,
                "audioUri": audio_data.get("uri"),
                "audioDuration": audio_data.get("duration"),
                "waveform": audio_data.get("waveform"),
                "senderId": self.current_user_id,
                "timestamp": utc_now_iso(),
                "type": MESSAGE_TYPE_AUDIO,
            },
            audio=True,
        )

    def add_local_message(self, message: Dict[str, Any]) -> None:
        self.messages.append(message)

    def update_local_message(self, message_id: str, updates: Dict[str, Any]) -> None:
        self.messages = [
            {**message, **updates} if message.get("id") == message_id else message
            for message in self.messages
        ]

    def remove_local_message(self, message_id: str) -> None:
        self.messages = [message for message in self.messages if message.get("id") != message_id]
