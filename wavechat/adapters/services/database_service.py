"""
Local database service.

Simulates a chat backend on top of a key-value store: conversations, messages,
reactions and replies are each kept as one JSON blob, and voice recordings are
copied into a local audio directory. Every operation waits for a simulated
network delay first.

Writes that touch several blobs (for example messages and conversations when
sending) are separate, non-atomic writes; the last writer wins per blob.
"""

import asyncio
import math
import random
import uuid
from typing import Any, Dict, List, Optional, Tuple

from wavechat.core.interfaces import AudioAnalyzer, AudioStore, KeyValueStore
from wavechat.core.exceptions import (
    AnalysisError,
    AudioStorageError,
    ConfigurationError,
    DatabaseServiceError,
    ValidationError,
    WaveChatError,
)
from wavechat.core.models import (
    MESSAGE_TYPE_AUDIO,
    MESSAGE_TYPE_TEXT,
    ConversationDocument,
    MessageDocument,
    ReactionDocument,
    ReplyDocument,
    SpeechSegment,
    TranscriptDocument,
)
from wavechat.adapters.loggers import StructuredLogger
from wavechat.adapters.analysis import MockAudioAnalyzer
from wavechat.adapters.storage import (
    ALL_STORAGE_KEYS,
    CONVERSATIONS_STORAGE_KEY,
    MESSAGES_STORAGE_KEY,
    REACTIONS_STORAGE_KEY,
    REPLIES_STORAGE_KEY,
    CollectionSerializer,
    JSONFileKeyValueStore,
    LocalAudioStore,
)
from wavechat.adapters.services import mock_data
from wavechat.utils.config import get_component_config
from wavechat.utils.datetime_utils import now_ms, utc_now_iso
from wavechat.utils.time_utils import voice_message_preview


class DatabaseService:
    """
    Data-access object for conversations, messages, reactions and replies.

    Call initialize() before any other method.
    """

    # Simulated network delay per operation, in milliseconds
    DEFAULT_LATENCIES_MS = {
        "get_conversations": 800,
        "get_messages": 600,
        "send_text_message": 300,
        "send_audio_message": 500,
        "update_message_tags": 300,
        "add_reaction": 300,
        "get_reactions": 200,
        "add_reply": 300,
        "get_replies": 200,
        "mark_messages_as_read": 200,
        "create_new_conversation": 500,
        "generate_waveform": 300,
        "delete_message": 300,
        "detect_speech_segments": 500,
        "transcribe_audio": 1000,
        "get_message_transcript": 300,
    }

    DEFAULT_CURRENT_USER_ID = mock_data.CURRENT_USER_ID
    DEFAULT_CURRENT_USER_NAME = mock_data.CURRENT_USER_NAME
    DEFAULT_OTHER_USER_NAME = "Other User"
    MAX_WAVEFORM_BARS = 150
    FALLBACK_WAVEFORM_BARS = 50

    def __init__(
        self,
        store: Optional[KeyValueStore] = None,
        audio_store: Optional[AudioStore] = None,
        analyzer: Optional[AudioAnalyzer] = None,
        config: Optional[Dict[str, Any]] = None,
        config_path: Optional[str] = None,
        logger: Optional[StructuredLogger] = None,
    ):
        """
        Initialize the service.

        Args:
            store: Key-value store holding the collections. If None, a
                   JSONFileKeyValueStore configured from config.yaml.
            audio_store: Store for voice recordings. If None, a LocalAudioStore
                         configured from config.yaml.
            analyzer: Audio analyzer. If None, a MockAudioAnalyzer.
            config: The `database_service` settings. If None, loaded from config.yaml.
            config_path: Optional configuration file path.
            logger: Logger instance. If None, creates a new one.
        """
        if logger is None:
            logger = StructuredLogger(name="database_service")
            logger.initialize(config_path)
        self.logger = logger

        if config is None:
            try:
                config = get_component_config("database_service", config_path)
            except ConfigurationError as e:
                self.logger.warning({
                    "action": "CONFIG_LOAD_FAILED",
                    "message": "Could not load config, using default database service settings",
                    "data": {"error": str(e)},
                })
                config = {}
        self.config = config

        self.current_user_id = str(config.get("current_user_id", self.DEFAULT_CURRENT_USER_ID))
        self.current_user_name = config.get("current_user_name", self.DEFAULT_CURRENT_USER_NAME)
        self.other_user_name = config.get("other_user_name", self.DEFAULT_OTHER_USER_NAME)
        self.latency_scale = float(config.get("latency_scale", 1.0))
        self.seed_data = bool(config.get("seed_data", True))
        self.latencies_ms = {**self.DEFAULT_LATENCIES_MS, **config.get("latencies_ms", {})}

        self.store = store or JSONFileKeyValueStore(config_path=config_path)
        self.audio_store = audio_store or LocalAudioStore(config_path=config_path)
        self.analyzer = analyzer or MockAudioAnalyzer(config_path=config_path)
        self.serializer = CollectionSerializer(logger=self.logger)
        self.initialized = False

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def initialize(self) -> None:
        """
        Prepare storage and seed it when empty.

        If no conversations are stored yet the sample data is written;
        otherwise messages missing a type are repaired. The additional sample
        reactions are merged in either case (seeding enabled only).

        Raises:
            DatabaseServiceError: If initialization fails.
        """
        try:
            await self.store.initialize()
            await self.audio_store.initialize()
            self.initialized = True

            existing = await self.store.get_item(CONVERSATIONS_STORAGE_KEY)
            if existing is None:
                if self.seed_data:
                    await self._seed()
            else:
                await self.fix_message_types()

            if self.seed_data:
                await self.add_more_mock_reactions()
        except Exception as e:
            self.initialized = False
            self.logger.error({
                "action": "DATABASE_INIT_FAILED",
                "message": "Error initializing local storage",
                "exception": e,
            })
            raise DatabaseServiceError(f"Initialization failed: {e}") from e

        self.logger.info({
            "action": "DATABASE_INITIALIZED",
            "message": "Database service initialized",
            "data": {"seed_data": self.seed_data, "latency_scale": self.latency_scale},
        })

    async def _seed(self) -> None:
        self.logger.info({
            "action": "SEEDING_DATA",
            "message": "Initializing data with sample conversations and messages",
        })

        messages = mock_data.seed_messages(self.analyzer.generate_waveform)
        for conversation_messages in messages.values():
            for message in conversation_messages:
                if message["type"] == MESSAGE_TYPE_AUDIO:
                    message["audioUri"] = self.audio_store.path_for(f"sample_{message['id']}.m4a")

        await self._write(CONVERSATIONS_STORAGE_KEY, mock_data.seed_conversations())
        await self._write(MESSAGES_STORAGE_KEY, messages)
        await self._write(REACTIONS_STORAGE_KEY, mock_data.seed_reactions())
        await self._write(REPLIES_STORAGE_KEY, mock_data.seed_replies())

        self.logger.info({
            "action": "SEEDING_COMPLETE",
            "message": "Sample data initialized successfully",
            "data": {"conversation_count": len(messages)},
        })

    def _check_initialized(self) -> None:
        if not self.initialized:
            raise DatabaseServiceError("DatabaseService not initialized. Call initialize() first.")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    async def _delay(self, operation: str) -> None:
        """Wait for the simulated network delay of an operation."""
        delay_ms = self.latencies_ms.get(operation, 0) * self.latency_scale
        if delay_ms > 0:
            await asyncio.sleep(delay_ms / 1000)

    async def _read(self, key: str) -> Any:
        return self.serializer.deserialize(key, await self.store.get_item(key))

    async def _write(self, key: str, value: Any) -> None:
        await self.store.set_item(key, self.serializer.serialize(key, value))

    def _fail(self, action: str, message: str, error: Exception, data: Optional[Dict[str, Any]] = None) -> Exception:
        """
        Log a failed operation and return the exception to raise.

        Domain errors are returned unchanged, anything else is wrapped in
        DatabaseServiceError.
        """
        self.logger.error({"action": action, "message": message, "data": data or {}, "exception": error})
        if isinstance(error, WaveChatError):
            return error
        wrapped = DatabaseServiceError(f"{message}: {error}")
        wrapped.__cause__ = error
        return wrapped

    @staticmethod
    def _new_id(prefix: str) -> str:
        return f"{prefix}_{now_ms()}_{uuid.uuid4().hex[:6]}"

    def _sender_name(self, sender_id: str) -> str:
        return self.current_user_name if sender_id == self.current_user_id else self.other_user_name

    @staticmethod
    def _preview_for(message: Dict[str, Any]) -> str:
        if message.get("type") == MESSAGE_TYPE_AUDIO:
            return voice_message_preview(message.get("audioDuration") or 0)
        return message.get("text", "")

    @staticmethod
    def _find_message(
        all_messages: Dict[str, List[Dict[str, Any]]], message_id: str
    ) -> Tuple[Optional[str], int]:
        """Return (conversation_id, index) of a message, or (None, -1)."""
        for conversation_id, messages in all_messages.items():
            for index, message in enumerate(messages):
                if message.get("id") == message_id:
                    return conversation_id, index
        return None, -1

    def _apply_new_message(
        self,
        conversations: List[Dict[str, Any]],
        conversation_id: str,
        message: Dict[str, Any],
    ) -> List[Dict[str, Any]]:
        """Return the conversation list with the preview and unread state updated."""
        sent_by_me = message["senderId"] == self.current_user_id
        found = False
        updated = []
        for conversation in conversations:
            if conversation.get("id") == conversation_id:
                found = True
                conversation = {
                    **conversation,
                    "lastMessage": self._preview_for(message),
                    "lastMessageTimestamp": message["timestamp"],
                    "lastMessageType": message["type"],
                    # Messages sent by the current user are automatically read
                    "read": sent_by_me,
                    "unreadCount": 0 if sent_by_me else conversation.get("unreadCount", 0) + 1,
                }
            updated.append(conversation)

        if not found:
            self.logger.warning({
                "action": "CONVERSATION_NOT_FOUND",
                "message": "Message stored for a conversation missing from the conversation list",
                "data": {"conversation_id": conversation_id, "message_id": message["id"]},
            })
        return updated

    @staticmethod
    def _is_number(value: Any) -> bool:
        return isinstance(value, (int, float)) and not isinstance(value, bool)

    async def _discard_audio(self, path: str) -> None:
        """Remove a copied recording that no stored message refers to."""
        try:
            await self.audio_store.delete(path)
        except AudioStorageError as e:
            self.logger.warning({
                "action": "AUDIO_CLEANUP_FAILED",
                "message": "Could not remove recording of a failed audio message",
                "data": {"path": path},
                "exception": e,
            })

    @staticmethod
    def _require_text(value: Any, field: str) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ValidationError(f"'{field}' must be a non-empty string")
        return value

    # ------------------------------------------------------------------
    # Conversations and messages
    # ------------------------------------------------------------------

    async def get_conversations(self) -> List[ConversationDocument]:
        """
        Fetch all conversations.

        Returns:
            List[Dict[str, Any]]: Conversations in stored order ([] when none)
        """
        self._check_initialized()
        await self._delay("get_conversations")
        try:
            return await self._read(CONVERSATIONS_STORAGE_KEY)
        except Exception as e:
            raise self._fail("GET_CONVERSATIONS_FAILED", "Error fetching conversations", e)

    async def has_conversation(self, conversation_id: str) -> bool:
        """Return whether a conversation is stored, without the simulated delay."""
        self._check_initialized()
        try:
            conversations = await self._read(CONVERSATIONS_STORAGE_KEY)
        except Exception as e:
            raise self._fail(
                "GET_CONVERSATIONS_FAILED", "Error fetching conversations", e, {"conversation_id": conversation_id}
            )
        return any(conversation.get("id") == conversation_id for conversation in conversations)

    async def get_messages(self, conversation_id: str) -> List[MessageDocument]:
        """
        Fetch the messages of a conversation, oldest first.

        Returns:
            List[Dict[str, Any]]: The messages, or [] if the conversation has none
        """
        self._check_initialized()
        await self._delay("get_messages")
        try:
            all_messages = await self._read(MESSAGES_STORAGE_KEY)
            messages = all_messages.get(conversation_id, [])
            self.logger.debug({
                "action": "MESSAGES_FETCHED",
                "message": "Fetched messages for conversation",
                "data": {
                    "conversation_id": conversation_id,
                    "available_conversation_ids": list(all_messages),
                    "message_count": len(messages),
                },
            })
            return messages
        except Exception as e:
            raise self._fail(
                "GET_MESSAGES_FAILED", "Error fetching messages", e, {"conversation_id": conversation_id}
            )

    async def send_text_message(self, message_data: Dict[str, Any]) -> MessageDocument:
        """
        Append a text message to a conversation.

        Args:
            message_data: {'conversationId', 'text', 'senderId', 'timestamp'}.
                          senderId defaults to the current user and timestamp to now.

        Returns:
            Dict[str, Any]: The stored message

        Raises:
            ValidationError: If conversationId or text is missing
            DatabaseServiceError: If the message cannot be stored
        """
        self._check_initialized()
        conversation_id = self._require_text(message_data.get("conversationId"), "conversationId")
        text = self._require_text(message_data.get("text"), "text")
        await self._delay("send_text_message")

        try:
            sender_id = str(message_data.get("senderId") or self.current_user_id)
            all_messages = await self._read(MESSAGES_STORAGE_KEY)
            conversations = await self._read(CONVERSATIONS_STORAGE_KEY)

            new_message = {
                "id": self._new_id("msg"),
                "text": text,
                "timestamp": message_data.get("timestamp") or utc_now_iso(),
                "senderId": sender_id,
                "senderName": self._sender_name(sender_id),
                "type": MESSAGE_TYPE_TEXT,
            }
            all_messages.setdefault(conversation_id, []).append(new_message)
            conversations = self._apply_new_message(conversations, conversation_id, new_message)

            await self._write(MESSAGES_STORAGE_KEY, all_messages)
            await self._write(CONVERSATIONS_STORAGE_KEY, conversations)
        except Exception as e:
            raise self._fail(
                "SEND_MESSAGE_FAILED", "Error sending message", e, {"conversation_id": conversation_id}
            )

        self.logger.info({
            "action": "MESSAGE_SENT",
            "message": "Sent text message",
            "data": {"conversation_id": conversation_id, "message_id": new_message["id"]},
        })
        return new_message

    async def send_audio_message(self, message_data: Dict[str, Any]) -> MessageDocument:
        """
        Store a voice recording and append an audio message to a conversation.

        Args:
            message_data: {'conversationId', 'audioUri', 'audioDuration',
                           'senderId', 'timestamp', 'waveform'}. audioUri is the
                           temporary recording, copied into the audio directory.
                           A waveform is generated when none is given.

        Returns:
            Dict[str, Any]: The stored message

        Raises:
            ValidationError: If conversationId, audioUri or audioDuration is invalid
            AudioStorageError: If the recording cannot be copied
            DatabaseServiceError: If the message cannot be stored
        """
        self._check_initialized()
        conversation_id = self._require_text(message_data.get("conversationId"), "conversationId")
        source_uri = self._require_text(message_data.get("audioUri"), "audioUri")
        duration = message_data.get("audioDuration")
        if not self._is_number(duration) or not math.isfinite(duration) or duration < 0:
            raise ValidationError("'audioDuration' must be a finite, non-negative number")
        waveform = message_data.get("waveform")
        if waveform and (not isinstance(waveform, list) or not all(self._is_number(bar) for bar in waveform)):
            raise ValidationError("'waveform' must be a list of numbers")
        await self._delay("send_audio_message")

        destination = None
        try:
            destination = await self.audio_store.save_from(source_uri, f"voice_{now_ms()}_{uuid.uuid4().hex[:6]}.m4a")

            sender_id = str(message_data.get("senderId") or self.current_user_id)
            all_messages = await self._read(MESSAGES_STORAGE_KEY)
            conversations = await self._read(CONVERSATIONS_STORAGE_KEY)

            if not waveform:
                waveform = self.analyzer.generate_waveform(min(int(duration * 5), self.MAX_WAVEFORM_BARS))

            new_message = {
                "id": self._new_id("msg"),
                "audioUri": destination,
                "audioDuration": duration,
                "timestamp": message_data.get("timestamp") or utc_now_iso(),
                "senderId": sender_id,
                "senderName": self._sender_name(sender_id),
                "type": MESSAGE_TYPE_AUDIO,
                "waveform": list(waveform),
                "tags": [],
            }
            all_messages.setdefault(conversation_id, []).append(new_message)
            conversations = self._apply_new_message(conversations, conversation_id, new_message)

            await self._write(MESSAGES_STORAGE_KEY, all_messages)
            await self._write(CONVERSATIONS_STORAGE_KEY, conversations)
        except Exception as e:
            if destination is not None:
                await self._discard_audio(destination)
            raise self._fail(
                "SEND_AUDIO_MESSAGE_FAILED",
                "Error sending audio message",
                e,
                {"conversation_id": conversation_id, "audio_uri": source_uri},
            )

        self.logger.info({
            "action": "AUDIO_MESSAGE_SENT",
            "message": "Sent audio message",
            "data": {
                "conversation_id": conversation_id,
                "message_id": new_message["id"],
                "audio_uri": destination,
            },
        })
        return new_message

    async def update_message_tags(self, message_id: str, tags: List[str]) -> bool:
        """
        Replace the tags of a message.

        Returns:
            bool: True if the message was found and updated, False otherwise
        """
        self._check_initialized()
        if not isinstance(tags, list) or not all(isinstance(tag, str) for tag in tags):
            raise ValidationError("'tags' must be a list of strings")
        await self._delay("update_message_tags")

        try:
            all_messages = await self._read(MESSAGES_STORAGE_KEY)
            conversation_id, index = self._find_message(all_messages, message_id)
            if conversation_id is None:
                return False

            all_messages[conversation_id][index]["tags"] = list(tags)
            await self._write(MESSAGES_STORAGE_KEY, all_messages)
        except Exception as e:
            raise self._fail("UPDATE_TAGS_FAILED", "Error updating message tags", e, {"message_id": message_id})

        self.logger.info({
            "action": "MESSAGE_TAGS_UPDATED",
            "message": "Updated message tags",
            "data": {"message_id": message_id, "tags": tags},
        })
        return True

    async def mark_messages_as_read(self, conversation_id: str, user_id: Optional[str] = None) -> bool:
        """
        Mark a conversation read and reset its unread count.

        Args:
            conversation_id: The conversation to update
            user_id: The reader (kept for API compatibility; there is one local user)

        Returns:
            bool: Always True
        """
        self._check_initialized()
        await self._delay("mark_messages_as_read")
        try:
            conversations = await self._read(CONVERSATIONS_STORAGE_KEY)
            updated = [
                {**conversation, "read": True, "unreadCount": 0}
                if conversation.get("id") == conversation_id
                else conversation
                for conversation in conversations
            ]
            await self._write(CONVERSATIONS_STORAGE_KEY, updated)
        except Exception as e:
            raise self._fail(
                "MARK_READ_FAILED", "Error marking messages as read", e, {"conversation_id": conversation_id}
            )
        return True

    async def create_new_conversation(self, participant_data: Dict[str, Any]) -> ConversationDocument:
        """
        Create a conversation with a new participant and put it first in the list.

        Args:
            participant_data: {'name', 'avatar'}; a random portrait URL is used
                              when avatar is missing.

        Returns:
            Dict[str, Any]: The new conversation
        """
        self._check_initialized()
        name = self._require_text(participant_data.get("name"), "name").strip()
        await self._delay("create_new_conversation")

        try:
            conversations = await self._read(CONVERSATIONS_STORAGE_KEY)
            conversation_id = self._new_id("conv")
            avatar = participant_data.get("avatar") or (
                f"https://randomuser.me/api/portraits/"
                f"{random.choice(['men', 'women'])}/{random.randrange(100)}.jpg"
            )
            new_conversation = {
                "id": conversation_id,
                "participantName": name,
                "participantAvatar": avatar,
                "lastMessage": "",
                "lastMessageTimestamp": utc_now_iso(),
                "lastMessageType": MESSAGE_TYPE_TEXT,
                "read": True,
                "unreadCount": 0,
            }

            all_messages = await self._read(MESSAGES_STORAGE_KEY)
            all_messages[conversation_id] = []

            await self._write(CONVERSATIONS_STORAGE_KEY, [new_conversation, *conversations])
            await self._write(MESSAGES_STORAGE_KEY, all_messages)
        except Exception as e:
            raise self._fail("CREATE_CONVERSATION_FAILED", "Error creating new conversation", e, {"name": name})

        self.logger.info({
            "action": "CONVERSATION_CREATED",
            "message": "Created new conversation",
            "data": {"conversation_id": conversation_id, "participant_name": name},
        })
        return new_conversation

    async def delete_message(self, message_id: str) -> bool:
        """
        Delete a message with its audio file, reactions and replies.

        If messages remain in the conversation, its preview is recomputed from
        the last one. A failure to delete the audio file is logged and the
        message is deleted anyway.

        Returns:
            bool: True if deleted, False if the message was not found
        """
        self._check_initialized()
        await self._delay("delete_message")

        try:
            all_messages = await self._read(MESSAGES_STORAGE_KEY)
            conversation_id, index = self._find_message(all_messages, message_id)
            if conversation_id is None:
                self.logger.warning({
                    "action": "MESSAGE_NOT_FOUND",
                    "message": "Message not found",
                    "data": {"message_id": message_id},
                })
                return False

            message = all_messages[conversation_id][index]
            if message.get("type") == MESSAGE_TYPE_AUDIO and message.get("audioUri"):
                try:
                    await self.audio_store.delete(message["audioUri"])
                except AudioStorageError as file_error:
                    self.logger.error({
                        "action": "AUDIO_DELETE_FAILED",
                        "message": "Error deleting audio file",
                        "data": {"message_id": message_id, "audio_uri": message["audioUri"]},
                        "exception": file_error,
                    })

            del all_messages[conversation_id][index]

            all_reactions = await self._read(REACTIONS_STORAGE_KEY)
            all_reactions.pop(message_id, None)
            all_replies = await self._read(REPLIES_STORAGE_KEY)
            all_replies.pop(message_id, None)

            remaining = all_messages[conversation_id]
            if remaining:
                last_message = remaining[-1]
                conversations = await self._read(CONVERSATIONS_STORAGE_KEY)
                conversations = [
                    {
                        **conversation,
                        "lastMessage": self._preview_for(last_message),
                        "lastMessageTimestamp": last_message.get("timestamp"),
                        "lastMessageType": last_message.get("type", MESSAGE_TYPE_TEXT),
                    }
                    if conversation.get("id") == conversation_id
                    else conversation
                    for conversation in conversations
                ]
                await self._write(CONVERSATIONS_STORAGE_KEY, conversations)

            await self._write(MESSAGES_STORAGE_KEY, all_messages)
            await self._write(REACTIONS_STORAGE_KEY, all_reactions)
            await self._write(REPLIES_STORAGE_KEY, all_replies)
        except Exception as e:
            raise self._fail("DELETE_MESSAGE_FAILED", "Error deleting message", e, {"message_id": message_id})

        self.logger.info({
            "action": "MESSAGE_DELETED",
            "message": "Deleted message",
            "data": {"conversation_id": conversation_id, "message_id": message_id},
        })
        return True

    # ------------------------------------------------------------------
    # Reactions and replies
    # ------------------------------------------------------------------

    async def _add_annotation(self, key: str, message_id: str, annotation: Dict[str, Any], id_prefix: str) -> None:
        annotation = dict(annotation)
        annotation.setdefault("id", self._new_id(id_prefix))
        if not annotation.get("createdAt"):
            annotation["createdAt"] = utc_now_iso()

        if key == REACTIONS_STORAGE_KEY:
            self.serializer.validate_reaction(annotation)
        else:
            self.serializer.validate_reply(annotation)

        all_annotations = await self._read(key)
        all_annotations.setdefault(message_id, []).append(annotation)
        await self._write(key, all_annotations)

    async def add_reaction_to_message(self, message_id: str, reaction: Dict[str, Any]) -> bool:
        """
        Add a reaction at a position in a voice message.

        Args:
            message_id: The message reacted to
            reaction: {'emoji', 'timestamp' (seconds into the audio), 'username',
                       'userId', 'id', 'createdAt'}; id and createdAt are filled
                       in when missing.

        Returns:
            bool: Always True

        Raises:
            ValidationError: If the reaction is malformed
        """
        self._check_initialized()
        self._require_text(message_id, "messageId")
        await self._delay("add_reaction")
        try:
            await self._add_annotation(REACTIONS_STORAGE_KEY, message_id, reaction, "react")
        except Exception as e:
            raise self._fail("ADD_REACTION_FAILED", "Error adding reaction", e, {"message_id": message_id})
        return True

    async def get_message_reactions(self, message_id: str) -> List[ReactionDocument]:
        self._check_initialized()
        await self._delay("get_reactions")
        try:
            return (await self._read(REACTIONS_STORAGE_KEY)).get(message_id, [])
        except Exception as e:
            raise self._fail("GET_REACTIONS_FAILED", "Error getting message reactions", e, {"message_id": message_id})

    async def add_reply_to_message(self, message_id: str, reply: Dict[str, Any]) -> bool:
        """
        Add a text reply anchored at a position in a voice message.

        Args:
            message_id: The message replied to
            reply: {'text', 'timestamp' (seconds into the audio), 'username',
                    'userId', 'id', 'createdAt'}; id and createdAt are filled
                    in when missing.

        Returns:
            bool: Always True

        Raises:
            ValidationError: If the reply is malformed
        """
        self._check_initialized()
        self._require_text(message_id, "messageId")
        await self._delay("add_reply")
        try:
            await self._add_annotation(REPLIES_STORAGE_KEY, message_id, reply, "reply")
        except Exception as e:
            raise self._fail("ADD_REPLY_FAILED", "Error adding reply", e, {"message_id": message_id})
        return True

    async def get_message_replies(self, message_id: str) -> List[ReplyDocument]:
        self._check_initialized()
        await self._delay("get_replies")
        try:
            return (await self._read(REPLIES_STORAGE_KEY)).get(message_id, [])
        except Exception as e:
            raise self._fail("GET_REPLIES_FAILED", "Error getting message replies", e, {"message_id": message_id})

    # ------------------------------------------------------------------
    # Audio analysis
    # ------------------------------------------------------------------

    async def generate_waveform(self, audio_uri: str) -> List[float]:
        """Waveform for an audio file; a default 50-bar waveform if analysis fails."""
        await self._delay("generate_waveform")
        try:
            return await self.analyzer.analyze_waveform(audio_uri)
        except AnalysisError as e:
            self.logger.error({
                "action": "WAVEFORM_FAILED",
                "message": "Error generating waveform",
                "data": {"audio_uri": audio_uri},
                "exception": e,
            })
            return self.analyzer.generate_waveform(self.FALLBACK_WAVEFORM_BARS)

    async def detect_speech_segments(self, audio_uri: str) -> List[SpeechSegment]:
        """Labelled segments for automatic tagging; [] if detection fails."""
        await self._delay("detect_speech_segments")
        try:
            return await self.analyzer.detect_speech_segments(audio_uri)
        except AnalysisError as e:
            self.logger.error({
                "action": "SPEECH_SEGMENTS_FAILED",
                "message": "Error detecting speech segments",
                "data": {"audio_uri": audio_uri},
                "exception": e,
            })
            return []

    async def transcribe_audio(self, audio_uri: str) -> TranscriptDocument:
        """Transcript of an audio file; an empty transcript if transcription fails."""
        await self._delay("transcribe_audio")
        try:
            return await self.analyzer.transcribe(audio_uri)
        except AnalysisError as e:
            self.logger.error({
                "action": "TRANSCRIPTION_FAILED",
                "message": "Error transcribing audio",
                "data": {"audio_uri": audio_uri},
                "exception": e,
            })
            return {"text": "", "segments": []}

    async def get_message_transcript(self, message_id: str) -> TranscriptDocument:
        self._check_initialized()
        await self._delay("get_message_transcript")
        try:
            return await self.analyzer.transcript_for_message(message_id)
        except Exception as e:
            raise self._fail(
                "GET_TRANSCRIPT_FAILED", "Error getting message transcript", e, {"message_id": message_id}
            )

    # ------------------------------------------------------------------
    # Maintenance
    # ------------------------------------------------------------------

    async def fix_message_types(self) -> bool:
        """
        Give a type to every message missing one: 'audio' if it has an
        audioUri, 'text' otherwise.

        Returns:
            bool: True if any message was repaired and written back
        """
        self._check_initialized()
        raw = await self.store.get_item(MESSAGES_STORAGE_KEY)
        if raw is None:
            return False

        all_messages = self.serializer.deserialize(MESSAGES_STORAGE_KEY, raw)
        repaired = 0
        for conversation_id, messages in all_messages.items():
            for index, message in enumerate(messages):
                if not message.get("type"):
                    inferred = MESSAGE_TYPE_AUDIO if message.get("audioUri") else MESSAGE_TYPE_TEXT
                    messages[index] = {**message, "type": inferred}
                    repaired += 1

        if not repaired:
            self.logger.debug({"action": "MESSAGE_TYPES_OK", "message": "No message type fixes needed"})
            return False

        await self._write(MESSAGES_STORAGE_KEY, all_messages)
        self.logger.info({
            "action": "MESSAGE_TYPES_FIXED",
            "message": "Message types fixed",
            "data": {"repaired": repaired},
        })
        return True

    async def add_more_mock_reactions(self) -> bool:
        """
        Merge the additional sample reactions, skipping ids already present.

        Returns:
            bool: True on success, False if the merge failed
        """
        try:
            all_reactions = await self._read(REACTIONS_STORAGE_KEY)
            for message_id, reactions in mock_data.additional_reactions().items():
                existing = all_reactions.setdefault(message_id, [])
                known_ids = {reaction.get("id") for reaction in existing}
                existing.extend(reaction for reaction in reactions if reaction["id"] not in known_ids)

            await self._write(REACTIONS_STORAGE_KEY, all_reactions)
        except WaveChatError as e:
            self.logger.error({
                "action": "MOCK_REACTIONS_FAILED",
                "message": "Error adding mock reactions",
                "exception": e,
            })
            return False

        self.logger.debug({"action": "MOCK_REACTIONS_ADDED", "message": "Added additional mock reactions"})
        return True

    async def clear_all_data(self) -> None:
        """Remove every collection and audio file, then re-initialize (and re-seed)."""
        self._check_initialized()
        try:
            for key in ALL_STORAGE_KEYS:
                await self.store.remove_item(key)
            await self.audio_store.clear()
        except Exception as e:
            raise self._fail("CLEAR_DATA_FAILED", "Error clearing data", e)

        await self.initialize()
        self.logger.info({"action": "DATA_CLEARED", "message": "All data cleared and reinitialized"})

    async def connect_to_database(self) -> bool:
        """Placeholder for connecting to a remote database; the local store needs no connection."""
        self.logger.info({
            "action": "DATABASE_CONNECT",
            "message": "Using the local store; a remote database connection would be opened here",
        })
        return True

    async def healthcheck(self) -> Dict[str, Any]:
        """
        Returns:
            Dict[str, Any]: {'healthy', 'message', 'components': {'store', 'audio_store'}}
        """
        components = {
            "store": await self.store.healthcheck(),
            "audio_store": await self.audio_store.healthcheck(),
        }
        healthy = self.initialized and all(c["healthy"] for c in components.values())
        if not self.initialized:
            message = "Database service not initialized"
        elif healthy:
            message = "Database service is healthy"
        else:
            message = "One or more storage components are unhealthy"
        return {"healthy": healthy, "message": message, "components": components}

    # Aliases kept for older callers
    fetch_conversations = get_conversations
    fetch_messages = get_messages
    send_message = send_text_message
    send_audio_message_to_backend = send_audio_message
