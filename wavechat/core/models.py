"""
Document shapes stored by WaveChat.

Field names are camelCase because the documents are shared verbatim with
the mobile client.
"""

from typing import List, Optional, TypedDict


MESSAGE_TYPE_TEXT = "text"
MESSAGE_TYPE_AUDIO = "audio"
MESSAGE_TYPES = (MESSAGE_TYPE_TEXT, MESSAGE_TYPE_AUDIO)


class ConversationDocument(TypedDict, total=False):
    id: str
    participantName: str
    participantAvatar: str
    lastMessage: str
    lastMessageTimestamp: str
    lastMessageType: str
    read: bool
    unreadCount: int


class MessageDocument(TypedDict, total=False):
    id: str
    type: str
    senderId: str
    senderName: str
    timestamp: str
    # text messages
    text: str
    # audio messages
    audioUri: str
    audioDuration: float
    waveform: List[float]
    tags: List[str]


class ReactionDocument(TypedDict, total=False):
    id: str
    emoji: str
    timestamp: float
    username: str
    userId: Optional[str]
    createdAt: str


class ReplyDocument(TypedDict, total=False):
    id: str
    text: str
    timestamp: float
    username: str
    userId: Optional[str]
    createdAt: str


class TranscriptSegment(TypedDict):
    text: str
    start: float
    end: float


class TranscriptDocument(TypedDict):
    text: str
    segments: List[TranscriptSegment]


class SpeechSegment(TypedDict):
    label: str
    timestamp: float
