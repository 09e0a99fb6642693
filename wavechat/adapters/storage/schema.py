"""
Schema definitions for the JSON collections kept in the key-value store.
"""

from wavechat.core.models import MESSAGE_TYPES

# Storage keys
CONVERSATIONS_STORAGE_KEY = "local_conversations"
MESSAGES_STORAGE_KEY = "local_messages"
REACTIONS_STORAGE_KEY = "local_message_reactions"
REPLIES_STORAGE_KEY = "local_message_replies"

ALL_STORAGE_KEYS = (
    CONVERSATIONS_STORAGE_KEY,
    MESSAGES_STORAGE_KEY,
    REACTIONS_STORAGE_KEY,
    REPLIES_STORAGE_KEY,
)

_ID = {"type": "string", "minLength": 1}
_NULLABLE_STRING = {"type": ["string", "null"]}

CONVERSATION_SCHEMA = {
    "type": "object",
    "required": ["id"],
    "properties": {
        "id": _ID,
        "participantName": {"type": "string"},
        "participantAvatar": _NULLABLE_STRING,
        "lastMessage": {"type": "string"},
        "lastMessageTimestamp": _NULLABLE_STRING,
        "lastMessageType": {"enum": list(MESSAGE_TYPES)},
        "read": {"type": "boolean"},
        "unreadCount": {"type": "integer", "minimum": 0},
    },
}

# 'type' may be missing, null or empty in older records; those are repaired on start-up
MESSAGE_SCHEMA = {
    "type": "object",
    "required": ["id"],
    "properties": {
        "id": _ID,
        "type": {"enum": list(MESSAGE_TYPES) + [None, ""]},
        "senderId": {"type": "string"},
        "senderName": {"type": "string"},
        "timestamp": {"type": "string"},
        "text": {"type": "string"},
        "audioUri": {"type": "string"},
        "audioDuration": {"type": "number", "minimum": 0},
        "waveform": {"type": "array", "items": {"type": "number"}},
        "tags": {"type": "array", "items": {"type": "string"}},
    },
}

REACTION_SCHEMA = {
    "type": "object",
    "required": ["emoji", "timestamp"],
    "properties": {
        "id": _ID,
        "emoji": {"type": "string", "minLength": 1},
        "timestamp": {"type": "number", "minimum": 0},
        "username": {"type": "string"},
        "userId": _NULLABLE_STRING,
        "createdAt": {"type": "string"},
    },
}

REPLY_SCHEMA = {
    "type": "object",
    "required": ["text", "timestamp"],
    "properties": {
        "id": _ID,
        "text": {"type": "string", "minLength": 1},
        "timestamp": {"type": "number", "minimum": 0},
        "username": {"type": "string"},
        "userId": _NULLABLE_STRING,
        "createdAt": {"type": "string"},
    },
}

CONVERSATIONS_SCHEMA = {"type": "array", "items": CONVERSATION_SCHEMA}

MESSAGES_SCHEMA = {
    "type": "object",
    "additionalProperties": {"type": "array", "items": MESSAGE_SCHEMA},
}

REACTIONS_SCHEMA = {
    "type": "object",
    "additionalProperties": {"type": "array", "items": REACTION_SCHEMA},
}

REPLIES_SCHEMA = {
    "type": "object",
    "additionalProperties": {"type": "array", "items": REPLY_SCHEMA},
}

COLLECTION_SCHEMAS = {
    CONVERSATIONS_STORAGE_KEY: CONVERSATIONS_SCHEMA,
    MESSAGES_STORAGE_KEY: MESSAGES_SCHEMA,
    REACTIONS_STORAGE_KEY: REACTIONS_SCHEMA,
    REPLIES_STORAGE_KEY: REPLIES_SCHEMA,
}
