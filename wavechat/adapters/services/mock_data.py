"""
Sample data used to seed an empty store.

Timestamps are computed relative to `now` so the seeded conversations always
look recent.
"""

from datetime import datetime, timedelta
from typing import Any, Callable, Dict, List, Optional

from wavechat.utils.datetime_utils import to_isoformat, utc_now


WaveformFactory = Callable[[int], List[float]]

CURRENT_USER_ID = "123"
CURRENT_USER_NAME = "You"


def _ago(now: datetime, minutes: float = 0, hours: float = 0, days: float = 0) -> str:
    return to_isoformat(now - timedelta(minutes=minutes, hours=hours, days=days))


def _text(message_id, text, timestamp, sender_id, sender_name) -> Dict[str, Any]:
    return {
        "id": message_id,
        "text": text,
        "timestamp": timestamp,
        "senderId": sender_id,
        "senderName": sender_name,
        "type": "text",
    }


def _audio(message_id, duration, timestamp, sender_id, sender_name, bars, tags, waveform) -> Dict[str, Any]:
    # audioUri is filled in when the store is seeded
    return {
        "id": message_id,
        "audioDuration": duration,
        "timestamp": timestamp,
        "senderId": sender_id,
        "senderName": sender_name,
        "type": "audio",
        "waveform": waveform(bars),
        "tags": list(tags),
    }


def seed_messages(waveform: WaveformFactory, now: Optional[datetime] = None) -> Dict[str, List[Dict[str, Any]]]:
    """
    Build the seeded messages, keyed by conversation id.

    Args:
        waveform: Callable returning a waveform of the requested length
        now: Reference time, defaults to the current UTC time
    """
    now = now or utc_now()
    me, you = CURRENT_USER_ID, CURRENT_USER_NAME

    return {
        "1": [
            _text("101", "Hi Sarah, how are you doing?", _ago(now, minutes=90), me, you),
            _text("102", "I'm doing well, thanks for asking! Just finishing up some work on the project.",
                  _ago(now, minutes=85), "456", "Sarah Johnson"),
            _audio("103", 8, _ago(now, minutes=80), me, you, 60, ["Question", "Task"], waveform),
            _text("104", "Almost done with the dashboard component. Should be able to submit it by tomorrow.",
                  _ago(now, minutes=75), "456", "Sarah Johnson"),
            _text("105", "Sounds good. Let me know if you need any help with it.", _ago(now, minutes=40), me, you),
            _audio("106", 12, _ago(now, minutes=35), "456", "Sarah Johnson", 80, ["Update"], waveform),
        ],
        "2": [
            _text("201", "Hey Michael, are you ready for the presentation tomorrow?", _ago(now, hours=30), me, you),
            _audio("202", 22, _ago(now, hours=29), "789", "Michael Chen", 120, ["Feedback", "Question"], waveform),
            _text("203", "Perfect! I think we're well prepared then.", _ago(now, hours=28), me, you),
            _text("204", "Just finished the presentation. I think it went well!", _ago(now, hours=4), me, you),
            _text("205", "Great work on the presentation yesterday!", _ago(now, hours=2), "789", "Michael Chen"),
        ],
        "3": [
            _text("301", "Hi Jessica, I'm working on the frontend integration with the API.",
                  _ago(now, days=3), me, you),
            _text("302", "Nice! Are you using the new endpoint we deployed yesterday?",
                  _ago(now, days=3, minutes=-30), "321", "Jessica Williams"),
            _audio("303", 18, _ago(now, days=3, minutes=-35), me, you, 110, ["Issue", "Question"], waveform),
            _text("304", "What kind of issues are you encountering?",
                  _ago(now, days=3, minutes=-40), "321", "Jessica Williams"),
            _audio("305", 15, _ago(now, days=1), "321", "Jessica Williams", 90, ["Solution"], waveform),
        ],
        "4": [
            _text("401", "Hey David, I just reviewed your code changes.", _ago(now, days=5), me, you),
            _audio("402", 5, _ago(now, days=5, minutes=-15), "654", "David Rodriguez", 40, ["Response"], waveform),
            _text("403", "Looks good overall! I left a few comments for minor improvements.",
                  _ago(now, days=5, minutes=-30), me, you),
            _text("404", "Thanks! I'll address those comments tomorrow.",
                  _ago(now, days=5, minutes=-45), "654", "David Rodriguez"),
            _audio("405", 10, _ago(now, days=4, hours=-5), me, you, 70, ["Feedback"], waveform),
            _text("406", "Are we still meeting at 3pm today?", _ago(now, days=4), "654", "David Rodriguez"),
        ],
    }


def seed_conversations(now: Optional[datetime] = None) -> List[Dict[str, Any]]:
    now = now or utc_now()

    def conversation(conv_id, name, avatar, preview, timestamp, message_type, read=True, unread=0):
        return {
            "id": conv_id,
            "participantName": name,
            "participantAvatar": f"https://randomuser.me/api/portraits/{avatar}.jpg",
            "lastMessage": preview,
            "lastMessageTimestamp": timestamp,
            "read": read,
            "unreadCount": unread,
            "lastMessageType": message_type,
        }

    return [
        conversation("1", "Sarah Johnson", "women/44", "🎤 Voice message (0:12)",
                     _ago(now, minutes=35), "audio", read=False, unread=2),
        conversation("2", "Michael Chen", "men/32", "Great work on the presentation yesterday!",
                     _ago(now, hours=2), "text"),
        conversation("3", "Jessica Williams", "women/63", "🎤 Voice message (0:15)",
                     _ago(now, days=1), "audio"),
        conversation("4", "David Rodriguez", "men/74", "Are we still meeting at 3pm today?",
                     _ago(now, days=4), "text"),
        conversation("5", "Emma Thompson", "women/22", "I just pushed the code changes to the repository",
                     _ago(now, days=7), "text"),
    ]


def _annotation(kind, annotation_id, value, timestamp, username, user_id, created_at) -> Dict[str, Any]:
    return {
        "id": annotation_id,
        kind: value,
        "timestamp": timestamp,
        "username": username,
        "userId": user_id,
        "createdAt": created_at,
    }


def seed_reactions(now: Optional[datetime] = None) -> Dict[str, List[Dict[str, Any]]]:
    now = now or utc_now()
    return {
        "103": [
            _annotation("emoji", "react_1", "👍", 2.5, "Sarah Johnson", "456", _ago(now, minutes=70)),
            _annotation("emoji", "react_2", "🔥", 5.8, "You", "123", _ago(now, minutes=65)),
        ],
        "202": [
            _annotation("emoji", "react_3", "👏", 10.2, "You", "123", _ago(now, hours=28)),
        ],
        "305": [
            _annotation("emoji", "react_4", "⭐", 7.5, "You", "123", _ago(now, hours=20)),
        ],
    }


def seed_replies(now: Optional[datetime] = None) -> Dict[str, List[Dict[str, Any]]]:
    now = now or utc_now()
    return {
        "103": [
            _annotation("text", "reply_1", "I'll check that part of the code", 3.2,
                        "Sarah Johnson", "456", _ago(now, minutes=78)),
        ],
        "202": [
            _annotation("text", "reply_2", "Good point about the slides", 12.5, "You", "123", _ago(now, hours=28.5)),
            _annotation("text", "reply_3", "Let's add more visuals to that section", 18.2,
                        "You", "123", _ago(now, hours=28)),
        ],
        "305": [
            _annotation("text", "reply_4", "Great solution, I'll implement it today", 10.8,
                        "You", "123", _ago(now, hours=22)),
        ],
    }


def additional_reactions(now: Optional[datetime] = None) -> Dict[str, List[Dict[str, Any]]]:
    """Reactions merged into the store on every start-up, deduplicated by id."""
    now = now or utc_now()
    return {
        "103": [
            _annotation("emoji", "react_101", "❓", 3.5, "Sarah Johnson", "456", _ago(now, minutes=75)),
            _annotation("emoji", "react_102", "📝", 7.0, "You", "123", _ago(now, minutes=72)),
        ],
        "106": [
            _annotation("emoji", "react_103", "👍", 2.5, "You", "123", _ago(now, minutes=34)),
            _annotation("emoji", "react_104", "🎉", 8.2, "You", "123", _ago(now, minutes=33)),
        ],
        "202": [
            _annotation("emoji", "react_105", "👆", 12.5, "You", "123", _ago(now, hours=28.5)),
            _annotation("emoji", "react_106", "🤔", 15.8, "You", "123", _ago(now, hours=28.2)),
        ],
        "303": [
            _annotation("emoji", "react_107", "⚠️", 4.2, "Jessica Williams", "321",
                        _ago(now, days=3, minutes=-38)),
            _annotation("emoji", "react_108", "❓", 13.5, "Jessica Williams", "321",
                        _ago(now, days=3, minutes=-37)),
        ],
        "305": [
            _annotation("emoji", "react_109", "🔍", 2.3, "You", "123", _ago(now, days=0.9)),
            _annotation("emoji", "react_110", "💡", 7.0, "You", "123", _ago(now, days=0.8)),
            _annotation("emoji", "react_111", "👏", 13.2, "You", "123", _ago(now, days=0.75)),
        ],
    }
