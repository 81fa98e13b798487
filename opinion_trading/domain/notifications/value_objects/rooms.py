"""Room keys для notification channel."""

from typing import Optional

USER_ROOM_PREFIX = "user-"
EVENT_ROOM_PREFIX = "event-"


def user_room(user_id: int) -> str:
    """Room власника trades: "user-<id>"."""
    return f"{USER_ROOM_PREFIX}{user_id}"


def event_room(event_id: int) -> str:
    """Room subscribers event: "event-<id>"."""
    return f"{EVENT_ROOM_PREFIX}{event_id}"


def is_user_room(room: str) -> bool:
    return room.startswith(USER_ROOM_PREFIX)


def room_owner_id(room: str) -> Optional[int]:
    """User ID з "user-<id>"; None для event rooms і некоректних ключів."""
    if not is_user_room(room):
        return None
    suffix = room[len(USER_ROOM_PREFIX):]
    return int(suffix) if suffix.isdigit() else None
