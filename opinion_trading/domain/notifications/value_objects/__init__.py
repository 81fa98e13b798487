"""Value objects для Notifications bounded context."""

from .delivery_result import DeliveryResult
from .rooms import event_room, is_user_room, room_owner_id, user_room

__all__ = ["DeliveryResult", "user_room", "event_room", "is_user_room", "room_owner_id"]
