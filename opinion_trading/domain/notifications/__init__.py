"""Notifications Bounded Context - Domain Layer.

Exports:
    Ports: Notifier
    Value Objects: DeliveryResult, user_room, event_room, is_user_room, room_owner_id
"""

from .ports import Notifier
from .value_objects import DeliveryResult, event_room, is_user_room, room_owner_id, user_room

__all__ = [
    "Notifier",
    "DeliveryResult",
    "user_room",
    "event_room",
    "is_user_room",
    "room_owner_id",
]
