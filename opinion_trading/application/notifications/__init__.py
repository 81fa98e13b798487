"""Notifications application layer: domain events → real-time messages."""

from .subscribers import NotificationSubscribers, register_notification_handlers

__all__ = ["NotificationSubscribers", "register_notification_handlers"]
