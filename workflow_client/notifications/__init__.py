"""Notification API: messages, templates and contacts."""

from workflow_client.notifications.client import Notifications
from workflow_client.notifications.models import (
    MessagePlatform,
    MessageProvider,
    ReqBodyBroadcastMessage,
    ReqBodyContact,
    ReqBodyMessage,
    ReqBodyTemplate,
)

__all__ = [
    "MessagePlatform",
    "MessageProvider",
    "Notifications",
    "ReqBodyBroadcastMessage",
    "ReqBodyContact",
    "ReqBodyMessage",
    "ReqBodyTemplate",
]
