"""Notification request bodies and platform/provider enums."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class MessagePlatform(StrEnum):
    """Delivery platform. The value is the wire string sent to the backend."""

    SMS = "sms"
    EMAIL = "email"
    WHATSAPP = "whatsapp"
    WEB_PUSH = "web-push"
    MOBILE_PUSH = "mobile-push"
    SLACK = "slack"


class MessageProvider(StrEnum):
    """Upstream provider behind a notification config."""

    FIREBASE = "firebase"
    TERMII = "termii"
    SENDGRID = "sendgrid"
    TWILIO = "twilio"
    MAGIC_BELL = "magic-bell"
    POSTMARK = "postmark"
    MAIL_CHIMP = "mail-chimp"
    VAPID = "vapid"


class RequestBody(BaseModel):
    """Base for JSON request bodies."""

    model_config = ConfigDict(populate_by_name=True)

    def to_json(self) -> dict[str, Any]:
        """Serialize with wire field names; unset optionals become ``null``."""
        return self.model_dump(mode="json", by_alias=True)


class CamelRequestBody(RequestBody):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)


class ReqBodyMessage(CamelRequestBody):
    """A single-recipient message sent through ``/send-message``."""

    company_id: UUID
    from_: str = Field(alias="from")
    to: str
    subject: str | None = None
    message: str | None = None
    template_id: UUID | None = None
    platform: MessagePlatform = MessagePlatform.EMAIL
    dynamic_data: Any = None
    should_schedule: bool | None = None
    schedule_for: datetime | None = None


class ReqBodyBroadcastMessage(RequestBody):
    """Multi-recipient message body. No operation sends it yet."""

    company_id: UUID
    from_: str = Field(alias="from")
    to: list[str]
    subject: str | None = None
    message: str | None = None
    template_id: UUID | None = None
    channel: str
    dynamic_data: dict[str, str] | None = None
    should_schedule: bool | None = None
    schedule_for: datetime | None = None


class ReqBodyTemplate(RequestBody):
    """A message template stored under the tenant."""

    company_id: UUID
    template_title: str | None = None
    description: str | None = None
    template: str


class ReqBodyContact(CamelRequestBody):
    company_id: UUID
    user_id: UUID
    role: str
    email: str
    sms_number: str | None = None
    whatsapp_number: str | None = None
    allow_push_notifications: bool | None = None
    mobile_device_token: list[str] | None = None
