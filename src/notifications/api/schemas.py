"""Pydantic response models for the Notifications API."""

from datetime import datetime

from pydantic import BaseModel


class StatusResponse(BaseModel):
    message: str


class NotificationResponse(BaseModel):
    notification_id: str
    recipient_id: str
    recipient_email: str
    notification_type: str
    channel: str
    subject: str | None = None
    status: str
    source_event_type: str | None = None
    failure_reason: str | None = None
    sent_at: datetime | None = None
    created_at: datetime | None = None
