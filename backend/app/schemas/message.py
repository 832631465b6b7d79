"""Pydantic schemas for Messages and conversations."""

from datetime import datetime

from pydantic import Field

from app.schemas.base import CamelModel


class MessageCreate(CamelModel):
    """Fields for sending a message; the sender is always the caller."""

    to_user_id: int
    content: str = Field(max_length=10_000)
    related_to_application_id: int | None = None


class MessageRead(CamelModel):
    id: int
    from_user_id: int
    to_user_id: int
    related_to_application_id: int | None = None
    content: str
    is_read: bool
    sent_at: datetime


class LatestMessage(CamelModel):
    id: int
    content: str
    sent_at: datetime
    is_read: bool
    is_sender: bool


class ConversationSummary(CamelModel):
    """One entry per conversation partner."""

    partner_id: int
    partner_name: str
    partner_avatar: str | None = None
    latest_message: LatestMessage | None = None
    unread_count: int = 0
