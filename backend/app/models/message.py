"""Direct message between two users."""

from sqlalchemy import Column, Boolean, DateTime, Text, ForeignKey, Index, Integer

from app.models.base import Base, IntegerIdMixin


class Message(IntegerIdMixin, Base):
    __tablename__ = "messages"

    from_user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    to_user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    related_to_application_id = Column(Integer)
    content = Column(Text, nullable=False)
    is_read = Column(Boolean, default=False, nullable=False)
    sent_at = Column(DateTime(timezone=True), nullable=False)

    __table_args__ = (
        Index("idx_messages_from_to", "from_user_id", "to_user_id"),
        Index("idx_messages_to_read", "to_user_id", "is_read"),
    )
