"""User model for authentication."""

from sqlalchemy import Column, String, DateTime

from app.models.base import Base, IntegerIdMixin


class User(IntegerIdMixin, Base):
    __tablename__ = "users"

    username = Column(String(100), unique=True, nullable=False, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    user_type = Column(String(20), nullable=False)  # jobSeeker, employer
    created_at = Column(DateTime(timezone=True), nullable=False)
