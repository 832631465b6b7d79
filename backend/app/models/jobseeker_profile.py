"""Job seeker profile — role extension of a jobSeeker user."""

from sqlalchemy import Column, String, Text, ForeignKey, JSON, Integer

from app.models.base import Base, IntegerIdMixin


class JobSeekerProfile(IntegerIdMixin, Base):
    __tablename__ = "jobseeker_profiles"

    user_id = Column(Integer, ForeignKey("users.id"), unique=True, nullable=False, index=True)

    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    title = Column(String(255))
    bio = Column(Text)
    location = Column(String(255))
    skills = Column(JSON, default=list)
    experience = Column(JSON)  # list of free-form entries
    education = Column(JSON)
    resume_url = Column(String(500))
    avatar_url = Column(String(500))
