"""Company profile — role extension of an employer user."""

from sqlalchemy import Column, String, Text, ForeignKey, Integer
from sqlalchemy.orm import relationship

from app.models.base import Base, IntegerIdMixin


class CompanyProfile(IntegerIdMixin, Base):
    __tablename__ = "company_profiles"

    user_id = Column(Integer, ForeignKey("users.id"), unique=True, nullable=False, index=True)

    name = Column(String(255), nullable=False)
    description = Column(Text)
    industry = Column(String(100))
    location = Column(String(255))
    website = Column(String(500))
    logo_url = Column(String(500))
    size = Column(String(20))  # 1-10, 11-50, 51-200, ...

    jobs = relationship("Job", back_populates="company")
