"""Job model — postings owned by a company profile."""

from sqlalchemy import Column, String, Boolean, DateTime, Text, ForeignKey, Index, Integer, JSON
from sqlalchemy.orm import relationship

from app.models.base import Base, IntegerIdMixin


class Job(IntegerIdMixin, Base):
    __tablename__ = "jobs"

    company_id = Column(Integer, ForeignKey("company_profiles.id"), nullable=False, index=True)

    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    location = Column(String(255), nullable=False)
    type = Column(String(50), nullable=False)  # Full-time, Part-time, Contract, ...
    salary = Column(String(255))
    requirements = Column(Text)
    benefits = Column(Text)
    skills = Column(JSON, default=list)

    # Lifecycle
    created_at = Column(DateTime(timezone=True), nullable=False)
    expires_at = Column(DateTime(timezone=True))
    is_active = Column(Boolean, default=True, nullable=False)

    company = relationship("CompanyProfile", back_populates="jobs")

    __table_args__ = (
        Index("idx_job_company_type", "company_id", "type"),
    )
