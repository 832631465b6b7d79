"""Application model — one job seeker's application to one job."""

from sqlalchemy import Column, String, DateTime, Text, Integer, UniqueConstraint

from app.models.base import Base, IntegerIdMixin


class Application(IntegerIdMixin, Base):
    __tablename__ = "applications"

    # No FK on job_id: applications outlive deleted jobs and surface with a null job join
    job_id = Column(Integer, nullable=False, index=True)
    job_seeker_id = Column("jobseeker_id", Integer, nullable=False, index=True)
    status = Column(String(20), default="pending", nullable=False)
    cover_letter = Column(Text)
    applied_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    __table_args__ = (
        UniqueConstraint("job_id", "jobseeker_id", name="uq_applications_job_seeker"),
    )
