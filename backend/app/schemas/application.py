"""Pydantic schemas for job Applications."""

from datetime import datetime
from typing import Literal

from app.schemas.base import CamelModel
from app.schemas.job import JobSummary
from app.schemas.profile import CompanySummary, JobSeekerSummary

ApplicationStatus = Literal["pending", "reviewing", "interviewed", "offered", "rejected", "accepted"]

APPLICATION_STATUSES = ("pending", "reviewing", "interviewed", "offered", "rejected", "accepted")


class ApplicationCreate(CamelModel):
    """Fields for applying; the job seeker comes from the caller's profile."""

    job_id: int
    cover_letter: str | None = None


class StatusUpdate(CamelModel):
    # Kept as a plain string so an unknown status reaches the service as InvalidArgument
    status: str | None = None


class ApplicationRead(CamelModel):
    id: int
    job_id: int
    job_seeker_id: int
    status: ApplicationStatus
    cover_letter: str | None = None
    applied_at: datetime
    updated_at: datetime


class AppliedJobSummary(JobSummary):
    company: CompanySummary | None = None


class JobSeekerApplication(ApplicationRead):
    """Application as seen by the applicant."""

    job: AppliedJobSummary | None = None


class EmployerApplication(ApplicationRead):
    """Application as seen by the employer who owns the job."""

    job: JobSummary | None = None
    job_seeker: JobSeekerSummary | None = None
