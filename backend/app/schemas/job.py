"""Pydantic schemas for Job postings."""

from datetime import datetime

from app.schemas.base import CamelModel, PatchBool, PatchSkillSet, PatchStr, SkillSet
from app.schemas.profile import CompanyDetail, CompanySummary


class JobBase(CamelModel):
    """Base fields for a job posting."""

    title: str
    description: str
    location: str
    type: str  # Full-time, Part-time, Contract, ...
    salary: str | None = None
    requirements: str | None = None
    benefits: str | None = None
    skills: SkillSet = []
    expires_at: datetime | None = None


class JobCreate(JobBase):
    """Fields for posting a job; the company comes from the caller's profile."""


class JobUpdate(CamelModel):
    title: PatchStr = None
    description: PatchStr = None
    location: PatchStr = None
    type: PatchStr = None
    salary: str | None = None
    requirements: str | None = None
    benefits: str | None = None
    skills: PatchSkillSet = None
    expires_at: datetime | None = None
    is_active: PatchBool = None


class JobRead(JobBase):
    """Full job output."""

    id: int
    company_id: int
    created_at: datetime
    is_active: bool


class JobSummary(CamelModel):
    """Minimal job info for nested responses."""

    id: int
    title: str
    location: str
    type: str
    salary: str | None = None


class JobFilters(CamelModel):
    """Search filters; absent filters impose no constraint."""

    query: str | None = None
    location: str | None = None
    type: str | None = None
    company_id: int | None = None


class JobWithCompany(JobRead):
    """Search result with a company summary (null when the company is gone)."""

    company: CompanySummary | None = None


class JobDetail(JobRead):
    """Single job with full company info and application count."""

    company: CompanyDetail | None = None
    application_count: int = 0


class JobCategory(CamelModel):
    id: int
    name: str
    icon: str
    count: int
