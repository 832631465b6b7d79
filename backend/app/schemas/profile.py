"""Pydantic schemas for job seeker and company profiles."""

from typing import Any

from app.schemas.base import CamelModel, PatchSkillSet, PatchStr, SkillSet


# --- Job seeker ---

class JobSeekerProfileBase(CamelModel):
    """Editable job seeker fields."""

    first_name: str
    last_name: str
    title: str | None = None
    bio: str | None = None
    location: str | None = None
    skills: SkillSet = []
    experience: list[dict[str, Any]] | None = None
    education: list[dict[str, Any]] | None = None
    resume_url: str | None = None
    avatar_url: str | None = None


class JobSeekerProfileCreate(JobSeekerProfileBase):
    """Owner is always the caller; any userId in the body is ignored."""


class JobSeekerProfileUpdate(CamelModel):
    first_name: PatchStr = None
    last_name: PatchStr = None
    title: str | None = None
    bio: str | None = None
    location: str | None = None
    skills: PatchSkillSet = None
    experience: list[dict[str, Any]] | None = None
    education: list[dict[str, Any]] | None = None
    resume_url: str | None = None
    avatar_url: str | None = None


class JobSeekerProfileRead(JobSeekerProfileBase):
    id: int
    user_id: int


class JobSeekerSummary(CamelModel):
    """Minimal job seeker info for nested responses."""

    id: int
    first_name: str
    last_name: str
    title: str | None = None
    avatar_url: str | None = None


# --- Company ---

class CompanyProfileBase(CamelModel):
    """Editable company fields."""

    name: str
    description: str | None = None
    industry: str | None = None
    location: str | None = None
    website: str | None = None
    logo_url: str | None = None
    size: str | None = None  # 1-10, 11-50, 51-200, ...


class CompanyProfileCreate(CompanyProfileBase):
    """Owner is always the caller; any userId in the body is ignored."""


class CompanyProfileUpdate(CamelModel):
    name: PatchStr = None
    description: str | None = None
    industry: str | None = None
    location: str | None = None
    website: str | None = None
    logo_url: str | None = None
    size: str | None = None


class CompanyProfileRead(CompanyProfileBase):
    id: int
    user_id: int


class CompanyDetail(CompanyProfileBase):
    """Full company info embedded in a job detail."""

    id: int


class CompanySummary(CamelModel):
    """Minimal company info for nested responses."""

    id: int
    name: str
    logo_url: str | None = None
