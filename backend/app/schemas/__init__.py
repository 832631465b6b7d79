"""Pydantic schemas package."""

from app.schemas.user import (
    EMPLOYER,
    JOB_SEEKER,
    LoginRequest,
    UserCreate,
    UserPublic,
    UserRecord,
    UserType,
)
from app.schemas.profile import (
    CompanyDetail,
    CompanyProfileCreate,
    CompanyProfileRead,
    CompanyProfileUpdate,
    CompanySummary,
    JobSeekerProfileCreate,
    JobSeekerProfileRead,
    JobSeekerProfileUpdate,
    JobSeekerSummary,
)
from app.schemas.job import (
    JobCategory,
    JobCreate,
    JobDetail,
    JobFilters,
    JobRead,
    JobSummary,
    JobUpdate,
    JobWithCompany,
)
from app.schemas.application import (
    APPLICATION_STATUSES,
    ApplicationCreate,
    ApplicationRead,
    ApplicationStatus,
    AppliedJobSummary,
    EmployerApplication,
    JobSeekerApplication,
    StatusUpdate,
)
from app.schemas.message import (
    ConversationSummary,
    LatestMessage,
    MessageCreate,
    MessageRead,
)

__all__ = [
    # User
    "EMPLOYER",
    "JOB_SEEKER",
    "LoginRequest",
    "UserCreate",
    "UserPublic",
    "UserRecord",
    "UserType",
    # Profiles
    "CompanyDetail",
    "CompanyProfileCreate",
    "CompanyProfileRead",
    "CompanyProfileUpdate",
    "CompanySummary",
    "JobSeekerProfileCreate",
    "JobSeekerProfileRead",
    "JobSeekerProfileUpdate",
    "JobSeekerSummary",
    # Job
    "JobCategory",
    "JobCreate",
    "JobDetail",
    "JobFilters",
    "JobRead",
    "JobSummary",
    "JobUpdate",
    "JobWithCompany",
    # Application
    "APPLICATION_STATUSES",
    "ApplicationCreate",
    "ApplicationRead",
    "ApplicationStatus",
    "AppliedJobSummary",
    "EmployerApplication",
    "JobSeekerApplication",
    "StatusUpdate",
    # Message
    "ConversationSummary",
    "LatestMessage",
    "MessageCreate",
    "MessageRead",
]
