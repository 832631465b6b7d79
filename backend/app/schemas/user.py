"""Pydantic schemas for User accounts."""

from datetime import datetime
from typing import Literal

from pydantic import Field

from app.schemas.base import CamelModel, TrimmedStr

UserType = Literal["jobSeeker", "employer"]

JOB_SEEKER = "jobSeeker"
EMPLOYER = "employer"


class UserCreate(CamelModel):
    """Registration payload."""

    username: TrimmedStr = Field(min_length=1, max_length=100)
    email: TrimmedStr = Field(min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(min_length=1)
    user_type: UserType


class LoginRequest(CamelModel):
    username: str
    password: str


class UserPublic(CamelModel):
    """User as exposed over the API (no password hash)."""

    id: int
    username: str
    email: str
    user_type: UserType
    created_at: datetime


class UserRecord(UserPublic):
    """Stored user, including the credential hash."""

    password_hash: str

    @property
    def is_employer(self) -> bool:
        return self.user_type == EMPLOYER

    @property
    def is_job_seeker(self) -> bool:
        return self.user_type == JOB_SEEKER

    def public(self) -> UserPublic:
        return UserPublic.model_validate(self.model_dump(exclude={"password_hash"}))
