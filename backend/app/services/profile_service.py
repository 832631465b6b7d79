"""Job seeker and company profile operations."""

import logging

from app.errors import AuthorizationError, ConflictError, NotFoundError
from app.repositories.base import Repository
from app.schemas import (
    CompanyProfileCreate,
    CompanyProfileRead,
    CompanyProfileUpdate,
    JobSeekerProfileCreate,
    JobSeekerProfileRead,
    JobSeekerProfileUpdate,
    UserRecord,
)
from app.services.access_control import (
    authorize,
    can_manage_company_profile,
    can_manage_jobseeker_profile,
)

logger = logging.getLogger(__name__)


# --- Job seeker ---

async def create_jobseeker_profile(
    repo: Repository, user: UserRecord, data: JobSeekerProfileCreate
) -> JobSeekerProfileRead:
    if not user.is_job_seeker:
        raise AuthorizationError("Job seekers only")
    if await repo.get_jobseeker_profile_by_user(user.id):
        raise ConflictError("Job seeker profile already exists")

    profile = await repo.create_jobseeker_profile(user.id, data)
    logger.info("Created job seeker profile %s for user %s", profile.id, user.id)
    return profile


async def get_jobseeker_profile_for_user(repo: Repository, user_id: int) -> JobSeekerProfileRead:
    profile = await repo.get_jobseeker_profile_by_user(user_id)
    if profile is None:
        raise NotFoundError("Profile not found")
    return profile


async def update_jobseeker_profile(
    repo: Repository, user: UserRecord, profile_id: int, patch: JobSeekerProfileUpdate
) -> JobSeekerProfileRead:
    profile = await repo.get_jobseeker_profile(profile_id)
    if profile is None:
        raise NotFoundError("Profile not found")
    authorize(
        can_manage_jobseeker_profile(user, profile),
        user,
        "You don't have permission to update this profile",
    )
    return await repo.update_jobseeker_profile(profile_id, patch.model_dump(exclude_unset=True))


# --- Company ---

async def create_company_profile(
    repo: Repository, user: UserRecord, data: CompanyProfileCreate
) -> CompanyProfileRead:
    if not user.is_employer:
        raise AuthorizationError("Employers only")
    if await repo.get_company_profile_by_user(user.id):
        raise ConflictError("Company profile already exists")

    profile = await repo.create_company_profile(user.id, data)
    logger.info("Created company profile %s (%s) for user %s", profile.id, profile.name, user.id)
    return profile


async def get_company_profile_for_user(repo: Repository, user_id: int) -> CompanyProfileRead:
    profile = await repo.get_company_profile_by_user(user_id)
    if profile is None:
        raise NotFoundError("Company profile not found")
    return profile


async def get_company(repo: Repository, company_id: int) -> CompanyProfileRead:
    profile = await repo.get_company_profile(company_id)
    if profile is None:
        raise NotFoundError("Company not found")
    return profile


async def update_company_profile(
    repo: Repository, user: UserRecord, profile_id: int, patch: CompanyProfileUpdate
) -> CompanyProfileRead:
    profile = await repo.get_company_profile(profile_id)
    if profile is None:
        raise NotFoundError("Company profile not found")
    authorize(
        can_manage_company_profile(user, profile),
        user,
        "You don't have permission to update this profile",
    )
    return await repo.update_company_profile(profile_id, patch.model_dump(exclude_unset=True))
