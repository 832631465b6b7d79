"""Profile endpoints — job seeker and company profiles, company directory."""

from fastapi import APIRouter, Depends

from app.dependencies.auth import require_employer, require_job_seeker
from app.dependencies.storage import get_repository
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
from app.services import profile_service

router = APIRouter(tags=["profiles"])


# --- Job seeker profiles ---

@router.post("/profiles/jobseeker", response_model=JobSeekerProfileRead, status_code=201)
async def create_jobseeker_profile(
    data: JobSeekerProfileCreate,
    user: UserRecord = Depends(require_job_seeker),
    repo: Repository = Depends(get_repository),
):
    return await profile_service.create_jobseeker_profile(repo, user, data)


@router.get("/profiles/jobseeker/{user_id}", response_model=JobSeekerProfileRead)
async def get_jobseeker_profile(user_id: int, repo: Repository = Depends(get_repository)):
    """Look up a job seeker profile by its owner's user id."""
    return await profile_service.get_jobseeker_profile_for_user(repo, user_id)


@router.put("/profiles/jobseeker/{profile_id}", response_model=JobSeekerProfileRead)
async def update_jobseeker_profile(
    profile_id: int,
    patch: JobSeekerProfileUpdate,
    user: UserRecord = Depends(require_job_seeker),
    repo: Repository = Depends(get_repository),
):
    return await profile_service.update_jobseeker_profile(repo, user, profile_id, patch)


# --- Company profiles ---

@router.post("/profiles/company", response_model=CompanyProfileRead, status_code=201)
async def create_company_profile(
    data: CompanyProfileCreate,
    user: UserRecord = Depends(require_employer),
    repo: Repository = Depends(get_repository),
):
    return await profile_service.create_company_profile(repo, user, data)


@router.get("/profiles/company/{user_id}", response_model=CompanyProfileRead)
async def get_company_profile(user_id: int, repo: Repository = Depends(get_repository)):
    """Look up a company profile by its owner's user id."""
    return await profile_service.get_company_profile_for_user(repo, user_id)


@router.put("/profiles/company/{profile_id}", response_model=CompanyProfileRead)
async def update_company_profile(
    profile_id: int,
    patch: CompanyProfileUpdate,
    user: UserRecord = Depends(require_employer),
    repo: Repository = Depends(get_repository),
):
    return await profile_service.update_company_profile(repo, user, profile_id, patch)


# --- Company directory ---

@router.get("/companies", response_model=list[CompanyProfileRead])
async def list_companies(repo: Repository = Depends(get_repository)):
    return await repo.list_company_profiles()


@router.get("/companies/{company_id}", response_model=CompanyProfileRead)
async def get_company(company_id: int, repo: Repository = Depends(get_repository)):
    return await profile_service.get_company(repo, company_id)
