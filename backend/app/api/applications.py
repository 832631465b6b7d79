"""Application API endpoints."""

from fastapi import APIRouter, Depends

from app.dependencies.auth import require_employer, require_job_seeker
from app.dependencies.storage import get_repository
from app.repositories.base import Repository
from app.schemas import (
    ApplicationCreate,
    ApplicationRead,
    EmployerApplication,
    JobSeekerApplication,
    StatusUpdate,
    UserRecord,
)
from app.services import application_service

router = APIRouter(prefix="/applications", tags=["applications"])


@router.post("", response_model=ApplicationRead, status_code=201)
async def apply(
    data: ApplicationCreate,
    user: UserRecord = Depends(require_job_seeker),
    repo: Repository = Depends(get_repository),
):
    return await application_service.apply(repo, user, data)


@router.get("/jobseeker", response_model=list[JobSeekerApplication])
async def list_my_applications(
    user: UserRecord = Depends(require_job_seeker),
    repo: Repository = Depends(get_repository),
):
    return await application_service.list_for_job_seeker(repo, user)


@router.get("/employer", response_model=list[EmployerApplication])
async def list_received_applications(
    user: UserRecord = Depends(require_employer),
    repo: Repository = Depends(get_repository),
):
    return await application_service.list_for_employer(repo, user)


@router.put("/{application_id}/status", response_model=ApplicationRead)
async def update_status(
    application_id: int,
    data: StatusUpdate,
    user: UserRecord = Depends(require_employer),
    repo: Repository = Depends(get_repository),
):
    return await application_service.set_status(repo, user, application_id, data.status)
