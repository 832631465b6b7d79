"""Job posting API endpoints."""

from fastapi import APIRouter, Depends, Query, Response

from app.dependencies.auth import require_employer
from app.dependencies.storage import get_repository
from app.repositories.base import Repository
from app.schemas import (
    JobCategory,
    JobCreate,
    JobDetail,
    JobFilters,
    JobRead,
    JobUpdate,
    JobWithCompany,
    UserRecord,
)
from app.services import job_service

router = APIRouter(tags=["jobs"])


@router.post("/jobs", response_model=JobRead, status_code=201)
async def post_job(
    data: JobCreate,
    user: UserRecord = Depends(require_employer),
    repo: Repository = Depends(get_repository),
):
    return await job_service.post_job(repo, user, data)


@router.get("/jobs", response_model=list[JobWithCompany])
async def search_jobs(
    repo: Repository = Depends(get_repository),
    query: str | None = Query(None, description="Search in title and description"),
    location: str | None = Query(None, description="Filter by location (substring)"),
    type: str | None = Query(None, description="Filter by job type"),
    company_id: int | None = Query(None, alias="companyId", description="Filter by company"),
):
    """List jobs with filters."""
    filters = JobFilters(query=query, location=location, type=type, company_id=company_id)
    return await job_service.search_jobs(repo, filters)


@router.get("/jobs/company/{company_id}", response_model=list[JobRead])
async def list_company_jobs(company_id: int, repo: Repository = Depends(get_repository)):
    return await job_service.list_company_jobs(repo, company_id)


@router.get("/jobs/{job_id}", response_model=JobDetail)
async def get_job(job_id: int, repo: Repository = Depends(get_repository)):
    """Get a single job with company info and application count."""
    return await job_service.get_job_detail(repo, job_id)


@router.put("/jobs/{job_id}", response_model=JobRead)
async def update_job(
    job_id: int,
    patch: JobUpdate,
    user: UserRecord = Depends(require_employer),
    repo: Repository = Depends(get_repository),
):
    return await job_service.update_job(repo, user, job_id, patch)


@router.delete("/jobs/{job_id}", status_code=204)
async def delete_job(
    job_id: int,
    user: UserRecord = Depends(require_employer),
    repo: Repository = Depends(get_repository),
):
    await job_service.delete_job(repo, user, job_id)
    return Response(status_code=204)


@router.get("/categories", response_model=list[JobCategory])
async def list_categories():
    return job_service.JOB_CATEGORIES
