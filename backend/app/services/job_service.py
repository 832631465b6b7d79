"""Job posting service — posting, editing, search and detail views."""

import logging

from app.errors import AuthorizationError, NotFoundError, PreconditionFailed
from app.repositories.base import Repository
from app.schemas import (
    CompanyDetail,
    CompanySummary,
    JobCategory,
    JobCreate,
    JobDetail,
    JobFilters,
    JobRead,
    JobUpdate,
    JobWithCompany,
    UserRecord,
)
from app.services.access_control import authorize, can_manage_job

logger = logging.getLogger(__name__)

JOB_CATEGORIES = [
    JobCategory(id=1, name="Technology", icon="Code", count=1245),
    JobCategory(id=2, name="Finance", icon="DollarSign", count=879),
    JobCategory(id=3, name="Healthcare", icon="Stethoscope", count=1057),
    JobCategory(id=4, name="Education", icon="GraduationCap", count=624),
    JobCategory(id=5, name="Retail", icon="ShoppingBag", count=932),
    JobCategory(id=6, name="Marketing", icon="BarChart", count=548),
    JobCategory(id=7, name="Design", icon="Paintbrush", count=421),
    JobCategory(id=8, name="Customer Service", icon="HeadphonesIcon", count=756),
]


async def post_job(repo: Repository, user: UserRecord, data: JobCreate) -> JobRead:
    """Create a job under the employer's company profile."""
    if not user.is_employer:
        raise AuthorizationError("Employers only")

    company = await repo.get_company_profile_by_user(user.id)
    if company is None:
        raise PreconditionFailed("You need to create a company profile first")

    job = await repo.create_job(company.id, data)
    logger.info("Company %s posted job %s (%s)", company.id, job.id, job.title)
    return job


async def _get_owned_job(repo: Repository, user: UserRecord, job_id: int, action: str) -> JobRead:
    job = await repo.get_job(job_id)
    if job is None:
        raise NotFoundError("Job not found")
    company = await repo.get_company_profile(job.company_id)
    authorize(
        can_manage_job(user, job, company),
        user,
        f"You don't have permission to {action} this job",
    )
    return job


async def update_job(repo: Repository, user: UserRecord, job_id: int, patch: JobUpdate) -> JobRead:
    await _get_owned_job(repo, user, job_id, "update")
    job = await repo.update_job(job_id, patch.model_dump(exclude_unset=True))
    logger.info("Updated job %s", job_id)
    return job


async def delete_job(repo: Repository, user: UserRecord, job_id: int) -> bool:
    await _get_owned_job(repo, user, job_id, "delete")
    deleted = await repo.delete_job(job_id)
    logger.info("Deleted job %s", job_id)
    return deleted


async def search_jobs(repo: Repository, filters: JobFilters | None = None) -> list[JobWithCompany]:
    """Filtered job list, each with a company summary (null if the company is missing)."""
    jobs = await repo.list_jobs(filters)

    companies: dict[int, CompanySummary | None] = {}
    results = []
    for job in jobs:
        if job.company_id not in companies:
            company = await repo.get_company_profile(job.company_id)
            companies[job.company_id] = CompanySummary.model_validate(company) if company else None
        results.append(JobWithCompany(**job.model_dump(), company=companies[job.company_id]))
    return results


async def get_job_detail(repo: Repository, job_id: int) -> JobDetail:
    job = await repo.get_job(job_id)
    if job is None:
        raise NotFoundError("Job not found")

    company = await repo.get_company_profile(job.company_id)
    return JobDetail(
        **job.model_dump(),
        company=CompanyDetail.model_validate(company) if company else None,
        application_count=await repo.count_applications(job.id),
    )


async def list_company_jobs(repo: Repository, company_id: int) -> list[JobRead]:
    return await repo.list_jobs(JobFilters(company_id=company_id))
