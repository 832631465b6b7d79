"""Application lifecycle — applying, listing and employer status changes.

Any of the six statuses may follow any other; only membership is checked.
"""

import logging
from datetime import datetime, timezone

from app.errors import (
    AuthorizationError,
    ConflictError,
    InvalidArgument,
    NotFoundError,
    PreconditionFailed,
)
from app.repositories.base import Repository
from app.schemas import (
    APPLICATION_STATUSES,
    ApplicationCreate,
    ApplicationRead,
    AppliedJobSummary,
    CompanySummary,
    EmployerApplication,
    JobFilters,
    JobSeekerApplication,
    JobSeekerSummary,
    JobSummary,
    UserRecord,
)
from app.services.access_control import authorize, can_update_application_status

logger = logging.getLogger(__name__)


async def apply(repo: Repository, user: UserRecord, data: ApplicationCreate) -> ApplicationRead:
    """Submit a pending application; one per (job, job seeker) pair."""
    if not user.is_job_seeker:
        raise AuthorizationError("Job seekers only")

    profile = await repo.get_jobseeker_profile_by_user(user.id)
    if profile is None:
        raise PreconditionFailed("You need to create a job seeker profile first")

    job = await repo.get_job(data.job_id)
    if job is None:
        raise NotFoundError("Job not found")

    if await repo.find_application(job.id, profile.id):
        raise ConflictError("You have already applied to this job")

    application = await repo.create_application(job.id, profile.id, data.cover_letter)
    logger.info("Job seeker %s applied to job %s (application %s)", profile.id, job.id, application.id)
    return application


async def list_for_job_seeker(repo: Repository, user: UserRecord) -> list[JobSeekerApplication]:
    """The caller's applications, each with its job and company (null once deleted)."""
    profile = await repo.get_jobseeker_profile_by_user(user.id)
    if profile is None:
        return []

    results = []
    for application in await repo.list_applications(job_seeker_id=profile.id):
        job = await repo.get_job(application.job_id)
        job_summary = None
        if job is not None:
            company = await repo.get_company_profile(job.company_id)
            job_summary = AppliedJobSummary(
                **JobSummary.model_validate(job).model_dump(),
                company=CompanySummary.model_validate(company) if company else None,
            )
        results.append(JobSeekerApplication(**application.model_dump(), job=job_summary))
    return results


async def list_for_employer(repo: Repository, user: UserRecord) -> list[EmployerApplication]:
    """Applications to any job of the caller's company, with job and applicant summaries."""
    company = await repo.get_company_profile_by_user(user.id)
    if company is None:
        return []

    jobs = {job.id: job for job in await repo.list_jobs(JobFilters(company_id=company.id))}
    if not jobs:
        return []

    results = []
    for application in await repo.list_applications(job_ids=jobs.keys()):
        seeker = await repo.get_jobseeker_profile(application.job_seeker_id)
        results.append(
            EmployerApplication(
                **application.model_dump(),
                job=JobSummary.model_validate(jobs[application.job_id]),
                job_seeker=JobSeekerSummary.model_validate(seeker) if seeker else None,
            )
        )
    return results


async def set_status(
    repo: Repository, user: UserRecord, application_id: int, new_status: str | None
) -> ApplicationRead:
    if new_status not in APPLICATION_STATUSES:
        raise InvalidArgument("Invalid status")

    application = await repo.get_application(application_id)
    if application is None:
        raise NotFoundError("Application not found")

    job = await repo.get_job(application.job_id)
    if job is None:
        raise NotFoundError("Associated job not found")

    company = await repo.get_company_profile(job.company_id)
    authorize(
        can_update_application_status(user, application, job, company),
        user,
        "You don't have permission to update this application",
    )

    updated = await repo.update_application(
        application_id,
        {"status": new_status, "updated_at": datetime.now(timezone.utc)},
    )
    logger.info("Application %s moved %s -> %s", application_id, application.status, new_status)
    return updated
