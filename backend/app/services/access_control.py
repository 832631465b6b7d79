"""Ownership rules — pure predicates over already-loaded records.

Callers resolve the ownership chain first (so a broken chain surfaces as
NotFound) and then ask these functions; `authorize` turns a denial into
AuthorizationError.
"""

import logging

from app.errors import AuthorizationError
from app.schemas import (
    ApplicationRead,
    CompanyProfileRead,
    JobRead,
    JobSeekerProfileRead,
    MessageRead,
    UserRecord,
)

logger = logging.getLogger(__name__)


def can_manage_company_profile(user: UserRecord, profile: CompanyProfileRead) -> bool:
    return user.is_employer and profile.user_id == user.id


def can_manage_jobseeker_profile(user: UserRecord, profile: JobSeekerProfileRead) -> bool:
    return user.is_job_seeker and profile.user_id == user.id


def can_manage_job(user: UserRecord, job: JobRead, company: CompanyProfileRead | None) -> bool:
    """`company` is the profile referenced by job.company_id (None if it is gone)."""
    if company is None or company.id != job.company_id:
        return False
    return can_manage_company_profile(user, company)


def can_update_application_status(
    user: UserRecord,
    application: ApplicationRead,
    job: JobRead,
    company: CompanyProfileRead | None,
) -> bool:
    """Only the employer owning the company behind the application's job."""
    if job.id != application.job_id:
        return False
    return can_manage_job(user, job, company)


def can_mark_message_read(user: UserRecord, message: MessageRead) -> bool:
    return message.to_user_id == user.id


def authorize(allowed: bool, user: UserRecord, message: str) -> None:
    if not allowed:
        logger.warning("Denied user %s: %s", user.id, message)
        raise AuthorizationError(message)
