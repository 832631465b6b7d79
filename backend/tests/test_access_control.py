"""Unit tests for the ownership predicates."""

from datetime import datetime, timezone

import pytest

from app.errors import AuthorizationError
from app.schemas import (
    ApplicationRead,
    CompanyProfileRead,
    JobRead,
    JobSeekerProfileRead,
    MessageRead,
    UserRecord,
)
from app.services.access_control import (
    authorize,
    can_manage_company_profile,
    can_manage_job,
    can_manage_jobseeker_profile,
    can_mark_message_read,
    can_update_application_status,
)

NOW = datetime(2026, 1, 1, tzinfo=timezone.utc)


def make_user(user_id: int, user_type: str) -> UserRecord:
    return UserRecord(
        id=user_id,
        username=f"user{user_id}",
        email=f"user{user_id}@example.com",
        password_hash="x",
        user_type=user_type,
        created_at=NOW,
    )


EMPLOYER = make_user(1, "employer")
OTHER_EMPLOYER = make_user(2, "employer")
SEEKER = make_user(3, "jobSeeker")

COMPANY = CompanyProfileRead(id=10, user_id=EMPLOYER.id, name="Acme")
JOB = JobRead(
    id=20, company_id=COMPANY.id, title="Engineer", description="d",
    location="Remote", type="Full-time", created_at=NOW, is_active=True,
)
APPLICATION = ApplicationRead(
    id=30, job_id=JOB.id, job_seeker_id=40, status="pending", applied_at=NOW, updated_at=NOW,
)


def test_company_profile_owner_only():
    assert can_manage_company_profile(EMPLOYER, COMPANY)
    assert not can_manage_company_profile(OTHER_EMPLOYER, COMPANY)


def test_company_profile_requires_employer_type():
    # Same id, wrong role
    seeker_with_same_id = make_user(EMPLOYER.id, "jobSeeker")
    assert not can_manage_company_profile(seeker_with_same_id, COMPANY)


def test_jobseeker_profile_owner_only():
    profile = JobSeekerProfileRead(id=40, user_id=SEEKER.id, first_name="Sam", last_name="Lee")
    assert can_manage_jobseeker_profile(SEEKER, profile)
    assert not can_manage_jobseeker_profile(make_user(9, "jobSeeker"), profile)
    assert not can_manage_jobseeker_profile(make_user(SEEKER.id, "employer"), profile)


def test_job_follows_company_ownership():
    assert can_manage_job(EMPLOYER, JOB, COMPANY)
    assert not can_manage_job(OTHER_EMPLOYER, JOB, COMPANY)
    assert not can_manage_job(EMPLOYER, JOB, None)


def test_job_rejects_mismatched_company():
    other_company = CompanyProfileRead(id=11, user_id=EMPLOYER.id, name="Acme Two")
    assert not can_manage_job(EMPLOYER, JOB, other_company)


def test_application_status_needs_owning_employer():
    assert can_update_application_status(EMPLOYER, APPLICATION, JOB, COMPANY)
    assert not can_update_application_status(OTHER_EMPLOYER, APPLICATION, JOB, COMPANY)
    assert not can_update_application_status(SEEKER, APPLICATION, JOB, COMPANY)


def test_mark_read_recipient_only():
    message = MessageRead(
        id=1, from_user_id=EMPLOYER.id, to_user_id=SEEKER.id, content="Hi", is_read=False, sent_at=NOW,
    )
    assert can_mark_message_read(SEEKER, message)
    assert not can_mark_message_read(EMPLOYER, message)


def test_authorize_raises_on_denial():
    authorize(True, EMPLOYER, "fine")
    with pytest.raises(AuthorizationError, match="nope"):
        authorize(False, EMPLOYER, "nope")
