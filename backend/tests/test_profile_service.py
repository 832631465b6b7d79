"""Tests for profile creation, lookup and ownership."""

import pytest

from app.errors import AuthorizationError, ConflictError, NotFoundError
from app.schemas import (
    CompanyProfileCreate,
    CompanyProfileUpdate,
    JobSeekerProfileCreate,
    JobSeekerProfileUpdate,
)
from app.services import profile_service


async def test_company_profile_round_trip_by_user(repo, add_user):
    employer = await add_user("acme", "employer")
    data = CompanyProfileCreate(name="Acme", size="11-50", location="Austin")

    created = await profile_service.create_company_profile(repo, employer, data)
    fetched = await profile_service.get_company_profile_for_user(repo, employer.id)

    assert fetched == created
    assert fetched.model_dump(exclude={"id", "user_id"}) == data.model_dump()


async def test_role_and_uniqueness_on_create(repo, add_user):
    employer = await add_user("acme", "employer")
    seeker = await add_user("sam", "jobSeeker")

    with pytest.raises(AuthorizationError):
        await profile_service.create_company_profile(repo, seeker, CompanyProfileCreate(name="X"))
    with pytest.raises(AuthorizationError):
        await profile_service.create_jobseeker_profile(
            repo, employer, JobSeekerProfileCreate(first_name="A", last_name="B")
        )

    await profile_service.create_company_profile(repo, employer, CompanyProfileCreate(name="Acme"))
    with pytest.raises(ConflictError):
        await profile_service.create_company_profile(repo, employer, CompanyProfileCreate(name="Acme"))


async def test_skills_are_deduplicated(repo, add_user):
    seeker = await add_user("sam", "jobSeeker")
    profile = await profile_service.create_jobseeker_profile(
        repo, seeker,
        JobSeekerProfileCreate(first_name="Sam", last_name="Lee", skills=["Python", " SQL", "Python", ""]),
    )
    assert profile.skills == ["Python", "SQL"]


async def test_update_jobseeker_profile_owner_only(repo, add_user):
    owner = await add_user("sam", "jobSeeker")
    other = await add_user("alex", "jobSeeker")
    profile = await profile_service.create_jobseeker_profile(
        repo, owner, JobSeekerProfileCreate(first_name="Sam", last_name="Lee")
    )

    with pytest.raises(AuthorizationError):
        await profile_service.update_jobseeker_profile(repo, other, profile.id, JobSeekerProfileUpdate(title="CTO"))
    with pytest.raises(NotFoundError):
        await profile_service.update_jobseeker_profile(repo, owner, 99, JobSeekerProfileUpdate(title="CTO"))

    updated = await profile_service.update_jobseeker_profile(
        repo, owner, profile.id, JobSeekerProfileUpdate(title="Engineer")
    )
    assert updated.title == "Engineer"
    assert updated.first_name == "Sam"
    assert updated.user_id == owner.id


async def test_update_company_profile_owner_only(repo, employer_with_company):
    owner, company = await employer_with_company("acme", "Acme")
    other, _ = await employer_with_company("globex", "Globex")

    with pytest.raises(AuthorizationError):
        await profile_service.update_company_profile(repo, other, company.id, CompanyProfileUpdate(name="Mine"))

    updated = await profile_service.update_company_profile(
        repo, owner, company.id, CompanyProfileUpdate(industry="Tools")
    )
    assert (updated.name, updated.industry) == ("Acme", "Tools")


async def test_lookups_raise_not_found(repo):
    with pytest.raises(NotFoundError):
        await profile_service.get_jobseeker_profile_for_user(repo, 1)
    with pytest.raises(NotFoundError):
        await profile_service.get_company_profile_for_user(repo, 1)
    with pytest.raises(NotFoundError):
        await profile_service.get_company(repo, 1)
