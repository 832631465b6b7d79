"""Tests for job posting, editing, search and detail."""

import pydantic
import pytest

from app.errors import AuthorizationError, NotFoundError, PreconditionFailed
from app.schemas import ApplicationCreate, CompanyProfileCreate, JobFilters, JobUpdate
from app.services import application_service, job_service


async def test_post_job_requires_company_profile(repo, add_user, job_fields):
    employer = await add_user("acme", "employer")

    with pytest.raises(PreconditionFailed):
        await job_service.post_job(repo, employer, job_fields())
    assert await repo.list_jobs() == []

    company = await repo.create_company_profile(employer.id, CompanyProfileCreate(name="Acme"))
    assert company.id == 1

    job = await job_service.post_job(repo, employer, job_fields(description="..."))
    assert job.company_id == 1
    assert job.is_active is True
    assert job.created_at is not None


async def test_job_seeker_cannot_post(repo, add_user, job_fields):
    seeker = await add_user("sam", "jobSeeker")
    with pytest.raises(AuthorizationError):
        await job_service.post_job(repo, seeker, job_fields())


async def test_other_employer_cannot_update_or_delete(repo, employer_with_company, job_fields):
    owner, _ = await employer_with_company("acme", "Acme")
    intruder, _ = await employer_with_company("globex", "Globex")
    job = await job_service.post_job(repo, owner, job_fields())

    with pytest.raises(AuthorizationError):
        await job_service.update_job(repo, intruder, job.id, JobUpdate(title="Hijacked"))
    with pytest.raises(AuthorizationError):
        await job_service.delete_job(repo, intruder, job.id)

    assert (await repo.get_job(job.id)).title == "Engineer"


async def test_missing_job_is_not_found_before_authorization(repo, employer_with_company):
    owner, _ = await employer_with_company()
    with pytest.raises(NotFoundError):
        await job_service.update_job(repo, owner, 99, JobUpdate(title="x"))
    with pytest.raises(NotFoundError):
        await job_service.delete_job(repo, owner, 99)


async def test_owner_updates_only_supplied_fields(repo, employer_with_company, job_fields):
    owner, company = await employer_with_company()
    job = await job_service.post_job(repo, owner, job_fields(salary="100k"))

    updated = await job_service.update_job(repo, owner, job.id, JobUpdate(title="Senior Engineer", is_active=False))
    assert updated.title == "Senior Engineer"
    assert updated.is_active is False
    assert updated.salary == "100k"
    assert updated.company_id == company.id


def test_job_patch_refuses_null_is_active():
    with pytest.raises(pydantic.ValidationError):
        JobUpdate.model_validate({"isActive": None})
    assert JobUpdate.model_validate({"isActive": False}).is_active is False
    assert "is_active" not in JobUpdate.model_validate({}).model_dump(exclude_unset=True)


async def test_owner_deletes_job(repo, employer_with_company, job_fields):
    owner, _ = await employer_with_company()
    job = await job_service.post_job(repo, owner, job_fields())

    assert await job_service.delete_job(repo, owner, job.id) is True
    assert await repo.get_job(job.id) is None


async def test_search_joins_company_summary(repo, employer_with_company, job_fields):
    owner, company = await employer_with_company("acme", "Acme")
    await job_service.post_job(repo, owner, job_fields(title="Data Engineer"))
    await job_service.post_job(repo, owner, job_fields(title="Chef"))

    results = await job_service.search_jobs(repo, JobFilters(query="engineer"))
    assert [r.title for r in results] == ["Data Engineer"]
    assert results[0].company.model_dump() == {
        "id": company.id, "name": "Acme", "logo_url": company.logo_url,
    }


async def test_search_tolerates_missing_company(repo, job_fields):
    # Job pointing at a company that does not exist
    await repo.create_job(77, job_fields())
    results = await job_service.search_jobs(repo)
    assert len(results) == 1
    assert results[0].company is None


async def test_job_detail_counts_applications(repo, employer_with_company, seeker_with_profile, job_fields):
    owner, company = await employer_with_company()
    job = await job_service.post_job(repo, owner, job_fields())
    for name in ("sam", "alex"):
        seeker, _ = await seeker_with_profile(name)
        await application_service.apply(repo, seeker, ApplicationCreate(job_id=job.id))

    detail = await job_service.get_job_detail(repo, job.id)
    assert detail.application_count == 2
    assert detail.company.name == company.name

    with pytest.raises(NotFoundError):
        await job_service.get_job_detail(repo, 123)


async def test_list_company_jobs(repo, employer_with_company, job_fields):
    acme_owner, acme = await employer_with_company("acme", "Acme")
    globex_owner, _ = await employer_with_company("globex", "Globex")
    await job_service.post_job(repo, acme_owner, job_fields(title="A"))
    await job_service.post_job(repo, globex_owner, job_fields(title="B"))

    assert [j.title for j in await job_service.list_company_jobs(repo, acme.id)] == ["A"]
