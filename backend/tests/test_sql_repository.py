"""SqlRepository against an in-memory SQLite database."""

from datetime import datetime, timezone

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.errors import ConflictError, NotFoundError
from app.models.base import Base
from app.models.message import Message
from app.repositories.sql import SqlRepository
from app.schemas import CompanyProfileCreate, JobFilters, JobSeekerProfileCreate


@pytest.fixture
async def session():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session
    await engine.dispose()


@pytest.fixture
def sql_repo(session):
    return SqlRepository(session)


@pytest.fixture
async def company(sql_repo, session):
    user = await sql_repo.create_user("acme", "acme@example.com", "x", "employer")
    profile = await sql_repo.create_company_profile(user.id, CompanyProfileCreate(name="Acme", logo_url="l.png"))
    await session.commit()
    return profile


async def test_user_uniqueness_becomes_conflict(sql_repo, session):
    user = await sql_repo.create_user("dana", "dana@example.com", "x", "employer")
    await session.commit()
    assert user.id == 1

    with pytest.raises(ConflictError):
        await sql_repo.create_user("dana", "other@example.com", "x", "employer")
    assert (await sql_repo.get_user_by_email("dana@example.com")).username == "dana"


async def test_profile_lookup_by_user(sql_repo, session):
    user = await sql_repo.create_user("sam", "sam@example.com", "x", "jobSeeker")
    profile = await sql_repo.create_jobseeker_profile(
        user.id, JobSeekerProfileCreate(first_name="Sam", last_name="Lee", skills=["Python"])
    )
    await session.commit()

    fetched = await sql_repo.get_jobseeker_profile_by_user(user.id)
    assert fetched == profile
    assert fetched.skills == ["Python"]
    assert await sql_repo.get_jobseeker_profile_by_user(999) is None


async def test_job_filters(sql_repo, session, company, job_fields):
    await sql_repo.create_job(company.id, job_fields(title="Python Engineer", location="Berlin"))
    await sql_repo.create_job(company.id, job_fields(title="Designer", description="python team", type="Contract"))
    await sql_repo.create_job(company.id, job_fields(title="Accountant", location="Paris"))
    await session.commit()

    assert [j.title for j in await sql_repo.list_jobs(JobFilters(query="python"))] == ["Python Engineer", "Designer"]
    assert [j.title for j in await sql_repo.list_jobs(JobFilters(location="berl"))] == ["Python Engineer"]
    assert [j.title for j in await sql_repo.list_jobs(JobFilters(type="Contract"))] == ["Designer"]
    assert len(await sql_repo.list_jobs(JobFilters(company_id=company.id))) == 3
    assert await sql_repo.list_jobs(JobFilters(company_id=company.id + 1)) == []


async def test_update_and_delete_job(sql_repo, session, company, job_fields):
    job = await sql_repo.create_job(company.id, job_fields())
    await session.commit()

    updated = await sql_repo.update_job(job.id, {"title": "Lead", "skills": ["Go"]})
    assert (updated.title, updated.skills, updated.is_active) == ("Lead", ["Go"], True)

    assert await sql_repo.delete_job(job.id) is True
    assert await sql_repo.delete_job(job.id) is False
    with pytest.raises(NotFoundError):
        await sql_repo.update_job(job.id, {"title": "Gone"})


async def test_duplicate_application_conflicts(sql_repo, session, company, job_fields):
    job = await sql_repo.create_job(company.id, job_fields())
    application = await sql_repo.create_application(job.id, 5, "Hello")
    await session.commit()
    assert application.status == "pending"

    with pytest.raises(ConflictError):
        await sql_repo.create_application(job.id, 5, "Again")
    assert await sql_repo.count_applications(job.id) == 1
    assert [a.id for a in await sql_repo.list_applications(job_ids=[job.id])] == [application.id]
    assert await sql_repo.list_applications(job_seeker_id=6) == []


async def test_conversation_order_and_read_flag(sql_repo, session):
    a = await sql_repo.create_user("a", "a@example.com", "x", "employer")
    b = await sql_repo.create_user("b", "b@example.com", "x", "jobSeeker")
    first = await sql_repo.create_message(a.id, b.id, "one")
    second = await sql_repo.create_message(b.id, a.id, "two")

    tie = datetime(2026, 1, 1, tzinfo=timezone.utc)
    for message_id in (first.id, second.id):
        row = await session.get(Message, message_id)
        row.sent_at = tie
    await session.commit()

    conversation = await sql_repo.list_conversation(a.id, b.id)
    assert [m.content for m in conversation] == ["one", "two"]

    marked = await sql_repo.mark_message_read(first.id)
    assert marked.is_read is True
    assert [m.id for m in await sql_repo.list_messages_for_user(b.id)] == [first.id, second.id]
