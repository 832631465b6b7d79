"""In-memory repository — dict-backed collections with per-collection id counters."""

import asyncio
from datetime import datetime, timezone
from typing import Any, Callable, Generic, Iterable, TypeVar

from pydantic import BaseModel

from app.errors import ConflictError, NotFoundError
from app.repositories.base import Repository
from app.schemas import (
    ApplicationRead,
    CompanyProfileCreate,
    CompanyProfileRead,
    JobCreate,
    JobFilters,
    JobRead,
    JobSeekerProfileCreate,
    JobSeekerProfileRead,
    MessageRead,
    UserRecord,
)

RecordT = TypeVar("RecordT", bound=BaseModel)


class Collection(Generic[RecordT]):
    """One entity family: rows keyed by id, a counter that never reuses ids, and a write lock."""

    def __init__(self, label: str):
        self.label = label
        self.rows: dict[int, RecordT] = {}
        self.lock = asyncio.Lock()
        self._next_id = 1

    def get(self, record_id: int) -> RecordT | None:
        return self.rows.get(record_id)

    def values(self) -> list[RecordT]:
        return list(self.rows.values())

    def find(self, predicate: Callable[[RecordT], bool]) -> RecordT | None:
        return next((row for row in self.rows.values() if predicate(row)), None)

    def insert(self, build: Callable[[int], RecordT]) -> RecordT:
        record = build(self._next_id)
        self._next_id += 1
        self.rows[record.id] = record
        return record

    def replace(self, record_id: int, fields: dict[str, Any]) -> RecordT:
        existing = self.rows.get(record_id)
        if existing is None:
            raise NotFoundError(f"{self.label} with ID {record_id} not found")
        updated = existing.model_copy(update=fields)
        self.rows[record_id] = updated
        return updated

    def remove(self, record_id: int) -> bool:
        return self.rows.pop(record_id, None) is not None


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _contains(haystack: str | None, needle: str) -> bool:
    return needle in (haystack or "").lower()


class InMemoryRepository(Repository):
    """Process-local storage for development and tests; lost on restart."""

    def __init__(self):
        self.users: Collection[UserRecord] = Collection("User")
        self.jobseeker_profiles: Collection[JobSeekerProfileRead] = Collection("Job seeker profile")
        self.company_profiles: Collection[CompanyProfileRead] = Collection("Company profile")
        self.jobs: Collection[JobRead] = Collection("Job")
        self.applications: Collection[ApplicationRead] = Collection("Application")
        self.messages: Collection[MessageRead] = Collection("Message")

    # --- Users ---

    async def get_user(self, user_id: int) -> UserRecord | None:
        return self.users.get(user_id)

    async def get_user_by_username(self, username: str) -> UserRecord | None:
        return self.users.find(lambda u: u.username == username)

    async def get_user_by_email(self, email: str) -> UserRecord | None:
        return self.users.find(lambda u: u.email == email)

    async def create_user(
        self, username: str, email: str, password_hash: str, user_type: str
    ) -> UserRecord:
        async with self.users.lock:
            if self.users.find(lambda u: u.username == username):
                raise ConflictError("Username already exists")
            if self.users.find(lambda u: u.email == email):
                raise ConflictError("Email already registered")
            return self.users.insert(
                lambda new_id: UserRecord(
                    id=new_id,
                    username=username,
                    email=email,
                    password_hash=password_hash,
                    user_type=user_type,
                    created_at=_now(),
                )
            )

    # --- Job seeker profiles ---

    async def get_jobseeker_profile(self, profile_id: int) -> JobSeekerProfileRead | None:
        return self.jobseeker_profiles.get(profile_id)

    async def get_jobseeker_profile_by_user(self, user_id: int) -> JobSeekerProfileRead | None:
        return self.jobseeker_profiles.find(lambda p: p.user_id == user_id)

    async def create_jobseeker_profile(
        self, user_id: int, data: JobSeekerProfileCreate
    ) -> JobSeekerProfileRead:
        async with self.jobseeker_profiles.lock:
            if self.jobseeker_profiles.find(lambda p: p.user_id == user_id):
                raise ConflictError("Job seeker profile already exists")
            return self.jobseeker_profiles.insert(
                lambda new_id: JobSeekerProfileRead(id=new_id, user_id=user_id, **data.model_dump())
            )

    async def update_jobseeker_profile(
        self, profile_id: int, fields: dict[str, Any]
    ) -> JobSeekerProfileRead:
        async with self.jobseeker_profiles.lock:
            return self.jobseeker_profiles.replace(profile_id, fields)

    # --- Company profiles ---

    async def get_company_profile(self, profile_id: int) -> CompanyProfileRead | None:
        return self.company_profiles.get(profile_id)

    async def get_company_profile_by_user(self, user_id: int) -> CompanyProfileRead | None:
        return self.company_profiles.find(lambda p: p.user_id == user_id)

    async def list_company_profiles(self) -> list[CompanyProfileRead]:
        return self.company_profiles.values()

    async def create_company_profile(
        self, user_id: int, data: CompanyProfileCreate
    ) -> CompanyProfileRead:
        async with self.company_profiles.lock:
            if self.company_profiles.find(lambda p: p.user_id == user_id):
                raise ConflictError("Company profile already exists")
            return self.company_profiles.insert(
                lambda new_id: CompanyProfileRead(id=new_id, user_id=user_id, **data.model_dump())
            )

    async def update_company_profile(
        self, profile_id: int, fields: dict[str, Any]
    ) -> CompanyProfileRead:
        async with self.company_profiles.lock:
            return self.company_profiles.replace(profile_id, fields)

    # --- Jobs ---

    async def get_job(self, job_id: int) -> JobRead | None:
        return self.jobs.get(job_id)

    async def list_jobs(self, filters: JobFilters | None = None) -> list[JobRead]:
        result = self.jobs.values()
        if filters is None:
            return result

        if filters.query:
            query = filters.query.lower()
            result = [
                job for job in result
                if _contains(job.title, query) or _contains(job.description, query)
            ]
        if filters.location:
            location = filters.location.lower()
            result = [job for job in result if _contains(job.location, location)]
        if filters.type:
            result = [job for job in result if job.type == filters.type]
        if filters.company_id is not None:
            result = [job for job in result if job.company_id == filters.company_id]
        return result

    async def create_job(self, company_id: int, data: JobCreate) -> JobRead:
        async with self.jobs.lock:
            return self.jobs.insert(
                lambda new_id: JobRead(
                    id=new_id,
                    company_id=company_id,
                    created_at=_now(),
                    is_active=True,
                    **data.model_dump(),
                )
            )

    async def update_job(self, job_id: int, fields: dict[str, Any]) -> JobRead:
        async with self.jobs.lock:
            return self.jobs.replace(job_id, fields)

    async def delete_job(self, job_id: int) -> bool:
        async with self.jobs.lock:
            return self.jobs.remove(job_id)

    # --- Applications ---

    async def get_application(self, application_id: int) -> ApplicationRead | None:
        return self.applications.get(application_id)

    async def find_application(self, job_id: int, job_seeker_id: int) -> ApplicationRead | None:
        return self.applications.find(
            lambda a: a.job_id == job_id and a.job_seeker_id == job_seeker_id
        )

    async def list_applications(
        self,
        job_seeker_id: int | None = None,
        job_ids: Iterable[int] | None = None,
    ) -> list[ApplicationRead]:
        result = self.applications.values()
        if job_seeker_id is not None:
            result = [a for a in result if a.job_seeker_id == job_seeker_id]
        if job_ids is not None:
            wanted = set(job_ids)
            result = [a for a in result if a.job_id in wanted]
        return result

    async def count_applications(self, job_id: int) -> int:
        return sum(1 for a in self.applications.values() if a.job_id == job_id)

    async def create_application(
        self, job_id: int, job_seeker_id: int, cover_letter: str | None
    ) -> ApplicationRead:
        async with self.applications.lock:
            if await self.find_application(job_id, job_seeker_id):
                raise ConflictError("You have already applied to this job")
            now = _now()
            return self.applications.insert(
                lambda new_id: ApplicationRead(
                    id=new_id,
                    job_id=job_id,
                    job_seeker_id=job_seeker_id,
                    status="pending",
                    cover_letter=cover_letter,
                    applied_at=now,
                    updated_at=now,
                )
            )

    async def update_application(
        self, application_id: int, fields: dict[str, Any]
    ) -> ApplicationRead:
        async with self.applications.lock:
            return self.applications.replace(application_id, fields)

    # --- Messages ---

    async def get_message(self, message_id: int) -> MessageRead | None:
        return self.messages.get(message_id)

    async def list_messages_for_user(self, user_id: int) -> list[MessageRead]:
        return [
            m for m in self.messages.values()
            if m.from_user_id == user_id or m.to_user_id == user_id
        ]

    async def list_conversation(self, user_id: int, partner_id: int) -> list[MessageRead]:
        pair = {user_id, partner_id}
        messages = [
            m for m in self.messages.values()
            if {m.from_user_id, m.to_user_id} == pair
        ]
        return sorted(messages, key=lambda m: (m.sent_at, m.id))

    async def create_message(
        self,
        from_user_id: int,
        to_user_id: int,
        content: str,
        related_to_application_id: int | None = None,
    ) -> MessageRead:
        async with self.messages.lock:
            return self.messages.insert(
                lambda new_id: MessageRead(
                    id=new_id,
                    from_user_id=from_user_id,
                    to_user_id=to_user_id,
                    related_to_application_id=related_to_application_id,
                    content=content,
                    is_read=False,
                    sent_at=_now(),
                )
            )

    async def mark_message_read(self, message_id: int) -> MessageRead:
        async with self.messages.lock:
            return self.messages.replace(message_id, {"is_read": True})
