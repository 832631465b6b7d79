"""SQLAlchemy repository — adapts an AsyncSession to the storage contract.

The session is owned by the request dependency, which commits or rolls back;
this adapter only flushes so generated ids are available immediately.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Iterable

from sqlalchemy import and_, func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.errors import ConflictError, NotFoundError
from app.models.application import Application
from app.models.company_profile import CompanyProfile
from app.models.job import Job
from app.models.jobseeker_profile import JobSeekerProfile
from app.models.message import Message
from app.models.user import User
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

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class SqlRepository(Repository):
    def __init__(self, session: AsyncSession):
        self._session = session

    async def _add(self, row, conflict_message: str):
        self._session.add(row)
        try:
            await self._session.flush()
        except IntegrityError as e:
            await self._session.rollback()
            logger.info("Unique constraint rejected %s: %s", type(row).__name__, e.orig)
            raise ConflictError(conflict_message) from e
        return row

    async def _update(self, model, label: str, record_id: int, fields: dict[str, Any]):
        row = await self._session.get(model, record_id)
        if row is None:
            raise NotFoundError(f"{label} with ID {record_id} not found")
        for key, value in fields.items():
            setattr(row, key, value)
        await self._session.flush()
        return row

    async def _scalars(self, query) -> list:
        result = await self._session.execute(query)
        return list(result.scalars().all())

    # --- Users ---

    async def get_user(self, user_id: int) -> UserRecord | None:
        row = await self._session.get(User, user_id)
        return UserRecord.model_validate(row) if row else None

    async def get_user_by_username(self, username: str) -> UserRecord | None:
        result = await self._session.execute(select(User).where(User.username == username))
        row = result.scalar_one_or_none()
        return UserRecord.model_validate(row) if row else None

    async def get_user_by_email(self, email: str) -> UserRecord | None:
        result = await self._session.execute(select(User).where(User.email == email))
        row = result.scalar_one_or_none()
        return UserRecord.model_validate(row) if row else None

    async def create_user(
        self, username: str, email: str, password_hash: str, user_type: str
    ) -> UserRecord:
        user = User(
            username=username,
            email=email,
            password_hash=password_hash,
            user_type=user_type,
            created_at=_now(),
        )
        await self._add(user, "Username or email already registered")
        return UserRecord.model_validate(user)

    # --- Job seeker profiles ---

    async def get_jobseeker_profile(self, profile_id: int) -> JobSeekerProfileRead | None:
        row = await self._session.get(JobSeekerProfile, profile_id)
        return JobSeekerProfileRead.model_validate(row) if row else None

    async def get_jobseeker_profile_by_user(self, user_id: int) -> JobSeekerProfileRead | None:
        result = await self._session.execute(
            select(JobSeekerProfile).where(JobSeekerProfile.user_id == user_id)
        )
        row = result.scalar_one_or_none()
        return JobSeekerProfileRead.model_validate(row) if row else None

    async def create_jobseeker_profile(
        self, user_id: int, data: JobSeekerProfileCreate
    ) -> JobSeekerProfileRead:
        profile = JobSeekerProfile(user_id=user_id, **data.model_dump())
        await self._add(profile, "Job seeker profile already exists")
        return JobSeekerProfileRead.model_validate(profile)

    async def update_jobseeker_profile(
        self, profile_id: int, fields: dict[str, Any]
    ) -> JobSeekerProfileRead:
        row = await self._update(JobSeekerProfile, "Job seeker profile", profile_id, fields)
        return JobSeekerProfileRead.model_validate(row)

    # --- Company profiles ---

    async def get_company_profile(self, profile_id: int) -> CompanyProfileRead | None:
        row = await self._session.get(CompanyProfile, profile_id)
        return CompanyProfileRead.model_validate(row) if row else None

    async def get_company_profile_by_user(self, user_id: int) -> CompanyProfileRead | None:
        result = await self._session.execute(
            select(CompanyProfile).where(CompanyProfile.user_id == user_id)
        )
        row = result.scalar_one_or_none()
        return CompanyProfileRead.model_validate(row) if row else None

    async def list_company_profiles(self) -> list[CompanyProfileRead]:
        rows = await self._scalars(select(CompanyProfile).order_by(CompanyProfile.id))
        return [CompanyProfileRead.model_validate(row) for row in rows]

    async def create_company_profile(
        self, user_id: int, data: CompanyProfileCreate
    ) -> CompanyProfileRead:
        profile = CompanyProfile(user_id=user_id, **data.model_dump())
        await self._add(profile, "Company profile already exists")
        return CompanyProfileRead.model_validate(profile)

    async def update_company_profile(
        self, profile_id: int, fields: dict[str, Any]
    ) -> CompanyProfileRead:
        row = await self._update(CompanyProfile, "Company profile", profile_id, fields)
        return CompanyProfileRead.model_validate(row)

    # --- Jobs ---

    async def get_job(self, job_id: int) -> JobRead | None:
        row = await self._session.get(Job, job_id)
        return JobRead.model_validate(row) if row else None

    async def list_jobs(self, filters: JobFilters | None = None) -> list[JobRead]:
        query = select(Job)

        if filters is not None:
            if filters.query:
                query = query.where(
                    or_(
                        Job.title.ilike(f"%{filters.query}%"),
                        Job.description.ilike(f"%{filters.query}%"),
                    )
                )
            if filters.location:
                query = query.where(Job.location.ilike(f"%{filters.location}%"))
            if filters.type:
                query = query.where(Job.type == filters.type)
            if filters.company_id is not None:
                query = query.where(Job.company_id == filters.company_id)

        rows = await self._scalars(query.order_by(Job.id))
        return [JobRead.model_validate(row) for row in rows]

    async def create_job(self, company_id: int, data: JobCreate) -> JobRead:
        job = Job(company_id=company_id, created_at=_now(), is_active=True, **data.model_dump())
        await self._add(job, "Job could not be created")
        return JobRead.model_validate(job)

    async def update_job(self, job_id: int, fields: dict[str, Any]) -> JobRead:
        row = await self._update(Job, "Job", job_id, fields)
        return JobRead.model_validate(row)

    async def delete_job(self, job_id: int) -> bool:
        row = await self._session.get(Job, job_id)
        if row is None:
            return False
        await self._session.delete(row)
        await self._session.flush()
        return True

    # --- Applications ---

    async def get_application(self, application_id: int) -> ApplicationRead | None:
        row = await self._session.get(Application, application_id)
        return ApplicationRead.model_validate(row) if row else None

    async def find_application(self, job_id: int, job_seeker_id: int) -> ApplicationRead | None:
        result = await self._session.execute(
            select(Application).where(
                Application.job_id == job_id,
                Application.job_seeker_id == job_seeker_id,
            )
        )
        row = result.scalar_one_or_none()
        return ApplicationRead.model_validate(row) if row else None

    async def list_applications(
        self,
        job_seeker_id: int | None = None,
        job_ids: Iterable[int] | None = None,
    ) -> list[ApplicationRead]:
        query = select(Application)
        if job_seeker_id is not None:
            query = query.where(Application.job_seeker_id == job_seeker_id)
        if job_ids is not None:
            query = query.where(Application.job_id.in_(list(job_ids)))
        rows = await self._scalars(query.order_by(Application.id))
        return [ApplicationRead.model_validate(row) for row in rows]

    async def count_applications(self, job_id: int) -> int:
        result = await self._session.execute(
            select(func.count(Application.id)).where(Application.job_id == job_id)
        )
        return result.scalar() or 0

    async def create_application(
        self, job_id: int, job_seeker_id: int, cover_letter: str | None
    ) -> ApplicationRead:
        now = _now()
        application = Application(
            job_id=job_id,
            job_seeker_id=job_seeker_id,
            status="pending",
            cover_letter=cover_letter,
            applied_at=now,
            updated_at=now,
        )
        await self._add(application, "You have already applied to this job")
        return ApplicationRead.model_validate(application)

    async def update_application(
        self, application_id: int, fields: dict[str, Any]
    ) -> ApplicationRead:
        row = await self._update(Application, "Application", application_id, fields)
        return ApplicationRead.model_validate(row)

    # --- Messages ---

    async def get_message(self, message_id: int) -> MessageRead | None:
        row = await self._session.get(Message, message_id)
        return MessageRead.model_validate(row) if row else None

    async def list_messages_for_user(self, user_id: int) -> list[MessageRead]:
        rows = await self._scalars(
            select(Message)
            .where(or_(Message.from_user_id == user_id, Message.to_user_id == user_id))
            .order_by(Message.id)
        )
        return [MessageRead.model_validate(row) for row in rows]

    async def list_conversation(self, user_id: int, partner_id: int) -> list[MessageRead]:
        rows = await self._scalars(
            select(Message)
            .where(
                or_(
                    and_(Message.from_user_id == user_id, Message.to_user_id == partner_id),
                    and_(Message.from_user_id == partner_id, Message.to_user_id == user_id),
                )
            )
            .order_by(Message.sent_at, Message.id)
        )
        return [MessageRead.model_validate(row) for row in rows]

    async def create_message(
        self,
        from_user_id: int,
        to_user_id: int,
        content: str,
        related_to_application_id: int | None = None,
    ) -> MessageRead:
        message = Message(
            from_user_id=from_user_id,
            to_user_id=to_user_id,
            related_to_application_id=related_to_application_id,
            content=content,
            is_read=False,
            sent_at=_now(),
        )
        await self._add(message, "Message could not be stored")
        return MessageRead.model_validate(message)

    async def mark_message_read(self, message_id: int) -> MessageRead:
        row = await self._update(Message, "Message", message_id, {"is_read": True})
        return MessageRead.model_validate(row)
