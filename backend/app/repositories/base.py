"""Storage contract shared by the in-memory and SQL adapters.

Every method returns schema records (never ORM objects), so services and
access rules are unaware of which adapter backs them. Lookups that miss return
None; updates on a missing id raise NotFoundError; uniqueness violations raise
ConflictError.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterable

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


class Repository(ABC):
    # --- Users ---

    @abstractmethod
    async def get_user(self, user_id: int) -> UserRecord | None: ...

    @abstractmethod
    async def get_user_by_username(self, username: str) -> UserRecord | None: ...

    @abstractmethod
    async def get_user_by_email(self, email: str) -> UserRecord | None: ...

    @abstractmethod
    async def create_user(
        self, username: str, email: str, password_hash: str, user_type: str
    ) -> UserRecord:
        """Persist a user; ConflictError when username or email is taken."""

    # --- Job seeker profiles ---

    @abstractmethod
    async def get_jobseeker_profile(self, profile_id: int) -> JobSeekerProfileRead | None: ...

    @abstractmethod
    async def get_jobseeker_profile_by_user(self, user_id: int) -> JobSeekerProfileRead | None: ...

    @abstractmethod
    async def create_jobseeker_profile(
        self, user_id: int, data: JobSeekerProfileCreate
    ) -> JobSeekerProfileRead:
        """Persist a profile; ConflictError when the user already has one."""

    @abstractmethod
    async def update_jobseeker_profile(
        self, profile_id: int, fields: dict[str, Any]
    ) -> JobSeekerProfileRead: ...

    # --- Company profiles ---

    @abstractmethod
    async def get_company_profile(self, profile_id: int) -> CompanyProfileRead | None: ...

    @abstractmethod
    async def get_company_profile_by_user(self, user_id: int) -> CompanyProfileRead | None: ...

    @abstractmethod
    async def list_company_profiles(self) -> list[CompanyProfileRead]: ...

    @abstractmethod
    async def create_company_profile(
        self, user_id: int, data: CompanyProfileCreate
    ) -> CompanyProfileRead:
        """Persist a profile; ConflictError when the user already has one."""

    @abstractmethod
    async def update_company_profile(
        self, profile_id: int, fields: dict[str, Any]
    ) -> CompanyProfileRead: ...

    # --- Jobs ---

    @abstractmethod
    async def get_job(self, job_id: int) -> JobRead | None: ...

    @abstractmethod
    async def list_jobs(self, filters: JobFilters | None = None) -> list[JobRead]:
        """Jobs in id order.

        `query` matches title or description and `location` matches location,
        both as case-insensitive substrings; `type` and `company_id` match exactly.
        Filters combine with AND.
        """

    @abstractmethod
    async def create_job(self, company_id: int, data: JobCreate) -> JobRead: ...

    @abstractmethod
    async def update_job(self, job_id: int, fields: dict[str, Any]) -> JobRead: ...

    @abstractmethod
    async def delete_job(self, job_id: int) -> bool:
        """Remove a job; False when it did not exist."""

    # --- Applications ---

    @abstractmethod
    async def get_application(self, application_id: int) -> ApplicationRead | None: ...

    @abstractmethod
    async def find_application(self, job_id: int, job_seeker_id: int) -> ApplicationRead | None: ...

    @abstractmethod
    async def list_applications(
        self,
        job_seeker_id: int | None = None,
        job_ids: Iterable[int] | None = None,
    ) -> list[ApplicationRead]: ...

    @abstractmethod
    async def count_applications(self, job_id: int) -> int: ...

    @abstractmethod
    async def create_application(
        self, job_id: int, job_seeker_id: int, cover_letter: str | None
    ) -> ApplicationRead:
        """Persist a pending application; ConflictError when the pair already applied."""

    @abstractmethod
    async def update_application(
        self, application_id: int, fields: dict[str, Any]
    ) -> ApplicationRead: ...

    # --- Messages ---

    @abstractmethod
    async def get_message(self, message_id: int) -> MessageRead | None: ...

    @abstractmethod
    async def list_messages_for_user(self, user_id: int) -> list[MessageRead]:
        """Messages sent or received by the user, in id order."""

    @abstractmethod
    async def list_conversation(self, user_id: int, partner_id: int) -> list[MessageRead]:
        """Messages between two users, ordered by sent_at then id."""

    @abstractmethod
    async def create_message(
        self,
        from_user_id: int,
        to_user_id: int,
        content: str,
        related_to_application_id: int | None = None,
    ) -> MessageRead: ...

    @abstractmethod
    async def mark_message_read(self, message_id: int) -> MessageRead: ...
