"""Authentication dependencies for FastAPI routes."""

from fastapi import Depends, Request

from app.dependencies.storage import get_repository
from app.errors import AuthorizationError, Unauthenticated
from app.repositories.base import Repository
from app.schemas import UserRecord

SESSION_USER_KEY = "user_id"


async def get_current_user(
    request: Request, repo: Repository = Depends(get_repository)
) -> UserRecord | None:
    """Return the logged-in user or None."""
    user_id = request.session.get(SESSION_USER_KEY)
    if not user_id:
        return None
    return await repo.get_user(int(user_id))


async def require_user(user: UserRecord | None = Depends(get_current_user)) -> UserRecord:
    """Return the logged-in user or raise 401."""
    if user is None:
        raise Unauthenticated()
    return user


async def require_employer(user: UserRecord = Depends(require_user)) -> UserRecord:
    if not user.is_employer:
        raise AuthorizationError("Forbidden - Employers only")
    return user


async def require_job_seeker(user: UserRecord = Depends(require_user)) -> UserRecord:
    if not user.is_job_seeker:
        raise AuthorizationError("Forbidden - Job seekers only")
    return user


def login_session(request: Request, user: UserRecord) -> None:
    request.session.clear()
    request.session[SESSION_USER_KEY] = user.id


def logout_session(request: Request) -> None:
    request.session.clear()
