"""Account registration and login — password hashing with bcrypt."""

import logging

import bcrypt

from app.errors import ConflictError, Unauthenticated
from app.repositories.base import Repository
from app.schemas import UserCreate, UserRecord

logger = logging.getLogger(__name__)


def hash_password(password: str) -> str:
    """Hash a plaintext password using bcrypt."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """Check a plaintext password against a bcrypt hash."""
    return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))


async def register_user(repo: Repository, data: UserCreate) -> UserRecord:
    """Create an account; username and email must both be unused."""
    username = data.username
    email = data.email.lower()

    if await repo.get_user_by_username(username):
        raise ConflictError("Username already exists")
    if await repo.get_user_by_email(email):
        raise ConflictError("Email already registered")

    user = await repo.create_user(
        username=username,
        email=email,
        password_hash=hash_password(data.password),
        user_type=data.user_type,
    )
    logger.info("Registered %s user %s", user.user_type, user.id)
    return user


async def authenticate(repo: Repository, username: str, password: str) -> UserRecord:
    user = await repo.get_user_by_username(username.strip())
    if not user or not verify_password(password, user.password_hash):
        raise Unauthenticated("Invalid username or password")
    return user
