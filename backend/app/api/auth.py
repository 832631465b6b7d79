"""Account endpoints — register, login, logout, current user."""

from fastapi import APIRouter, Depends, Request

from app.dependencies.auth import login_session, logout_session, require_user
from app.dependencies.storage import get_repository
from app.repositories.base import Repository
from app.schemas import LoginRequest, UserCreate, UserPublic, UserRecord
from app.services import auth_service

router = APIRouter(tags=["auth"])


@router.post("/register", response_model=UserPublic, status_code=201)
async def register(
    request: Request,
    data: UserCreate,
    repo: Repository = Depends(get_repository),
):
    """Create an account and log it in."""
    user = await auth_service.register_user(repo, data)
    login_session(request, user)
    return user.public()


@router.post("/login", response_model=UserPublic)
async def login(
    request: Request,
    data: LoginRequest,
    repo: Repository = Depends(get_repository),
):
    user = await auth_service.authenticate(repo, data.username, data.password)
    login_session(request, user)
    return user.public()


@router.post("/logout")
async def logout(request: Request):
    logout_session(request)
    return {"message": "Logged out"}


@router.get("/user", response_model=UserPublic)
async def current_user(user: UserRecord = Depends(require_user)):
    return user.public()
