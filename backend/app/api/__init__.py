"""API router aggregation."""

from fastapi import APIRouter

from app.api.auth import router as auth_router
from app.api.profiles import router as profiles_router
from app.api.jobs import router as jobs_router
from app.api.applications import router as applications_router
from app.api.messages import router as messages_router

router = APIRouter(prefix="/api")

router.include_router(auth_router)
router.include_router(profiles_router)
router.include_router(jobs_router)
router.include_router(applications_router)
router.include_router(messages_router)
