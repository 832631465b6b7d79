"""Shared fixtures: a fresh in-memory repository per test and API clients bound to it."""

import os

os.environ.setdefault("STORAGE_BACKEND", "memory")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest
from fastapi.testclient import TestClient

from app.dependencies.storage import get_repository
from app.main import app
from app.repositories.memory import InMemoryRepository
from app.schemas import CompanyProfileCreate, JobCreate, JobSeekerProfileCreate


@pytest.fixture
def repo():
    return InMemoryRepository()


@pytest.fixture
def make_client(repo):
    """Factory for independent clients (one cookie jar each) sharing the test repository."""
    app.dependency_overrides[get_repository] = lambda: repo
    clients = []

    def _make():
        client = TestClient(app)
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.close()
    app.dependency_overrides.clear()


@pytest.fixture
def client(make_client):
    return make_client()


# --- Service-level builders (skip bcrypt; the hash is never checked here) ---

@pytest.fixture
def add_user(repo):
    async def _add(username: str, user_type: str):
        return await repo.create_user(
            username=username,
            email=f"{username}@example.com",
            password_hash="x",
            user_type=user_type,
        )
    return _add


@pytest.fixture
def employer_with_company(repo, add_user):
    async def _make(username: str = "acme", company_name: str = "Acme"):
        user = await add_user(username, "employer")
        company = await repo.create_company_profile(
            user.id, CompanyProfileCreate(name=company_name, logo_url=f"https://{username}.test/logo.png")
        )
        return user, company
    return _make


@pytest.fixture
def seeker_with_profile(repo, add_user):
    async def _make(username: str = "sam", first_name: str = "Sam", last_name: str = "Lee"):
        user = await add_user(username, "jobSeeker")
        profile = await repo.create_jobseeker_profile(
            user.id, JobSeekerProfileCreate(first_name=first_name, last_name=last_name)
        )
        return user, profile
    return _make


@pytest.fixture
def job_fields():
    def _fields(**overrides) -> JobCreate:
        fields = {
            "title": "Engineer",
            "description": "Build things",
            "location": "Remote",
            "type": "Full-time",
        }
        fields.update(overrides)
        return JobCreate(**fields)
    return _fields
