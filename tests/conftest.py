"""
Shared fixtures: an in-memory SQLite database per test, an HTTP client
bound to the app, and helpers that create logged-in users of each role.
"""
import os

# Settings are read at import time
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["EMAIL_BACKEND"] = "console"
os.environ["ENVIRONMENT"] = "test"

import uuid
from dataclasses import dataclass
from typing import List, Optional, Tuple

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import hirehub.models  # noqa: F401
from hirehub.core.database import Base, get_db
from hirehub.core.email import get_email_sender
from hirehub.core.security import hash_password
from hirehub.main import app
from hirehub.models.user import ROLE_ADMIN, ROLE_EMPLOYER, ROLE_JOB_SEEKER, User

API = "/api/v1"


class FakeEmailSender:
    """Records every message instead of calling the mail provider."""

    def __init__(self):
        self.sent: List[Tuple[str, str, str]] = []
        self.fail = False

    async def send(self, to_email: str, subject: str, html_body: str) -> bool:
        if self.fail:
            return False
        self.sent.append((to_email, subject, html_body))
        return True

    def subjects_for(self, email: str) -> List[str]:
        return [subject for to, subject, _ in self.sent if to == email]


@dataclass
class AuthedUser:
    id: str
    email: str
    password: str
    role: str
    token: str
    profile_id: Optional[str] = None

    @property
    def headers(self) -> dict:
        return {"Authorization": f"Bearer {self.token}"}


@pytest.fixture
async def engine():
    test_engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
    )

    @event.listens_for(test_engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_maker(engine):
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest.fixture
async def db(session_maker):
    async with session_maker() as session:
        yield session


@pytest.fixture
def email_sender():
    return FakeEmailSender()


@pytest.fixture
async def client(session_maker, email_sender):
    async def _get_db():
        async with session_maker() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_email_sender] = lambda: email_sender

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


def registration_payload(role: str = ROLE_JOB_SEEKER, **overrides) -> dict:
    payload = {
        "full_name": "Test User",
        "email": f"{role.lower()}-{uuid.uuid4().hex[:8]}@example.com",
        "password": "secret123",
        "role": role,
        "date_of_birth": "1998-04-12",
        "gender": "Female",
        "address": "1 Test Street",
    }
    payload.update(overrides)
    return payload


async def login(client: AsyncClient, email: str, password: str) -> dict:
    response = await client.post(f"{API}/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return response.json()


@pytest.fixture
def make_user(client, session_maker):
    """Create and log in a user; admins are inserted directly."""

    async def _make(role: str = ROLE_JOB_SEEKER, **overrides) -> AuthedUser:
        payload = registration_payload(role, **overrides)
        if role == ROLE_ADMIN:
            async with session_maker() as session:
                session.add(
                    User(
                        full_name=payload["full_name"],
                        email=payload["email"],
                        password_hash=hash_password(payload["password"]),
                        role=ROLE_ADMIN,
                    )
                )
                await session.commit()
        else:
            response = await client.post(f"{API}/auth/register", json=payload)
            assert response.status_code == 201, response.text

        auth = await login(client, payload["email"], payload["password"])
        return AuthedUser(
            id=auth["user_id"],
            email=payload["email"],
            password=payload["password"],
            role=role,
            token=auth["token"],
        )

    return _make


@pytest.fixture
async def admin(make_user) -> AuthedUser:
    return await make_user(ROLE_ADMIN, full_name="Ada Admin")


@pytest.fixture
def make_employer(client, make_user):
    async def _make(company_name: str = "Acme Corp") -> AuthedUser:
        user = await make_user(ROLE_EMPLOYER, full_name="Eve Employer")
        response = await client.post(
            f"{API}/employers",
            json={
                "user_id": user.id,
                "company_name": company_name,
                "position": "Recruiter",
                "contact_info": "hr@acme.example",
            },
            headers=user.headers,
        )
        assert response.status_code == 201, response.text
        user.profile_id = response.json()["id"]
        return user

    return _make


@pytest.fixture
async def employer(make_employer) -> AuthedUser:
    return await make_employer()


@pytest.fixture
def make_job_seeker(client, make_user):
    async def _make(full_name: str = "Jo Seeker", college: str = "State University") -> AuthedUser:
        user = await make_user(ROLE_JOB_SEEKER, full_name=full_name)
        response = await client.post(
            f"{API}/job-seekers",
            json={
                "user_id": user.id,
                "education_details": "BSc Computer Science",
                "skills": "Python, SQL",
                "college": college,
                "work_status": "Fresher",
                "experience": "None",
            },
            headers=user.headers,
        )
        assert response.status_code == 201, response.text
        user.profile_id = response.json()["id"]
        return user

    return _make


@pytest.fixture
async def job_seeker(make_job_seeker) -> AuthedUser:
    return await make_job_seeker()


def job_payload(employer_id: str, **overrides) -> dict:
    payload = {
        "employer_id": employer_id,
        "title": "Backend Engineer",
        "description": "Build APIs.",
        "location": "Nairobi",
        "salary": 120000,
        "skills_required": "Python, FastAPI",
        "academic_eligibility": "BSc",
        "allowed_batches": "2023",
        "backlogs": 0,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def create_job(client):
    async def _create(employer: AuthedUser, **overrides) -> dict:
        response = await client.post(
            f"{API}/jobs",
            json=job_payload(employer.profile_id, **overrides),
            headers=employer.headers,
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def create_resume(client):
    async def _create(job_seeker: AuthedUser, **overrides) -> dict:
        payload = {
            "job_seeker_id": job_seeker.profile_id,
            "resume_name": f"CV {uuid.uuid4().hex[:6]}",
            "file_path": "https://files.example.com/cv.pdf",
            "file_type": "pdf",
            "parsed_skills": "Python",
            "is_default": False,
        }
        payload.update(overrides)
        response = await client.post(f"{API}/resumes", json=payload, headers=job_seeker.headers)
        assert response.status_code == 201, response.text
        return response.json()

    return _create
