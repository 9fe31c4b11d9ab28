"""
Seed script - populates the database with sample data for development.

Usage:
    python -m scripts.seed

Idempotent: existing users (matched by email) are left alone.
"""
import asyncio

from sqlalchemy import select

from hirehub.core.database import async_session_maker, init_db
from hirehub.core.security import hash_password
from hirehub.models import Employer, Job, JobSeeker, Resume, User
from hirehub.models.job import JOB_STATUS_OPEN
from hirehub.models.user import ROLE_ADMIN, ROLE_EMPLOYER, ROLE_JOB_SEEKER

# ─── Users ─────────────────────────────────────────────────────
# Admins cannot self-register, so this is how the first one is created.

ADMIN_USER = {
    "email": "admin@hirehub.dev",
    "password": "admin123",
    "full_name": "Admin User",
    "role": ROLE_ADMIN,
}

EMPLOYER_USER = {
    "email": "recruiter@hirehub.dev",
    "password": "recruit123",
    "full_name": "Rita Recruiter",
    "role": ROLE_EMPLOYER,
}

JOB_SEEKER_USER = {
    "email": "seeker@hirehub.dev",
    "password": "seeker123",
    "full_name": "Sam Seeker",
    "role": ROLE_JOB_SEEKER,
}

SAMPLE_JOBS = [
    {
        "title": "Backend Engineer",
        "description": "Build and operate Python APIs backed by PostgreSQL.",
        "location": "Nairobi",
        "salary": 180000,
        "skills_required": "Python, FastAPI, PostgreSQL",
        "academic_eligibility": "BSc Computer Science or equivalent",
        "allowed_batches": "2021, 2022, 2023",
        "backlogs": 0,
    },
    {
        "title": "Frontend Developer",
        "description": "Own the candidate-facing web app.",
        "location": "Remote",
        "salary": 150000,
        "skills_required": "TypeScript, React",
        "academic_eligibility": "Any degree",
        "allowed_batches": "2022, 2023",
        "backlogs": 1,
    },
]


async def _get_or_create_user(db, spec: dict) -> User:
    existing = (await db.execute(select(User).where(User.email == spec["email"]))).scalar_one_or_none()
    if existing:
        print(f"  User {spec['email']} already exists, skipping...")
        return existing

    user = User(
        email=spec["email"],
        password_hash=hash_password(spec["password"]),
        full_name=spec["full_name"],
        role=spec["role"],
    )
    db.add(user)
    await db.flush()
    print(f"  Created {spec['role']} user: {spec['email']}")
    return user


async def seed():
    """Run the seed process."""
    print("Seeding database...")

    await init_db()
    print("  Tables created")

    async with async_session_maker() as db:
        await _get_or_create_user(db, ADMIN_USER)
        employer_user = await _get_or_create_user(db, EMPLOYER_USER)
        seeker_user = await _get_or_create_user(db, JOB_SEEKER_USER)

        # ── Profiles ───────────────────────────────────────
        employer = (
            await db.execute(select(Employer).where(Employer.user_id == employer_user.id))
        ).scalar_one_or_none()
        if employer is None:
            employer = Employer(
                user_id=employer_user.id,
                company_name="Acme Talent Ltd",
                position="Head of Recruiting",
                contact_info="careers@acme.example",
            )
            db.add(employer)
            await db.flush()
            print("  Created employer profile")

        job_seeker = (
            await db.execute(select(JobSeeker).where(JobSeeker.user_id == seeker_user.id))
        ).scalar_one_or_none()
        if job_seeker is None:
            job_seeker = JobSeeker(
                user_id=seeker_user.id,
                education_details="BSc Computer Science",
                skills="Python, SQL, Docker",
                college="University of Nairobi",
                work_status="Fresher",
                experience="1 year internship",
            )
            db.add(job_seeker)
            await db.flush()
            db.add(
                Resume(
                    job_seeker_id=job_seeker.id,
                    resume_name="General CV",
                    file_path="https://example.com/cv/sam-seeker.pdf",
                    file_type="pdf",
                    parsed_skills="Python, SQL, Docker",
                    is_default=True,
                )
            )
            print("  Created job seeker profile with a default resume")

        # ── Jobs ───────────────────────────────────────────
        existing = await db.execute(select(Job).where(Job.employer_id == employer.id).limit(1))
        if existing.scalar_one_or_none():
            print("  Jobs already exist, skipping...")
        else:
            for job_data in SAMPLE_JOBS:
                db.add(Job(employer_id=employer.id, status=JOB_STATUS_OPEN, **job_data))
            print(f"  Created {len(SAMPLE_JOBS)} jobs")

        await db.commit()
        print()
        print("Seed complete!")
        for spec in (ADMIN_USER, EMPLOYER_USER, JOB_SEEKER_USER):
            print(f"  {spec['role']}: {spec['email']} / {spec['password']}")


if __name__ == "__main__":
    asyncio.run(seed())
