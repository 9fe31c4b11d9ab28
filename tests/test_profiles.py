"""Employer and job seeker profiles."""
from tests.conftest import API


async def test_employer_profile_round_trip(client, employer, admin):
    response = await client.get(f"{API}/employers/{employer.profile_id}", headers=admin.headers)

    assert response.status_code == 200
    body = response.json()
    assert body["company_name"] == "Acme Corp"
    assert body["user_id"] == employer.id
    assert body["user_full_name"] == "Eve Employer"
    assert body["user_email"] == employer.email


async def test_employer_by_user(client, employer):
    response = await client.get(f"{API}/employers/by-user/{employer.id}", headers=employer.headers)
    assert response.status_code == 200
    assert response.json()["id"] == employer.profile_id


async def test_second_employer_profile_conflicts(client, employer):
    response = await client.post(
        f"{API}/employers",
        json={"user_id": employer.id, "company_name": "Other Co"},
        headers=employer.headers,
    )
    assert response.status_code == 409
    assert response.json()["code"] == "PROFILE_EXISTS"


async def test_employer_cannot_create_profile_for_someone_else(client, make_user):
    employer_user = await make_user("Employer")
    other = await make_user("Employer")

    response = await client.post(
        f"{API}/employers",
        json={"user_id": other.id, "company_name": "Hijack Ltd"},
        headers=employer_user.headers,
    )

    assert response.status_code == 403


async def test_job_seeker_cannot_create_employer_profile(client, make_user):
    user = await make_user("JobSeeker")
    response = await client.post(
        f"{API}/employers",
        json={"user_id": user.id, "company_name": "Nope"},
        headers=user.headers,
    )
    assert response.status_code == 403


async def test_update_employer(client, employer):
    response = await client.put(
        f"{API}/employers/{employer.profile_id}",
        json={"company_name": "Acme Holdings", "position": "CTO", "contact_info": "cto@acme.example"},
        headers=employer.headers,
    )

    assert response.status_code == 200
    assert response.json()["company_name"] == "Acme Holdings"
    assert response.json()["position"] == "CTO"


async def test_search_employers_by_company(client, make_employer, job_seeker):
    await make_employer("Globex 100% Remote")
    await make_employer("Initech")

    response = await client.get(
        f"{API}/employers/search",
        params={"company_name": "100%"},
        headers=job_seeker.headers,
    )

    assert response.status_code == 200
    assert [e["company_name"] for e in response.json()] == ["Globex 100% Remote"]


async def test_employer_by_job(client, employer, create_job, job_seeker):
    job = await create_job(employer)

    response = await client.get(f"{API}/employers/by-job/{job['id']}", headers=job_seeker.headers)

    assert response.status_code == 200
    assert response.json()["id"] == employer.profile_id


async def test_delete_employer_then_get_is_404(client, employer, admin):
    response = await client.delete(f"{API}/employers/{employer.profile_id}", headers=employer.headers)
    assert response.status_code == 204

    response = await client.get(f"{API}/employers/{employer.profile_id}", headers=admin.headers)
    assert response.status_code == 404


async def test_job_seeker_profile_round_trip(client, job_seeker, admin):
    response = await client.get(f"{API}/job-seekers/{job_seeker.profile_id}", headers=admin.headers)

    assert response.status_code == 200
    body = response.json()
    assert body["college"] == "State University"
    assert body["skills"] == "Python, SQL"
    assert body["user_full_name"] == "Jo Seeker"


async def test_search_job_seekers(client, make_job_seeker, employer):
    await make_job_seeker(full_name="Ann", college="MIT")
    await make_job_seeker(full_name="Ben", college="Stanford")

    by_college = await client.get(
        f"{API}/job-seekers/search/college",
        params={"college": "Stan"},
        headers=employer.headers,
    )
    by_skill = await client.get(
        f"{API}/job-seekers/search/skill",
        params={"skill": "Python"},
        headers=employer.headers,
    )

    assert [s["user_full_name"] for s in by_college.json()] == ["Ben"]
    assert len(by_skill.json()) == 2


async def test_update_job_seeker(client, job_seeker):
    response = await client.put(
        f"{API}/job-seekers/{job_seeker.profile_id}",
        json={"skills": "Go, Rust", "work_status": "Employed"},
        headers=job_seeker.headers,
    )

    assert response.status_code == 200
    assert response.json()["skills"] == "Go, Rust"
    assert response.json()["work_status"] == "Employed"


async def test_delete_job_seeker_without_dependents(client, job_seeker, admin):
    response = await client.delete(f"{API}/job-seekers/{job_seeker.profile_id}", headers=job_seeker.headers)
    assert response.status_code == 204

    response = await client.get(f"{API}/job-seekers/{job_seeker.profile_id}", headers=admin.headers)
    assert response.status_code == 404


async def test_delete_job_seeker_with_resume_conflicts(client, job_seeker, create_resume, admin):
    await create_resume(job_seeker)

    response = await client.delete(f"{API}/job-seekers/{job_seeker.profile_id}", headers=job_seeker.headers)

    assert response.status_code == 409
    assert response.json()["code"] == "JOB_SEEKER_HAS_DEPENDENTS"
    still_there = await client.get(f"{API}/job-seekers/{job_seeker.profile_id}", headers=admin.headers)
    assert still_there.status_code == 200


async def test_admin_cannot_give_job_seeker_an_employer_profile(client, job_seeker, admin):
    response = await client.post(
        f"{API}/employers",
        json={"user_id": job_seeker.id, "company_name": "Wrong Role Inc"},
        headers=admin.headers,
    )

    assert response.status_code == 400
    assert response.json()["code"] == "ROLE_MISMATCH"
    missing = await client.get(f"{API}/employers/by-user/{job_seeker.id}", headers=admin.headers)
    assert missing.status_code == 404


async def test_admin_cannot_give_employer_a_job_seeker_profile(client, employer, admin):
    response = await client.post(
        f"{API}/job-seekers",
        json={"user_id": employer.id, "skills": "Python"},
        headers=admin.headers,
    )

    assert response.status_code == 400
    assert response.json()["code"] == "ROLE_MISMATCH"
