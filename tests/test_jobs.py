"""Job postings: creation, browsing, search and ownership."""
from tests.conftest import API, job_payload


async def test_new_job_is_open_and_listed(client, employer, create_job):
    job = await create_job(employer, title="Data Engineer")

    assert job["status"] == "Open"
    assert job["created_at"]
    assert job["employer_name"] == "Acme Corp"

    listing = await client.get(f"{API}/jobs")
    assert listing.status_code == 200
    assert job["id"] in [j["id"] for j in listing.json()]


async def test_create_ignores_client_status(client, employer):
    payload = job_payload(employer.profile_id, status="Closed")

    response = await client.post(f"{API}/jobs", json=payload, headers=employer.headers)

    assert response.status_code == 201
    assert response.json()["status"] == "Open"


async def test_get_job_anonymously(client, employer, create_job):
    job = await create_job(employer)

    response = await client.get(f"{API}/jobs/{job['id']}")

    assert response.status_code == 200
    assert response.json()["title"] == "Backend Engineer"
    assert response.json()["salary"] == 120000


async def test_delete_then_get_is_404(client, employer, create_job):
    job = await create_job(employer)

    response = await client.delete(f"{API}/jobs/{job['id']}", headers=employer.headers)
    assert response.status_code == 204

    assert (await client.get(f"{API}/jobs/{job['id']}")).status_code == 404
    assert job["id"] not in [j["id"] for j in (await client.get(f"{API}/jobs")).json()]


async def test_job_seeker_cannot_post_jobs(client, employer, job_seeker):
    response = await client.post(
        f"{API}/jobs",
        json=job_payload(employer.profile_id),
        headers=job_seeker.headers,
    )
    assert response.status_code == 403


async def test_employer_cannot_post_for_another_employer(client, make_employer):
    first = await make_employer("First Co")
    second = await make_employer("Second Co")

    response = await client.post(
        f"{API}/jobs",
        json=job_payload(second.profile_id),
        headers=first.headers,
    )

    assert response.status_code == 403


async def test_update_job_replaces_fields(client, employer, create_job):
    job = await create_job(employer)
    body = job_payload(employer.profile_id, title="Senior Backend Engineer", salary=150000)
    body.pop("employer_id")
    body["status"] = "Closed"

    response = await client.put(f"{API}/jobs/{job['id']}", json=body, headers=employer.headers)

    assert response.status_code == 200
    assert response.json()["title"] == "Senior Backend Engineer"
    assert response.json()["status"] == "Closed"


async def test_update_unknown_job_is_404(client, employer):
    body = job_payload(employer.profile_id)
    body.pop("employer_id")
    response = await client.put(f"{API}/jobs/9999", json=body, headers=employer.headers)
    assert response.status_code == 404


async def test_admin_may_delete_any_job(client, employer, create_job, admin):
    job = await create_job(employer)
    response = await client.delete(f"{API}/jobs/{job['id']}", headers=admin.headers)
    assert response.status_code == 204


async def test_searches(client, make_employer, create_job):
    acme = await make_employer("Acme Corp")
    globex = await make_employer("Globex")
    await create_job(acme, title="Python Developer", location="Nairobi", skills_required="Python, Django")
    await create_job(globex, title="Java Developer", location="Mombasa", skills_required="Java, Spring")

    by_title = await client.get(f"{API}/jobs/search/title", params={"title": "Python"})
    by_location = await client.get(f"{API}/jobs/search/location", params={"location": "Mombasa"})
    by_skill = await client.get(f"{API}/jobs/search/skill", params={"skill": "Spring"})
    by_company = await client.get(f"{API}/jobs/search/company", params={"company": "Acme"})

    assert [j["title"] for j in by_title.json()] == ["Python Developer"]
    assert [j["title"] for j in by_location.json()] == ["Java Developer"]
    assert [j["title"] for j in by_skill.json()] == ["Java Developer"]
    assert [j["title"] for j in by_company.json()] == ["Python Developer"]


async def test_jobs_by_employer(client, make_employer, create_job):
    acme = await make_employer("Acme Corp")
    globex = await make_employer("Globex")
    await create_job(acme, title="One")
    await create_job(acme, title="Two")
    await create_job(globex, title="Three")

    response = await client.get(f"{API}/jobs/employer/{acme.profile_id}", headers=acme.headers)

    assert response.status_code == 200
    assert sorted(j["title"] for j in response.json()) == ["One", "Two"]


async def test_negative_salary_is_rejected(client, employer):
    response = await client.post(
        f"{API}/jobs",
        json=job_payload(employer.profile_id, salary=-1),
        headers=employer.headers,
    )
    assert response.status_code == 422
