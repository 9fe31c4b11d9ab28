"""Resumes: ownership, default selection, deletion guards and uploads."""
from hirehub.core import storage
from tests.conftest import API


async def _default_flags(client, job_seeker) -> dict:
    response = await client.get(
        f"{API}/resumes/job-seeker/{job_seeker.profile_id}",
        headers=job_seeker.headers,
    )
    assert response.status_code == 200
    return {r["id"]: r["is_default"] for r in response.json()}


async def test_create_and_get_resume(client, job_seeker, create_resume):
    resume = await create_resume(job_seeker, resume_name="Main CV")

    response = await client.get(f"{API}/resumes/{resume['id']}", headers=job_seeker.headers)

    assert response.status_code == 200
    assert response.json()["resume_name"] == "Main CV"
    assert response.json()["job_seeker_name"] == "Jo Seeker"


async def test_duplicate_name_conflicts(client, job_seeker, create_resume):
    await create_resume(job_seeker, resume_name="Main CV")

    response = await client.post(
        f"{API}/resumes",
        json={
            "job_seeker_id": job_seeker.profile_id,
            "resume_name": "Main CV",
            "file_path": "https://files.example.com/other.pdf",
        },
        headers=job_seeker.headers,
    )

    assert response.status_code == 409
    assert response.json()["code"] == "RESUME_NAME_EXISTS"


async def test_same_name_allowed_for_different_job_seekers(make_job_seeker, create_resume):
    first = await make_job_seeker(full_name="A")
    second = await make_job_seeker(full_name="B")

    await create_resume(first, resume_name="CV")
    await create_resume(second, resume_name="CV")


async def test_set_default_leaves_exactly_one(client, job_seeker, create_resume):
    first = await create_resume(job_seeker, is_default=True)
    second = await create_resume(job_seeker)
    third = await create_resume(job_seeker, is_default=True)

    flags = await _default_flags(client, job_seeker)
    assert flags == {first["id"]: False, second["id"]: False, third["id"]: True}

    response = await client.post(
        f"{API}/resumes/job-seeker/{job_seeker.profile_id}/set-default/{second['id']}",
        headers=job_seeker.headers,
    )
    assert response.status_code == 204

    flags = await _default_flags(client, job_seeker)
    assert [rid for rid, is_default in flags.items() if is_default] == [second["id"]]

    default = await client.get(
        f"{API}/resumes/job-seeker/{job_seeker.profile_id}/default",
        headers=job_seeker.headers,
    )
    assert default.json()["id"] == second["id"]


async def test_set_default_with_foreign_resume_is_404(client, make_job_seeker, create_resume):
    owner = await make_job_seeker(full_name="Owner")
    other = await make_job_seeker(full_name="Other")
    resume = await create_resume(other)

    response = await client.post(
        f"{API}/resumes/job-seeker/{owner.profile_id}/set-default/{resume['id']}",
        headers=owner.headers,
    )

    assert response.status_code == 404


async def test_no_default_resume_is_404(client, job_seeker, create_resume):
    await create_resume(job_seeker)

    response = await client.get(
        f"{API}/resumes/job-seeker/{job_seeker.profile_id}/default",
        headers=job_seeker.headers,
    )

    assert response.status_code == 404


async def test_cannot_manage_another_job_seekers_resumes(client, make_job_seeker, create_resume):
    owner = await make_job_seeker(full_name="Owner")
    intruder = await make_job_seeker(full_name="Intruder")
    resume = await create_resume(owner)

    listing = await client.get(f"{API}/resumes/job-seeker/{owner.profile_id}", headers=intruder.headers)
    deletion = await client.delete(f"{API}/resumes/{resume['id']}", headers=intruder.headers)

    assert listing.status_code == 403
    assert deletion.status_code == 403


async def test_update_resume(client, job_seeker, create_resume):
    resume = await create_resume(job_seeker, resume_name="Old")

    response = await client.put(
        f"{API}/resumes/{resume['id']}",
        json={
            "resume_name": "New",
            "file_path": "https://files.example.com/new.pdf",
            "file_type": "pdf",
            "is_default": True,
        },
        headers=job_seeker.headers,
    )

    assert response.status_code == 200
    assert response.json()["resume_name"] == "New"
    assert response.json()["is_default"] is True


async def test_delete_then_get_is_404(client, job_seeker, create_resume):
    resume = await create_resume(job_seeker)

    response = await client.delete(f"{API}/resumes/{resume['id']}", headers=job_seeker.headers)
    assert response.status_code == 204

    response = await client.get(f"{API}/resumes/{resume['id']}", headers=job_seeker.headers)
    assert response.status_code == 404


async def test_delete_removes_uploaded_object(client, job_seeker, create_resume, monkeypatch):
    deleted = []

    async def fake_delete(key):
        deleted.append(key)
        return True

    monkeypatch.setattr(storage, "delete_object", fake_delete)
    key = storage.build_resume_key(job_seeker.profile_id, "cv.pdf")
    uploaded = await create_resume(job_seeker, file_path=key)
    external = await create_resume(job_seeker, file_path="https://elsewhere.example.com/cv.pdf")

    await client.delete(f"{API}/resumes/{uploaded['id']}", headers=job_seeker.headers)
    await client.delete(f"{API}/resumes/{external['id']}", headers=job_seeker.headers)

    assert deleted == [key]


async def test_delete_resume_used_by_application_conflicts(
    client, job_seeker, create_resume, employer, create_job
):
    resume = await create_resume(job_seeker)
    job = await create_job(employer)
    await client.post(
        f"{API}/applications",
        json={"job_id": job["id"], "job_seeker_id": job_seeker.profile_id, "resume_id": resume["id"]},
        headers=job_seeker.headers,
    )

    response = await client.delete(f"{API}/resumes/{resume['id']}", headers=job_seeker.headers)

    assert response.status_code == 409
    assert response.json()["code"] == "RESUME_IN_USE"


async def test_presign_upload(client, job_seeker, monkeypatch):
    calls = []

    async def fake_presign(key, content_type, max_size_bytes):
        calls.append((key, content_type, max_size_bytes))
        return {"url": "https://bucket.example.com", "fields": {"key": key}}

    monkeypatch.setattr(storage, "generate_presign_upload", fake_presign)

    response = await client.post(
        f"{API}/resumes/presign",
        json={"job_seeker_id": job_seeker.profile_id, "filename": "My CV (final).docx", "file_type": "docx"},
        headers=job_seeker.headers,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["url"] == "https://bucket.example.com"
    assert body["file_path"].startswith(f"resumes/{job_seeker.profile_id}/")
    assert body["file_path"].endswith("/My_CV_final_.docx")
    assert calls[0][1] == storage.RESUME_CONTENT_TYPES["docx"]
    assert body["max_size_bytes"] == calls[0][2]
