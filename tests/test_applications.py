"""Applying to jobs and the employer review workflow."""
import pytest

from tests.conftest import API


@pytest.fixture
async def posting(employer, create_job):
    return await create_job(employer, title="Backend Engineer")


async def _apply(client, job_seeker, job, resume_id=None, **extra):
    body = {"job_id": job["id"], "job_seeker_id": job_seeker.profile_id, "resume_id": resume_id}
    body.update(extra)
    return await client.post(f"{API}/applications", json=body, headers=job_seeker.headers)


@pytest.fixture
async def application(client, job_seeker, posting, create_resume):
    resume = await create_resume(job_seeker)
    response = await _apply(client, job_seeker, posting, resume["id"], cover_letter="Hire me")
    assert response.status_code == 201, response.text
    return response.json()


async def test_apply_creates_application_and_notifies_employer(
    client, job_seeker, employer, posting, create_resume, email_sender
):
    resume = await create_resume(job_seeker)

    response = await _apply(client, job_seeker, posting, resume["id"], cover_letter="Hello")

    assert response.status_code == 201
    body = response.json()
    assert body["status"] == "Applied"
    assert body["resume_id"] == resume["id"]
    assert body["job_title"] == "Backend Engineer"
    assert body["job_seeker_name"] == "Jo Seeker"
    assert body["applied_at"]
    assert email_sender.subjects_for(employer.email) == ["New applicant for Backend Engineer"]

    inbox = await client.get(f"{API}/notifications/user/{employer.id}", headers=employer.headers)
    assert [n["message"] for n in inbox.json()] == ["Jo Seeker has applied for 'Backend Engineer'."]


async def test_apply_without_resume_uses_default(client, job_seeker, posting, create_resume):
    await create_resume(job_seeker)
    default = await create_resume(job_seeker, is_default=True)

    response = await _apply(client, job_seeker, posting)

    assert response.status_code == 201
    assert response.json()["resume_id"] == default["id"]


async def test_apply_without_resume_or_default_is_rejected(client, job_seeker, posting):
    response = await _apply(client, job_seeker, posting)

    assert response.status_code == 400
    assert response.json()["code"] == "NO_DEFAULT_RESUME"


async def test_apply_with_someone_elses_resume_is_404(client, make_job_seeker, posting, create_resume):
    applicant = await make_job_seeker(full_name="Applicant")
    other = await make_job_seeker(full_name="Other")
    foreign = await create_resume(other)

    response = await _apply(client, applicant, posting, foreign["id"])

    assert response.status_code == 404


async def test_apply_to_unknown_job_is_404(client, job_seeker, create_resume):
    resume = await create_resume(job_seeker)
    response = await _apply(client, job_seeker, {"id": 9999}, resume["id"])
    assert response.status_code == 404


async def test_cannot_apply_on_behalf_of_another_job_seeker(client, make_job_seeker, posting, create_resume):
    victim = await make_job_seeker(full_name="Victim")
    impostor = await make_job_seeker(full_name="Impostor")
    resume = await create_resume(victim)

    response = await client.post(
        f"{API}/applications",
        json={"job_id": posting["id"], "job_seeker_id": victim.profile_id, "resume_id": resume["id"]},
        headers=impostor.headers,
    )

    assert response.status_code == 403


async def test_shortlist_notifies_applicant(client, application, employer, job_seeker, email_sender):
    response = await client.post(
        f"{API}/applications/{application['id']}/shortlist",
        headers=employer.headers,
    )

    assert response.status_code == 200
    assert response.json()["status"] == "Shortlisted"
    assert response.json()["is_shortlisted"] is True
    assert email_sender.subjects_for(job_seeker.email) == ["You are shortlisted for Backend Engineer"]

    shortlisted = await client.get(
        f"{API}/applications/job/{application['job_id']}/shortlisted",
        headers=employer.headers,
    )
    assert [a["id"] for a in shortlisted.json()] == [application["id"]]


async def test_schedule_interview(client, application, employer, job_seeker, email_sender):
    response = await client.post(
        f"{API}/applications/{application['id']}/schedule-interview",
        json={"interview_date": "2030-03-04T14:30:00Z"},
        headers=employer.headers,
    )

    assert response.status_code == 200
    assert response.json()["status"] == "Interview"
    assert response.json()["interview_date"].startswith("2030-03-04T14:30")
    assert email_sender.subjects_for(job_seeker.email) == ["Interview scheduled for Backend Engineer"]

    interviews = await client.get(
        f"{API}/applications/job/{application['job_id']}/interviews",
        headers=employer.headers,
    )
    assert [a["id"] for a in interviews.json()] == [application["id"]]


async def test_update_without_status_change_sends_nothing(client, application, employer, job_seeker, email_sender):
    response = await client.put(
        f"{API}/applications/{application['id']}",
        json={"status": "applied", "employer_feedback": "Looks promising"},
        headers=employer.headers,
    )

    assert response.status_code == 200
    assert response.json()["employer_feedback"] == "Looks promising"
    assert email_sender.subjects_for(job_seeker.email) == []


async def test_update_to_rejected_notifies_applicant(client, application, employer, job_seeker, email_sender):
    response = await client.put(
        f"{API}/applications/{application['id']}",
        json={"status": "Rejected"},
        headers=employer.headers,
    )

    assert response.status_code == 200
    assert response.json()["status"] == "Rejected"
    assert email_sender.subjects_for(job_seeker.email) == ["Application update: Backend Engineer"]


async def test_review_stamps_reviewed_at_and_notes(client, application, employer):
    response = await client.post(
        f"{API}/applications/{application['id']}/review",
        json={"notes": "Strong Python background"},
        headers=employer.headers,
    )

    assert response.status_code == 200
    assert response.json()["reviewed_at"] is not None
    assert response.json()["notes"] == "Strong Python background"

    blank = await client.post(
        f"{API}/applications/{application['id']}/review",
        json={"notes": "   "},
        headers=employer.headers,
    )
    assert blank.json()["notes"] == "Strong Python background"


async def test_other_employer_cannot_review(client, application, make_employer):
    rival = await make_employer("Rival Inc")

    shortlist = await client.post(f"{API}/applications/{application['id']}/shortlist", headers=rival.headers)
    listing = await client.get(f"{API}/applications/job/{application['job_id']}", headers=rival.headers)

    assert shortlist.status_code == 403
    assert listing.status_code == 403


async def test_listings(client, application, employer, job_seeker, admin):
    by_job = await client.get(f"{API}/applications/job/{application['job_id']}", headers=employer.headers)
    by_seeker = await client.get(
        f"{API}/applications/job-seeker/{job_seeker.profile_id}",
        headers=job_seeker.headers,
    )
    everything = await client.get(f"{API}/applications", headers=admin.headers)

    assert [a["id"] for a in by_job.json()] == [application["id"]]
    assert [a["id"] for a in by_seeker.json()] == [application["id"]]
    assert [a["id"] for a in everything.json()] == [application["id"]]


async def test_job_seeker_with_application_cannot_be_deleted(client, application, job_seeker):
    response = await client.delete(f"{API}/job-seekers/{job_seeker.profile_id}", headers=job_seeker.headers)
    assert response.status_code == 409


async def test_withdraw_then_get_is_404(client, application, job_seeker):
    response = await client.delete(f"{API}/applications/{application['id']}", headers=job_seeker.headers)
    assert response.status_code == 204

    response = await client.get(f"{API}/applications/{application['id']}", headers=job_seeker.headers)
    assert response.status_code == 404


async def test_failed_email_still_records_notification(
    client, job_seeker, employer, posting, create_resume, email_sender
):
    email_sender.fail = True
    resume = await create_resume(job_seeker)

    response = await _apply(client, job_seeker, posting, resume["id"])

    assert response.status_code == 201
    inbox = (await client.get(f"{API}/notifications/user/{employer.id}", headers=employer.headers)).json()
    assert len(inbox) == 1
    assert inbox[0]["sent_email"] is False
