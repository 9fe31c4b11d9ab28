"""In-app notifications, employer messages and the email retry sweep."""
import pytest

from hirehub.services.notification_service import NotificationService, clip
from tests.conftest import API


async def _notify(client, admin, user, message="Welcome aboard", send_email=False, subject=None):
    response = await client.post(
        f"{API}/notifications",
        json={"user_id": user.id, "message": message, "subject": subject, "send_email": send_email},
        headers=admin.headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


async def test_admin_creates_notification_with_email(client, admin, make_user, email_sender):
    user = await make_user()

    created = await _notify(client, admin, user, subject="Hello", send_email=True)

    assert created["sent_email"] is True
    assert created["is_read"] is False
    assert created["user_email"] == user.email
    assert email_sender.subjects_for(user.email) == ["Hello"]


async def test_notification_without_email_sends_nothing(client, admin, make_user, email_sender):
    user = await make_user()

    created = await _notify(client, admin, user)

    assert created["sent_email"] is False
    assert email_sender.sent == []


async def test_only_admin_creates_notifications(client, make_user):
    user = await make_user()
    response = await client.post(
        f"{API}/notifications",
        json={"user_id": user.id, "message": "spam"},
        headers=user.headers,
    )
    assert response.status_code == 403


async def test_notification_for_unknown_user_is_404(client, admin):
    response = await client.post(
        f"{API}/notifications",
        json={"user_id": "00000000-0000-0000-0000-000000000000", "message": "hi"},
        headers=admin.headers,
    )
    assert response.status_code == 404


async def test_read_flow(client, admin, make_user):
    user = await make_user()
    first = await _notify(client, admin, user, message="first")
    await _notify(client, admin, user, message="second")
    await _notify(client, admin, user, message="third")

    unread = await client.get(f"{API}/notifications/user/{user.id}/unread", headers=user.headers)
    assert len(unread.json()) == 3

    response = await client.post(f"{API}/notifications/{first['id']}/mark-read", headers=user.headers)
    assert response.status_code == 200
    unread = await client.get(f"{API}/notifications/user/{user.id}/unread", headers=user.headers)
    assert first["id"] not in [n["id"] for n in unread.json()]

    response = await client.post(f"{API}/notifications/user/{user.id}/mark-all-read", headers=user.headers)
    assert response.json() == {"updated": 2}
    unread = await client.get(f"{API}/notifications/user/{user.id}/unread", headers=user.headers)
    assert unread.json() == []

    everything = await client.get(f"{API}/notifications/user/{user.id}", headers=user.headers)
    assert len(everything.json()) == 3


async def test_recent_is_limited(client, admin, make_user):
    user = await make_user()
    for i in range(4):
        await _notify(client, admin, user, message=f"n{i}")

    response = await client.get(
        f"{API}/notifications/user/{user.id}/recent",
        params={"limit": 2},
        headers=user.headers,
    )

    assert response.status_code == 200
    assert len(response.json()) == 2


async def test_users_cannot_read_each_others_notifications(client, admin, make_user):
    owner = await make_user()
    snoop = await make_user()
    created = await _notify(client, admin, owner)

    by_user = await client.get(f"{API}/notifications/user/{owner.id}", headers=snoop.headers)
    by_id = await client.get(f"{API}/notifications/{created['id']}", headers=snoop.headers)

    assert by_user.status_code == 403
    assert by_id.status_code == 403


async def test_update_with_blank_message_keeps_text(client, admin, make_user):
    user = await make_user()
    created = await _notify(client, admin, user, message="Original")

    response = await client.put(
        f"{API}/notifications/{created['id']}",
        json={"is_read": True, "message": "  "},
        headers=user.headers,
    )

    assert response.status_code == 200
    assert response.json()["message"] == "Original"
    assert response.json()["is_read"] is True


async def test_delete_then_get_is_404(client, admin, make_user):
    user = await make_user()
    created = await _notify(client, admin, user)

    response = await client.delete(f"{API}/notifications/{created['id']}", headers=admin.headers)
    assert response.status_code == 204

    response = await client.get(f"{API}/notifications/{created['id']}", headers=admin.headers)
    assert response.status_code == 404


@pytest.fixture
async def submitted(client, employer, job_seeker, create_job, create_resume):
    job = await create_job(employer, title="QA Engineer")
    resume = await create_resume(job_seeker)
    response = await client.post(
        f"{API}/applications",
        json={"job_id": job["id"], "job_seeker_id": job_seeker.profile_id, "resume_id": resume["id"]},
        headers=job_seeker.headers,
    )
    assert response.status_code == 201
    return response.json()


async def test_employer_messages_applicant(client, submitted, employer, job_seeker, email_sender):
    response = await client.post(
        f"{API}/notifications/application/message",
        json={
            "application_id": submitted["id"],
            "message": "Please pick an interview slot",
            "subject": "Interview invitation",
        },
        headers=employer.headers,
    )

    assert response.status_code == 201
    assert response.json()["user_id"] == job_seeker.id
    assert response.json()["sent_email"] is True
    to, subject, html_body = email_sender.sent[-1]
    assert (to, subject) == (job_seeker.email, "Interview invitation")
    assert "Interview scheduled for QA Engineer" in html_body


async def test_message_without_interview_uses_shortlist_template(client, submitted, employer, email_sender):
    await client.post(
        f"{API}/notifications/application/message",
        json={"application_id": submitted["id"], "message": "Good news"},
        headers=employer.headers,
    )

    to, subject, html_body = email_sender.sent[-1]
    assert subject == "Message from employer"
    assert "You are shortlisted for QA Engineer" in html_body


async def test_other_employer_cannot_message_applicant(client, submitted, make_employer):
    rival = await make_employer("Rival Inc")

    response = await client.post(
        f"{API}/notifications/application/message",
        json={"application_id": submitted["id"], "message": "Come work for us"},
        headers=rival.headers,
    )

    assert response.status_code == 403


async def test_retry_sweep_delivers_unsent_emails(client, admin, make_user, email_sender, db):
    user = await make_user()
    email_sender.fail = True
    failed = await _notify(client, admin, user, message="Try again", send_email=True)
    await _notify(client, admin, user, message="No email wanted")
    assert failed["sent_email"] is False

    email_sender.fail = False
    service = NotificationService()
    pending = await service.get_unsent_email_notifications(db)
    assert [n.id for n in pending] == [failed["id"]]

    result = await service.retry_unsent_emails(db, email_sender)

    assert result == {"attempted": 1, "sent": 1}
    assert email_sender.subjects_for(user.email) == ["Notification from HireHub"]
    assert await service.get_unsent_email_notifications(db) == []


def test_clip():
    assert clip("short", 10) == "short"
    assert clip(None, 10) is None
    assert clip("a" * 20, 10) == "aaaaaaa..."


async def test_retry_resends_templated_applicant_email(client, submitted, employer, job_seeker, email_sender, db):
    email_sender.fail = True
    response = await client.post(
        f"{API}/notifications/application/message",
        json={
            "application_id": submitted["id"],
            "message": "Please pick an interview slot",
            "subject": "Interview invitation",
        },
        headers=employer.headers,
    )
    assert response.json()["sent_email"] is False

    email_sender.fail = False
    result = await NotificationService().retry_unsent_emails(db, email_sender)

    assert result == {"attempted": 1, "sent": 1}
    to, subject, html_body = email_sender.sent[-1]
    assert (to, subject) == (job_seeker.email, "Interview invitation")
    assert "Interview scheduled for QA Engineer" in html_body
