"""Registration, login and the password reset flow."""
from datetime import datetime, timedelta, timezone
from urllib.parse import parse_qs, urlparse

from jose import jwt
from sqlalchemy import func, select

from hirehub.core.config import settings
from hirehub.core.tokens import hash_token
from hirehub.models.password_reset import PasswordReset
from tests.conftest import API, login, registration_payload


async def test_register_returns_user_without_password(client):
    payload = registration_payload("Employer", full_name="Grace Hopper")

    response = await client.post(f"{API}/auth/register", json=payload)

    assert response.status_code == 201
    body = response.json()
    assert body["email"] == payload["email"]
    assert body["role"] == "Employer"
    assert body["is_active"] is True
    assert "password" not in body
    assert "password_hash" not in body


async def test_register_duplicate_email_conflicts(client):
    payload = registration_payload()
    await client.post(f"{API}/auth/register", json=payload)

    response = await client.post(f"{API}/auth/register", json=payload)

    assert response.status_code == 409
    assert response.json()["code"] == "EMAIL_EXISTS"


async def test_register_email_is_case_insensitive(client):
    first = await client.post(
        f"{API}/auth/register",
        json=registration_payload(email="Alice@Example.com"),
    )
    second = await client.post(
        f"{API}/auth/register",
        json=registration_payload(email="alice@example.com"),
    )

    assert first.status_code == 201
    assert first.json()["email"] == "alice@example.com"
    assert second.status_code == 409
    assert second.json()["code"] == "EMAIL_EXISTS"


async def test_login_and_reset_ignore_email_case(client, make_user, email_sender):
    user = await make_user()

    auth = await login(client, user.email.upper(), user.password)
    assert auth["user_id"] == user.id

    response = await client.post(f"{API}/auth/forgot-password", json={"email": user.email.upper()})
    assert response.status_code == 200
    assert email_sender.subjects_for(user.email) == ["Reset your password"]


async def test_register_admin_role_is_forbidden(client):
    response = await client.post(f"{API}/auth/register", json=registration_payload("Admin"))
    assert response.status_code == 403


async def test_register_validates_password_length(client):
    response = await client.post(
        f"{API}/auth/register",
        json=registration_payload(password="123"),
    )
    assert response.status_code == 422
    assert response.json()["code"] == "VALIDATION_ERROR"


async def test_login_token_carries_identity_claims(client, make_user):
    user = await make_user("Employer")

    auth = await login(client, user.email, user.password)

    claims = jwt.decode(
        auth["token"],
        settings.secret_key,
        algorithms=[settings.algorithm],
        audience=settings.jwt_audience,
        issuer=settings.jwt_issuer,
    )
    assert claims["sub"] == user.id
    assert claims["role"] == "Employer"
    assert claims["email"] == user.email
    assert claims["type"] == "access"
    assert auth["role"] == "Employer"
    assert auth["token_type"] == "bearer"


async def test_login_wrong_password_is_unauthorized(client, make_user):
    user = await make_user()

    response = await client.post(
        f"{API}/auth/login",
        json={"email": user.email, "password": "not-the-password"},
    )

    assert response.status_code == 401
    assert response.json()["code"] == "INVALID_CREDENTIALS"


async def test_login_unknown_email_is_unauthorized(client):
    response = await client.post(
        f"{API}/auth/login",
        json={"email": "nobody@example.com", "password": "whatever"},
    )
    assert response.status_code == 401


async def test_protected_route_requires_token(client, make_user):
    user = await make_user()
    response = await client.get(f"{API}/users/{user.id}")
    assert response.status_code == 401


async def test_garbage_token_is_rejected(client, make_user):
    user = await make_user()
    response = await client.get(
        f"{API}/users/{user.id}",
        headers={"Authorization": "Bearer not-a-jwt"},
    )
    assert response.status_code == 401


def _token_from_email(html_body: str) -> str:
    start = html_body.index('href="') + len('href="')
    link = html_body[start:html_body.index('"', start)].replace("&amp;", "&")
    return parse_qs(urlparse(link).query)["token"][0]


async def test_password_reset_round_trip(client, make_user, email_sender):
    user = await make_user()

    response = await client.post(
        f"{API}/auth/forgot-password",
        json={"email": user.email, "origin_base_url": "https://app.example.com"},
    )
    assert response.status_code == 200
    assert email_sender.subjects_for(user.email) == ["Reset your password"]

    html_body = email_sender.sent[-1][2]
    assert "https://app.example.com/reset-password?token=" in html_body
    token = _token_from_email(html_body)

    response = await client.post(
        f"{API}/auth/reset-password",
        json={"token": token, "new_password": "brandnew1"},
    )
    assert response.status_code == 200

    await login(client, user.email, "brandnew1")
    old = await client.post(f"{API}/auth/login", json={"email": user.email, "password": user.password})
    assert old.status_code == 401


async def test_reset_token_is_single_use(client, make_user, email_sender):
    user = await make_user()
    await client.post(f"{API}/auth/forgot-password", json={"email": user.email})
    token = _token_from_email(email_sender.sent[-1][2])

    first = await client.post(f"{API}/auth/reset-password", json={"token": token, "new_password": "first11"})
    second = await client.post(f"{API}/auth/reset-password", json={"token": token, "new_password": "second22"})

    assert first.status_code == 200
    assert second.status_code == 400
    assert second.json()["code"] == "INVALID_RESET_TOKEN"


async def test_expired_reset_token_is_rejected(client, make_user, email_sender, db):
    user = await make_user()
    await client.post(f"{API}/auth/forgot-password", json={"email": user.email})
    token = _token_from_email(email_sender.sent[-1][2])

    record = (
        await db.execute(select(PasswordReset).where(PasswordReset.token_hash == hash_token(token)))
    ).scalar_one()
    record.expires_at = datetime.now(timezone.utc) - timedelta(minutes=1)
    await db.commit()

    response = await client.post(f"{API}/auth/reset-password", json={"token": token, "new_password": "newpass1"})
    assert response.status_code == 400


async def test_unknown_token_is_rejected(client):
    response = await client.post(
        f"{API}/auth/reset-password",
        json={"token": "made-up-token", "new_password": "newpass1"},
    )
    assert response.status_code == 400


async def test_forgot_password_unknown_email_is_silent(client, email_sender, db):
    response = await client.post(f"{API}/auth/forgot-password", json={"email": "ghost@example.com"})

    assert response.status_code == 200
    assert email_sender.sent == []
    count = (await db.execute(select(func.count()).select_from(PasswordReset))).scalar_one()
    assert count == 0


async def test_forgot_password_answer_does_not_reveal_account(client, make_user):
    user = await make_user()

    known = await client.post(f"{API}/auth/forgot-password", json={"email": user.email})
    unknown = await client.post(f"{API}/auth/forgot-password", json={"email": "ghost@example.com"})

    assert known.json() == unknown.json()
