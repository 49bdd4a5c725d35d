import re

import pytest
from django.core import mail
from rest_framework_simplejwt.tokens import AccessToken

from apps.authentication.mail import OTP_SUBJECT
from apps.users.models import User
from apps.users.signals import WELCOME_SUBJECT
from tests.conftest import PASSWORD

pytestmark = pytest.mark.django_db


def last_otp():
    message = [m for m in mail.outbox if m.subject == OTP_SUBJECT][-1]
    return re.search(r"\b(\d{6})\b", message.body).group(1)


def test_signup_login_otp_then_jwt(api_client):
    response = api_client.post(
        "/api/auth/signup", {"email": "new@example.com", "password": "stars42"}, format="json"
    )
    assert response.status_code == 200, response.data
    assert "message" in response.data
    assert {m.subject for m in mail.outbox} == {WELCOME_SUBJECT, OTP_SUBJECT}

    response = api_client.post("/api/auth/login", {"email": "new@example.com", "password": "stars42"}, format="json")
    assert response.status_code == 200

    response = api_client.post("/api/auth/verify-otp", {"email": "new@example.com", "otp": last_otp()}, format="json")
    assert response.status_code == 200
    assert response.data["is_admin"] is False
    token = response.data["token"]
    assert AccessToken(token)["sub"] == "new@example.com"

    api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
    response = api_client.get("/api/user/profile")
    assert response.status_code == 200
    assert response.data["email"] == "new@example.com"
    assert response.data["language"] == "fr"
    assert User.objects.get(email="new@example.com").otp_verified is True


def test_signup_twice_conflicts(api_client, user):
    response = api_client.post("/api/auth/signup", {"email": user.email, "password": "stars42"}, format="json")
    assert response.status_code == 409
    assert response.data["error"] == "Conflict"


def test_signup_validates_password_length(api_client):
    response = api_client.post("/api/auth/signup", {"email": "short@example.com", "password": "abc"}, format="json")
    assert response.status_code == 400
    assert response.data["message"].startswith("password:")


def test_login_unknown_user_and_bad_password(api_client, user):
    response = api_client.post("/api/auth/login", {"email": "ghost@example.com", "password": "x"}, format="json")
    assert response.status_code == 404

    response = api_client.post("/api/auth/login", {"email": user.email, "password": "wrong"}, format="json")
    assert response.status_code == 401
    assert response.data["message"] == "Incorrect email or password."


def test_verify_otp_rejects_wrong_code(api_client, user):
    api_client.post("/api/auth/login", {"email": user.email, "password": PASSWORD}, format="json")
    wrong = "111111" if last_otp() != "111111" else "222222"

    response = api_client.post("/api/auth/verify-otp", {"email": user.email, "otp": wrong}, format="json")

    assert response.status_code == 401
    assert response.data["message"] == "Invalid OTP"


def test_verify_otp_requires_six_digits(api_client, user):
    response = api_client.post("/api/auth/verify-otp", {"email": user.email, "otp": "12ab"}, format="json")
    assert response.status_code == 400


def test_admin_gets_admin_flag(api_client, admin):
    api_client.post("/api/auth/login", {"email": admin.email, "password": PASSWORD}, format="json")
    response = api_client.post("/api/auth/verify-otp", {"email": admin.email, "otp": last_otp()}, format="json")
    assert response.data["is_admin"] is True
    assert AccessToken(response.data["token"])["roles"] == ["ROLE_USER", "ROLE_ADMIN"]


def test_backup_code_flow(api_client, user_client, user):
    response = user_client.post("/api/auth/generate-backup-codes", {"count": 2}, format="json")
    assert response.status_code == 200
    codes = response.data
    assert len(codes) == 2

    payload = {"email": user.email, "backup_code": codes[0]}
    response = api_client.post("/api/auth/verify-backup-code", payload, format="json")
    assert response.status_code == 200
    assert AccessToken(response.data["token"])["sub"] == user.email

    response = api_client.post("/api/auth/verify-backup-code", payload, format="json")
    assert response.status_code == 400
    assert response.data == {"message": "Invalid backup code."}


def test_generate_backup_codes_requires_authentication(api_client):
    response = api_client.post("/api/auth/generate-backup-codes", {}, format="json")
    assert response.status_code == 401
