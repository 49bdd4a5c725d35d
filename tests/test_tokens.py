from datetime import timedelta

import pytest
from rest_framework_simplejwt.tokens import AccessToken

from apps.authentication.tokens import extract_username, generate_token, is_token_valid
from apps.users.factory import UserFactory

pytestmark = pytest.mark.django_db


def test_token_claims(user):
    token = AccessToken(generate_token(user))

    assert token["sub"] == user.email
    assert token["roles"] == ["ROLE_USER"]
    assert token["token_type"] == "access"


def test_token_round_trip(user, admin):
    token = generate_token(user)
    assert extract_username(token) == user.email
    assert is_token_valid(token, user) is True
    assert is_token_valid(token, admin) is False


def test_expired_token_still_names_its_subject(user):
    token = AccessToken.for_user(user)
    token.set_exp(lifetime=timedelta(seconds=-10))
    expired = str(token)

    assert extract_username(expired) == user.email
    assert is_token_valid(expired, user) is False


def test_garbage_and_foreign_tokens(user):
    assert extract_username("not-a-jwt") is None
    assert is_token_valid("not-a-jwt", user) is False

    other = UserFactory.create_regular_user("other@example.com", "pw1234")
    assert extract_username(generate_token(other)) == "other@example.com"


def test_expired_token_is_rejected_by_the_api(api_client, user):
    token = AccessToken.for_user(user)
    token.set_exp(lifetime=timedelta(seconds=-10))
    api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")

    response = api_client.get("/api/user/profile")

    assert response.status_code == 401
    assert response.data["message"] == "Invalid or expired JWT token."
