"""
JWT access tokens for the API.

Tokens are simplejwt ``AccessToken`` instances: HS256 signed with
``JWT_SECRET``, the user's email as subject and a ``roles`` claim.
"""

import logging

import jwt
from django.conf import settings
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.settings import api_settings
from rest_framework_simplejwt.tokens import AccessToken

logger = logging.getLogger(__name__)


def generate_token(user) -> str:
    token = AccessToken.for_user(user)
    token["roles"] = user.roles
    return str(token)


def extract_username(token: str) -> str | None:
    """Subject of a token signed by us, expired or not. ``None`` for anything unreadable."""
    try:
        payload = jwt.decode(
            token,
            settings.SIMPLE_JWT["SIGNING_KEY"],
            algorithms=[settings.SIMPLE_JWT["ALGORITHM"]],
            options={"verify_exp": False},
        )
    except jwt.PyJWTError as err:
        logger.debug("Unreadable JWT: %s", err)
        return None
    return payload.get(api_settings.USER_ID_CLAIM)


def is_token_valid(token: str, user) -> bool:
    try:
        access = AccessToken(token)
    except TokenError:
        return False
    return access.get(api_settings.USER_ID_CLAIM) == user.email
