from django.contrib.auth import get_user_model
from django.contrib.auth.hashers import make_password

from apps.common.constants import DEFAULT_LANGUAGE


class UserFactory:
    """Builds unsaved users with the defaults each kind of account starts with."""

    @staticmethod
    def create_regular_user(email: str, password: str):
        User = get_user_model()
        return User(
            email=User.objects.normalize_email(email),
            password=make_password(password),
            otp_verified=False,
            dark_mode=False,
            language=DEFAULT_LANGUAGE,
        )

    @classmethod
    def create_admin_user(cls, email: str, password: str):
        user = cls.create_regular_user(email, password)
        user.is_admin = True
        user.is_staff = True
        return user

    @classmethod
    def create_social_user(cls, email: str, first_name: str | None, last_name: str | None):
        # make_password(None) stores a random unusable hash
        user = cls.create_regular_user(email, None)
        user.first_name = first_name
        user.last_name = last_name
        user.otp_verified = True
        return user
