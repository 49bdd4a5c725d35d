import logging

from django.contrib.auth import get_user_model

from apps.authentication.models import TwoFactorBackupCode
from apps.common import cache
from apps.common.constants import UserActionEvent
from apps.common.exceptions import InvalidCredentialsError, UserAlreadyExistsError, UserNotFoundError
from apps.exoplanets import services as exoplanet_services
from apps.exoplanets.serializers import ExoplanetSerializer
from apps.users.factory import UserFactory
from apps.users.signals import notify_user_action

logger = logging.getLogger(__name__)

User = get_user_model()


def get_by_email(email: str):
    user = User.objects.find_by_email(email)
    if user is None:
        raise UserNotFoundError(f"User not found: {email}")
    return user


def register_user(email: str, password: str):
    if User.objects.find_by_email(email) is not None:
        raise UserAlreadyExistsError("A user with this email already exists.")
    user = UserFactory.create_regular_user(email, password)
    user.created_by = user.updated_by = user.email
    user.save()
    logger.info("Registered user %s", user.email)
    notify_user_action(UserActionEvent.USER_REGISTERED, user)
    return user


def get_favorites(user) -> list[dict]:
    """The user's favorite exoplanets, serialized, cached per user."""

    def compute():
        logger.debug("Loading favorites for %s", user.email)
        return [dict(row) for row in ExoplanetSerializer(user.favorites.order_by("-id"), many=True).data]

    return cache.cached(cache.USER_FAVORITES, [user.pk], compute)


def toggle_favorite(user, exoplanet_id) -> bool:
    """Add the exoplanet to the user's favorites or take it out; returns whether it is now a favorite."""
    exoplanet = exoplanet_services.get_by_id(exoplanet_id)
    if user.has_favorite(exoplanet):
        user.remove_favorite(exoplanet)
        favorite, event = False, UserActionEvent.USER_FAVORITE_REMOVED
    else:
        user.add_favorite(exoplanet)
        favorite, event = True, UserActionEvent.USER_FAVORITE_ADDED

    cache.evict(cache.USER_FAVORITES, user.pk)
    logger.info("%s %s favorite exoplanet %s", user.email, "added" if favorite else "removed", exoplanet.id)
    notify_user_action(event, user, exoplanet)
    return favorite


def update_profile(user, first_name: str | None, last_name: str | None):
    user.first_name = first_name
    user.last_name = last_name
    user.updated_by = user.email
    user.save(update_fields=["first_name", "last_name", "updated_by"])
    notify_user_action(UserActionEvent.PROFILE_UPDATED, user)
    return user


def update_preferences(user, dark_mode: bool | None = None, language: str | None = None):
    fields = []
    if dark_mode is not None:
        user.dark_mode = dark_mode
        fields.append("dark_mode")
    if language is not None:
        user.language = language
        fields.append("language")
    if fields:
        user.updated_by = user.email
        user.save(update_fields=[*fields, "updated_by"])
    return user


def change_password(user, current_password: str, new_password: str):
    if not user.check_password(current_password):
        raise InvalidCredentialsError("Current password is incorrect.")
    user.set_password(new_password)
    user.updated_by = user.email
    user.save(update_fields=["password", "updated_by"])
    logger.info("Password changed for %s", user.email)
    notify_user_action(UserActionEvent.PASSWORD_CHANGED, user)
    return user


def backup_code_stats(user) -> dict:
    codes = TwoFactorBackupCode.objects.for_user(user)
    total = codes.count()
    available = codes.unused().count()
    return {"total": total, "used": total - available, "available": available}
