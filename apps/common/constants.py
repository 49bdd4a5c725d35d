from django.db import models

HABITABLE_MIN_TEMPERATURE = 180
HABITABLE_MAX_TEMPERATURE = 310

EARTH_RADIUS = 1.0
EARTH_MASS = 1.0
EARTH_SIZED_MIN_RADIUS = 0.8
EARTH_SIZED_MAX_RADIUS = 1.2

DAYS_PER_YEAR = 365.0

ROLE_USER = "ROLE_USER"
ROLE_ADMIN = "ROLE_ADMIN"

DEFAULT_LANGUAGE = "fr"
DEFAULT_BACKUP_CODE_COUNT = 5


class UserActionEvent(models.TextChoices):
    USER_REGISTERED = "user_registered", "User registered"
    USER_LOGGED_IN = "user_logged_in", "User logged in"
    USER_FAVORITE_ADDED = "user_favorite_added", "Favorite added"
    USER_FAVORITE_REMOVED = "user_favorite_removed", "Favorite removed"
    PROFILE_UPDATED = "profile_updated", "Profile updated"
    PASSWORD_CHANGED = "password_changed", "Password changed"
