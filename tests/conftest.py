import pytest
from django.core.cache import cache
from rest_framework.test import APIClient

from apps.authentication.tokens import generate_token
from apps.exoplanets.models import Exoplanet
from apps.users.factory import UserFactory

PASSWORD = "secret-pass"


@pytest.fixture(autouse=True)
def fast_password_hasher(settings):
    settings.PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]


@pytest.fixture(autouse=True)
def empty_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def user(db):
    user = UserFactory.create_regular_user("astro@example.com", PASSWORD)
    user.first_name = "Vera"
    user.last_name = "Rubin"
    user.save()
    return user


@pytest.fixture
def admin(db):
    admin = UserFactory.create_admin_user("admin@example.com", PASSWORD)
    admin.save()
    return admin


def _client_for(user):
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {generate_token(user)}")
    return client


@pytest.fixture
def user_client(user):
    return _client_for(user)


@pytest.fixture
def admin_api_client(admin):
    return _client_for(admin)


@pytest.fixture
def make_exoplanet(db):
    def make(name="Kepler-Test", **fields):
        fields.setdefault("temperature", 273.0)
        fields.setdefault("distance", 42.0)
        return Exoplanet.objects.create(name=name, **fields)

    return make
