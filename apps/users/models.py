from django.contrib.auth.models import AbstractBaseUser, BaseUserManager, PermissionsMixin
from django.db import models
from django.db.models import Q

from apps.common.constants import DEFAULT_LANGUAGE
from apps.common.models import BaseModel
from apps.common.utils import get_roles


class UserManager(BaseUserManager):
    def create_user(self, email, password=None, **extra_fields):
        if not email:
            raise ValueError("The Email field must be set")
        email = self.normalize_email(email)
        user = self.model(email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        extra_fields.setdefault("is_admin", True)
        extra_fields.setdefault("otp_verified", True)

        if extra_fields.get("is_staff") is not True:
            raise ValueError("Superuser must have is_staff=True.")
        if extra_fields.get("is_superuser") is not True:
            raise ValueError("Superuser must have is_superuser=True.")

        return self.create_user(email, password, **extra_fields)

    def find_by_email(self, email):
        if not email:
            return None
        return self.filter(email__iexact=email).first()

    def with_expired_otp(self, now):
        return self.filter(otp_expiry__lt=now)

    def search_by_name(self, term):
        return self.filter(
            Q(first_name__icontains=term) | Q(last_name__icontains=term) | Q(email__icontains=term)
        )

    def favoring(self, exoplanet_id):
        return self.filter(favorites__id=exoplanet_id)


class User(AbstractBaseUser, PermissionsMixin, BaseModel):
    email = models.EmailField(unique=True)
    first_name = models.CharField(max_length=100, blank=True, null=True)
    last_name = models.CharField(max_length=100, blank=True, null=True)
    is_staff = models.BooleanField(default=False)
    is_active = models.BooleanField(default=True)
    is_admin = models.BooleanField(default=False)

    otp_code_hash = models.CharField(max_length=128, blank=True, null=True)
    otp_expiry = models.DateTimeField(blank=True, null=True)
    otp_verified = models.BooleanField(default=False)

    language = models.CharField(max_length=10, default=DEFAULT_LANGUAGE)
    dark_mode = models.BooleanField(default=False)

    favorites = models.ManyToManyField(
        "exoplanets.Exoplanet",
        related_name="favored_by",
        db_table="user_favorites",
        blank=True,
    )

    objects = UserManager()

    USERNAME_FIELD = "email"
    EMAIL_FIELD = "email"
    REQUIRED_FIELDS = []

    class Meta:
        db_table = "users"

    def __str__(self):
        return self.email

    @property
    def roles(self) -> list[str]:
        return get_roles(self)

    def add_favorite(self, exoplanet):
        self.favorites.add(exoplanet)

    def remove_favorite(self, exoplanet):
        self.favorites.remove(exoplanet)

    def has_favorite(self, exoplanet) -> bool:
        return self.favorites.filter(pk=exoplanet.pk).exists()
