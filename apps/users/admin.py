from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from unfold.admin import ModelAdmin, TabularInline

from apps.authentication.models import TwoFactorBackupCode

from .models import User


class BackupCodeInline(TabularInline):
    model = TwoFactorBackupCode
    extra = 0
    fields = ("used",)
    readonly_fields = ("used",)
    can_delete = True

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(User)
class UserAdmin(BaseUserAdmin, ModelAdmin):
    model = User
    list_display = ("email", "first_name", "last_name", "is_admin", "otp_verified", "language")
    list_filter = ("is_admin", "is_staff", "otp_verified", "dark_mode")
    ordering = ("email",)
    search_fields = ("email", "first_name", "last_name")
    filter_horizontal = ("favorites",)
    readonly_fields = ("last_login", "otp_expiry", "created_at", "updated_at", "version")
    inlines = [BackupCodeInline]

    fieldsets = (
        (None, {"fields": ("email", "password")}),
        ("Personal info", {"fields": ("first_name", "last_name")}),
        ("Preferences", {"fields": ("language", "dark_mode")}),
        ("Favorites", {"fields": ("favorites",)}),
        ("Permissions", {"fields": ("is_active", "is_admin", "is_staff", "is_superuser")}),
        ("Two-factor", {"fields": ("otp_verified", "otp_expiry")}),
        ("Important dates", {"fields": ("last_login", "created_at", "updated_at", "version")}),
    )

    add_fieldsets = (
        (
            None,
            {
                "classes": ("wide",),
                "fields": ("email", "password1", "password2", "is_admin", "is_staff"),
            },
        ),
    )
