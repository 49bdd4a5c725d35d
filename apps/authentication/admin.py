from django.contrib import admin
from unfold.admin import ModelAdmin

from apps.authentication.models import TwoFactorBackupCode


@admin.register(TwoFactorBackupCode)
class TwoFactorBackupCodeAdmin(ModelAdmin):
    list_display = ("user", "used")
    list_filter = ("used",)
    search_fields = ("user__email",)
    readonly_fields = ("user", "code_hash")

    def has_add_permission(self, request):
        return False
