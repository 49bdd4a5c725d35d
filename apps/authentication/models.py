from django.conf import settings
from django.db import models


class TwoFactorBackupCodeQuerySet(models.QuerySet):
    def for_user(self, user):
        return self.filter(user=user)

    def unused(self):
        return self.filter(used=False)


class TwoFactorBackupCode(models.Model):
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="backup_codes",
    )
    code_hash = models.CharField(max_length=128)
    used = models.BooleanField(default=False)

    objects = TwoFactorBackupCodeQuerySet.as_manager()

    class Meta:
        db_table = "two_factor_backup_codes"
        indexes = [
            models.Index(fields=["user", "used"], name="backup_code_user_used_idx"),
        ]

    def __str__(self) -> str:  # pragma: no cover - simple repr
        status = "used" if self.used else "unused"
        return f"TwoFactorBackupCode(user={self.user_id}, {status})"

    def mark_used(self) -> bool:
        """Flip ``used`` in one conditional UPDATE; ``False`` when another request got there first."""
        updated = TwoFactorBackupCode.objects.filter(pk=self.pk, used=False).update(used=True)
        self.used = True
        return bool(updated)
