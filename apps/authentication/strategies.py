"""
How a second factor is checked.

The standard strategy checks the emailed OTP stored on the user; the backup
strategy redeems one of the user's single-use backup codes. Both raise
``InvalidOtpError`` on failure.
"""

import logging

from django.contrib.auth.hashers import check_password
from django.utils import timezone

from apps.authentication.models import TwoFactorBackupCode
from apps.common.exceptions import InvalidOtpError

logger = logging.getLogger(__name__)


class OtpVerificationStrategy:
    def verify(self, user, code: str) -> bool:
        raise NotImplementedError


class StandardOtpVerificationStrategy(OtpVerificationStrategy):
    def verify(self, user, code: str) -> bool:
        if not user.otp_code_hash or user.otp_expiry is None:
            raise InvalidOtpError("No OTP generated for this user")
        if timezone.now() > user.otp_expiry:
            logger.info("Expired OTP presented for %s", user.email)
            raise InvalidOtpError("OTP expired")
        if not check_password(code, user.otp_code_hash):
            logger.info("Wrong OTP presented for %s", user.email)
            raise InvalidOtpError("Invalid OTP")
        return True


class BackupCodeVerificationStrategy(OtpVerificationStrategy):
    def verify(self, user, code: str) -> bool:
        for backup_code in TwoFactorBackupCode.objects.for_user(user).unused():
            if check_password(code, backup_code.code_hash) and backup_code.mark_used():
                logger.info("Backup code %s redeemed by %s", backup_code.pk, user.email)
                return True
        raise InvalidOtpError("Invalid backup code")


def get_strategy(is_backup_code: bool) -> OtpVerificationStrategy:
    if is_backup_code:
        return BackupCodeVerificationStrategy()
    return StandardOtpVerificationStrategy()
