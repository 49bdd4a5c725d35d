import logging
import secrets
from datetime import timedelta

from django.conf import settings
from django.contrib.auth.hashers import make_password
from django.db import transaction
from django.utils import timezone

from apps.authentication.mail import send_otp_email
from apps.authentication.models import TwoFactorBackupCode
from apps.authentication.strategies import get_strategy
from apps.common.constants import DEFAULT_BACKUP_CODE_COUNT, UserActionEvent
from apps.common.exceptions import InvalidCredentialsError, InvalidOtpError
from apps.users.services import get_by_email
from apps.users.signals import notify_user_action

logger = logging.getLogger(__name__)

OTP_MIN, OTP_MAX = 100_000, 999_999
BACKUP_CODE_MIN, BACKUP_CODE_MAX = 10_000_000, 99_999_999


def _random_code(low: int, high: int) -> str:
    return str(low + secrets.randbelow(high - low + 1))


def generate_otp() -> str:
    return _random_code(OTP_MIN, OTP_MAX)


def process_login(email: str, password: str):
    """Check the password, then email a fresh one-time code the client must send back."""
    user = get_by_email(email)
    if not user.check_password(password):
        logger.info("Failed login for %s: wrong password", email)
        raise InvalidCredentialsError()

    otp = generate_otp()
    user.otp_code_hash = make_password(otp)
    user.otp_expiry = timezone.now() + timedelta(minutes=settings.OTP_EXPIRATION_MINUTES)
    user.otp_verified = False
    user.save(update_fields=["otp_code_hash", "otp_expiry", "otp_verified"])

    send_otp_email(user.email, otp)
    logger.info("OTP sent to %s", user.email)
    notify_user_action(UserActionEvent.USER_LOGGED_IN, user)
    return user


def verify_otp(email: str, otp: str):
    user = get_by_email(email)
    get_strategy(is_backup_code=False).verify(user, otp)

    user.otp_verified = True
    user.otp_code_hash = None
    user.otp_expiry = None
    user.save(update_fields=["otp_verified", "otp_code_hash", "otp_expiry"])
    logger.info("OTP verified for %s", user.email)
    return user


@transaction.atomic
def generate_backup_codes(user, count: int = DEFAULT_BACKUP_CODE_COUNT) -> list[str]:
    """Replace the user's backup codes with ``count`` new ones; returns them in plain text, once."""
    codes = [_random_code(BACKUP_CODE_MIN, BACKUP_CODE_MAX) for _ in range(count)]
    TwoFactorBackupCode.objects.for_user(user).delete()
    TwoFactorBackupCode.objects.bulk_create(
        [TwoFactorBackupCode(user=user, code_hash=make_password(code)) for code in codes]
    )
    logger.info("Generated %s backup codes for %s", count, user.email)
    return codes


def verify_backup_code(email: str, code: str) -> bool:
    user = get_by_email(email)
    try:
        return get_strategy(is_backup_code=True).verify(user, code)
    except InvalidOtpError:
        logger.info("Invalid backup code presented for %s", user.email)
        return False
