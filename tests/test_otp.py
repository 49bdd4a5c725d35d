import re
from datetime import timedelta

import pytest
from django.contrib.auth.hashers import make_password
from django.core import mail
from django.utils import timezone

from apps.authentication import services
from apps.authentication.mail import OTP_SUBJECT
from apps.authentication.models import TwoFactorBackupCode
from apps.authentication.strategies import (
    BackupCodeVerificationStrategy,
    StandardOtpVerificationStrategy,
    get_strategy,
)
from apps.common.exceptions import InvalidCredentialsError, InvalidOtpError, UserNotFoundError
from apps.users.models import User
from apps.users.services import backup_code_stats
from tests.conftest import PASSWORD

pytestmark = pytest.mark.django_db


def give_otp(user, otp="123456", expires_in=timedelta(minutes=5)):
    user.otp_code_hash = make_password(otp)
    user.otp_expiry = timezone.now() + expires_in
    user.save()


def test_get_strategy():
    assert isinstance(get_strategy(False), StandardOtpVerificationStrategy)
    assert isinstance(get_strategy(True), BackupCodeVerificationStrategy)


def test_standard_strategy_accepts_valid_otp(user):
    give_otp(user)
    assert StandardOtpVerificationStrategy().verify(user, "123456") is True


@pytest.mark.parametrize(
    "setup, code, message",
    [
        (None, "123456", "No OTP generated for this user"),
        (timedelta(seconds=-1), "123456", "OTP expired"),
        (timedelta(minutes=5), "654321", "Invalid OTP"),
    ],
)
def test_standard_strategy_rejections(user, setup, code, message):
    if setup is not None:
        give_otp(user, expires_in=setup)

    with pytest.raises(InvalidOtpError) as excinfo:
        StandardOtpVerificationStrategy().verify(user, code)
    assert str(excinfo.value.detail) == message


def test_process_login_emails_a_six_digit_code(user, settings):
    settings.OTP_EXPIRATION_MINUTES = 5
    before = timezone.now()

    services.process_login(user.email, PASSWORD)

    user.refresh_from_db()
    assert user.otp_verified is False
    assert user.otp_code_hash
    assert before + timedelta(minutes=4) < user.otp_expiry <= timezone.now() + timedelta(minutes=5)

    message = mail.outbox[-1]
    assert message.subject == OTP_SUBJECT
    assert message.to == [user.email]
    otp = re.search(r"\b(\d{6})\b", message.body).group(1)
    assert 100000 <= int(otp) <= 999999
    # html alternative rendered from the template
    assert otp in message.alternatives[0][0]


def test_process_login_errors(user):
    with pytest.raises(UserNotFoundError):
        services.process_login("nobody@example.com", PASSWORD)
    with pytest.raises(InvalidCredentialsError):
        services.process_login(user.email, "wrong-password")


def test_verify_otp_clears_code(user):
    give_otp(user)

    verified = services.verify_otp(user.email, "123456")

    assert verified.otp_verified is True
    user.refresh_from_db()
    assert user.otp_code_hash is None
    assert user.otp_expiry is None
    # a code works once
    with pytest.raises(InvalidOtpError):
        services.verify_otp(user.email, "123456")


def test_expired_otp_is_rejected(user):
    give_otp(user, expires_in=timedelta(minutes=-1))
    with pytest.raises(InvalidOtpError, match="OTP expired"):
        services.verify_otp(user.email, "123456")


def test_generate_backup_codes_replaces_previous_batch(user):
    first = services.generate_backup_codes(user)
    second = services.generate_backup_codes(user, count=3)

    assert len(first) == 5
    assert len(second) == 3
    assert all(len(code) == 8 and code.isdigit() for code in first + second)
    assert TwoFactorBackupCode.objects.for_user(user).count() == 3
    stale = next(code for code in first if code not in second)
    assert services.verify_backup_code(user.email, stale) is False


def test_backup_code_is_single_use(user):
    codes = services.generate_backup_codes(user, count=2)

    assert services.verify_backup_code(user.email, codes[0]) is True
    assert services.verify_backup_code(user.email, codes[0]) is False
    assert services.verify_backup_code(user.email, "00000000") is False
    assert backup_code_stats(user) == {"total": 2, "used": 1, "available": 1}


def test_backup_strategy_raises_on_unknown_code(user):
    services.generate_backup_codes(user, count=1)
    with pytest.raises(InvalidOtpError, match="Invalid backup code"):
        BackupCodeVerificationStrategy().verify(user, "12345678")


def test_with_expired_otp_uses_strict_cutoff(user, admin):
    now = timezone.now()
    user.otp_expiry = now - timedelta(seconds=1)
    user.save()
    admin.otp_expiry = now
    admin.save()

    assert list(User.objects.with_expired_otp(now)) == [user]
    assert User.objects.with_expired_otp(now - timedelta(minutes=1)).count() == 0
