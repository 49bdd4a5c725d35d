from django.urls import path

from .views import (
    BackupCodesGenerateView,
    BackupCodeVerifyView,
    LoginView,
    OtpVerifyView,
    SignupView,
)

app_name = "authentication"

urlpatterns = [
    path("signup", SignupView.as_view(), name="signup"),
    path("login", LoginView.as_view(), name="login"),
    path("verify-otp", OtpVerifyView.as_view(), name="verify_otp"),
    path("generate-backup-codes", BackupCodesGenerateView.as_view(), name="generate_backup_codes"),
    path("verify-backup-code", BackupCodeVerifyView.as_view(), name="verify_backup_code"),
]
