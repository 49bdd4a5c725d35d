from django.contrib.auth import password_validation
from rest_framework import serializers

from apps.common.constants import DEFAULT_BACKUP_CODE_COUNT


class SignupSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, min_length=6)

    def validate_password(self, value):
        password_validation.validate_password(value)
        return value


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)


class OtpVerificationSerializer(serializers.Serializer):
    email = serializers.EmailField()
    otp = serializers.RegexField(r"^\d{6}$", error_messages={"invalid": "OTP must be 6 digits."})


class BackupCodesGenerateSerializer(serializers.Serializer):
    count = serializers.IntegerField(required=False, default=DEFAULT_BACKUP_CODE_COUNT, min_value=1, max_value=20)


class BackupCodeVerificationSerializer(serializers.Serializer):
    email = serializers.EmailField()
    backup_code = serializers.CharField(max_length=16)


class TokenResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    token = serializers.CharField()
    is_admin = serializers.BooleanField(required=False)


class MessageSerializer(serializers.Serializer):
    message = serializers.CharField()
