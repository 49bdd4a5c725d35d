from django.contrib.auth import get_user_model, password_validation
from rest_framework import serializers

from apps.common.utils import is_admin

User = get_user_model()


class UserProfileSerializer(serializers.ModelSerializer):
    is_admin = serializers.SerializerMethodField()
    favorite_count = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = ("email", "first_name", "last_name", "dark_mode", "language", "is_admin", "favorite_count")
        read_only_fields = fields

    def get_is_admin(self, obj) -> bool:
        return is_admin(obj)

    def get_favorite_count(self, obj) -> int:
        return obj.favorites.count()


class ToggleFavoriteSerializer(serializers.Serializer):
    exoplanet_id = serializers.IntegerField(min_value=1)


class ProfileUpdateSerializer(serializers.Serializer):
    first_name = serializers.CharField(max_length=100, allow_blank=True, allow_null=True, required=False)
    last_name = serializers.CharField(max_length=100, allow_blank=True, allow_null=True, required=False)


class PasswordChangeSerializer(serializers.Serializer):
    current_password = serializers.CharField(write_only=True)
    new_password = serializers.CharField(write_only=True, min_length=6)

    def validate_new_password(self, value):
        password_validation.validate_password(value, self.context["request"].user)
        return value


class PreferencesSerializer(serializers.Serializer):
    dark_mode = serializers.BooleanField(required=False, allow_null=True, default=None)
    language = serializers.CharField(max_length=10, required=False, allow_null=True, default=None)


class BackupCodeStatsSerializer(serializers.Serializer):
    total = serializers.IntegerField()
    used = serializers.IntegerField()
    available = serializers.IntegerField()
