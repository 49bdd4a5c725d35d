from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.common.drf_permissions import IsAdminRole
from apps.common.exceptions import MissingFieldError
from apps.exoplanets.serializers import ExoplanetSerializer
from apps.users import services
from apps.users.serializers import (
    BackupCodeStatsSerializer,
    PasswordChangeSerializer,
    PreferencesSerializer,
    ProfileUpdateSerializer,
    ToggleFavoriteSerializer,
    UserProfileSerializer,
)


# --- Favorites ---
class FavoritesView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(responses=ExoplanetSerializer(many=True))
    def get(self, request):
        return Response(services.get_favorites(request.user))


class ToggleFavoriteView(APIView):
    permission_classes = [IsAuthenticated]
    serializer_class = ToggleFavoriteSerializer

    def post(self, request):
        serializer = self.serializer_class(data=request.data)
        serializer.is_valid(raise_exception=True)
        favorite = services.toggle_favorite(request.user, serializer.validated_data["exoplanet_id"])
        message = "Exoplanet added to favorites" if favorite else "Exoplanet removed from favorites"
        return Response({"message": message, "favorite": favorite})


# --- Self profile ---
class ProfileView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(responses=UserProfileSerializer)
    def get(self, request):
        return Response(UserProfileSerializer(request.user).data)


class ProfileUpdateView(APIView):
    permission_classes = [IsAuthenticated]
    serializer_class = ProfileUpdateSerializer

    def put(self, request):
        serializer = self.serializer_class(data=request.data)
        serializer.is_valid(raise_exception=True)
        services.update_profile(
            request.user,
            serializer.validated_data.get("first_name"),
            serializer.validated_data.get("last_name"),
        )
        return Response({"message": "Profile updated successfully"})


class PasswordChangeView(APIView):
    permission_classes = [IsAuthenticated]
    serializer_class = PasswordChangeSerializer

    def post(self, request):
        serializer = self.serializer_class(data=request.data, context={"request": request})
        serializer.is_valid(raise_exception=True)
        services.change_password(
            request.user,
            serializer.validated_data["current_password"],
            serializer.validated_data["new_password"],
        )
        return Response({"message": "Password changed successfully"})


class PreferencesView(APIView):
    permission_classes = [IsAuthenticated]
    serializer_class = PreferencesSerializer

    def put(self, request):
        serializer = self.serializer_class(data=request.data)
        serializer.is_valid(raise_exception=True)
        services.update_preferences(request.user, **serializer.validated_data)
        return Response({"message": "Preferences updated successfully"})


# --- Admin ---
@extend_schema(
    parameters=[OpenApiParameter(name="email", type=str, required=True)],
    responses=BackupCodeStatsSerializer,
)
class BackupCodeStatsView(APIView):
    permission_classes = [IsAdminRole]

    def get(self, request):
        email = request.query_params.get("email")
        if not email:
            raise MissingFieldError("The email query parameter is required.")
        user = services.get_by_email(email)
        return Response(services.backup_code_stats(user))
