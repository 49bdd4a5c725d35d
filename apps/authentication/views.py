import logging

from drf_spectacular.utils import extend_schema
from rest_framework import serializers, status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.authentication import services
from apps.authentication.serializers import (
    BackupCodesGenerateSerializer,
    BackupCodeVerificationSerializer,
    LoginSerializer,
    MessageSerializer,
    OtpVerificationSerializer,
    SignupSerializer,
    TokenResponseSerializer,
)
from apps.authentication.tokens import generate_token
from apps.common.utils import is_admin
from apps.users.services import get_by_email, register_user

logger = logging.getLogger(__name__)

OTP_SENT_MESSAGE = "OTP sent to your email address."


class SignupView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    serializer_class = SignupSerializer

    @extend_schema(request=SignupSerializer, responses=MessageSerializer)
    def post(self, request):
        serializer = self.serializer_class(data=request.data)
        serializer.is_valid(raise_exception=True)
        email = serializer.validated_data["email"]
        password = serializer.validated_data["password"]

        register_user(email, password)
        services.process_login(email, password)
        return Response({"message": f"Account created. {OTP_SENT_MESSAGE}"})


class LoginView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    serializer_class = LoginSerializer

    @extend_schema(request=LoginSerializer, responses=MessageSerializer)
    def post(self, request):
        serializer = self.serializer_class(data=request.data)
        serializer.is_valid(raise_exception=True)
        services.process_login(serializer.validated_data["email"], serializer.validated_data["password"])
        return Response({"message": OTP_SENT_MESSAGE})


class OtpVerifyView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    serializer_class = OtpVerificationSerializer

    @extend_schema(request=OtpVerificationSerializer, responses=TokenResponseSerializer)
    def post(self, request):
        serializer = self.serializer_class(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = services.verify_otp(serializer.validated_data["email"], serializer.validated_data["otp"])
        return Response(
            {
                "message": "OTP verified successfully.",
                "token": generate_token(user),
                "is_admin": is_admin(user),
            }
        )


class BackupCodesGenerateView(APIView):
    serializer_class = BackupCodesGenerateSerializer

    @extend_schema(request=BackupCodesGenerateSerializer, responses=serializers.ListSerializer(child=serializers.CharField()))
    def post(self, request):
        serializer = self.serializer_class(data=request.data)
        serializer.is_valid(raise_exception=True)
        codes = services.generate_backup_codes(request.user, serializer.validated_data["count"])
        return Response(codes)


class BackupCodeVerifyView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    serializer_class = BackupCodeVerificationSerializer

    @extend_schema(request=BackupCodeVerificationSerializer, responses=TokenResponseSerializer)
    def post(self, request):
        serializer = self.serializer_class(data=request.data)
        serializer.is_valid(raise_exception=True)
        email = serializer.validated_data["email"]

        if not services.verify_backup_code(email, serializer.validated_data["backup_code"]):
            return Response({"message": "Invalid backup code."}, status=status.HTTP_400_BAD_REQUEST)

        user = get_by_email(email)
        return Response({"message": "Backup code verified successfully.", "token": generate_token(user)})
