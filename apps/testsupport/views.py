"""
Reset hooks for end-to-end and load test runs.

Every view answers 404 unless ``ENABLE_TEST_ENDPOINTS`` is set.
"""

import logging
import re

from django.contrib.auth import get_user_model
from django.core import mail
from django.db import transaction
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.authentication.mail import OTP_SUBJECT
from apps.common.drf_permissions import TestEndpointsEnabled
from apps.exoplanets.builders import ExoplanetBuilder
from apps.exoplanets.data_loader import clear_exoplanets

logger = logging.getLogger(__name__)

User = get_user_model()

OTP_PATTERN = re.compile(r"\b(\d{6})\b")


class ResetHookView(APIView):
    permission_classes = [TestEndpointsEnabled]
    authentication_classes = []


@extend_schema(parameters=[OpenApiParameter(name="email", type=str, required=True)])
class ResetUserView(ResetHookView):
    def delete(self, request):
        email = request.query_params.get("email", "")
        logger.info("Resetting test user %s", email)
        User.objects.filter(email__iexact=email).delete()
        return Response(status=status.HTTP_200_OK)


class ResetDatabaseView(ResetHookView):
    @transaction.atomic
    def delete(self, request):
        logger.info("Resetting exoplanets and adding Kepler-Test")
        clear_exoplanets()
        (
            ExoplanetBuilder()
            .with_name("Kepler-Test")
            .with_distance(42.0)
            .with_temperature(273.0)
            .with_image("https://example.com/kepler.png")
            .with_radius(1.0)
            .with_mass(1.0)
            .with_orbital_period_days(365.0)
            .with_orbital_period_years(1.0)
            .build()
            .save()
        )
        return Response(status=status.HTTP_200_OK)


class ResetAllView(ResetHookView):
    @transaction.atomic
    def delete(self, request):
        logger.info("Resetting the entire database")
        clear_exoplanets()
        User.objects.all().delete()
        return Response(status=status.HTTP_200_OK)


class LastOtpView(ResetHookView):
    def get(self, request):
        """Latest OTP from the in-memory mail outbox, empty when none was sent."""
        for message in reversed(getattr(mail, "outbox", [])):
            if message.subject != OTP_SUBJECT:
                continue
            match = OTP_PATTERN.search(message.body)
            if match:
                return Response({"otp": match.group(1)})
        return Response({"otp": ""})
