"""
Domain exceptions and the DRF exception handler that turns them into JSON errors.

Every error response has the same body::

    {"timestamp": "...", "status": 404, "error": "Not Found", "message": "..."}
"""

import logging
import smtplib
from http import HTTPStatus

from django.core.exceptions import PermissionDenied as DjangoPermissionDenied
from django.db import IntegrityError
from django.http import Http404
from django.utils import timezone
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework_simplejwt.exceptions import InvalidToken, TokenError

logger = logging.getLogger(__name__)


class ResourceNotFoundError(exceptions.APIException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Resource not found."
    default_code = "not_found"


class UserNotFoundError(ResourceNotFoundError):
    default_detail = "User not found."
    default_code = "user_not_found"


class InvalidCredentialsError(exceptions.APIException):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Incorrect email or password."
    default_code = "invalid_credentials"


class InvalidOtpError(exceptions.APIException):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Invalid OTP."
    default_code = "invalid_otp"


class MissingFieldError(exceptions.APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "A required field is missing."
    default_code = "missing_field"


class UserAlreadyExistsError(exceptions.APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "This user already exists."
    default_code = "user_exists"


class ExternalServiceError(exceptions.APIException):
    status_code = status.HTTP_502_BAD_GATEWAY
    default_detail = "Exoplanet archive service unavailable."
    default_code = "bad_gateway"


class MailDeliveryError(exceptions.APIException):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = "Unable to send the email right now."
    default_code = "mail_unavailable"


def _first_message(detail) -> str:
    """Flatten DRF error details down to the first human readable message."""
    if isinstance(detail, dict):
        for field, value in detail.items():
            message = _first_message(value)
            if field in ("non_field_errors", "detail"):
                return message
            return f"{field}: {message}"
        return "Validation error"
    if isinstance(detail, (list, tuple)):
        return _first_message(detail[0]) if detail else "Validation error"
    return str(detail)


def error_response(message: str, status_code: int, exc: Exception) -> Response:
    if status_code >= 500:
        logger.error("Exception handled: %s - %s", exc.__class__.__name__, message, exc_info=exc)
    else:
        logger.warning("Exception handled: %s - %s", exc.__class__.__name__, message)

    body = {
        "timestamp": timezone.now().isoformat(),
        "status": status_code,
        "error": HTTPStatus(status_code).phrase,
        "message": message,
    }
    return Response(body, status=status_code)


def exception_handler(exc, context):
    """DRF EXCEPTION_HANDLER mapping every failure onto the shared error body."""
    if isinstance(exc, Http404):
        return error_response(str(exc) or "Not found.", status.HTTP_404_NOT_FOUND, exc)
    if isinstance(exc, DjangoPermissionDenied):
        return error_response(str(exc) or "Permission denied.", status.HTTP_403_FORBIDDEN, exc)
    if isinstance(exc, (InvalidToken, TokenError)):
        return error_response("Invalid or expired JWT token.", status.HTTP_401_UNAUTHORIZED, exc)
    if isinstance(exc, IntegrityError):
        return error_response("Data integrity violation.", status.HTTP_409_CONFLICT, exc)
    if isinstance(exc, smtplib.SMTPException):
        return error_response(MailDeliveryError.default_detail, status.HTTP_503_SERVICE_UNAVAILABLE, exc)

    if isinstance(exc, exceptions.APIException):
        response = error_response(_first_message(exc.detail), exc.status_code, exc)
        auth_header = getattr(exc, "auth_header", None)
        if auth_header:
            response["WWW-Authenticate"] = auth_header
        wait = getattr(exc, "wait", None)
        if wait:
            response["Retry-After"] = str(int(wait))
        return response

    return error_response("Internal server error.", status.HTTP_500_INTERNAL_SERVER_ERROR, exc)
