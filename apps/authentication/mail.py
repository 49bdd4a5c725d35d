import logging

from django.conf import settings
from django.core.mail import send_mail
from django.template import TemplateDoesNotExist, TemplateSyntaxError
from django.template.loader import render_to_string

logger = logging.getLogger(__name__)

OTP_SUBJECT = "Your ExoExplorer verification code"
OTP_TEMPLATE = "authentication/otp_email.html"


def send_email(to: str, subject: str, body: str, html_body: str | None = None):
    """Send a mail through the configured backend; transport errors propagate."""
    logger.debug("Sending email '%s' to %s", subject, to)
    send_mail(
        subject,
        body,
        settings.DEFAULT_FROM_EMAIL,
        [to],
        html_message=html_body,
    )
    logger.info("Email '%s' sent to %s", subject, to)


def send_otp_email(to: str, otp: str):
    minutes = settings.OTP_EXPIRATION_MINUTES
    body = f"Your verification code is: {otp}\n\nIt expires in {minutes} minutes."
    try:
        html_body = render_to_string(OTP_TEMPLATE, {"otp": otp, "expiration_minutes": minutes})
    except (TemplateDoesNotExist, TemplateSyntaxError) as err:
        logger.warning("Could not render %s (%s), sending plain text only", OTP_TEMPLATE, err)
        html_body = None
    send_email(to, OTP_SUBJECT, body, html_body)
