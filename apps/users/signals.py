"""
User action notifications.

Services announce what a user did through ``user_action``; receivers react
without the sender knowing about them. Dispatch goes through
``notify_user_action``, which uses ``send_robust`` so a failing receiver is
logged and never breaks the request that triggered it.
"""

import logging

from django.dispatch import Signal, receiver

from apps.authentication.mail import send_email
from apps.common.constants import UserActionEvent

logger = logging.getLogger(__name__)

# Provides: event, user, data
user_action = Signal()

WELCOME_SUBJECT = "Welcome to ExoExplorer"
PASSWORD_CHANGED_SUBJECT = "Password changed - ExoExplorer"


def notify_user_action(event: UserActionEvent, user, data=None):
    responses = user_action.send_robust(sender=user.__class__, event=event, user=user, data=data)
    for handler, result in responses:
        if isinstance(result, Exception):
            logger.error(
                "User action receiver %s failed for %s: %s",
                getattr(handler, "__name__", handler),
                event,
                result,
                exc_info=result,
            )


def _greeting(user) -> str:
    name = f" {user.first_name}" if user.first_name else ""
    return f"Hello{name},"


@receiver(user_action, dispatch_uid="users.notification")
def send_notification(sender, event, user, data=None, **kwargs):
    if event == UserActionEvent.USER_REGISTERED:
        subject = WELCOME_SUBJECT
        body = (
            f"{_greeting(user)}\n\n"
            "Welcome to ExoExplorer, your gateway to the stars!\n\n"
            "Explore fascinating exoplanets, build your list of favorites and discover the wonders of our universe.\n\n"
            "The ExoExplorer team"
        )
    elif event == UserActionEvent.PASSWORD_CHANGED:
        subject = PASSWORD_CHANGED_SUBJECT
        body = (
            f"{_greeting(user)}\n\n"
            "Your password has been changed successfully.\n\n"
            "If you did not make this change, please contact our support immediately.\n\n"
            "The ExoExplorer team"
        )
    else:
        return

    try:
        send_email(user.email, subject, body)
    except Exception as err:  # noqa: BLE001 - notification mail is best effort
        logger.error("Failed to send '%s' email to %s: %s", subject, user.email, err)


@receiver(user_action, dispatch_uid="users.analytics")
def track_user_action(sender, event, user, data=None, **kwargs):
    properties = {}
    if event in (UserActionEvent.USER_FAVORITE_ADDED, UserActionEvent.USER_FAVORITE_REMOVED) and data is not None:
        properties = {"exoplanet_id": data.id, "exoplanet_name": data.name}
    logger.info("Analytics event %s for %s %s", event.value, user.email, properties)
