# users/services.py

"""
ACCOUNT SIDE EFFECTS

- Welcome email on registration
- Admin alert email + activity entry on shopper login

Mail failures are logged; they never fail registration or login.
"""

from __future__ import annotations

import logging
import re

from django.conf import settings
from django.core.mail import send_mail
from django.template.loader import render_to_string
from django.utils import timezone

from activity.models import ActivityLog
from activity.services import log_activity

logger = logging.getLogger(__name__)

# Min 8 chars, 1 uppercase, 1 lowercase, 1 digit, 1 special character
_STRONG_PASSWORD_RE = re.compile(
    r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[@$!%*?&])[A-Za-z\d@$!%*?&]{8,}$"
)


def is_strong_password(password: str) -> bool:
    return bool(_STRONG_PASSWORD_RE.match(password or ""))


def is_reserved_email(email: str) -> bool:
    return (email or "").strip().lower() == settings.ADMIN_EMAIL


def _send(to: str, subject: str, template: str, context: dict) -> bool:
    """
    Renders users/email/<template>.{txt,html}; both are autoescaped Django templates.
    """
    try:
        send_mail(
            subject=subject,
            message=render_to_string(f"users/email/{template}.txt", context),
            from_email=settings.DEFAULT_FROM_EMAIL,
            recipient_list=[to],
            html_message=render_to_string(f"users/email/{template}.html", context),
        )
        return True
    except Exception:
        logger.exception("Account email failed", extra={"to": to, "subject": subject})
        return False


def on_registered(user, *, ip_address=None) -> None:
    _send(
        user.email,
        "Welcome to MediGen!",
        "welcome",
        {"display_name": user.name or user.email},
    )
    log_activity(
        category=ActivityLog.CATEGORY_REGISTRATION,
        message=f"New User Registered: {user.name or user.email}",
        actor_email=user.email,
        ip_address=ip_address,
    )


def on_logged_in(user, *, ip_address=None) -> None:
    if user.is_admin:
        return

    _send(
        settings.ADMIN_EMAIL,
        f"Alert: User Login - {user.name or user.email}",
        "login_alert",
        {"user": user, "logged_in_at": timezone.localtime(), "ip_address": ip_address},
    )
    log_activity(
        category=ActivityLog.CATEGORY_LOGIN,
        message=f"User Login: {user.name or user.email}",
        actor_email=user.email,
        ip_address=ip_address,
    )
