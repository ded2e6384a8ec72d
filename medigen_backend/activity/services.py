# activity/services.py

"""
ACTIVITY LOG SERVICE

log_activity() is called from auth, catalog and order flows.
It must never break the primary operation: failures are logged and swallowed.
"""

from __future__ import annotations

import logging

from django.db import DatabaseError, transaction

from activity.models import ActivityLog

logger = logging.getLogger(__name__)


def client_ip(request) -> str | None:
    if request is None:
        return None
    forwarded = (request.META.get("HTTP_X_FORWARDED_FOR") or "").strip()
    if forwarded:
        return forwarded.split(",")[0].strip() or None
    return request.META.get("REMOTE_ADDR") or None


def log_activity(
    *,
    category: str,
    message: str,
    actor_email: str = "",
    ip_address: str | None = None,
) -> ActivityLog | None:
    try:
        # savepoint: a failed insert must not poison the caller's transaction
        with transaction.atomic():
            return ActivityLog.objects.create(
                category=category,
                message=message,
                actor_email=(actor_email or "").strip().lower(),
                ip_address=ip_address,
            )
    except DatabaseError:
        logger.exception(
            "Failed to write activity log",
            extra={"category": category, "actor_email": actor_email},
        )
        return None


def mark_read(entry: ActivityLog) -> ActivityLog:
    if not entry.is_read:
        entry.is_read = True
        entry.save(update_fields=["is_read"])
    return entry
