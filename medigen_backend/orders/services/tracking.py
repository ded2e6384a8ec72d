# orders/services/tracking.py

"""
Cosmetic tracking progression for the order page.

The hint is a step index (0 placed, 1 packed, 2 dispatched). The page opens
on "packed" and moves one step every few seconds after the order was
created. It is never persisted and never behind the authoritative status.
"""

from __future__ import annotations

from django.conf import settings
from django.utils import timezone

from orders.services.lifecycle import status_index


def display_progress_hint(order, now=None) -> int:
    cfg = getattr(settings, "ORDERS", {})
    step_seconds = max(int(cfg.get("PROGRESS_HINT_STEP_SECONDS", 3)), 1)
    start_step = int(cfg.get("PROGRESS_HINT_START_STEP", 1))
    max_step = int(cfg.get("PROGRESS_HINT_MAX_STEP", 2))

    now = now or timezone.now()
    elapsed = max((now - order.created_at).total_seconds(), 0)

    step = min(start_step + int(elapsed // step_seconds), max_step)
    floor = min(status_index(order.status), max_step)
    return max(step, floor)
