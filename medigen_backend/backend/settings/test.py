# backend/settings/test.py
"""
PATH: backend/settings/test.py

TEST SETTINGS

- In-memory SQLite (fast, isolated)
- locmem email backend (tests inspect django.core.mail.outbox)
- Confirmation notifications run inline so tests can assert on them
- Throttling relaxed so API tests never hit rate limits
"""

from __future__ import annotations

from .base import *  # noqa: F403
from .base import ORDERS, REST_FRAMEWORK

DEBUG = False

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

EMAIL_BACKEND = "django.core.mail.backends.locmem.EmailBackend"

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

ORDERS = {**ORDERS, "NOTIFICATIONS_SYNC": True}

ASSISTANT = {
    "GEMINI_API_KEY": "test-key",
    "GEMINI_MODEL": "gemini-test",
    "TIMEOUT": 1,
}

REST_FRAMEWORK = {
    **REST_FRAMEWORK,
    "DEFAULT_THROTTLE_CLASSES": (),
    "DEFAULT_THROTTLE_RATES": {
        scope: "10000/min"
        for scope in REST_FRAMEWORK["DEFAULT_THROTTLE_RATES"]
    },
}
