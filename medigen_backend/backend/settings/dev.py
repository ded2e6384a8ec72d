# backend/settings/dev.py
"""
PATH: backend/settings/dev.py

LOCAL DEVELOPMENT SETTINGS (MediGen storefront)

- Vite dev server on :5173 is the default browser origin
- Confirmation emails go to the console
- Order emails are sent inline so they show up right after checkout
"""

from __future__ import annotations

from .base import *  # noqa: F403
from .base import ORDERS, env

DEBUG = True

ALLOWED_HOSTS = env.list("ALLOWED_HOSTS", default=["localhost", "127.0.0.1", "0.0.0.0"])

_FRONTEND_DEV_ORIGINS = ["http://localhost:5173", "http://127.0.0.1:5173"]

CORS_ALLOWED_ORIGINS = env.list("CORS_ALLOWED_ORIGINS", default=_FRONTEND_DEV_ORIGINS)
CSRF_TRUSTED_ORIGINS = env.list("CSRF_TRUSTED_ORIGINS", default=_FRONTEND_DEV_ORIGINS)

EMAIL_BACKEND = "django.core.mail.backends.console.EmailBackend"

ORDERS = {
    **ORDERS,
    "NOTIFICATIONS_SYNC": env.bool("ORDER_NOTIFICATIONS_SYNC", default=True),
}
