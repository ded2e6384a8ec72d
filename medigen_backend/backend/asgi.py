# backend/asgi.py
"""
ASGI entrypoint for the MediGen storefront API.

Set DJANGO_SETTINGS_MODULE=backend.settings.prod when serving behind uvicorn / daphne.
"""

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "backend.settings.dev")

application = get_asgi_application()
