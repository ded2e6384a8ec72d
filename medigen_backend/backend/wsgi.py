# backend/wsgi.py
"""
WSGI entrypoint for the storefront API.

Falls back to dev settings; production deployments must export
DJANGO_SETTINGS_MODULE=backend.settings.prod.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "backend.settings.dev")

application = get_wsgi_application()
