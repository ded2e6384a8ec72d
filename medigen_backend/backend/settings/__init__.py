# backend/settings/__init__.py
"""
PATH: backend/settings/__init__.py

MediGen settings modules. Pick one with DJANGO_SETTINGS_MODULE:

    backend.settings.dev    local storefront + console email
    backend.settings.test   fast hashers, locmem email, relaxed throttles
    backend.settings.prod   Postgres / SMTP / whitenoise, fails fast on bad env

The package itself exports nothing.
"""
