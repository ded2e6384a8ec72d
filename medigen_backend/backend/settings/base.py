"""
PATH: backend/settings/base.py

BASE SETTINGS (shared by dev + prod + test)

Storefront backend:
- Catalog, pricing quotes, carts/bookmarks (per identity), orders + tracking
- Throttling for public write / poll / assistant endpoints
- Business constants (pricing tiers, fees, order ids) are env-overridable
- Sentry (optional): error visibility in production
"""

from __future__ import annotations

from datetime import timedelta
from pathlib import Path

import environ
from corsheaders.defaults import default_headers, default_methods

# -----------------------------------------
# BASE DIRECTORY
# -----------------------------------------
BASE_DIR = Path(__file__).resolve().parent.parent.parent

# -----------------------------------------
# ENV (django-environ)
# -----------------------------------------
env = environ.Env(
    DEBUG=(bool, True),
    SECRET_KEY=(str, ""),
    TIME_ZONE=(str, "Asia/Kolkata"),
    ADMIN_PATH=(str, "admin/"),
    ALLOWED_HOSTS=(list, ["localhost", "127.0.0.1"]),
    CORS_ALLOWED_ORIGINS=(list, ["http://localhost:5173"]),
    CSRF_TRUSTED_ORIGINS=(list, ["http://localhost:5173"]),
    DATABASE_URL=(str, f"sqlite:///{BASE_DIR / 'db.sqlite3'}"),
    # Throttling
    THROTTLE_ANON_RATE=(str, "60/min"),
    THROTTLE_USER_RATE=(str, "600/min"),
    THROTTLE_PUBLIC_POLL_RATE=(str, "120/min"),
    THROTTLE_PUBLIC_WRITE_RATE=(str, "10/min"),
    THROTTLE_PUBLIC_CATALOG_RATE=(str, "120/min"),
    THROTTLE_ASSISTANT_RATE=(str, "20/min"),
    # Pricing
    GST_RATE=(str, "0.12"),
    PLATFORM_FEE=(str, "10.00"),
    FREE_DELIVERY_THRESHOLD=(str, "200.00"),
    DELIVERY_FEE=(str, "40.00"),
    # Orders
    ORDER_ID_PREFIX=(str, "ORD"),
    ORDER_ID_MAX_ATTEMPTS=(int, 5),
    DELIVERY_TIME_ESTIMATE=(str, "45 mins"),
    ORDER_NOTIFICATIONS_SYNC=(bool, False),
    # Mail
    ADMIN_EMAIL=(str, "admin@medigen.com"),
    DEFAULT_FROM_EMAIL=(str, "MediGen System <no-reply@medigen.com>"),
    EMAIL_URL=(str, "consolemail://"),
    # Assistant
    GEMINI_API_KEY=(str, ""),
    GEMINI_MODEL=(str, "gemini-3-flash-preview"),
    GEMINI_TIMEOUT=(int, 25),
    # Logging
    DJANGO_LOG_LEVEL=(str, "INFO"),
    # Sentry (optional; enable by setting SENTRY_DSN)
    SENTRY_DSN=(str, ""),
    SENTRY_ENVIRONMENT=(str, "development"),
    SENTRY_TRACES_SAMPLE_RATE=(float, 0.0),
    SENTRY_SEND_PII=(bool, False),
)

# -----------------------------------------
# LOAD .env
# -----------------------------------------
env_file_1 = BASE_DIR / ".env"
env_file_2 = BASE_DIR.parent / ".env"

if env_file_1.exists():
    env.read_env(str(env_file_1))
elif env_file_2.exists():
    env.read_env(str(env_file_2))

# -----------------------------------------
# CORE SECURITY
# -----------------------------------------
SECRET_KEY = (env("SECRET_KEY") or "dev-insecure-change-me").strip()
DEBUG = env.bool("DEBUG")
ALLOWED_HOSTS = env.list("ALLOWED_HOSTS")
ADMIN_PATH = (env("ADMIN_PATH") or "admin/").strip()

# -----------------------------------------
# I18N / TZ
# -----------------------------------------
LANGUAGE_CODE = "en-us"
TIME_ZONE = (env("TIME_ZONE") or "Asia/Kolkata").strip()
USE_I18N = True
USE_TZ = True

# -----------------------------------------
# AUTH USER MODEL (custom)
# -----------------------------------------
AUTH_USER_MODEL = "users.User"

AUTHENTICATION_BACKENDS = [
    "users.auth_backends.EmailBackend",
]

# -----------------------------------------
# INSTALLED APPS
# -----------------------------------------
INSTALLED_APPS = [
    "corsheaders",
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "rest_framework",
    "rest_framework_simplejwt",
    "drf_spectacular",
    "django_filters",
    "users.apps.UsersConfig",
    "activity.apps.ActivityConfig",
    "catalog.apps.CatalogConfig",
    "pricing.apps.PricingConfig",
    "storage.apps.StorageConfig",
    "cart.apps.CartConfig",
    "orders.apps.OrdersConfig",
    "assistant.apps.AssistantConfig",
]

# -----------------------------------------
# MIDDLEWARE
# -----------------------------------------
MIDDLEWARE = [
    "corsheaders.middleware.CorsMiddleware",
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "backend.urls"
WSGI_APPLICATION = "backend.wsgi.application"
APPEND_SLASH = True

# -----------------------------------------
# TEMPLATES (Django admin + order emails)
# -----------------------------------------
TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [str(BASE_DIR / "templates")],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    }
]

# -----------------------------------------
# REST FRAMEWORK
# -----------------------------------------
REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": (
        "rest_framework_simplejwt.authentication.JWTAuthentication",
        "rest_framework.authentication.SessionAuthentication",
    ),
    "DEFAULT_PERMISSION_CLASSES": ("rest_framework.permissions.IsAuthenticated",),
    "DEFAULT_FILTER_BACKENDS": ("django_filters.rest_framework.DjangoFilterBackend",),
    "DEFAULT_PAGINATION_CLASS": "rest_framework.pagination.PageNumberPagination",
    "PAGE_SIZE": 20,
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
    "DEFAULT_THROTTLE_CLASSES": (
        "rest_framework.throttling.AnonRateThrottle",
        "rest_framework.throttling.UserRateThrottle",
    ),
    "DEFAULT_THROTTLE_RATES": {
        "anon": env("THROTTLE_ANON_RATE"),
        "user": env("THROTTLE_USER_RATE"),
        "public_poll": env("THROTTLE_PUBLIC_POLL_RATE"),
        "public_write": env("THROTTLE_PUBLIC_WRITE_RATE"),
        "public_catalog": env("THROTTLE_PUBLIC_CATALOG_RATE"),
        "assistant": env("THROTTLE_ASSISTANT_RATE"),
    },
}

# -----------------------------------------
# SIMPLE JWT
# -----------------------------------------
SIMPLE_JWT = {
    "ACCESS_TOKEN_LIFETIME": timedelta(minutes=30),
    "REFRESH_TOKEN_LIFETIME": timedelta(days=1),
}

# -----------------------------------------
# DATABASE
# -----------------------------------------
DATABASES = {
    "default": env.db("DATABASE_URL"),
}

# -----------------------------------------
# PRICING (bulk tiers + bill constants)
# -----------------------------------------
# Tiers are (min_units, percent); highest threshold wins, never cumulative.
PRICING = {
    "BULK_DISCOUNT_TIERS": [(100, 10), (50, 5)],
    "GST_RATE": env("GST_RATE"),
    "PLATFORM_FEE": env("PLATFORM_FEE"),
    "FREE_DELIVERY_THRESHOLD": env("FREE_DELIVERY_THRESHOLD"),
    "DELIVERY_FEE": env("DELIVERY_FEE"),
    # (max_distance_km, fee); beyond the last band the fallback fee applies
    "DELIVERY_DISTANCE_BANDS": [(1, "15.00"), (2, "20.00"), (5, "40.00")],
    "DELIVERY_FAR_FEE": "60.00",
}

# -----------------------------------------
# ORDERS
# -----------------------------------------
ORDERS = {
    "ORDER_ID_PREFIX": (env("ORDER_ID_PREFIX") or "ORD").strip(),
    "ORDER_ID_MAX_ATTEMPTS": env.int("ORDER_ID_MAX_ATTEMPTS"),
    "DELIVERY_TIME_ESTIMATE": (env("DELIVERY_TIME_ESTIMATE") or "45 mins").strip(),
    # Tests flip this on so confirmation emails are sent inline.
    "NOTIFICATIONS_SYNC": env.bool("ORDER_NOTIFICATIONS_SYNC"),
    # Cosmetic tracking progression (first step, seconds per step, max step)
    "PROGRESS_HINT_START_STEP": 1,
    "PROGRESS_HINT_STEP_SECONDS": 3,
    "PROGRESS_HINT_MAX_STEP": 2,
}

# -----------------------------------------
# MAIL
# -----------------------------------------
ADMIN_EMAIL = (env("ADMIN_EMAIL") or "admin@medigen.com").strip().lower()
DEFAULT_FROM_EMAIL = env("DEFAULT_FROM_EMAIL")
vars().update(env.email_url("EMAIL_URL"))

# -----------------------------------------
# ASSISTANT (Gemini)
# -----------------------------------------
ASSISTANT = {
    "GEMINI_API_KEY": (env("GEMINI_API_KEY") or "").strip(),
    "GEMINI_MODEL": (env("GEMINI_MODEL") or "gemini-3-flash-preview").strip(),
    "TIMEOUT": env.int("GEMINI_TIMEOUT"),
}

# -----------------------------------------
# LOGGING
# -----------------------------------------
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "{levelname} {asctime} {name} {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "INFO",
    },
    "loggers": {
        "django": {
            "handlers": ["console"],
            "level": env("DJANGO_LOG_LEVEL"),
            "propagate": False,
        },
        **{
            app: {"handlers": ["console"], "level": "DEBUG", "propagate": False}
            for app in (
                "activity",
                "assistant",
                "cart",
                "catalog",
                "orders",
                "pricing",
                "storage",
                "users",
            )
        },
    },
}

# -----------------------------------------
# SENTRY (optional)
# -----------------------------------------
SENTRY_DSN = (env("SENTRY_DSN") or "").strip()
SENTRY_ENVIRONMENT = (env("SENTRY_ENVIRONMENT") or "development").strip()
SENTRY_TRACES_SAMPLE_RATE = float(env("SENTRY_TRACES_SAMPLE_RATE"))
SENTRY_SEND_PII = env.bool("SENTRY_SEND_PII")

if SENTRY_DSN:
    import sentry_sdk
    from sentry_sdk.integrations.django import DjangoIntegration

    sentry_sdk.init(
        dsn=SENTRY_DSN,
        environment=SENTRY_ENVIRONMENT,
        integrations=[DjangoIntegration()],
        traces_sample_rate=SENTRY_TRACES_SAMPLE_RATE,
        send_default_pii=SENTRY_SEND_PII,
    )

# -----------------------------------------
# CORS / CSRF
# -----------------------------------------
CORS_ALLOWED_ORIGINS = env.list("CORS_ALLOWED_ORIGINS")
CORS_ALLOW_CREDENTIALS = True
CORS_ALLOW_METHODS = list(default_methods)
CORS_ALLOW_HEADERS = [*default_headers, "x-guest-id"]

CSRF_TRUSTED_ORIGINS = env.list("CSRF_TRUSTED_ORIGINS")

# -----------------------------------------
# STATIC FILES
# -----------------------------------------
STATIC_URL = "static/"
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# -----------------------------------------
# SWAGGER
# -----------------------------------------
SPECTACULAR_SETTINGS = {
    "TITLE": "MediGen Storefront API",
    "DESCRIPTION": "Generic vs branded medicine catalog, cart, checkout and order tracking API",
    "VERSION": "1.0.0",
    "SERVE_INCLUDE_SCHEMA": False,
}
