# users/urls.py
"""
PATH: users/urls.py

Mounted at /api/auth/. Guests never need these routes: carts and
bookmarks work with an X-Guest-Id header alone.
"""

from django.urls import path
from rest_framework_simplejwt.views import TokenRefreshView

from .views import LoginView, MeView, RegisterView

app_name = "users"

urlpatterns = [
    path("register/", RegisterView.as_view(), name="register"),
    path("login/", LoginView.as_view(), name="login"),
    path("token/refresh/", TokenRefreshView.as_view(), name="token-refresh"),
    # bearer token required
    path("me/", MeView.as_view(), name="me"),
]
