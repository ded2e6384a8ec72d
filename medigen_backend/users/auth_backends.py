"""
PATH: users/auth_backends.py

AUTH BACKEND: email + password (case-insensitive email lookup)
"""

from __future__ import annotations

from django.contrib.auth import get_user_model
from django.contrib.auth.backends import BaseBackend

User = get_user_model()


class EmailBackend(BaseBackend):
    def authenticate(self, request, username=None, password=None, **kwargs):
        """
        Django convention passes "username" as the identifier; our serializers
        pass email=... explicitly. Either works.
        """
        identifier = (kwargs.get("email") or username or "").strip()
        if not identifier or password is None:
            return None

        try:
            user = User.objects.get(email__iexact=identifier)
        except User.DoesNotExist:
            # run the hasher anyway so timing doesn't reveal unknown emails
            User().set_password(password)
            return None

        if not user.is_active:
            return None

        if user.check_password(password):
            return user

        return None

    def get_user(self, user_id):
        try:
            return User.objects.get(pk=user_id)
        except User.DoesNotExist:
            return None
