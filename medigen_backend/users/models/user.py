"""
PATH: users/models/user.py

CUSTOM USER MODEL

Storefront identities:
- role "user": shopper (cart, bookmarks, checkout, own orders)
- role "admin": back-office (catalog CRUD, order status, activity log)

Login is by email only.
"""

from __future__ import annotations

import uuid

from django.contrib.auth.models import AbstractBaseUser, BaseUserManager, PermissionsMixin
from django.core.exceptions import ValidationError
from django.db import models

ROLE_USER = "user"
ROLE_ADMIN = "admin"


# ---------------- USER MANAGER ----------------
class UserManager(BaseUserManager):
    def create_user(self, email=None, password=None, **extra_fields):
        email = self.normalize_email((email or "").strip()).lower()
        if not email:
            raise ValueError("Email is required")

        extra_fields.setdefault("role", ROLE_USER)
        extra_fields.setdefault("is_active", True)

        user = self.model(email=email, **extra_fields)

        if password:
            user.set_password(password)
        else:
            user.set_unusable_password()

        user.full_clean(exclude=["password"])
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        if not email:
            raise ValueError("Superuser must have an email")
        if not password:
            raise ValueError("Superuser must have a password")

        extra_fields.setdefault("role", ROLE_ADMIN)
        extra_fields.setdefault("name", "Super Admin")
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)

        if extra_fields.get("is_staff") is not True:
            raise ValueError("Superuser must have is_staff=True")
        if extra_fields.get("is_superuser") is not True:
            raise ValueError("Superuser must have is_superuser=True")

        return self.create_user(email=email, password=password, **extra_fields)


# ---------------- USER MODEL ----------------
class User(AbstractBaseUser, PermissionsMixin):
    ROLE_CHOICES = [
        (ROLE_USER, "User"),
        (ROLE_ADMIN, "Admin"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    email = models.EmailField(unique=True)
    name = models.CharField(max_length=150, blank=True)
    phone = models.CharField(max_length=20, blank=True)

    role = models.CharField(max_length=10, choices=ROLE_CHOICES, default=ROLE_USER)

    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = UserManager()

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = []

    class Meta:
        ordering = ["-created_at"]

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN

    def clean(self):
        if self.email:
            self.email = self.__class__.objects.normalize_email(self.email).strip().lower()
        if not self.email:
            raise ValidationError("User must have an email")
        if self.role not in {ROLE_USER, ROLE_ADMIN}:
            raise ValidationError(f"Unknown role: {self.role}")

    def __str__(self):
        return f"{self.email} ({self.role})"
