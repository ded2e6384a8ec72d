# users/management/commands/seed_admin.py

"""
PATH: users/management/commands/seed_admin.py

Bootstrap the back-office admin account.

- Email defaults to settings.ADMIN_EMAIL; password from --password or
  AUTO_ADMIN_PASSWORD env var.
- Idempotent: creates the admin if missing; otherwise only re-asserts the
  admin role/flags (password is reset only when --reset-password is given).
- Never prints the password.
"""

from __future__ import annotations

import os

from django.conf import settings
from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from users.models import ROLE_ADMIN


class Command(BaseCommand):
    help = "Create (or re-assert) the storefront admin account. Idempotent."

    def add_arguments(self, parser):
        parser.add_argument("--email", default=settings.ADMIN_EMAIL)
        parser.add_argument("--password", default=None)
        parser.add_argument("--reset-password", action="store_true")

    @transaction.atomic
    def handle(self, *args, **options):
        email = (options["email"] or "").strip().lower()
        password = (options["password"] or os.environ.get("AUTO_ADMIN_PASSWORD") or "").strip()

        User = get_user_model()
        user = User.objects.filter(email__iexact=email).first()

        if user is None:
            if not password:
                raise CommandError(
                    "Admin does not exist yet: provide --password or AUTO_ADMIN_PASSWORD."
                )
            User.objects.create_superuser(email=email, password=password)
            self.stdout.write(self.style.SUCCESS(f"Admin created: {email}"))
            return

        user.role = ROLE_ADMIN
        user.is_active = True
        user.is_staff = True
        user.is_superuser = True
        if options["reset_password"]:
            if not password:
                raise CommandError("--reset-password needs --password or AUTO_ADMIN_PASSWORD.")
            user.set_password(password)
        user.save()
        self.stdout.write(self.style.SUCCESS(f"Admin ensured: {email}"))
