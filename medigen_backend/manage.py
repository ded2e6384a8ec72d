#!/usr/bin/env python
"""
PATH: manage.py

Command-line entrypoint for the MediGen backend.

Useful commands:
    python manage.py migrate
    python manage.py seed_admin        # idempotent admin account
    python manage.py seed_medicines    # demo catalog
    python manage.py test

An unset DJANGO_SETTINGS_MODULE, or one pointing at the bare
"backend.settings" package, falls back to backend.settings.dev.
"""

from __future__ import annotations

import os
import sys

DEFAULT_SETTINGS = "backend.settings.dev"


def main() -> None:
    configured = (os.environ.get("DJANGO_SETTINGS_MODULE") or "").strip()
    if configured in ("", "backend.settings"):
        os.environ["DJANGO_SETTINGS_MODULE"] = DEFAULT_SETTINGS

    try:
        from django.core.management import execute_from_command_line
    except ImportError as exc:
        raise ImportError(
            "Django is not importable. Install the project first: pip install -e ."
        ) from exc

    execute_from_command_line(sys.argv)


if __name__ == "__main__":
    main()
