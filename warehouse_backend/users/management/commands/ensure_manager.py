# users/management/commands/ensure_manager.py

"""
PATH: users/management/commands/ensure_manager.py

Bootstrap the first inventory manager account.

- Reads AUTO_MANAGER_EMAIL + AUTO_MANAGER_PASSWORD from env.
- Idempotent: creates the manager if missing; resets password + role if present.
- Never prints the password.
"""

from __future__ import annotations

import os

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction


class Command(BaseCommand):
    help = "Create/update an inventory manager (superuser) from env vars (idempotent)."

    def handle(self, *args, **options):
        email = (os.environ.get("AUTO_MANAGER_EMAIL") or "").strip()
        password = (os.environ.get("AUTO_MANAGER_PASSWORD") or "").strip()

        if not email or not password:
            self.stdout.write(self.style.WARNING("AUTO_MANAGER_* env vars not set. Skipping."))
            return

        User = get_user_model()

        with transaction.atomic():
            user = User.objects.select_for_update().filter(email__iexact=email).first()

            if user:
                user.role = User.ROLE_MANAGER
                user.is_active = True
                user.is_staff = True
                user.is_superuser = True
                user.set_password(password)
                user.save()
                self.stdout.write(self.style.SUCCESS(f"Manager ensured: {email} (updated)"))
                return

            User.objects.create_superuser(email=email, password=password)

        self.stdout.write(self.style.SUCCESS(f"Manager ensured: {email} (created)"))
