"""
PATH: users/management/commands/ensure_superuser.py

Console owner bootstrap, safe to run on every deploy.

    python manage.py ensure_superuser
    python manage.py ensure_superuser --email owner@aynbeauty.in --password ...

Credentials default to AUTO_ADMIN_EMAIL / AUTO_ADMIN_PASSWORD.
The password is never echoed.
"""

from __future__ import annotations

import environ
from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction

from users.models.user import ROLE_ADMIN

env = environ.Env()


class Command(BaseCommand):
    help = "Create or refresh the store owner's admin console account."

    def add_arguments(self, parser):
        parser.add_argument("--email", default=env.str("AUTO_ADMIN_EMAIL", default=""))
        parser.add_argument("--password", default=env.str("AUTO_ADMIN_PASSWORD", default=""))

    @transaction.atomic
    def handle(self, *args, **options):
        email = (options["email"] or "").strip().lower()
        password = (options["password"] or "").strip()

        if not (email and password):
            self.stdout.write(self.style.WARNING("No admin credentials supplied; nothing to do."))
            return

        User = get_user_model()
        owner = User.objects.filter(email__iexact=email).first()

        if owner is None:
            User.objects.create_superuser(email=email, password=password)
            self.stdout.write(self.style.SUCCESS(f"Created admin {email}"))
            return

        owner.role = ROLE_ADMIN
        owner.is_active = owner.is_staff = owner.is_superuser = True
        owner.set_password(password)
        owner.save()
        self.stdout.write(self.style.SUCCESS(f"Refreshed admin {email}"))
