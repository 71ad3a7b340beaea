"""
PATH: users/models/user.py

CUSTOM USER MODEL

- Email is the login identity (the admin console signs in with email + password).
- role decides who may use the inventory console; shoppers never need an account.
"""

from __future__ import annotations

import uuid

from django.contrib.auth.models import AbstractBaseUser, BaseUserManager, PermissionsMixin
from django.db import models


ROLE_ADMIN = "admin"
ROLE_CUSTOMER = "customer"


# ---------------- USER MANAGER ----------------
class UserManager(BaseUserManager):
    def _create_user(self, email, password, **extra_fields):
        email = self.normalize_email((email or "").strip())
        if not email:
            raise ValueError("An email address is required")

        user = self.model(email=email, **extra_fields)
        if password:
            user.set_password(password)
        else:
            user.set_unusable_password()

        user.full_clean(exclude=["password"])
        user.save(using=self._db)
        return user

    def create_user(self, email=None, password=None, **extra_fields):
        extra_fields.setdefault("role", ROLE_CUSTOMER)
        return self._create_user(email, password, **extra_fields)

    def create_superuser(self, email, password=None, **extra_fields):
        """Console owner: admin role, staff and superuser flags all forced on."""
        if not password:
            raise ValueError("Superuser must have a password")

        extra_fields.update(role=ROLE_ADMIN, is_staff=True, is_superuser=True, is_active=True)
        return self._create_user(email, password, **extra_fields)


# ---------------- USER MODEL ----------------
class User(AbstractBaseUser, PermissionsMixin):
    ROLE_CHOICES = [
        (ROLE_ADMIN, "Admin"),
        (ROLE_CUSTOMER, "Customer"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    email = models.EmailField(unique=True)

    first_name = models.CharField(max_length=100, blank=True)
    last_name = models.CharField(max_length=100, blank=True)

    role = models.CharField(max_length=20, choices=ROLE_CHOICES, default=ROLE_CUSTOMER)

    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = UserManager()

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = []

    class Meta:
        ordering = ["-created_at"]

    def clean(self):
        if self.email:
            self.email = self.__class__.objects.normalize_email(self.email).strip()

    @property
    def is_store_admin(self) -> bool:
        return self.is_active and (self.role == ROLE_ADMIN or self.is_staff)

    @property
    def display_name(self) -> str:
        full = f"{self.first_name} {self.last_name}".strip()
        return full or self.email.split("@")[0]

    def __str__(self):
        return f"{self.email} ({self.role})"
