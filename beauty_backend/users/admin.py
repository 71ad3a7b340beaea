# users/admin.py

"""
Console accounts in Django Admin.

Shoppers never sign in, so every row here is someone who can (or once
could) manage the shop's inventory.
"""

from __future__ import annotations

from django.contrib import admin, messages
from django.contrib.auth import get_user_model
from django.contrib.auth.admin import UserAdmin as DjangoUserAdmin

from users.models.user import ROLE_ADMIN, ROLE_CUSTOMER

User = get_user_model()


@admin.register(User)
class UserAdmin(DjangoUserAdmin):
    ordering = ("email",)
    list_display = ("email", "display_name", "role", "console_access", "last_login")
    list_filter = ("role", "is_active")
    search_fields = ("email", "first_name", "last_name")
    readonly_fields = ("last_login", "created_at", "updated_at")
    actions = ("grant_console_access", "revoke_console_access")

    fieldsets = (
        (None, {"fields": ("email", "password", "role")}),
        ("Name", {"fields": ("first_name", "last_name")}),
        ("Flags", {"fields": ("is_active", "is_staff", "is_superuser")}),
        ("Activity", {"fields": ("last_login", "created_at", "updated_at")}),
    )
    add_fieldsets = (
        (None, {"classes": ("wide",), "fields": ("email", "role", "password1", "password2")}),
    )

    @admin.display(boolean=True, description="Console")
    def console_access(self, obj):
        return obj.is_store_admin

    @admin.action(description="Grant admin console access")
    def grant_console_access(self, request, queryset):
        n = queryset.update(role=ROLE_ADMIN, is_active=True)
        self.message_user(request, f"{n} account(s) can now use the console.", messages.SUCCESS)

    @admin.action(description="Revoke admin console access")
    def revoke_console_access(self, request, queryset):
        n = queryset.exclude(pk=request.user.pk).update(role=ROLE_CUSTOMER, is_staff=False)
        self.message_user(request, f"{n} account(s) lost console access.", messages.WARNING)
