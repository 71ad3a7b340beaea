from django.contrib import admin

from products.pricing import format_money
from public.models import CheckoutHandoff, ContactMessage


@admin.register(CheckoutHandoff)
class CheckoutHandoffAdmin(admin.ModelAdmin):
    list_display = ("reference", "customer_name", "customer_phone", "total_display", "created_at")
    search_fields = ("reference", "customer_name", "customer_phone")
    readonly_fields = [f.name for f in CheckoutHandoff._meta.fields]

    @admin.display(description="Total", ordering="total")
    def total_display(self, obj):
        return format_money(obj.total, obj.currency)

    def has_add_permission(self, request):
        return False


@admin.register(ContactMessage)
class ContactMessageAdmin(admin.ModelAdmin):
    list_display = ("subject", "name", "email", "is_read", "created_at")
    list_filter = ("is_read",)
    search_fields = ("name", "email", "subject", "message")
    readonly_fields = ("name", "email", "subject", "message", "created_at")
