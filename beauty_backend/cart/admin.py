from django.contrib import admin

from cart.models import Cart, CartItem
from products.pricing import format_money


class CartItemInline(admin.TabularInline):
    model = CartItem
    extra = 0
    can_delete = False
    fields = ("name", "category", "price", "quantity", "stock", "product")
    readonly_fields = fields

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Cart)
class CartAdmin(admin.ModelAdmin):
    list_display = ("id", "is_active", "item_count", "subtotal_display", "updated_at")
    list_filter = ("is_active",)
    readonly_fields = ("id", "is_active", "created_at", "updated_at")
    inlines = [CartItemInline]

    @admin.display(description="Subtotal")
    def subtotal_display(self, obj):
        return format_money(obj.subtotal)
