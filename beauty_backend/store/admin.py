from django.contrib import admin

from store.models import Banner, StoreProfile


@admin.register(StoreProfile)
class StoreProfileAdmin(admin.ModelAdmin):
    list_display = ("name", "whatsapp_number", "contact_email", "currency", "updated_at")

    def has_add_permission(self, request):
        return not StoreProfile.objects.exists()

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(Banner)
class BannerAdmin(admin.ModelAdmin):
    list_display = ("alt", "position", "is_active", "updated_at")
    list_editable = ("position", "is_active")
    list_display_links = ("alt",)
    ordering = ("position", "created_at")
