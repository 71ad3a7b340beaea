# public/apps.py

"""
PUBLIC APP CONFIG

Public storefront (AllowAny) module:
- Product catalog + search
- Checkout hand-off to WhatsApp
- Contact form
"""

from django.apps import AppConfig


class PublicConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "public"
    verbose_name = "Public Storefront"
