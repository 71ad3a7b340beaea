"""
PATH: backend/settings/prod.py

PRODUCTION SETTINGS

Fails closed (ImproperlyConfigured) unless the deployment provides:
- a real SECRET_KEY and ALLOWED_HOSTS
- a Postgres DATABASE_URL
- the store WhatsApp number (checkout hand-off depends on it)
- https-only CORS / CSRF origins for the storefront front end

Static files are served by WhiteNoise. Product and banner images go
through default storage under MEDIA_ROOT / MEDIA_URL.
"""

from __future__ import annotations

from django.core.exceptions import ImproperlyConfigured

from .base import *  # noqa: F403
from .base import BASE_DIR, MIDDLEWARE, STORAGES, env

DEBUG = False


def _required(name: str) -> str:
    value = (env(name, default="") or "").strip()
    if not value:
        raise ImproperlyConfigured(f"{name} must be set in production.")
    return value


def _https_origins(name: str) -> list[str]:
    origins = env.list(name, default=[])
    if not origins:
        raise ImproperlyConfigured(f"{name} must be set in production.")
    for origin in origins:
        if not origin.startswith("https://") or "localhost" in origin or "127.0.0.1" in origin:
            raise ImproperlyConfigured(f"{name} entries must be public https:// origins, got {origin!r}.")
    return origins


# ----------------------------
# Core
# ----------------------------
SECRET_KEY = _required("SECRET_KEY")
if SECRET_KEY == "dev-insecure-change-me":
    raise ImproperlyConfigured("SECRET_KEY is still the development placeholder.")

ALLOWED_HOSTS = env.list("ALLOWED_HOSTS", default=[])
if not ALLOWED_HOSTS:
    raise ImproperlyConfigured("ALLOWED_HOSTS must be set in production.")

# ----------------------------
# Database (Postgres)
# ----------------------------
if _required("DATABASE_URL").startswith("sqlite"):
    raise ImproperlyConfigured("SQLite is not supported in production; point DATABASE_URL at Postgres.")

DATABASES = {"default": env.db("DATABASE_URL")}
DATABASES["default"]["CONN_MAX_AGE"] = env.int("DB_CONN_MAX_AGE", default=60)

# ----------------------------
# Storefront
# ----------------------------
STORE_WHATSAPP_NUMBER = _required("STORE_WHATSAPP_NUMBER")

# ----------------------------
# Static files (WhiteNoise)
# ----------------------------
STATIC_ROOT = env("STATIC_ROOT", default=str(BASE_DIR / "staticfiles"))
MIDDLEWARE.insert(1, "whitenoise.middleware.WhiteNoiseMiddleware")
STORAGES = {
    **STORAGES,
    "staticfiles": {"BACKEND": "whitenoise.storage.CompressedManifestStaticFilesStorage"},
}

# ----------------------------
# Transport security
# ----------------------------
SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
SECURE_SSL_REDIRECT = env.bool("SECURE_SSL_REDIRECT", default=True)
SECURE_HSTS_SECONDS = env.int("SECURE_HSTS_SECONDS", default=3600)
SECURE_HSTS_INCLUDE_SUBDOMAINS = env.bool("SECURE_HSTS_INCLUDE_SUBDOMAINS", default=True)
SECURE_HSTS_PRELOAD = env.bool("SECURE_HSTS_PRELOAD", default=False)

SESSION_COOKIE_SECURE = CSRF_COOKIE_SECURE = True
SESSION_COOKIE_HTTPONLY = CSRF_COOKIE_HTTPONLY = True
SESSION_COOKIE_SAMESITE = CSRF_COOKIE_SAMESITE = "Lax"

SECURE_CONTENT_TYPE_NOSNIFF = True
SECURE_REFERRER_POLICY = "same-origin"
SECURE_CROSS_ORIGIN_OPENER_POLICY = "same-origin"
X_FRAME_OPTIONS = "DENY"

# ----------------------------
# CORS / CSRF
# ----------------------------
CORS_ALLOWED_ORIGINS = _https_origins("CORS_ALLOWED_ORIGINS")
CSRF_TRUSTED_ORIGINS = _https_origins("CSRF_TRUSTED_ORIGINS")
# The storefront sends bearer tokens, never cookies.
CORS_ALLOW_CREDENTIALS = False
