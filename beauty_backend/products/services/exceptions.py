# products/services/exceptions.py

"""
PRODUCT SERVICE ERRORS

Field-level validation problems are raised as django ValidationError
(views turn them into 400s). Storage problems get their own types.
"""


class ProductServiceError(Exception):
    """Base exception for product/inventory service failures."""

    status_code = 400


class ImageUploadError(ProductServiceError):
    """Raised when an image cannot be written to storage."""

    status_code = 502


class InvalidImageError(ImageUploadError):
    """Raised when an uploaded file is not an acceptable image."""

    status_code = 400
