# store/models/banner.py

import uuid

from django.db import models


class Banner(models.Model):
    """
    Hero carousel slide on the home page.

    Lower position shows first; only active banners are public.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    image_url = models.CharField(max_length=500)
    alt = models.CharField(max_length=255, blank=True, default="")
    hint = models.CharField(max_length=255, blank=True, default="")
    link_url = models.CharField(max_length=500, blank=True, default="")

    position = models.PositiveIntegerField(default=0, db_index=True)
    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["position", "created_at"]

    def __str__(self):
        return self.alt or self.image_url
