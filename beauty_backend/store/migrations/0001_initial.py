import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="StoreProfile",
            fields=[
                (
                    "id",
                    models.PositiveSmallIntegerField(
                        default=1, editable=False, primary_key=True, serialize=False
                    ),
                ),
                ("name", models.CharField(max_length=120)),
                ("tagline", models.CharField(blank=True, default="", max_length=255)),
                (
                    "whatsapp_number",
                    models.CharField(
                        blank=True,
                        default="",
                        help_text="Number that receives checkout hand-off messages, e.g. +91 7019449136.",
                        max_length=32,
                    ),
                ),
                ("contact_email", models.EmailField(blank=True, default="", max_length=254)),
                ("phone", models.CharField(blank=True, default="", max_length=32)),
                ("address", models.TextField(blank=True, default="")),
                ("currency", models.CharField(default="INR", max_length=8)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "store profile",
                "verbose_name_plural": "store profile",
            },
        ),
        migrations.CreateModel(
            name="Banner",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("image_url", models.CharField(max_length=500)),
                ("alt", models.CharField(blank=True, default="", max_length=255)),
                ("hint", models.CharField(blank=True, default="", max_length=255)),
                ("link_url", models.CharField(blank=True, default="", max_length=500)),
                ("position", models.PositiveIntegerField(db_index=True, default=0)),
                ("is_active", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["position", "created_at"],
            },
        ),
    ]
