import uuid

import django.core.validators
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Product",
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
                ("name", models.CharField(db_index=True, max_length=255)),
                ("description", models.TextField()),
                (
                    "category",
                    models.CharField(
                        choices=[
                            ("Skincare", "Skincare"),
                            ("Lips", "Lips"),
                            ("Face", "Face"),
                            ("Eyes", "Eyes"),
                            ("Nails", "Nails"),
                            ("Bath & Body", "Bath & Body"),
                            ("Fragrances", "Fragrances"),
                        ],
                        db_index=True,
                        max_length=64,
                    ),
                ),
                ("is_best_seller", models.BooleanField(db_index=True, default=False)),
                (
                    "price",
                    models.PositiveIntegerField(
                        help_text="Selling price in minor units (paise).",
                        validators=[django.core.validators.MaxValueValidator(1000000000)],
                    ),
                ),
                (
                    "quantity",
                    models.PositiveIntegerField(
                        default=0,
                        help_text="Units in stock.",
                        validators=[django.core.validators.MaxValueValidator(1000000)],
                    ),
                ),
                ("images", models.JSONField(blank=True, default=list)),
                ("hint", models.CharField(blank=True, max_length=255)),
                (
                    "created_at",
                    models.DateTimeField(
                        default=django.utils.timezone.now, editable=False
                    ),
                ),
                (
                    "modified_at",
                    models.DateTimeField(blank=True, db_index=True, null=True),
                ),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(
                        fields=["category", "-modified_at"],
                        name="product_category_modified_idx",
                    )
                ],
            },
        ),
    ]
