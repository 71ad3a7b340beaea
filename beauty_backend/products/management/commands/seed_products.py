import random

from django.core.management.base import BaseCommand
from django.utils import timezone

from products.categories import BATH_BODY, EYES, FACE, FRAGRANCES, LIPS, NAILS, SKINCARE
from products.models import Product
from products.services.images import placeholder_image_url


class Command(BaseCommand):
    help = "Seed a demo beauty catalog (idempotent by product name)"

    def add_arguments(self, parser):
        parser.add_argument(
            "--randomise-stock",
            action="store_true",
            help="Pick random stock levels (some products end up out of stock).",
        )

    def handle(self, *args, **options):
        self.stdout.write(self.style.WARNING("Seeding beauty catalog..."))

        # (name, category, price in paise, quantity, best seller, description)
        products_data = [
            ("Hydrating Rose Serum", SKINCARE, 129900, 25, True,
             "Lightweight serum with rose water and hyaluronic acid for all-day hydration."),
            ("Vitamin C Glow Cream", SKINCARE, 89900, 12, False,
             "Brightening day cream with stabilised vitamin C and SPF 20."),
            ("Velvet Matte Lipstick", LIPS, 59900, 40, True,
             "Long-wear matte lipstick in a rich, creamy formula that never dries."),
            ("Tinted Lip Balm", LIPS, 29900, 0, False,
             "Nourishing balm with shea butter and a sheer wash of colour."),
            ("Silk Finish Foundation", FACE, 149900, 8, True,
             "Buildable medium coverage foundation with a natural satin finish."),
            ("Mineral Setting Powder", FACE, 69900, 3, False,
             "Translucent powder that sets makeup and controls shine for hours."),
            ("Volume Boost Mascara", EYES, 49900, 30, True,
             "Smudge-proof mascara that lifts and volumises lashes in one coat."),
            ("Kohl Kajal Pencil", EYES, 19900, 60, False,
             "Intense black kajal enriched with almond oil, gentle on the eyes."),
            ("Gel Shine Nail Polish", NAILS, 24900, 22, False,
             "Chip-resistant nail colour with a glossy gel-like finish."),
            ("Lavender Body Butter", BATH_BODY, 54900, 15, False,
             "Whipped body butter with lavender oil for soft, calm skin."),
            ("Sandalwood Bath Soap", BATH_BODY, 14900, 0, False,
             "Handmade soap with pure sandalwood for a fragrant, gentle cleanse."),
            ("Oud Noir Eau de Parfum", FRAGRANCES, 249900, 5, True,
             "Warm oud and amber fragrance with a long-lasting woody dry down."),
        ]

        created_count = 0
        for name, category, price, quantity, best, description in products_data:
            if options["randomise_stock"]:
                quantity = random.choice([0, random.randint(1, 5), random.randint(6, 50)])

            now = timezone.now()
            _, created = Product.objects.update_or_create(
                name=name,
                defaults={
                    "category": category,
                    "price": price,
                    "quantity": quantity,
                    "is_best_seller": best,
                    "description": description,
                    "images": [placeholder_image_url(name)],
                    "hint": f"{name.lower()} product",
                    "modified_at": now,
                },
            )
            created_count += int(created)

        self.stdout.write(
            self.style.SUCCESS(
                f"✅ Catalog seeded ({created_count} new, {len(products_data) - created_count} updated)."
            )
        )
