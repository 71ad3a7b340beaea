from django.core.management.base import BaseCommand

from store.models import Banner, StoreProfile

DEFAULT_BANNERS = [
    (
        "https://images.unsplash.com/photo-1522335789203-aabd1fc54bc9?q=80&w=1800&h=900&auto=format&fit=crop",
        "Promotional banner 1",
        "beauty product",
    ),
    (
        "https://images.unsplash.com/photo-1487412720507-e7ab37603c6f?q=80&w=1800&h=900&auto=format&fit=crop",
        "Promotional banner 2",
        "cosmetics model",
    ),
    (
        "https://images.unsplash.com/photo-1556228720-195a672e8a03?q=80&w=1800&h=900&auto=format&fit=crop",
        "Promotional banner 3",
        "skincare routine",
    ),
]


class Command(BaseCommand):
    help = "Create the store profile and the default hero banners (idempotent)"

    def handle(self, *args, **options):
        profile = StoreProfile.get_solo()
        self.stdout.write(f"Store profile: {profile.name} ({profile.whatsapp_number or 'no WhatsApp number'})")

        created = 0
        for position, (url, alt, hint) in enumerate(DEFAULT_BANNERS):
            _, was_created = Banner.objects.get_or_create(
                image_url=url,
                defaults={"alt": alt, "hint": hint, "position": position},
            )
            created += int(was_created)

        self.stdout.write(self.style.SUCCESS(f"✅ Storefront seeded ({created} new banners)."))
