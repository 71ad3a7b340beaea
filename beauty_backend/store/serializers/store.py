# store/serializers/store.py

from rest_framework import serializers

from store.models import Banner, StoreProfile


class StoreProfileSerializer(serializers.ModelSerializer):
    """
    Store identity (header/footer/contact page) + checkout WhatsApp number.
    """

    name = serializers.CharField(max_length=120)

    class Meta:
        model = StoreProfile
        fields = [
            "name",
            "tagline",
            "whatsapp_number",
            "contact_email",
            "phone",
            "address",
            "currency",
            "updated_at",
        ]
        read_only_fields = ["updated_at"]

    def validate_name(self, value: str):
        v = (value or "").strip()
        if not v:
            raise serializers.ValidationError("Store name cannot be blank")
        return v

    def validate_whatsapp_number(self, value: str):
        v = (value or "").strip()
        digits = "".join(ch for ch in v if ch.isdigit())
        if v and not 8 <= len(digits) <= 15:
            raise serializers.ValidationError("Enter a full international number, e.g. +91 7019449136")
        return v

    def validate_currency(self, value: str):
        v = (value or "").strip().upper()
        if len(v) != 3 or not v.isalpha():
            raise serializers.ValidationError("Use a 3-letter currency code, e.g. INR")
        return v


class BannerSerializer(serializers.ModelSerializer):
    class Meta:
        model = Banner
        fields = [
            "id",
            "image_url",
            "alt",
            "hint",
            "link_url",
            "position",
            "is_active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class BannerWriteSerializer(serializers.Serializer):
    """
    Admin banner form. Either an uploaded image or an image_url is
    required on create.
    """

    image = serializers.FileField(required=False, write_only=True)
    image_url = serializers.CharField(required=False, allow_blank=True, max_length=500)
    alt = serializers.CharField(required=False, allow_blank=True, max_length=255)
    hint = serializers.CharField(required=False, allow_blank=True, max_length=255)
    link_url = serializers.CharField(required=False, allow_blank=True, max_length=500)
    position = serializers.IntegerField(required=False, min_value=0)
    is_active = serializers.BooleanField(required=False, default=True)

    def validate(self, attrs):
        if not self.partial and not attrs.get("image") and not (attrs.get("image_url") or "").strip():
            raise serializers.ValidationError({"image": "Upload an image or provide image_url"})
        return attrs


class StorefrontSerializer(serializers.Serializer):
    """Public read model: profile + active banners + categories."""

    profile = StoreProfileSerializer()
    banners = BannerSerializer(many=True)
    categories = serializers.ListField(child=serializers.DictField())
