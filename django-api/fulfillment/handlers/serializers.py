"""Serializers for request input and landing page responses."""

from rest_framework import serializers


class LandingPageFormSerializer(serializers.Serializer):
    """Purchase confirmation form posted from the landing page."""

    subscription_id = serializers.CharField(
        required=False, allow_blank=True, max_length=128, trim_whitespace=True
    )


class LandingPageSerializer(serializers.Serializer):
    """Serializer for the LandingPageViewModel domain model."""

    in_test_mode = serializers.BooleanField()
    user_friendly_name = serializers.CharField(allow_null=True)
    error_code = serializers.SerializerMethodField()

    offer_display_name = serializers.CharField()
    offer_marketing_page_url = serializers.CharField(allow_null=True)
    offer_marketplace_listing_url = serializers.CharField(allow_null=True)
    publisher_display_name = serializers.CharField()
    publisher_copyright_notice = serializers.CharField()
    publisher_contact_page_url = serializers.CharField(allow_null=True)
    publisher_home_page_url = serializers.CharField(allow_null=True)
    publisher_privacy_notice_page_url = serializers.CharField(allow_null=True)

    subscription_id = serializers.CharField(allow_null=True)
    subscription_name = serializers.CharField(allow_null=True)
    offer_id = serializers.CharField(allow_null=True)
    plan_id = serializers.CharField(allow_null=True)
    seat_quantity = serializers.IntegerField(allow_null=True)
    is_free_trial = serializers.BooleanField(allow_null=True)
    is_test = serializers.BooleanField(allow_null=True)
    status = serializers.SerializerMethodField()
    purchaser_aad_tenant_id = serializers.CharField(allow_null=True)
    purchaser_aad_object_id = serializers.CharField(allow_null=True)
    purchaser_user_id = serializers.CharField(allow_null=True)
    purchaser_email_address = serializers.CharField(allow_null=True)
    beneficiary_aad_tenant_id = serializers.CharField(allow_null=True)
    beneficiary_aad_object_id = serializers.CharField(allow_null=True)
    beneficiary_user_id = serializers.CharField(allow_null=True)
    beneficiary_email_address = serializers.CharField(allow_null=True)
    term_start_date = serializers.DateTimeField(allow_null=True)
    term_end_date = serializers.DateTimeField(allow_null=True)
    term_unit = serializers.CharField(allow_null=True)

    def get_error_code(self, model) -> str | None:
        return model.error_code.value if model.error_code else None

    def get_status(self, model) -> str | None:
        return model.status.value if model.status else None
