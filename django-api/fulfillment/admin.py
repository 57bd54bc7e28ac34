from django.contrib import admin

from fulfillment.models import Subscription


@admin.register(Subscription)
class SubscriptionAdmin(admin.ModelAdmin):
    list_display = ["subscription_name", "subscription_id", "offer_id", "plan_id", "status", "created_at"]
    list_filter = ["status", "is_test", "is_free_trial", "offer_id"]
    search_fields = ["subscription_id", "subscription_name", "purchaser_email", "beneficiary_email"]
    readonly_fields = ["created_at", "updated_at"]
