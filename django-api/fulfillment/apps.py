from django.apps import AppConfig


class FulfillmentConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "fulfillment"
    verbose_name = "Marketplace fulfillment"

    def ready(self) -> None:
        from fulfillment import signals  # noqa: F401
