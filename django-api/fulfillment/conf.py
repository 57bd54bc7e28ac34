"""Configuration for the fulfillment app, read from Django settings.

Settings are read on every call so each request works on its own
snapshot::

    FULFILLMENT = {
        "OFFER": {"IS_SETUP_COMPLETE": True, "OFFER_DISPLAY_NAME": "...", ...},
        "DEPLOYMENT": {"NAME": "...", "VERSION": "...", "IS_TEST_MODE_ENABLED": False},
        "SUBSCRIPTION_SERVICE": "dotted.path.to.Class",
        "OPERATION_SERVICE": "dotted.path.to.Class",
        "SUBSCRIPTION_REPOSITORY": "dotted.path.to.Class",
        "EVENT_PUBLISHER": "dotted.path.to.Class",
    }
"""

from typing import Any

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

from fulfillment.domain import DeploymentConfiguration, OfferConfiguration, UrlTemplate


def _section(name: str) -> dict[str, Any]:
    return getattr(settings, "FULFILLMENT", {}).get(name) or {}


def _template(offer: dict[str, Any], key: str) -> UrlTemplate | None:
    value = offer.get(key)
    return UrlTemplate(value) if value else None


def load_offer_configuration() -> OfferConfiguration:
    offer = _section("OFFER")
    configuration = OfferConfiguration(
        is_setup_complete=bool(offer.get("IS_SETUP_COMPLETE", False)),
        offer_display_name=offer.get("OFFER_DISPLAY_NAME", ""),
        offer_marketing_page_url=offer.get("OFFER_MARKETING_PAGE_URL") or None,
        offer_marketplace_listing_url=offer.get("OFFER_MARKETPLACE_LISTING_URL") or None,
        publisher_display_name=offer.get("PUBLISHER_DISPLAY_NAME", ""),
        publisher_copyright_notice=offer.get("PUBLISHER_COPYRIGHT_NOTICE", ""),
        publisher_contact_page_url=offer.get("PUBLISHER_CONTACT_PAGE_URL") or None,
        publisher_home_page_url=offer.get("PUBLISHER_HOME_PAGE_URL") or None,
        publisher_privacy_notice_page_url=offer.get("PUBLISHER_PRIVACY_NOTICE_PAGE_URL") or None,
        subscription_configuration_url=_template(offer, "SUBSCRIPTION_CONFIGURATION_URL"),
        subscription_purchase_confirmation_url=_template(
            offer, "SUBSCRIPTION_PURCHASE_CONFIRMATION_URL"
        ),
    )
    if configuration.is_setup_complete and not (
        configuration.subscription_configuration_url
        and configuration.subscription_purchase_confirmation_url
    ):
        raise ImproperlyConfigured(
            "FULFILLMENT['OFFER'] is marked complete but is missing "
            "SUBSCRIPTION_CONFIGURATION_URL or SUBSCRIPTION_PURCHASE_CONFIRMATION_URL."
        )
    return configuration


def load_deployment_configuration() -> DeploymentConfiguration:
    deployment = _section("DEPLOYMENT")
    return DeploymentConfiguration(
        name=deployment.get("NAME", ""),
        version=deployment.get("VERSION", ""),
        is_test_mode_enabled=bool(deployment.get("IS_TEST_MODE_ENABLED", False)),
    )


def load_component(setting: str) -> Any:
    """Instantiate the collaborator class configured under FULFILLMENT[setting]."""
    dotted_path = getattr(settings, "FULFILLMENT", {}).get(setting)
    if not dotted_path:
        raise ImproperlyConfigured(f"FULFILLMENT['{setting}'] is not configured.")
    try:
        component_class = import_string(dotted_path)
    except ImportError as exc:
        raise ImproperlyConfigured(
            f"FULFILLMENT['{setting}'] refers to '{dotted_path}', which cannot be imported."
        ) from exc
    return component_class()
