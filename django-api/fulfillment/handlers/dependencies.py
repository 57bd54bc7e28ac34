"""Per-request wiring of the landing page service.

Collaborators are created lazily so that requests stopped before any
marketplace call (setup incomplete, unauthenticated) do not need them to be
configured.
"""

from django.utils.functional import SimpleLazyObject

from fulfillment.conf import (
    load_component,
    load_deployment_configuration,
    load_offer_configuration,
)
from fulfillment.domain import CallerContext
from fulfillment.services import LandingPageService, PurchaseConfirmationCoordinator


def _lazy(setting: str) -> SimpleLazyObject:
    return SimpleLazyObject(lambda: load_component(setting))


def get_landing_page_service() -> LandingPageService:
    coordinator = PurchaseConfirmationCoordinator(
        operations=_lazy("OPERATION_SERVICE"),
        repository=_lazy("SUBSCRIPTION_REPOSITORY"),
        publisher=_lazy("EVENT_PUBLISHER"),
    )
    return LandingPageService(
        offer=load_offer_configuration(),
        deployment=load_deployment_configuration(),
        subscriptions=_lazy("SUBSCRIPTION_SERVICE"),
        coordinator=coordinator,
    )


def get_caller_context(user) -> CallerContext:
    """Build the caller context from an authenticated (or anonymous) Django user."""
    if user is None or not user.is_authenticated:
        return CallerContext.anonymous()
    get_full_name = getattr(user, "get_full_name", None)
    display_name = (get_full_name() if get_full_name else "") or user.get_username()
    return CallerContext(is_authenticated=True, display_name=display_name)
