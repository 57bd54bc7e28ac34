from fulfillment.domain.models import (
    CallerContext,
    DeploymentConfiguration,
    LandingPageMode,
    LandingPageRequest,
    LandingPageViewModel,
    MarketplaceTerm,
    MarketplaceUser,
    OfferConfiguration,
    Subscription,
    SubscriptionPurchased,
    SubscriptionStatus,
)
from fulfillment.domain.value_objects import SeatQuantity, SubscriptionId, UrlTemplate

__all__ = [
    "CallerContext",
    "DeploymentConfiguration",
    "LandingPageMode",
    "LandingPageRequest",
    "LandingPageViewModel",
    "MarketplaceTerm",
    "MarketplaceUser",
    "OfferConfiguration",
    "Subscription",
    "SubscriptionPurchased",
    "SubscriptionStatus",
    "SeatQuantity",
    "SubscriptionId",
    "UrlTemplate",
]
