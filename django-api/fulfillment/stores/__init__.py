from fulfillment.stores.interfaces import (
    MarketplaceOperationService,
    MarketplaceSubscriptionService,
    SubscriptionEventPublisher,
    SubscriptionRepository,
)

__all__ = [
    "MarketplaceOperationService",
    "MarketplaceSubscriptionService",
    "SubscriptionEventPublisher",
    "SubscriptionRepository",
]
