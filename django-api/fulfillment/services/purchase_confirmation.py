"""Purchase confirmation.

Runs once per confirmed purchase: acknowledge with the marketplace, store
the snapshot, publish a single SubscriptionPurchased event, then redirect.
Each step raises on failure and nothing is retried here, so the event is
only published after the earlier steps succeeded.
"""

import logging
from collections.abc import Callable
from datetime import datetime

from django.utils import timezone

from fulfillment.domain import OfferConfiguration, Subscription, SubscriptionPurchased
from fulfillment.domain.actions import Redirect
from fulfillment.domain.errors import EventPublicationError
from fulfillment.stores.interfaces import (
    MarketplaceOperationService,
    SubscriptionEventPublisher,
    SubscriptionRepository,
)

logger = logging.getLogger(__name__)


class PurchaseConfirmationCoordinator:
    def __init__(
        self,
        operations: MarketplaceOperationService,
        repository: SubscriptionRepository,
        publisher: SubscriptionEventPublisher,
        clock: Callable[[], datetime] = timezone.now,
    ) -> None:
        self._operations = operations
        self._repository = repository
        self._publisher = publisher
        self._clock = clock

    def confirm(self, subscription: Subscription, offer: OfferConfiguration) -> Redirect:
        """Complete a purchase and return the confirmation redirect.

        Raises:
            EventPublicationError: If the event transport rejected the event.
        """
        subscription_id = subscription.subscription_id

        self._operations.acknowledge_subscription(subscription)
        self._repository.put_subscription(subscription)

        event = SubscriptionPurchased(subscription=subscription, occurred_at=self._clock())
        try:
            self._publisher.publish_event(event)
        except Exception as exc:
            logger.exception("Failed to publish purchase event for subscription %s", subscription_id)
            raise EventPublicationError(subscription_id.value) from exc

        logger.info("Subscription %s purchase confirmed (event %s)", subscription_id, event.event_id)
        return Redirect(offer.subscription_purchase_confirmation_url.expand(subscription_id))
