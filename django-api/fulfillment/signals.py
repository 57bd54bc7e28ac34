"""Django signals carrying subscription events.

Receivers run synchronously inside the request. Any receiver exception
propagates to the publisher.
"""

import logging

from django.dispatch import Signal, receiver

logger = logging.getLogger(__name__)

# Sent with keyword argument ``event`` (a SubscriptionPurchased).
subscription_purchased = Signal()


@receiver(subscription_purchased)
def log_subscription_purchased(sender, event, **kwargs):
    """Record purchased subscriptions in the application log."""
    logger.info(
        "Subscription %s purchased (offer=%s, plan=%s, seats=%d, event=%s)",
        event.subscription.subscription_id,
        event.subscription.offer_id,
        event.subscription.plan_id,
        event.subscription.seat_quantity.value,
        event.event_id,
    )
