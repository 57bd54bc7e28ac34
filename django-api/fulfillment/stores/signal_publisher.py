"""Event publisher backed by Django signals."""

from fulfillment.domain import SubscriptionPurchased
from fulfillment.signals import subscription_purchased
from fulfillment.stores.interfaces import SubscriptionEventPublisher


class SignalEventPublisher(SubscriptionEventPublisher):
    """Dispatch events to in-process signal receivers.

    Uses ``send`` rather than ``send_robust`` so a failing receiver fails
    the publication.
    """

    def publish_event(self, event: SubscriptionPurchased) -> None:
        subscription_purchased.send(sender=self.__class__, event=event)
