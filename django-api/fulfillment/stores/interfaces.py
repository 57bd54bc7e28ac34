"""Collaborator interfaces (repository pattern).

Implementations must be swappable and speak in domain models. Failures
(timeouts, transport errors) are raised, never returned as None.
"""

from abc import ABC, abstractmethod

from fulfillment.domain import Subscription, SubscriptionId, SubscriptionPurchased


class MarketplaceSubscriptionService(ABC):
    """Marketplace provider lookups."""

    @abstractmethod
    def resolve_subscription_token(self, token: str) -> Subscription | None:
        """Exchange a landing page token for its subscription, or None."""
        ...

    @abstractmethod
    def get_subscription(self, subscription_id: SubscriptionId) -> Subscription | None:
        """Return a subscription by ID, or None if the provider has no such subscription."""
        ...


class MarketplaceOperationService(ABC):
    """Marketplace provider operations."""

    @abstractmethod
    def acknowledge_subscription(self, subscription: Subscription) -> None:
        """Acknowledge a confirmed purchase with the provider."""
        ...


class SubscriptionRepository(ABC):
    """Interface for subscription snapshot persistence."""

    @abstractmethod
    def get_subscription(self, subscription_id: SubscriptionId) -> Subscription | None:
        """Return the stored snapshot, or None if not stored."""
        ...

    @abstractmethod
    def put_subscription(self, subscription: Subscription) -> None:
        """Insert or replace the stored snapshot."""
        ...


class SubscriptionEventPublisher(ABC):
    """Interface for the event transport."""

    @abstractmethod
    def publish_event(self, event: SubscriptionPurchased) -> None:
        """Publish an event. Raises if the event was not delivered."""
        ...
