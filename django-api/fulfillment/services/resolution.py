"""Marketplace subscription resolution.

Turns provider lookups into explicit found / not-found outcomes. A missing
subscription is an outcome with an error code, never an exception; provider
failures still raise.
"""

import logging
from dataclasses import dataclass
from typing import Self

from fulfillment.domain import LandingPageMode, LandingPageRequest, Subscription, SubscriptionId
from fulfillment.domain.errors import ErrorCode
from fulfillment.stores.interfaces import MarketplaceSubscriptionService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Resolution:
    """Outcome of looking up the subscription behind a request."""

    subscription: Subscription | None = None
    error_code: ErrorCode | None = None

    @classmethod
    def found(cls, subscription: Subscription) -> Self:
        return cls(subscription=subscription)

    @classmethod
    def not_found(cls, error_code: ErrorCode) -> Self:
        return cls(error_code=error_code)


class TokenResolver:
    """Adapter over the marketplace subscription service."""

    def __init__(self, subscriptions: MarketplaceSubscriptionService) -> None:
        self._subscriptions = subscriptions

    def resolve_by_token(self, token: str) -> Resolution:
        subscription = self._subscriptions.resolve_subscription_token(token)
        if subscription is None:
            logger.warning("Marketplace token could not be resolved")
            return Resolution.not_found(ErrorCode.UNABLE_TO_RESOLVE_MARKETPLACE_TOKEN)
        return Resolution.found(subscription)

    def resolve_by_id(self, subscription_id: str | None) -> Resolution:
        try:
            parsed_id = SubscriptionId.from_string(subscription_id or "")
        except ValueError:
            logger.warning("Purchase confirmation posted without a subscription ID")
            return Resolution.not_found(ErrorCode.SUBSCRIPTION_ACTIVATION_FAILED)

        subscription = self._subscriptions.get_subscription(parsed_id)
        if subscription is None:
            logger.warning("Subscription %s not found for activation", parsed_id)
            return Resolution.not_found(ErrorCode.SUBSCRIPTION_ACTIVATION_FAILED)
        return Resolution.found(subscription)


class ProviderSubscriptionSource:
    """Resolves live requests against the real marketplace provider."""

    def __init__(self, resolver: TokenResolver) -> None:
        self._resolver = resolver

    def resolve(self, request: LandingPageRequest) -> Resolution:
        if request.mode is LandingPageMode.CONFIRM_PURCHASE:
            return self._resolver.resolve_by_id(request.subscription_id)
        return self._resolver.resolve_by_token(request.token)
