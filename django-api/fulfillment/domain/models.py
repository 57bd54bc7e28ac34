"""Domain models for marketplace subscriptions and the landing page.

These are pure domain objects with no HTTP or persistence concerns.
Django ORM models are in fulfillment/models.py (persistence layer).
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Self
from uuid import uuid4

from fulfillment.domain.errors import ErrorCode
from fulfillment.domain.value_objects import SeatQuantity, SubscriptionId, UrlTemplate


class SubscriptionStatus(Enum):
    """Marketplace subscription lifecycle status."""

    PENDING_ACTIVATION = "PendingActivation"
    ACTIVE = "Active"
    SUSPENDED = "Suspended"
    CANCELLED = "Cancelled"


class LandingPageMode(Enum):
    """Which landing page entry point a request came through."""

    LIVE_DISPLAY = "LiveDisplay"
    TEST_DISPLAY = "TestDisplay"
    CONFIRM_PURCHASE = "ConfirmPurchase"


@dataclass(frozen=True)
class MarketplaceUser:
    """Purchaser or beneficiary identity."""

    aad_tenant_id: str
    aad_object_id: str
    user_id: str
    user_email: str


@dataclass(frozen=True)
class MarketplaceTerm:
    """Subscription billing term."""

    start_date: datetime | None
    end_date: datetime | None
    term_unit: str


@dataclass(frozen=True)
class Subscription:
    """Domain representation of a marketplace subscription."""

    subscription_id: SubscriptionId
    subscription_name: str
    offer_id: str
    plan_id: str
    seat_quantity: SeatQuantity
    is_free_trial: bool
    is_test: bool
    status: SubscriptionStatus
    purchaser: MarketplaceUser
    beneficiary: MarketplaceUser
    term: MarketplaceTerm

    @property
    def is_active(self) -> bool:
        return self.status is SubscriptionStatus.ACTIVE


@dataclass(frozen=True)
class OfferConfiguration:
    """Publisher and offer display/navigation settings."""

    is_setup_complete: bool
    offer_display_name: str = ""
    offer_marketing_page_url: str | None = None
    offer_marketplace_listing_url: str | None = None
    publisher_display_name: str = ""
    publisher_copyright_notice: str = ""
    publisher_contact_page_url: str | None = None
    publisher_home_page_url: str | None = None
    publisher_privacy_notice_page_url: str | None = None
    subscription_configuration_url: UrlTemplate | None = None
    subscription_purchase_confirmation_url: UrlTemplate | None = None


@dataclass(frozen=True)
class DeploymentConfiguration:
    """Environment-level settings for this deployment."""

    name: str
    version: str
    is_test_mode_enabled: bool = False


@dataclass(frozen=True)
class CallerContext:
    """Who is asking for the landing page."""

    is_authenticated: bool
    display_name: str | None = None

    @classmethod
    def anonymous(cls) -> Self:
        return cls(is_authenticated=False)


@dataclass(frozen=True)
class LandingPageRequest:
    """One landing page request, independent of HTTP."""

    mode: LandingPageMode
    caller: CallerContext
    token: str | None = None
    subscription_id: str | None = None
    overrides: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class LandingPageViewModel:
    """Everything the landing page template needs for one request."""

    in_test_mode: bool
    user_friendly_name: str | None
    offer_display_name: str
    offer_marketing_page_url: str | None
    offer_marketplace_listing_url: str | None
    publisher_display_name: str
    publisher_copyright_notice: str
    publisher_contact_page_url: str | None
    publisher_home_page_url: str | None
    publisher_privacy_notice_page_url: str | None
    error_code: ErrorCode | None = None
    subscription_id: str | None = None
    subscription_name: str | None = None
    offer_id: str | None = None
    plan_id: str | None = None
    seat_quantity: int | None = None
    is_free_trial: bool | None = None
    is_test: bool | None = None
    status: SubscriptionStatus | None = None
    purchaser_aad_tenant_id: str | None = None
    purchaser_aad_object_id: str | None = None
    purchaser_user_id: str | None = None
    purchaser_email_address: str | None = None
    beneficiary_aad_tenant_id: str | None = None
    beneficiary_aad_object_id: str | None = None
    beneficiary_user_id: str | None = None
    beneficiary_email_address: str | None = None
    term_start_date: datetime | None = None
    term_end_date: datetime | None = None
    term_unit: str | None = None

    @classmethod
    def for_offer(
        cls,
        offer: OfferConfiguration,
        caller: CallerContext,
        in_test_mode: bool = False,
        error_code: ErrorCode | None = None,
    ) -> Self:
        return cls(
            in_test_mode=in_test_mode,
            user_friendly_name=caller.display_name,
            offer_display_name=offer.offer_display_name,
            offer_marketing_page_url=offer.offer_marketing_page_url,
            offer_marketplace_listing_url=offer.offer_marketplace_listing_url,
            publisher_display_name=offer.publisher_display_name,
            publisher_copyright_notice=offer.publisher_copyright_notice,
            publisher_contact_page_url=offer.publisher_contact_page_url,
            publisher_home_page_url=offer.publisher_home_page_url,
            publisher_privacy_notice_page_url=offer.publisher_privacy_notice_page_url,
            error_code=error_code,
        )

    def with_subscription(self, subscription: Subscription) -> Self:
        return replace(
            self,
            subscription_id=subscription.subscription_id.value,
            subscription_name=subscription.subscription_name,
            offer_id=subscription.offer_id,
            plan_id=subscription.plan_id,
            seat_quantity=subscription.seat_quantity.value,
            is_free_trial=subscription.is_free_trial,
            is_test=subscription.is_test,
            status=subscription.status,
            purchaser_aad_tenant_id=subscription.purchaser.aad_tenant_id,
            purchaser_aad_object_id=subscription.purchaser.aad_object_id,
            purchaser_user_id=subscription.purchaser.user_id,
            purchaser_email_address=subscription.purchaser.user_email,
            beneficiary_aad_tenant_id=subscription.beneficiary.aad_tenant_id,
            beneficiary_aad_object_id=subscription.beneficiary.aad_object_id,
            beneficiary_user_id=subscription.beneficiary.user_id,
            beneficiary_email_address=subscription.beneficiary.user_email,
            term_start_date=subscription.term.start_date,
            term_end_date=subscription.term.end_date,
            term_unit=subscription.term.term_unit,
        )


class SubscriptionEventType(Enum):
    """Event type tags published by this service."""

    SUBSCRIPTION_PURCHASED = "Marketplace.SubscriptionPurchased"


@dataclass(frozen=True)
class SubscriptionPurchased:
    """Emitted once when a purchaser confirms a subscription."""

    subscription: Subscription
    occurred_at: datetime
    event_id: str = field(default_factory=lambda: str(uuid4()))
    event_type: SubscriptionEventType = SubscriptionEventType.SUBSCRIPTION_PURCHASED
    event_version: str = "1.0"
