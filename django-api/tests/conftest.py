"""Pytest configuration and shared fixtures."""

from datetime import datetime, timezone
from uuid import uuid4

import pytest
from rest_framework.test import APIClient

from fulfillment.domain import (
    CallerContext,
    DeploymentConfiguration,
    MarketplaceTerm,
    MarketplaceUser,
    OfferConfiguration,
    SeatQuantity,
    Subscription,
    SubscriptionId,
    SubscriptionStatus,
    UrlTemplate,
)
from fulfillment.services import LandingPageService, PurchaseConfirmationCoordinator
from fulfillment.services.simulator import SubscriptionSimulator
from fulfillment.stores.interfaces import (
    MarketplaceOperationService,
    MarketplaceSubscriptionService,
    SubscriptionEventPublisher,
    SubscriptionRepository,
)

FIXED_NOW = datetime(2026, 10, 19, 15, 30, tzinfo=timezone.utc)


class FakeMarketplaceSubscriptionService(MarketplaceSubscriptionService):
    """Marketplace lookups backed by dicts."""

    def __init__(self, timeline: list[str]) -> None:
        self.by_token: dict[str, Subscription] = {}
        self.by_id: dict[str, Subscription] = {}
        self.calls: list[tuple[str, str]] = []
        self._timeline = timeline

    def resolve_subscription_token(self, token: str) -> Subscription | None:
        self.calls.append(("resolve_subscription_token", token))
        self._timeline.append("resolve")
        return self.by_token.get(token)

    def get_subscription(self, subscription_id: SubscriptionId) -> Subscription | None:
        self.calls.append(("get_subscription", subscription_id.value))
        self._timeline.append("resolve")
        return self.by_id.get(subscription_id.value)


class RecordingOperationService(MarketplaceOperationService):
    def __init__(self, timeline: list[str]) -> None:
        self.acknowledged: list[Subscription] = []
        self.error: Exception | None = None
        self._timeline = timeline

    def acknowledge_subscription(self, subscription: Subscription) -> None:
        self._timeline.append("acknowledge")
        if self.error:
            raise self.error
        self.acknowledged.append(subscription)


class InMemorySubscriptionRepository(SubscriptionRepository):
    def __init__(self, timeline: list[str]) -> None:
        self.subscriptions: dict[str, Subscription] = {}
        self.error: Exception | None = None
        self._timeline = timeline

    def get_subscription(self, subscription_id: SubscriptionId) -> Subscription | None:
        return self.subscriptions.get(subscription_id.value)

    def put_subscription(self, subscription: Subscription) -> None:
        self._timeline.append("store")
        if self.error:
            raise self.error
        self.subscriptions[subscription.subscription_id.value] = subscription


class RecordingEventPublisher(SubscriptionEventPublisher):
    def __init__(self, timeline: list[str]) -> None:
        self.published = []
        self.error: Exception | None = None
        self._timeline = timeline

    def publish_event(self, event) -> None:
        self._timeline.append("publish")
        if self.error:
            raise self.error
        self.published.append(event)


def build_subscription(
    subscription_id: str | None = None,
    status: SubscriptionStatus = SubscriptionStatus.PENDING_ACTIVATION,
) -> Subscription:
    subscription_id = subscription_id or str(uuid4())
    return Subscription(
        subscription_id=SubscriptionId(subscription_id),
        subscription_name=f"Subscription {subscription_id}",
        offer_id=f"Offer {uuid4()}",
        plan_id=f"Plan {uuid4()}",
        seat_quantity=SeatQuantity(25),
        is_free_trial=False,
        is_test=False,
        status=status,
        purchaser=MarketplaceUser(
            aad_tenant_id=str(uuid4()),
            aad_object_id=str(uuid4()),
            user_id=str(uuid4()),
            user_email=f"purchaser-{subscription_id}@example.com",
        ),
        beneficiary=MarketplaceUser(
            aad_tenant_id=str(uuid4()),
            aad_object_id=str(uuid4()),
            user_id=str(uuid4()),
            user_email=f"beneficiary-{subscription_id}@example.com",
        ),
        term=MarketplaceTerm(
            start_date=datetime(2026, 10, 19, tzinfo=timezone.utc),
            end_date=datetime(2026, 11, 19, tzinfo=timezone.utc),
            term_unit="P1M",
        ),
    )


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def offer() -> OfferConfiguration:
    return OfferConfiguration(
        is_setup_complete=True,
        offer_display_name="Landing Page Testing",
        offer_marketing_page_url="https://example.com/offer",
        offer_marketplace_listing_url="https://marketplace.example.com/offer",
        publisher_display_name="Example Publisher",
        publisher_copyright_notice="(c) Example Publisher 2026",
        publisher_contact_page_url="https://example.com/contact",
        publisher_home_page_url="https://example.com",
        publisher_privacy_notice_page_url="https://example.com/privacy",
        subscription_configuration_url=UrlTemplate(
            "https://example.com/configure/{subscription-id}"
        ),
        subscription_purchase_confirmation_url=UrlTemplate(
            "https://example.com/purchase/{subscription-id}?source=landing"
        ),
    )


@pytest.fixture
def deployment() -> DeploymentConfiguration:
    return DeploymentConfiguration(name="Landing Page Testing", version="1.0", is_test_mode_enabled=True)


@pytest.fixture
def caller() -> CallerContext:
    return CallerContext(is_authenticated=True, display_name="Clippy")


@pytest.fixture
def timeline() -> list[str]:
    return []


@pytest.fixture
def marketplace(timeline) -> FakeMarketplaceSubscriptionService:
    return FakeMarketplaceSubscriptionService(timeline)


@pytest.fixture
def operations(timeline) -> RecordingOperationService:
    return RecordingOperationService(timeline)


@pytest.fixture
def repository(timeline) -> InMemorySubscriptionRepository:
    return InMemorySubscriptionRepository(timeline)


@pytest.fixture
def publisher(timeline) -> RecordingEventPublisher:
    return RecordingEventPublisher(timeline)


@pytest.fixture
def coordinator(operations, repository, publisher) -> PurchaseConfirmationCoordinator:
    return PurchaseConfirmationCoordinator(
        operations=operations,
        repository=repository,
        publisher=publisher,
        clock=lambda: FIXED_NOW,
    )


@pytest.fixture
def make_service(marketplace, coordinator):
    def make(offer: OfferConfiguration, deployment: DeploymentConfiguration) -> LandingPageService:
        return LandingPageService(
            offer=offer,
            deployment=deployment,
            subscriptions=marketplace,
            coordinator=coordinator,
            simulator=SubscriptionSimulator(clock=lambda: FIXED_NOW),
        )

    return make


@pytest.fixture
def service(make_service, offer, deployment) -> LandingPageService:
    return make_service(offer, deployment)


@pytest.fixture
def make_subscription():
    return build_subscription


@pytest.fixture
def now() -> datetime:
    return FIXED_NOW
