"""Synthetic subscriptions for the test landing page.

Every field can be overridden from the query string; anything missing is
filled with a placeholder so the page always renders a complete
subscription. Nothing here talks to the marketplace.
"""

import calendar
from collections.abc import Callable, Mapping
from datetime import datetime
from datetime import timezone as dt_timezone
from enum import Enum
from uuid import uuid4

from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime

from fulfillment.domain import (
    LandingPageRequest,
    MarketplaceTerm,
    MarketplaceUser,
    SeatQuantity,
    Subscription,
    SubscriptionId,
    SubscriptionStatus,
)
from fulfillment.domain.errors import InvalidTestOverrideError
from fulfillment.services.resolution import Resolution

DEFAULT_OFFER_ID = "test-offer"
DEFAULT_PLAN_ID = "test-plan"
DEFAULT_SEAT_QUANTITY = 1
DEFAULT_TERM_UNIT = "P1M"


class OverrideKey(Enum):
    """Query string parameters accepted by the test landing page."""

    BENEFICIARY_AAD_OBJECT_ID = "beneficiaryAadObjectId"
    BENEFICIARY_AAD_TENANT_ID = "beneficiaryAadTenantId"
    BENEFICIARY_USER_EMAIL = "beneficiaryUserEmail"
    BENEFICIARY_USER_ID = "beneficiaryUserId"
    IS_FREE_TRIAL = "isFreeTrial"
    OFFER_ID = "offerId"
    PLAN_ID = "planId"
    PURCHASER_AAD_OBJECT_ID = "purchaserAadObjectId"
    PURCHASER_AAD_TENANT_ID = "purchaserAadTenantId"
    PURCHASER_USER_EMAIL = "purchaserUserEmail"
    PURCHASER_USER_ID = "purchaserUserId"
    SEAT_QUANTITY = "seatQuantity"
    SUBSCRIPTION_ID = "subscriptionId"
    SUBSCRIPTION_NAME = "subscriptionName"
    TERM_END_DATE = "termEndDate"
    TERM_START_DATE = "termStartDate"
    TERM_UNIT = "termUnit"


class SubscriptionSimulator:
    """Builds test subscriptions from request overrides."""

    def __init__(
        self,
        clock: Callable[[], datetime] = timezone.now,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        self._clock = clock
        self._new_id = id_factory or (lambda: str(uuid4()))

    def simulate(self, overrides: Mapping[str, str]) -> Subscription:
        """Return a test subscription.

        Raises:
            InvalidTestOverrideError: If a typed override cannot be parsed.
        """
        subscription_id = _text(overrides, OverrideKey.SUBSCRIPTION_ID) or self._new_id()
        term_start = _moment(overrides, OverrideKey.TERM_START_DATE) or _midnight(self._clock())
        term_end = _moment(overrides, OverrideKey.TERM_END_DATE) or _one_month_after(term_start)

        return Subscription(
            subscription_id=SubscriptionId(subscription_id),
            subscription_name=(
                _text(overrides, OverrideKey.SUBSCRIPTION_NAME)
                or f"Test subscription {subscription_id}"
            ),
            offer_id=_text(overrides, OverrideKey.OFFER_ID) or DEFAULT_OFFER_ID,
            plan_id=_text(overrides, OverrideKey.PLAN_ID) or DEFAULT_PLAN_ID,
            seat_quantity=_seats(overrides),
            is_free_trial=_flag(overrides, OverrideKey.IS_FREE_TRIAL),
            is_test=True,
            status=SubscriptionStatus.PENDING_ACTIVATION,
            purchaser=MarketplaceUser(
                aad_tenant_id=(
                    _text(overrides, OverrideKey.PURCHASER_AAD_TENANT_ID) or self._new_id()
                ),
                aad_object_id=(
                    _text(overrides, OverrideKey.PURCHASER_AAD_OBJECT_ID) or self._new_id()
                ),
                user_id=_text(overrides, OverrideKey.PURCHASER_USER_ID) or self._new_id(),
                user_email=(
                    _text(overrides, OverrideKey.PURCHASER_USER_EMAIL)
                    or f"purchaser-{self._new_id()}@example.com"
                ),
            ),
            beneficiary=MarketplaceUser(
                aad_tenant_id=(
                    _text(overrides, OverrideKey.BENEFICIARY_AAD_TENANT_ID) or self._new_id()
                ),
                aad_object_id=(
                    _text(overrides, OverrideKey.BENEFICIARY_AAD_OBJECT_ID) or self._new_id()
                ),
                user_id=_text(overrides, OverrideKey.BENEFICIARY_USER_ID) or self._new_id(),
                user_email=(
                    _text(overrides, OverrideKey.BENEFICIARY_USER_EMAIL)
                    or f"beneficiary-{self._new_id()}@example.com"
                ),
            ),
            term=MarketplaceTerm(
                start_date=term_start,
                end_date=term_end,
                term_unit=_text(overrides, OverrideKey.TERM_UNIT) or DEFAULT_TERM_UNIT,
            ),
        )


class SimulatedSubscriptionSource:
    """Resolves test landing page requests without the marketplace."""

    def __init__(self, simulator: SubscriptionSimulator) -> None:
        self._simulator = simulator

    def resolve(self, request: LandingPageRequest) -> Resolution:
        return Resolution.found(self._simulator.simulate(request.overrides))


def _text(overrides: Mapping[str, str], key: OverrideKey) -> str | None:
    value = overrides.get(key.value)
    if value is None or not value.strip():
        return None
    return value


def _flag(overrides: Mapping[str, str], key: OverrideKey) -> bool:
    value = _text(overrides, key)
    if value is None:
        return False
    value = value.strip().lower()
    if value not in ("true", "false"):
        raise InvalidTestOverrideError(key.value)
    return value == "true"


def _seats(overrides: Mapping[str, str]) -> SeatQuantity:
    value = _text(overrides, OverrideKey.SEAT_QUANTITY)
    if value is None:
        return SeatQuantity(DEFAULT_SEAT_QUANTITY)
    try:
        return SeatQuantity(int(value.strip()))
    except ValueError:
        raise InvalidTestOverrideError(OverrideKey.SEAT_QUANTITY.value) from None


def _moment(overrides: Mapping[str, str], key: OverrideKey) -> datetime | None:
    value = _text(overrides, key)
    if value is None:
        return None
    value = value.strip()
    try:
        parsed = parse_datetime(value)
        if parsed is None:
            day = parse_date(value)
            if day is not None:
                parsed = datetime(day.year, day.month, day.day)
    except ValueError:
        parsed = None
    if parsed is None:
        raise InvalidTestOverrideError(key.value)
    if timezone.is_naive(parsed):
        parsed = parsed.replace(tzinfo=dt_timezone.utc)
    return parsed


def _midnight(moment: datetime) -> datetime:
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def _one_month_after(moment: datetime) -> datetime:
    years, month_index = divmod(moment.month, 12)
    year, month = moment.year + years, month_index + 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)
