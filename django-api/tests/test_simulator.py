"""Unit tests for the test subscription simulator.

Run with: pytest tests/test_simulator.py -v
"""

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from fulfillment.domain import SubscriptionStatus
from fulfillment.domain.errors import ErrorCode, InvalidTestOverrideError
from fulfillment.services.simulator import OverrideKey, SubscriptionSimulator

NOW = datetime(2026, 1, 31, 15, 30, tzinfo=timezone.utc)


@pytest.fixture
def simulator() -> SubscriptionSimulator:
    return SubscriptionSimulator(clock=lambda: NOW)


@pytest.fixture
def overrides() -> dict[str, str]:
    subscription_id = str(uuid4())
    return {
        "beneficiaryAadObjectId": str(uuid4()),
        "beneficiaryAadTenantId": str(uuid4()),
        "beneficiaryUserEmail": f"beneficiary-{uuid4()}@example.com",
        "beneficiaryUserId": str(uuid4()),
        "isFreeTrial": "true",
        "offerId": f"Offer {uuid4()}",
        "planId": f"Plan {uuid4()}",
        "purchaserAadObjectId": str(uuid4()),
        "purchaserAadTenantId": str(uuid4()),
        "purchaserUserEmail": f"purchaser-{uuid4()}@example.com",
        "purchaserUserId": str(uuid4()),
        "seatQuantity": "40",
        "subscriptionId": subscription_id,
        "subscriptionName": f"Subscription {subscription_id}",
        "termEndDate": "2026-12-19T00:00:00.0000000Z",
        "termStartDate": "2026-10-19T00:00:00.0000000Z",
        "termUnit": "P2M",
    }


class TestDefaults:
    """A subscription is always complete, even with no overrides."""

    def test_no_overrides_produces_complete_test_subscription(self, simulator):
        """Every field is populated and the subscription is flagged as a test."""
        subscription = simulator.simulate({})

        assert subscription.is_test is True
        assert subscription.is_free_trial is False
        assert subscription.status is SubscriptionStatus.PENDING_ACTIVATION
        assert subscription.seat_quantity.value == 1
        assert subscription.term.term_unit == "P1M"
        for value in (
            subscription.subscription_id.value,
            subscription.subscription_name,
            subscription.offer_id,
            subscription.plan_id,
            subscription.purchaser.aad_tenant_id,
            subscription.purchaser.aad_object_id,
            subscription.purchaser.user_id,
            subscription.purchaser.user_email,
            subscription.beneficiary.aad_tenant_id,
            subscription.beneficiary.aad_object_id,
            subscription.beneficiary.user_id,
            subscription.beneficiary.user_email,
        ):
            assert value

    def test_term_defaults_to_one_month_from_today(self, simulator):
        """The term starts at midnight today and ends one calendar month later."""
        subscription = simulator.simulate({})

        assert subscription.term.start_date == datetime(2026, 1, 31, tzinfo=timezone.utc)
        # February has no 31st; the end date is clamped.
        assert subscription.term.end_date == datetime(2026, 2, 28, tzinfo=timezone.utc)

    def test_december_term_rolls_into_next_year(self):
        """A December start ends in January of the following year."""
        simulator = SubscriptionSimulator(clock=lambda: datetime(2026, 12, 5, tzinfo=timezone.utc))

        assert simulator.simulate({}).term.end_date == datetime(2027, 1, 5, tzinfo=timezone.utc)

    def test_ids_come_from_id_factory(self):
        """Generated IDs use the injected factory."""
        simulator = SubscriptionSimulator(clock=lambda: NOW, id_factory=lambda: "generated")

        subscription = simulator.simulate({})

        assert subscription.subscription_id.value == "generated"
        assert subscription.subscription_name == "Test subscription generated"
        assert subscription.purchaser.user_email == "purchaser-generated@example.com"

    def test_blank_override_falls_back_to_default(self, simulator):
        """Blank values count as absent."""
        subscription = simulator.simulate({"offerId": "  ", "seatQuantity": ""})

        assert subscription.offer_id == "test-offer"
        assert subscription.seat_quantity.value == 1


class TestOverrides:
    """Overrides from the query string replace defaults."""

    def test_all_overrides_are_applied(self, simulator, overrides):
        """Every override key shows up on the subscription."""
        subscription = simulator.simulate(overrides)

        assert subscription.subscription_id.value == overrides["subscriptionId"]
        assert subscription.subscription_name == overrides["subscriptionName"]
        assert subscription.offer_id == overrides["offerId"]
        assert subscription.plan_id == overrides["planId"]
        assert subscription.seat_quantity.value == 40
        assert subscription.is_free_trial is True
        assert subscription.is_test is True
        assert subscription.purchaser.aad_tenant_id == overrides["purchaserAadTenantId"]
        assert subscription.purchaser.aad_object_id == overrides["purchaserAadObjectId"]
        assert subscription.purchaser.user_id == overrides["purchaserUserId"]
        assert subscription.purchaser.user_email == overrides["purchaserUserEmail"]
        assert subscription.beneficiary.aad_tenant_id == overrides["beneficiaryAadTenantId"]
        assert subscription.beneficiary.aad_object_id == overrides["beneficiaryAadObjectId"]
        assert subscription.beneficiary.user_id == overrides["beneficiaryUserId"]
        assert subscription.beneficiary.user_email == overrides["beneficiaryUserEmail"]
        assert subscription.term.start_date == datetime(2026, 10, 19, tzinfo=timezone.utc)
        assert subscription.term.end_date == datetime(2026, 12, 19, tzinfo=timezone.utc)
        assert subscription.term.term_unit == "P2M"

    def test_override_keys_cover_every_query_parameter(self, overrides):
        """The simulator accepts exactly the documented parameters."""
        assert {key.value for key in OverrideKey} == set(overrides)

    def test_date_only_override_is_midnight_utc(self, simulator):
        """A bare date is read as midnight UTC."""
        subscription = simulator.simulate({"termStartDate": "2026-03-01"})

        assert subscription.term.start_date == datetime(2026, 3, 1, tzinfo=timezone.utc)
        assert subscription.term.end_date == datetime(2026, 4, 1, tzinfo=timezone.utc)

    def test_text_overrides_are_kept_verbatim(self, simulator):
        """Surrounding whitespace in a text override is preserved."""
        subscription = simulator.simulate(
            {"planId": " Plan A ", "subscriptionId": " sub-1 ", "purchaserUserEmail": " a@example.com"}
        )

        assert subscription.plan_id == " Plan A "
        assert subscription.subscription_id.value == " sub-1 "
        assert subscription.purchaser.user_email == " a@example.com"

    def test_typed_overrides_tolerate_surrounding_whitespace(self, simulator):
        subscription = simulator.simulate(
            {"seatQuantity": " 40 ", "isFreeTrial": " true ", "termStartDate": " 2026-03-01 "}
        )

        assert subscription.seat_quantity.value == 40
        assert subscription.is_free_trial is True
        assert subscription.term.start_date == datetime(2026, 3, 1, tzinfo=timezone.utc)

    def test_free_trial_flag_is_case_insensitive(self, simulator):
        assert simulator.simulate({"isFreeTrial": "TRUE"}).is_free_trial is True
        assert simulator.simulate({"isFreeTrial": "False"}).is_free_trial is False


class TestInvalidOverrides:
    """Malformed typed overrides are rejected."""

    @pytest.mark.parametrize(
        "parameter, value",
        [
            ("seatQuantity", "many"),
            ("seatQuantity", "-3"),
            ("isFreeTrial", "yes please"),
            ("termStartDate", "next tuesday"),
            ("termEndDate", "2026-13-45"),
        ],
    )
    def test_invalid_value_raises(self, simulator, parameter, value):
        """simulate raises InvalidTestOverrideError naming the parameter."""
        with pytest.raises(InvalidTestOverrideError) as exc_info:
            simulator.simulate({parameter: value})

        assert exc_info.value.code is ErrorCode.INVALID_TEST_OVERRIDE
        assert exc_info.value.parameter == parameter
