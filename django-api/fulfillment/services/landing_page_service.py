"""Landing page service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Decide every request through the decision engine
- Resolve subscriptions only when a decision needs one
- Return terminal actions; soft failures are rendered, hard failures raise
"""

from collections.abc import Mapping
from dataclasses import replace

from fulfillment.domain import (
    CallerContext,
    DeploymentConfiguration,
    LandingPageMode,
    LandingPageRequest,
    OfferConfiguration,
)
from fulfillment.domain.actions import Action
from fulfillment.services.decision_engine import (
    DecisionState,
    LandingPageDecisionEngine,
    PurchaseHandoff,
    ResolutionRequired,
)
from fulfillment.services.purchase_confirmation import PurchaseConfirmationCoordinator
from fulfillment.services.resolution import ProviderSubscriptionSource, TokenResolver
from fulfillment.services.simulator import SimulatedSubscriptionSource, SubscriptionSimulator
from fulfillment.stores.interfaces import MarketplaceSubscriptionService


class LandingPageService:
    """Service for the marketplace landing page entry points."""

    def __init__(
        self,
        offer: OfferConfiguration,
        deployment: DeploymentConfiguration,
        subscriptions: MarketplaceSubscriptionService,
        coordinator: PurchaseConfirmationCoordinator,
        simulator: SubscriptionSimulator | None = None,
        engine: LandingPageDecisionEngine | None = None,
    ) -> None:
        self._offer = offer
        self._deployment = deployment
        self._coordinator = coordinator
        self._engine = engine or LandingPageDecisionEngine()
        self._provider = ProviderSubscriptionSource(TokenResolver(subscriptions))
        self._simulated = SimulatedSubscriptionSource(simulator or SubscriptionSimulator())

    def get_live_landing_page(self, caller: CallerContext, token: str | None = None) -> Action:
        """Handle a purchaser arriving from the marketplace."""
        return self._handle(
            LandingPageRequest(mode=LandingPageMode.LIVE_DISPLAY, caller=caller, token=token)
        )

    def post_live_landing_page(self, caller: CallerContext, subscription_id: str | None) -> Action:
        """Handle a purchaser confirming their subscription.

        Raises:
            EventPublicationError: If the purchase event could not be published.
        """
        return self._handle(
            LandingPageRequest(
                mode=LandingPageMode.CONFIRM_PURCHASE,
                caller=caller,
                subscription_id=subscription_id,
            )
        )

    def get_test_landing_page(
        self, caller: CallerContext, overrides: Mapping[str, str] | None = None
    ) -> Action:
        """Render the landing page for a simulated subscription.

        Raises:
            InvalidTestOverrideError: If an override value is malformed.
        """
        return self._handle(
            LandingPageRequest(
                mode=LandingPageMode.TEST_DISPLAY,
                caller=caller,
                overrides=dict(overrides or {}),
            )
        )

    def _handle(self, request: LandingPageRequest) -> Action:
        state = DecisionState(request=request, offer=self._offer, deployment=self._deployment)
        outcome = self._engine.evaluate(state)

        if isinstance(outcome, ResolutionRequired):
            source = (
                self._simulated if request.mode is LandingPageMode.TEST_DISPLAY else self._provider
            )
            state = replace(state, resolution=source.resolve(request))
            outcome = self._engine.evaluate(state)

        if isinstance(outcome, PurchaseHandoff):
            return self._coordinator.confirm(outcome.subscription, self._offer)
        return outcome
