"""Landing page decision engine.

The landing page outcome is chosen by an ordered list of rules; the first
rule that applies wins. Rules are grouped as:

- gates (setup, test mode availability, authentication) that apply to any
  request and never need the marketplace;
- mode rules that only apply to one entry point and, apart from the
  no-token rule, need the subscription behind the request.

Evaluation is pure. When the first candidate rule needs a subscription and
none has been resolved yet, the engine returns ``ResolutionRequired``; the
caller resolves and evaluates again. Requests stopped by a gate therefore
never reach the marketplace.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from fulfillment.domain import (
    DeploymentConfiguration,
    LandingPageMode,
    LandingPageRequest,
    LandingPageViewModel,
    OfferConfiguration,
    Subscription,
)
from fulfillment.domain.actions import (
    LANDING_PAGE_VIEW,
    SETUP_ROUTE,
    Action,
    Challenge,
    NotFound,
    Redirect,
    RedirectToRoute,
    Render,
)
from fulfillment.services.resolution import Resolution

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DecisionState:
    """Everything the engine decides on."""

    request: LandingPageRequest
    offer: OfferConfiguration
    deployment: DeploymentConfiguration
    resolution: Resolution | None = None

    @property
    def subscription(self) -> Subscription | None:
        return self.resolution.subscription if self.resolution else None


@dataclass(frozen=True)
class ResolutionRequired:
    """The request needs its subscription resolved before a decision."""


@dataclass(frozen=True)
class PurchaseHandoff:
    """A confirmed purchase to be completed by the confirmation coordinator."""

    subscription: Subscription


Outcome = Action | ResolutionRequired | PurchaseHandoff


@dataclass(frozen=True)
class Rule:
    name: str
    applies: Callable[[DecisionState], bool]
    decide: Callable[[DecisionState], Outcome]
    mode: LandingPageMode | None = None
    needs_resolution: bool = False


def _details(state: DecisionState) -> Render:
    in_test_mode = state.request.mode is LandingPageMode.TEST_DISPLAY
    model = LandingPageViewModel.for_offer(
        state.offer, state.request.caller, in_test_mode=in_test_mode
    ).with_subscription(state.subscription)
    return Render(LANDING_PAGE_VIEW, model)


def _error(state: DecisionState) -> Render:
    model = LandingPageViewModel.for_offer(
        state.offer, state.request.caller, error_code=state.resolution.error_code
    )
    return Render(LANDING_PAGE_VIEW, model)


def _marketing_page(state: DecisionState) -> Action:
    if state.offer.offer_marketing_page_url:
        return Redirect(state.offer.offer_marketing_page_url)
    return NotFound()


def _configuration_page(state: DecisionState) -> Redirect:
    subscription = state.subscription
    return Redirect(state.offer.subscription_configuration_url.expand(subscription.subscription_id))


LIVE = LandingPageMode.LIVE_DISPLAY
TEST = LandingPageMode.TEST_DISPLAY
CONFIRM = LandingPageMode.CONFIRM_PURCHASE

LANDING_PAGE_RULES: tuple[Rule, ...] = (
    Rule(
        "setup-incomplete",
        applies=lambda s: not s.offer.is_setup_complete,
        decide=lambda s: RedirectToRoute(SETUP_ROUTE),
    ),
    Rule(
        "test-mode-disabled",
        mode=TEST,
        applies=lambda s: not s.deployment.is_test_mode_enabled,
        decide=lambda s: NotFound(),
    ),
    Rule(
        "unauthenticated",
        applies=lambda s: not s.request.caller.is_authenticated,
        decide=lambda s: Challenge(),
    ),
    Rule(
        "live-without-token",
        mode=LIVE,
        applies=lambda s: not s.request.token,
        decide=_marketing_page,
    ),
    Rule(
        "live-token-unresolved",
        mode=LIVE,
        needs_resolution=True,
        applies=lambda s: s.subscription is None,
        decide=_error,
    ),
    Rule(
        "live-subscription-active",
        mode=LIVE,
        needs_resolution=True,
        applies=lambda s: s.subscription.is_active,
        decide=_configuration_page,
    ),
    Rule(
        "live-subscription-details",
        mode=LIVE,
        needs_resolution=True,
        applies=lambda s: True,
        decide=_details,
    ),
    Rule(
        "test-subscription-details",
        mode=TEST,
        needs_resolution=True,
        applies=lambda s: True,
        decide=_details,
    ),
    Rule(
        "confirm-subscription-unresolved",
        mode=CONFIRM,
        needs_resolution=True,
        applies=lambda s: s.subscription is None,
        decide=_error,
    ),
    Rule(
        "confirm-purchase",
        mode=CONFIRM,
        needs_resolution=True,
        applies=lambda s: True,
        decide=lambda s: PurchaseHandoff(s.subscription),
    ),
)


class LandingPageDecisionEngine:
    """Evaluates landing page rules in order."""

    def __init__(self, rules: tuple[Rule, ...] = LANDING_PAGE_RULES) -> None:
        self._rules = rules

    def evaluate(self, state: DecisionState) -> Outcome:
        mode = state.request.mode
        for rule in self._rules:
            if rule.mode is not None and rule.mode is not mode:
                continue
            if rule.needs_resolution and state.resolution is None:
                return ResolutionRequired()
            if rule.applies(state):
                logger.debug("Landing page rule '%s' matched (%s)", rule.name, mode.value)
                return rule.decide(state)
        raise LookupError(f"No landing page rule matched {mode.value} request")
