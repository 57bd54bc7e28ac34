"""Terminal actions produced for a landing page request.

Exactly one action is produced per request. Handlers turn them into HTTP
responses.
"""

from dataclasses import dataclass

from fulfillment.domain.models import LandingPageViewModel

LANDING_PAGE_VIEW = "Index"
SETUP_ROUTE = "setup"


@dataclass(frozen=True)
class Render:
    view_name: str
    model: LandingPageViewModel


@dataclass(frozen=True)
class Redirect:
    url: str


@dataclass(frozen=True)
class RedirectToRoute:
    route_name: str


@dataclass(frozen=True)
class NotFound:
    pass


@dataclass(frozen=True)
class Challenge:
    pass


Action = Render | Redirect | RedirectToRoute | NotFound | Challenge
