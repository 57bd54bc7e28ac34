from fulfillment.handlers.views import LandingPageView, SetupView, TestLandingPageView

__all__ = ["LandingPageView", "SetupView", "TestLandingPageView"]
