from django.urls import path

from fulfillment.handlers import LandingPageView, SetupView, TestLandingPageView

urlpatterns = [
    path("", LandingPageView.as_view(), name="landing-page"),
    path("test", TestLandingPageView.as_view(), name="test-landing-page"),
    path("setup", SetupView.as_view(), name="setup"),
]
