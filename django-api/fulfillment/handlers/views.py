"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Turn the resulting action into an HTTP response
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from django.contrib.auth.views import redirect_to_login
from django.http import HttpResponseBase, HttpResponseNotFound, HttpResponseRedirect
from django.shortcuts import redirect
from rest_framework.exceptions import ValidationError
from rest_framework.permissions import AllowAny
from rest_framework.renderers import JSONRenderer, TemplateHTMLRenderer
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from fulfillment.conf import load_deployment_configuration, load_offer_configuration
from fulfillment.domain.actions import (
    Action,
    Challenge,
    NotFound,
    Redirect,
    RedirectToRoute,
    Render,
)
from fulfillment.domain.errors import InvalidTestOverrideError
from fulfillment.handlers.dependencies import get_caller_context, get_landing_page_service
from fulfillment.handlers.serializers import LandingPageFormSerializer, LandingPageSerializer


def to_response(request: Request, action: Action) -> HttpResponseBase:
    if isinstance(action, Render):
        return Response(
            LandingPageSerializer(action.model).data,
            template_name=f"fulfillment/{action.view_name.lower()}.html",
        )
    if isinstance(action, Redirect):
        return HttpResponseRedirect(action.url)
    if isinstance(action, RedirectToRoute):
        return redirect(action.route_name)
    if isinstance(action, NotFound):
        return HttpResponseNotFound()
    if isinstance(action, Challenge):
        return redirect_to_login(request.get_full_path())
    raise TypeError(f"Unsupported landing page action: {action!r}")


class LandingPageView(APIView):
    """Handler for GET and POST /"""

    # Authentication is part of the landing page decision, not a DRF permission.
    permission_classes = [AllowAny]
    renderer_classes = [TemplateHTMLRenderer, JSONRenderer]

    def get(self, request: Request) -> HttpResponseBase:
        service = get_landing_page_service()
        action = service.get_live_landing_page(
            get_caller_context(request.user),
            token=request.query_params.get("token") or None,
        )
        return to_response(request, action)

    def post(self, request: Request) -> HttpResponseBase:
        # A malformed id is treated as missing; the gates still run first.
        form = LandingPageFormSerializer(data=request.data)
        subscription_id = form.validated_data.get("subscription_id") if form.is_valid() else None

        service = get_landing_page_service()
        action = service.post_live_landing_page(
            get_caller_context(request.user),
            subscription_id=subscription_id or None,
        )
        return to_response(request, action)


class TestLandingPageView(APIView):
    """Handler for GET /test"""

    permission_classes = [AllowAny]
    renderer_classes = [TemplateHTMLRenderer, JSONRenderer]

    def get(self, request: Request) -> HttpResponseBase:
        overrides = {key: values[0] for key, values in request.query_params.lists() if values}

        service = get_landing_page_service()
        try:
            action = service.get_test_landing_page(get_caller_context(request.user), overrides)
        except InvalidTestOverrideError as error:
            raise ValidationError({error.parameter: [error.message]}, code=error.code.value)
        return to_response(request, action)


class SetupView(APIView):
    """Handler for GET /setup"""

    permission_classes = [AllowAny]
    renderer_classes = [TemplateHTMLRenderer, JSONRenderer]

    def get(self, request: Request) -> Response:
        offer = load_offer_configuration()
        deployment = load_deployment_configuration()
        return Response(
            {
                "is_setup_complete": offer.is_setup_complete,
                "deployment_name": deployment.name,
                "deployment_version": deployment.version,
            },
            template_name="fulfillment/setup.html",
        )
