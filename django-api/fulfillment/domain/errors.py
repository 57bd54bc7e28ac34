"""Domain error codes for the fulfillment module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes.

    The first two are rendered on the landing page; the template maps them
    to user-facing text.
    """

    UNABLE_TO_RESOLVE_MARKETPLACE_TOKEN = "UnableToResolveMarketplaceToken"
    SUBSCRIPTION_ACTIVATION_FAILED = "SubscriptionActivationFailed"
    INVALID_TEST_OVERRIDE = "InvalidTestOverride"
    EVENT_PUBLICATION_FAILED = "EventPublicationFailed"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidTestOverrideError(DomainError):
    """Raised when a test subscription override cannot be parsed."""

    def __init__(self, parameter: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TEST_OVERRIDE,
            message=f"Invalid value for test parameter '{parameter}'",
        )
        self.parameter = parameter


class EventPublicationError(DomainError):
    """Raised when the subscription purchased event could not be published."""

    def __init__(self, subscription_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_PUBLICATION_FAILED,
            message="Subscription event could not be published",
        )
        self.subscription_id = subscription_id
