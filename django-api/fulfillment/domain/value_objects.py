"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from typing import Self

SUBSCRIPTION_ID_PLACEHOLDER = "{subscription-id}"


@dataclass(frozen=True)
class SubscriptionId:
    """Opaque marketplace subscription identifier."""

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError("Subscription ID cannot be empty")

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=value.strip())

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class SeatQuantity:
    """Non-negative number of purchased seats."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Seat quantity cannot be negative")


@dataclass(frozen=True)
class UrlTemplate:
    """URL containing a {subscription-id} placeholder."""

    value: str

    def expand(self, subscription_id: SubscriptionId) -> str:
        # Only the literal placeholder is replaced; the rest is left untouched.
        return self.value.replace(SUBSCRIPTION_ID_PLACEHOLDER, subscription_id.value)

    def __str__(self) -> str:
        return self.value
