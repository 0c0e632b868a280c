"""Order submission port (abstract interface).

Defines the contract for handing a finished ``OrderPayload`` to the
order-placement service. The storefront core never performs the call
itself; adapters do.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ordering.checkout.payload import OrderPayload


@dataclass(frozen=True)
class SubmissionResult:
    """Result of an order submission attempt."""

    success: bool
    order_id: str | None = None
    status: str | None = None
    failure_reason: str | None = None


class OrderSubmitter(ABC):
    """Abstract order-placement interface."""

    @abstractmethod
    def submit(self, payload: OrderPayload) -> SubmissionResult:
        """Place an order for the payload."""
        ...
