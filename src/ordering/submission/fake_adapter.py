"""Configurable fake order submitter for development and testing.

Records every payload it receives and can be switched to reject orders,
so checkout failure paths are testable without a backend.
"""

from uuid import uuid4

from ordering.checkout.payload import OrderPayload
from ordering.submission.port import OrderSubmitter, SubmissionResult


class FakeOrderSubmitter(OrderSubmitter):
    """Configurable fake order submitter."""

    def __init__(self) -> None:
        self.should_succeed: bool = True
        self.failure_reason: str = "Failed to place order"
        self.submitted: list[OrderPayload] = []

    def configure(self, should_succeed: bool, failure_reason: str = "Failed to place order") -> None:
        """Configure submitter behavior at runtime."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def submit(self, payload: OrderPayload) -> SubmissionResult:
        self.submitted.append(payload)

        if self.should_succeed:
            return SubmissionResult(
                success=True,
                order_id=f"fake_ord_{uuid4().hex[:16]}",
                status="pending",
            )
        return SubmissionResult(
            success=False,
            status="rejected",
            failure_reason=self.failure_reason,
        )
