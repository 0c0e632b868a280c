"""Where placed orders go.

``Checkout.place_order()`` hands its payload to ``get_submitter()`` unless a
submitter was passed in explicitly. The default accepts every order and
records it, which is what local runs and the test suite rely on.
"""

from ordering.submission.fake_adapter import FakeOrderSubmitter
from ordering.submission.port import OrderSubmitter

_current_submitter: OrderSubmitter | None = None


def get_submitter() -> OrderSubmitter:
    global _current_submitter
    if _current_submitter is None:
        _current_submitter = FakeOrderSubmitter()
    return _current_submitter


def set_submitter(submitter: OrderSubmitter) -> None:
    """Route every later checkout through ``submitter``."""
    global _current_submitter
    _current_submitter = submitter


def reset_submitter() -> None:
    """Drop the routed submitter; the next checkout gets a fresh fake."""
    global _current_submitter
    _current_submitter = None
