"""Monetary helpers shared by the catalogue and ordering contexts.

Amounts are carried as ``Decimal``. Floats coming from product data are
converted through their string form so ``19.99`` stays ``19.99``.
Rounding to cents happens only in ``format_money``.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

CENT = Decimal("0.01")


def to_decimal(value) -> Decimal:
    """Convert an int, float, str or Decimal to a Decimal without binary drift."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(value)


def parse_amount(text) -> Decimal | None:
    """Parse free-text user input into a finite Decimal.

    Returns None for None, blank, unparsable, NaN or infinite input. The
    whole stripped string must be a number: ``"12abc"`` is unparsable here,
    not 12 as a leading-prefix parse would read it.
    """
    if text is None:
        return None
    if isinstance(text, int | float | Decimal):
        text = str(text)

    text = text.strip()
    if not text:
        return None

    try:
        amount = Decimal(text)
    except InvalidOperation:
        return None

    if not amount.is_finite():
        return None
    return amount


def quantize_money(amount) -> Decimal:
    return to_decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP)


def format_money(amount, symbol: str = "$") -> str:
    """Render an amount for display, e.g. ``$115.99``."""
    return f"{symbol}{quantize_money(amount)}"
