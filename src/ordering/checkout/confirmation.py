"""Helpers for the order confirmation view."""

from datetime import date, datetime, timedelta

DELIVERY_DAYS = 7


def order_reference(order_id: str) -> str:
    """Short, shopper-facing reference: the last 8 characters, upper-cased."""
    return str(order_id)[-8:].upper()


def estimated_delivery(order_date: date | datetime) -> date:
    if isinstance(order_date, datetime):
        order_date = order_date.date()
    return order_date + timedelta(days=DELIVERY_DAYS)
