"""Aggregate dates over a leg.

Legs are scanned in full; none of the helpers assume the flows are sorted.
"""

from __future__ import annotations

from QuantLib import Date

from swapengine import settings
from swapengine.cashflows.cashflow import Leg, has_occurred
from swapengine.errors import EmptyCollectionError


def start_date(leg: Leg) -> Date:
    """Earliest payment date in ``leg``."""
    if len(leg) == 0:
        raise EmptyCollectionError("empty leg: no start date")
    return min(cf.date() for cf in leg)


def maturity_date(leg: Leg) -> Date:
    """Latest payment date in ``leg``."""
    if len(leg) == 0:
        raise EmptyCollectionError("empty leg: no maturity date")
    return max(cf.date() for cf in leg)


def is_expired(leg: Leg, ref_date: Date | None = None) -> bool:
    """True if every flow in ``leg`` has occurred (an empty leg is expired)."""
    if ref_date is None:
        ref_date = settings.evaluation_date()
    return all(has_occurred(cf, ref_date) for cf in leg)


def next_cash_flow_date(leg: Leg, ref_date: Date | None = None) -> Date | None:
    """Earliest date among the flows still pending, or ``None``."""
    if ref_date is None:
        ref_date = settings.evaluation_date()
    pending = [cf.date() for cf in leg if not has_occurred(cf, ref_date)]
    return min(pending) if pending else None


def previous_cash_flow_date(leg: Leg, ref_date: Date | None = None) -> Date | None:
    """Latest date among the flows already occurred, or ``None``."""
    if ref_date is None:
        ref_date = settings.evaluation_date()
    occurred = [cf.date() for cf in leg if has_occurred(cf, ref_date)]
    return max(occurred) if occurred else None


__all__ = [
    "start_date",
    "maturity_date",
    "is_expired",
    "next_cash_flow_date",
    "previous_cash_flow_date",
]
