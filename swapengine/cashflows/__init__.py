"""Cash flows and aggregate utilities over legs of cash flows."""

from .cashflow import (
    AnyCashFlow,
    CashFlow,
    Leg,
    QuantLibCashFlow,
    SimpleCashFlow,
    from_quantlib,
    has_occurred,
)
from .utils import (
    is_expired,
    maturity_date,
    next_cash_flow_date,
    previous_cash_flow_date,
    start_date,
)

__all__ = [
    "AnyCashFlow",
    "CashFlow",
    "Leg",
    "QuantLibCashFlow",
    "SimpleCashFlow",
    "from_quantlib",
    "has_occurred",
    "start_date",
    "maturity_date",
    "is_expired",
    "next_cash_flow_date",
    "previous_cash_flow_date",
]
