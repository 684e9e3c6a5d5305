"""Cash-flow building blocks."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Sequence, Union

import QuantLib as ql
from QuantLib import Date

from swapengine import settings
from swapengine.patterns.observable import Observable


def _occurred(
    payment_date: Date,
    ref_date: Date | None,
    include_ref_date: bool | None,
) -> bool:
    if ref_date is None:
        ref_date = settings.evaluation_date()
    if include_ref_date is None:
        include_ref_date = settings.include_reference_date_events()
    if include_ref_date:
        return payment_date < ref_date
    return payment_date <= ref_date


class CashFlow(Observable, ABC):
    """
    A single payment of ``amount()`` on ``date()``.

    Cash flows are observables: anything priced off them (typically an
    instrument holding them in one of its legs) registers with the flow and
    is invalidated whenever the flow changes.
    """

    @abstractmethod
    def date(self) -> Date:
        """Payment date."""

    @abstractmethod
    def amount(self) -> float:
        """Payment amount, unsigned with respect to the holder."""

    def has_occurred(
        self,
        ref_date: Date | None = None,
        include_ref_date: bool | None = None,
    ) -> bool:
        """
        Whether the payment lies in the past as of ``ref_date``.

        ``ref_date`` defaults to the evaluation date. A flow paid exactly on
        the reference date counts as occurred unless reference-date events
        are included, either explicitly or through the QuantLib settings.
        """
        return _occurred(self.date(), ref_date, include_ref_date)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(amount={self.amount()!r}, date={self.date().ISO()})"


class SimpleCashFlow(CashFlow):
    """Predetermined cash flow; changing it notifies registered observers."""

    def __init__(self, amount: float, date: Date) -> None:
        super().__init__()
        self._amount = float(amount)
        self._date = date

    def date(self) -> Date:
        return self._date

    def amount(self) -> float:
        return self._amount

    def set_amount(self, amount: float) -> None:
        self._amount = float(amount)
        self.notify_observers()

    def set_date(self, date: Date) -> None:
        self._date = date
        self.notify_observers()


class QuantLibCashFlow(CashFlow):
    """
    Live view of a QuantLib cash flow.

    Amounts are read from the wrapped flow on every call, and QuantLib
    notifications (a relinked forecasting curve, a new index fixing) are
    forwarded to the observers of this flow.
    """

    def __init__(self, cashflow: ql.CashFlow) -> None:
        super().__init__()
        self._cashflow = cashflow
        # kept alive as long as the wrapper; QuantLib holds it by pointer
        self._ql_observer = ql.Observer(self.notify_observers)
        self._ql_observer.registerWith(cashflow)

    @property
    def cashflow(self) -> ql.CashFlow:
        return self._cashflow

    def date(self) -> Date:
        return self._cashflow.date()

    def amount(self) -> float:
        return self._cashflow.amount()


# A leg is an ordered sequence of cash flows (order = payment chronology).
# Plain QuantLib flows are accepted as well.
AnyCashFlow = Union[CashFlow, ql.CashFlow]
Leg = Sequence[AnyCashFlow]


def has_occurred(
    cf: AnyCashFlow,
    ref_date: Date | None = None,
    include_ref_date: bool | None = None,
) -> bool:
    """:meth:`CashFlow.has_occurred` for package and QuantLib flows alike."""
    if isinstance(cf, CashFlow):
        return cf.has_occurred(ref_date, include_ref_date)
    return _occurred(cf.date(), ref_date, include_ref_date)


def from_quantlib(cashflows: Iterable[ql.CashFlow]) -> list[CashFlow]:
    """
    Wrap a QuantLib leg (e.g. ``QuantLib.IborLeg``) into live
    :class:`QuantLibCashFlow` objects.
    """
    return [QuantLibCashFlow(cf) for cf in cashflows]
