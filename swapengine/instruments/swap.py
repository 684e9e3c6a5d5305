from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence

import QuantLib as ql
from pandas import DataFrame
from QuantLib import Date

from swapengine import settings
from swapengine.cashflows import utils as cashflow_utils
from swapengine.cashflows.cashflow import AnyCashFlow, Leg, has_occurred
from swapengine.errors import (
    EmptyCollectionError,
    IndexOutOfRangeError,
    SizeMismatchError,
    TypeMismatchError,
)
from swapengine.instruments._instrument import Instrument
from swapengine.patterns.observable import Observable
from swapengine.pricingengines.engine import Arguments, GenericEngine, Results

logger = logging.getLogger(__name__)


@dataclass
class SwapArguments(Arguments):
    """Legs and payer multipliers handed to a swap engine."""

    legs: list[Leg] = field(default_factory=list)
    payer: list[float] = field(default_factory=list)

    def validate(self) -> None:
        if len(self.legs) != len(self.payer):
            raise SizeMismatchError(
                f"number of legs ({len(self.legs)}) and multipliers "
                f"({len(self.payer)}) differ"
            )


@dataclass
class SwapResults(Results):
    """
    Per-leg figures returned by a swap engine.

    An engine that does not compute one of the quantities leaves the
    sequence empty; otherwise it holds exactly one entry per leg.
    """

    leg_npv: list[Optional[float]] = field(default_factory=list)
    leg_bps: list[Optional[float]] = field(default_factory=list)

    def reset(self) -> None:
        super().reset()
        self.leg_npv = []
        self.leg_bps = []


class SwapEngine(GenericEngine[SwapArguments, SwapResults]):
    """Base class for swap pricing engines."""

    arguments_type = SwapArguments
    results_type = SwapResults


class Swap(Instrument):
    """
    Class that represents a generic swap: an exchange of cash-flow legs.

    The swap can be built in three ways:

    - ``Swap([paid_leg, received_leg])``: the first leg is paid, the second
      received, i.e. payer signs ``(-1.0, +1.0)``;
    - ``Swap(legs, payer)``: any number of legs with one boolean per leg,
      ``True`` meaning the leg is paid;
    - ``Swap(n)``: ``n`` empty legs with zero multipliers, for subclasses
      that build their legs afterwards and call
      :meth:`register_with_cash_flow` for each flow.

    Every cash flow in every leg is registered as an input: a change in any
    of them invalidates the whole instrument, and the next read of a leg
    figure runs exactly one new engine pass.
    """

    Arguments = SwapArguments
    Results = SwapResults
    Engine = SwapEngine

    def __init__(
        self,
        legs: Sequence[Leg] | int,
        payer: Optional[Sequence[bool]] = None,
    ) -> None:
        super().__init__()
        # plain QuantLib flows notify through a QuantLib-side observer
        self._ql_observer: Optional[ql.Observer] = None
        if isinstance(legs, bool) or (isinstance(legs, int) and legs < 0):
            raise ValueError(f"invalid number of legs: {legs!r}")
        if isinstance(legs, int):
            if payer is not None:
                raise ValueError("payer flags cannot be given with a leg count")
            self._legs: list[Leg] = [[] for _ in range(legs)]
            self._payer: tuple[float, ...] = (0.0,) * legs
        else:
            if payer is None:
                if len(legs) != 2:
                    raise SizeMismatchError(
                        f"payer flags required for {len(legs)} legs; "
                        "only a pair of legs defaults to (paid, received)"
                    )
                payer = (True, False)
            if len(payer) != len(legs):
                raise SizeMismatchError(
                    f"size mismatch between payer ({len(payer)}) "
                    f"and legs ({len(legs)})"
                )
            self._legs = list(legs)
            self._payer = tuple(-1.0 if paid else 1.0 for paid in payer)
            for leg in self._legs:
                for cf in leg:
                    self.register_with_cash_flow(cf)
        self._leg_npv: tuple[Optional[float], ...] = (None,) * len(self._legs)
        self._leg_bps: tuple[Optional[float], ...] = (None,) * len(self._legs)

    def register_with_cash_flow(self, cf: AnyCashFlow) -> None:
        """Make ``cf`` an invalidation source, whether a package or QuantLib flow."""
        if isinstance(cf, Observable):
            self.register_with(cf)
            return
        if self._ql_observer is None:
            self._ql_observer = ql.Observer(self.update)
        self._ql_observer.registerWith(cf)

    def __len__(self) -> int:
        return len(self._legs)

    # ---------- properties ----------
    @property
    def legs(self) -> tuple[Leg, ...]:
        return tuple(self._legs)

    @property
    def payer_sign(self) -> tuple[float, ...]:
        return self._payer

    # ---------- instrument interface ----------
    def is_expired(self) -> bool:
        today = settings.evaluation_date()
        return all(cashflow_utils.is_expired(leg, today) for leg in self._legs)

    def setup_expired(self) -> None:
        super().setup_expired()
        self._leg_npv = (None,) * len(self._legs)
        self._leg_bps = (None,) * len(self._legs)

    def setup_arguments(self, args: Arguments) -> None:
        if not isinstance(args, SwapArguments):
            raise TypeMismatchError(
                f"wrong argument type: expected SwapArguments, got {type(args).__name__}"
            )
        args.legs = self._legs
        args.payer = list(self._payer)

    def fetch_results(self, results: Results) -> None:
        if not isinstance(results, SwapResults):
            raise TypeMismatchError(
                f"wrong result type: expected SwapResults, got {type(results).__name__}"
            )
        # validate both sequences before replacing anything
        leg_npv = self._leg_values(results.leg_npv, "NPV")
        leg_bps = self._leg_values(results.leg_bps, "BPS")
        super().fetch_results(results)
        self._leg_npv = leg_npv
        self._leg_bps = leg_bps

    def _leg_values(
        self, values: Sequence[Optional[float]], label: str
    ) -> tuple[Optional[float], ...]:
        """Engine output for one per-leg quantity; empty means not computed."""
        if len(values) == 0:
            return (None,) * len(self._legs)
        if len(values) != len(self._legs):
            raise SizeMismatchError(
                f"wrong number of leg {label} returned: "
                f"{len(values)} for {len(self._legs)} legs"
            )
        return tuple(values)

    # ---------- dates ----------
    def start_date(self) -> Date:
        if not self._legs:
            raise EmptyCollectionError("no legs given")
        return min(cashflow_utils.start_date(leg) for leg in self._legs)

    def maturity_date(self) -> Date:
        if not self._legs:
            raise EmptyCollectionError("no legs given")
        return max(cashflow_utils.maturity_date(leg) for leg in self._legs)

    # ---------- leg access ----------
    def _check_leg_index(self, j: int) -> None:
        if not 0 <= j < len(self._legs):
            raise IndexOutOfRangeError(f"leg# {j} doesn't exist!")

    def leg(self, j: int) -> Leg:
        self._check_leg_index(j)
        return self._legs[j]

    def leg_npv(self, j: int) -> Optional[float]:
        self._check_leg_index(j)
        self.calculate()
        return self._leg_npv[j]

    def leg_bps(self, j: int) -> Optional[float]:
        self._check_leg_index(j)
        self.calculate()
        return self._leg_bps[j]

    # ---------- diagnostics ----------
    def cashflow_table(self) -> DataFrame:
        """Every flow of every leg with its signed amount, sorted by date."""
        today = settings.evaluation_date()
        rows = [
            {
                "Leg": j,
                "Date": cf.date(),
                "Amount": cf.amount(),
                "PayerSign": sign,
                "SignedAmount": sign * cf.amount(),
                "Occurred": has_occurred(cf, today),
            }
            for j, (leg, sign) in enumerate(zip(self._legs, self._payer))
            for cf in leg
        ]
        columns = ["Leg", "Date", "Amount", "PayerSign", "SignedAmount", "Occurred"]
        df = DataFrame(data=rows, columns=columns)
        if df.empty:
            return df
        df["Serial"] = df.Date.apply(lambda d: d.serialNumber())
        return (
            df.sort_values(["Serial", "Leg"], kind="stable")
            .drop(columns="Serial")
            .assign(Date=lambda x: x.Date.apply(lambda d: d.ISO()))
            .reset_index(drop=True)
        )
