"""Small demo wiring up a fixed/floating swap and pricing it lazily."""

from __future__ import annotations

import logging

from QuantLib import (
    TARGET,
    Actual365Fixed,
    Date,
    DateGeneration,
    Euribor6M,
    FixedRateLeg,
    FlatForward,
    IborLeg,
    ModifiedFollowing,
    Months,
    Period,
    RelinkableYieldTermStructureHandle,
    Schedule,
    Years,
)

from swapengine import settings
from swapengine.cashflows import from_quantlib
from swapengine.instruments.swap import Swap
from swapengine.pricingengines.undiscounted import UndiscountedSwapEngine


def _schedule(start: Date, maturity: Date, tenor: Period) -> Schedule:
    return Schedule(
        start,
        maturity,
        tenor,
        TARGET(),
        ModifiedFollowing,
        ModifiedFollowing,
        DateGeneration.Forward,
        False,
    )


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)

    as_of = Date.todaysDate()
    settings.set_evaluation_date(as_of)

    # start a month out so that no past fixing is needed
    start = TARGET().advance(as_of, Period(1, Months))
    maturity = TARGET().advance(start, Period(5, Years))
    notional = 1_000_000
    dc = Actual365Fixed()

    forecast = RelinkableYieldTermStructureHandle(FlatForward(as_of, 0.025, dc))
    paid = from_quantlib(
        FixedRateLeg(_schedule(start, maturity, Period(12, Months)), dc, [notional], [0.023])
    )
    received = from_quantlib(
        IborLeg(
            nominals=[notional],
            schedule=_schedule(start, maturity, Period(6, Months)),
            index=Euribor6M(forecast),
        )
    )

    swap = Swap([paid, received])
    swap.set_pricing_engine(UndiscountedSwapEngine())

    print(f"Start: {swap.start_date().ISO()}  Maturity: {swap.maturity_date().ISO()}")
    print(f"NPV: {swap.npv():,.2f}")
    for j in range(len(swap)):
        print(f"Leg {j} NPV: {swap.leg_npv(j):,.2f}")

    # relinking the forecast curve invalidates the swap; the next read reprices
    forecast.linkTo(FlatForward(as_of, 0.03, dc))
    print(f"NPV after curve move: {swap.npv():,.2f}")

    print(swap.cashflow_table().head())


if __name__ == "__main__":
    main()
