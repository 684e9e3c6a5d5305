"""Reference swap engine summing the pending flows of each leg."""

from __future__ import annotations

import logging

from swapengine import settings
from swapengine.cashflows.cashflow import has_occurred
from swapengine.instruments.swap import SwapEngine

logger = logging.getLogger(__name__)


class UndiscountedSwapEngine(SwapEngine):
    """
    Values each leg as the signed sum of its pending cash flows.

    No discounting is applied, which makes the engine useful for tests and
    demos of the valuation protocol. Basis-point sensitivities are not
    computed: ``leg_bps`` is left empty.
    """

    def __init__(self, include_settlement_date_flows: bool | None = None) -> None:
        super().__init__()
        self.include_settlement_date_flows = include_settlement_date_flows

    def calculate(self) -> None:
        args = self.arguments
        today = settings.evaluation_date()
        leg_npv = [
            sign
            * sum(
                cf.amount()
                for cf in leg
                if not has_occurred(cf, today, self.include_settlement_date_flows)
            )
            for leg, sign in zip(args.legs, args.payer)
        ]
        self.results.leg_npv = leg_npv
        self.results.value = sum(leg_npv)
        self.results.error_estimate = None
        self.results.valuation_date = today
        logger.debug("undiscounted leg values: %s", leg_npv)
