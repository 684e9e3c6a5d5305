from __future__ import annotations

import logging
from abc import abstractmethod
from typing import Any, Optional

from QuantLib import Date

from swapengine import settings
from swapengine.errors import MissingEngineError
from swapengine.patterns.lazy_object import LazyObject
from swapengine.pricingengines.engine import Arguments, PricingEngine, Results

logger = logging.getLogger(__name__)


class Instrument(LazyObject):
    """
    Abstract base class for all tradable instruments.

    Instrument values are computed lazily by the attached pricing engine:
    the first read after a change in any registered input runs one
    calculation pass, further reads are served from cache.
    """

    def __init__(self) -> None:
        super().__init__()
        self._engine: Optional[PricingEngine] = None
        self._npv: Optional[float] = None
        self._error_estimate: Optional[float] = None
        self._valuation_date: Optional[Date] = None
        self._additional_results: dict[str, Any] = {}
        # expiry depends on "today"
        self.register_with(settings.evaluation_date_observable)

    # ---------- engine wiring ----------
    @property
    def pricing_engine(self) -> Optional[PricingEngine]:
        return self._engine

    def set_pricing_engine(self, engine: Optional[PricingEngine]) -> None:
        """Attach ``engine`` (or detach with ``None``) and invalidate."""
        if self._engine is not None:
            self.unregister_with(self._engine)
        self._engine = engine
        if self._engine is not None:
            self.register_with(self._engine)
        # trigger (lazy) recalculation and notify observers
        self.update()

    # ---------- instrument interface ----------
    @abstractmethod
    def is_expired(self) -> bool:
        """Whether the instrument is still tradable."""
        raise NotImplementedError

    def setup_expired(self) -> None:
        """Set the cached values of an expired instrument."""
        self._npv = 0.0
        self._error_estimate = 0.0
        self._valuation_date = None
        self._additional_results = {}

    @abstractmethod
    def setup_arguments(self, args: Arguments) -> None:
        """Copy the pricing-relevant state into the engine arguments."""
        raise NotImplementedError

    def fetch_results(self, results: Results) -> None:
        """Read the engine results back into the cache."""
        self._npv = results.value
        self._error_estimate = results.error_estimate
        self._valuation_date = results.valuation_date
        self._additional_results = dict(results.additional_results)

    # ---------- lazy calculation ----------
    def calculate(self) -> None:
        if not self._calculated and not self._frozen:
            if self.is_expired():
                logger.debug("%s expired; skipping engine", type(self).__name__)
                self.setup_expired()
                self._calculated = True
            else:
                super().calculate()

    def perform_calculations(self) -> None:
        if self._engine is None:
            raise MissingEngineError("null pricing engine")
        self._engine.reset()
        args = self._engine.get_arguments()
        self.setup_arguments(args)
        args.validate()
        logger.debug(
            "%s priced with %s", type(self).__name__, type(self._engine).__name__
        )
        self._engine.calculate()
        self.fetch_results(self._engine.get_results())

    # ---------- results ----------
    def npv(self) -> float:
        """Net present value of the instrument."""
        self.calculate()
        if self._npv is None:
            raise ValueError("NPV not provided")
        return self._npv

    def error_estimate(self) -> float:
        self.calculate()
        if self._error_estimate is None:
            raise ValueError("error estimate not provided")
        return self._error_estimate

    def valuation_date(self) -> Date:
        self.calculate()
        if self._valuation_date is None:
            raise ValueError("valuation date not provided")
        return self._valuation_date

    def additional_results(self) -> dict[str, Any]:
        self.calculate()
        return dict(self._additional_results)
