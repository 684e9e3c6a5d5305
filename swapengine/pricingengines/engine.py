"""
Generic pricing-engine dispatch.

An instrument never knows the valuation algorithm it is priced with. It
copies its pricing-relevant state into the engine's :class:`Arguments`,
asks the engine to ``calculate()`` and reads the engine's :class:`Results`
back. Each instrument type pairs with its own arguments/results kinds;
since the pairing cannot be enforced statically, instruments check the
concrete kind at run time and raise ``TypeMismatchError``.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, ClassVar, Generic, Optional, TypeVar

from QuantLib import Date

from swapengine.patterns.observable import Observable, Observer

logger = logging.getLogger(__name__)


class Arguments:
    """Engine input snapshot."""

    def validate(self) -> None:
        """Check the snapshot before any algorithm consumes it."""


@dataclass
class Results:
    """Engine output snapshot with the headline figures."""

    value: Optional[float] = None
    error_estimate: Optional[float] = None
    valuation_date: Optional[Date] = None
    additional_results: dict[str, Any] = field(default_factory=dict)

    def reset(self) -> None:
        """Clear every value left by a previous calculation pass."""
        self.value = None
        self.error_estimate = None
        self.valuation_date = None
        self.additional_results = {}


class PricingEngine(Observable, ABC):
    """Interface between instruments and valuation algorithms."""

    @abstractmethod
    def get_arguments(self) -> Arguments:
        ...

    @abstractmethod
    def get_results(self) -> Results:
        ...

    @abstractmethod
    def reset(self) -> None:
        ...

    @abstractmethod
    def calculate(self) -> None:
        """Run the algorithm on the current arguments, filling the results."""


ArgumentsT = TypeVar("ArgumentsT", bound=Arguments)
ResultsT = TypeVar("ResultsT", bound=Results)


class GenericEngine(PricingEngine, Observer, Generic[ArgumentsT, ResultsT]):
    """
    Engine owning one arguments and one results instance.

    Subclasses set ``arguments_type`` and ``results_type`` and implement
    ``calculate()``. Engines can observe their own inputs (curves, quotes);
    a notification is forwarded to the instruments using the engine.
    """

    arguments_type: ClassVar[type[Arguments]] = Arguments
    results_type: ClassVar[type[Results]] = Results

    def __init__(self) -> None:
        Observable.__init__(self)
        Observer.__init__(self)
        self.arguments: ArgumentsT = self.arguments_type()  # type: ignore[assignment]
        self.results: ResultsT = self.results_type()  # type: ignore[assignment]

    def get_arguments(self) -> ArgumentsT:
        return self.arguments

    def get_results(self) -> ResultsT:
        return self.results

    def reset(self) -> None:
        self.results.reset()

    def update(self) -> None:
        logger.debug("%s inputs changed", type(self).__name__)
        self.notify_observers()

    @abstractmethod
    def calculate(self) -> None:
        ...
