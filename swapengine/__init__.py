"""swapengine public API."""

from .cashflows import CashFlow, SimpleCashFlow, maturity_date, start_date
from .errors import (
    EmptyCollectionError,
    IndexOutOfRangeError,
    MissingEngineError,
    SizeMismatchError,
    SwapEngineError,
    TypeMismatchError,
)
from .instruments import Instrument, Swap, SwapArguments, SwapEngine, SwapResults
from .pricingengines import GenericEngine, PricingEngine
from .pricingengines.undiscounted import UndiscountedSwapEngine
from .settings import evaluation_date, evaluation_date_set_to, set_evaluation_date

__all__ = [
    "CashFlow",
    "SimpleCashFlow",
    "start_date",
    "maturity_date",
    "Instrument",
    "Swap",
    "SwapArguments",
    "SwapResults",
    "SwapEngine",
    "PricingEngine",
    "GenericEngine",
    "UndiscountedSwapEngine",
    "evaluation_date",
    "evaluation_date_set_to",
    "set_evaluation_date",
    "SwapEngineError",
    "SizeMismatchError",
    "IndexOutOfRangeError",
    "EmptyCollectionError",
    "TypeMismatchError",
    "MissingEngineError",
]
