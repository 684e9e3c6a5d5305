"""Tradable financial instruments."""

from ._instrument import Instrument
from .swap import Swap, SwapArguments, SwapEngine, SwapResults

__all__ = ["Instrument", "Swap", "SwapArguments", "SwapResults", "SwapEngine"]
