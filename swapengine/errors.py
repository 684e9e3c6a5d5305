"""Exceptions raised by the swap valuation core."""

from __future__ import annotations


class SwapEngineError(Exception):
    """Base class for all errors raised by this package."""


class SizeMismatchError(SwapEngineError, ValueError):
    """Two sequences that must run in parallel have different lengths."""


class IndexOutOfRangeError(SwapEngineError, IndexError):
    """A leg index outside ``0 <= j < number of legs``."""


class EmptyCollectionError(SwapEngineError, ValueError):
    """An aggregate was requested over an empty collection."""


class TypeMismatchError(SwapEngineError, TypeError):
    """Arguments or results of the wrong concrete kind were handed over."""


class MissingEngineError(SwapEngineError, RuntimeError):
    """A calculation was requested but no pricing engine is attached."""


class NotificationError(SwapEngineError, RuntimeError):
    """One or more observers failed while being notified."""


__all__ = [
    "SwapEngineError",
    "SizeMismatchError",
    "IndexOutOfRangeError",
    "EmptyCollectionError",
    "TypeMismatchError",
    "MissingEngineError",
    "NotificationError",
]
