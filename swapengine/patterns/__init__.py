"""Observer and lazy-evaluation building blocks."""

from .lazy_object import LazyObject
from .observable import Observable, Observer

__all__ = ["Observable", "Observer", "LazyObject"]
