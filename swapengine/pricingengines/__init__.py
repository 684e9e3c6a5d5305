"""Pricing-engine abstractions and reference engines."""

from .engine import Arguments, GenericEngine, PricingEngine, Results

__all__ = ["Arguments", "Results", "PricingEngine", "GenericEngine"]
