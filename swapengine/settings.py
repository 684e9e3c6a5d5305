"""
Process-wide evaluation settings.

The evaluation date lives in QuantLib's ``Settings`` singleton. Setting it
through :func:`set_evaluation_date` also notifies every instrument built by
this package, so that expiry is re-checked on the next read. Assigning
``Settings.instance().evaluationDate`` directly bypasses that notification.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from QuantLib import Date, SavedSettings, Settings

from swapengine.patterns.observable import Observable

logger = logging.getLogger(__name__)

# observers of the evaluation date (instruments register at construction)
evaluation_date_observable = Observable()


def evaluation_date() -> Date:
    """Return the current evaluation date ("today")."""
    return Settings.instance().evaluationDate


def set_evaluation_date(value: Date) -> None:
    """Move the evaluation date and invalidate dependent instruments."""
    current = Settings.instance().evaluationDate
    Settings.instance().evaluationDate = value
    if value != current:
        logger.debug("evaluation date moved from %s to %s", current, value)
        evaluation_date_observable.notify_observers()


@contextmanager
def evaluation_date_set_to(value: Date) -> Iterator[Date]:
    """
    Temporarily set the evaluation date within a scoped block.

    Every QuantLib setting is restored on exit, including an evaluation
    date that was never set and keeps tracking the system date.
    """
    saved = SavedSettings()
    set_evaluation_date(value)
    try:
        yield value
    finally:
        # SavedSettings restores on destruction
        del saved
        evaluation_date_observable.notify_observers()


def include_reference_date_events() -> bool:
    """Whether events falling on the reference date count as not yet occurred."""
    return bool(Settings.instance().includeReferenceDateEvents)


__all__ = [
    "evaluation_date",
    "evaluation_date_observable",
    "evaluation_date_set_to",
    "include_reference_date_events",
    "set_evaluation_date",
]
