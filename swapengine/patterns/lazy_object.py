"""Lazy (pull-based) recalculation on top of the observer pattern."""

from __future__ import annotations

import logging
from abc import abstractmethod

from swapengine.patterns.observable import Observable, Observer

logger = logging.getLogger(__name__)


class LazyObject(Observable, Observer):
    """
    Object whose derived values are computed on demand and cached.

    The object is either *stale* (a recalculation is owed before the next
    read) or *fresh* (cached values are valid). A notification from any
    registered observable makes it stale and is forwarded to the object's own
    observers; nothing is recomputed until a value is read again through
    :meth:`calculate`.
    """

    def __init__(self) -> None:
        Observable.__init__(self)
        Observer.__init__(self)
        self._calculated = False
        self._frozen = False
        self._always_forward = False

    @property
    def is_calculated(self) -> bool:
        return self._calculated

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    # ---------- observer interface ----------
    def update(self) -> None:
        # an already-stale object has forwarded its last notification
        if self._calculated or self._always_forward:
            self._calculated = False
            if not self._frozen:
                logger.debug("%s invalidated", type(self).__name__)
                self.notify_observers()

    # ---------- calculation ----------
    def calculate(self) -> None:
        """Bring the cached values up to date if the object is stale."""
        if not self._calculated and not self._frozen:
            # set first so that re-entrant reads do not recurse
            self._calculated = True
            try:
                self.perform_calculations()
            except Exception:
                self._calculated = False
                raise

    def recalculate(self) -> None:
        """Force a calculation pass regardless of the current state."""
        was_frozen = self._frozen
        self._calculated = False
        self._frozen = False
        try:
            self.calculate()
        finally:
            self._frozen = was_frozen
            self.notify_observers()

    def freeze(self) -> None:
        """Keep serving the cached values and stop forwarding notifications."""
        self._frozen = True

    def unfreeze(self) -> None:
        if self._frozen:
            self._frozen = False
            # observers may have missed notifications while frozen
            self.notify_observers()

    def always_forward_notifications(self) -> None:
        """Forward every notification, even when already stale."""
        self._always_forward = True

    @abstractmethod
    def perform_calculations(self) -> None:
        """Compute and cache the derived values."""
