"""Observer pattern used to propagate invalidation through the object graph."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from weakref import WeakSet

from swapengine.errors import NotificationError

logger = logging.getLogger(__name__)


class Observable:
    """
    Source of change notifications.

    Observers are held weakly: an observable (e.g. a cash flow shared between
    several instruments) never keeps an otherwise unreferenced observer alive.
    """

    def __init__(self) -> None:
        self._observers: WeakSet[Observer] = WeakSet()

    @property
    def observer_count(self) -> int:
        return len(self._observers)

    def _attach(self, observer: Observer) -> None:
        self._observers.add(observer)

    def _detach(self, observer: Observer) -> None:
        self._observers.discard(observer)

    def notify_observers(self) -> None:
        """Call ``update()`` on every registered observer."""
        failures: list[str] = []
        # snapshot: observers may (un)register while being notified
        for observer in list(self._observers):
            try:
                observer.update()
            except Exception as exc:
                logger.debug("observer %r failed on update: %s", observer, exc)
                failures.append(f"{type(observer).__name__}: {exc}")
        if failures:
            raise NotificationError(
                "could not notify one or more observers: " + "; ".join(failures)
            )


class Observer(ABC):
    """Receiver of change notifications from one or more observables."""

    def __init__(self) -> None:
        self._observables: list[Observable] = []

    def register_with(self, observable: Observable | None) -> None:
        """Subscribe to ``observable``; registering twice is a no-op."""
        if observable is None:
            return
        if any(o is observable for o in self._observables):
            return
        observable._attach(self)
        self._observables.append(observable)

    def unregister_with(self, observable: Observable | None) -> None:
        if observable is None:
            return
        observable._detach(self)
        self._observables = [o for o in self._observables if o is not observable]

    def unregister_with_all(self) -> None:
        for observable in self._observables:
            observable._detach(self)
        self._observables = []

    @abstractmethod
    def update(self) -> None:
        """React to a change in one of the registered observables."""
