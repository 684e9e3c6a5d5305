import gc

import pytest

from swapengine.errors import NotificationError
from swapengine.patterns import Observable, Observer


class Recorder(Observer):
    def __init__(self) -> None:
        super().__init__()
        self.count = 0

    def update(self) -> None:
        self.count += 1


class Failing(Observer):
    def update(self) -> None:
        raise RuntimeError("boom")


def test_notify_reaches_registered_observers() -> None:
    source = Observable()
    first, second = Recorder(), Recorder()
    first.register_with(source)
    second.register_with(source)

    source.notify_observers()

    assert first.count == 1
    assert second.count == 1


def test_double_registration_notifies_once() -> None:
    source = Observable()
    obs = Recorder()
    obs.register_with(source)
    obs.register_with(source)
    obs.register_with(None)

    source.notify_observers()

    assert obs.count == 1
    assert source.observer_count == 1


def test_unregister() -> None:
    a, b = Observable(), Observable()
    obs = Recorder()
    obs.register_with(a)
    obs.register_with(b)

    obs.unregister_with(a)
    a.notify_observers()
    b.notify_observers()
    assert obs.count == 1

    obs.unregister_with_all()
    b.notify_observers()
    assert obs.count == 1
    assert b.observer_count == 0


def test_observers_are_held_weakly() -> None:
    source = Observable()
    obs = Recorder()
    obs.register_with(source)
    assert source.observer_count == 1

    del obs
    gc.collect()

    assert source.observer_count == 0


def test_failing_observer_does_not_stop_notification() -> None:
    source = Observable()
    bad, good = Failing(), Recorder()
    bad.register_with(source)
    good.register_with(source)

    with pytest.raises(NotificationError, match="boom"):
        source.notify_observers()
    assert good.count == 1
