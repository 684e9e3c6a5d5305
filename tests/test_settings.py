import QuantLib as ql

from swapengine import settings
from swapengine.patterns import Observer


class Recorder(Observer):
    def __init__(self) -> None:
        super().__init__()
        self.count = 0

    def update(self) -> None:
        self.count += 1


def test_context_manager_restores_evaluation_date() -> None:
    before = settings.evaluation_date()
    target = ql.Date(15, 6, 2019)

    with settings.evaluation_date_set_to(target) as d:
        assert d == target
        assert settings.evaluation_date() == target
        assert ql.Settings.instance().evaluationDate == target

    assert settings.evaluation_date() == before


def test_moving_the_date_notifies_observers(today: ql.Date) -> None:
    obs = Recorder()
    obs.register_with(settings.evaluation_date_observable)

    settings.set_evaluation_date(today)
    assert obs.count == 0

    settings.set_evaluation_date(today + 1)
    assert obs.count == 1
    obs.unregister_with_all()


def test_context_manager_restores_other_settings(today: ql.Date) -> None:
    assert not settings.include_reference_date_events()

    with settings.evaluation_date_set_to(today + 30):
        ql.Settings.instance().includeReferenceDateEvents = True
        assert settings.include_reference_date_events()

    assert not settings.include_reference_date_events()
    assert settings.evaluation_date() == today


def test_leaving_the_block_notifies_observers(today: ql.Date) -> None:
    obs = Recorder()
    obs.register_with(settings.evaluation_date_observable)

    with settings.evaluation_date_set_to(today + 1):
        assert obs.count == 1

    assert obs.count == 2
    obs.unregister_with_all()
