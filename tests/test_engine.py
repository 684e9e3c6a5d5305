import QuantLib as ql
import pytest

from swapengine.cashflows import SimpleCashFlow
from swapengine.instruments.swap import Swap, SwapArguments, SwapEngine, SwapResults
from swapengine.patterns import Observable, Observer
from swapengine.pricingengines import GenericEngine
from swapengine.pricingengines.undiscounted import UndiscountedSwapEngine


class Recorder(Observer):
    def __init__(self) -> None:
        super().__init__()
        self.count = 0

    def update(self) -> None:
        self.count += 1


def test_swap_engine_owns_typed_snapshots() -> None:
    engine = UndiscountedSwapEngine()

    assert isinstance(engine, GenericEngine)
    assert isinstance(engine.get_arguments(), SwapArguments)
    assert isinstance(engine.get_results(), SwapResults)


def test_swap_engine_is_abstract() -> None:
    with pytest.raises(TypeError):
        SwapEngine()


def test_reset_clears_previous_pass() -> None:
    engine = UndiscountedSwapEngine()
    engine.results.leg_npv = [1.0, 2.0]
    engine.results.leg_bps = [0.1, 0.2]
    engine.results.value = 3.0

    engine.reset()

    assert engine.get_results().leg_npv == []
    assert engine.get_results().leg_bps == []
    assert engine.get_results().value is None


def test_engine_forwards_input_changes() -> None:
    quote = Observable()
    engine = UndiscountedSwapEngine()
    engine.register_with(quote)
    downstream = Recorder()
    downstream.register_with(engine)

    quote.notify_observers()

    assert downstream.count == 1


def test_undiscounted_values_pending_flows(today: ql.Date) -> None:
    paid = [SimpleCashFlow(50.0, today - 30), SimpleCashFlow(60.0, today + 30)]
    received = [SimpleCashFlow(70.0, today + 90), SimpleCashFlow(80.0, today + 180)]
    swap = Swap([paid, received])
    swap.set_pricing_engine(UndiscountedSwapEngine())

    assert swap.leg_npv(0) == -60.0
    assert swap.leg_npv(1) == 150.0
    assert swap.leg_bps(0) is None
    assert swap.npv() == 90.0
    assert swap.valuation_date() == today
    with pytest.raises(ValueError):
        swap.error_estimate()


def test_settlement_date_flows(today: ql.Date) -> None:
    paid = [SimpleCashFlow(10.0, today), SimpleCashFlow(5.0, today + 1)]
    received = [SimpleCashFlow(20.0, today + 1)]

    excluded = Swap([paid, received])
    excluded.set_pricing_engine(UndiscountedSwapEngine())
    included = Swap([paid, received])
    included.set_pricing_engine(UndiscountedSwapEngine(include_settlement_date_flows=True))

    assert excluded.leg_npv(0) == -5.0
    assert included.leg_npv(0) == -15.0


def test_multi_leg_pricing(today: ql.Date) -> None:
    legs = [
        [SimpleCashFlow(10.0, today + 10)],
        [SimpleCashFlow(20.0, today + 20)],
        [SimpleCashFlow(30.0, today + 30)],
    ]
    swap = Swap(legs, [True, False, True])
    swap.set_pricing_engine(UndiscountedSwapEngine())

    assert [swap.leg_npv(j) for j in range(3)] == [-10.0, 20.0, -30.0]
    assert swap.npv() == -20.0
    assert swap.additional_results() == {}
