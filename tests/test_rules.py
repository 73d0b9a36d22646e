import random

import pytest

from tradeagg.aggregator import GenericAggregator
from tradeagg.candle import candle_factory
from tradeagg.components.flow import NumTrades, Volume
from tradeagg.components.price import Close, High, Low, Open
from tradeagg.rules import (
    AlignedTimeRule,
    RelativePriceRule,
    TickRule,
    TimeRule,
    VolumeRule,
)
from tradeagg.types import M1, By, InvalidParamError, TimestampResolution, Trade

OHLC = candle_factory(open=Open, high=High, low=Low, close=Close)


def run(rule, trades, include=False, factory=OHLC):
    aggregator = GenericAggregator(factory, rule, include)
    return [c for c in (aggregator.update(t) for t in trades) if c is not None]


def test_aligned_time_rule_trigger_on_0():
    trades = [
        Trade(1712656800000, 100.0, 10.0),
        Trade(1712656815000, 101.0, -10.0),
        Trade(1712656860000, 100.5, -10.0),
        Trade(1712656860001, 102.0, -10.0),
        Trade(1712656935000, 105.0, -10.0),
    ]
    candles = run(AlignedTimeRule(M1, TimestampResolution.MILLISECOND), trades)
    assert len(candles) == 2
    assert candles[0].open == 100.0
    assert candles[0].close == 101.0
    assert candles[1].open == 100.5
    assert candles[1].close == 102.0


def test_aligned_time_rule_candle_with_one_trade():
    trades = [
        Trade(1712656800000, 100.0, 10.0),
        Trade(1712656815000, 101.0, -10.0),
        Trade(1712656861000, 100.5, -10.0),
        Trade(1712657930000, 102.0, -10.0),
    ]
    candles = run(AlignedTimeRule(M1, TimestampResolution.MILLISECOND), trades)
    assert len(candles) == 2
    assert candles[0].open == 100.0
    assert candles[0].close == 101.0
    assert candles[1].open == 100.5
    assert candles[1].close == 100.5


def test_aligned_timestamp():
    rule = AlignedTimeRule(M1, TimestampResolution.MILLISECOND)
    assert rule.aligned_timestamp(1712656815000) == 1712656800000
    assert rule.aligned_timestamp(1712656800000) == 1712656800000
    assert rule.aligned_timestamp(-1) == 0


def test_aligned_time_rule_seconds_resolution():
    rule = AlignedTimeRule(M1, TimestampResolution.SECOND)
    candle = OHLC()
    assert rule.should_trigger(Trade(125, 1.0, 1.0), candle) is False
    assert rule.should_trigger(Trade(179, 1.0, 1.0), candle) is False
    assert rule.should_trigger(Trade(180, 1.0, 1.0), candle) is True


def test_relative_price_rule():
    rule = RelativePriceRule(0.01)
    candle = OHLC()
    expected = [(100.0, False), (100.5, False), (101.0, True), (100.5, False), (99.0, True)]
    for price, triggers in expected:
        assert rule.should_trigger(Trade(0, price, 10.0), candle) is triggers


@pytest.mark.parametrize("threshold", [0.0, -0.01])
def test_relative_price_rule_invalid(threshold):
    with pytest.raises(InvalidParamError):
        RelativePriceRule(threshold)


def test_relative_price_rule_candles_span_threshold():
    rng = random.Random(7)
    price = 100.0
    trades = []
    for i in range(5000):
        price *= 1.0 + rng.uniform(-0.002, 0.002)
        trades.append(Trade(i, price, 1.0))
    threshold = 0.005
    candles = run(RelativePriceRule(threshold), trades, include=True)
    assert candles
    for c in candles:
        assert abs(c.close - c.open) / c.open >= threshold
        assert (c.high - c.low) / c.low >= threshold


def test_tick_rule():
    trades = [Trade(i, 100.0, 1.0) for i in range(10_000)]
    factory = candle_factory(num_trades=NumTrades)
    candles = run(TickRule(1000), trades, factory=factory)
    assert len(candles) == 10
    assert candles[0].num_trades == 999
    assert all(c.num_trades == 1000 for c in candles[1:])


def test_tick_rule_every_third():
    rule = TickRule(3)
    candle = OHLC()
    results = [rule.should_trigger(Trade(i, 1.0, 1.0), candle) for i in range(7)]
    assert results == [False, False, True, False, False, True, False]


def test_time_rule_candles():
    trades = [
        Trade(1000, 100.0, 1.0),
        Trade(61000, 101.0, 1.0),
        Trade(61001, 102.0, 1.0),
        Trade(62000, 103.0, 1.0),
        Trade(122000, 104.0, 1.0),
        Trade(122001, 105.0, 1.0),
    ]
    candles = run(TimeRule(M1, TimestampResolution.MILLISECOND), trades)
    assert len(candles) == 2
    assert (candles[0].open, candles[0].close) == (100.0, 101.0)
    assert (candles[1].open, candles[1].close) == (102.0, 104.0)


@pytest.mark.parametrize("resolution", list(TimestampResolution))
def test_time_rule_differing_timestamp_resolutions(resolution):
    seconds = [10, 70, 71, 80, 140, 141, 150, 300]
    trades = [Trade(s * resolution.per_second(), 100.0, 1.0) for s in seconds]
    candles = run(TimeRule(M1, resolution), trades)
    assert len(candles) == 3


def test_volume_rule_quote():
    rule = VolumeRule(25.0, By.QUOTE)
    candle = OHLC()
    sizes = [10.0, -10.0, 10.0, 20.0, 5.0, 1.0]
    results = [rule.should_trigger(Trade(0, 100.0, s), candle) for s in sizes]
    assert results == [False, False, True, False, False, True]


def test_volume_rule_base():
    rule = VolumeRule(12.0, By.BASE)
    candle = OHLC()
    results = [rule.should_trigger(Trade(0, 2.0, -10.0), candle) for _ in range(4)]
    assert results == [False, False, True, False]


def test_volume_rule_threshold_not_reached_at_equality():
    rule = VolumeRule(20.0, By.QUOTE)
    candle = OHLC()
    assert rule.should_trigger(Trade(0, 1.0, 10.0), candle) is False
    assert rule.should_trigger(Trade(0, 1.0, 10.0), candle) is False
    assert rule.should_trigger(Trade(0, 1.0, 0.5), candle) is True


@pytest.mark.parametrize("threshold", [0.0, -5.0])
def test_volume_rule_invalid(threshold):
    with pytest.raises(InvalidParamError):
        VolumeRule(threshold, By.QUOTE)