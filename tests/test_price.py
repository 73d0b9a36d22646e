import sys

import pytest

from tradeagg.components.price import (
    AveragePrice,
    Close,
    High,
    Low,
    MedianPrice,
    Open,
    WeightedPrice,
)
from tradeagg.types import Trade

TRADES = [
    Trade(timestamp=1684677200_000, price=100.0, size=10.0),
    Trade(timestamp=1684677210_000, price=101.0, size=-10.0),
    Trade(timestamp=1684677220_000, price=100.0, size=20.0),
    Trade(timestamp=1684677230_000, price=102.0, size=10.0),
    Trade(timestamp=1684677240_000, price=103.0, size=10.0),
    Trade(timestamp=1684677250_000, price=104.0, size=-20.0),
    Trade(timestamp=1684677260_000, price=102.0, size=-10.0),
    Trade(timestamp=1684677270_000, price=101.0, size=10.0),
    Trade(timestamp=1684677280_000, price=102.0, size=30.0),
    Trade(timestamp=1684677290_000, price=105.0, size=10.0),
]


def feed(component, trades=TRADES):
    for t in trades:
        component.update(t)
    return component


def test_open():
    m = Open()
    first = TRADES[0]
    for t in TRADES:
        m.update(t)
        assert m.value() == first.price


def test_open_reset_takes_next_price():
    m = feed(Open())
    m.reset()
    assert m.value() == 100.0
    m.update(Trade(timestamp=1, price=250.0, size=1.0))
    m.update(Trade(timestamp=2, price=260.0, size=1.0))
    assert m.value() == 250.0


def test_high():
    assert feed(High()).value() == 105.0


def test_high_reset_starts_from_lowest_float():
    m = feed(High())
    m.reset()
    assert m.value() == -sys.float_info.max
    m.update(Trade(timestamp=1, price=-5.0, size=1.0))
    assert m.value() == -5.0


def test_low():
    assert feed(Low()).value() == 100.0


def test_low_default_and_reset():
    assert Low().value() == sys.float_info.max
    m = feed(Low())
    m.reset()
    assert m.value() == sys.float_info.max


def test_close():
    m = Close()
    for t in TRADES:
        m.update(t)
        assert m.value() == t.price
    assert m.value() == TRADES[9].price


def test_close_reset_keeps_last_price():
    m = feed(Close())
    m.reset()
    assert m.value() == 105.0


def test_average_price():
    assert feed(AveragePrice()).value() == 102.0


def test_average_price_empty_is_nan():
    m = feed(AveragePrice())
    m.reset()
    assert repr(m.value()) == "nan"


def test_median_price():
    assert feed(MedianPrice()).value() == 102.0


def test_median_price_even_count_takes_upper_middle():
    trades = [Trade(timestamp=i, price=p, size=1.0) for i, p in enumerate([4.0, 1.0, 3.0, 2.0])]
    assert feed(MedianPrice(), trades).value() == 3.0


def test_median_price_empty_raises():
    m = feed(MedianPrice())
    m.reset()
    with pytest.raises(ValueError):
        m.value()


def test_weighted_price():
    assert feed(WeightedPrice()).value() == 102.0


def test_weighted_price_uses_absolute_size():
    trades = [
        Trade(timestamp=0, price=10.0, size=-3.0),
        Trade(timestamp=1, price=20.0, size=1.0),
    ]
    assert feed(WeightedPrice(), trades).value() == 12.5


def test_weighted_price_empty_is_nan():
    assert repr(WeightedPrice().value()) == "nan"