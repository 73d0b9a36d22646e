"""Candle components that track trade timestamps and candle speed."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from ..types import TakerTrade, TimestampResolution
from .base import CandleComponent

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _resolution(trade: TakerTrade) -> TimestampResolution:
    """Resolution of a trade's timestamp; milliseconds when the trade does not say."""
    resolution = getattr(trade, "timestamp_resolution", None)
    if resolution is None:
        return TimestampResolution.MILLISECOND
    return resolution()


def _to_datetime(stamp: int, resolution: TimestampResolution) -> datetime:
    """Convert an integer timestamp to an aware UTC datetime."""
    if resolution is TimestampResolution.SECOND:
        offset = timedelta(seconds=stamp)
    elif resolution is TimestampResolution.MILLISECOND:
        offset = timedelta(milliseconds=stamp)
    elif resolution is TimestampResolution.MICROSECOND:
        offset = timedelta(microseconds=stamp)
    else:
        # datetime holds microseconds at most; finer digits are dropped.
        offset = timedelta(microseconds=stamp // 1_000)
    return _EPOCH + offset


def _truncating_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator >= 0) else -quotient


@dataclass
class OpenTimeStamp(CandleComponent):
    """Timestamp of the first trade of a candle, in the trades' own unit."""

    stamp: int = 0
    awaiting_first: bool = True

    def value(self) -> int:
        """The opening timestamp."""
        return self.stamp

    def reset(self) -> None:
        """Take the timestamp of the next trade as the new opening timestamp."""
        self.awaiting_first = True

    def update(self, trade: TakerTrade) -> None:
        """Record the timestamp only for the first trade of the candle."""
        if self.awaiting_first:
            self.stamp = trade.timestamp
            self.awaiting_first = False


@dataclass
class CloseTimeStamp(CandleComponent):
    """Timestamp of the latest trade of a candle, in the trades' own unit."""

    stamp: int = 0

    def value(self) -> int:
        """The closing timestamp."""
        return self.stamp

    def reset(self) -> None:
        """Keep the last timestamp; the next trade overwrites it."""

    def update(self, trade: TakerTrade) -> None:
        """Take the trade timestamp as the close."""
        self.stamp = trade.timestamp


@dataclass
class OpenDateTime(CandleComponent):
    """Opening time of a candle as an aware UTC datetime."""

    moment: datetime = _EPOCH
    awaiting_first: bool = True

    def value(self) -> datetime:
        """The opening datetime."""
        return self.moment

    def reset(self) -> None:
        """Take the time of the next trade as the new opening time."""
        self.awaiting_first = True

    def update(self, trade: TakerTrade) -> None:
        """Record the trade time only for the first trade of the candle."""
        if self.awaiting_first:
            self.moment = _to_datetime(trade.timestamp, _resolution(trade))
            self.awaiting_first = False


@dataclass
class TimeVelocity(CandleComponent):
    """Speed of candle creation: one over the candle's duration in seconds.

    Durations under one second count as one second.
    """

    init_time: int = 0
    last_time: int = 0
    awaiting_first: bool = True

    def value(self) -> float:
        """Velocity, at most 1.0."""
        elapsed_s = float(self.last_time - self.init_time)
        if elapsed_s < 1.0:
            elapsed_s = 1.0
        return 1.0 / elapsed_s

    def reset(self) -> None:
        """Start timing again from the next trade."""
        self.awaiting_first = True

    def update(self, trade: TakerTrade) -> None:
        """Track the first and latest trade time, in whole seconds."""
        seconds = _truncating_div(trade.timestamp, _resolution(trade).per_second())
        if self.awaiting_first:
            self.init_time = seconds
            self.awaiting_first = False
        self.last_time = seconds