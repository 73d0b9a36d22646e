"""Aggregate taker trades into modular candles with time, tick, volume or price rules."""

__version__ = "0.1.0"