"""Candles composed from named candle components."""

from __future__ import annotations

import copy
from typing import Any, Callable, Iterator

from .components.base import CandleComponent
from .types import TakerTrade


class ModularCandle:
    """A candle made of named components.

    Each component's value is available as an attribute of the same name,
    e.g. ``candle.open``, or through :meth:`value`.
    """

    _RESERVED = frozenset({"update", "reset", "value", "values", "copy"})

    def __init__(self, **kwargs: CandleComponent) -> None:
        for name, component in kwargs.items():
            if name.startswith("_") or name in self._RESERVED:
                raise ValueError(f"invalid component name: {name!r}")
            if not isinstance(component, CandleComponent):
                raise TypeError(f"component {name!r} is not a CandleComponent")
        self._components: dict[str, CandleComponent] = dict(kwargs)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            component = self._components[name]
        except KeyError:
            raise AttributeError(name) from None
        return component.value()

    def __iter__(self) -> Iterator[str]:
        return iter(self._components)

    def __contains__(self, name: object) -> bool:
        return name in self._components

    def __repr__(self) -> str:
        parts = ", ".join(f"{name}={comp!r}" for name, comp in self._components.items())
        return f"ModularCandle({parts})"

    def update(self, trade: TakerTrade) -> None:
        """Feed a trade to every component."""
        for component in self._components.values():
            component.update(trade)

    def reset(self) -> None:
        """Reset every component for a new candle."""
        for component in self._components.values():
            component.reset()

    def value(self, name: str) -> Any:
        """Value of the named component; KeyError if there is none."""
        return self._components[name].value()

    def values(self) -> dict[str, Any]:
        """Values of all components, by name, in definition order."""
        return {name: comp.value() for name, comp in self._components.items()}

    def copy(self) -> ModularCandle:
        """An independent copy of the candle and its components."""
        return ModularCandle(**copy.deepcopy(self._components))


def candle_factory(**kwargs: Callable[[], CandleComponent]) -> Callable[[], ModularCandle]:
    """Return a callable that builds fresh candles.

    Each keyword names a component and gives a zero-argument callable, usually
    the component class, that creates it.
    """
    factories = dict(kwargs)

    def build() -> ModularCandle:
        return ModularCandle(**{name: make() for name, make in factories.items()})

    build()  # fail early on bad component names or types
    return build