"""Listener registries and pin lookup tables."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterator, Mapping
from typing import Generic, TypeVar

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


class WithListeners(Generic[T]):
    """Mixin holding a set of listeners that can be notified together."""

    def __init__(self) -> None:
        self._listeners: dict[T, None] = {}

    def add_listener(self, listener: T) -> None:
        """Register a listener; registering twice has no effect."""
        self._listeners[listener] = None

    def remove_listener(self, listener: T) -> None:
        """Unregister a listener if it is registered."""
        self._listeners.pop(listener, None)

    def iterate_listeners(self, func: Callable[[T], object]) -> None:
        """Call ``func`` on every listener.

        A snapshot is iterated, so listeners may be added or removed by ``func``.
        """
        for listener in list(self._listeners):
            func(listener)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._listeners))

    def __len__(self) -> int:
        return len(self._listeners)


class PinMap(Generic[K]):
    """Maps symbolic pin names to pin numbers."""

    def __init__(self) -> None:
        self._map: dict[K, int] = {}

    def set(self, mapping: Mapping[K, int]) -> None:
        """Replace the whole mapping."""
        self._map = dict(mapping)

    def get(self, pin: K) -> int:
        """Return the pin number for ``pin``, or -1 if it is not mapped."""
        return self._map.get(pin, -1)