from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")


class Subscription:
    """Handle returned by Observable.subscribe."""

    def __init__(self, release: Callable[[], None]) -> None:
        self._release: Callable[[], None] | None = release

    @property
    def active(self) -> bool:
        return self._release is not None

    def unsubscribe(self) -> None:
        if self._release is not None:
            self._release()
            self._release = None


class Observable(Generic[T]):
    """A value holder that notifies subscribers whenever the value changes."""

    def __init__(self, value: T) -> None:
        self._value = value
        self._callbacks: list[Callable[[T], None]] = []

    @property
    def value(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        """Store a new value and call subscribers in subscription order.

        The value is stored first; an exception from a subscriber propagates
        and the remaining subscribers are not called.
        """
        if value == self._value:
            return
        self._value = value
        for callback in list(self._callbacks):
            callback(value)

    def subscribe(self, callback: Callable[[T], None]) -> Subscription:
        self._callbacks.append(callback)
        return Subscription(lambda: self._callbacks.remove(callback))
