from __future__ import annotations

from typing import Callable, Generic, List, TypeVar

T = TypeVar("T")

Subscriber = Callable[[T], None]


class Subscription:
    """Handle returned by subscribe(); cancel() stops further deliveries."""

    def __init__(self, cancel: Callable[[], None]) -> None:
        self._cancel = cancel
        self.cancelled = False

    def cancel(self) -> None:
        if not self.cancelled:
            self.cancelled = True
            self._cancel()


class CurrentValueSubject(Generic[T]):
    """
    Holds a single current value and pushes every new value to subscribers.

    Dispatch is synchronous and in subscription order. Values are overwritten,
    never queued. Exceptions raised by a subscriber propagate to the caller of
    send().
    """

    def __init__(self, initial: T) -> None:
        self._value = initial
        self._subscribers: List[Subscriber[T]] = []

    @property
    def value(self) -> T:
        return self._value

    def send(self, value: T) -> None:
        self._value = value
        # Snapshot so a subscriber may cancel itself mid-dispatch.
        for subscriber in list(self._subscribers):
            subscriber(value)

    def subscribe(self, subscriber: Subscriber[T]) -> Subscription:
        self._subscribers.append(subscriber)
        subscription = Subscription(lambda: self._unsubscribe(subscriber))
        subscriber(self._value)
        return subscription

    def _unsubscribe(self, subscriber: Subscriber[T]) -> None:
        if subscriber in self._subscribers:
            self._subscribers.remove(subscriber)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def as_observable(self) -> "ObservableValue[T]":
        return ObservableValue(self)


class ObservableValue(Generic[T]):
    """Read-only view over a CurrentValueSubject."""

    def __init__(self, subject: CurrentValueSubject[T]) -> None:
        self._subject = subject

    @property
    def value(self) -> T:
        return self._subject.value

    def subscribe(self, subscriber: Subscriber[T]) -> Subscription:
        return self._subject.subscribe(subscriber)
