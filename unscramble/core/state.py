from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Callable, Generic, List, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class GameState:
    """
    Immutable snapshot of everything the player can see.

    Notes
    -----
    - The engine never mutates a snapshot; every change publishes a new one.
    - The hidden answer, the set of used words and the guess draft are
      session-internal and deliberately absent here.
    """

    score: int = 0
    current_word_count: int = 1
    current_scrambled_word: str = ""
    is_guessed_word_wrong: bool = False
    is_game_over: bool = False

    def __post_init__(self) -> None:
        if self.score < 0:
            raise ValueError("`score` must be >= 0.")
        if self.current_word_count < 1:
            raise ValueError("`current_word_count` must be >= 1.")


class StateFlow(Generic[T]):
    """
    Read-only view of a `MutableStateFlow`.

    Exposes the latest value and subscription, nothing that can publish.
    """

    def __init__(self, source: "MutableStateFlow[T]") -> None:
        self._source = source

    @property
    def value(self) -> T:
        return self._source.value

    def subscribe(self, callback: Callable[[T], None]) -> Callable[[], None]:
        return self._source.subscribe(callback)


class MutableStateFlow(Generic[T]):
    """
    Single-writer, multi-reader published value with latest-value semantics.

    Behavior
    --------
    - `value` always holds the most recently published object; replacing the
      reference is atomic, so readers never see a partial update.
    - `subscribe(cb)` calls `cb(value)` immediately, then again on every
      publish of a value that is not equal to the current one.
    - Subscribers are called in subscription order on the publishing thread.
      Publishing and the first delivery to a new subscriber share one lock, so
      a subscriber never receives an older value after a newer one.
    """

    def __init__(self, value: T) -> None:
        self._value = value
        self._subscribers: List[Callable[[T], None]] = []
        self._lock = threading.RLock()

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, new_value: T) -> None:
        with self._lock:
            if new_value == self._value:
                return  # conflated
            self._value = new_value
            for cb in list(self._subscribers):
                cb(new_value)

    def subscribe(self, callback: Callable[[T], None]) -> Callable[[], None]:
        with self._lock:
            self._subscribers.append(callback)
            callback(self._value)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return unsubscribe

    def as_read_only(self) -> StateFlow[T]:
        return StateFlow(self)
