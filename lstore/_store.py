from __future__ import annotations

import copy
import logging

from typing import Callable, Generic, Optional, TypeVar

from pydantic import BaseModel

from ._reducer import Reducer, initialize


__all__ = (
    "Store",
    "Subscriber",
    "Unsubscribe",

    "create_store",
)


A = TypeVar("A")
S = TypeVar("S")


Subscriber = Callable[[S], None]
Unsubscribe = Callable[[], None]


_logger = logging.getLogger(__name__)


class Store(Generic[S, A]):
    def subscribe(self, subscriber: Subscriber) -> Unsubscribe:
        raise NotImplementedError

    def dispatch(self, action: A) -> None:
        raise NotImplementedError

    def get_state(self) -> S:
        raise NotImplementedError


def _clone_state(state: S) -> S:
    if isinstance(state, BaseModel):
        return state.model_copy(deep=True)

    return copy.deepcopy(state)


class _DefaultStore(Store[S, A]):
    _reducer: Reducer
    _state: Optional[S]

    # id(subscriber) -> (subscriber, registration token)
    _subscribers: dict[int, tuple[Subscriber, object]]

    def __init__(self, reducer: Reducer, initial_state: Optional[S]) -> None:
        self._reducer = reducer
        self._state = None

        self._subscribers = {}

        if initial_state is not None:
            self._state = _clone_state(initial_state)

        if self._state is None:
            self._state = initialize(reducer)

        if self._state is None:
            _logger.debug("Reducer %r produced no initial state", reducer)

    def _notify(self) -> None:
        for key, entry in list(self._subscribers.items()):
            # removed earlier in this pass
            if self._subscribers.get(key) is not entry:
                continue

            subscriber, _ = entry
            subscriber(self._state)

    def subscribe(self, subscriber: Subscriber) -> Unsubscribe:
        key = id(subscriber)
        entry = self._subscribers.get(key)

        if entry is None:
            entry = (subscriber, object())
            self._subscribers[key] = entry

            _logger.debug("Subscribed %r", subscriber)

        def unsubscribe() -> None:
            if self._subscribers.get(key) is not entry:
                return

            del self._subscribers[key]

            _logger.debug("Unsubscribed %r", subscriber)

        return unsubscribe

    def dispatch(self, action: A) -> None:
        _logger.debug("Dispatching %r", action)

        self._state = self._reducer(self._state, action)
        self._notify()

    def get_state(self) -> S:
        return self._state  # type: ignore[return-value]


def create_store(
    reducer: Reducer,
    initial_state: Optional[S] = None
) -> Store[S, A]:
    """Create a store driven by ``reducer``.

    ``initial_state`` is cloned so that later changes to the caller's
    object are not seen by the store. Without it, the reducer is asked
    once for its default state with :data:`EMPTY_ACTION`. Subscribers are
    not notified during creation.
    """
    store: _DefaultStore[S, A] = _DefaultStore(reducer, initial_state)

    _logger.debug("Created store with reducer %r", reducer)

    return store
