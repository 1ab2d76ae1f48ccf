"""Single-cell state container updated through reducers."""

from ._action import EMPTY_ACTION, Action
from ._reducer import Reducer
from ._store import Store, Subscriber, Unsubscribe, create_store


__all__ = (
    "Action",
    "EMPTY_ACTION",
    "Reducer",
    "Store",
    "Subscriber",
    "Unsubscribe",

    "create_store",
)
