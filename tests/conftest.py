from __future__ import annotations

from typing import Any, Callable

import pytest


def _set_name(state: Any, action: Any) -> Any:
    if action.get("type") != "SET_NAME":
        return state

    return {**state, "name": action["payload"]}


def _count(state: int, action: Any) -> int:
    if action.get("type") != "INCREMENT":
        return state

    return state + 1


@pytest.fixture
def set_name_reducer() -> Callable[[Any, Any], Any]:
    return _set_name


@pytest.fixture
def count_reducer() -> Callable[[int, Any], int]:
    return _count
