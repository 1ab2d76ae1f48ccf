from __future__ import annotations

import logging

from inspect import Parameter, signature
from typing import Any, Callable, TypeVar

from ._action import EMPTY_ACTION


__all__ = (
    "Reducer",

    "initialize",
)


A = TypeVar("A")
S = TypeVar("S")


Reducer = Callable[[S, A], S]


_logger = logging.getLogger(__name__)


def _get_parameters(reducer: Reducer) -> list[Parameter]:
    try:
        return list(signature(reducer).parameters.values())
    except (TypeError, ValueError):
        return []


def initialize(reducer: Reducer) -> Any:
    """Ask ``reducer`` for its own default state.

    A reducer whose state parameter declares a default receives that
    default, exactly as Python would have bound it; any other reducer
    receives ``None`` as the state.
    """
    parameters = _get_parameters(reducer)

    if not parameters or parameters[0].default is Parameter.empty:
        _logger.debug("Initializing state with reducer(None, EMPTY_ACTION)")

        return reducer(None, EMPTY_ACTION)

    state_parameter = parameters[0]

    _logger.debug("Initializing state from default of %r", reducer)

    if len(parameters) > 1 and parameters[1].kind is Parameter.KEYWORD_ONLY:
        return reducer(
            state_parameter.default,
            **{parameters[1].name: EMPTY_ACTION}
        )

    return reducer(state_parameter.default, EMPTY_ACTION)
