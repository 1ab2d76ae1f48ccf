from typing import Any

from pydantic import BaseModel, ConfigDict


__all__ = (
    "Action",
    "EMPTY_ACTION",
)


class Action(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: str
    payload: Any = None

    # mapping access for reducers written against dict actions
    def __getitem__(self, key: str) -> Any:
        if key not in type(self).model_fields:
            raise KeyError(key)

        return getattr(self, key)

    def get(self, key: str, default: Any = None) -> Any:
        try:
            return self[key]
        except KeyError:
            return default


EMPTY_ACTION = Action(type="")
