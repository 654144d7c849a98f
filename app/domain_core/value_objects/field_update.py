"""
Tri-state field update used for partial slide edits.

A field in a partial update is either left alone (``UNSET``), explicitly
cleared to null (``CLEAR``) or assigned a new value (``Set(value)``).
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


class _Unset:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


class _Clear:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "CLEAR"


UNSET = _Unset()
CLEAR = _Clear()


@dataclass(frozen=True)
class Set(Generic[T]):
    value: T


FieldUpdate = Union[_Unset, _Clear, Set]


def from_payload(payload: dict, key: str) -> FieldUpdate:
    """Build a FieldUpdate from a dict where a missing key means "leave unchanged"."""
    if key not in payload:
        return UNSET
    value = payload[key]
    if value is None:
        return CLEAR
    return Set(value)


def resolve(update: FieldUpdate, current: Any) -> Any:
    """Return the value a field holds after applying ``update``."""
    if update is UNSET:
        return current
    if update is CLEAR:
        return None
    return update.value
