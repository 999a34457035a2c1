"""
Typed keys for well-known composite fields.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class FieldKey(Generic[T]):
    """
    Names a field together with the type its value must have.

    Lookups through a ``FieldKey`` fall back to ``default`` when the field is
    missing or holds a value of another type, so callers never receive a
    value they did not ask for.
    """

    name: str
    type: type
    default: T

    def coerce(self, value: Any) -> T:
        if isinstance(value, bool) and self.type is not bool:
            return self.default
        if isinstance(value, self.type):
            return value
        return self.default


HTTP_CODE: FieldKey[int] = FieldKey("http_code", int, 0)
