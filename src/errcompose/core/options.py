"""
Construction options applied to composites while they are being built.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Tuple

from .fields import HTTP_CODE

if TYPE_CHECKING:
    from .composite import CompositeError


class Option:
    """
    Named mutation applied to an in-progress composite.

    Subclasses implement ``apply``; ``describe`` exposes what the option
    does so options can be compared, logged and asserted on in tests.
    """

    name: str = "option"

    def apply(self, composite: "CompositeError") -> None:
        raise NotImplementedError

    def describe(self) -> Tuple[str, Any]:
        return (self.name, None)


@dataclass(frozen=True)
class FieldOption(Option):
    key: str
    value: Any

    name = "field"

    def apply(self, composite: "CompositeError") -> None:
        composite.set_field(self.key, self.value)

    def describe(self) -> Tuple[str, Any]:
        return (self.name, (self.key, self.value))


@dataclass(frozen=True)
class WrapOption(Option):
    errors: Tuple[BaseException, ...]

    name = "wrap"

    def apply(self, composite: "CompositeError") -> None:
        composite.add_wrapped(*self.errors)

    def describe(self) -> Tuple[str, Any]:
        return (self.name, self.errors)


@dataclass(frozen=True)
class CallableOption(Option):
    label: str
    func: Callable[["CompositeError"], None]

    @property
    def name(self) -> str:  # type: ignore[override]
        return self.label

    def apply(self, composite: "CompositeError") -> None:
        self.func(composite)


def with_field(key: str, value: Any) -> FieldOption:
    if not isinstance(key, str):
        raise TypeError(f"Field key must be a string, got {type(key).__name__}")
    return FieldOption(key, value)


def with_http_code(code: int) -> FieldOption:
    if isinstance(code, bool) or not isinstance(code, int):
        raise TypeError(f"HTTP code must be an integer, got {type(code).__name__}")
    return FieldOption(HTTP_CODE.name, code)


def with_wrapped(*errors: BaseException) -> WrapOption:
    for error in errors:
        if not isinstance(error, BaseException):
            raise TypeError(f"Expected an exception instance, got {type(error).__name__}")
    return WrapOption(tuple(errors))


def option(name: str, func: Callable[["CompositeError"], None]) -> CallableOption:
    """
    Wrap a custom mutation under an explicit name.

    ``func`` receives the composite under construction and may add fields or
    wrapped errors through ``set_field`` and ``add_wrapped``.
    """
    return CallableOption(name, func)
