"""
Classification of constructor inputs.

Everything handed to ``new`` is turned into one of a closed set of tagged
values before the constructor acts on it, so each kind is handled in a
single, explicit branch.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from ..errors import LeafError
from .composite import CompositeError
from .options import Option


@dataclass(frozen=True)
class Absent:
    pass


@dataclass(frozen=True)
class Text:
    message: str

    def to_error(self) -> LeafError:
        return LeafError(self.message)


@dataclass(frozen=True)
class WrappedError:
    error: BaseException


@dataclass(frozen=True)
class NestedComposite:
    composite: CompositeError


@dataclass(frozen=True)
class ConfigOption:
    option: Option


@dataclass(frozen=True)
class Unrecognized:
    value: Any


MainInput = Union[Absent, Text, NestedComposite, WrappedError, Unrecognized]
ExtraInput = Union[Absent, Text, WrappedError, ConfigOption, Unrecognized]


def classify_main(value: Any) -> MainInput:
    if value is None:
        return Absent()
    if isinstance(value, str):
        if not value:
            return Absent()
        return Text(value)
    if isinstance(value, CompositeError):
        return NestedComposite(value)
    if isinstance(value, BaseException):
        return WrappedError(value)
    return Unrecognized(value)


def classify_extra(value: Any) -> ExtraInput:
    if value is None:
        return Absent()
    if isinstance(value, str):
        return Text(value)
    if isinstance(value, BaseException):
        return WrappedError(value)
    if isinstance(value, Option):
        return ConfigOption(value)
    return Unrecognized(value)
