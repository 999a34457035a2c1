"""
Composite error value.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Iterable, List, Mapping, Optional, Tuple

from . import formatting
from .chain import ErrorTypes, as_error, is_error
from .fields import HTTP_CODE, FieldKey, T
from .options import Option


class CompositeError(Exception):
    """
    Error combining a main error with wrapped errors and named fields.

    ``str()`` renders only the main error; ``format(err, "v")`` renders the
    main error followed by every wrapped error. Membership checks through
    ``is_error``/``as_error`` see the main error, each wrapped error and
    whatever those errors chain to.

    Instances are built by ``errcompose.new``. ``apply_option``, ``set_field``
    and ``add_wrapped`` exist for options applied during construction; once
    ``new`` returns, treat the composite as read-only.
    """

    def __init__(
        self,
        main: BaseException,
        wrapped: Iterable[BaseException] = (),
        fields: Optional[Mapping[str, Any]] = None,
        *,
        derived_from: Optional["CompositeError"] = None,
    ) -> None:
        super().__init__(main)
        self._main = main
        self._wrapped: List[BaseException] = list(wrapped)
        self._fields: dict[str, Any] = dict(fields or {})
        self._derived_from = derived_from
        self._applied_options: List[str] = []
        self.__cause__ = main

    # Parts ---------------------------------------------------------------
    @property
    def main(self) -> BaseException:
        return self._main

    @property
    def wrapped(self) -> Tuple[BaseException, ...]:
        return tuple(self._wrapped)

    @property
    def fields(self) -> Mapping[str, Any]:
        return MappingProxyType(self._fields)

    @property
    def derived_from(self) -> Optional["CompositeError"]:
        return self._derived_from

    @property
    def applied_options(self) -> Tuple[str, ...]:
        return tuple(self._applied_options)

    def unwrap(self) -> BaseException:
        return self._main

    def unwrap_all(self) -> Tuple[BaseException, ...]:
        parts: List[BaseException] = [self._main, *self._wrapped]
        if self._derived_from is not None:
            parts.append(self._derived_from)
        return tuple(parts)

    # Construction-time mutation -------------------------------------------
    def set_field(self, key: str, value: Any) -> None:
        self._fields[key] = value

    def add_wrapped(self, *errors: BaseException) -> None:
        self._wrapped.extend(errors)

    def apply_option(self, option: Option) -> None:
        option.apply(self)
        self._applied_options.append(option.name)

    # Matching ------------------------------------------------------------
    def is_(self, target: BaseException) -> bool:
        for part in self.unwrap_all():
            if is_error(part, target):
                return True
        return False

    def as_(self, types: ErrorTypes) -> Optional[BaseException]:
        for part in self.unwrap_all():
            found = as_error(part, types)
            if found is not None:
                return found
        return None

    # Fields --------------------------------------------------------------
    def get_field(self, key: str) -> Tuple[Any, bool]:
        if key in self._fields:
            return self._fields[key], True
        return None, False

    def get_typed(self, key: FieldKey[T]) -> T:
        value, found = self.get_field(key.name)
        if not found:
            return key.default
        return key.coerce(value)

    def http_code(self) -> int:
        return self.get_typed(HTTP_CODE)

    # Rendering -----------------------------------------------------------
    def __str__(self) -> str:
        return formatting.short_message(self)

    def __format__(self, format_spec: str) -> str:
        return formatting.render(self, format_spec)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({str(self)!r}, "
            f"wrapped={[str(error) for error in self._wrapped]!r}, "
            f"fields={self._fields!r})"
        )


def get_field(error: Optional[BaseException], key: str) -> Tuple[Any, bool]:
    """
    Look up ``key`` on a composite, tolerating ``None`` and plain exceptions.
    """
    if not isinstance(error, CompositeError):
        return None, False
    return error.get_field(key)


def http_code(error: Optional[BaseException]) -> int:
    if not isinstance(error, CompositeError):
        return HTTP_CODE.default
    return error.http_code()
