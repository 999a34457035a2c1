"""
Construction of composite errors from heterogeneous inputs.
"""

from __future__ import annotations

from typing import Any, Optional, Union

from ..config import Settings, load_settings
from ..errors import UnsupportedTypeError
from ..utils.logging import describe_type, get_logger
from .composite import CompositeError
from .inputs import (
    Absent,
    ConfigOption,
    ExtraInput,
    MainInput,
    NestedComposite,
    Text,
    Unrecognized,
    WrappedError,
    classify_extra,
    classify_main,
)

logger = get_logger("constructor")

ComposeResult = Union[CompositeError, UnsupportedTypeError, None]


def new(main: Any, *extras: Any) -> ComposeResult:
    """
    Build a composite error around ``main``.

    ``main`` may be a string, an exception or an existing composite. ``None``
    and the empty string yield ``None`` so ``return new(err)`` is safe for
    possibly-absent errors. Extras are applied left to right: strings and
    exceptions are appended to the wrapped list, options are applied to the
    composite being built.

    Unsupported input types are reported by returning an
    ``UnsupportedTypeError`` rather than raising it.
    """
    return compose(main, *extras)


def compose(main: Any, *extras: Any, settings: Optional[Settings] = None) -> ComposeResult:
    """
    Same as ``new`` with explicit settings.
    """
    settings = settings or load_settings()

    composite = _build_main(classify_main(main))
    if composite is None or isinstance(composite, UnsupportedTypeError):
        return composite

    for extra in extras:
        rejected = _apply_extra(composite, classify_extra(extra), settings)
        if rejected is not None:
            return rejected
    return composite


def from_error(error: Optional[BaseException]) -> Optional[CompositeError]:
    """
    Convert any exception into a composite, keeping existing composites as-is.
    """
    if error is None:
        return None
    if isinstance(error, CompositeError):
        return error
    return CompositeError(error)


def _build_main(tagged: MainInput) -> Union[CompositeError, UnsupportedTypeError, None]:
    if isinstance(tagged, Absent):
        return None
    if isinstance(tagged, Text):
        return CompositeError(tagged.to_error())
    if isinstance(tagged, NestedComposite):
        source = tagged.composite
        return CompositeError(
            source.main,
            source.wrapped,
            source.fields,
            derived_from=source,
        )
    if isinstance(tagged, WrappedError):
        return CompositeError(tagged.error)
    return UnsupportedTypeError(tagged.value)


def _apply_extra(composite: CompositeError, tagged: ExtraInput, settings: Settings) -> Optional[UnsupportedTypeError]:
    if isinstance(tagged, Absent):
        return None
    if isinstance(tagged, Text):
        composite.add_wrapped(tagged.to_error())
    elif isinstance(tagged, WrappedError):
        composite.add_wrapped(tagged.error)
    elif isinstance(tagged, ConfigOption):
        composite.apply_option(tagged.option)
    elif isinstance(tagged, Unrecognized):
        if settings.strict_extras:
            logger.debug("Rejecting extra of type %s", describe_type(tagged.value))
            return UnsupportedTypeError(tagged.value, role="extra")
        if settings.log_ignored_extras:
            logger.warning(
                "Ignoring extra of unsupported type %s while composing %r",
                describe_type(tagged.value),
                str(composite),
            )
    return None
