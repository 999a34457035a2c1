"""
errcompose public package initialization.

Combine a main error with wrapped errors, text annotations and named fields
into one exception that still answers membership and type checks for every
part it was built from.
"""

from .config import Settings, load_settings  # noqa: F401
from .core import (  # noqa: F401
    HTTP_CODE,
    CompositeError,
    FieldKey,
    Option,
    as_error,
    compose,
    from_error,
    get_field,
    http_code,
    is_error,
    new,
    option,
    unwrap,
    walk,
    with_field,
    with_http_code,
    with_wrapped,
)
from .errors import ErrComposeError, LeafError, SettingsError, UnsupportedTypeError  # noqa: F401
from .utils import configure_logging, get_logger  # noqa: F401

__all__ = [
    "CompositeError",
    "ErrComposeError",
    "FieldKey",
    "HTTP_CODE",
    "LeafError",
    "Option",
    "Settings",
    "SettingsError",
    "UnsupportedTypeError",
    "as_error",
    "compose",
    "configure_logging",
    "from_error",
    "get_field",
    "get_logger",
    "http_code",
    "is_error",
    "load_settings",
    "new",
    "option",
    "unwrap",
    "walk",
    "with_field",
    "with_http_code",
    "with_wrapped",
]
