"""
Core building blocks for composing errors.
"""

from .chain import as_error, is_error, unwrap, walk
from .composite import CompositeError, get_field, http_code
from .constructor import compose, from_error, new
from .fields import HTTP_CODE, FieldKey
from .options import (
    CallableOption,
    FieldOption,
    Option,
    WrapOption,
    option,
    with_field,
    with_http_code,
    with_wrapped,
)

__all__ = [
    "CallableOption",
    "CompositeError",
    "FieldKey",
    "FieldOption",
    "HTTP_CODE",
    "Option",
    "WrapOption",
    "as_error",
    "compose",
    "from_error",
    "get_field",
    "http_code",
    "is_error",
    "new",
    "option",
    "unwrap",
    "walk",
    "with_field",
    "with_http_code",
    "with_wrapped",
]
