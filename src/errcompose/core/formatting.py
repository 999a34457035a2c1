"""
Text rendering of composite errors.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Dict

if TYPE_CHECKING:
    from .composite import CompositeError

SEPARATOR = ": "

_SIMPLE_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
}


def short_message(composite: "CompositeError") -> str:
    main = composite.main
    if main is None:
        return ""
    return str(main)


def long_message(composite: "CompositeError") -> str:
    parts = []
    if composite.main is not None:
        parts.append(str(composite.main))
    parts.extend(str(error) for error in composite.wrapped)
    return SEPARATOR.join(parts)


def quote(text: str) -> str:
    """
    Double-quote ``text``, escaping quotes, backslashes and non-printable
    characters while keeping printable non-ASCII text as-is.
    """
    parts = ['"']
    for char in text:
        if char in _SIMPLE_ESCAPES:
            parts.append(_SIMPLE_ESCAPES[char])
        elif char.isprintable():
            parts.append(char)
        elif ord(char) < 0x80:
            parts.append(f"\\x{ord(char):02x}")
        elif ord(char) < 0x10000:
            parts.append(f"\\u{ord(char):04x}")
        else:
            parts.append(f"\\U{ord(char):08x}")
    parts.append('"')
    return "".join(parts)


def quoted_message(composite: "CompositeError") -> str:
    return quote(short_message(composite))


_RENDERERS: Dict[str, Callable[["CompositeError"], str]] = {
    "": short_message,
    "s": short_message,
    "v": long_message,
    "q": quoted_message,
}


def render(composite: "CompositeError", spec: str) -> str:
    """
    Render ``composite`` for a format spec.

    ``s`` (or an empty spec) gives the main message, ``v`` joins the main
    message with every wrapped message and ``q`` quotes the main message.
    Any other spec renders as an empty string.
    """
    renderer = _RENDERERS.get(spec)
    if renderer is None:
        return ""
    return renderer(composite)
