"""
Chain inspection for exceptions and composites.

These helpers walk everything an error is built from: a composite's main
and wrapped errors, an exception's explicit ``__cause__`` and the members of
an exception group.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple, Type, Union

ErrorTypes = Union[Type[BaseException], Tuple[Type[BaseException], ...]]


def _children(error: BaseException) -> List[BaseException]:
    unwrap_all = getattr(error, "unwrap_all", None)
    if callable(unwrap_all):
        return [child for child in unwrap_all() if child is not None]
    children: List[BaseException] = []
    if error.__cause__ is not None:
        children.append(error.__cause__)
    if isinstance(error, BaseExceptionGroup):
        children.extend(error.exceptions)
    return children


def _is_structural(error: BaseException) -> bool:
    return callable(getattr(error, "unwrap_all", None))


def walk(error: Optional[BaseException]) -> Iterator[BaseException]:
    """
    Yield ``error`` and every error reachable from it, depth first.

    A composite yields its main error (and that error's own chain) before
    its wrapped errors, in insertion order. Each error is visited once.
    """
    seen: set[int] = set()
    stack: List[BaseException] = [] if error is None else [error]
    while stack:
        current = stack.pop()
        if id(current) in seen:
            continue
        seen.add(id(current))
        yield current
        stack.extend(reversed(_children(current)))


def unwrap(error: Optional[BaseException]) -> Optional[BaseException]:
    if error is None:
        return None
    method = getattr(error, "unwrap", None)
    if callable(method):
        return method()
    return error.__cause__


def is_error(error: Optional[BaseException], target: Optional[BaseException]) -> bool:
    """
    Report whether ``target`` appears anywhere in ``error``'s chain.

    An error matches when it equals ``target`` (identity for ordinary
    exceptions) or when it defines an ``is_(target)`` hook that accepts it.
    Composites expose their parts directly, so their hook is not consulted.
    """
    if error is None or target is None:
        return error is target
    for current in walk(error):
        if current is target or current == target:
            return True
        if not _is_structural(current):
            hook = getattr(current, "is_", None)
            if callable(hook) and hook(target):
                return True
    return False


def as_error(error: Optional[BaseException], types: ErrorTypes) -> Optional[BaseException]:
    """
    Return the first error in ``error``'s chain that is an instance of ``types``.

    Errors that are not composites may define an ``as_(types)`` hook
    returning a replacement match. ``None`` means nothing matched.
    """
    if error is None:
        return None
    for current in walk(error):
        if isinstance(current, types):
            return current
        if not _is_structural(current):
            hook = getattr(current, "as_", None)
            if callable(hook):
                found = hook(types)
                if found is not None:
                    return found
    return None

