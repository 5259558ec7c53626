"""First-match lookup over an ordered list of accessors.

Upstream payloads name the same logical field in several ways
(``first_name`` / ``firstName`` / ``given_name``...).  Instead of chaining
``a or b or c or ""`` inline, callers list the candidates once and the
helpers below return the first one that is present and non-empty.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any

__all__ = ["Accessor", "first_present", "first_text", "get_path", "is_present"]

# A dotted key path ("start.year") or a callable taking the source.
Accessor = str | Callable[[Any], Any]

_MISSING = object()


def is_present(value: Any) -> bool:
    """Return True for values worth using.

    ``None``, empty/whitespace strings and empty containers are absent.
    ``0`` and ``False`` are present.
    """
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, (list, tuple, dict, set)):
        return bool(value)
    return True


def get_path(source: Any, path: str, default: Any = None) -> Any:
    """Resolve a dotted *path* through nested mappings and attributes."""
    current = source
    for part in path.split("."):
        if isinstance(current, Mapping):
            current = current.get(part, _MISSING)
        else:
            current = getattr(current, part, _MISSING)
        if current is _MISSING or current is None:
            return default
    return current


def first_present(source: Any, accessors: Iterable[Accessor], default: Any = None) -> Any:
    """Return the first present value produced by *accessors*, else *default*.

    Accessors are tried in order.  A string is treated as a dotted key path
    into *source*; a callable is called with *source*.
    """
    for accessor in accessors:
        value = get_path(source, accessor) if isinstance(accessor, str) else accessor(source)
        if is_present(value):
            return value
    return default


def first_text(source: Any, accessors: Iterable[Accessor], default: str = "") -> str:
    """Like :func:`first_present` but always returns a stripped string."""
    value = first_present(source, accessors)
    if value is None:
        return default
    return str(value).strip()
