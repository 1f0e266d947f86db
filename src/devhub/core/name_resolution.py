"""Product-name resolution for ``product create``.

A name may come from several places.  Each place is a zero-argument
*source*; sources are tried in order and evaluation stops at the first
one that yields a non-empty value, so an interactive prompt placed last
only runs when everything before it came up empty.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

NameSource = Callable[[], "str | None"]


def constant(value: str | None) -> NameSource:
    """Wrap an already-known value (e.g. a CLI flag) as a source."""
    return lambda: value


def resolve_name(sources: Iterable[NameSource]) -> str | None:
    """Return the first non-blank value produced by *sources*.

    Sources after the first hit are never called.  Returns ``None`` when
    every source is exhausted.
    """
    for source in sources:
        value = source()
        if value is not None and value.strip():
            return value.strip()
    return None
