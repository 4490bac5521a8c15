"""Helpers over the runtime value domain: ints and Nil, nothing else."""

from __future__ import annotations

from typing import Optional

from wahlberg import Value
from wahlberg.types.nil import Nil


def as_int(value: Value) -> Optional[int]:
    """Coerce a value to an int, or None when it is not one (i.e. Nil)."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def truthy(value: Value) -> bool:
    # Nil and 0 are falsy, every other int is truthy
    n = as_int(value)
    return n is not None and n != 0


def render(value: Value) -> str:
    """Text spliced into a document for an interpolated value."""
    if value is Nil:
        return "nil"
    return str(value)
