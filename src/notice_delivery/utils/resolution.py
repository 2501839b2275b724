"""Override-chain resolution."""

from __future__ import annotations

from typing import Optional, TypeVar

T = TypeVar("T")


def first_present(*candidates: Optional[T]) -> Optional[T]:
    """Return the first candidate that is not None.

    Candidates are ordered from most to least specific (scope, registry,
    built-in). Falsy values such as 0 or "" count as present.
    """
    for candidate in candidates:
        if candidate is not None:
            return candidate
    return None
