"""Result type for explicit error handling.

Services return ``Ok(value)`` or ``Err(error)`` instead of raising for
expected failures (missing changelog, bad arguments, invalid config).
Callers branch with ``isinstance`` or ``match``:

    match read_changelog(path):
        case Ok(text):
            ...
        case Err(error):
            ...
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Successful result carrying ``value``."""

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err[E]:
    """Failed result carrying ``error``."""

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


type Result[T, E] = Ok[T] | Err[E]
