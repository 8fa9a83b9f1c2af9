"""Result[T, E] -- value-based error handling for instref.

Fallible functions return Ok[T] | Err[E] instead of raising; callers
branch with ``match``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar, final

T = TypeVar("T")
E = TypeVar("E")


@final
@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success variant of Result."""

    value: T


@final
@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Error variant of Result."""

    error: E


Result: TypeAlias = Ok[T] | Err[E]
