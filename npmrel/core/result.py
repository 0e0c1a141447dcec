"""Success/failure values for the process and git layers.

`run` and the git queries hand back `Ok(value)` or `Err(error)`; the npm
wrappers and the resolver turn an `Err` into one of the exceptions in
`npmrel.core.errors`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    error: E


Result: TypeAlias = Ok[T] | Err[E]
