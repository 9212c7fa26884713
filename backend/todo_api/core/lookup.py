"""Lookup Result - explicit found / not-found outcome for id-based store calls.

Invariants:
    - Store lookups by id never return None; they return Found or NotFound
    - Found always carries the record

Design Decisions:
    - Two frozen dataclasses over Optional: callers branch with `match`,
      and the not-found path is a named case instead of a falsy check
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Found(Generic[T]):
    value: T


@dataclass(frozen=True)
class NotFound:
    pass


Lookup = Union[Found[T], NotFound]
