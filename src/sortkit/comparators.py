"""
Comparator contract and the handful of comparators the engine relies on.

A comparator is any callable of two elements returning a signed number:
    negative -> first argument orders before the second
    positive -> first argument orders after the second
    zero     -> tie (order between the two is left to the algorithm)

Comparators need not be total or symmetric; they only have to give the same
answer for the same pair within one sort call, and must not mutate their
arguments.

Public API (stable):
    Comparator, Sorter
    ascending(a, b) -> int
    descending(a, b) -> int
    preserve(a, b) -> int      # always 0: stable algorithms keep input order
    reverse(a, b) -> int       # always -1: "always swap", reverses input order
"""

from __future__ import annotations

from typing import Any, Callable, MutableSequence, Optional, Protocol, TypeVar

T = TypeVar("T")

Comparator = Callable[[T, T], float]

__all__ = [
    "Comparator",
    "Sorter",
    "ascending",
    "descending",
    "preserve",
    "reverse",
]


class Sorter(Protocol):
    """An in-place sort operation: mutate `a` per `cmp` and return it."""

    def __call__(
        self, a: MutableSequence[Any], cmp: Optional[Comparator[Any]] = ...
    ) -> MutableSequence[Any]:
        ...


def ascending(a: Any, b: Any) -> int:
    """Natural order, smallest first."""
    if a == b:
        return 0
    return -1 if a < b else 1


def descending(a: Any, b: Any) -> int:
    """Natural order, largest first."""
    if a == b:
        return 0
    return -1 if a > b else 1


def preserve(a: Any, b: Any) -> int:
    return 0


def reverse(a: Any, b: Any) -> int:
    return -1
