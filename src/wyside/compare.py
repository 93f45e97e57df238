"""Set comparison of two collections.

compare() records, for every element of the union of both inputs, whether it
belongs to the left input, the right input or both. The derived views are
computed on first access and cached.
"""

from dataclasses import dataclass
from functools import cached_property
from typing import Generic, Hashable, Iterable, List, Tuple, TypeVar

T = TypeVar("T", bound=Hashable)


@dataclass(frozen=True)
class ComparisonEntry(Generic[T]):
    """An element and its membership in the left and right inputs."""
    element: T
    left: bool
    right: bool


class SetComparison(Generic[T]):
    """Read-only result of comparing two inputs.

    Entries are ordered by first appearance: left input first, then the
    elements only found in the right input.
    """

    def __init__(self, entries: Iterable[ComparisonEntry[T]] = ()):
        self._entries = tuple(entries)

    @property
    def entries(self) -> Tuple[ComparisonEntry[T], ...]:
        return self._entries

    @cached_property
    def left(self) -> List[T]:
        """Elements only in the left input."""
        return [e.element for e in self._entries if e.left and not e.right]

    @cached_property
    def right(self) -> List[T]:
        """Elements only in the right input."""
        return [e.element for e in self._entries if e.right and not e.left]

    @cached_property
    def both(self) -> List[T]:
        """Elements in both inputs."""
        return [e.element for e in self._entries if e.left and e.right]

    @classmethod
    def create(cls, left: Iterable[T], right: Iterable[T]) -> "SetComparison[T]":
        left_set = dict.fromkeys(left)
        right_set = dict.fromkeys(right)
        union = dict.fromkeys([*left_set, *right_set])
        return cls(
            ComparisonEntry(element, element in left_set, element in right_set)
            for element in union
        )


def compare(left: Iterable[T], right: Iterable[T]) -> SetComparison[T]:
    """Compare two inputs as sets."""
    return SetComparison.create(left, right)
