"""
Tensor Shapes

A shape is the ordered tuple of axis sizes. The relation layer only
accepts rectangular shapes, where every axis has the universe size.

Polymer mapping:
    Given an old shape (m_0, ..., m_{k-1}), a new shape (n_0, ..., n_{l-1})
    and a mapping [a_0, ..., a_{k-1}] with 0 <= a_i < l, the polymer tensor
    is defined by

        new[c_0, ..., c_{l-1}] = old[c_{a_0}, ..., c_{a_{k-1}}]

    which requires m_i == n_{a_i}. Repeated targets take diagonals, new axes
    that no old axis maps onto broadcast.
"""

import itertools
from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple

from ..errors import ShapeMismatchError


@dataclass(frozen=True)
class Shape:
    """Immutable sequence of axis sizes."""

    sizes: Tuple[int, ...]

    def __init__(self, sizes: Sequence[int] = ()):
        object.__setattr__(self, "sizes", tuple(int(n) for n in sizes))

    @classmethod
    def rectangular(cls, rank: int, size: int) -> "Shape":
        """The shape with ``rank`` axes of length ``size``."""
        return cls((size,) * rank)

    @property
    def rank(self) -> int:
        return len(self.sizes)

    @property
    def volume(self) -> int:
        result = 1
        for n in self.sizes:
            result *= n
        return result

    def __len__(self) -> int:
        return len(self.sizes)

    def __getitem__(self, axis: int) -> int:
        return self.sizes[axis]

    def is_rectangular(self, size: int) -> bool:
        return all(n == size for n in self.sizes)

    def positions(self) -> Iterator[Tuple[int, ...]]:
        """All coordinates in row-major order; a rank-0 shape has one."""
        return itertools.product(*(range(n) for n in self.sizes))

    def check_polymer(self, old: "Shape", mapping: Sequence[int]) -> None:
        """
        Validate that ``old`` can be reindexed into this shape via ``mapping``.

        Raises:
            ShapeMismatchError: if an old axis is not mapped, a target axis
                is out of range, or the sizes of mapped axes disagree
        """
        if len(mapping) != old.rank:
            raise ShapeMismatchError(
                f"mapping {list(mapping)} does not cover the {old.rank} axes of {old}",
                expected=old.rank,
                actual=len(mapping),
            )
        for axis, target in enumerate(mapping):
            if not 0 <= target < self.rank:
                raise ShapeMismatchError(
                    f"mapping target {target} is not an axis of {self}",
                    expected=self.rank,
                    actual=target,
                )
            if old.sizes[axis] != self.sizes[target]:
                raise ShapeMismatchError(
                    f"axis {axis} of {old} does not fit axis {target} of {self}",
                    expected=self.sizes[target],
                    actual=old.sizes[axis],
                )

    def __repr__(self) -> str:
        return f"Shape({list(self.sizes)})"
