"""Generic growable vector used as the storage of bit-vectors."""

from typing import Any, Callable, Iterable, Iterator, List


class GenVec:
    """
    Homogeneous sequence with positional access.

    Vectors are built with ``from_fn`` or with ``with_capacity`` followed by
    ``push`` / ``extend``; once handed out by an algebra they are treated as
    immutable values.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[Any] = ()):
        self._items: List[Any] = list(items)

    @classmethod
    def from_fn(cls, length: int, fn: Callable[[int], Any]) -> "GenVec":
        """Build a vector whose i-th element is ``fn(i)``, called in index order."""
        return cls(fn(i) for i in range(length))

    @classmethod
    def with_capacity(cls, capacity: int) -> "GenVec":
        # Python lists grow on demand, the capacity is only a hint.
        return cls()

    def get(self, index: int) -> Any:
        return self._items[index]

    def push(self, elem: Any) -> None:
        self._items.append(elem)

    def extend(self, other: Iterable[Any]) -> None:
        self._items.extend(other)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Any:
        return self._items[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GenVec):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"GenVec({self._items!r})"
