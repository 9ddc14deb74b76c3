"""
Tensor Capability

Abstract interface for dense n-dimensional arrays of Boolean-algebra
elements. The relation layer is written against this interface only.

Required primitives:
    tensor_create(shape, fn)          lift an index function to a tensor
    tensor_not / tensor_or / tensor_and  pointwise combinators
    tensor_polymer(elem, shape, map)  axis reindexing (see tensor.shape)
    tensor_any(elem)                  existential reduction of axis 0

    any(T)[c_1, ..., c_{k-1}] = OR_{i} T[i, c_1, ..., c_{k-1}]
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Sequence, Tuple

from ..errors import ShapeMismatchError
from .shape import Shape

Tensor = Any


class TensorAlg(ABC):
    """
    Abstract base class for tensor algebras.

    All methods are value-level: they return new tensors and never modify
    their arguments. A backend may still mutate its own state (e.g. allocate
    solver variables), so one instance must not be shared between threads.
    """

    @abstractmethod
    def shape(self, elem: Tensor) -> Shape:
        """Returns the shape of the tensor."""

    @abstractmethod
    def tensor_create(self, shape: Shape, fn: Callable[[Tuple[int, ...]], bool]) -> Tensor:
        """
        Lift a truth-valued index function to a constant tensor.

        Args:
            shape: Shape of the result
            fn: Called with every coordinate tuple of ``shape``

        Returns:
            Tensor whose value at ``c`` is the lifted ``fn(c)``
        """

    @abstractmethod
    def tensor_not(self, elem: Tensor) -> Tensor:
        """Pointwise negation."""

    @abstractmethod
    def tensor_or(self, elem1: Tensor, elem2: Tensor) -> Tensor:
        """Pointwise disjunction of tensors of the same shape."""

    @abstractmethod
    def tensor_and(self, elem1: Tensor, elem2: Tensor) -> Tensor:
        """Pointwise conjunction of tensors of the same shape."""

    def tensor_xor(self, elem1: Tensor, elem2: Tensor) -> Tensor:
        either = self.tensor_or(elem1, elem2)
        both = self.tensor_and(elem1, elem2)
        return self.tensor_and(either, self.tensor_not(both))

    def tensor_equ(self, elem1: Tensor, elem2: Tensor) -> Tensor:
        return self.tensor_not(self.tensor_xor(elem1, elem2))

    def tensor_imp(self, elem1: Tensor, elem2: Tensor) -> Tensor:
        return self.tensor_or(self.tensor_not(elem1), elem2)

    @abstractmethod
    def tensor_polymer(self, elem: Tensor, shape: Shape, mapping: Sequence[int]) -> Tensor:
        """
        Reindex ``elem`` into ``shape``.

        Old axis i becomes new axis ``mapping[i]``; see Shape.check_polymer.
        """

    @abstractmethod
    def tensor_any(self, elem: Tensor) -> Tensor:
        """Existentially quantify the first axis, reducing the rank by one."""

    def tensor_all(self, elem: Tensor) -> Tensor:
        """Universally quantify the first axis, reducing the rank by one."""
        return self.tensor_not(self.tensor_any(self.tensor_not(elem)))

    def check_same_shape(self, elem1: Tensor, elem2: Tensor) -> Shape:
        shape1 = self.shape(elem1)
        shape2 = self.shape(elem2)
        if shape1 != shape2:
            raise ShapeMismatchError(
                f"pointwise operands differ in shape: {shape1} != {shape2}",
                expected=shape1,
                actual=shape2,
            )
        return shape1

    def check_reducible(self, elem: Tensor) -> Shape:
        shape = self.shape(elem)
        if shape.rank == 0:
            raise ShapeMismatchError("cannot reduce a rank-0 tensor", expected=1, actual=0)
        return shape
