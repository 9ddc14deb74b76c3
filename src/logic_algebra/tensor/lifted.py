"""
Tensors over an Arbitrary Boolean Algebra

Lifts any Boolean-algebra capability to a tensor algebra. Cells of a
tensor are elements of the wrapped algebra, held in a numpy object array,
and every cell operation is routed through that algebra. With a
solver-backed algebra this turns relation operations into incremental
constraint construction.

    not(T)[c]    = alg.not(T[c])
    or(T, U)[c]  = alg.or(T[c], U[c])
    any(T)[c]    = alg.or(... alg.or(alg.zero, T[0, c]) ..., T[n-1, c])
"""

from typing import Any, Callable, Sequence, Tuple

import numpy as np

from ..core.boolalg import BoolAlg
from .base import TensorAlg
from .shape import Shape


class LiftedTensorAlg(TensorAlg):
    """Tensor algebra whose cells are elements of ``alg``."""

    def __init__(self, alg: BoolAlg):
        self.alg = alg

    def shape(self, elem: np.ndarray) -> Shape:
        return Shape(elem.shape)

    def _fill(self, shape: Shape, fn: Callable[[Tuple[int, ...]], Any]) -> np.ndarray:
        result = np.empty(shape.sizes, dtype=object)
        for coord in shape.positions():
            result[coord] = fn(coord)
        return result

    def tensor_create(self, shape: Shape, fn: Callable[[Tuple[int, ...]], bool]) -> np.ndarray:
        return self._fill(shape, lambda c: self.alg.bool_lift(bool(fn(c))))

    def tensor_not(self, elem: np.ndarray) -> np.ndarray:
        return self._fill(self.shape(elem), lambda c: self.alg.bool_not(elem[c]))

    def _pointwise(self, elem1: np.ndarray, elem2: np.ndarray, op: Callable) -> np.ndarray:
        shape = self.check_same_shape(elem1, elem2)
        return self._fill(shape, lambda c: op(elem1[c], elem2[c]))

    def tensor_or(self, elem1: np.ndarray, elem2: np.ndarray) -> np.ndarray:
        return self._pointwise(elem1, elem2, self.alg.bool_or)

    def tensor_and(self, elem1: np.ndarray, elem2: np.ndarray) -> np.ndarray:
        return self._pointwise(elem1, elem2, self.alg.bool_and)

    def tensor_xor(self, elem1: np.ndarray, elem2: np.ndarray) -> np.ndarray:
        return self._pointwise(elem1, elem2, self.alg.bool_xor)

    def tensor_equ(self, elem1: np.ndarray, elem2: np.ndarray) -> np.ndarray:
        return self._pointwise(elem1, elem2, self.alg.bool_equ)

    def tensor_imp(self, elem1: np.ndarray, elem2: np.ndarray) -> np.ndarray:
        return self._pointwise(elem1, elem2, self.alg.bool_imp)

    def tensor_polymer(self, elem: np.ndarray, shape: Shape, mapping: Sequence[int]) -> np.ndarray:
        shape.check_polymer(self.shape(elem), mapping)
        return self._fill(shape, lambda c: elem[tuple(c[axis] for axis in mapping)])

    def tensor_any(self, elem: np.ndarray) -> np.ndarray:
        old = self.check_reducible(elem)
        zero = self.alg.bool_zero()

        def fold(coord: Tuple[int, ...]) -> Any:
            acc = zero
            for i in range(old.sizes[0]):
                acc = self.alg.bool_or(acc, elem[(i,) + coord])
            return acc

        return self._fill(Shape(old.sizes[1:]), fold)
