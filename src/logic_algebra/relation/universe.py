"""
Relation Algebra over a Tensor Capability

A universe fixes a finite carrier set {0, ..., size-1}. An n-ary relation is
a tensor of shape (size, ..., size) with n axes; a scalar is a rank-0 tensor.

Binary relation operations:
    comp(R)(x, y)    = not R(x, y)
    meet(R, S)(x, y) = R(x, y) and S(x, y)
    join(R, S)(x, y) = R(x, y) or S(x, y)  = comp(meet(comp R, comp S))
    inv(R)(x, y)     = R(y, x)
    diag(x, y)       = x == y
    circ(R, S)(x, z) = exists y. R(x, y) and S(y, z)

Composition is computed by moving both operands into rank 3 with the shared
variable y on axis 0:

    R' = polymer(R, [1, 0])   R'[y, x, z] = R[x, y]
    S' = polymer(S, [0, 2])   S'[y, x, z] = S[y, z]
    circ(R, S) = any(R' and S')
"""

import logging
from abc import ABC, abstractmethod
from typing import Sequence

import numpy as np

from ..core.boolalg import BoolAlg
from ..errors import ShapeMismatchError
from ..tensor.base import Tensor, TensorAlg
from ..tensor.shape import Shape

logger = logging.getLogger(__name__)


class BinaryRelAlg(ABC):
    """Algebra of binary relations."""

    @abstractmethod
    def binrel_lift(self, elem: bool) -> Tensor:
        """Returns the empty or total relation."""

    def binrel_empty(self) -> Tensor:
        return self.binrel_lift(False)

    def binrel_total(self) -> Tensor:
        return self.binrel_lift(True)

    @abstractmethod
    def binrel_diag(self) -> Tensor:
        """Returns the diagonal (identity) relation."""

    @abstractmethod
    def binrel_comp(self, elem: Tensor) -> Tensor:
        """Returns the complement of the relation."""

    @abstractmethod
    def binrel_meet(self, elem1: Tensor, elem2: Tensor) -> Tensor:
        """Intersection of a pair of relations."""

    def binrel_join(self, elem1: Tensor, elem2: Tensor) -> Tensor:
        """Union of a pair of relations, by De Morgan from comp and meet."""
        elem1 = self.binrel_comp(elem1)
        elem2 = self.binrel_comp(elem2)
        elem3 = self.binrel_meet(elem1, elem2)
        return self.binrel_comp(elem3)

    @abstractmethod
    def binrel_inv(self, elem: Tensor) -> Tensor:
        """Returns the inverse of the relation."""

    @abstractmethod
    def binrel_circ(self, elem1: Tensor, elem2: Tensor) -> Tensor:
        """Returns the composition of a pair of relations."""


class Universe(BoolAlg, BinaryRelAlg):
    """
    A tensor algebra bound to one fixed universe size.

    The universe holds no relation state; it only builds shapes and checks
    operands before delegating to ``alg``. Its scalar front (rank-0 tensors)
    is itself a Boolean-algebra capability, which also serves as the logic
    domain of the relation predicates ``binrel_equals`` and ``binrel_leq``.
    """

    def __init__(self, alg: TensorAlg, size: int):
        if size < 0:
            raise ValueError(f"universe size must be non-negative, got {size}")
        self.alg = alg
        self.size = size
        logger.debug("Created universe of size %d over %s", size, type(alg).__name__)

    def is_scalar(self, elem: Tensor) -> bool:
        return self.alg.shape(elem).rank == 0

    def is_relation(self, elem: Tensor) -> bool:
        return self.alg.shape(elem).is_rectangular(self.size)

    def is_binary_rel(self, elem: Tensor) -> bool:
        return self.alg.shape(elem).rank == 2 and self.is_relation(elem)

    def new_shape(self, rank: int) -> Shape:
        return Shape.rectangular(rank, self.size)

    def _require(self, check, elem: Tensor, rank: int, what: str) -> None:
        if not check(elem):
            raise ShapeMismatchError(
                f"expected {what} over a universe of size {self.size}, "
                f"got shape {self.alg.shape(elem)}",
                expected=self.new_shape(rank),
                actual=self.alg.shape(elem),
            )

    def require_scalar(self, *elems: Tensor) -> None:
        for elem in elems:
            self._require(self.is_scalar, elem, 0, "a scalar")

    def require_binary_rel(self, *elems: Tensor) -> None:
        for elem in elems:
            self._require(self.is_binary_rel, elem, 2, "a binary relation")

    def require_relation(self, *elems: Tensor) -> int:
        for elem in elems:
            self._require(self.is_relation, elem, self.alg.shape(elem).rank, "a relation")
        rank = self.alg.shape(elems[0]).rank
        for elem in elems[1:]:
            other = self.alg.shape(elem)
            if other.rank != rank:
                raise ShapeMismatchError(
                    f"relations of different arities: {rank} and {other.rank}",
                    expected=self.new_shape(rank),
                    actual=other,
                )
        return rank

    def truth_value(self, elem: Tensor) -> bool:
        """
        Python truth value of a concrete scalar.

        Raises:
            TypeError: if the cell is not a concrete bool, e.g. a formula of a
                symbolic algebra whose value depends on an assignment
        """
        self.require_scalar(elem)
        value = elem.item()
        if not isinstance(value, (bool, np.bool_)):
            raise TypeError(
                f"scalar holds {type(value).__name__}, not a concrete truth value"
            )
        return bool(value)

    # Boolean algebra of scalars

    def bool_lift(self, elem: bool) -> Tensor:
        return self.alg.tensor_create(self.new_shape(0), lambda _: elem)

    def bool_not(self, elem: Tensor) -> Tensor:
        self.require_scalar(elem)
        return self.alg.tensor_not(elem)

    def bool_or(self, elem1: Tensor, elem2: Tensor) -> Tensor:
        self.require_scalar(elem1, elem2)
        return self.alg.tensor_or(elem1, elem2)

    def bool_xor(self, elem1: Tensor, elem2: Tensor) -> Tensor:
        self.require_scalar(elem1, elem2)
        return self.alg.tensor_xor(elem1, elem2)

    def bool_and(self, elem1: Tensor, elem2: Tensor) -> Tensor:
        self.require_scalar(elem1, elem2)
        return self.alg.tensor_and(elem1, elem2)

    def bool_equ(self, elem1: Tensor, elem2: Tensor) -> Tensor:
        self.require_scalar(elem1, elem2)
        return self.alg.tensor_equ(elem1, elem2)

    def bool_imp(self, elem1: Tensor, elem2: Tensor) -> Tensor:
        self.require_scalar(elem1, elem2)
        return self.alg.tensor_imp(elem1, elem2)

    # Binary relations

    def binrel_lift(self, elem: bool) -> Tensor:
        return self.alg.tensor_create(self.new_shape(2), lambda _: elem)

    def binrel_diag(self) -> Tensor:
        return self.alg.tensor_create(self.new_shape(2), lambda c: c[0] == c[1])

    def binrel_comp(self, elem: Tensor) -> Tensor:
        self.require_binary_rel(elem)
        return self.alg.tensor_not(elem)

    def binrel_meet(self, elem1: Tensor, elem2: Tensor) -> Tensor:
        self.require_binary_rel(elem1, elem2)
        return self.alg.tensor_and(elem1, elem2)

    def binrel_join(self, elem1: Tensor, elem2: Tensor) -> Tensor:
        self.require_binary_rel(elem1, elem2)
        return self.alg.tensor_or(elem1, elem2)

    def binrel_inv(self, elem: Tensor) -> Tensor:
        self.require_binary_rel(elem)
        return self.alg.tensor_polymer(elem, self.new_shape(2), [1, 0])

    def binrel_circ(self, elem1: Tensor, elem2: Tensor) -> Tensor:
        self.require_binary_rel(elem1, elem2)
        elem1 = self.alg.tensor_polymer(elem1, self.new_shape(3), [1, 0])
        elem2 = self.alg.tensor_polymer(elem2, self.new_shape(3), [0, 2])
        elem3 = self.alg.tensor_and(elem1, elem2)
        return self.alg.tensor_any(elem3)

    def binrel_equals(self, elem1: Tensor, elem2: Tensor) -> Tensor:
        """Scalar telling whether the two relations are equal."""
        self.require_binary_rel(elem1, elem2)
        return self._forall(self.alg.tensor_equ(elem1, elem2))

    def binrel_leq(self, elem1: Tensor, elem2: Tensor) -> Tensor:
        """Scalar telling whether the first relation is contained in the second."""
        self.require_binary_rel(elem1, elem2)
        return self._forall(self.alg.tensor_imp(elem1, elem2))

    def _forall(self, elem: Tensor) -> Tensor:
        while self.alg.shape(elem).rank > 0:
            elem = self.alg.tensor_all(elem)
        return elem

    # Relations of arbitrary arity

    def rel_lift(self, arity: int, elem: bool) -> Tensor:
        """Returns the empty or total relation of the given arity."""
        return self.alg.tensor_create(self.new_shape(arity), lambda _: elem)

    def rel_comp(self, elem: Tensor) -> Tensor:
        self.require_relation(elem)
        return self.alg.tensor_not(elem)

    def rel_meet(self, elem1: Tensor, elem2: Tensor) -> Tensor:
        self.require_relation(elem1, elem2)
        return self.alg.tensor_and(elem1, elem2)

    def rel_join(self, elem1: Tensor, elem2: Tensor) -> Tensor:
        self.require_relation(elem1, elem2)
        return self.alg.tensor_or(elem1, elem2)

    def rel_polymer(self, elem: Tensor, arity: int, mapping: Sequence[int]) -> Tensor:
        """Reindex a relation into one of the given arity; coordinate i moves to mapping[i]."""
        self.require_relation(elem)
        return self.alg.tensor_polymer(elem, self.new_shape(arity), mapping)

    def rel_exists(self, elem: Tensor) -> Tensor:
        """Projects away the first coordinate of a relation."""
        arity = self.require_relation(elem)
        if arity == 0:
            raise ShapeMismatchError("cannot project a nullary relation", expected=1, actual=0)
        return self.alg.tensor_any(elem)
