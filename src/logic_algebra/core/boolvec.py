"""
Bit-Vector Arithmetic

Fixed-length vectors of Boolean-algebra elements and two's-complement
arithmetic on them.

Bit order:
    bit i of num_lift(width, value) is (value >> i) & 1
    i.e. the least significant bit comes first.

Arithmetic (ripple carry):
    num_add: carry_0 = 0,  s_i = ad3(a_i, b_i, c_i),      c_{i+1} = maj(a_i, b_i, c_i)
    num_sub: carry_0 = 1,  s_i = ad3(a_i, ~b_i, c_i),     c_{i+1} = maj(a_i, ~b_i, c_i)
    num_neg: carry_0 = 1,  s_i = add(~a_i, c_i),          c_{i+1} = and(~a_i, c_i)

Results wrap modulo 2^width, matching hardware integers. The same
operation surface is offered by ``Checker`` whose elements are only lengths,
so that a construction can be dry-run before it touches an expensive
(e.g. solver-backed) algebra.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Sequence

from ..errors import LengthMismatchError
from .boolalg import BoolAlg
from .genvec import GenVec

logger = logging.getLogger(__name__)

Vector = Any


def _check_lengths(len1: int, len2: int) -> None:
    if len1 != len2:
        raise LengthMismatchError(
            f"bit-vector length mismatch: {len1} != {len2}", expected=len1, actual=len2
        )


class BoolVecAlg(ABC):
    """Abstract Boolean array algebra."""

    @abstractmethod
    def len(self, elem: Vector) -> int:
        """Returns the length of the vector."""

    @abstractmethod
    def bit_lift(self, bits: Sequence[bool]) -> Vector:
        """Creates a vector holding the given truth values."""

    @abstractmethod
    def bit_not(self, elem: Vector) -> Vector:
        """Returns the element wise negation of the vector."""

    @abstractmethod
    def bit_or(self, elem1: Vector, elem2: Vector) -> Vector:
        """Returns the element wise disjunction."""

    @abstractmethod
    def bit_and(self, elem1: Vector, elem2: Vector) -> Vector:
        """Returns the element wise conjunction."""

    @abstractmethod
    def bit_add(self, elem1: Vector, elem2: Vector) -> Vector:
        """Returns the element wise exclusive or."""

    @abstractmethod
    def bit_equ(self, elem1: Vector, elem2: Vector) -> Vector:
        """Returns the element wise logical equivalence."""

    @abstractmethod
    def bit_leq(self, elem1: Vector, elem2: Vector) -> Vector:
        """Returns the element wise logical implication."""

    @abstractmethod
    def concat(self, *elems: Vector) -> Vector:
        """Concatenates the given vectors into a single one."""

    @abstractmethod
    def num_lift(self, width: int, value: int) -> Vector:
        """Creates a vector of the given width encoding ``value`` in two's complement."""

    @abstractmethod
    def num_neg(self, elem: Vector) -> Vector:
        """Returns the two's complement negative of the binary number."""

    @abstractmethod
    def num_add(self, elem1: Vector, elem2: Vector) -> Vector:
        """Returns the sum of two binary numbers of the same length."""

    @abstractmethod
    def num_sub(self, elem1: Vector, elem2: Vector) -> Vector:
        """Returns the difference of two binary numbers of the same length."""


class Checker(BoolVecAlg):
    """
    Shape-checking mode: every vector is represented by its length.

    Runs the same construction as a real algebra, raising LengthMismatchError
    wherever the real one would, without allocating anything.
    """

    def len(self, elem: int) -> int:
        return elem

    def bit_lift(self, bits: Sequence[bool]) -> int:
        return len(bits)

    def bit_not(self, elem: int) -> int:
        return elem

    def _binary(self, elem1: int, elem2: int) -> int:
        _check_lengths(elem1, elem2)
        return elem1

    def bit_or(self, elem1: int, elem2: int) -> int:
        return self._binary(elem1, elem2)

    def bit_and(self, elem1: int, elem2: int) -> int:
        return self._binary(elem1, elem2)

    def bit_add(self, elem1: int, elem2: int) -> int:
        return self._binary(elem1, elem2)

    def bit_equ(self, elem1: int, elem2: int) -> int:
        return self._binary(elem1, elem2)

    def bit_leq(self, elem1: int, elem2: int) -> int:
        return self._binary(elem1, elem2)

    def concat(self, *elems: int) -> int:
        return sum(elems)

    def num_lift(self, width: int, value: int) -> int:
        return width

    def num_neg(self, elem: int) -> int:
        return elem

    def num_add(self, elem1: int, elem2: int) -> int:
        return self._binary(elem1, elem2)

    def num_sub(self, elem1: int, elem2: int) -> int:
        return self._binary(elem1, elem2)


class BitVectorAlg(BoolVecAlg):
    """
    Bit-vector algebra generic over a Boolean-algebra capability.

    Vectors are GenVec instances of ``alg`` elements. All mutable state
    (e.g. fresh solver variables) lives in ``alg``; the vectors returned are
    never modified afterwards.
    """

    def __init__(self, alg: BoolAlg):
        self.alg = alg

    def len(self, elem: GenVec) -> int:
        return len(elem)

    def bit_lift(self, bits: Sequence[bool]) -> GenVec:
        return GenVec.from_fn(len(bits), lambda i: self.alg.bool_lift(bool(bits[i])))

    def bit_not(self, elem: GenVec) -> GenVec:
        return GenVec.from_fn(len(elem), lambda i: self.alg.bool_not(elem.get(i)))

    def _zip(self, elem1: GenVec, elem2: GenVec, op: Callable[[Any, Any], Any]) -> GenVec:
        _check_lengths(len(elem1), len(elem2))
        return GenVec.from_fn(len(elem1), lambda i: op(elem1.get(i), elem2.get(i)))

    def bit_or(self, elem1: GenVec, elem2: GenVec) -> GenVec:
        return self._zip(elem1, elem2, self.alg.bool_or)

    def bit_and(self, elem1: GenVec, elem2: GenVec) -> GenVec:
        return self._zip(elem1, elem2, self.alg.bool_and)

    def bit_add(self, elem1: GenVec, elem2: GenVec) -> GenVec:
        return self._zip(elem1, elem2, self.alg.bool_add)

    def bit_equ(self, elem1: GenVec, elem2: GenVec) -> GenVec:
        return self._zip(elem1, elem2, self.alg.bool_equ)

    def bit_leq(self, elem1: GenVec, elem2: GenVec) -> GenVec:
        return self._zip(elem1, elem2, self.alg.bool_leq)

    def concat(self, *elems: GenVec) -> GenVec:
        result = GenVec.with_capacity(sum(len(elem) for elem in elems))
        for elem in elems:
            result.extend(elem)
        return result

    def num_lift(self, width: int, value: int) -> GenVec:
        return GenVec.from_fn(width, lambda i: self.alg.bool_lift((value >> i) & 1 != 0))

    def num_neg(self, elem: GenVec) -> GenVec:
        carry = self.alg.bool_unit()
        result = GenVec.with_capacity(len(elem))
        for i in range(len(elem)):
            not_elem = self.alg.bool_not(elem.get(i))
            result.push(self.alg.bool_add(not_elem, carry))
            carry = self.alg.bool_and(not_elem, carry)
        return result

    def num_add(self, elem1: GenVec, elem2: GenVec) -> GenVec:
        _check_lengths(len(elem1), len(elem2))
        carry = self.alg.bool_zero()
        result = GenVec.with_capacity(len(elem1))
        for i in range(len(elem1)):
            result.push(self.alg.bool_ad3(elem1.get(i), elem2.get(i), carry))
            carry = self.alg.bool_maj(elem1.get(i), elem2.get(i), carry)
        return result

    def num_sub(self, elem1: GenVec, elem2: GenVec) -> GenVec:
        _check_lengths(len(elem1), len(elem2))
        carry = self.alg.bool_unit()
        result = GenVec.with_capacity(len(elem1))
        for i in range(len(elem1)):
            not_elem2 = self.alg.bool_not(elem2.get(i))
            result.push(self.alg.bool_ad3(elem1.get(i), not_elem2, carry))
            carry = self.alg.bool_maj(elem1.get(i), not_elem2, carry)
        return result


def dry_run(build: Callable[..., Vector], alg: BoolVecAlg, *operands: Vector) -> Vector:
    """
    Run ``build(vecalg, *operands)`` on a Checker first, then on ``alg``.

    The checker pass sees only operand lengths, so a length error surfaces
    before ``alg`` has been mutated.

    Args:
        build: Construction taking a BoolVecAlg followed by the operands
        alg: The real algebra
        *operands: Vectors of ``alg``

    Returns:
        The result of the real construction
    """
    checker = Checker()
    width = build(checker, *(alg.len(op) for op in operands))
    logger.debug("Dry run passed, result width %d", width)
    return build(alg, *operands)
