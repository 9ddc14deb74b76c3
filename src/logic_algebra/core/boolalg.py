"""
Boolean-Algebra Capability

The scalar operation set consumed by bit-vector arithmetic and provided by
relation universes. Elements are opaque: plain truth values for the concrete
algebra, rank-0 tensors for a universe, or formula handles of a constraint
solver. Implementations may allocate solver state on every call, so an
algebra instance is a mutable context owned by one construction at a time.

Only lift, not, or and and are required; everything else has a default
derivation that backends may override with a cheaper primitive:

    xor(a, b)    = (a or b) and not (a and b)
    equ(a, b)    = not xor(a, b)
    imp(a, b)    = not a or b
    ad3(a, b, c) = xor(xor(a, b), c)                 full-adder sum
    maj(a, b, c) = (a and b) or (a and c) or (b and c) full-adder carry
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..config import get_flag
from .domain import BooleanAlgebra, Elem
from .two_element import TWO_ELEMENT_ALG


class BoolAlg(ABC):
    """Abstract Boolean-algebra capability."""

    @abstractmethod
    def bool_lift(self, elem: bool) -> Elem:
        """Returns the constant element for a truth value."""

    @abstractmethod
    def bool_not(self, elem: Elem) -> Elem:
        """Returns the negation of the element."""

    @abstractmethod
    def bool_or(self, elem1: Elem, elem2: Elem) -> Elem:
        """Returns the disjunction of the elements."""

    @abstractmethod
    def bool_and(self, elem1: Elem, elem2: Elem) -> Elem:
        """Returns the conjunction of the elements."""

    def bool_xor(self, elem1: Elem, elem2: Elem) -> Elem:
        either = self.bool_or(elem1, elem2)
        both = self.bool_and(elem1, elem2)
        return self.bool_and(either, self.bool_not(both))

    def bool_equ(self, elem1: Elem, elem2: Elem) -> Elem:
        return self.bool_not(self.bool_xor(elem1, elem2))

    def bool_imp(self, elem1: Elem, elem2: Elem) -> Elem:
        return self.bool_or(self.bool_not(elem1), elem2)

    def bool_add(self, elem1: Elem, elem2: Elem) -> Elem:
        """Addition in GF(2), that is exclusive or."""
        return self.bool_xor(elem1, elem2)

    def bool_leq(self, elem1: Elem, elem2: Elem) -> Elem:
        """Order of the two-element chain, that is implication."""
        return self.bool_imp(elem1, elem2)

    def bool_zero(self) -> Elem:
        return self.bool_lift(False)

    def bool_unit(self) -> Elem:
        return self.bool_lift(True)

    def bool_ad3(self, elem1: Elem, elem2: Elem, elem3: Elem) -> Elem:
        """Sum output of a full adder."""
        return self.bool_add(self.bool_add(elem1, elem2), elem3)

    def bool_maj(self, elem1: Elem, elem2: Elem, elem3: Elem) -> Elem:
        """Carry output of a full adder."""
        tmp1 = self.bool_and(elem1, elem2)
        tmp2 = self.bool_and(elem1, elem3)
        tmp3 = self.bool_and(elem2, elem3)
        return self.bool_or(self.bool_or(tmp1, tmp2), tmp3)


class DomainBoolAlg(BoolAlg):
    """
    Boolean-algebra capability backed by a BooleanAlgebra domain.

    Every scalar operation is delegated to the domain. With membership
    checking enabled, operands are verified with ``Domain.check_member``
    before use and a MembershipError is raised for foreign elements.
    """

    def __init__(self, domain: BooleanAlgebra, check_membership: Optional[bool] = None):
        self.domain = domain
        if check_membership is None:
            check_membership = get_flag(["engine", "check_membership"])
        self.check_membership = check_membership

    def _checked(self, *elems: Elem) -> None:
        if self.check_membership:
            for elem in elems:
                self.domain.check_member(elem)

    def bool_lift(self, elem: bool) -> Elem:
        return self.domain.top() if elem else self.domain.bot()

    def bool_not(self, elem: Elem) -> Elem:
        self._checked(elem)
        return self.domain.not_(elem)

    def bool_or(self, elem1: Elem, elem2: Elem) -> Elem:
        self._checked(elem1, elem2)
        return self.domain.join(elem1, elem2)

    def bool_and(self, elem1: Elem, elem2: Elem) -> Elem:
        self._checked(elem1, elem2)
        return self.domain.meet(elem1, elem2)

    def bool_xor(self, elem1: Elem, elem2: Elem) -> Elem:
        self._checked(elem1, elem2)
        return self.domain.xor(elem1, elem2)

    def bool_equ(self, elem1: Elem, elem2: Elem) -> Elem:
        self._checked(elem1, elem2)
        return self.domain.equ(elem1, elem2)

    def bool_imp(self, elem1: Elem, elem2: Elem) -> Elem:
        self._checked(elem1, elem2)
        return self.domain.imp(elem1, elem2)


class Boolean(DomainBoolAlg):
    """The concrete Boolean algebra of Python truth values."""

    def __init__(self, check_membership: Optional[bool] = None):
        super().__init__(TWO_ELEMENT_ALG, check_membership=check_membership)
