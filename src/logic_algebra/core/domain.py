"""
Capability Hierarchy of Algebraic Domains

Mathematical basis:
    Domain              membership, equality, an associated logic domain
    ClassicalDomain     logic domain is the two-element Boolean algebra
    DirectedGraph       edge(a, b)
    PartialOrder        edge is reflexive, antisymmetric, transitive
    BoundedPartialOrder bot <= x <= top
    Lattice             meet, join
    BooleanAlgebra      complemented distributive lattice

    AdditiveGroup -> Semigroup -> Monoid -> Ring -> UnitaryRing -> Field

Every predicate (contains, equals, edge) returns an element of ``logic``,
which may be the domain itself. A concrete algebra opts into exactly the
capabilities its operations satisfy by listing them as bases. The laws of
each level are checked by tests, never at runtime.
"""

from abc import ABC, abstractmethod
from typing import Any

from ..errors import MembershipError

Elem = Any


class Domain(ABC):
    """A set of elements with membership and equality predicates."""

    @property
    @abstractmethod
    def logic(self) -> "Domain":
        """The domain whose elements are the truth values of our predicates."""

    @abstractmethod
    def contains(self, elem: Elem) -> Elem:
        """Returns a logic element telling whether ``elem`` belongs to the domain."""

    @abstractmethod
    def equals(self, elem0: Elem, elem1: Elem) -> Elem:
        """Returns a logic element telling whether the two elements are equal."""

    def check_member(self, elem: Elem) -> Elem:
        """
        Raise MembershipError unless ``elem`` belongs to the domain.

        Only classical domains can decide this; for the others the predicate
        value is a symbolic element and the check is skipped.
        """
        if isinstance(self, ClassicalDomain) and not self.contains(elem):
            raise MembershipError(
                f"{elem!r} is not an element of {type(self).__name__}", domain=self, elem=elem
            )
        return elem


class ClassicalDomain(Domain):
    """A domain whose logic is the two-element Boolean algebra."""

    @property
    def logic(self) -> Domain:
        from .two_element import TWO_ELEMENT_ALG

        return TWO_ELEMENT_ALG


class DirectedGraph(Domain):
    """A domain with a binary edge predicate."""

    @abstractmethod
    def edge(self, elem0: Elem, elem1: Elem) -> Elem:
        """Returns a logic element telling whether there is an edge from elem0 to elem1."""


class PartialOrder(DirectedGraph):
    """A directed graph whose edge relation is reflexive, antisymmetric and transitive."""


class BoundedPartialOrder(PartialOrder):
    """A partial order with a least and a largest element."""

    @abstractmethod
    def bot(self) -> Elem:
        """Returns the least element."""

    @abstractmethod
    def top(self) -> Elem:
        """Returns the largest element."""


class Lattice(BoundedPartialOrder):
    """
    A bounded lattice.

    Laws:
        meet, join are idempotent, commutative and associative
        meet(x, join(x, y)) == x == join(x, meet(x, y))
        meet(x, top) == x, join(x, bot) == x
    """

    @abstractmethod
    def meet(self, elem0: Elem, elem1: Elem) -> Elem:
        """Returns the greatest lower bound."""

    @abstractmethod
    def join(self, elem0: Elem, elem1: Elem) -> Elem:
        """Returns the least upper bound."""


class BooleanAlgebra(Lattice):
    """
    A complemented distributive lattice.

    The default implementations derive xor, imp and equ from the lattice
    operations and the complement; concrete algebras may override them.
    """

    @abstractmethod
    def not_(self, elem: Elem) -> Elem:
        """Returns the complement; must be an involution."""

    def imp(self, elem0: Elem, elem1: Elem) -> Elem:
        return self.join(self.not_(elem0), elem1)

    def equ(self, elem0: Elem, elem1: Elem) -> Elem:
        return self.meet(self.imp(elem0, elem1), self.imp(elem1, elem0))

    def xor(self, elem0: Elem, elem1: Elem) -> Elem:
        return self.not_(self.equ(elem0, elem1))


class AdditiveGroup(Domain):
    """A commutative group written additively."""

    @abstractmethod
    def zero(self) -> Elem:
        """Returns the additive identity."""

    @abstractmethod
    def neg(self, elem: Elem) -> Elem:
        """Returns the additive inverse."""

    @abstractmethod
    def add(self, elem0: Elem, elem1: Elem) -> Elem:
        """Returns the sum."""

    def sub(self, elem0: Elem, elem1: Elem) -> Elem:
        return self.add(elem0, self.neg(elem1))


class Semigroup(Domain):
    """A domain with an associative multiplication."""

    @abstractmethod
    def mul(self, elem0: Elem, elem1: Elem) -> Elem:
        """Returns the product."""


class Monoid(Semigroup):
    """A semigroup with a multiplicative identity."""

    @abstractmethod
    def unit(self) -> Elem:
        """Returns the multiplicative identity."""


class Ring(AdditiveGroup, Semigroup):
    """Multiplication distributes over addition."""


class UnitaryRing(Ring, Monoid):
    """A ring with a multiplicative identity."""


class Field(UnitaryRing):
    """A commutative unitary ring where every nonzero element is invertible."""

    @abstractmethod
    def inv(self, elem: Elem) -> Elem:
        """Returns the multiplicative inverse of a nonzero element."""

    def div(self, elem0: Elem, elem1: Elem) -> Elem:
        return self.mul(elem0, self.inv(elem1))
