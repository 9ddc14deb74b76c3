"""Core algebraic components: capability hierarchy, Boolean and bit-vector algebras."""

from .domain import (
    AdditiveGroup,
    BooleanAlgebra,
    BoundedPartialOrder,
    ClassicalDomain,
    DirectedGraph,
    Domain,
    Field,
    Lattice,
    Monoid,
    PartialOrder,
    Ring,
    Semigroup,
    UnitaryRing,
)
from .two_element import TWO_ELEMENT_ALG, TwoElementAlg
from .boolalg import Boolean, BoolAlg, DomainBoolAlg
from .genvec import GenVec
from .boolvec import BitVectorAlg, BoolVecAlg, Checker, dry_run

__all__ = [
    "AdditiveGroup",
    "BooleanAlgebra",
    "BoundedPartialOrder",
    "ClassicalDomain",
    "DirectedGraph",
    "Domain",
    "Field",
    "Lattice",
    "Monoid",
    "PartialOrder",
    "Ring",
    "Semigroup",
    "UnitaryRing",
    "TWO_ELEMENT_ALG",
    "TwoElementAlg",
    "Boolean",
    "BoolAlg",
    "DomainBoolAlg",
    "GenVec",
    "BitVectorAlg",
    "BoolVecAlg",
    "Checker",
    "dry_run",
]
