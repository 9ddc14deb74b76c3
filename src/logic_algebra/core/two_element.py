"""
The Two-Element Algebra

The Boolean algebra {False, True}, which is at the same time the field
GF(2) and a two-element chain:

    meet = and      join = or      bot = False    top = True
    add  = xor      mul  = and     neg(x) = x     inv(x) = x

It is its own logic domain and the default logic of every classical domain.
"""

from .domain import BooleanAlgebra, ClassicalDomain, Elem, Field


class TwoElementAlg(ClassicalDomain, BooleanAlgebra, Field):
    """The two-element Boolean algebra, which is also a field and an ordered chain."""

    @property
    def logic(self) -> "TwoElementAlg":
        return self

    def contains(self, elem: Elem) -> bool:
        return isinstance(elem, bool)

    def equals(self, elem0: bool, elem1: bool) -> bool:
        return elem0 == elem1

    def edge(self, elem0: bool, elem1: bool) -> bool:
        return elem0 <= elem1

    def bot(self) -> bool:
        return False

    def top(self) -> bool:
        return True

    def meet(self, elem0: bool, elem1: bool) -> bool:
        return elem0 and elem1

    def join(self, elem0: bool, elem1: bool) -> bool:
        return elem0 or elem1

    def not_(self, elem: bool) -> bool:
        return not elem

    def xor(self, elem0: bool, elem1: bool) -> bool:
        return elem0 != elem1

    def imp(self, elem0: bool, elem1: bool) -> bool:
        return elem0 <= elem1

    def equ(self, elem0: bool, elem1: bool) -> bool:
        return elem0 == elem1

    def zero(self) -> bool:
        return self.bot()

    def neg(self, elem: bool) -> bool:
        return elem

    def add(self, elem0: bool, elem1: bool) -> bool:
        return self.xor(elem0, elem1)

    def mul(self, elem0: bool, elem1: bool) -> bool:
        return self.meet(elem0, elem1)

    def unit(self) -> bool:
        return self.top()

    def inv(self, elem: bool) -> bool:
        return elem

    def __repr__(self) -> str:
        return "TWO_ELEMENT_ALG"


TWO_ELEMENT_ALG = TwoElementAlg()
