"""
Law Checking for the Algebra Layers

Verify on random concrete inputs that the generic constructions obey the
laws they are meant to realize.

Relation laws (R, S, T random binary relations):
    inv(diag) == diag
    comp(comp(R)) == R
    join(R, S) == comp(meet(comp R, comp S))
    circ(circ(R, S), T) == circ(R, circ(S, T))
    circ(R, diag) == R == circ(diag, R)

Arithmetic laws (a, b random w-bit integers):
    num_add(a, b) == num_lift(w, a + b)
    num_sub(a, b) == num_lift(w, a - b)
    num_neg(a)    == num_lift(w, -a)
"""

import logging
import random
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

import torch

from ..core.boolalg import Boolean
from ..core.boolvec import BitVectorAlg
from ..relation.universe import BinaryRelAlg, Universe
from ..tensor.dense import DenseTensorAlg
from ..utils.bits import to_unsigned, wrap

logger = logging.getLogger(__name__)


@dataclass
class LawResult:
    """Result of checking one law."""

    law_name: str
    trials: int
    failures: int

    @property
    def holds(self) -> bool:
        return self.failures == 0


class LawChecker:
    """
    Check algebraic laws on randomly drawn concrete elements.

    Supports:
        - Relation-algebra laws over a DenseTensorAlg universe
        - Two's-complement arithmetic laws against Python integers
    """

    def __init__(
        self,
        size: int = 4,
        width: int = 8,
        trials: int = 20,
        density: float = 0.3,
        seed: int = 42,
        device: Optional[torch.device] = None,
    ):
        if width < 1:
            raise ValueError(f"width must be positive, got {width}")
        self.universe = Universe(DenseTensorAlg(device), size)
        self.vectors = BitVectorAlg(Boolean())
        self.width = width
        self.trials = trials
        self.density = density
        self.generator = torch.Generator().manual_seed(seed)
        self.rng = random.Random(seed)

    def random_relation(self) -> torch.Tensor:
        """Draw a binary relation with each pair present with probability ``density``."""
        size = self.universe.size
        data = torch.rand((size, size), generator=self.generator) < self.density
        return self.universe.alg.from_tensor(data)

    def _equal(self, elem1: torch.Tensor, elem2: torch.Tensor) -> bool:
        return self.universe.truth_value(self.universe.binrel_equals(elem1, elem2))

    def _count(self, law: Callable[[], bool]) -> int:
        return sum(1 for _ in range(self.trials) if not law())

    def check_relation_laws(self) -> List[LawResult]:
        """
        Check the relation-algebra laws.

        Returns:
            List of LawResult, one per law
        """
        u = self.universe
        diag = u.binrel_diag()

        def de_morgan() -> bool:
            r, s = self.random_relation(), self.random_relation()
            return self._equal(u.binrel_join(r, s), BinaryRelAlg.binrel_join(u, r, s))

        def associativity() -> bool:
            r, s, t = self.random_relation(), self.random_relation(), self.random_relation()
            left = u.binrel_circ(u.binrel_circ(r, s), t)
            right = u.binrel_circ(r, u.binrel_circ(s, t))
            return self._equal(left, right)

        def identity() -> bool:
            r = self.random_relation()
            return self._equal(u.binrel_circ(r, diag), r) and self._equal(u.binrel_circ(diag, r), r)

        def double_complement() -> bool:
            r = self.random_relation()
            return self._equal(u.binrel_comp(u.binrel_comp(r)), r)

        laws: Dict[str, Callable[[], bool]] = {
            "inv(diag) == diag": lambda: self._equal(u.binrel_inv(diag), diag),
            "comp(comp(R)) == R": double_complement,
            "join == De Morgan join": de_morgan,
            "circ is associative": associativity,
            "diag is the unit of circ": identity,
        }
        return self._run(laws)

    def check_arithmetic_laws(self) -> List[LawResult]:
        """
        Check two's-complement arithmetic against integer arithmetic.

        Returns:
            List of LawResult, one per operation
        """
        w = self.width
        vec = self.vectors

        def draw() -> int:
            return self.rng.randrange(-(1 << (w - 1)), 1 << (w - 1))

        def binary(op: Callable, expected: Callable[[int, int], int]) -> Callable[[], bool]:
            def law() -> bool:
                a, b = draw(), draw()
                result = op(vec.num_lift(w, a), vec.num_lift(w, b))
                return to_unsigned(result) == wrap(expected(a, b), w)

            return law

        def negation() -> bool:
            a = draw()
            return to_unsigned(vec.num_neg(vec.num_lift(w, a))) == wrap(-a, w)

        laws: Dict[str, Callable[[], bool]] = {
            "num_add matches +": binary(vec.num_add, lambda a, b: a + b),
            "num_sub matches -": binary(vec.num_sub, lambda a, b: a - b),
            "num_neg matches unary -": negation,
        }
        return self._run(laws)

    def check_all(self) -> List[LawResult]:
        return self.check_relation_laws() + self.check_arithmetic_laws()

    def _run(self, laws: Dict[str, Callable[[], bool]]) -> List[LawResult]:
        results = []
        for name, law in laws.items():
            result = LawResult(law_name=name, trials=self.trials, failures=self._count(law))
            logger.info("%s: %d/%d failures", name, result.failures, result.trials)
            results.append(result)
        return results

    def summary(self, results: List[LawResult]) -> str:
        """Generate summary of law checks."""
        lines = ["=" * 60, " Algebraic Law Summary", "=" * 60, ""]

        for r in results:
            status = "OK" if r.holds else "VIOLATED"
            lines.append(f"Law: {r.law_name}")
            lines.append(f"  Failures: {r.failures}/{r.trials} [{status}]")
            lines.append("")

        violated = sum(1 for r in results if not r.holds)
        lines.append(f"Violated laws: {violated}/{len(results)}")
        lines.append("=" * 60)

        return "\n".join(lines)
