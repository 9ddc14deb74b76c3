"""
Rule Engine over a Relation Universe

Mathematical basis:
    Datalog rule: Head(x,z) <- Body1(x,y), Body2(y,z)
    Relation form: H = H join (B1 circ B2)

Rule types:
    1. Composition: R3(x,z) <- R1(x,y), R2(y,z)
       R3 = R1 circ R2 circ ...

    2. Inverse: R2(y,x) <- R1(x,y)
       R2 = inv(R1)

    3. Implication: R2(x,y) <- R1(x,y)
       R2 = R1

Forward chaining:
    Repeatedly join every derived relation into its head until no head
    changes. Change detection reads the truth value of ``binrel_equals``, so
    it needs concrete scalars (DenseTensorAlg, or LiftedTensorAlg over the
    concrete Boolean algebra). Over a symbolic algebra it raises TypeError;
    transitive_closure has no such restriction.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from ..tensor.base import Tensor
from .universe import Universe

logger = logging.getLogger(__name__)

RULE_TYPES = ("composition", "inverse", "implication")


@dataclass
class Rule:
    """
    A logical rule over named binary relations.

    head: Name of head relation
    body: List of body relation names
    rule_type: 'composition', 'inverse', 'implication'
    """

    head: str
    body: List[str]
    rule_type: str = "composition"

    def __post_init__(self):
        if self.rule_type not in RULE_TYPES:
            raise ValueError(f"Unknown rule type: {self.rule_type}")
        if not self.body:
            raise ValueError(f"Rule for {self.head} has an empty body")
        if self.rule_type != "composition" and len(self.body) != 1:
            raise ValueError(f"{self.rule_type} rule for {self.head} needs exactly one body relation")

    def __str__(self):
        if self.rule_type == "inverse":
            return f"{self.head}(y,x) <- {self.body[0]}(x,y)"
        if self.rule_type == "implication":
            return f"{self.head}(x,y) <- {self.body[0]}(x,y)"
        body_str = ", ".join(self.body)
        return f"{self.head}(x,z) <- {body_str}"


class RuleEngine:
    """
    Engine for applying logical rules as relation-algebra operations.

    Supports:
        - Rule composition (circ)
        - Rule inverse (inv)
        - Forward chaining to fixpoint
        - Transitive closure
    """

    def __init__(self, universe: Universe):
        self.universe = universe
        self.rules: List[Rule] = []
        self.relations: Dict[str, Tensor] = {}

    def add_rule(self, head: str, body: List[str], rule_type: str = "composition"):
        """
        Add a rule to the engine.

        Args:
            head: Head relation name
            body: List of body relation names
            rule_type: Type of rule ('composition', 'inverse', 'implication')
        """
        self.rules.append(Rule(head=head, body=list(body), rule_type=rule_type))

    def set_relation(self, name: str, relation: Tensor):
        """Set the tensor representation of a relation."""
        self.universe.require_binary_rel(relation)
        self.relations[name] = relation

    def apply_rule(self, rule: Rule) -> Optional[Tensor]:
        """
        Apply a single rule to derive the head relation.

        Returns:
            Derived relation, or None if a body relation is missing
        """
        if any(rel not in self.relations for rel in rule.body):
            return None

        if rule.rule_type == "composition":
            result = self.relations[rule.body[0]]
            for rel in rule.body[1:]:
                result = self.universe.binrel_circ(result, self.relations[rel])
            return result

        if rule.rule_type == "inverse":
            return self.universe.binrel_inv(self.relations[rule.body[0]])

        return self.relations[rule.body[0]]

    def forward_chain(self, max_iterations: int = 100) -> int:
        """
        Forward chaining: apply all rules until fixpoint.

        Args:
            max_iterations: Maximum iterations

        Returns:
            Number of iterations until convergence (max_iterations if none)
        """
        for iteration in range(max_iterations):
            changed = False

            for rule in self.rules:
                derived = self.apply_rule(rule)
                if derived is None:
                    continue

                old = self.relations.get(rule.head)
                if old is None:
                    self.relations[rule.head] = derived
                    changed = True
                    continue

                combined = self.universe.binrel_join(old, derived)
                if not self.universe.truth_value(self.universe.binrel_equals(old, combined)):
                    self.relations[rule.head] = combined
                    changed = True

            logger.debug("Forward chaining iteration %d, changed=%s", iteration + 1, changed)
            if not changed:
                return iteration + 1

        logger.warning("Forward chaining did not converge in %d iterations", max_iterations)
        return max_iterations

    def transitive_closure(self, relation: Tensor, reflexive: bool = False) -> Tensor:
        """
        Smallest transitive relation containing ``relation``.

        Uses repeated squaring, R <- R join (R circ R), which reaches the
        fixpoint after at most ceil(log2(size)) + 1 rounds; the round count
        does not depend on concrete values, so symbolic backends work too.
        """
        universe = self.universe
        result = relation
        if reflexive:
            result = universe.binrel_join(result, universe.binrel_diag())
        rounds = max(universe.size - 1, 0).bit_length() + 1
        for _ in range(rounds):
            result = universe.binrel_join(result, universe.binrel_circ(result, result))
        return result
