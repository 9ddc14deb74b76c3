"""Relation algebra over a fixed finite universe."""

from .universe import BinaryRelAlg, Universe
from .rules import Rule, RuleEngine

__all__ = ["BinaryRelAlg", "Universe", "Rule", "RuleEngine"]
