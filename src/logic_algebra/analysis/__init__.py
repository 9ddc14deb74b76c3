"""Analysis tools for the algebra layers."""

from .laws import LawChecker, LawResult

__all__ = ["LawChecker", "LawResult"]
