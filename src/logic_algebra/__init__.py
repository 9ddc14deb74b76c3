"""
Logic Algebra: Bit-Vectors and Relations over Pluggable Boolean Algebras

Mathematical foundation:
    - Algebras form a capability hierarchy (lattice, Boolean algebra, field)
    - Integers are two's-complement bit-vectors of algebra elements
    - Relations are tensors, composition is polymer + and + exists

The same constructions run on plain truth values or on any symbolic
algebra, e.g. one that emits constraints for a solver.
"""

__version__ = "0.1.0"
