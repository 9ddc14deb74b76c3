"""Contract-violation exceptions raised by the algebra layers."""

from typing import Any, Optional


class ShapeMismatchError(ValueError):
    """Raised when a tensor operation receives operands of the wrong shape.

    This covers every precondition the relation and tensor layers check:
    - Pointwise operands of different shapes
    - Relations that are not square over the universe
    - Scalars of nonzero rank
    - Polymer mappings that do not fit the old or new shape

    These are always programmer errors; nothing in the package catches them.

    Attributes:
        message: Description of the violated precondition
        expected: The shape (or length) that was required (optional)
        actual: The shape (or length) that was received (optional)
    """

    def __init__(
        self, message: str, expected: Optional[Any] = None, actual: Optional[Any] = None
    ) -> None:
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class LengthMismatchError(ShapeMismatchError):
    """Raised when a binary bit-vector operation gets vectors of different lengths."""


class MembershipError(ValueError):
    """Raised when an operand is not an element of its claimed algebra.

    Only raised when membership checking is enabled (``engine.check_membership``),
    otherwise passing a foreign element is undefined behaviour.

    Attributes:
        message: Description of the failure
        domain: The domain that rejected the element
        elem: The rejected element
    """

    def __init__(self, message: str, domain: Any = None, elem: Any = None) -> None:
        super().__init__(message)
        self.domain = domain
        self.elem = elem
