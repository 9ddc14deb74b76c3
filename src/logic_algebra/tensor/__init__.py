"""Tensor capability and its backends."""

from .shape import Shape
from .base import TensorAlg
from .dense import DenseTensorAlg
from .lifted import LiftedTensorAlg

__all__ = ["Shape", "TensorAlg", "DenseTensorAlg", "LiftedTensorAlg"]
