"""
Dense Boolean Tensors over torch

Concrete tensor algebra whose elements are ``torch.bool`` tensors.

Polymer via advanced indexing:
    grids = meshgrid(arange(n_0), ..., arange(n_{l-1}))
    new   = old[grids[a_0], ..., grids[a_{k-1}]]

Existential reduction:
    any(T) = T.any(dim=0)
"""

import logging
from typing import Callable, Optional, Sequence, Tuple, Union

import torch

from ..config import get_config_value
from .base import TensorAlg
from .shape import Shape

logger = logging.getLogger(__name__)


class DenseTensorAlg(TensorAlg):
    """
    Tensor algebra of concrete truth values stored in torch tensors.

    Serves as the reference backend for the relation algebra and as the
    oracle for symbolic backends.
    """

    def __init__(self, device: Optional[Union[str, torch.device]] = None):
        if device is None:
            device = get_config_value(["engine", "device"])
        if device is None:
            device = torch.device("cuda" if torch.cuda.is_available() else "cpu")
        self.device = torch.device(device)
        logger.debug("Dense tensor algebra on %s", self.device)

    def shape(self, elem: torch.Tensor) -> Shape:
        return Shape(elem.shape)

    def tensor_create(self, shape: Shape, fn: Callable[[Tuple[int, ...]], bool]) -> torch.Tensor:
        values = [bool(fn(coord)) for coord in shape.positions()]
        return torch.tensor(values, dtype=torch.bool, device=self.device).reshape(shape.sizes)

    def from_tensor(self, data: torch.Tensor) -> torch.Tensor:
        """Import an existing tensor, casting it to bool on this device."""
        return data.to(device=self.device, dtype=torch.bool)

    def tensor_not(self, elem: torch.Tensor) -> torch.Tensor:
        return torch.logical_not(elem)

    def tensor_or(self, elem1: torch.Tensor, elem2: torch.Tensor) -> torch.Tensor:
        self.check_same_shape(elem1, elem2)
        return torch.logical_or(elem1, elem2)

    def tensor_and(self, elem1: torch.Tensor, elem2: torch.Tensor) -> torch.Tensor:
        self.check_same_shape(elem1, elem2)
        return torch.logical_and(elem1, elem2)

    def tensor_xor(self, elem1: torch.Tensor, elem2: torch.Tensor) -> torch.Tensor:
        self.check_same_shape(elem1, elem2)
        return torch.logical_xor(elem1, elem2)

    def tensor_equ(self, elem1: torch.Tensor, elem2: torch.Tensor) -> torch.Tensor:
        self.check_same_shape(elem1, elem2)
        return torch.eq(elem1, elem2)

    def tensor_imp(self, elem1: torch.Tensor, elem2: torch.Tensor) -> torch.Tensor:
        self.check_same_shape(elem1, elem2)
        return torch.logical_or(torch.logical_not(elem1), elem2)

    def tensor_polymer(
        self, elem: torch.Tensor, shape: Shape, mapping: Sequence[int]
    ) -> torch.Tensor:
        shape.check_polymer(self.shape(elem), mapping)

        if not mapping:
            # rank-0 source, pure broadcast
            return torch.full(shape.sizes, bool(elem.item()), dtype=torch.bool, device=elem.device)

        grids = torch.meshgrid(
            *(torch.arange(n, device=elem.device) for n in shape.sizes), indexing="ij"
        )
        return elem[tuple(grids[axis] for axis in mapping)]

    def tensor_any(self, elem: torch.Tensor) -> torch.Tensor:
        self.check_reducible(elem)
        return elem.any(dim=0)

    def tensor_all(self, elem: torch.Tensor) -> torch.Tensor:
        self.check_reducible(elem)
        return elem.all(dim=0)
