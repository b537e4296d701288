"""
The case configuration: the single owner of every block of a case.

An editor mutates a CaseConfiguration between generation runs; the render
engine only ever reads it.
"""

import typing, dataclasses

from ..common  import LBCaseException
from .lattice  import Dimensionality, NodeTypes, resize_vector
from .momentum import MomentumBlock
from .scalar   import PassiveScalarBlock


@dataclasses.dataclass
class CaseConfiguration:
    # pylint: disable=too-many-instance-attributes
    dimensionality:  Dimensionality = Dimensionality.D2
    grid:            typing.Tuple[int, ...] = (10, 10)
    node_types:      NodeTypes = NodeTypes.ONLY_FLUID_NODES
    momentum:        MomentumBlock = dataclasses.field(default_factory=MomentumBlock)
    passive_scalars: typing.List[PassiveScalarBlock] = dataclasses.field(default_factory=list)
    case_name:       str = "case_000"
    parent_dir:      str = "./cases"
    commit_hash:     str = ""

    def set_dimensionality(self, dim: Dimensionality) -> None:
        """
        Switches the case to dim and reconciles every dimension-dependent value:
        face tables grow or shrink (existing entries are kept), the grid and
        vectors are truncated or padded, and velocity sets that are not valid
        for dim fall back to dim's default.
        """
        self.dimensionality = dim
        self.grid = resize_vector(self.grid, dim, 1)

        self.momentum.set_dimensionality(dim)
        for scalar in self.passive_scalars:
            scalar.set_dimensionality(dim)

    def add_passive_scalar(self, scalar_name: str = "") -> PassiveScalarBlock:
        scalar = PassiveScalarBlock(scalar_name=scalar_name)
        scalar.set_dimensionality(self.dimensionality)
        self.passive_scalars.append(scalar)

        return scalar

    def remove_passive_scalar(self, index: int) -> PassiveScalarBlock:
        try:
            return self.passive_scalars.pop(index)
        except IndexError as exc:
            raise LBCaseException(
                f"No passive scalar at index {index} (the case has {len(self.passive_scalars)})."
            ) from exc

    @property
    def has_revision_pin(self) -> bool:
        return len(self.commit_hash.strip()) > 0
