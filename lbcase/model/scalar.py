"""
Passive scalar (auxiliary transported field) configuration.

The scalar boundary vocabulary is separate from the momentum one. lbflow
exposes the two under different modules with different payloads, and a table
of one kind never accepts conditions of the other.
"""

import typing, dataclasses

from enum import Enum, unique

from .lattice import Dimensionality, VelocitySet, CollisionOperator, BGK
from .lattice import InitialField, Uniform
from .faces   import FaceBoundaryTable


@dataclasses.dataclass
class AntiBounceBack:
    value: float = 0.0


@dataclasses.dataclass
class AntiBBNoFlux:
    pass


@dataclasses.dataclass
class BBNoFlux:
    pass


@dataclasses.dataclass
class Periodic:
    pass


BoundaryCondition = typing.Union[AntiBounceBack, AntiBBNoFlux, BBNoFlux, Periodic]

BOUNDARY_CONDITIONS = {
    "AntiBounceBack": AntiBounceBack, "AntiBBNoFlux": AntiBBNoFlux,
    "BBNoFlux": BBNoFlux, "Periodic": Periodic,
}


@unique
class InnerBoundaryCondition(Enum):
    INNER_BOUNCE_BACK      = "InnerBounceBack"
    INNER_ANTI_BOUNCE_BACK = "InnerAntiBounceBack"


class ScalarBoundaryTable(FaceBoundaryTable[BoundaryCondition]):
    CONDITION_TYPES = (AntiBounceBack, AntiBBNoFlux, BBNoFlux, Periodic)
    FIELD = "passive scalar"

    @classmethod
    def default_condition(cls) -> BoundaryCondition:
        return AntiBBNoFlux()


@dataclasses.dataclass
class PassiveScalarBlock:
    scalar_name:              str               = ""
    velocity_set:             VelocitySet       = VelocitySet.D2Q9
    collision_operator:       CollisionOperator = dataclasses.field(default_factory=lambda: BGK(tau=0.9))
    initial_value:            InitialField      = dataclasses.field(default_factory=lambda: Uniform(0.0))
    boundary_conditions:      ScalarBoundaryTable = dataclasses.field(default_factory=ScalarBoundaryTable)
    inner_boundary_condition: InnerBoundaryCondition = InnerBoundaryCondition.INNER_BOUNCE_BACK

    def set_dimensionality(self, dim: Dimensionality) -> None:
        if not self.velocity_set.is_valid_for(dim):
            self.velocity_set = dim.default_velocity_set

        self.boundary_conditions.resize(dim)
