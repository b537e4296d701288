"""
Momentum (primary flow field) configuration and its boundary vocabulary.
"""

import typing, dataclasses

from .lattice import Dimensionality, VelocitySet, CollisionOperator, BGK
from .lattice import InitialField, Uniform, Vector, resize_vector
from .faces   import FaceBoundaryTable


@dataclasses.dataclass
class NoSlip:
    pass


@dataclasses.dataclass
class BounceBack:
    density:  float  = 1.0
    velocity: Vector = (0.0, 0.0)


@dataclasses.dataclass
class AntiBounceBack:
    density: float = 1.0


@dataclasses.dataclass
class Periodic:
    pass


BoundaryCondition = typing.Union[NoSlip, BounceBack, AntiBounceBack, Periodic]

BOUNDARY_CONDITIONS = {
    "NoSlip": NoSlip, "BounceBack": BounceBack,
    "AntiBounceBack": AntiBounceBack, "Periodic": Periodic,
}


class MomentumBoundaryTable(FaceBoundaryTable[BoundaryCondition]):
    CONDITION_TYPES = (NoSlip, BounceBack, AntiBounceBack, Periodic)
    FIELD = "momentum"

    @classmethod
    def default_condition(cls) -> BoundaryCondition:
        return NoSlip()


@dataclasses.dataclass
class MomentumBlock:
    # pylint: disable=too-many-instance-attributes
    velocity_set:        VelocitySet       = VelocitySet.D2Q9
    collision_operator:  CollisionOperator = dataclasses.field(default_factory=lambda: BGK(tau=0.5))
    delta_x:             float = 0.001
    delta_t:             float = 0.001
    physical_density:    float = 998.0
    reference_pressure:  float = 101325.0
    initial_density:     InitialField = dataclasses.field(default_factory=lambda: Uniform(1.0))
    initial_velocity:    InitialField = dataclasses.field(default_factory=lambda: Uniform((0.0, 0.0)))
    boundary_conditions: MomentumBoundaryTable = dataclasses.field(default_factory=MomentumBoundaryTable)

    def vectors(self) -> typing.Iterator[typing.Tuple[str, Vector]]:
        """ Yields (location, vector) for every stored vector of spatial components. """
        if isinstance(self.initial_velocity, Uniform):
            yield "initial_velocity", self.initial_velocity.value

        for entry in self.boundary_conditions:
            if isinstance(entry.condition, BounceBack):
                yield f"boundary_conditions.{entry.face.value}.velocity", entry.condition.velocity

    def set_dimensionality(self, dim: Dimensionality) -> None:
        if not self.velocity_set.is_valid_for(dim):
            self.velocity_set = dim.default_velocity_set

        if isinstance(self.initial_velocity, Uniform) and isinstance(self.initial_velocity.value, (tuple, list)):
            self.initial_velocity.value = resize_vector(self.initial_velocity.value, dim, 0.0)

        self.boundary_conditions.resize(dim)
        for entry in self.boundary_conditions:
            if isinstance(entry.condition, BounceBack):
                entry.condition.velocity = resize_vector(entry.condition.velocity, dim, 0.0)
