"""
Lattice-level vocabulary shared by every field of a case.

Dimensionality drives the rest of the model: it fixes how many spatial
components vectors carry, which velocity sets are allowed and how many domain
faces need a boundary condition.
"""

import typing, dataclasses

from enum import Enum, unique


@unique
class Dimensionality(Enum):
    D2 = "2D"
    D3 = "3D"

    @property
    def ncomponents(self) -> int:
        return 2 if self == Dimensionality.D2 else 3

    @property
    def faces(self) -> typing.Tuple["BoundaryFace", ...]:
        return tuple(BoundaryFace)[:2 * self.ncomponents]

    @property
    def velocity_sets(self) -> typing.Tuple["VelocitySet", ...]:
        return tuple(v for v in VelocitySet if v.dimensionality == self)

    @property
    def default_velocity_set(self) -> "VelocitySet":
        return VelocitySet.D2Q9 if self == Dimensionality.D2 else VelocitySet.D3Q19


@unique
class VelocitySet(Enum):
    D2Q9  = "D2Q9"
    D3Q15 = "D3Q15"
    D3Q19 = "D3Q19"
    D3Q27 = "D3Q27"

    @property
    def dimensionality(self) -> Dimensionality:
        return Dimensionality.D2 if self.value.startswith("D2") else Dimensionality.D3

    def is_valid_for(self, dim: Dimensionality) -> bool:
        return self.dimensionality == dim


@unique
class BoundaryFace(Enum):
    """ Domain faces in canonical order; the first four exist in 2D. """
    WEST   = "West"
    EAST   = "East"
    SOUTH  = "South"
    NORTH  = "North"
    BOTTOM = "Bottom"
    TOP    = "Top"


@unique
class NodeTypes(Enum):
    ONLY_FLUID_NODES         = "OnlyFluidNodes"
    FROM_BOUNCE_BACK_MAP_FILE = "FromBounceBackMapFile"


# Collision operators

@dataclasses.dataclass
class BGK:
    tau: float = 0.5


@dataclasses.dataclass
class TRT:
    omega_plus:  float = 1.0
    omega_minus: float = 1.0


@dataclasses.dataclass
class MRT:
    """ No parameter representation yet: rendered as a placeholder that must be hand-edited. """


CollisionOperator = typing.Union[BGK, TRT, MRT]

COLLISION_OPERATORS = {"BGK": BGK, "TRT": TRT, "MRT": MRT}


# Initial field sources

Vector = typing.Tuple[float, ...]


@dataclasses.dataclass
class Uniform:
    value: typing.Union[float, Vector] = 0.0


@dataclasses.dataclass
class FromTimeStep:
    time_step: int = 0


@dataclasses.dataclass
class FromFile:
    file_path: str = ""


InitialField = typing.Union[Uniform, FromTimeStep, FromFile]

INITIAL_FIELDS = {"Uniform": Uniform, "FromTimeStep": FromTimeStep, "FromFile": FromFile}


def resize_vector(values: typing.Sequence, dim: Dimensionality, fill) -> tuple:
    """ Truncates values to dim's arity, or pads the missing components with fill. """
    n = dim.ncomponents

    return tuple(values[:n]) + (fill,) * max(0, n - len(values))
