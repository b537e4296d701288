"""
Typed description of an lbflow case.

Momentum and passive scalar boundary conditions are kept in their own modules
(`momentum`, `scalar`) because the two vocabularies overlap in names but not in
meaning; refer to them through the module, e.g. `momentum.Periodic`.
"""

from . import momentum, scalar
from .lattice  import Dimensionality, VelocitySet, BoundaryFace, NodeTypes
from .lattice  import BGK, TRT, MRT, CollisionOperator, COLLISION_OPERATORS
from .lattice  import Uniform, FromTimeStep, FromFile, InitialField, INITIAL_FIELDS
from .lattice  import resize_vector
from .faces    import FaceBoundaryEntry, FaceBoundaryTable
from .momentum import MomentumBlock, MomentumBoundaryTable
from .scalar   import PassiveScalarBlock, ScalarBoundaryTable, InnerBoundaryCondition
from .case     import CaseConfiguration
