"""
Variant renderers.

One function per configuration axis, each mapping a tagged value (plus the
case dimensionality where the payload arity depends on it) to the lbflow
expression that constructs it. Dispatch is by exact type through a table per
axis, so a value from the wrong vocabulary (a momentum condition handed to the
scalar renderer, say) is refused instead of being coerced.
"""

import typing

from .        import literals, vocab
from .common  import LBCaseException
from .model   import momentum as m, scalar as ps
from .model   import Dimensionality, VelocitySet, NodeTypes
from .model   import BGK, TRT, MRT, Uniform, FromTimeStep, FromFile, resize_vector
from .model   import FaceBoundaryTable, MomentumBoundaryTable, ScalarBoundaryTable


def _dispatch(renderers: dict, value, kind: str, *args) -> str:
    renderer = renderers.get(type(value))
    if renderer is None:
        raise LBCaseException(f"{type(value).__name__} is not a valid {kind}.")

    return renderer(value, *args)


def vector(values: typing.Sequence[float], dim: Dimensionality) -> str:
    if not isinstance(values, (tuple, list)):
        raise LBCaseException(f"Expected a vector of {dim.ncomponents} components, got {values!r}.")

    return literals.vec_f64(resize_vector(tuple(values), dim, 0.0))


def grid(values: typing.Sequence[int], dim: Dimensionality) -> str:
    return literals.vec_usize(resize_vector(tuple(values), dim, 1))


# Collision operator

COLLISION_OPERATOR_RENDERERS = {
    BGK: lambda op: f"{vocab.BGK}({literals.f64(op.tau)})",
    TRT: lambda op: f"{vocab.TRT}({literals.f64(op.omega_plus)}, {literals.f64(op.omega_minus)})",
    MRT: lambda op: vocab.MRT_PLACEHOLDER,
}


def collision_operator(op) -> str:
    return _dispatch(COLLISION_OPERATOR_RENDERERS, op, "collision operator")


def velocity_set(vset: VelocitySet) -> str:
    if not isinstance(vset, VelocitySet):
        raise LBCaseException(f"{vset!r} is not a valid velocity set.")

    return vset.value


def node_types(source: NodeTypes) -> str:
    return {
        NodeTypes.ONLY_FLUID_NODES:          f"{vocab.ONLY_FLUID_NODES}({vocab.GRID_CLONE})",
        NodeTypes.FROM_BOUNCE_BACK_MAP_FILE: f"{vocab.BOUNCE_BACK_MAP_FILE}()",
    }[source]


# Boundary conditions

MOMENTUM_BC_RENDERERS = {
    m.NoSlip:         lambda bc, dim: f"{vocab.MOMENTUM_BC_NS}::NoSlip",
    m.BounceBack:     lambda bc, dim: (
        f"{vocab.MOMENTUM_BC_NS}::BounceBack {{ "
        f"density: {literals.f64(bc.density)}, velocity: {vector(bc.velocity, dim)} }}"
    ),
    m.AntiBounceBack: lambda bc, dim: f"{vocab.MOMENTUM_BC_NS}::AntiBounceBack {{ density: {literals.f64(bc.density)} }}",
    m.Periodic:       lambda bc, dim: f"{vocab.MOMENTUM_BC_NS}::Periodic",
}

SCALAR_BC_RENDERERS = {
    ps.AntiBounceBack: lambda bc, dim: f"{vocab.SCALAR_BC_NS}::AntiBounceBack {{ scalar_value: {literals.f64(bc.value)} }}",
    ps.AntiBBNoFlux:   lambda bc, dim: f"{vocab.SCALAR_BC_NS}::AntiBBNoFlux",
    ps.BBNoFlux:       lambda bc, dim: f"{vocab.SCALAR_BC_NS}::BBNoFlux",
    ps.Periodic:       lambda bc, dim: f"{vocab.SCALAR_BC_NS}::Periodic",
}


def momentum_boundary_condition(bc, dim: Dimensionality) -> str:
    return _dispatch(MOMENTUM_BC_RENDERERS, bc, "momentum boundary condition", dim)


def scalar_boundary_condition(bc, dim: Dimensionality = Dimensionality.D2) -> str:
    return _dispatch(SCALAR_BC_RENDERERS, bc, "passive scalar boundary condition", dim)


def inner_boundary_condition(inner: ps.InnerBoundaryCondition) -> str:
    return f"{vocab.SCALAR_BC_NS}::{inner.value}"


def boundary_conditions(table: FaceBoundaryTable, dim: Dimensionality) -> str:
    """ Renders a face table as vec![(Face, Condition), ...] in canonical face order. """
    if isinstance(table, MomentumBoundaryTable):
        render = momentum_boundary_condition
    elif isinstance(table, ScalarBoundaryTable):
        render = scalar_boundary_condition
    else:
        raise LBCaseException(f"{type(table).__name__} is not a boundary condition table.")

    return literals.vec(f"({entry.face.value}, {render(entry.condition, dim)})" for entry in table)


# Initial fields

def initial_density(source) -> str:
    return _dispatch({
        Uniform:      lambda s: f"{vocab.UNIFORM_DENSITY}({literals.f64(s.value)}, {vocab.GRID_CLONE})",
        FromTimeStep: lambda s: f"{vocab.DENSITY_FROM_TIME_STEP}({literals.usize(s.time_step)})",
        FromFile:     lambda s: f"{vocab.DENSITY_FROM_FILE}({literals.string(s.file_path)})",
    }, source, "initial density")


def initial_velocity(source, dim: Dimensionality) -> str:
    return _dispatch({
        Uniform:      lambda s: f"{vocab.UNIFORM_VELOCITY}({vector(s.value, dim)}, {vocab.GRID_CLONE})",
        FromTimeStep: lambda s: f"{vocab.VELOCITY_FROM_TIME_STEP}({literals.usize(s.time_step)})",
        FromFile:     lambda s: f"{vocab.VELOCITY_FROM_FILE}({literals.string(s.file_path)})",
    }, source, "initial velocity")


def initial_scalar_value(source) -> str:
    return _dispatch({
        Uniform:      lambda s: f"{vocab.INITIAL_SCALAR_VALUE}::Uniform({literals.f64(s.value)})",
        FromTimeStep: lambda s: f"{vocab.INITIAL_SCALAR_VALUE}::FromTimeStep({literals.usize(s.time_step)})",
        FromFile:     lambda s: f"{vocab.INITIAL_SCALAR_VALUE}::FromFile({literals.string(s.file_path)})",
    }, source, "initial scalar value")
