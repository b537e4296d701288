"""
Component parameter blocks.

Each block renders one `let <binding> = ...;` statement of the generated
main(), with the record fields in the order the lbflow crate declares them.
Rendering never fails on a well-typed block: anything the crate cannot express
yet (MRT parameters, say) is left in the text for the compiler to reject.
"""

import typing

from .        import literals, renderers, vocab
from .model   import Dimensionality, NodeTypes, MomentumBlock, PassiveScalarBlock

INDENT = " " * 4


def _record(binding: str, constructor: str, fields: typing.List[typing.Tuple[str, str]]) -> str:
    lines = [f"{INDENT}let {binding} = {constructor} {{"]
    lines.extend(f"{INDENT * 2}{name}: {value}," for name, value in fields)
    lines.append(f"{INDENT}}};")

    return "\n".join(lines)


def domain_block(dim: Dimensionality, grid: typing.Sequence[int]) -> str:
    return f"{INDENT}let {vocab.GRID_BINDING} = {renderers.grid(grid, dim)};"


def momentum_block(block: MomentumBlock, dim: Dimensionality, node_types: NodeTypes) -> str:
    return _record(vocab.MOMENTUM_BINDING, vocab.MOMENTUM_RECORD, [
        ("n",                     vocab.GRID_CLONE),
        ("node_types",            renderers.node_types(node_types)),
        ("velocity_set",          renderers.velocity_set(block.velocity_set)),
        ("collision_operator",    renderers.collision_operator(block.collision_operator)),
        ("delta_x",               literals.f64(block.delta_x)),
        ("delta_t",               literals.f64(block.delta_t)),
        ("physical_density",      literals.f64(block.physical_density)),
        ("reference_pressure",    literals.f64(block.reference_pressure)),
        ("initial_density",       renderers.initial_density(block.initial_density)),
        ("initial_velocity",      renderers.initial_velocity(block.initial_velocity, dim)),
        ("boundary_conditions",   renderers.boundary_conditions(block.boundary_conditions, dim)),
        ("force",                 vocab.UNSET),
        ("multiphase_parameters", vocab.UNSET),
        ("post_functions",        vocab.UNSET),
    ])


def scalar_binding(block: PassiveScalarBlock) -> str:
    """
    Name of the `let` binding holding a passive scalar's parameters. It only
    depends on the scalar name, so two scalars with the same name collide.
    """
    return f"{vocab.SCALAR_BINDING_PREFIX}_{block.scalar_name}"


def scalar_block(block: PassiveScalarBlock, dim: Dimensionality) -> str:
    return _record(scalar_binding(block), vocab.SCALAR_RECORD, [
        ("scalar_name",              literals.string(block.scalar_name)),
        ("collision_operator",       renderers.collision_operator(block.collision_operator)),
        ("velocity_set",             renderers.velocity_set(block.velocity_set)),
        ("initial_scalar_value",     renderers.initial_scalar_value(block.initial_value)),
        ("boundary_conditions",      renderers.boundary_conditions(block.boundary_conditions, dim)),
        ("inner_boundary_condition", renderers.inner_boundary_condition(block.inner_boundary_condition)),
        ("source_value",             vocab.UNSET),
        ("adsorption_parameters",    vocab.UNSET),
    ])
