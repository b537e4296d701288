"""
Generation-time validation of a case configuration.

The renderers accept any well-typed configuration; this module finds the
configurations whose rendered program would be structurally wrong (vectors of
the wrong arity, face tables of the wrong size, a 3D velocity set in a 2D
case, scalar names that cannot form a binding) and reports them as errors.
Configurations that render but need hand-editing afterwards are reported as
warnings.

Two scalars sharing a name are not reported: their bindings collide in the
generated program and the Rust compiler reports it.
"""

import typing

from .        import literals
from .errors  import choice_error, minimum_error, dimension_error, type_error
from .model   import CaseConfiguration, FaceBoundaryTable, MomentumBlock, PassiveScalarBlock
from .model   import MomentumBoundaryTable, ScalarBoundaryTable
from .model   import Dimensionality, VelocitySet, MRT, Uniform, FromTimeStep, FromFile

Messages = typing.List[str]


def _check_velocity_set(where: str, vset: VelocitySet, dim: Dimensionality, errors: Messages) -> None:
    if not isinstance(vset, VelocitySet) or not vset.is_valid_for(dim):
        errors.append(choice_error(f"{where}.velocity_set",
                                   [ v.value for v in dim.velocity_sets ],
                                   getattr(vset, "value", vset)))


def _check_collision_operator(where: str, op, warnings: Messages) -> None:
    if isinstance(op, MRT):
        warnings.append(f"'{where}.collision_operator' is MRT: the generated program "
                        "contains a todo!() placeholder that must be replaced by hand")


def _check_vector(where: str, values, dim: Dimensionality, errors: Messages) -> None:
    if not isinstance(values, (tuple, list)) or len(values) != dim.ncomponents:
        errors.append(dimension_error(where, dim.value, dim.ncomponents, values))


def _check_table(where: str, table: FaceBoundaryTable, kind: type,
                 dim: Dimensionality, errors: Messages) -> None:
    if not isinstance(table, kind):
        errors.append(type_error(where, f"a {kind.__name__}", type(table).__name__))
        return

    if len(table) != len(dim.faces):
        errors.append(choice_error(where, [ f.value for f in dim.faces ], [ f.value for f in table.faces ]))

    for entry in table:
        if not isinstance(entry.condition, kind.CONDITION_TYPES):
            errors.append(type_error(f"{where}.{entry.face.value}", f"a {kind.FIELD} boundary condition",
                                     type(entry.condition).__name__))


def _check_initial_field(where: str, source, warnings: Messages, errors: Messages) -> None:
    if isinstance(source, FromTimeStep):
        if isinstance(source.time_step, bool) or not isinstance(source.time_step, int):
            errors.append(type_error(f"{where}.time_step", "an integer", source.time_step))
        elif source.time_step < 0:
            errors.append(minimum_error(f"{where}.time_step", 0, source.time_step))
    elif isinstance(source, FromFile):
        _check_string(f"{where}.file_path", source.file_path, warnings)
    elif not isinstance(source, Uniform):
        errors.append(type_error(where, "Uniform, FromTimeStep or FromFile", type(source).__name__))


def _check_string(where: str, text: str, warnings: Messages) -> None:
    if not literals.is_clean_string(text):
        warnings.append(f"'{where}' contains quotes, backslashes or control characters "
                        f"and will produce a malformed string literal: {text!r}")


def check_momentum(block: MomentumBlock, dim: Dimensionality) -> typing.Tuple[Messages, Messages]:
    errors, warnings = [], []

    _check_velocity_set("momentum", block.velocity_set, dim, errors)
    _check_collision_operator("momentum", block.collision_operator, warnings)
    _check_initial_field("momentum.initial_density", block.initial_density, warnings, errors)
    _check_initial_field("momentum.initial_velocity", block.initial_velocity, warnings, errors)

    if isinstance(block.initial_density, Uniform) and isinstance(block.initial_density.value, (tuple, list)):
        errors.append(type_error("momentum.initial_density.value", "a number", block.initial_density.value))

    _check_table("momentum.boundary_conditions", block.boundary_conditions, MomentumBoundaryTable, dim, errors)

    if isinstance(block.boundary_conditions, MomentumBoundaryTable):
        for where, values in block.vectors():
            _check_vector(f"momentum.{where}", values, dim, errors)
    elif isinstance(block.initial_velocity, Uniform):
        _check_vector("momentum.initial_velocity", block.initial_velocity.value, dim, errors)

    return errors, warnings


def check_scalar(index: int, block: PassiveScalarBlock, dim: Dimensionality) -> typing.Tuple[Messages, Messages]:
    errors, warnings = [], []
    where = f"passive_scalars[{index}]"

    if not literals.is_identifier(block.scalar_name):
        errors.append(type_error(f"{where}.scalar_name", "a non-empty identifier ([A-Za-z_][A-Za-z0-9_]*)",
                                 block.scalar_name))

    _check_velocity_set(where, block.velocity_set, dim, errors)
    _check_collision_operator(where, block.collision_operator, warnings)
    _check_initial_field(f"{where}.initial_value", block.initial_value, warnings, errors)

    if isinstance(block.initial_value, Uniform) and isinstance(block.initial_value.value, (tuple, list)):
        errors.append(type_error(f"{where}.initial_value.value", "a number", block.initial_value.value))

    _check_table(f"{where}.boundary_conditions", block.boundary_conditions, ScalarBoundaryTable, dim, errors)

    return errors, warnings


def validate_case(case: CaseConfiguration) -> typing.Tuple[Messages, Messages]:
    """
    Validate a case before rendering it.

    Returns:
        Tuple of (errors, warnings).
    """
    errors, warnings = [], []
    dim = case.dimensionality

    if not isinstance(dim, Dimensionality):
        return [ choice_error("dimensionality", [ d.value for d in Dimensionality ], dim) ], []

    if len(case.grid) != dim.ncomponents:
        errors.append(dimension_error("grid", dim.value, dim.ncomponents, case.grid))
    for axis, extent in zip("xyz", case.grid):
        if isinstance(extent, bool) or not isinstance(extent, int):
            errors.append(type_error(f"grid.{axis}", "an integer", extent))
        elif extent < 1:
            errors.append(minimum_error(f"grid.{axis}", 1, extent))

    for checked in [ check_momentum(case.momentum, dim) ] + \
                   [ check_scalar(i, s, dim) for i, s in enumerate(case.passive_scalars) ]:
        errors.extend(checked[0])
        warnings.extend(checked[1])

    if case.has_revision_pin:
        _check_string("commit_hash", case.commit_hash, warnings)

    return errors, warnings
