"""
Case files: YAML (or JSON) descriptions of a case.

A case file mirrors CaseConfiguration field by field. Variants are written
either as a bare name (`NoSlip`, `MRT`) or as a mapping with a `kind` key and
the variant's payload (`{kind: BGK, tau: 0.6}`). Boundary conditions are a
mapping from face name to condition; faces left out keep the field's default.
Payload fields left out take the field's default too, so a bare `Uniform`
is density 1.0, a zero velocity vector or scalar value 0.0.

    dimensionality: 3D
    grid: [64, 32, 32]
    momentum:
      velocity_set: D3Q19
      collision_operator: {kind: BGK, tau: 0.8}
      boundary_conditions:
        West: {kind: BounceBack, density: 1.0, velocity: [0.05, 0.0, 0.0]}
        East: {kind: AntiBounceBack, density: 1.0}
    passive_scalars:
      - scalar_name: oxygen
        boundary_conditions: {West: {kind: AntiBounceBack, value: 1.0}}
"""

import typing, dataclasses

from functools import lru_cache

import fastjsonschema

from .common  import LBCaseException, file_load_yaml, file_dump_yaml
from .errors  import unknown_setting_error, choice_error
from .suggest import suggest_similar, format_suggestion
from .model   import momentum as m, scalar as ps
from .model   import CaseConfiguration, MomentumBlock, PassiveScalarBlock
from .model   import MomentumBoundaryTable, ScalarBoundaryTable, FaceBoundaryTable
from .model   import Dimensionality, VelocitySet, BoundaryFace, NodeTypes, InnerBoundaryCondition
from .model   import COLLISION_OPERATORS, INITIAL_FIELDS, Uniform

_NUMBER  = {"type": "number"}
_STRING  = {"type": "string"}
_VECTOR  = {"type": "array", "items": _NUMBER, "minItems": 2, "maxItems": 3}
_INDEX   = {"type": "integer", "minimum": 0}


def _enum(enum: typing.Type) -> dict:
    return {"enum": [ e.value for e in enum ]}


def _variant_schema(variants: typing.Dict[str, type], payload: typing.Dict[str, dict]) -> dict:
    kinds = list(variants.keys())

    return {"oneOf": [
        {"type": "string", "enum": kinds},
        {
            "type": "object",
            "required": ["kind"],
            "properties": {"kind": {"enum": kinds}, **payload},
        },
    ]}


def _faces_schema(variant_schema: dict) -> dict:
    return {"type": "object", "additionalProperties": variant_schema}


_COLLISION_SCHEMA = _variant_schema(COLLISION_OPERATORS, {
    "tau": _NUMBER, "omega_plus": _NUMBER, "omega_minus": _NUMBER,
})


def _initial_schema(value_schema: dict) -> dict:
    return _variant_schema(INITIAL_FIELDS, {
        "value": value_schema, "time_step": _INDEX, "file_path": _STRING,
    })


MOMENTUM_SCHEMA = {
    "type": "object",
    "properties": {
        "velocity_set":        _enum(VelocitySet),
        "collision_operator":  _COLLISION_SCHEMA,
        "delta_x":             _NUMBER,
        "delta_t":             _NUMBER,
        "physical_density":    _NUMBER,
        "reference_pressure":  _NUMBER,
        "initial_density":     _initial_schema(_NUMBER),
        "initial_velocity":    _initial_schema(_VECTOR),
        "boundary_conditions": _faces_schema(_variant_schema(m.BOUNDARY_CONDITIONS, {
            "density": _NUMBER, "velocity": _VECTOR,
        })),
    },
}

SCALAR_SCHEMA = {
    "type": "object",
    "required": ["scalar_name"],
    "properties": {
        "scalar_name":              _STRING,
        "velocity_set":             _enum(VelocitySet),
        "collision_operator":       _COLLISION_SCHEMA,
        "initial_value":            _initial_schema(_NUMBER),
        "boundary_conditions":      _faces_schema(_variant_schema(ps.BOUNDARY_CONDITIONS, {"value": _NUMBER})),
        "inner_boundary_condition": _enum(InnerBoundaryCondition),
    },
}

CASE_SCHEMA = {
    "type": "object",
    "properties": {
        "case_name":       _STRING,
        "parent_dir":      _STRING,
        "commit_hash":     {"type": ["string", "integer"]},
        "dimensionality":  _enum(Dimensionality),
        "grid":            {"type": "array", "items": {"type": "integer", "minimum": 1}, "minItems": 2, "maxItems": 3},
        "node_types":      _enum(NodeTypes),
        "momentum":        MOMENTUM_SCHEMA,
        "passive_scalars": {"type": "array", "items": SCALAR_SCHEMA},
    },
}


@lru_cache(maxsize=None)
def get_validator() -> typing.Callable:
    return fastjsonschema.compile(CASE_SCHEMA)


class _Parser:
    """ Builds a CaseConfiguration from schema-checked data, collecting every error on the way. """

    def __init__(self, dim: Dimensionality) -> None:
        self.dim    = dim
        self.errors: typing.List[str] = []

    def check_keys(self, where: str, data: dict, allowed: typing.Iterable[str]) -> None:
        allowed = list(allowed)
        for key in data.keys():
            if key not in allowed:
                name = f"{where}.{key}" if where else key
                self.errors.append(unknown_setting_error(name, suggest_similar(str(key), allowed)))

    def variant(self, where: str, value, variants: typing.Dict[str, type],
                defaults: typing.Optional[typing.Dict[str, dict]] = None):
        """
        Builds the variant named by value. Payload fields the file leaves out
        take defaults[kind] first, then the variant's own dataclass defaults.
        """
        if isinstance(value, str):
            kind, payload = value, {}
        else:
            payload = dict(value)
            kind    = payload.pop("kind")

        cls    = variants[kind]
        names  = [ f.name for f in dataclasses.fields(cls) ]
        self.check_keys(where, payload, names)

        fields = dict((defaults or {}).get(kind, {}))
        fields.update({ k: tuple(v) if isinstance(v, list) else v for k, v in payload.items() if k in names })

        return cls(**fields)

    def faces(self, where: str, data: dict, table: FaceBoundaryTable, variants: typing.Dict[str, type],
              defaults: typing.Optional[typing.Dict[str, dict]] = None) -> None:
        names = [ f.value for f in BoundaryFace ]
        for name, value in data.items():
            if name not in names:
                hint = format_suggestion(suggest_similar(str(name), names))
                self.errors.append(f"Unknown face '{where}.{name}'. {hint}".rstrip())
                continue

            face = BoundaryFace(name)
            if face not in self.dim.faces:
                self.errors.append(choice_error(f"{where}.{name}",
                                                [ f.value for f in self.dim.faces ], name))
                continue

            table[face] = self.variant(f"{where}.{name}", value, variants, defaults)

    def zeros(self) -> tuple:
        return (0.0,) * self.dim.ncomponents

    def momentum(self, data: dict) -> MomentumBlock:
        self.check_keys("momentum", data, [ f.name for f in dataclasses.fields(MomentumBlock) ])

        block = MomentumBlock(
            velocity_set=self.dim.default_velocity_set,
            initial_velocity=Uniform(self.zeros()),
            boundary_conditions=MomentumBoundaryTable(self.dim),
        )
        uniform = {
            "initial_density":  {"Uniform": {"value": 1.0}},
            "initial_velocity": {"Uniform": {"value": self.zeros()}},
        }

        if "velocity_set" in data:
            block.velocity_set = VelocitySet(data["velocity_set"])
        if "collision_operator" in data:
            block.collision_operator = self.variant("momentum.collision_operator", data["collision_operator"], COLLISION_OPERATORS)
        for key in ("delta_x", "delta_t", "physical_density", "reference_pressure"):
            if key in data:
                setattr(block, key, float(data[key]))
        for key in ("initial_density", "initial_velocity"):
            if key in data:
                setattr(block, key, self.variant(f"momentum.{key}", data[key], INITIAL_FIELDS, uniform[key]))
        self.faces("momentum.boundary_conditions", data.get("boundary_conditions", {}),
                   block.boundary_conditions, m.BOUNDARY_CONDITIONS, {"BounceBack": {"velocity": self.zeros()}})

        return block

    def scalar(self, index: int, data: dict) -> PassiveScalarBlock:
        where = f"passive_scalars[{index}]"
        self.check_keys(where, data, [ f.name for f in dataclasses.fields(PassiveScalarBlock) ])

        block = PassiveScalarBlock(
            scalar_name=data["scalar_name"],
            velocity_set=self.dim.default_velocity_set,
            boundary_conditions=ScalarBoundaryTable(self.dim),
        )

        if "velocity_set" in data:
            block.velocity_set = VelocitySet(data["velocity_set"])
        if "collision_operator" in data:
            block.collision_operator = self.variant(f"{where}.collision_operator", data["collision_operator"], COLLISION_OPERATORS)
        if "initial_value" in data:
            block.initial_value = self.variant(f"{where}.initial_value", data["initial_value"], INITIAL_FIELDS,
                                               {"Uniform": {"value": 0.0}})
        if "inner_boundary_condition" in data:
            block.inner_boundary_condition = InnerBoundaryCondition(data["inner_boundary_condition"])
        self.faces(f"{where}.boundary_conditions", data.get("boundary_conditions", {}),
                   block.boundary_conditions, ps.BOUNDARY_CONDITIONS)

        return block


def case_from_dict(data: dict, origin_txt: str = None) -> CaseConfiguration:
    """
    Builds a case from a case file's content. Raises LBCaseException listing
    every problem found, prefixed with origin_txt when given.
    """
    prefix = f"{origin_txt}: " if origin_txt else ""

    try:
        get_validator()(data)
    except fastjsonschema.JsonSchemaException as exc:
        raise LBCaseException(f"{prefix}{exc}") from exc

    dim    = Dimensionality(data.get("dimensionality", Dimensionality.D2.value))
    parser = _Parser(dim)
    parser.check_keys("", data, [ f.name for f in dataclasses.fields(CaseConfiguration) ])

    case = CaseConfiguration(
        dimensionality=dim,
        grid=tuple(data.get("grid", (10,) * dim.ncomponents)),
        node_types=NodeTypes(data.get("node_types", NodeTypes.ONLY_FLUID_NODES.value)),
        momentum=parser.momentum(data.get("momentum", {})),
        passive_scalars=[ parser.scalar(i, s) for i, s in enumerate(data.get("passive_scalars", [])) ],
    )
    for key in ("case_name", "parent_dir", "commit_hash"):
        if key in data:
            setattr(case, key, str(data[key]))

    if parser.errors:
        raise LBCaseException(prefix + "invalid case file:\n" + "\n".join(f"  - {e}" for e in parser.errors))

    return case


def _variant_to_dict(value) -> typing.Union[str, dict]:
    payload = { k: list(v) if isinstance(v, tuple) else v for k, v in dataclasses.asdict(value).items() }
    if not payload:
        return type(value).__name__

    return {"kind": type(value).__name__, **payload}


def _faces_to_dict(table: FaceBoundaryTable) -> dict:
    return { entry.face.value: _variant_to_dict(entry.condition) for entry in table }


def case_to_dict(case: CaseConfiguration) -> dict:
    mom = case.momentum

    return {
        "case_name":      case.case_name,
        "parent_dir":     case.parent_dir,
        "commit_hash":    case.commit_hash,
        "dimensionality": case.dimensionality.value,
        "grid":           list(case.grid),
        "node_types":     case.node_types.value,
        "momentum": {
            "velocity_set":        mom.velocity_set.value,
            "collision_operator":  _variant_to_dict(mom.collision_operator),
            "delta_x":             mom.delta_x,
            "delta_t":             mom.delta_t,
            "physical_density":    mom.physical_density,
            "reference_pressure":  mom.reference_pressure,
            "initial_density":     _variant_to_dict(mom.initial_density),
            "initial_velocity":    _variant_to_dict(mom.initial_velocity),
            "boundary_conditions": _faces_to_dict(mom.boundary_conditions),
        },
        "passive_scalars": [
            {
                "scalar_name":              s.scalar_name,
                "velocity_set":             s.velocity_set.value,
                "collision_operator":       _variant_to_dict(s.collision_operator),
                "initial_value":            _variant_to_dict(s.initial_value),
                "boundary_conditions":      _faces_to_dict(s.boundary_conditions),
                "inner_boundary_condition": s.inner_boundary_condition.value,
            }
            for s in case.passive_scalars
        ],
    }


def load_case(filepath: str) -> CaseConfiguration:
    data = file_load_yaml(filepath)
    if not isinstance(data, dict):
        raise LBCaseException(f"{filepath}: a case file must hold a mapping, got {type(data).__name__}.")

    return case_from_dict(data, origin_txt=filepath)


def dump_case(case: CaseConfiguration, filepath: str) -> None:
    file_dump_yaml(filepath, case_to_dict(case))
