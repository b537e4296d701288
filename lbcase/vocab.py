"""
Target vocabulary of the lbflow crate.

Every name the generated main.rs refers to is defined here, so the renderers
never spell out a path of their own.
"""

CRATE = "lbflow"
PRELUDE = f"use {CRATE}::prelude::*;"

# Literal suffixes and containers
F64_SUFFIX   = "_f64"
USIZE_SUFFIX = "_usize"
VEC_OPEN     = "vec!["
VEC_CLOSE    = "]"

F64_NAN     = "f64::NAN"
F64_INF     = "f64::INFINITY"
F64_NEG_INF = "f64::NEG_INFINITY"

# Module namespaces
MOMENTUM_NS = "m"
SCALAR_NS   = "ps"

MOMENTUM_BC_NS = f"{MOMENTUM_NS}::bc"
SCALAR_BC_NS   = f"{SCALAR_NS}::bc"

# Record constructors and bindings
GRID_BINDING         = "n"
GRID_CLONE           = f"{GRID_BINDING}.clone()"
MOMENTUM_RECORD      = f"{MOMENTUM_NS}::Parameters"
MOMENTUM_BINDING     = "m_params"
SCALAR_RECORD        = f"{SCALAR_NS}::Parameters"
SCALAR_BINDING_PREFIX = "ps_params"

# Solve entry points
MOMENTUM_SOLVE   = f"{MOMENTUM_NS}::solve"
SCALAR_SOLVE     = f"{SCALAR_NS}::solve"
SCALAR_SOLVE_VEC = f"{SCALAR_NS}::solve_vec"

# Collision operators
BGK = "BGK"
TRT = "TRT"
MRT = "MRT"
MRT_PLACEHOLDER = f'{MRT}({VEC_OPEN}todo!("Insert parameters"){VEC_CLOSE})'

# Initial fields and node types
FUNCTIONS = "functions"
UNIFORM_DENSITY         = f"{FUNCTIONS}::uniform_density"
DENSITY_FROM_TIME_STEP  = f"{FUNCTIONS}::density_from_time_step"
DENSITY_FROM_FILE       = f"{FUNCTIONS}::from_density_file"
UNIFORM_VELOCITY        = f"{FUNCTIONS}::uniform_velocity"
VELOCITY_FROM_TIME_STEP = f"{FUNCTIONS}::velocity_from_time_step"
VELOCITY_FROM_FILE      = f"{FUNCTIONS}::from_velocity_file"
ONLY_FLUID_NODES        = f"{FUNCTIONS}::only_fluid_nodes"
BOUNCE_BACK_MAP_FILE    = f"{FUNCTIONS}::from_bounce_back_map_file"

INITIAL_SCALAR_VALUE = "InitialScalarValue"

# Fields the generator never fills in
UNSET = "None"

# Manifest
PACKAGE_VERSION = "0.1.0"
PACKAGE_EDITION = "2024"
CRATE_VERSION   = "0.1.0"
