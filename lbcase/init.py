"""lbcase case file generator - create starter case files from built-in templates."""

import os, typing

from .printer   import cons
from .common    import LBCaseException
from .case_file import dump_case
from .model     import CaseConfiguration, Dimensionality, VelocitySet, BoundaryFace, Uniform, TRT
from .model     import momentum as m, scalar as ps


def _2d_minimal() -> CaseConfiguration:
    return CaseConfiguration()


def _2d_lid_driven_cavity() -> CaseConfiguration:
    case = CaseConfiguration(grid=(128, 128))
    case.momentum.collision_operator = TRT(omega_plus=1.6, omega_minus=1.2)
    case.momentum.boundary_conditions[BoundaryFace.NORTH] = m.BounceBack(density=1.0, velocity=(0.1, 0.0))

    return case


def _3d_scalars() -> CaseConfiguration:
    case = CaseConfiguration()
    case.set_dimensionality(Dimensionality.D3)
    case.grid = (64, 32, 32)
    case.momentum.velocity_set = VelocitySet.D3Q27
    case.momentum.initial_velocity = Uniform((0.01, 0.0, 0.0))
    case.momentum.boundary_conditions[BoundaryFace.WEST] = m.Periodic()
    case.momentum.boundary_conditions[BoundaryFace.EAST] = m.Periodic()

    for name, inlet in (("oxygen", 1.0), ("glucose", 0.5)):
        scalar = case.add_passive_scalar(name)
        scalar.velocity_set = VelocitySet.D3Q19
        scalar.boundary_conditions[BoundaryFace.WEST] = ps.Periodic()
        scalar.boundary_conditions[BoundaryFace.EAST] = ps.Periodic()
        scalar.boundary_conditions[BoundaryFace.BOTTOM] = ps.AntiBounceBack(value=inlet)

    return case


BUILTIN_TEMPLATES: typing.Dict[str, typing.Tuple[typing.Callable[[], CaseConfiguration], str]] = {
    '2D_minimal':            (_2d_minimal,           'Default 10x10 D2Q9 case with no-slip walls'),
    '2D_lid_driven_cavity':  (_2d_lid_driven_cavity, 'TRT cavity driven by a moving north wall'),
    '3D_scalars':            (_3d_scalars,           'Periodic 3D channel carrying two passive scalars'),
}


def get_template_case(template: str, case_name: str = None) -> CaseConfiguration:
    if template not in BUILTIN_TEMPLATES:
        available = ', '.join(BUILTIN_TEMPLATES.keys())
        raise LBCaseException(f"Unknown template: {template}\nAvailable templates: {available}")

    case = BUILTIN_TEMPLATES[template][0]()
    if case_name is not None:
        case.case_name = case_name

    return case


def list_templates():
    cons.print("[bold]Available Templates[/bold]\n")
    for name, (_, desc) in BUILTIN_TEMPLATES.items():
        cons.print(f"  [green]{name:22s}[/green] {desc}")
    cons.print()


def create_case_file(filepath: str, template: str, case_name: str = None) -> CaseConfiguration:
    if os.path.exists(filepath):
        raise LBCaseException(f"File already exists: {filepath}")

    case = get_template_case(template, case_name)
    dump_case(case, filepath)

    cons.print(f"[bold green]Created[/bold green] {filepath}")
    cons.print(f"  Using template: [cyan]{template}[/cyan]")
    cons.print()
    cons.print("  [bold]Next steps:[/bold]")
    cons.print(f"    1. Edit [cyan]{filepath}[/cyan] to configure your case")
    cons.print(f"    2. Run: [cyan]lbcase build {filepath}[/cyan]")
    cons.print()

    return case
