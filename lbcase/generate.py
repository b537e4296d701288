"""
Case generation: validate a configuration, render main.rs and Cargo.toml,
and write them out as a Cargo project.
"""

import os, typing, dataclasses

from rich.markup import escape

from .printer   import cons
from .common    import LBCaseException, isspace, create_directory, file_write
from .errors    import format_report
from .validate  import validate_case
from .assembler import render_program
from .manifest  import render_manifest
from .model     import CaseConfiguration


@dataclasses.dataclass
class GeneratedCase:
    program:  str
    manifest: str
    warnings: typing.List[str] = dataclasses.field(default_factory=list)


def generate_case(case: CaseConfiguration) -> GeneratedCase:
    """
    Renders the case's program and manifest. Raises LBCaseException when the
    case fails validation; warnings are returned alongside the text.
    """
    errors, warnings = validate_case(case)
    if errors:
        raise LBCaseException(format_report(errors, use_rich=False))

    return GeneratedCase(
        program=render_program(case),
        manifest=render_manifest(case.case_name, case.commit_hash),
        warnings=warnings,
    )


def get_case_dirpath(case: CaseConfiguration, parent_dir: str = None) -> str:
    parent_dir = parent_dir if parent_dir is not None else case.parent_dir

    return os.path.join(parent_dir, case.case_name.strip())


def write_case(case: CaseConfiguration, parent_dir: str = None) -> str:
    """
    Generates the case and lays it out as <parent_dir>/<case_name>/ with
    Cargo.toml, src/main.rs and an empty pre_processing/ directory. Returns
    the case directory.
    """
    if isspace(case.case_name):
        raise LBCaseException("Case name is empty.")

    generated = generate_case(case)
    case_dir  = get_case_dirpath(case, parent_dir)

    with cons.section(f"Generating [magenta]{escape(case.case_name.strip())}[/magenta] in [bold]{escape(case_dir)}[/bold]:"):
        for warning in generated.warnings:
            cons.warn(warning)

        src_dir = os.path.join(case_dir, "src")
        create_directory(src_dir)
        create_directory(os.path.join(case_dir, "pre_processing"))

        for filepath, content in [
            (os.path.join(case_dir, "Cargo.toml"), generated.manifest),
            (os.path.join(src_dir,  "main.rs"),    generated.program),
        ]:
            if file_write(filepath, content, if_different=True):
                cons.print(f"[green]Wrote[/green] {os.path.relpath(filepath, case_dir)}")
            else:
                cons.print(f"[dim]Unchanged[/dim] {os.path.relpath(filepath, case_dir)}")

        cons.print(f"[yellow]INFO:[/yellow] {len(case.passive_scalars)} passive scalar(s), "
                   f"{case.dimensionality.value} grid {' x '.join(str(n) for n in case.grid)}.")

    return case_dir
