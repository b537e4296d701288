import sys, typing

from rich.markup import escape

from .         import args
from .printer  import cons
from .common   import LBCaseException
from .errors   import format_report
from .model    import CaseConfiguration
from .case_file import load_case
from .validate import validate_case
from .generate import generate_case, write_case
from .init     import create_case_file, list_templates


def __load(ARGS: dict) -> CaseConfiguration:
    case = load_case(ARGS["input"])

    if ARGS.get("name") is not None:
        case.case_name = ARGS["name"]
    if ARGS.get("output") is not None:
        case.parent_dir = ARGS["output"]
    if ARGS.get("rev") is not None:
        case.commit_hash = ARGS["rev"]

    return case


def build(ARGS: dict) -> None:
    case = __load(ARGS)

    if not ARGS["dry_run"]:
        case_dir = write_case(case)
        cons.print(f"[bold green]Case created successfully[/bold green] in {case_dir}")
        return

    generated = generate_case(case)
    for warning in generated.warnings:
        cons.warn(warning)

    cons.print("[bold]Cargo.toml[/bold]")
    cons.print_source(generated.manifest, "toml")
    cons.print("[bold]src/main.rs[/bold]")
    cons.print_source(generated.program, "rust")


def validate(ARGS: dict) -> None:
    case = __load(ARGS)
    errors, warnings = validate_case(case)

    if errors or warnings:
        cons.print(format_report(errors, warnings))
    if errors:
        raise LBCaseException(f"{ARGS['input']} has {len(errors)} error(s).")

    cons.print(f"[bold green]OK[/bold green] {ARGS['input']} is a valid {case.dimensionality.value} case "
               f"with {len(case.passive_scalars)} passive scalar(s).")


def init(ARGS: dict) -> None:
    if ARGS["list"]:
        list_templates()
        return

    create_case_file(ARGS["output_file"], ARGS["template"], ARGS["name"])


def main(argv: typing.Optional[typing.List[str]] = None) -> int:
    ARGS = args.parse(argv)

    try:
        {"build": build, "validate": validate, "init": init}[ARGS["command"]](ARGS)
    except LBCaseException as exc:
        cons.reset()
        cons.print(f"""\

[bold red]Error[/bold red]: {escape(str(exc))}
""")
        return 1
    except KeyboardInterrupt:
        return 130
    except Exception as exc:
        cons.reset()
        cons.print_exception()
        cons.print(f"""\

[bold red]Error[/bold red]: An unexpected exception occurred: {escape(str(exc))}
""")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
