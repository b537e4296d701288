import argparse, typing

from .common import format_list_to_string
from .init   import BUILTIN_TEMPLATES


def parse(argv: typing.Optional[typing.List[str]] = None) -> dict:
    parser = argparse.ArgumentParser(
        prog="lbcase",
        description="""\
Generates lbflow cases. A case file (YAML or JSON) describes the domain, the \
momentum field and any passive scalars; lbcase turns it into a Cargo project \
(Cargo.toml and src/main.rs) ready to be built against lbflow. To get started, \
run lbcase init case.yaml.""",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parsers = parser.add_subparsers(dest="command", required=True)

    build    = parsers.add_parser(name="build",    help="Generate a case from a case file.",   formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    validate = parsers.add_parser(name="validate", help="Check a case file without writing.",  formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    init     = parsers.add_parser(name="init",     help="Write a starter case file.",          formatter_class=argparse.ArgumentDefaultsHelpFormatter)

    def add_override_arguments(p):
        p.add_argument("-n", "--name",   type=str, default=None, help="Override the case name.")
        p.add_argument("-o", "--output", type=str, default=None, help="Override the parent directory of the case.")
        p.add_argument("-r", "--rev",    type=str, default=None, help="Pin lbflow to this git revision.")

    # === BUILD ===
    build.add_argument("input", metavar="CASE", type=str, help="Path to the case file.")
    add_override_arguments(build)
    build.add_argument("--dry-run", action="store_true", default=False, help="Print the generated files instead of writing them.")

    # === VALIDATE ===
    validate.add_argument("input", metavar="CASE", type=str, help="Path to the case file.")

    # === INIT ===
    init.add_argument("output_file", metavar="FILE", type=str, nargs="?", default="case.yaml", help="Case file to create.")
    init.add_argument("-t", "--template", type=str, choices=list(BUILTIN_TEMPLATES.keys()), default="2D_minimal",
                      help=f"Template to start from. Allowed values are: {format_list_to_string(list(BUILTIN_TEMPLATES.keys()))}.")
    init.add_argument("-n", "--name", type=str, default=None, help="Case name written into the file.")
    init.add_argument("-l", "--list", action="store_true", default=False, help="List the available templates.")

    return vars(parser.parse_args(argv))
