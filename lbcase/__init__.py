"""
lbcase - case generator for the lbflow lattice Boltzmann solver.

    from lbcase import CaseConfiguration, generate_case

    case = CaseConfiguration()
    case.add_passive_scalar("oxygen")
    generated = generate_case(case)     # generated.program, generated.manifest
"""

from .common    import LBCaseException
from .model     import CaseConfiguration
from .assembler import render_program
from .manifest  import render_manifest
from .generate  import GeneratedCase, generate_case, write_case
from .case_file import load_case, dump_case, case_from_dict, case_to_dict
