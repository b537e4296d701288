"""
Program assembler: composes the rendered blocks into a complete main.rs.
"""

import typing

from .          import blocks, literals, vocab
from .model     import CaseConfiguration, PassiveScalarBlock
from .template  import get_template

MAIN_TEMPLATE = "main.rs.mako"


def solve_calls(scalars: typing.Sequence[PassiveScalarBlock]) -> typing.List[str]:
    """
    The solve invocations closing main(). lbflow takes a lone passive scalar
    and a batch of them through different entry points, so the shape depends
    on how many scalars the case has.
    """
    calls = [f"{blocks.INDENT}{vocab.MOMENTUM_SOLVE}({vocab.MOMENTUM_BINDING});"]

    bindings = [ blocks.scalar_binding(s) for s in scalars ]
    if len(bindings) == 1:
        calls.append(f"{blocks.INDENT}{vocab.SCALAR_SOLVE}({bindings[0]});")
    elif len(bindings) > 1:
        calls.append(f"{blocks.INDENT}{vocab.SCALAR_SOLVE_VEC}({literals.vec(bindings)});")

    return calls


def render_program(case: CaseConfiguration) -> str:
    dim = case.dimensionality

    return get_template(MAIN_TEMPLATE).render(
        prelude=vocab.PRELUDE,
        domain=blocks.domain_block(dim, case.grid),
        momentum=blocks.momentum_block(case.momentum, dim, case.node_types),
        scalars=[ blocks.scalar_block(s, dim) for s in case.passive_scalars ],
        solve_calls=solve_calls(case.passive_scalars),
    )
