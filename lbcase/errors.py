"""
Messages for invalid case settings.

A setting is named by its dotted path in the case file. Each message states
what the setting has to be and shows what it holds:

    'grid' must have 3 components for a 3D case, got [10, 10]
    'momentum.velocity_set' must be one of ['D2Q9'], got 'D3Q19'
"""

import typing

from rich.markup import escape

from .suggest import format_suggestion


def quote(path: str) -> str:
    return f"'{path}'"


def show(value: typing.Any) -> str:
    """ Renders a held value the way it reads in a YAML case file. """
    if isinstance(value, str):
        return quote(value)
    if isinstance(value, tuple):
        return str(list(value))

    return str(value)


def _must(path: str, requirement: str, got: typing.Any) -> str:
    return f"{quote(path)} must {requirement}, got {show(got)}"


def choice_error(path: str, choices: typing.List[str], got: typing.Any) -> str:
    return _must(path, f"be one of {choices}", got)


def minimum_error(path: str, minimum: int, got: typing.Any) -> str:
    return _must(path, f"be >= {minimum}", got)


def type_error(path: str, expected: str, got: typing.Any) -> str:
    return _must(path, f"be {expected}", got)


def dimension_error(path: str, dim: str, ncomponents: int, got: typing.Any) -> str:
    return _must(path, f"have {ncomponents} components for a {dim} case", got)


def unknown_setting_error(path: str, suggestions: typing.Optional[typing.List[str]] = None) -> str:
    hint = format_suggestion(suggestions or [])
    if not hint:
        return f"Unknown setting {quote(path)}"

    return f"Unknown setting {quote(path)}. {hint}"


# (title, rich style, bullet)
REPORT_SECTIONS = (("Errors", "red", "✗"), ("Warnings", "yellow", "!"))


def format_report(errors: typing.List[str], warnings: typing.Optional[typing.List[str]] = None,
                  use_rich: bool = True) -> str:
    """
    Lists errors then warnings under a heading each; empty sections are left out.
    With use_rich the headings and bullets carry markup and the messages are
    escaped so that `[...]` in a message prints as text.
    """
    sections = []
    for (title, style, bullet), messages in zip(REPORT_SECTIONS, (errors, warnings or [])):
        if not messages:
            continue

        if use_rich:
            lines  = [f"[{style}]{title}:[/{style}]"]
            lines += [ f"  [{style}]{bullet}[/{style}] {escape(m)}" for m in messages ]
        else:
            lines  = [f"{title}:"]
            lines += [ f"  {bullet} {m}" for m in messages ]

        sections.append("\n".join(lines))

    return "\n\n".join(sections)
