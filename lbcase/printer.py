"""
Console output. Everything lbcase prints goes through the `cons` singleton,
which nests progress output under section headings.
"""

import typing, contextlib

import rich.console, rich.syntax

from rich.markup import escape


class LBPrinter:
    def __init__(self):
        self.prefixes: typing.List[str] = []
        self.raw = rich.console.Console()

    def reset(self):
        """ Drops every open section, e.g. before reporting a failure. """
        self.prefixes = []

    @contextlib.contextmanager
    def section(self, title: str, prefix: str = "  "):
        self.print(title)
        self.prefixes.append(prefix)
        try:
            yield self
        finally:
            if self.prefixes:
                self.prefixes.pop()

    def print(self, msg: typing.Any = "", **kwargs):
        prefix = "".join(self.prefixes)
        text   = "\n".join(f"{prefix}{line}" for line in str(msg).split("\n"))

        self.raw.print(text, soft_wrap=True, **kwargs)

    def warn(self, msg: str):
        self.print(f"[yellow]WARNING:[/yellow] {escape(msg)}")

    def print_source(self, text: str, lexer: str):
        """ Generated files are shown whole and highlighted, outside any section. """
        self.raw.print(rich.syntax.Syntax(text, lexer, line_numbers=True, word_wrap=False))

    def print_exception(self):
        self.raw.print_exception()


cons = LBPrinter()
