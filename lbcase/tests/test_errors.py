"""
Unit tests for errors.py and printer.py modules.
"""

import unittest

from ..errors  import show, choice_error, minimum_error, dimension_error, unknown_setting_error, format_report
from ..printer import LBPrinter


class TestMessages(unittest.TestCase):
    """Test the shape of messages about case settings."""

    def test_show(self):
        """Values read the way they are written in a case file."""
        self.assertEqual(show("D3Q19"), "'D3Q19'")
        self.assertEqual(show((10, 10)), "[10, 10]")
        self.assertEqual(show(0.5), "0.5")

    def test_choice_and_minimum(self):
        self.assertEqual(choice_error("momentum.velocity_set", ["D2Q9"], "D3Q19"),
                         "'momentum.velocity_set' must be one of ['D2Q9'], got 'D3Q19'")
        self.assertEqual(minimum_error("grid.x", 1, 0), "'grid.x' must be >= 1, got 0")

    def test_dimension(self):
        self.assertEqual(dimension_error("grid", "3D", 3, (10, 10)),
                         "'grid' must have 3 components for a 3D case, got [10, 10]")

    def test_unknown_setting(self):
        self.assertEqual(unknown_setting_error("gird"), "Unknown setting 'gird'")
        self.assertEqual(unknown_setting_error("gird", ["grid"]), "Unknown setting 'gird'. Did you mean 'grid'?")


class TestFormatReport(unittest.TestCase):
    """Test the error and warning listing."""

    def test_plain(self):
        self.assertEqual(format_report(["bad grid"], ["MRT placeholder"], use_rich=False),
                         "Errors:\n  ✗ bad grid\n\nWarnings:\n  ! MRT placeholder")

    def test_empty_sections_are_left_out(self):
        self.assertEqual(format_report([], ["w"], use_rich=False), "Warnings:\n  ! w")
        self.assertEqual(format_report([], [], use_rich=False), "")

    def test_rich_escapes_messages(self):
        """Brackets inside a message are not taken as markup."""
        text = format_report(["'grid' got [bold]"])
        self.assertTrue(text.startswith("[red]Errors:[/red]"))
        self.assertIn("\\[bold]", text)


class TestPrinter(unittest.TestCase):
    """Test section nesting of the console printer."""

    def test_sections_nest_and_close(self):
        printer = LBPrinter()
        with printer.section("outer"):
            with printer.section("inner", prefix="> "):
                self.assertEqual(printer.prefixes, ["  ", "> "])
            self.assertEqual(printer.prefixes, ["  "])
        self.assertEqual(printer.prefixes, [])

    def test_section_closes_on_error(self):
        printer = LBPrinter()
        with self.assertRaises(ValueError):
            with printer.section("failing"):
                raise ValueError("boom")
        self.assertEqual(printer.prefixes, [])

    def test_reset(self):
        printer = LBPrinter()
        with printer.section("outer"):
            printer.reset()
            self.assertEqual(printer.prefixes, [])
        self.assertEqual(printer.prefixes, [])


if __name__ == "__main__":
    unittest.main()
