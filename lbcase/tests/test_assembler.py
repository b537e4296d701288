"""
Unit tests for assembler.py and manifest.py modules.

Covers the complete generated program and its build manifest.
"""

import unittest

from ..assembler import render_program, solve_calls
from ..manifest  import render_manifest, revision_suffix
from ..model     import CaseConfiguration, Dimensionality, PassiveScalarBlock
from .test_blocks import DEFAULT_MOMENTUM_2D, DEFAULT_OXYGEN_2D


class TestSolveCalls(unittest.TestCase):
    """Tests for the closing solve invocations."""

    def _scalars(self, *names):
        return [ PassiveScalarBlock(scalar_name=name) for name in names ]

    def test_no_scalars(self):
        self.assertEqual(solve_calls([]), ["    m::solve(m_params);"])

    def test_one_scalar(self):
        self.assertEqual(solve_calls(self._scalars("oxygen")),
                         ["    m::solve(m_params);", "    ps::solve(ps_params_oxygen);"])

    def test_many_scalars(self):
        self.assertEqual(solve_calls(self._scalars("a", "b", "c")), [
            "    m::solve(m_params);",
            "    ps::solve_vec(vec![ps_params_a, ps_params_b, ps_params_c]);",
        ])


class TestRenderProgram(unittest.TestCase):
    """Tests for the complete main.rs text."""

    def test_default_case(self):
        expected = "\n".join([
            "use lbflow::prelude::*;",
            "",
            "fn main() {",
            "    let n = vec![10_usize, 10_usize];",
            "",
            DEFAULT_MOMENTUM_2D,
            "",
            "    m::solve(m_params);",
            "}",
        ])
        self.assertEqual(render_program(CaseConfiguration()).rstrip(), expected)

    def test_one_scalar(self):
        case = CaseConfiguration()
        case.add_passive_scalar("oxygen")

        expected = "\n".join([
            "use lbflow::prelude::*;",
            "",
            "fn main() {",
            "    let n = vec![10_usize, 10_usize];",
            "",
            DEFAULT_MOMENTUM_2D,
            "",
            DEFAULT_OXYGEN_2D,
            "",
            "    m::solve(m_params);",
            "    ps::solve(ps_params_oxygen);",
            "}",
        ])
        self.assertEqual(render_program(case).rstrip(), expected)

    def test_two_scalars(self):
        case = CaseConfiguration()
        case.add_passive_scalar("a")
        case.add_passive_scalar("b")
        text = render_program(case)

        self.assertIn("    ps::solve_vec(vec![ps_params_a, ps_params_b]);", text)
        self.assertNotIn("ps::solve(", text)
        self.assertLess(text.index("let ps_params_a"), text.index("let ps_params_b"))

    def test_deterministic(self):
        """Rendering the same configuration twice yields identical text."""
        case = CaseConfiguration()
        case.set_dimensionality(Dimensionality.D3)
        case.add_passive_scalar("oxygen")
        self.assertEqual(render_program(case), render_program(case))

    def test_rendering_does_not_mutate(self):
        case = CaseConfiguration()
        case.add_passive_scalar("oxygen")
        before = repr(case)
        render_program(case)
        self.assertEqual(repr(case), before)

    def test_3d_arity(self):
        """Every vector in a 3D program carries three components."""
        case = CaseConfiguration()
        case.set_dimensionality(Dimensionality.D3)
        text = render_program(case)

        self.assertIn("    let n = vec![10_usize, 10_usize, 1_usize];", text)
        self.assertIn("vec![0_f64, 0_f64, 0_f64]", text)
        self.assertEqual(text.count("m::bc::NoSlip"), 6)


class TestRenderManifest(unittest.TestCase):
    """Tests for Cargo.toml."""

    def test_unpinned(self):
        self.assertEqual(render_manifest("case_000").rstrip(), "\n".join([
            "[package]",
            'name = "case_000"',
            'version = "0.1.0"',
            'edition = "2024"',
            "",
            "[dependencies]",
            'lbflow = { version = "0.1.0", git = "https://github.com/gilberto-ribeiro/lbflow.git" }',
        ]))

    def test_pinned(self):
        text = render_manifest("cavity", "abc123")
        self.assertIn('name = "cavity"', text)
        self.assertIn('git = "https://github.com/gilberto-ribeiro/lbflow.git", rev = "abc123" }', text)

    def test_name_is_stripped(self):
        """The package name matches the case directory, which drops surrounding whitespace."""
        self.assertIn('name = "cavity"\n', render_manifest("  cavity "))

    def test_revision_suffix(self):
        self.assertEqual(revision_suffix(None), "")
        self.assertEqual(revision_suffix(""), "")
        self.assertEqual(revision_suffix("   "), "")
        self.assertEqual(revision_suffix(" abc "), ', rev = "abc"')


if __name__ == "__main__":
    unittest.main()
