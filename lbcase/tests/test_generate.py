"""
Unit tests for generate.py module.

Tests rendering a case and laying it out as a Cargo project on disk.
"""

import os, shutil, tempfile, unittest

from ..common    import LBCaseException, file_read
from ..generate  import generate_case, write_case, get_case_dirpath
from ..assembler import render_program
from ..manifest  import render_manifest
from ..model     import CaseConfiguration, VelocitySet, MRT


class TestGenerateCase(unittest.TestCase):
    """Test in-memory generation."""

    def test_program_and_manifest(self):
        case = CaseConfiguration(case_name="cavity", commit_hash="abc123")
        generated = generate_case(case)

        self.assertEqual(generated.program, render_program(case))
        self.assertEqual(generated.manifest, render_manifest("cavity", "abc123"))
        self.assertEqual(generated.warnings, [])

    def test_warnings_are_returned(self):
        case = CaseConfiguration()
        case.momentum.collision_operator = MRT()
        generated = generate_case(case)

        self.assertEqual(len(generated.warnings), 1)
        self.assertIn('MRT(vec![todo!("Insert parameters")])', generated.program)

    def test_invalid_case_raises(self):
        case = CaseConfiguration()
        case.momentum.velocity_set = VelocitySet.D3Q27
        with self.assertRaises(LBCaseException) as ctx:
            generate_case(case)
        self.assertIn("'momentum.velocity_set'", str(ctx.exception))


class TestWriteCase(unittest.TestCase):
    """Test writing the generated project to disk."""

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmpdir)

    def test_layout(self):
        case = CaseConfiguration(case_name="cavity")
        case.add_passive_scalar("oxygen")

        case_dir = write_case(case, self.tmpdir)

        self.assertEqual(case_dir, os.path.join(self.tmpdir, "cavity"))
        self.assertTrue(os.path.isdir(os.path.join(case_dir, "pre_processing")))
        self.assertEqual(file_read(os.path.join(case_dir, "Cargo.toml")), render_manifest("cavity"))
        self.assertEqual(file_read(os.path.join(case_dir, "src", "main.rs")), render_program(case))

    def test_parent_dir_from_case(self):
        case = CaseConfiguration(case_name="cavity", parent_dir=self.tmpdir)
        self.assertEqual(write_case(case), os.path.join(self.tmpdir, "cavity"))
        self.assertEqual(get_case_dirpath(case), os.path.join(self.tmpdir, "cavity"))

    def test_rewrite_is_idempotent(self):
        case = CaseConfiguration(case_name="cavity")
        case_dir = write_case(case, self.tmpdir)
        first = file_read(os.path.join(case_dir, "src", "main.rs"))

        write_case(case, self.tmpdir)
        self.assertEqual(file_read(os.path.join(case_dir, "src", "main.rs")), first)

    def test_padded_case_name(self):
        """Surrounding whitespace is dropped from both the directory and the package name."""
        case_dir = write_case(CaseConfiguration(case_name=" cavity "), self.tmpdir)

        self.assertEqual(case_dir, os.path.join(self.tmpdir, "cavity"))
        self.assertIn('name = "cavity"\n', file_read(os.path.join(case_dir, "Cargo.toml")))

    def test_empty_case_name(self):
        """A blank case name is refused before anything is written."""
        for name in ["", "   "]:
            with self.assertRaises(LBCaseException):
                write_case(CaseConfiguration(case_name=name), self.tmpdir)
        self.assertEqual(os.listdir(self.tmpdir), [])

    def test_invalid_case_writes_nothing(self):
        case = CaseConfiguration(case_name="broken", grid=(10,))
        with self.assertRaises(LBCaseException):
            write_case(case, self.tmpdir)
        self.assertEqual(os.listdir(self.tmpdir), [])


if __name__ == "__main__":
    unittest.main()
