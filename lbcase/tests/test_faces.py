"""
Unit tests for face boundary tables and dimensionality changes.
"""

import unittest

from ..common import LBCaseException
from ..model  import momentum as m, scalar as ps
from ..model  import CaseConfiguration, Dimensionality, BoundaryFace, VelocitySet
from ..model  import MomentumBoundaryTable, ScalarBoundaryTable, Uniform


class TestFaceBoundaryTable(unittest.TestCase):
    """Tests for the generic table behaviour."""

    def test_default_sizes(self):
        """A table holds one condition per face of its dimensionality."""
        self.assertEqual(len(MomentumBoundaryTable(Dimensionality.D2)), 4)
        self.assertEqual(len(MomentumBoundaryTable(Dimensionality.D3)), 6)
        self.assertEqual(len(ScalarBoundaryTable(Dimensionality.D3)), 6)

    def test_faces_follow_canonical_order(self):
        table = MomentumBoundaryTable(Dimensionality.D3)
        self.assertEqual([ f.value for f in table.faces ],
                         ["West", "East", "South", "North", "Bottom", "Top"])

    def test_field_defaults(self):
        self.assertTrue(all(isinstance(e.condition, m.NoSlip) for e in MomentumBoundaryTable()))
        self.assertTrue(all(isinstance(e.condition, ps.AntiBBNoFlux) for e in ScalarBoundaryTable()))

    def test_index_by_face_or_position(self):
        table = MomentumBoundaryTable()
        table[BoundaryFace.EAST] = m.Periodic()
        self.assertEqual(table[1], m.Periodic())
        table[2] = m.AntiBounceBack(density=1.1)
        self.assertEqual(table[BoundaryFace.SOUTH], m.AntiBounceBack(density=1.1))

    def test_face_outside_domain_rejected(self):
        table = MomentumBoundaryTable(Dimensionality.D2)
        with self.assertRaises(LBCaseException):
            table[BoundaryFace.TOP] = m.NoSlip()

    def test_index_out_of_range_rejected(self):
        """Positions past the last face fail like faces outside the domain."""
        table = MomentumBoundaryTable(Dimensionality.D2)
        for index in [4, 7, -1]:
            with self.assertRaises(LBCaseException):
                table[index]
            with self.assertRaises(LBCaseException):
                table[index] = m.NoSlip()
        self.assertEqual(len(table), 4)

    def test_other_vocabulary_rejected(self):
        """Momentum tables refuse scalar conditions and vice versa."""
        with self.assertRaises(LBCaseException):
            MomentumBoundaryTable()[BoundaryFace.WEST] = ps.Periodic()
        with self.assertRaises(LBCaseException):
            ScalarBoundaryTable()[BoundaryFace.WEST] = m.NoSlip()
        with self.assertRaises(LBCaseException):
            ScalarBoundaryTable(conditions=[m.Periodic()])

    def test_tables_of_different_fields_are_not_equal(self):
        self.assertNotEqual(MomentumBoundaryTable(), ScalarBoundaryTable())


class TestDimensionalityChange(unittest.TestCase):
    """Tests for growing and shrinking tables with the case dimensionality."""

    def _edited_case(self) -> CaseConfiguration:
        case = CaseConfiguration()
        case.momentum.boundary_conditions[BoundaryFace.EAST] = m.Periodic()
        return case

    def test_growth_preserves_existing_entries(self):
        """2D -> 3D keeps the four entries and appends defaults for Bottom and Top."""
        case = self._edited_case()
        case.set_dimensionality(Dimensionality.D3)

        table = case.momentum.boundary_conditions
        self.assertEqual(len(table), 6)
        self.assertEqual(table.conditions[:4], [m.NoSlip(), m.Periodic(), m.NoSlip(), m.NoSlip()])
        self.assertEqual(table[BoundaryFace.BOTTOM], m.NoSlip())
        self.assertEqual(table[BoundaryFace.TOP], m.NoSlip())

    def test_shrink_truncates(self):
        """3D -> 2D drops Bottom and Top, keeping entries edited after the growth."""
        case = self._edited_case()
        case.set_dimensionality(Dimensionality.D3)
        case.momentum.boundary_conditions[BoundaryFace.NORTH] = m.AntiBounceBack(density=0.9)
        case.momentum.boundary_conditions[BoundaryFace.TOP] = m.Periodic()

        case.set_dimensionality(Dimensionality.D2)

        table = case.momentum.boundary_conditions
        self.assertEqual(len(table), 4)
        self.assertEqual(table.conditions, [m.NoSlip(), m.Periodic(), m.NoSlip(), m.AntiBounceBack(density=0.9)])

    def test_shrink_discards_for_good(self):
        """Faces dropped on shrink come back as defaults on the next growth."""
        case = CaseConfiguration()
        case.set_dimensionality(Dimensionality.D3)
        case.momentum.boundary_conditions[BoundaryFace.TOP] = m.Periodic()
        case.set_dimensionality(Dimensionality.D2)
        case.set_dimensionality(Dimensionality.D3)
        self.assertEqual(case.momentum.boundary_conditions[BoundaryFace.TOP], m.NoSlip())

    def test_scalar_tables_resize_independently(self):
        case = CaseConfiguration()
        oxygen = case.add_passive_scalar("oxygen")
        oxygen.boundary_conditions[BoundaryFace.WEST] = ps.AntiBounceBack(value=1.0)

        case.set_dimensionality(Dimensionality.D3)

        self.assertEqual(len(oxygen.boundary_conditions), 6)
        self.assertEqual(oxygen.boundary_conditions[BoundaryFace.WEST], ps.AntiBounceBack(value=1.0))
        self.assertEqual(oxygen.boundary_conditions[BoundaryFace.TOP], ps.AntiBBNoFlux())

    def test_added_scalar_matches_case_dimensionality(self):
        case = CaseConfiguration()
        case.set_dimensionality(Dimensionality.D3)
        scalar = case.add_passive_scalar("tracer")
        self.assertEqual(len(scalar.boundary_conditions), 6)
        self.assertEqual(scalar.velocity_set, VelocitySet.D3Q19)

    def test_vectors_and_grid_follow_dimensionality(self):
        case = CaseConfiguration()
        case.momentum.initial_velocity = Uniform((0.1, 0.2))
        case.momentum.boundary_conditions[BoundaryFace.NORTH] = m.BounceBack(density=1.0, velocity=(0.05, 0.0))

        case.set_dimensionality(Dimensionality.D3)
        self.assertEqual(case.grid, (10, 10, 1))
        self.assertEqual(case.momentum.initial_velocity.value, (0.1, 0.2, 0.0))
        self.assertEqual(case.momentum.boundary_conditions[BoundaryFace.NORTH].velocity, (0.05, 0.0, 0.0))

        case.set_dimensionality(Dimensionality.D2)
        self.assertEqual(case.grid, (10, 10))
        self.assertEqual(case.momentum.initial_velocity.value, (0.1, 0.2))

    def test_velocity_set_is_coerced(self):
        """A velocity set invalid for the new dimensionality falls back to its default."""
        case = CaseConfiguration()
        case.set_dimensionality(Dimensionality.D3)
        self.assertEqual(case.momentum.velocity_set, VelocitySet.D3Q19)

        case.momentum.velocity_set = VelocitySet.D3Q27
        case.set_dimensionality(Dimensionality.D3)
        self.assertEqual(case.momentum.velocity_set, VelocitySet.D3Q27)

        case.set_dimensionality(Dimensionality.D2)
        self.assertEqual(case.momentum.velocity_set, VelocitySet.D2Q9)

    def test_remove_passive_scalar(self):
        case = CaseConfiguration()
        case.add_passive_scalar("a")
        case.add_passive_scalar("b")
        case.add_passive_scalar("c")
        self.assertEqual(case.remove_passive_scalar(1).scalar_name, "b")
        self.assertEqual([ s.scalar_name for s in case.passive_scalars ], ["a", "c"])
        with self.assertRaises(LBCaseException):
            case.remove_passive_scalar(5)


if __name__ == "__main__":
    unittest.main()
