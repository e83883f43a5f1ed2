"""Tests for the Vertex primitive.

Validates:
  - Scanline comparison (last coordinate most significant)
  - Axis rotation and its round trip
  - scale / project / unproject / translate / dominates
  - Dimension mismatches and zero scaling are rejected
"""

from __future__ import annotations

import itertools
import random
import unittest

from orthopack.geometry import Vertex


class TestVertexOrdering(unittest.TestCase):

    def test_last_coordinate_dominates_order(self):
        a = Vertex(1, (0, 1))
        b = Vertex(1, (5, 0))
        self.assertEqual(a.compare(b), 1)
        self.assertEqual(b.compare(a), -1)

    def test_ties_broken_by_earlier_coordinates(self):
        a = Vertex(1, (2, 3))
        b = Vertex(-1, (4, 3))
        self.assertEqual(a.compare(b), -1)
        self.assertEqual(a.compare(Vertex(7, (2, 3))), 0)

    def test_scan_key_matches_compare(self):
        rng = random.Random(3)
        pts = [Vertex(1, tuple(rng.randint(0, 3) for _ in range(3))) for _ in range(20)]
        for a, b in itertools.product(pts, repeat=2):
            by_key = (a.scan_key() > b.scan_key()) - (a.scan_key() < b.scan_key())
            self.assertEqual(by_key, a.compare(b))

    def test_compare_dimension_mismatch(self):
        with self.assertRaises(ValueError):
            Vertex(1, (0, 0)).compare(Vertex(1, (0, 0, 0)))


class TestVertexRotation(unittest.TestCase):

    def test_rotate_forward(self):
        v = Vertex(1, (1, 2, 3))
        self.assertIs(v.rotate_axes_forward(), v)
        self.assertEqual(v.position, (3, 1, 2))

    def test_rotate_backward(self):
        v = Vertex(1, (1, 2, 3)).rotate_axes_backward()
        self.assertEqual(v.position, (2, 3, 1))

    def test_round_trip_preserves_order(self):
        """forward then backward leaves every comparison unchanged."""
        rng = random.Random(11)
        pts = [Vertex(1, tuple(rng.uniform(-5, 5) for _ in range(3))) for _ in range(15)]
        before = [[a.compare(b) for b in pts] for a in pts]
        rotated = [p.clone().rotate_axes_forward().rotate_axes_backward() for p in pts]
        after = [[a.compare(b) for b in rotated] for a in rotated]
        self.assertEqual(before, after)
        self.assertEqual([p.position for p in pts], [p.position for p in rotated])


class TestVertexDerived(unittest.TestCase):

    def test_clone_is_independent(self):
        v = Vertex(2, (1, 1))
        c = v.clone()
        c.translate((1, 1))
        self.assertEqual(v.position, (1, 1))
        self.assertEqual(c.position, (2, 2))

    def test_scale(self):
        v = Vertex(2, (1, 1))
        s = v.scale(-3)
        self.assertEqual(s.weight, -6)
        self.assertEqual(v.weight, 2)
        self.assertEqual(s.position, v.position)

    def test_scale_by_zero_rejected(self):
        with self.assertRaises(ValueError):
            Vertex(1, (0, 0)).scale(0)

    def test_project_unproject(self):
        v = Vertex(1, (4, 5))
        self.assertEqual(v.project().position, (4,))
        self.assertEqual(v.unproject(9).position, (4, 5, 9))
        self.assertEqual(v.project().unproject(5), v)

    def test_dominates(self):
        v = Vertex(1, (0, 0))
        self.assertTrue(v.dominates((0, 0)))
        self.assertTrue(v.dominates((3, 1)))
        self.assertFalse(v.dominates((-1, 5)))
        self.assertFalse(Vertex(1, (1, 0)).dominates((0, 5)))

    def test_dominates_dimension_mismatch(self):
        with self.assertRaises(ValueError):
            Vertex(1, (0, 0)).dominates((1, 1, 1))

    def test_translate_in_place(self):
        v = Vertex(1, (1, 2))
        self.assertIs(v.translate((0.5, -2)), v)
        self.assertEqual(v.position, (1.5, 0))

    def test_dim_and_last_coord(self):
        v = Vertex(1, [3, 7])
        self.assertEqual(v.dim, 2)
        self.assertEqual(v.last_coord, 7)
        self.assertIsInstance(v.position, tuple)


if __name__ == "__main__":
    unittest.main()
