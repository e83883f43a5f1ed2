"""Tests for dilation, erosion and closing.

Validates:
  - Dilating / eroding a square by d grows / shrinks each side by d
  - dilate(erode(square, 2), 2) restores the square
  - Erosion past the half-width empties the region
  - Closing bridges narrow gaps and never shrinks a rectangle
  - Only 2-D regions are accepted
"""

from __future__ import annotations

import random
import unittest

from orthopack.geometry import (
    Vertex, VertexList, rectangle, union, dilate, erode, topo, close,
    bounding_box, region_area, region_to_polygon,
)
from tests.region_fixture import make_square, make_l_shape


class TestDilateErode(unittest.TestCase):

    def test_bounding_box(self):
        self.assertEqual(bounding_box(make_l_shape()), ((0, 0), (20, 20)))
        with self.assertRaises(ValueError):
            bounding_box(VertexList())

    def test_dilate_square(self):
        grown = dilate(make_square(10), 2)
        self.assertEqual(grown, rectangle((-7, -7), (14, 14)))
        self.assertEqual(region_area(grown), 196)

    def test_erode_square(self):
        shrunk = erode(make_square(10), 2)
        self.assertEqual(shrunk, rectangle((-3, -3), (6, 6)))

    def test_opening_restores_square(self):
        square = make_square(10)
        self.assertEqual(dilate(erode(square, 2), 2), square)

    def test_erode_to_nothing(self):
        self.assertEqual(len(erode(make_square(10), 6)), 0)
        self.assertEqual(len(erode(VertexList(), 1)), 0)

    def test_erode_l_shape(self):
        shrunk = erode(make_l_shape(), 1)
        # [1,19)x[1,9) plus [1,9)x[9,19)
        self.assertEqual(region_area(shrunk), 18 * 8 + 8 * 10)

    def test_dilate_merges_overlapping_boxes(self):
        two = union(rectangle((0, 0), (4, 4)), rectangle((6, 0), (4, 4)))
        self.assertEqual(dilate(two, 1), rectangle((-1, -1), (12, 6)))

    def test_topo_dispatches_on_sign(self):
        square = make_square(10)
        self.assertEqual(topo(square, 2), dilate(square, 2))
        self.assertEqual(topo(square, -2), erode(square, 2))

    def test_requires_2d(self):
        line = VertexList([Vertex(1, (0,)), Vertex(-1, (3,))])
        with self.assertRaises(ValueError):
            dilate(line, 1)
        with self.assertRaises(ValueError):
            erode(line, 1)


class TestClose(unittest.TestCase):

    def test_close_bridges_gap(self):
        two = union(rectangle((0, 0), (10, 10)), rectangle((11, 0), (10, 10)))
        closed = close(two, 1)
        self.assertEqual(closed, rectangle((0, 0), (21, 10)))

    def test_close_fills_notch(self):
        notched = union(rectangle((0, 0), (10, 4)), rectangle((0, 4), (4, 6)))
        notched = union(notched, rectangle((6, 4), (4, 6)))
        self.assertEqual(region_area(notched), 88)
        self.assertEqual(close(notched, 2), rectangle((0, 0), (10, 10)))

    def test_close_keeps_square(self):
        square = make_square(10)
        self.assertEqual(close(square, 2), square)

    def test_close_never_shrinks_rectangle(self):
        rng = random.Random(9)
        for _ in range(20):
            x, y = rng.uniform(-20, 20), rng.uniform(-20, 20)
            w, h = rng.uniform(0.5, 15), rng.uniform(0.5, 15)
            rect = rectangle((x, y), (w, h))
            closed = close(rect, rng.uniform(0.1, 5))
            self.assertGreaterEqual(region_area(closed), w * h - 1e-6)
            outline = region_to_polygon(closed).buffer(1e-6)
            self.assertTrue(outline.contains(region_to_polygon(rect)))


if __name__ == "__main__":
    unittest.main()
