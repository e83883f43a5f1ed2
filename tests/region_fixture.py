"""Region test fixtures — small hand-built and random orthogonal regions.

All coordinates are integers so every vertex-list operation is exact
and results can be compared with ``==``.
"""

from __future__ import annotations

import random

from orthopack.geometry import VertexList, Vertex, rectangle, union


def make_square(size: float = 10.0) -> VertexList:
    """Square of side *size* centered at the origin."""
    h = size / 2
    return rectangle((-h, -h), (size, size))


def make_l_shape() -> VertexList:
    """L-shaped region: [0,20)x[0,10) plus [0,10)x[10,20)."""
    return union(rectangle((0, 0), (20, 10)), rectangle((0, 10), (10, 10)))


def make_box_3d(lo=(0, 0, 0), hi=(1, 1, 1)) -> VertexList:
    """Axis-aligned 3-D box as a vertex list (8 signed corners)."""
    vertices = []
    for i in range(8):
        corner = []
        sign = 1
        for axis in range(3):
            if i >> axis & 1:
                corner.append(hi[axis])
                sign = -sign
            else:
                corner.append(lo[axis])
        vertices.append(Vertex(sign, tuple(corner)))
    return VertexList(vertices)


def random_rects(rng: random.Random, count: int, extent: int = 12) -> list[VertexList]:
    rects = []
    for _ in range(count):
        x = rng.randint(0, extent - 1)
        y = rng.randint(0, extent - 1)
        w = rng.randint(1, extent - x)
        h = rng.randint(1, extent - y)
        rects.append(rectangle((x, y), (w, h)))
    return rects


def random_region(rng: random.Random, count: int = 4, extent: int = 12) -> VertexList:
    """Union of *count* random integer rectangles inside [0, extent]²."""
    region = VertexList()
    for r in random_rects(rng, count, extent):
        region = union(region, r)
    return region


def box_contains(boxes: list[VertexList], point: tuple[float, float]) -> bool:
    """Half-open containment test against a box decomposition."""
    x, y = point
    for b in boxes:
        (x0, y0), (x1, y1) = b[0].position, b[3].position
        if x0 <= x < x1 and y0 <= y < y1:
            return True
    return False
