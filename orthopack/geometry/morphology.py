"""Morphological operations on 2-D regions.

Dilation grows every box of the decomposition by d on each side and
re-thresholds the sum, which is the Minkowski sum with a square of
half-width d.  Erosion dilates the complement instead.
"""

from __future__ import annotations

import logging

from orthopack.config import ERODE_MARGIN

from .vertex import Vertex
from .vertex_list import VertexList, rectangle, threshold


log = logging.getLogger(__name__)

# Corner offsets in box vertex order: min, (max_x, min_y), (min_x, max_y), max
_CORNER_SIGNS = ((-1, -1), (1, -1), (-1, 1), (1, 1))


def _require_2d(region: VertexList) -> None:
    if region.dim not in (None, 2):
        raise ValueError(f"Morphology is only defined in 2-D, got dimension {region.dim}")


def bounding_box(region: VertexList) -> tuple[tuple[float, float], tuple[float, float]]:
    """Return ``(min_corner, max_corner)`` of all vertices of *region*."""
    _require_2d(region)
    if not region:
        raise ValueError("Empty region has no bounding box")
    xs = [v.position[0] for v in region]
    ys = [v.position[1] for v in region]
    return (min(xs), min(ys)), (max(xs), max(ys))


def dilate(region: VertexList, d: float) -> VertexList:
    """Region grown by *d* in every axis direction."""
    _require_2d(region)
    grown: list[Vertex] = []
    for box in region.rectangles():
        for v, (sx, sy) in zip(box, _CORNER_SIGNS):
            grown.append(v.clone().translate((sx * d, sy * d)))
    return VertexList(grown).normalized().transform(threshold)


def erode(region: VertexList, d: float) -> VertexList:
    """Region shrunk by *d*: dilate the framed complement, keep the hole."""
    _require_2d(region)
    if len(region) < 4:
        return VertexList()
    (x0, y0), (x1, y1) = bounding_box(region)
    m = ERODE_MARGIN
    frame = rectangle((x0 - m, y0 - m), (x1 - x0 + 2 * m, y1 - y0 + 2 * m))
    frame = frame.add(region.scale(-1))
    grown = dilate(frame, d)
    # The grown outer box owns the first and last two vertices.
    return grown[2:-2].scale(-1)


def topo(region: VertexList, d: float) -> VertexList:
    """Dilate for ``d >= 0``, erode by ``-d`` otherwise."""
    if d < 0:
        return erode(region, -d)
    return dilate(region, d)


def close(region: VertexList, amount: float) -> VertexList:
    """Morphological closing: fills gaps and notches narrower than 2·amount."""
    closed = erode(dilate(region, amount), amount)
    log.debug("Closed region by %.3f: %d -> %d vertices",
              amount, len(region), len(closed))
    return closed
