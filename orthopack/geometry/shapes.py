"""Shapely interop for 2-D regions."""

from __future__ import annotations

from typing import Iterable, Sequence

from shapely.geometry import Polygon, box as shapely_box
from shapely.ops import unary_union

from .vertex import Vertex
from .vertex_list import VertexList, threshold


def box_bounds(box: VertexList) -> tuple[float, float, float, float]:
    """Return (min_x, min_y, max_x, max_y) of a 2-D box."""
    (x0, y0), (x1, y1) = box[0].position, box[3].position
    return x0, y0, x1, y1


def boxes_to_region(boxes: Iterable[Sequence[float]]) -> VertexList:
    """Region covered by ``(min_x, min_y, max_x, max_y)`` boxes.

    Inverse of :func:`box_bounds` over ``region.rectangles()``.  Corners
    are taken as given, so a decomposed region comes back vertex for
    vertex.
    """
    total = VertexList()
    for x0, y0, x1, y1 in boxes:
        total = total.add(VertexList([
            Vertex(1, (x0, y0)),
            Vertex(-1, (x1, y0)),
            Vertex(-1, (x0, y1)),
            Vertex(1, (x1, y1)),
        ]))
    return total.transform(threshold)


def region_to_polygon(region: VertexList):
    """Shapely geometry (Polygon or MultiPolygon) covering *region*."""
    if region.dim not in (None, 2):
        raise ValueError(f"Expected a 2-D region, got dimension {region.dim}")
    boxes = [shapely_box(*box_bounds(b)) for b in region.rectangles()]
    if not boxes:
        return Polygon()
    return unary_union(boxes)


def region_area(region: VertexList) -> float:
    """Area of a thresholded region, summed over its box decomposition."""
    total = 0.0
    for b in region.rectangles():
        x0, y0, x1, y1 = box_bounds(b)
        total += (x1 - x0) * (y1 - y0)
    return total
