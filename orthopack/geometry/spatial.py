"""Spatial index over the box decomposition of a 2-D region.

The boxes go into a shapely ``STRtree``, so point and rectangle queries
only look at the boxes whose y-range can possibly hit the query.  The
tree answers envelope overlaps; the exact half-open and strict tests
run on the few boxes it returns.
"""

from __future__ import annotations

from typing import Sequence

from shapely.geometry import LineString, box as shapely_box
from shapely.strtree import STRtree

from .vertex_list import VertexList, rects_intersect


class RectList:
    """Quick intersection tests against an orthogonal polygon."""

    def __init__(self, region: VertexList) -> None:
        if region.dim not in (None, 2):
            raise ValueError(f"RectList needs a 2-D region, got dimension {region.dim}")
        self.rects = region.rectangles()
        self._tree: STRtree | None = None
        if self.rects:
            corners = [(r[0].position, r[3].position) for r in self.rects]
            self._x_span = (
                min(lo[0] for lo, _ in corners),
                max(hi[0] for _, hi in corners),
            )
            self._tree = STRtree([
                shapely_box(x0, y0, x1, y1) for (x0, y0), (x1, y1) in corners
            ])

    def __len__(self) -> int:
        return len(self.rects)

    def range_search(self, y_min: float, y_max: float) -> list[VertexList]:
        """Boxes whose y-extent overlaps the closed range [y_min, y_max]."""
        if self._tree is None:
            return []
        # Diagonal across the x-span: its envelope is the whole band.
        x0, x1 = self._x_span
        band = LineString([(x0, y_min), (x1, y_max)])
        return [self.rects[i] for i in sorted(self._tree.query(band))]

    def point_intersection(self, point: Sequence[float]) -> bool:
        """True if *point* lies inside the polygon (boxes are half-open)."""
        x, y = point
        for r in self.range_search(y, y + 1):
            (x0, y0), (x1, y1) = r[0].position, r[3].position
            if x0 <= x < x1 and y0 <= y < y1:
                return True
        return False

    def rect_intersection(self, rect: VertexList) -> bool:
        """True if the interior of box *rect* overlaps the polygon."""
        y_min = rect[0].position[1]
        y_max = rect[3].position[1]
        return any(rects_intersect(r, rect) for r in self.range_search(y_min, y_max))
