"""Rectangle arrangement — greedy placement around a center point.

Each new rectangle is placed with one of its corners touching a vertex
of the current union region, on the side where the region is empty.
Vertices are tried in order of distance from the center, and the
candidate whose center is closest to the arrangement center wins.
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

from orthopack.config import DEFAULT_OPTIONS, PackingOptions
from orthopack.geometry import (
    RectList, VertexList, close, rectangle, region_to_polygon, union,
)

from .metrics import get_metric
from .models import PlacedRect, PlacementError


log = logging.getLogger(__name__)


def _sign(w: float) -> int:
    return (w > 0) - (w < 0)


class RectArrangement:
    """A growing set of non-overlapping rectangles packed around *center*.

    Not safe for concurrent use: callers must serialize ``add_rect``
    calls on the same instance.
    """

    def __init__(
        self,
        center: Sequence[float] = (0.0, 0.0),
        options: PackingOptions = DEFAULT_OPTIONS,
    ) -> None:
        cx, cy = center
        self.center = (float(cx), float(cy))
        self.options = options
        self.distance = get_metric(options.metric)
        self._rects: list[PlacedRect] = []
        self.region = VertexList()

    @property
    def rects(self) -> tuple[PlacedRect, ...]:
        """Placed rectangles, in placement order."""
        return tuple(self._rects)

    def __len__(self) -> int:
        return len(self._rects)

    # ── Placement ──────────────────────────────────────────────────

    def add_rect(self, area: float, aspect: float) -> PlacedRect:
        """Place a rectangle of the given *area* and *aspect* (width/height).

        Raises
        ------
        ValueError
            If area or aspect is not positive.
        PlacementError
            If no valid position exists.  The arrangement is unchanged.
        """
        if not area > 0:
            raise ValueError(f"area must be > 0, got {area!r}")
        if not aspect > 0:
            raise ValueError(f"aspect must be > 0, got {aspect!r}")

        cx, cy = self.center
        side_x = math.sqrt(area * aspect)
        side_y = area / side_x
        dx, dy = side_x / 2, side_y / 2
        d = math.hypot(dx, dy)

        if not self._rects:
            placed = PlacedRect(cx - dx, cy - dy, side_x, side_y)
        else:
            placed = self._search(side_x, side_y)
            if placed is None:
                log.warning("No position for rect #%d (%.2f×%.2f)",
                            len(self._rects) + 1, side_x, side_y)
                raise PlacementError(
                    area, aspect,
                    f"no free corner position around {len(self._rects)} "
                    f"placed rects",
                )

        region = union(self.region, placed.to_vertex_list())
        n = len(self._rects) + 1
        if n % self.options.close_frequency == 0:
            amount = d * self.options.close_factor
            # The unclosed union is re-added so float drift in the
            # closing never uncovers a placed rect.
            region = union(close(region, amount), region)
            log.debug("Closed region after rect #%d by %.3f (%d vertices)",
                      n, amount, len(region))

        self._rects.append(placed)
        self.region = region
        log.info("Placed rect #%d at (%.2f, %.2f) %.2f×%.2f",
                 n, placed.x, placed.y, placed.width, placed.height)
        return placed

    def place_fixed(self, rect: PlacedRect) -> PlacedRect:
        """Add *rect* at its given position, without searching or closing.

        Raises PlacementError if it overlaps the current region.
        """
        if not (rect.width > 0 and rect.height > 0):
            raise ValueError(f"Rect sides must be > 0, got {rect.width!r}×{rect.height!r}")
        body = rect.to_vertex_list()
        if self.region and RectList(self.region).rect_intersection(body):
            raise PlacementError(
                rect.area, rect.width / rect.height,
                f"fixed position ({rect.x:g}, {rect.y:g}) overlaps placed rects",
            )
        self._rects.append(rect)
        self.region = union(self.region, body)
        log.info("Fixed rect #%d at (%.2f, %.2f) %.2f×%.2f",
                 len(self._rects), rect.x, rect.y, rect.width, rect.height)
        return rect

    def _search(self, side_x: float, side_y: float) -> PlacedRect | None:
        """Best corner-touching candidate, or None."""
        dx, dy = side_x / 2, side_y / 2
        # Farthest a candidate center can be from its anchor vertex.
        reach = self.distance((0.0, 0.0), (dx, dy))

        ranked = sorted(
            ((self.distance(v.position, self.center), v) for v in self.region),
            key=lambda t: t[0],
        )
        index = RectList(self.region)

        best: tuple[float, float] | None = None
        best_dist = math.inf
        for vdist, v in ranked:
            if vdist > best_dist + reach:
                break
            x, y = v.position
            w_sign = _sign(v.weight)
            for sx, sy, sign in (
                (x, y, -1),
                (x - side_x, y, 1),
                (x, y - side_y, 1),
                (x - side_x, y - side_y, -1),
            ):
                if w_sign != sign:
                    continue
                mid = (sx + dx, sy + dy)
                if index.point_intersection(mid):
                    continue
                if index.rect_intersection(rectangle((sx, sy), (side_x, side_y))):
                    continue
                dist = self.distance(mid, self.center)
                if best is None or dist < best_dist:
                    best = (sx, sy)
                    best_dist = dist
            if self.options.heuristic == "first" and best is not None:
                break

        if best is None:
            return None
        return PlacedRect(best[0], best[1], side_x, side_y)

    # ── Read access ────────────────────────────────────────────────

    def bounds(self) -> tuple[float, float, float, float] | None:
        """(min_x, min_y, max_x, max_y) of the placed rects, or None."""
        if not self._rects:
            return None
        return (
            min(r.x for r in self._rects),
            min(r.y for r in self._rects),
            max(r.x + r.width for r in self._rects),
            max(r.y + r.height for r in self._rects),
        )

    def outline(self):
        """Shapely geometry of the current union region."""
        return region_to_polygon(self.region)
