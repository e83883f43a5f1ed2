"""Geometry — vertex lists and the algorithms on them.

Submodules:
  vertex       Signed weighted point.
  vertex_list  Scanline-sorted vertex lists: sum, transform, box decomposition.
  morphology   Dilation, erosion and closing of 2-D regions.
  spatial      STRtree-backed RectList intersection index.
  shapes       Shapely conversion and area helpers.
"""

from .vertex import Vertex
from .vertex_list import (
    VertexList, rectangle, threshold, union, intersection, difference,
    rects_intersect,
)
from .morphology import bounding_box, dilate, erode, topo, close
from .spatial import RectList
from .shapes import box_bounds, boxes_to_region, region_to_polygon, region_area

__all__ = [
    "Vertex", "VertexList",
    "rectangle", "threshold", "union", "intersection", "difference",
    "rects_intersect",
    "bounding_box", "dilate", "erode", "topo", "close",
    "RectList",
    "box_bounds", "boxes_to_region", "region_to_polygon", "region_area",
]
