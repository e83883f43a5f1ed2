"""Packer — places rectangles around a center without overlaps.

Submodules:
  models        PlacedRect output dataclass and PlacementError.
  metrics       Distance metrics (euclidean, chessboard, manhattan).
  engine        RectArrangement: greedy corner-touching placement.
  serialization JSON conversion (arrangement_to_dict, parse_arrangement).
"""

from .models import PlacedRect, PlacementError
from .engine import RectArrangement
from .metrics import get_metric
from .serialization import arrangement_to_dict, parse_arrangement, rect_to_dict

__all__ = [
    # Models
    "PlacedRect", "PlacementError",
    # Engine
    "RectArrangement", "get_metric",
    # Serialization
    "arrangement_to_dict", "parse_arrangement", "rect_to_dict",
]
