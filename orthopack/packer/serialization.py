"""Arrangement serialization — JSON conversion."""

from __future__ import annotations

from orthopack.config import PackingOptions
from orthopack.geometry import box_bounds, boxes_to_region, region_area, union

from .engine import RectArrangement
from .models import PlacedRect


def rect_to_dict(r: PlacedRect) -> dict:
    return {"x": r.x, "y": r.y, "width": r.width, "height": r.height}


def arrangement_to_dict(arr: RectArrangement) -> dict:
    """Serialize a RectArrangement to a JSON-safe dict."""
    bounds = arr.bounds()
    return {
        "center": list(arr.center),
        "options": arr.options.to_dict(),
        "rects": [rect_to_dict(r) for r in arr.rects],
        "region": {
            "area": region_area(arr.region),
            "bounds": list(bounds) if bounds else None,
            "boxes": [list(box_bounds(b)) for b in arr.region.rectangles()],
        },
    }


def parse_arrangement(data: dict) -> RectArrangement:
    """Rebuild an arrangement from :func:`arrangement_to_dict` output.

    The stored rects are replayed as-is (no search).  The region is
    restored from the stored boxes, so closings applied before saving
    carry over and the next placement lands where it would have.
    """
    arr = RectArrangement(
        center=tuple(data.get("center", (0.0, 0.0))),
        options=PackingOptions.from_dict(data.get("options")),
    )
    for r in data.get("rects", []):
        arr.place_fixed(PlacedRect(
            x=float(r["x"]),
            y=float(r["y"]),
            width=float(r["width"]),
            height=float(r["height"]),
        ))
    boxes = (data.get("region") or {}).get("boxes")
    if boxes:
        saved = boxes_to_region(tuple(float(c) for c in b) for b in boxes)
        arr.region = union(saved, arr.region)
    return arr
