"""
FastAPI web server — JSON endpoints around RectArrangement.

Arrangements live in process memory, keyed by a random id.  Calls on
one arrangement are serialized with a per-arrangement lock.
"""

from __future__ import annotations

import logging
import threading
import uuid

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from orthopack.config import PackingOptions
from orthopack.packer import (
    PlacementError, RectArrangement, arrangement_to_dict, rect_to_dict,
)


log = logging.getLogger(__name__)

# ── App ────────────────────────────────────────────────────────────

app = FastAPI(title="orthopack")

# ── Session state (persists across requests) ───────────────────────

_arrangements: dict[str, tuple[RectArrangement, threading.Lock]] = {}
_registry_lock = threading.Lock()


def _get(arrangement_id: str) -> tuple[RectArrangement, threading.Lock]:
    with _registry_lock:
        entry = _arrangements.get(arrangement_id)
    if entry is None:
        raise HTTPException(404, f"Arrangement '{arrangement_id}' not found.")
    return entry


# ── Models ─────────────────────────────────────────────────────────

class CreateArrangementRequest(BaseModel):
    center: list[float] = Field(default_factory=lambda: [0.0, 0.0])
    options: dict = Field(default_factory=dict)


class AddRectRequest(BaseModel):
    area: float
    aspect: float = 1.0


# ── Routes ─────────────────────────────────────────────────────────

@app.post("/api/arrangements")
def create_arrangement(req: CreateArrangementRequest):
    """Start an empty arrangement."""
    if len(req.center) != 2:
        raise HTTPException(422, "center must have exactly two coordinates.")
    try:
        options = PackingOptions.from_dict(req.options)
    except (TypeError, ValueError) as e:
        raise HTTPException(422, str(e))
    arr = RectArrangement(center=tuple(req.center), options=options)
    arrangement_id = uuid.uuid4().hex
    with _registry_lock:
        _arrangements[arrangement_id] = (arr, threading.Lock())
    log.info("Created arrangement %s at %s", arrangement_id, arr.center)
    return {"id": arrangement_id, **arrangement_to_dict(arr)}


@app.get("/api/arrangements/{arrangement_id}")
def get_arrangement(arrangement_id: str):
    arr, lock = _get(arrangement_id)
    with lock:
        return {"id": arrangement_id, **arrangement_to_dict(arr)}


@app.post("/api/arrangements/{arrangement_id}/rects")
def add_rect(arrangement_id: str, req: AddRectRequest):
    """Place one rectangle and return it."""
    arr, lock = _get(arrangement_id)
    with lock:
        try:
            placed = arr.add_rect(req.area, req.aspect)
        except ValueError as e:
            raise HTTPException(422, str(e))
        except PlacementError as e:
            raise HTTPException(409, str(e))
        return {"index": len(arr) - 1, **rect_to_dict(placed)}


@app.delete("/api/arrangements/{arrangement_id}")
def delete_arrangement(arrangement_id: str):
    with _registry_lock:
        if _arrangements.pop(arrangement_id, None) is None:
            raise HTTPException(404, f"Arrangement '{arrangement_id}' not found.")
    return {"status": "ok"}


# ── Entry point ────────────────────────────────────────────────────

def main(host: str = "127.0.0.1", port: int = 8000):
    import uvicorn
    uvicorn.run("orthopack.web.server:app", host=host, port=port, reload=False)


if __name__ == "__main__":
    main()
