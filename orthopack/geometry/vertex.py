"""Signed weighted point — the building block of a vertex list.

A vertex with weight w at position p contributes w to the field value
of every point that p dominates (every coordinate of p <= the point's).
Vertices are treated as values: lists clone them before mutating.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence


def _check_dims(a: Sequence[float], b: Sequence[float]) -> None:
    if len(a) != len(b):
        raise ValueError(f"Dimension mismatch: {len(a)} vs {len(b)}")


@dataclass
class Vertex:
    """A vertex with weight ``weight`` and coordinates ``position``."""

    weight: float
    position: tuple[float, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        self.position = tuple(self.position)

    @property
    def dim(self) -> int:
        return len(self.position)

    @property
    def last_coord(self) -> float:
        return self.position[-1]

    def clone(self) -> Vertex:
        return Vertex(self.weight, self.position)

    # ── Axis rotation (in place) ───────────────────────────────────

    def rotate_axes_forward(self) -> Vertex:
        """Move the last coordinate to the front."""
        if self.position:
            self.position = self.position[-1:] + self.position[:-1]
        return self

    def rotate_axes_backward(self) -> Vertex:
        """Undo :meth:`rotate_axes_forward`."""
        if self.position:
            self.position = self.position[1:] + self.position[:1]
        return self

    # ── Ordering ───────────────────────────────────────────────────

    def scan_key(self) -> tuple[float, ...]:
        """Sort key equivalent to :meth:`compare`."""
        return self.position[::-1]

    def compare(self, other: Vertex) -> int:
        """Return -1, 0 or +1 as self precedes, ties or follows *other*
        in scanline order (last coordinate most significant)."""
        _check_dims(self.position, other.position)
        for a, b in zip(reversed(self.position), reversed(other.position)):
            if a < b:
                return -1
            if a > b:
                return 1
        return 0

    # ── Derived vertices ───────────────────────────────────────────

    def scale(self, scalar: float) -> Vertex:
        if scalar == 0:
            raise ValueError("Cannot scale a vertex by zero")
        return Vertex(self.weight * scalar, self.position)

    def project(self) -> Vertex:
        """Drop the last coordinate."""
        return Vertex(self.weight, self.position[:-1])

    def unproject(self, h: float) -> Vertex:
        """Append *h* as a new last coordinate."""
        return Vertex(self.weight, self.position + (h,))

    def dominates(self, point: Sequence[float]) -> bool:
        """True if *point* lies in the cone of this vertex."""
        _check_dims(self.position, point)
        return all(p <= q for p, q in zip(self.position, point))

    def translate(self, vector: Sequence[float]) -> Vertex:
        """Shift this vertex by *vector* (in place)."""
        _check_dims(self.position, vector)
        self.position = tuple(p + u for p, u in zip(self.position, vector))
        return self

    def __repr__(self) -> str:
        coords = ",".join(f"{c:g}" for c in self.position)
        return f"Vertex({self.weight:g}, [{coords}])"
