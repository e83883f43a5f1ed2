"""Packer output dataclasses and errors."""

from __future__ import annotations

from dataclasses import dataclass

from orthopack.geometry import VertexList, rectangle


@dataclass(frozen=True)
class PlacedRect:
    """An accepted rectangle: min corner plus side lengths."""

    x: float
    y: float
    width: float
    height: float

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)

    @property
    def area(self) -> float:
        return self.width * self.height

    def to_vertex_list(self) -> VertexList:
        return rectangle((self.x, self.y), (self.width, self.height))

    def overlaps(self, other: PlacedRect) -> bool:
        """Strict interior overlap; touching edges do not count."""
        return (
            min(self.x + self.width, other.x + other.width) > max(self.x, other.x)
            and min(self.y + self.height, other.y + other.height) > max(self.y, other.y)
        )


class PlacementError(Exception):
    """Raised when no valid position exists for a new rectangle."""

    def __init__(self, area: float, aspect: float, reason: str) -> None:
        self.area = area
        self.aspect = aspect
        self.reason = reason
        super().__init__(f"Cannot place rect (area={area:g}, aspect={aspect:g}): {reason}")
