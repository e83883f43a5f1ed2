"""Distance metrics used to rank placements against the center."""

from __future__ import annotations

import math
from typing import Callable, Sequence

Point = Sequence[float]


def euclidean(p: Point, q: Point) -> float:
    return math.hypot(p[0] - q[0], p[1] - q[1])


def chessboard(p: Point, q: Point) -> float:
    return max(abs(p[0] - q[0]), abs(p[1] - q[1]))


def manhattan(p: Point, q: Point) -> float:
    return abs(p[0] - q[0]) + abs(p[1] - q[1])


METRIC_FUNCS: dict[str, Callable[[Point, Point], float]] = {
    "euclidean": euclidean,
    "chessboard": chessboard,
    "manhattan": manhattan,
}


def get_metric(name: str) -> Callable[[Point, Point], float]:
    try:
        return METRIC_FUNCS[name]
    except KeyError:
        raise ValueError(f"Unknown metric '{name}'") from None
