"""Shared tolerances and packing options.

The geometry layer (vertex lists, morphology, spatial index) and the
packer both read their numeric policy from here, so changing a value
keeps every stage consistent.
"""

from __future__ import annotations

from dataclasses import dataclass, fields


# ── Numeric policy ─────────────────────────────────────────────────

WEIGHT_TOLERANCE = 1e-9
"""A summed vertex weight with ``abs(w) <= WEIGHT_TOLERANCE`` is zero.

Weights are small integers in practice (±1 corners, sums of a few of
them), so this only absorbs drift from repeated float accumulation.
Positions are compared exactly."""

ERODE_MARGIN = 10.0
"""Margin of the frame box that erosion embeds a region in."""


def is_zero(weight: float) -> bool:
    return abs(weight) <= WEIGHT_TOLERANCE


# ── Packing options ────────────────────────────────────────────────

HEURISTICS = ("first", "best")
METRICS = ("euclidean", "chessboard", "manhattan")

# camelCase keys sent by the web caller
_OPTION_ALIASES = {
    "closeFrequency": "close_frequency",
    "closeFreq": "close_frequency",
    "closeFactor": "close_factor",
    "close_freq": "close_frequency",
}


@dataclass(frozen=True)
class PackingOptions:
    """Tunables for one rectangle arrangement."""

    heuristic: str = "first"
    """``"first"`` stops at the first boundary vertex that yields a valid
    placement; ``"best"`` scans every vertex for the closest one."""

    metric: str = "euclidean"
    """Distance used to rank vertices and candidates against the center."""

    close_frequency: int = 1
    """Close the union region after every N-th placed rect."""

    close_factor: float = 0.5
    """Closing radius as a fraction of the new rect's half-diagonal."""

    def __post_init__(self) -> None:
        if self.heuristic not in HEURISTICS:
            raise ValueError(
                f"Unknown heuristic '{self.heuristic}' (expected one of {HEURISTICS})"
            )
        if self.metric not in METRICS:
            raise ValueError(
                f"Unknown metric '{self.metric}' (expected one of {METRICS})"
            )
        if isinstance(self.close_frequency, bool) or not isinstance(self.close_frequency, int) \
                or self.close_frequency < 1:
            raise ValueError(
                f"close_frequency must be an integer >= 1, got {self.close_frequency!r}"
            )
        if not self.close_factor > 0:
            raise ValueError(f"close_factor must be > 0, got {self.close_factor!r}")

    @classmethod
    def from_dict(cls, data: dict | None) -> PackingOptions:
        """Build options from a dict, accepting camelCase aliases."""
        if not data:
            return cls()
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in data.items():
            name = _OPTION_ALIASES.get(key, key)
            if name not in known:
                raise ValueError(f"Unknown packing option '{key}'")
            kwargs[name] = value
        return cls(**kwargs)

    def to_dict(self) -> dict:
        return {
            "heuristic": self.heuristic,
            "metric": self.metric,
            "close_frequency": self.close_frequency,
            "close_factor": self.close_factor,
        }


# Module-level default, importable everywhere.
DEFAULT_OPTIONS = PackingOptions()
