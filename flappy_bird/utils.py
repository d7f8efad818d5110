"""Geometry and color utility functions used across the game."""

from __future__ import annotations

import numpy as np


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp a numeric value into the inclusive range [lo, hi]."""
    return max(lo, min(hi, value))


def spans_overlap(a_start: float, a_end: float, b_start: float, b_end: float) -> bool:
    """True if the half-open spans [a_start, a_end) and [b_start, b_end) share any point."""
    return a_start < b_end and a_end > b_start


def span_within(inner_start: float, inner_end: float, outer_start: float, outer_end: float) -> bool:
    """True if [inner_start, inner_end] lies fully inside [outer_start, outer_end]."""
    return inner_start >= outer_start and inner_end <= outer_end


def vertical_gradient(
    w: int,
    h: int,
    top: tuple[int, int, int],
    bottom: tuple[int, int, int],
) -> np.ndarray:
    """Build a top-to-bottom RGB gradient as a (w, h, 3) array for surfarray."""
    t = np.linspace(0.0, 1.0, h, dtype=np.float32)[:, None]
    rows = np.asarray(top, dtype=np.float32) * (1.0 - t) + np.asarray(bottom, dtype=np.float32) * t
    rgb = np.clip(np.rint(rows), 0, 255).astype(np.uint8)
    return np.broadcast_to(rgb[None, :, :], (w, h, 3)).copy()
