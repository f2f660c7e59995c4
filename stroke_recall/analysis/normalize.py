"""Position and scale normalization of resampled strokes."""

from __future__ import annotations

import numpy as np

from ..config import CANONICAL_SIZE
from ..domain.geometry import Point, Stroke, StrokeLike


def stroke_to_array(stroke: StrokeLike) -> np.ndarray:
    """Convert a stroke to an ``(n, 2)`` float array."""
    s = Stroke.coerce(stroke)
    if not s.points:
        return np.zeros((0, 2), dtype=float)
    return np.array([p.to_tuple() for p in s.points], dtype=float)


def array_to_stroke(arr: np.ndarray) -> Stroke:
    """Convert an ``(n, 2)`` array back to a Stroke of plain floats."""
    return Stroke([Point(float(x), float(y)) for x, y in arr])


def normalize(stroke: StrokeLike, size: float = CANONICAL_SIZE) -> Stroke:
    """Center a stroke on the origin and scale it to a canonical size.

    The bounding-box center moves to ``(0, 0)`` and both axes are scaled by
    the same factor so that the longer bounding-box side equals ``size``.
    Aspect ratio and orientation are preserved; rotation is not normalized.

    Args:
        stroke: Stroke to normalize, usually the output of ``resample``.
        size: Canonical length of the longer bounding-box side.

    Returns:
        A new Stroke with the same number of points. An empty stroke
        returns an empty Stroke. Extents below 1 unit use a divisor of 1,
        so a single point or a zero-extent stroke maps to the origin
        without division by zero.
    """
    arr = stroke_to_array(stroke)
    if len(arr) == 0:
        return Stroke([])

    lo = arr.min(axis=0)
    hi = arr.max(axis=0)
    extent = hi - lo
    center = lo + extent / 2

    scale = size / max(extent[0], extent[1], 1.0)
    return array_to_stroke((arr - center) * scale)
