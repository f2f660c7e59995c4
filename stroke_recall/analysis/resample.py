"""Arc-length resampling of freehand strokes.

A raw stroke has whatever point spacing the input device produced: dense
where the hand moved slowly, sparse where it moved fast. Comparing two such
strokes point by point is meaningless until both are redistributed to the
same number of points at equal arc-length spacing. After resampling, index
``i`` on either stroke means "``i / (n - 1)`` of the way along the path".

Example:
    >>> from stroke_recall.analysis.resample import resample
    >>> out = resample([(0, 0), (100, 0), (100, 100)], 5)
    >>> [p.to_tuple() for p in out]
    [(0.0, 0.0), (50.0, 0.0), (100.0, 0.0), (100.0, 50.0), (100.0, 100.0)]
"""

from __future__ import annotations

import logging

from ..config import SAMPLE_COUNT
from ..domain.geometry import Stroke, StrokeLike

logger = logging.getLogger(__name__)


def resample(stroke: StrokeLike, n: int = SAMPLE_COUNT) -> Stroke:
    """Resample a stroke to ``n`` points evenly spaced by arc length.

    Walks the source polyline once with a cursor (current segment plus the
    distance already travelled) and places each output point by linear
    interpolation inside the segment that contains its target distance.
    Spacing is equal along the path, not in straight-line chord length, so
    consecutive output points sit closer together on curves.

    Args:
        stroke: Source stroke, or any sequence of points / ``(x, y)`` pairs.
        n: Number of output points. Must be at least 2.

    Returns:
        A Stroke with exactly ``n`` points whose first and last points are
        the source's first and last points. Strokes with fewer than two
        points are returned unchanged. A stroke whose points all coincide
        yields ``n`` copies of that point.

    Raises:
        ValueError: If ``n`` is less than 2.
    """
    if n < 2:
        raise ValueError(f"resample needs at least 2 output points, got {n}")

    src = Stroke.coerce(stroke)
    if src.is_degenerate:
        return src

    pts = src.points
    total = src.length()
    if total == 0.0:
        logger.debug("resample: zero-length stroke of %d points", len(pts))
        return Stroke([pts[0]] * n)

    interval = total / (n - 1)
    out = [pts[0]]

    travelled = 0.0      # arc length up to pts[seg_idx - 1]
    seg_idx = 1          # current segment is pts[seg_idx - 1] -> pts[seg_idx]
    seg_len = pts[0].distance_to(pts[1])
    last = len(pts) - 1

    for i in range(1, n - 1):
        target = i * interval
        while travelled + seg_len < target and seg_idx < last:
            travelled += seg_len
            seg_idx += 1
            seg_len = pts[seg_idx - 1].distance_to(pts[seg_idx])

        a = pts[seg_idx - 1]
        b = pts[seg_idx]
        if seg_len == 0.0:
            out.append(b)
            continue
        t = min(max((target - travelled) / seg_len, 0.0), 1.0)
        out.append(a.lerp(b, t))

    out.append(pts[-1])

    # Output length is always exactly n
    while len(out) < n:
        out.append(pts[-1])

    return Stroke(out)
