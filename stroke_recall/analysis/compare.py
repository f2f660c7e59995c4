"""Trace-versus-memory stroke comparison.

This module turns two raw freehand strokes into an AnalysisResult:

    1. Resample both strokes to the same point count, so index ``i`` on one
       stroke corresponds to the same fraction of arc length on the other.
    2. Normalize both strokes independently, removing canvas position and
       drawing size.
    3. Measure the distance between each pair of index-aligned points.
    4. Convert the mean distance into a 0-100 score with a linear penalty.

Limitations:
    Arc-length correspondence is not true point correspondence. Two strokes
    of the same shape whose detail is distributed differently along the
    path (for example a loop drawn with a longer lead-in) can score lower
    than they look. Rotation is deliberately not normalized: a shape drawn
    at a different orientation is an accuracy error.

Typical usage:
    from stroke_recall.analysis.compare import analyze

    result = analyze(trace_points, memory_points)
    print(f"score={result.score:.1f}")
"""

from __future__ import annotations

import logging

import numpy as np

from ..config import CANONICAL_SIZE, MAX_SCORE, SAMPLE_COUNT, SCORE_SENSITIVITY
from ..domain.geometry import StrokeLike
from ..domain.result import AnalysisResult
from .normalize import normalize, stroke_to_array
from .resample import resample

logger = logging.getLogger(__name__)


def score_from_diffs(diffs: np.ndarray,
                     sensitivity: float = SCORE_SENSITIVITY) -> float:
    """Linear penalty score: ``clamp(100 - mean(diffs) * sensitivity, 0, 100)``.

    An empty diff array scores ``MAX_SCORE``; a NaN mean (from non-finite
    input coordinates) scores 0.
    """
    if len(diffs) == 0:
        return MAX_SCORE
    raw = MAX_SCORE - float(np.mean(diffs)) * sensitivity
    if np.isnan(raw):
        return 0.0
    return float(np.clip(raw, 0.0, MAX_SCORE))


def analyze(trace: StrokeLike, memory: StrokeLike,
            n: int = SAMPLE_COUNT,
            sensitivity: float = SCORE_SENSITIVITY) -> AnalysisResult:
    """Compare a memory stroke against the reference trace.

    Args:
        trace: Raw trace stroke (points in canvas coordinates).
        memory: Raw memory stroke (points in canvas coordinates).
        n: Number of points both strokes are resampled to.
        sensitivity: Score penalty per unit of mean normalized distance.

    Returns:
        AnalysisResult with ``n`` diffs and ``n`` points in every stroke.
        The raw strokes stay in canvas coordinates for display; the score
        is computed on the normalized strokes only.

    Note:
        The caller enforces a minimum stroke length. Degenerate strokes are
        passed through the resampler unchanged and only compared over the
        indices both strokes actually have.
    """
    raw_trace = resample(trace, n)
    raw_memory = resample(memory, n)

    norm_trace = normalize(raw_trace, CANONICAL_SIZE)
    norm_memory = normalize(raw_memory, CANONICAL_SIZE)

    a = stroke_to_array(norm_trace)
    b = stroke_to_array(norm_memory)
    count = min(len(a), len(b))
    diffs = np.hypot(*(a[:count] - b[:count]).T) if count else np.zeros(0)

    score = score_from_diffs(diffs, sensitivity)
    logger.debug("analyze: n=%d trace=%d memory=%d mean_diff=%.3f score=%.2f",
                 n, len(raw_trace), len(raw_memory),
                 float(np.mean(diffs)) if count else 0.0, score)

    return AnalysisResult(
        score=score,
        diffs=tuple(float(d) for d in diffs),
        normalized_trace=norm_trace,
        normalized_memory=norm_memory,
        raw_trace=raw_trace,
        raw_memory=raw_memory,
    )
