"""Service layer for trace-then-recall practice sessions.

ComparisonService owns the flow the interactive front end drives:

    1. ``set_reference`` records the trace made over the reference image.
    2. ``submit_memory`` compares a from-memory drawing with that trace,
       records whether the hint overlay was used and persists the result.
    3. ``resume`` restores the last trace and result from the store.

The service validates stroke lengths and coordinates before comparison; the comparison
algorithms themselves accept any input.

Example usage::

    from stroke_recall.api import ComparisonService, SessionStore

    service = ComparisonService(SessionStore('/data/stroke_recall.db'))
    service.set_reference(trace_points)
    result = service.submit_memory(memory_points, hint_used=False)
    print(result.score, service.error_summary(result).region.value)
"""

from __future__ import annotations

import logging
import math
from typing import Optional

from ..analysis.compare import analyze
from ..analysis.regions import ErrorRegionSummary, summarize_error_regions
from ..config import MIN_STROKE_POINTS, SAMPLE_COUNT, SCORE_SENSITIVITY
from ..domain.geometry import Stroke, StrokeLike
from ..domain.result import AnalysisResult
from ..exceptions import NoReferenceError, NonFiniteStrokeError, StrokeTooShortError
from .store import SessionStore

_logger = logging.getLogger(__name__)


class ComparisonService:
    """Stateful wrapper around ``analyze`` for one practice session.

    Attributes:
        store: Optional SessionStore. Without one, nothing is persisted.
        min_points: Minimum number of points a stroke must have.
        sample_count: Resampling count passed to ``analyze``.
        sensitivity: Score sensitivity passed to ``analyze``.
        reference: Current reference trace, or None.
        image: Current reference image as an opaque string, or None.
        last_result: Most recent AnalysisResult, or None.
    """

    def __init__(self, store: Optional[SessionStore] = None,
                 min_points: int = MIN_STROKE_POINTS,
                 sample_count: int = SAMPLE_COUNT,
                 sensitivity: float = SCORE_SENSITIVITY):
        self.store = store
        self.min_points = min_points
        self.sample_count = sample_count
        self.sensitivity = sensitivity
        self.reference: Optional[Stroke] = None
        self.image: Optional[str] = None
        self.last_result: Optional[AnalysisResult] = None

    def validate(self, stroke: StrokeLike, kind: str) -> Stroke:
        """Coerce a stroke and check it can be compared.

        Raises:
            StrokeTooShortError: If the stroke has fewer than ``min_points`` points.
            NonFiniteStrokeError: If any coordinate is NaN or infinite.
        """
        s = Stroke.coerce(stroke)
        if len(s) < self.min_points:
            raise StrokeTooShortError(kind, len(s), self.min_points)
        for i, p in enumerate(s):
            if not (math.isfinite(p.x) and math.isfinite(p.y)):
                raise NonFiniteStrokeError(kind, i)
        return s

    def set_reference(self, trace: StrokeLike, image: Optional[str] = None) -> Stroke:
        """Record the reference trace (and optionally its image).

        Returns:
            The validated trace as a Stroke.

        Raises:
            StrokeTooShortError: If the trace is too short.
            NonFiniteStrokeError: If the trace has a NaN or infinite coordinate.
        """
        stroke = self.validate(trace, 'trace')
        self.reference = stroke
        if image is not None:
            self.image = image
        if self.store is not None:
            self.store.save_trace(stroke)
            if image is not None:
                self.store.save_image(image)
        _logger.debug("Reference trace set: %d points, length=%.1f",
                      len(stroke), stroke.length())
        return stroke

    def submit_memory(self, memory: StrokeLike, hint_used: bool = False) -> AnalysisResult:
        """Compare a memory stroke with the reference and persist the result.

        Raises:
            NoReferenceError: If no reference trace has been set.
            StrokeTooShortError: If the memory stroke is too short.
            NonFiniteStrokeError: If the memory stroke has a NaN or infinite coordinate.
        """
        if self.reference is None:
            raise NoReferenceError("set a reference trace before submitting a memory stroke")
        stroke = self.validate(memory, 'memory')

        result = analyze(self.reference, stroke,
                         n=self.sample_count,
                         sensitivity=self.sensitivity).with_hint(hint_used)
        self.last_result = result
        if self.store is not None:
            self.store.save_result(result)
        _logger.info("Memory stroke scored %.1f (hint=%s)", result.score, hint_used)
        return result

    def error_summary(self, result: Optional[AnalysisResult] = None) -> ErrorRegionSummary:
        """Error-region summary for ``result`` or the last result.

        Raises:
            NoReferenceError: If there is no result to summarize.
        """
        result = result or self.last_result
        if result is None:
            raise NoReferenceError("no analysis result to summarize")
        return summarize_error_regions(result.diffs)

    def resume(self) -> Optional[AnalysisResult]:
        """Restore the last trace, image and result from the store.

        Returns:
            The restored result, or None if there is no store or no saved
            result. The trace and image are restored only alongside a
            result.
        """
        if self.store is None:
            return None
        result = self.store.load_result()
        if result is None:
            return None
        self.last_result = result
        trace = self.store.load_trace()
        if trace is not None:
            self.reference = trace
        image = self.store.load_image()
        if image is not None:
            self.image = image
        return result

    def reset(self) -> None:
        """Start over with a new reference.

        Clears in-memory state only; the store keeps the last result so it
        can still be resumed.
        """
        self.reference = None
        self.image = None
        self.last_result = None
