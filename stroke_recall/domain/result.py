"""Analysis result value object.

An AnalysisResult is produced once per comparison by
``stroke_recall.analysis.compare.analyze`` and is read-only afterwards.
It carries the score, the per-point error profile and both strokes in
normalized and original coordinates, so a caller can display overlays in
original proportions while the score reflects normalized shape error.

The dictionary form (``to_dict``/``from_dict``) uses the camelCase keys and
``{"x", "y"}`` points of the saved-session format, so results written by
older sessions load unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional, Tuple

from .geometry import Stroke


@dataclass(frozen=True)
class AnalysisResult:
    """Outcome of comparing a trace stroke with a memory stroke.

    Attributes:
        score: Similarity score, clamped to [0, 100].
        diffs: Per-point distances between the normalized strokes,
            index-aligned to every stroke below.
        normalized_trace: Trace stroke after resampling and normalization.
        normalized_memory: Memory stroke after resampling and normalization.
        raw_trace: Resampled trace stroke in original coordinates.
        raw_memory: Resampled memory stroke in original coordinates.
        is_hint_used: Whether the hint overlay was shown while drawing from
            memory. None when the caller never recorded it.
    """
    score: float
    diffs: Tuple[float, ...]
    normalized_trace: Stroke
    normalized_memory: Stroke
    raw_trace: Stroke
    raw_memory: Stroke
    is_hint_used: Optional[bool] = None

    @property
    def sample_count(self) -> int:
        return len(self.diffs)

    @property
    def mean_diff(self) -> float:
        if not self.diffs:
            return 0.0
        return sum(self.diffs) / len(self.diffs)

    def with_hint(self, used: bool) -> AnalysisResult:
        """Copy of this result with the hint flag set."""
        return replace(self, is_hint_used=bool(used))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        data = {
            'score': float(self.score),
            'diffs': [float(d) for d in self.diffs],
            'normalizedTrace': self.normalized_trace.to_dicts(),
            'normalizedMemory': self.normalized_memory.to_dicts(),
            'rawTrace': self.raw_trace.to_dicts(),
            'rawMemory': self.raw_memory.to_dicts(),
        }
        if self.is_hint_used is not None:
            data['isHintUsed'] = self.is_hint_used
        return data

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> AnalysisResult:
        """Create from a dictionary produced by ``to_dict``.

        Raises:
            KeyError: If a required field is missing.
            TypeError, ValueError: If a field has the wrong shape.
        """
        hint = d.get('isHintUsed')
        return cls(
            score=float(d['score']),
            diffs=tuple(float(x) for x in d['diffs']),
            normalized_trace=Stroke.coerce(d['normalizedTrace']),
            normalized_memory=Stroke.coerce(d['normalizedMemory']),
            raw_trace=Stroke.coerce(d['rawTrace']),
            raw_memory=Stroke.coerce(d['rawMemory']),
            is_hint_used=None if hint is None else bool(hint),
        )
