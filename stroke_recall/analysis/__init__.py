"""Stroke comparison algorithms.

    resample: Redistribute a stroke to N points at equal arc-length spacing.
    normalize: Center a stroke on the origin and scale it to canonical size.
    analyze: Compare a memory stroke with a trace and score the similarity.
    summarize_error_regions: Find the third of the stroke with most error.
"""

from .compare import analyze, score_from_diffs
from .normalize import normalize
from .regions import ErrorRegion, ErrorRegionSummary, summarize_error_regions
from .resample import resample

__all__ = [
    'resample', 'normalize', 'analyze', 'score_from_diffs',
    'ErrorRegion', 'ErrorRegionSummary', 'summarize_error_regions',
]
