"""Locate where along a stroke the memory drawing went wrong.

The per-point diff profile is split into thirds (start, middle, end) and
the third with the highest mean error is reported. Advice generators use
the region name to phrase feedback such as "the end of the stroke drifted".
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence


class ErrorRegion(Enum):
    START = 'start'
    MIDDLE = 'middle'
    END = 'end'
    THROUGHOUT = 'throughout'


@dataclass(frozen=True)
class ErrorRegionSummary:
    """Mean error per third of the stroke and the worst region."""
    start: float
    middle: float
    end: float
    region: ErrorRegion

    def to_dict(self) -> dict:
        return {
            'start': self.start,
            'middle': self.middle,
            'end': self.end,
            'region': self.region.value,
        }


def summarize_error_regions(diffs: Sequence[float]) -> ErrorRegionSummary:
    """Average the diffs over each third and name the worst third.

    Each third is averaged over ``len(diffs) // 3`` samples; the last third
    absorbs any remainder in its sum. A region wins only if its mean is
    strictly greater than both others; ties report ``THROUGHOUT``.

    Raises:
        ValueError: If fewer than 3 diffs are given.
    """
    values = [float(d) for d in diffs]
    part = len(values) // 3
    if part == 0:
        raise ValueError(f"need at least 3 diffs to locate errors, got {len(values)}")

    start = sum(values[:part]) / part
    middle = sum(values[part:2 * part]) / part
    end = sum(values[2 * part:]) / part

    if start > middle and start > end:
        region = ErrorRegion.START
    elif middle > start and middle > end:
        region = ErrorRegion.MIDDLE
    elif end > start and end > middle:
        region = ErrorRegion.END
    else:
        region = ErrorRegion.THROUGHOUT

    return ErrorRegionSummary(start=start, middle=middle, end=end, region=region)
