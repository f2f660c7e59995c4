"""API layer for practice sessions.

    ComparisonService: Drives the trace, recall and score flow and
        validates stroke lengths.
    SessionStore: Persists the last trace, image and result in SQLite.

Example usage::

    from stroke_recall.api import ComparisonService, SessionStore

    service = ComparisonService(SessionStore('stroke_recall.db'))
    last = service.resume()
"""

from .services import ComparisonService
from .store import SessionStore

__all__ = ['ComparisonService', 'SessionStore']
