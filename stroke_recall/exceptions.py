"""Exceptions raised by the stroke_recall package."""


class StrokeRecallError(Exception):
    """Base class for stroke_recall errors."""


class StrokeTooShortError(StrokeRecallError, ValueError):
    """A stroke has fewer points than the comparison minimum."""

    def __init__(self, kind: str, count: int, minimum: int):
        self.kind = kind
        self.count = count
        self.minimum = minimum
        super().__init__(
            f"{kind} stroke has {count} points, at least {minimum} required"
        )


class NoReferenceError(StrokeRecallError):
    """A memory stroke was submitted before any reference trace."""


class SessionStoreError(StrokeRecallError):
    """The session database could not be read or written."""


class NonFiniteStrokeError(StrokeRecallError, ValueError):
    """A stroke contains a NaN or infinite coordinate."""

    def __init__(self, kind: str, index: int):
        self.kind = kind
        self.index = index
        super().__init__(f"{kind} stroke has a non-finite coordinate at point {index}")
