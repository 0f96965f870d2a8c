class IntervalError(ValueError):
    """Base class for interval errors."""


class MultiRangeResultError(IntervalError):
    """Raised when an intersection would need two disjoint output ranges."""


class MalformedIntervalError(IntervalError):
    """Raised when an interval is inverted without both bounds present."""
