from enum import Enum

Number = int | float


class Shape(str, Enum):
    UNBOUNDED = "unbounded"
    LOWER = "lower"
    UPPER = "upper"
    BOUNDED = "bounded"
    INVERTED = "inverted"


def classify(lower: Number | None, upper: Number | None) -> Shape:
    """Classify a pair of optional bounds.

    ``LOWER`` means only a lower bound is present (unbounded above) and
    ``UPPER`` only an upper bound. A degenerate pair (equal bounds) is
    ``BOUNDED``.
    """
    if lower is None and upper is None:
        return Shape.UNBOUNDED
    if upper is None:
        return Shape.LOWER
    if lower is None:
        return Shape.UPPER
    if lower > upper:
        return Shape.INVERTED
    return Shape.BOUNDED
