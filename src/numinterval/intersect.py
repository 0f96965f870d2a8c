"""Intersection of two intervals expressed as lower/upper edge pairs.

An interval is reduced to ``(lower, upper)`` where each side is an
:class:`Edge` or ``None`` when unbounded. An inverted pair (lower value
above upper value) stands for the two rays ``x < upper`` and ``x > lower``.

:func:`intersect_edges` never mutates its inputs. It returns the new pair,
``None`` when the operands share no point, or raises
:class:`MultiRangeResultError` when the result would be two disjoint pieces.
"""

import logging
from typing import NamedTuple

from numinterval.errors import MalformedIntervalError, MultiRangeResultError
from numinterval.shape import Number, Shape, classify

logger = logging.getLogger(__name__)

_TWO_RANGES_MESSAGE = (
    "This intersection results in two output intervals, "
    "which cannot be represented by a single interval"
)


class Edge(NamedTuple):
    value: Number
    inclusive: bool = False


Edges = tuple[Edge | None, Edge | None]


def shape_of(edges: Edges) -> Shape:
    lower, upper = edges
    return classify(
        None if lower is None else lower.value,
        None if upper is None else upper.value,
    )


def _require_both(edges: Edges) -> tuple[Edge, Edge]:
    lower, upper = edges
    if lower is None or upper is None:
        raise MalformedIntervalError(
            f"Expected both bounds to be defined, got {edges!r}"
        )
    return lower, upper


def _tighter_lower(a: Edge, b: Edge) -> Edge:
    if a.value == b.value:
        return Edge(a.value, a.inclusive and b.inclusive)
    return a if a.value > b.value else b


def _tighter_upper(a: Edge, b: Edge) -> Edge:
    if a.value == b.value:
        return Edge(a.value, a.inclusive and b.inclusive)
    return a if a.value < b.value else b


def _looser_lower(a: Edge, b: Edge) -> Edge:
    if a.value == b.value:
        return Edge(a.value, a.inclusive or b.inclusive)
    return a if a.value < b.value else b


def _looser_upper(a: Edge, b: Edge) -> Edge:
    if a.value == b.value:
        return Edge(a.value, a.inclusive or b.inclusive)
    return a if a.value > b.value else b


def _meets(lower: Edge, upper: Edge) -> bool:
    """Whether some x lies above ``lower`` and below ``upper``."""
    if lower.value == upper.value:
        return lower.inclusive and upper.inclusive
    return lower.value < upper.value


def _one_sided_pair(first: Edges, second: Edges) -> Edges | None:
    lower1, upper1 = first
    lower2, upper2 = second

    if upper1 is not None and upper2 is not None:
        return (None, _looser_upper(upper1, upper2))
    if lower1 is not None and lower2 is not None:
        return (_looser_lower(lower1, lower2), None)

    lower = lower1 if lower1 is not None else lower2
    upper = upper1 if upper1 is not None else upper2
    if lower is None or upper is None:
        raise MalformedIntervalError(
            f"One-sided intersection without bounds: {first!r}, {second!r}"
        )
    if upper.value > lower.value:
        return (lower, upper)
    return None


def _bounded_bounded(first: Edges, second: Edges) -> Edges | None:
    lower1, upper1 = _require_both(first)
    lower2, upper2 = _require_both(second)
    lower = _tighter_lower(lower1, lower2)
    upper = _tighter_upper(upper1, upper2)
    if upper.value < lower.value:
        return None
    return (lower, upper)


def _bounded_one_sided(bounded: Edges, one_sided: Edges) -> Edges | None:
    lower, upper = _require_both(bounded)
    foreign_lower, foreign_upper = one_sided

    if foreign_upper is not None:
        if not _meets(lower, foreign_upper):
            return None
        return (lower, _tighter_upper(upper, foreign_upper))

    if foreign_lower is None:
        raise MalformedIntervalError(
            f"Expected a one-sided interval, got {one_sided!r}"
        )
    if not _meets(foreign_lower, upper):
        return None
    return (_tighter_lower(lower, foreign_lower), upper)


def _inverted_inverted(first: Edges, second: Edges) -> Edges:
    above1, below1 = _require_both(first)
    above2, below2 = _require_both(second)

    # Taking the larger min and smaller max alone is only right when each
    # excluded middle overlaps the other. Otherwise a bounded piece
    # survives between them.
    if _meets(above1, below2) or _meets(above2, below1):
        raise MultiRangeResultError(_TWO_RANGES_MESSAGE)

    return (_tighter_lower(above1, above2), _tighter_upper(below1, below2))


def _inverted_bounded(inverted: Edges, bounded: Edges) -> Edges | None:
    above, below = _require_both(inverted)
    lower, upper = _require_both(bounded)

    meets_low_ray = _meets(lower, below)
    meets_high_ray = _meets(above, upper)

    if meets_low_ray and meets_high_ray:
        raise MultiRangeResultError(_TWO_RANGES_MESSAGE)
    if meets_low_ray:
        return (lower, _tighter_upper(upper, below))
    if meets_high_ray:
        return (_tighter_lower(lower, above), upper)
    return None


def _inverted_one_sided(inverted: Edges, one_sided: Edges) -> Edges:
    above, below = _require_both(inverted)
    foreign_lower, foreign_upper = one_sided

    if foreign_upper is not None:
        if _meets(above, foreign_upper):
            raise MultiRangeResultError(_TWO_RANGES_MESSAGE)
        if foreign_upper.value <= below.value:
            return (above, _tighter_upper(below, foreign_upper))
        return inverted

    if foreign_lower is None:
        raise MalformedIntervalError(
            f"Expected a one-sided interval, got {one_sided!r}"
        )
    if _meets(foreign_lower, below):
        raise MultiRangeResultError(_TWO_RANGES_MESSAGE)
    if foreign_lower.value >= above.value:
        return (_tighter_lower(above, foreign_lower), below)
    return inverted


def _is_point(edges: Edges) -> bool:
    lower, upper = edges
    return (
        lower is not None and upper is not None and lower.value == upper.value
    )


def _closed(edges: Edges) -> Edges:
    lower, upper = _require_both(edges)
    return (Edge(lower.value, True), Edge(upper.value, True))


def intersect_edges(first: Edges, second: Edges) -> Edges | None:
    """Intersect two edge pairs.

    Returns the combined ``(lower, upper)`` pair, or ``None`` when there is
    no intersection. Raises ``MultiRangeResultError`` when the intersection
    consists of two disjoint ranges.

    A single point contains itself whatever its flags, so it is matched as
    a closed point and, when anything is shared, returned unchanged.
    """
    first_shape = shape_of(first)
    second_shape = shape_of(second)
    logger.debug(
        "Intersecting %s interval %r with %s interval %r",
        first_shape.value,
        first,
        second_shape.value,
        second,
    )

    if _is_point(first) or _is_point(second):
        point = first if _is_point(first) else second
        result = _dispatch(
            (first_shape, second_shape),
            _closed(first) if _is_point(first) else first,
            _closed(second) if _is_point(second) else second,
        )
        if result is not None:
            result = point
    else:
        result = _dispatch((first_shape, second_shape), first, second)

    if result is None:
        logger.debug("No intersection")
    else:
        logger.debug("Intersection is %r", result)
    return result


def _dispatch(
    shapes: tuple[Shape, Shape], first: Edges, second: Edges
) -> Edges | None:
    result: Edges | None
    match shapes:
        case (Shape.UNBOUNDED, _):
            result = second
        case (_, Shape.UNBOUNDED):
            result = first
        case (Shape.INVERTED, Shape.INVERTED):
            result = _inverted_inverted(first, second)
        case (Shape.INVERTED, Shape.BOUNDED):
            result = _inverted_bounded(first, second)
        case (Shape.BOUNDED, Shape.INVERTED):
            result = _inverted_bounded(second, first)
        case (Shape.INVERTED, _):
            result = _inverted_one_sided(first, second)
        case (_, Shape.INVERTED):
            result = _inverted_one_sided(second, first)
        case (Shape.BOUNDED, Shape.BOUNDED):
            result = _bounded_bounded(first, second)
        case (Shape.BOUNDED, _):
            result = _bounded_one_sided(first, second)
        case (_, Shape.BOUNDED):
            result = _bounded_one_sided(second, first)
        case _:
            result = _one_sided_pair(first, second)

    return result
