from typing import TYPE_CHECKING

from numinterval.shape import Number

if TYPE_CHECKING:
    from numinterval.models import Interval

ERROR_MARKER = "**ERROR**"


def format_number(value: Number) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _lower_op(inclusive: bool) -> str:
    return ">=" if inclusive else ">"


def _upper_op(inclusive: bool) -> str:
    return "<=" if inclusive else "<"


def render_interval(interval: "Interval") -> str:
    """Render an interval in its canonical text form.

    ``==5`` for a single point, ``<1 and >5`` for an inverted interval,
    ``[5,10)`` for a bounded one and ``>=5`` / ``<4`` for one-sided ones.
    A positive-definite interval still anchored at zero renders as its
    upper bound alone. An interval with no bounds renders as
    ``ERROR_MARKER``.
    """
    lower = interval.min
    upper = interval.max

    if lower is not None and upper is not None:
        if lower == upper:
            return f"=={format_number(lower)}"
        if lower > upper:
            return (
                f"{_upper_op(interval.inc_max)}{format_number(upper)} and "
                f"{_lower_op(interval.inc_min)}{format_number(lower)}"
            )
        if interval.positive_definite and lower == 0:
            return f"{_upper_op(interval.inc_max)}{format_number(upper)}"
        opening = "[" if interval.inc_min else "("
        closing = "]" if interval.inc_max else ")"
        return (
            f"{opening}{format_number(lower)},{format_number(upper)}{closing}"
        )
    if lower is not None:
        return f"{_lower_op(interval.inc_min)}{format_number(lower)}"
    if upper is not None:
        return f"{_upper_op(interval.inc_max)}{format_number(upper)}"
    return ERROR_MARKER
