import math
import re

from numinterval.models import Interval
from numinterval.render import ERROR_MARKER
from numinterval.shape import Number

_NUMBER = r"[+\-]?(?:inf|(?:\d+(?:\.\d*)?|\.\d+)(?:e[+\-]?\d+)?)"

_DEGENERATE_RE = re.compile(rf"^==\s*(?P<value>{_NUMBER})$", re.IGNORECASE)
_INVERTED_RE = re.compile(
    rf"^<(?P<inc_max>=?)\s*(?P<max>{_NUMBER})\s+and\s+"
    rf">(?P<inc_min>=?)\s*(?P<min>{_NUMBER})$",
    re.IGNORECASE,
)
_BRACKETED_RE = re.compile(
    rf"^(?P<open>[\[(])\s*(?P<min>{_NUMBER})\s*,\s*"
    rf"(?P<max>{_NUMBER})\s*(?P<close>[\])])$",
    re.IGNORECASE,
)
_ONE_SIDED_RE = re.compile(
    rf"^(?P<op>[<>])(?P<inc>=?)\s*(?P<value>{_NUMBER})$", re.IGNORECASE
)


def parse_number(raw: str) -> Number:
    """Parse a bound, keeping integer-looking tokens as ``int``."""
    token = raw.strip()
    if "." not in token and "e" not in token.lower():
        try:
            return int(token)
        except ValueError:
            pass
    value = float(token)
    if math.isnan(value):
        raise ValueError(f"Invalid number '{raw}': NaN is not allowed")
    return value


def parse_interval(text: str) -> Interval:
    """Parse the canonical text form produced by ``render_interval``.

    The positive-definite shorthand parses back as a plain upper-bounded
    interval. The error marker of an unbounded interval is rejected.
    """
    stripped = text.strip()
    if stripped == ERROR_MARKER:
        raise ValueError(
            f"Invalid interval '{text}': an unbounded interval has no "
            "text form"
        )

    match = _DEGENERATE_RE.match(stripped)
    if match:
        value = parse_number(match["value"])
        return Interval(min=value, max=value)

    match = _INVERTED_RE.match(stripped)
    if match:
        return Interval(
            min=parse_number(match["min"]),
            max=parse_number(match["max"]),
            inc_min=bool(match["inc_min"]),
            inc_max=bool(match["inc_max"]),
        )

    match = _BRACKETED_RE.match(stripped)
    if match:
        return Interval(
            min=parse_number(match["min"]),
            max=parse_number(match["max"]),
            inc_min=match["open"] == "[",
            inc_max=match["close"] == "]",
        )

    match = _ONE_SIDED_RE.match(stripped)
    if match:
        value = parse_number(match["value"])
        inclusive = bool(match["inc"])
        if match["op"] == ">":
            return Interval(min=value, inc_min=inclusive)
        return Interval(max=value, inc_max=inclusive)

    raise ValueError(
        f"Invalid interval '{text}': expected e.g. '[5,10)', '>=5', '<4', "
        "'==3' or '<1 and >5'"
    )
