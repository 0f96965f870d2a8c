"""numinterval: numeric intervals with open, closed, one-sided and inverted
bounds, and in-place intersection."""

from numinterval.errors import (
    IntervalError,
    MalformedIntervalError,
    MultiRangeResultError,
)
from numinterval.intersect import Edge, intersect_edges
from numinterval.models import Interval
from numinterval.parse import parse_interval
from numinterval.render import render_interval
from numinterval.shape import Shape, classify

__all__ = [
    "Edge",
    "Interval",
    "IntervalError",
    "MalformedIntervalError",
    "MultiRangeResultError",
    "Shape",
    "classify",
    "intersect_edges",
    "parse_interval",
    "render_interval",
]
