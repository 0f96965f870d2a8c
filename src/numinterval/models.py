import math
from typing import Any

from pydantic import BaseModel, ConfigDict, PrivateAttr, field_validator

from numinterval.errors import MalformedIntervalError
from numinterval.intersect import Edge, Edges, intersect_edges
from numinterval.render import render_interval
from numinterval.shape import Number, Shape, classify


class Interval(BaseModel):
    """A numeric interval.

    Either bound may be ``None`` (unbounded on that side) and each bound is
    exclusive unless its ``inc_*`` flag is set. When ``min`` is greater
    than ``max`` the interval is inverted and contains everything below
    ``max`` and everything above ``min``. Equal bounds denote a single
    point.

    ``positive_definite=True`` forces ``min`` to ``0`` at construction; it
    is remembered for rendering only and does not affect equality.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    min: Number | None = None
    max: Number | None = None
    inc_min: bool = False
    inc_max: bool = False

    _positive_definite: bool = PrivateAttr(default=False)

    def __init__(self, *, positive_definite: bool = False, **data: Any):
        if positive_definite:
            data["min"] = 0
        super().__init__(**data)
        self._positive_definite = bool(positive_definite)

    @field_validator("min", "max", mode="before")
    @classmethod
    def validate_bound(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("bool is not allowed for interval bounds")
        if isinstance(value, float) and math.isnan(value):
            raise ValueError("NaN is not allowed for interval bounds")
        return value

    @property
    def positive_definite(self) -> bool:
        return self._positive_definite

    # Accessors

    def set_min(self, value: Number | None) -> None:
        self.min = value

    def set_max(self, value: Number | None) -> None:
        self.max = value

    def minmax(self) -> tuple[Number | None, Number | None]:
        return (self.min, self.max)

    def set_minmax(self, lower: Number | None, upper: Number | None) -> None:
        self.min = lower
        self.max = upper

    def minmax_dict(self) -> dict[str, Number]:
        """Return the defined bounds keyed by ``"min"`` and ``"max"``."""
        bounds: dict[str, Number] = {}
        if self.min is not None:
            bounds["min"] = self.min
        if self.max is not None:
            bounds["max"] = self.max
        return bounds

    def set_minmax_dict(self, bounds: dict[str, Number | None]) -> None:
        """Set whichever of ``"min"`` and ``"max"`` appear in ``bounds``."""
        if "min" in bounds:
            self.min = bounds["min"]
        if "max" in bounds:
            self.max = bounds["max"]

    # Classification

    def shape(self) -> Shape:
        return classify(self.min, self.max)

    def is_inverted(self) -> bool:
        return self.shape() == Shape.INVERTED

    def is_bounded(self) -> bool:
        return self.min is not None and self.max is not None

    def is_degenerate(self) -> bool:
        return self.is_bounded() and self.min == self.max

    def size(self) -> Number | None:
        if self.min is None or self.max is None:
            return None
        return abs(self.max - self.min)

    # Membership

    def _above_min(self, value: Number) -> bool:
        if self.min is None:
            return True
        return value >= self.min if self.inc_min else value > self.min

    def _below_max(self, value: Number) -> bool:
        if self.max is None:
            return True
        return value <= self.max if self.inc_max else value < self.max

    def contains(self, value: Number) -> bool:
        """Check whether ``value`` lies within the interval."""
        if self.min is None and self.max is None:
            return True

        if self.is_inverted():
            if self.min is None or self.max is None:
                raise MalformedIntervalError(
                    "An interval can not be inverted with only one "
                    "defined bound"
                )
            return self._below_max(value) or self._above_min(value)

        if self.is_degenerate():
            return value == self.min

        return self._above_min(value) and self._below_max(value)

    # Intersection

    def edges(self) -> Edges:
        lower = None if self.min is None else Edge(self.min, self.inc_min)
        upper = None if self.max is None else Edge(self.max, self.inc_max)
        return (lower, upper)

    def intersection(self, other: object) -> bool:
        """Restrict this interval to the values it shares with ``other``.

        Returns ``True`` and updates this interval in place when the two
        intersect. Returns ``False`` and leaves it untouched when they do
        not, or when ``other`` is not an ``Interval``. Raises
        ``MultiRangeResultError`` (also leaving it untouched) when the
        intersection would be two disjoint ranges.
        """
        if not isinstance(other, Interval):
            return False

        result = intersect_edges(self.edges(), other.edges())
        if result is None:
            return False

        lower, upper = result
        self.min = None if lower is None else lower.value
        self.max = None if upper is None else upper.value
        self.inc_min = False if lower is None else lower.inclusive
        self.inc_max = False if upper is None else upper.inclusive
        return True

    # Equality and copying

    def equate(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return False
        return (
            self.min == other.min
            and self.max == other.max
            and self.inc_min == other.inc_min
            and self.inc_max == other.inc_max
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.equate(other)

    def __str__(self) -> str:
        return render_interval(self)

    def copy(self) -> "Interval":  # type: ignore[override]
        return self.model_copy(deep=True)
