"""Distance value types used as edge weights.

A distance is a totally ordered, additive value with an identity
element. Instances are validated once, in their constructor; every
other part of the package treats a constructed distance as valid and
never re-checks it.

Distances are expected to be non-negative, but the types themselves do
not enforce it: only the shortest-path engine relies on that property.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Any, Iterable, Protocol, Type, TypeVar

from ..domain.errors import InvalidDistanceError

D = TypeVar("D", bound="Distance")


class Distance(Protocol):
    """Protocol for edge weights consumed by the graph and Dijkstra."""

    def __add__(self: D, other: D) -> D:
        ...

    def __lt__(self, other: Any) -> bool:
        ...

    def __le__(self, other: Any) -> bool:
        ...

    @classmethod
    def zero(cls: Type[D]) -> D:
        """Return the additive identity."""
        ...


@dataclass(frozen=True, order=True, slots=True)
class FloatDistance:
    """Floating-point distance; NaN is rejected at construction.

    Examples:
        >>> FloatDistance(1.5) + FloatDistance(2)
        FloatDistance(value=3.5)
        >>> FloatDistance.zero() < FloatDistance(0.1)
        True
    """

    value: float

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, numbers.Real):
            raise InvalidDistanceError(
                f"Distance must be a real number, got {self.value!r}",
                value=self.value,
            )
        if math.isnan(self.value):
            raise InvalidDistanceError("Distance cannot be NaN", value=self.value)
        object.__setattr__(self, "value", float(self.value))

    @classmethod
    def zero(cls) -> FloatDistance:
        return cls(0.0)

    def __add__(self, other: FloatDistance) -> FloatDistance:
        if not isinstance(other, FloatDistance):
            return NotImplemented
        return FloatDistance(self.value + other.value)

    def __float__(self) -> float:
        return self.value

    def __str__(self) -> str:
        return f"{self.value:g}"


@dataclass(frozen=True, order=True, slots=True)
class IntDistance:
    """Integral distance, e.g. a hop count or meters."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, numbers.Integral):
            raise InvalidDistanceError(
                f"Distance must be an integer, got {self.value!r}",
                value=self.value,
            )
        object.__setattr__(self, "value", int(self.value))

    @classmethod
    def zero(cls) -> IntDistance:
        return cls(0)

    def __add__(self, other: IntDistance) -> IntDistance:
        if not isinstance(other, IntDistance):
            return NotImplemented
        return IntDistance(self.value + other.value)

    def __int__(self) -> int:
        return self.value

    def __float__(self) -> float:
        return float(self.value)

    def __str__(self) -> str:
        return str(self.value)


_DISTANCE_TYPES = (FloatDistance, IntDistance)


def is_distance_type(cls: Any) -> bool:
    """Check that ``cls`` can weight edges, i.e. provides ``zero()``."""
    return isinstance(cls, type) and callable(getattr(cls, "zero", None))


def coerce_distance(raw: Any, distance_type: Type[D]) -> D:
    """Build a distance of ``distance_type`` from a raw value.

    Existing instances of ``distance_type`` pass through unchanged.

    Raises:
        InvalidDistanceError: If ``raw`` is NaN, of the wrong kind, or a
            distance of another type.
    """
    if isinstance(raw, distance_type):
        return raw
    if isinstance(raw, _DISTANCE_TYPES):
        raise InvalidDistanceError(
            f"Cannot mix {type(raw).__name__} with {distance_type.__name__}",
            value=raw,
        )
    return distance_type(raw)  # type: ignore[call-arg]


def sum_distances(distances: Iterable[D], distance_type: Type[D]) -> D:
    """Add ``distances`` together, starting from ``distance_type.zero()``."""
    total = distance_type.zero()
    for distance in distances:
        total = total + distance
    return total
