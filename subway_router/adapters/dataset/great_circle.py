"""Great-circle distance adapter.

Wraps geopy's great-circle formula with the configured Earth radius
and memoizes each station pair, since the adjacency walk measures the
same consecutive segments once per upstream station.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from geopy.distance import great_circle

from ...config import DatasetConfig, get_config
from ...domain.models import GeoLocation
from ...ports.cache import CachePort
from ..cache.memory_cache import InMemoryCache

Point = Tuple[float, float]


def _pair_key(a: GeoLocation, b: GeoLocation) -> Tuple[Point, Point]:
    first, second = sorted((a.as_point(), b.as_point()))
    return first, second


@dataclass
class GreatCircleDistance:
    """Distance between coordinates along a sphere.

    This adapter implements GeoDistancePort.

    Attributes:
        config: Dataset configuration (Earth radius)
        cache: Cache for already measured pairs
    """

    config: DatasetConfig = field(default_factory=lambda: get_config().dataset)
    cache: CachePort[float] = field(
        default_factory=lambda: InMemoryCache(name="great_circle")
    )

    def distance_km(self, a: GeoLocation, b: GeoLocation) -> float:
        """Return the great-circle distance between ``a`` and ``b`` in km."""
        return self.cache.get_or_compute(
            _pair_key(a, b),
            lambda: great_circle(
                a.as_point(), b.as_point(), radius=self.config.earth_radius_km
            ).km,
        )
