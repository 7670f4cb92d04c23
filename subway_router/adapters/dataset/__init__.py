"""Dataset adapters - Implementations of dataset-related ports.

Available implementations:
- JSONStationRepository: Builds the transit network from a JSON dataset
- GreatCircleDistance: Distance between coordinates (geopy)
"""

from .great_circle import GreatCircleDistance
from .json_repository import JSONStationRepository, StationRecord, build_network, parse_records

__all__ = [
    "JSONStationRepository",
    "GreatCircleDistance",
    "StationRecord",
    "build_network",
    "parse_records",
]
