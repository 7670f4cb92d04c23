"""Transit network: the station graph plus its lookup tables."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

from .domain.models import Line, Station
from .graph import FloatDistance, Graph

StationGraph = Graph[Station, FloatDistance]


@dataclass(frozen=True)
class TransitNetwork:
    """A built station graph and the tables used to query it.

    Attributes:
        graph: Directed graph whose node payloads are stations
        stations: Every dataset id (transfer ids included) -> station
        lines: Line name -> line
    """

    graph: StationGraph
    stations: Mapping[str, Station]
    lines: Mapping[str, Line] = field(default_factory=dict)
    _slots: Dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        slots: Dict[str, int] = {}
        for node in self.graph:
            for station_id in node.value.ids:
                slots[station_id] = node.index
        object.__setattr__(self, "_slots", slots)

    def __len__(self) -> int:
        return len(self.graph)

    def index_of(self, station_id: str) -> Optional[int]:
        """Return the node slot of a station id, or None if unknown."""
        return self._slots.get(station_id)

    def station_at(self, index: int) -> Station:
        return self.graph.value(index)
