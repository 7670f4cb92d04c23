"""JSON station dataset repository.

The dataset is a JSON array with one record per station *per line*:

    [{"id": "0150", "name": "Seoul Station", "line": "1",
      "nextStationId": "0151", "previousStationId": null,
      "transferStationIds": ["0426"], "latitude": 37.55, "longitude": 126.97},
     ...]

Records linked through ``transferStationIds`` are merged into one
physical station. From every record, the line is walked downstream and
upstream; each station reached becomes a direct edge whose weight is
the cumulative great-circle distance along the track.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel

from ...config import DatasetConfig, get_config
from ...domain.errors import DatasetError
from ...domain.models import GeoLocation, Line, Station
from ...graph import FloatDistance, Graph
from ...network import TransitNetwork
from ...ports.graph import GeoDistancePort
from .great_circle import GreatCircleDistance


class StationRecord(BaseModel):
    """One raw dataset row: a station as seen from a single line."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    line: str
    next_station_id: Optional[str] = None
    previous_station_id: Optional[str] = None
    transfer_station_ids: List[str] = Field(default_factory=list)
    latitude: float
    longitude: float


_RECORDS = TypeAdapter(List[StationRecord])


def parse_records(data: bytes | str) -> List[StationRecord]:
    """Parse the raw dataset.

    Raises:
        DatasetError: If the payload is not a valid list of records.
    """
    try:
        return _RECORDS.validate_json(data)
    except ValidationError as e:
        raise DatasetError(
            f"Invalid station dataset ({e.error_count()} errors)", cause=e
        )


@dataclass
class _Assembly:
    """Intermediate tables shared by the build steps."""

    primary_of: Dict[str, str] = field(default_factory=dict)
    order: List[str] = field(default_factory=list)
    first_record: Dict[str, StationRecord] = field(default_factory=dict)
    lines_of: Dict[str, List[str]] = field(default_factory=dict)
    line_members: Dict[str, List[str]] = field(default_factory=dict)
    on_line: Dict[Tuple[str, str], StationRecord] = field(default_factory=dict)


def build_network(
    records: Sequence[StationRecord], geo: GeoDistancePort
) -> TransitNetwork:
    """Assemble stations, lines and the station graph from records.

    Args:
        records: Parsed dataset rows.
        geo: Distance between two coordinates, in km.

    Returns:
        The built network.

    Raises:
        DatasetError: If a neighbour id is unknown, a station is missing
            from a line it is walked along, or coordinates are invalid.
    """
    asm = _Assembly()
    _group_stations(records, asm)
    _collect_lines(records, asm)

    stations = [_make_station(primary, asm) for primary in asm.order]
    slot = {primary: i for i, primary in enumerate(asm.order)}
    by_id = {
        station_id: stations[slot[primary]]
        for station_id, primary in asm.primary_of.items()
    }

    size = len(stations)
    weights: List[List[Optional[float]]] = [[None] * size for _ in range(size)]
    for record in records:
        for attribute in ("next_station_id", "previous_station_id"):
            _walk(record, attribute, asm, slot, stations, geo, weights)

    graph = Graph.from_weights(stations, weights, FloatDistance)
    lines = {
        name: Line(name=name, station_ids=tuple(members))
        for name, members in asm.line_members.items()
    }
    return TransitNetwork(graph=graph, stations=by_id, lines=lines)


def _group_stations(records: Sequence[StationRecord], asm: _Assembly) -> None:
    for record in records:
        if record.id in asm.primary_of:
            continue
        asm.order.append(record.id)
        asm.first_record[record.id] = record
        for station_id in [record.id, *record.transfer_station_ids]:
            asm.primary_of.setdefault(station_id, record.id)


def _collect_lines(records: Sequence[StationRecord], asm: _Assembly) -> None:
    for record in records:
        for neighbour in (record.next_station_id, record.previous_station_id):
            if neighbour is not None and neighbour not in asm.primary_of:
                raise DatasetError(
                    f"Station {record.id} on line {record.line} refers to "
                    f"unknown station {neighbour}"
                )
        primary = asm.primary_of[record.id]
        lines = asm.lines_of.setdefault(primary, [])
        if record.line not in lines:
            lines.append(record.line)
        members = asm.line_members.setdefault(record.line, [])
        if primary not in members:
            members.append(primary)
        asm.on_line[(primary, record.line)] = record


def _make_station(primary: str, asm: _Assembly) -> Station:
    record = asm.first_record[primary]
    ids = [primary] + [
        station_id
        for station_id, owner in asm.primary_of.items()
        if owner == primary and station_id != primary
    ]
    try:
        location = GeoLocation(latitude=record.latitude, longitude=record.longitude)
    except ValueError as e:
        raise DatasetError(f"Station {primary} has invalid coordinates", cause=e)
    return Station(
        ids=tuple(ids),
        name=record.name,
        location=location,
        lines=tuple(asm.lines_of.get(primary, ())),
    )


def _walk(
    record: StationRecord,
    attribute: str,
    asm: _Assembly,
    slot: Dict[str, int],
    stations: Sequence[Station],
    geo: GeoDistancePort,
    weights: List[List[Optional[float]]],
) -> None:
    """Follow one direction of the record's line from its station.

    Circular lines stop on the first station seen twice, so the origin
    never gets an edge to itself.
    """
    origin = slot[asm.primary_of[record.id]]
    seen = {origin}
    previous = stations[origin].location
    cumulative = 0.0
    current_id = getattr(record, attribute)

    while current_id is not None:
        primary = asm.primary_of[current_id]
        target = slot[primary]
        if target in seen:
            break
        seen.add(target)

        location = stations[target].location
        cumulative += geo.distance_km(previous, location)
        known = weights[origin][target]
        if known is None or cumulative < known:
            weights[origin][target] = cumulative

        current = asm.on_line.get((primary, record.line))
        if current is None:
            raise DatasetError(
                f"Station {current_id} is not a stop of line {record.line}"
            )
        previous = location
        current_id = getattr(current, attribute)


@dataclass
class JSONStationRepository:
    """Network repository that loads a JSON station dataset.

    This adapter implements NetworkRepositoryPort and caches the built
    network until clear_cache() is called.

    Attributes:
        config: Dataset configuration (path, Earth radius)
        path: Optional dataset path overriding the configured one
        geo: Distance calculator used to weight edges
    """

    config: DatasetConfig = field(default_factory=lambda: get_config().dataset)
    path: Optional[Path] = None
    geo: Optional[GeoDistancePort] = None
    _logger: logging.Logger = field(init=False, repr=False)

    _network: Optional[TransitNetwork] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        if self.geo is None:
            self.geo = GreatCircleDistance(self.config)

    @property
    def dataset_path(self) -> Path:
        return self.path if self.path is not None else self.config.stations_path

    def load(self) -> TransitNetwork:
        """Load and build the transit network.

        Returns:
            The station graph with its lookup tables.

        Raises:
            DatasetError: If the dataset cannot be read or is inconsistent.
        """
        if self._network is not None:
            return self._network

        path = self.dataset_path
        self._logger.debug("Loading station dataset", extra={"path": str(path)})

        try:
            data = path.read_bytes()
        except OSError as e:
            raise DatasetError(
                f"Failed to read station dataset {path}",
                file_path=str(path),
                cause=e,
            )

        try:
            records = parse_records(data)
            assert self.geo is not None
            network = build_network(records, self.geo)
        except DatasetError as e:
            e.file_path = str(path)
            raise

        self._network = network
        self._logger.info(
            "Network loaded",
            extra={
                "records": len(records),
                "stations": len(network.graph),
                "edges": network.graph.edge_count,
                "lines": len(network.lines),
            },
        )
        return network

    def get_station(self, station_id: str) -> Optional[Station]:
        return self.load().stations.get(station_id)

    def list_stations(self) -> Sequence[Station]:
        return [node.value for node in self.load().graph]

    def clear_cache(self) -> None:
        """Forget the built network."""
        self._network = None
        self._logger.debug("Network cache cleared")
