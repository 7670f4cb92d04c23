"""Shared fixtures: a small two-transfer subway dataset."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

import pytest

from subway_router.adapters.dataset import JSONStationRepository, build_network, parse_records
from subway_router.config import DatasetConfig, reset_config
from subway_router.domain.models import GeoLocation


def _record(
    id: str,
    name: str,
    line: str,
    nxt: str | None,
    prev: str | None,
    lat: float,
    lon: float,
    transfers: List[str] | None = None,
) -> Dict[str, Any]:
    return {
        "id": id,
        "name": name,
        "line": line,
        "nextStationId": nxt,
        "previousStationId": prev,
        "transferStationIds": transfers or [],
        "latitude": lat,
        "longitude": lon,
    }


# Line 1: Seoul Station - City Hall - Jonggak - Jongno 3-ga
# Line 2: City Hall - Euljiro 1-ga - Euljiro 3-ga - Euljiro 4-ga
# Line 4: Seoul Station - Hoehyeon - Myeongdong
SAMPLE_RECORDS: List[Dict[str, Any]] = [
    _record("0150", "Seoul Station", "1", "0151", None, 37.5547, 126.9707, ["0426"]),
    _record("0151", "City Hall", "1", "0152", "0150", 37.5657, 126.9769, ["0201"]),
    _record("0152", "Jonggak", "1", "0153", "0151", 37.5702, 126.9831),
    _record("0153", "Jongno 3-ga", "1", None, "0152", 37.5704, 126.9921),
    _record("0201", "City Hall", "2", "0202", None, 37.5640, 126.9774, ["0151"]),
    _record("0202", "Euljiro 1-ga", "2", "0203", "0201", 37.5660, 126.9826),
    _record("0203", "Euljiro 3-ga", "2", "0204", "0202", 37.5663, 126.9916),
    _record("0204", "Euljiro 4-ga", "2", None, "0203", 37.5667, 126.9979),
    _record("0426", "Seoul Station", "4", "0425", None, 37.5532, 126.9725, ["0150"]),
    _record("0425", "Hoehyeon", "4", "0424", "0426", 37.5588, 126.9785),
    _record("0424", "Myeongdong", "4", None, "0425", 37.5610, 126.9864),
]


class HopDistance:
    """Fake GeoDistancePort: every segment is 1 km long."""

    def __init__(self) -> None:
        self.calls = 0

    def distance_km(self, a: GeoLocation, b: GeoLocation) -> float:
        self.calls += 1
        return 1.0


@pytest.fixture(autouse=True)
def _fresh_config():
    reset_config()
    yield
    reset_config()


@pytest.fixture
def sample_records() -> List[Dict[str, Any]]:
    return [dict(record) for record in SAMPLE_RECORDS]


@pytest.fixture
def make_dataset(tmp_path: Path):
    """Write records to a JSON file and return its path."""

    def _write(records: List[Dict[str, Any]], name: str = "stations.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(records), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def dataset_file(make_dataset, sample_records) -> Path:
    return make_dataset(sample_records)


@pytest.fixture
def hop_geo() -> HopDistance:
    return HopDistance()


@pytest.fixture
def network(sample_records, hop_geo):
    return build_network(parse_records(json.dumps(sample_records)), hop_geo)


@pytest.fixture
def repository(dataset_file, hop_geo) -> JSONStationRepository:
    return JSONStationRepository(DatasetConfig(), path=dataset_file, geo=hop_geo)


@pytest.fixture
def record():
    """Factory for a single raw dataset record."""
    return _record


@pytest.fixture(autouse=True)
def _detach_log_handlers():
    """Undo configure_logging() so handlers never outlive a captured stream."""
    yield
    logger = logging.getLogger("subway_router")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
