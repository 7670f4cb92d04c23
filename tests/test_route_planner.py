import json
from pathlib import Path
from typing import List, Sequence
from unittest.mock import MagicMock

import pytest

from subway_router.adapters.dataset import build_network, parse_records
from subway_router.adapters.graph import DijkstraRouteSolver
from subway_router.adapters.resolve import StationResolver
from subway_router.config import ResolverConfig
from subway_router.container import Container
from subway_router.domain.errors import (
    DatasetError,
    NoRouteFoundError,
    RenderingError,
    StationNotFoundError,
)
from subway_router.domain.models import RouteResult, Station
from subway_router.ports.graph import NetworkRepositoryPort
from subway_router.services import RoutePlannerService


class FakeRepository:
    def __init__(self, network=None, error=None):
        self.network = network
        self.error = error
        self.loads = 0

    def load(self):
        self.loads += 1
        if self.error is not None:
            raise self.error
        return self.network

    def get_station(self, station_id):
        return self.network.stations.get(station_id)

    def list_stations(self):
        return [node.value for node in self.network.graph]


class RecordingRenderer:
    def __init__(self):
        self.calls: List[Sequence[Station]] = []

    def render(self, stations, output_path: Path) -> Path:
        self.calls.append(list(stations))
        return output_path


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def planner(network, renderer):
    return RoutePlannerService(
        repository=FakeRepository(network),
        resolver=StationResolver(ResolverConfig()),
        solver=DijkstraRouteSolver(),
        map_renderer=renderer,
    )


class TestPlan:
    def test_plans_between_names(self, planner):
        route = planner.plan("Myeongdong", "Euljiro 4-ga")

        assert route.path == ("0424", "0150", "0151", "0204")
        assert route.total_distance_km == 6.0

    def test_accepts_ids_and_names_mixed(self, planner):
        route = planner.plan("0426", "jongno 3-ga")

        assert route.path[0] == "0150"
        assert route.path[-1] == "0153"

    def test_renders_map_when_requested(self, planner, renderer, tmp_path):
        route = planner.plan("0150", "0153", map_output_path=tmp_path / "m.html")

        assert renderer.calls == [list(route.stations)]

    def test_no_map_without_output_path(self, planner, renderer):
        planner.plan("0150", "0153")

        assert renderer.calls == []

    def test_missing_renderer_skips_map(self, network, tmp_path, caplog):
        planner = RoutePlannerService(
            repository=FakeRepository(network),
            resolver=StationResolver(ResolverConfig()),
            solver=DijkstraRouteSolver(),
        )

        route = planner.plan("0150", "0153", map_output_path=tmp_path / "m.html")

        assert not route.is_empty
        assert "No map renderer configured" in caplog.text
        assert not (tmp_path / "m.html").exists()

    def test_rendering_error_propagates(self, network, tmp_path):
        renderer = MagicMock()
        renderer.render.side_effect = RenderingError("disk full", renderer_type="folium")
        planner = RoutePlannerService(
            repository=FakeRepository(network),
            resolver=StationResolver(ResolverConfig()),
            solver=DijkstraRouteSolver(),
            map_renderer=renderer,
        )

        with pytest.raises(RenderingError):
            planner.plan("0150", "0153", map_output_path=tmp_path / "m.html")
        renderer.render.assert_called_once()

    def test_unknown_station_propagates(self, planner):
        with pytest.raises(StationNotFoundError):
            planner.plan("Zzzzzzqx", "0150")

    def test_dataset_error_propagates(self, network):
        planner = RoutePlannerService(
            repository=FakeRepository(error=DatasetError("broken")),
            resolver=StationResolver(ResolverConfig()),
            solver=DijkstraRouteSolver(),
        )

        with pytest.raises(DatasetError):
            planner.plan("0150", "0153")


class TestPlanSafe:
    def test_returns_route_and_no_error(self, planner):
        route, error = planner.plan_safe("0150", "0204")

        assert error is None
        assert route.path[-1] == "0204"

    def test_returns_error_message(self, planner):
        route, error = planner.plan_safe("0150", "Zzzzzzqx")

        assert route is None
        assert "Zzzzzzqx" in error


class TestFormatResult:
    def test_lists_each_leg_and_total(self, planner):
        text = planner.format_result(planner.plan("0424", "0204"))

        assert text.splitlines() == [
            "Myeongdong -> Seoul Station (2.00 km)",
            "Seoul Station -> City Hall (1.00 km)",
            "City Hall -> Euljiro 4-ga (3.00 km)",
            "Total distance: 6.00 km over 4 stops",
        ]

    def test_mentions_map_path(self, planner):
        text = planner.format_result(planner.plan("0150", "0151"), map_path=Path("r.html"))

        assert text.splitlines()[-1] == "Map saved to: r.html"

    def test_same_station(self, planner):
        text = planner.format_result(planner.plan("0150", "0426"))

        assert text.splitlines()[0] == "Already at Seoul Station."

    def test_empty_route(self, planner):
        assert planner.format_result(RouteResult.empty()) == "No route found."


class TestContainer:
    def test_default_wiring_plans_a_route(self, dataset_file):
        container = Container.create_default(dataset_path=dataset_file)

        planner = container.resolve(RoutePlannerService)
        route = planner.plan("Myeongdong", "Jongno 3-ga")

        assert route.path[0] == "0424"
        assert route.path[-1] == "0153"
        assert route.total_distance_km > 0

    def test_singletons_are_shared(self, dataset_file):
        container = Container.create_default(dataset_path=dataset_file)

        assert container.resolve(RoutePlannerService) is container.resolve(
            RoutePlannerService
        )
        assert container.resolve(NetworkRepositoryPort) is container.resolve(
            NetworkRepositoryPort
        )

    def test_fakes_can_replace_bindings(self, network):
        container = Container()
        container.register(NetworkRepositoryPort, lambda: FakeRepository(network))

        assert container.resolve(NetworkRepositoryPort).network is network

    def test_transient_registration(self):
        container = Container()
        container.register(list, list, singleton=False)

        assert container.resolve(list) is not container.resolve(list)

    def test_unregistered_type_raises(self):
        with pytest.raises(KeyError):
            Container().resolve(RoutePlannerService)


def test_no_route_error_carries_station_codes(sample_records, record, hop_geo):
    island = record("0901", "Island", "9", None, None, 37.60, 127.10)
    split = build_network(parse_records(json.dumps(sample_records + [island])), hop_geo)
    planner = RoutePlannerService(
        repository=FakeRepository(split),
        resolver=StationResolver(ResolverConfig()),
        solver=DijkstraRouteSolver(),
    )

    with pytest.raises(NoRouteFoundError) as excinfo:
        planner.plan("Island", "Seoul Station")

    assert (excinfo.value.departure, excinfo.value.arrival) == ("0901", "0150")
