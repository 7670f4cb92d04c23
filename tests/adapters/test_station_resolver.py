import pytest

from subway_router.adapters.resolve import StationResolver
from subway_router.config import ResolverConfig
from subway_router.domain.errors import StationNotFoundError


@pytest.fixture
def resolver():
    return StationResolver(ResolverConfig())


def _name(network, index):
    return network.station_at(index).name


def test_resolves_primary_id(resolver, network):
    assert _name(network, resolver.resolve(network, "0152")) == "Jonggak"


def test_transfer_ids_resolve_to_the_same_station(resolver, network):
    assert resolver.resolve(network, "0426") == resolver.resolve(network, "0150")
    assert resolver.resolve(network, "0201") == resolver.resolve(network, "0151")


def test_exact_name_ignores_case_and_spacing(resolver, network):
    index = resolver.resolve(network, "  city   HALL ")

    assert index == network.index_of("0151")


def test_fuzzy_name_match(resolver, network):
    assert _name(network, resolver.resolve(network, "Myeongdng")) == "Myeongdong"


def test_fuzzy_match_can_be_disabled(network):
    resolver = StationResolver(ResolverConfig(fuzzy_matching=False))

    with pytest.raises(StationNotFoundError):
        resolver.resolve(network, "Myeongdng")


def test_unrelated_query_is_not_found(resolver, network):
    with pytest.raises(StationNotFoundError) as excinfo:
        resolver.resolve(network, "Zzzzzzqx")

    assert excinfo.value.query == "Zzzzzzqx"


@pytest.mark.parametrize("query", ["", "   "])
def test_blank_query_is_not_found(resolver, network, query):
    with pytest.raises(StationNotFoundError):
        resolver.resolve(network, query)


def test_not_found_is_logged(resolver, network, caplog):
    with caplog.at_level("WARNING", logger="subway_router"):
        with pytest.raises(StationNotFoundError):
            resolver.resolve(network, "Zzzzzzqx")

    assert "Station not found" in caplog.text
