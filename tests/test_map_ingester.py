import pytest

from conftest import point, way
from georoute.errors import IngestionError
from georoute.ingest import MapIngester
from georoute.utils import speed_for


def test_two_way_roads_get_mirrored_edges(city_raw):
    result = MapIngester().ingest(city_raw)
    by_pair = {(e.u, e.v): e for e in result.edges}
    two_way = [e for e in result.edges if e.way_id != "W5"]
    assert two_way
    for e in two_way:
        back = by_pair[(e.v, e.u)]
        assert back.distance == e.distance
        assert back.cost == e.cost


def test_cost_is_distance_over_speed(city_raw):
    result = MapIngester().ingest(city_raw)
    for e in result.edges:
        assert e.distance > 0
        assert e.cost == e.distance / speed_for(e.highway)
        assert e.cost > 0


def test_oneway_emits_forward_only(line_raw):
    result = MapIngester().ingest(line_raw)
    assert [(e.u, e.v) for e in result.edges] == [("N1", "N2"), ("N2", "N3")]


def test_reverse_oneway_emits_backward_only():
    raw = {
        "nodes": [point("a", 0, 0), point("b", 0, 0.01)],
        "ways": [way("w", ["a", "b"], highway="tertiary", oneway="-1")],
    }
    result = MapIngester().ingest(raw)
    assert [(e.u, e.v) for e in result.edges] == [("b", "a")]


@pytest.mark.parametrize("tags", [
    {"highway": "footway"},
    {"highway": "residential", "access": "private"},
    {"highway": "residential", "access": "no"},
    {"highway": "residential", "area": "yes"},
    {"name": "sem highway"},
])
def test_filtered_ways_are_skipped(tags):
    raw = {
        "nodes": [point("a", 0, 0), point("b", 0, 0.01)],
        "ways": [{"id": "w", "nodes": ["a", "b"], "tags": tags}],
    }
    result = MapIngester().ingest(raw)
    assert result.edges == []
    assert result.nodes == []
    assert result.stats.skipped_ways == 1
    assert result.stats.accepted_ways == 0


def test_way_with_single_reference_is_skipped():
    raw = {"nodes": [point("a", 0, 0)], "ways": [way("w", ["a"], highway="primary")]}
    result = MapIngester().ingest(raw)
    assert result.stats.skipped_ways == 1


def test_only_used_nodes_are_kept(city_raw):
    result = MapIngester().ingest(city_raw)
    ids = {n.id for n in result.nodes}
    assert ids == {"A", "B", "C", "D", "X", "Y", "O1", "O2"}
    assert "UNUSED" not in ids
    assert "F" not in ids  # só aparece na footway filtrada


def test_degenerate_segments_are_dropped():
    raw = {
        "nodes": [point("a", 0, 0), point("a2", 0, 0.000001), point("b", 0, 0.01)],
        "ways": [way("w", ["a", "a2", "b"], highway="residential")],
    }
    result = MapIngester().ingest(raw)
    pairs = {(e.u, e.v) for e in result.edges}
    assert ("a", "a2") not in pairs
    assert pairs == {("a2", "b"), ("b", "a2")}
    assert result.stats.skipped_segments == 1


def test_segments_with_unknown_points_are_skipped():
    raw = {
        "nodes": [point("a", 0, 0), point("b", 0, 0.01)],
        "ways": [way("w", ["a", "ghost", "b"], highway="residential")],
    }
    result = MapIngester().ingest(raw)
    assert result.edges == []
    assert {n.id for n in result.nodes} == {"a", "b"}


def test_ingest_is_deterministic(city_raw):
    first = MapIngester().ingest(city_raw)
    second = MapIngester().ingest(city_raw)
    assert first.nodes == second.nodes
    assert first.edges == second.edges
    assert first.ways == second.ways


def test_stats(city_raw):
    stats = MapIngester().ingest(city_raw).stats
    assert stats.total_ways == 5
    assert stats.accepted_ways == 4
    assert stats.skipped_ways == 1
    assert stats.nodes == 8
    assert stats.edges == 9


def test_integer_ids_become_strings():
    raw = {
        "nodes": [{"id": 1, "lat": 0, "lon": 0}, {"id": 2, "lat": 0, "lon": 0.01}],
        "ways": [{"id": 10, "nodes": [1, 2], "tags": {"highway": "primary"}}],
    }
    result = MapIngester().ingest(raw)
    assert {(e.u, e.v, e.way_id) for e in result.edges} == {("1", "2", "10"), ("2", "1", "10")}


@pytest.mark.parametrize("raw", [
    {"ways": []},
    {"nodes": []},
    {"nodes": None, "ways": []},
    [],
])
def test_missing_collections_are_fatal(raw):
    with pytest.raises(IngestionError):
        MapIngester().ingest(raw)


def test_malformed_point_is_fatal():
    raw = {"nodes": [{"id": "a", "lat": "north", "lon": 0}], "ways": []}
    with pytest.raises(IngestionError):
        MapIngester().ingest(raw)


def test_way_without_id_is_fatal():
    raw = {"nodes": [point("a", 0, 0)], "ways": [{"nodes": ["a"], "tags": {}}]}
    with pytest.raises(IngestionError):
        MapIngester().ingest(raw)


@pytest.mark.parametrize("raw", [
    {"nodes": 5, "ways": []},
    {"nodes": [], "ways": 3.5},
    {"nodes": "abc", "ways": []},
    {"nodes": [], "ways": {"id": "w"}},
])
def test_non_iterable_collections_are_fatal(raw):
    with pytest.raises(IngestionError):
        MapIngester().ingest(raw)


@pytest.mark.parametrize("lat,lon", [("nan", 0.0), (0.0, float("inf")), (float("-inf"), 0.0)])
def test_non_finite_coordinates_are_fatal(lat, lon):
    raw = {
        "nodes": [{"id": "a", "lat": lat, "lon": lon}, point("b", 0, 0.01)],
        "ways": [way("w", ["a", "b"], highway="residential")],
    }
    with pytest.raises(IngestionError):
        MapIngester().ingest(raw)
