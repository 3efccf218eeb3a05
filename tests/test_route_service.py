import pytest

from georoute.algorithms import AlgorithmRegistry, default_registry
from georoute.errors import StoreError
from georoute.models import Node
from georoute.routing import RouteService


@pytest.fixture
def service(city_store) -> RouteService:
    return RouteService.from_store(city_store)


def test_route_by_ids(service):
    route = service.find_route(start_id="A", goal_id="C")

    assert route["success"] is True
    assert route["algorithm"] == "astar"
    assert route["path"] == [(0.0, 0.0), (0.0, 0.01), (0.0, 0.02)]
    assert route["steps"] == 2
    assert route["distance_m"] == pytest.approx(2223.9, abs=1.0)
    # primary: 60 km/h
    assert route["duration_s"] == pytest.approx(route["distance_m"] / 1000.0 / 60.0 * 3600.0)
    assert route["start_point"] == {"id": "A", "lat": 0.0, "lon": 0.0}
    assert route["end_point"]["id"] == "C"
    assert route["elapsed_time_ms"] >= 0


@pytest.mark.parametrize("algorithm", ["astar", "dijkstra", "greedy_best_first"])
def test_every_builtin_algorithm_is_reachable(service, algorithm):
    route = service.find_route(start_id="A", goal_id="D", algorithm=algorithm)
    assert route["success"] is True
    assert route["algorithm"] == algorithm
    assert route["path"][-1] == (-0.01, 0.01)


def test_route_by_coordinates(service):
    route = service.find_route(start=(0.0001, 0.0001), goal={"lat": 0.0, "lng": 0.0199})
    assert route["success"] is True
    assert route["start_point"]["id"] == "A"
    assert route["end_point"]["id"] == "C"


def test_coordinates_take_precedence_over_ids(service):
    route = service.find_route(start_id="X", goal_id="C", start=(0.0, 0.0))
    assert route["success"] is True
    assert route["start_point"]["id"] == "A"


def test_snapping_prefers_main_road(service):
    route = service.find_route(start=(-0.0099, 0.0101), goal_id="C")
    assert route["start_point"]["id"] == "B"


def test_same_start_and_goal(service):
    route = service.find_route(start_id="B", goal_id="B")
    assert route["success"] is True
    assert route["steps"] == 0
    assert route["distance_m"] == 0.0
    assert route["duration_s"] == 0.0


@pytest.mark.parametrize("kwargs", [
    {"goal_id": "C"},
    {"start_id": "A"},
    {"start": (95.0, 0.0), "goal_id": "C"},
    {"start": (0.0, 181.0), "goal_id": "C"},
    {"start": ("norte", 0.0), "goal_id": "C"},
    {"start": {"latitude": 0.0}, "goal_id": "C"},
    {"start": (1.0,), "goal_id": "C"},
])
def test_invalid_input(service, kwargs):
    route = service.find_route(**kwargs)
    assert route == {"success": False, "error": "invalid_input", "message": route["message"]}


def test_unknown_node_id(service):
    route = service.find_route(start_id="nope", goal_id="C")
    assert route["success"] is False
    assert route["error"] == "node_not_found"


def test_unknown_algorithm(service):
    route = service.find_route(start_id="A", goal_id="C", algorithm="bfs")
    assert route["error"] == "algorithm_not_registered"


def test_no_path_between_components(service):
    assert service.find_route(start_id="A", goal_id="X")["error"] == "no_path_found"


def test_no_path_against_oneway(service):
    assert service.find_route(start_id="O1", goal_id="O2")["success"] is True
    assert service.find_route(start_id="O2", goal_id="O1")["error"] == "no_path_found"


def test_missing_store_is_reported(store):
    service = RouteService.from_store(store)
    assert service.find_route(start_id="A", goal_id="C")["error"] == "store_error"
    assert service.reload_graph()["error"] == "store_error"
    assert service.graph_stats()["success"] is False


class Exploding:
    name = "exploding"

    def find_path(self, nodes, graph, start_id, goal_id):
        raise RuntimeError("boom")


def test_unexpected_errors_become_internal_error(city_store):
    registry = AlgorithmRegistry()
    registry.register(Exploding())
    service = RouteService.from_store(city_store, registry=registry)
    route = service.find_route(start_id="A", goal_id="C", algorithm="exploding")
    assert route["success"] is False
    assert route["error"] == "internal_error"


def test_graph_stats(service):
    stats = service.graph_stats()
    assert stats == {
        "success": True,
        "total_nodes": 8,
        "connected_nodes": 7,
        "isolated_nodes": 1,
        "total_edges": 4.5,
        "graph_loaded": True,
    }


def test_reload_graph_picks_up_new_data(service, city_store):
    assert service.find_route(start_id="A", goal_id="C")["success"] is True
    city_store.replace_all([Node("Z", 1.0, 1.0)], [], [])

    reloaded = service.reload_graph()
    assert reloaded["success"] is True
    assert service.find_route(start_id="A", goal_id="C")["error"] == "node_not_found"
    assert service.graph_stats()["total_nodes"] == 1


def test_list_nodes_and_algorithms(service):
    ids = {n["id"] for n in service.list_nodes()}
    assert ids == {"A", "B", "C", "D", "X", "Y", "O1", "O2"}
    assert service.list_algorithms() == default_registry().list()


def test_check_graph_reports_missing_store(store):
    report = RouteService.from_store(store).check_graph()
    assert report["success"] is False
    assert report["error"] == "store_error"


def test_check_graph_success(service):
    report = service.check_graph()
    assert report["success"] is True
    assert report["component_count"] == 3


def test_list_nodes_raises_on_missing_store(store):
    with pytest.raises(StoreError):
        RouteService.from_store(store).list_nodes()


class BrokenLoader:
    def is_loaded(self):
        return True

    def get_graph(self):
        raise RuntimeError("snapshot corrompido")


def test_unexpected_load_errors_become_internal_error(service):
    service.loader = BrokenLoader()
    assert service.graph_stats()["error"] == "internal_error"
    assert service.check_graph()["error"] == "internal_error"
