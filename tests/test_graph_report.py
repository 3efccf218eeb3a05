import pytest

from georoute.routing import check_graph, to_networkx


def test_to_networkx(city_snapshot):
    G = to_networkx(city_snapshot)
    assert G.number_of_nodes() == 8
    assert G.number_of_edges() == 9
    assert G.nodes["A"] == {"y": 0.0, "x": 0.0}
    assert G.edges["A", "B"]["highway"] == "primary"
    assert G.has_edge("O1", "O2") and not G.has_edge("O2", "O1")


def test_check_graph_report(city_snapshot):
    report = check_graph(city_snapshot)

    assert report["total_nodes"] == 8
    assert report["total_edges"] == 9
    assert report["connected_nodes"] == 8
    assert report["isolated_nodes"] == 0
    assert report["degree_distribution"] == [(3, 1), (1, 7)]
    assert report["component_count"] == 3
    assert report["largest_components"] == [4, 2, 2]
    assert report["largest_component_share"] == pytest.approx(0.5)
    assert report["invalid_edges"] == 0
    assert any("fragmentado" in w for w in report["warnings"])


def test_check_graph_limits(city_snapshot):
    report = check_graph(city_snapshot, top_degrees=1, top_components=1)
    assert report["degree_distribution"] == [(3, 1)]
    assert report["largest_components"] == [4]
