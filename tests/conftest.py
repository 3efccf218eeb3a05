from pathlib import Path
from typing import Dict, List

import pytest

from georoute.graph import GraphLoader
from georoute.ingest import MapIngester
from georoute.models import Edge, Node
from georoute.store import GraphStore


def way(way_id, node_ids, **tags) -> Dict[str, object]:
    return {"id": way_id, "nodes": list(node_ids), "tags": tags}


def point(node_id, lat, lon) -> Dict[str, object]:
    return {"id": node_id, "lat": lat, "lon": lon}


def build_graph(nodes: List[Node], edges: List[Edge]):
    '''Mesmo formato do GraphLoader: todo nó tem entrada na adjacência.'''
    node_map = {n.id: n for n in nodes}
    graph = {n.id: {} for n in nodes}
    for e in edges:
        graph.setdefault(e.u, {})[e.v] = e
    return node_map, graph


@pytest.fixture
def line_raw() -> Dict[str, object]:
    '''N1(0,0) -> N2(0,0.01) -> N3(0,0.02), residential, mão única.'''
    return {
        "nodes": [point("N1", 0.0, 0.0), point("N2", 0.0, 0.01), point("N3", 0.0, 0.02)],
        "ways": [way("W1", ["N1", "N2", "N3"], highway="residential", oneway="yes")],
    }


@pytest.fixture
def line_graph(line_raw):
    result = MapIngester().ingest(line_raw)
    return build_graph(result.nodes, result.edges)


@pytest.fixture
def city_raw() -> Dict[str, object]:
    '''
    Pequena malha:
      A --primary-- B --primary-- C          (mão dupla)
                    |
                 residential
                    |
                    D --footway-- F          (footway é filtrado)
      X --residential-- Y                    (componente isolada)
      O1 -> O2                               (mão única)
    '''
    return {
        "nodes": [
            point("A", 0.0, 0.0), point("B", 0.0, 0.01), point("C", 0.0, 0.02),
            point("D", -0.01, 0.01), point("F", -0.01, 0.02),
            point("X", 0.5, 0.5), point("Y", 0.5, 0.51),
            point("O1", 0.3, 0.3), point("O2", 0.3, 0.31),
            point("UNUSED", 1.0, 1.0),
        ],
        "ways": [
            way("W1", ["A", "B", "C"], highway="primary", name="Avenida"),
            way("W2", ["B", "D"], highway="residential"),
            way("W3", ["D", "F"], highway="footway"),
            way("W4", ["X", "Y"], highway="residential"),
            way("W5", ["O1", "O2"], highway="service", oneway="yes"),
        ],
    }


@pytest.fixture
def store(tmp_path: Path) -> GraphStore:
    return GraphStore(tmp_path / "graph")


@pytest.fixture
def city_store(store: GraphStore, city_raw) -> GraphStore:
    result = MapIngester().ingest(city_raw)
    store.replace_all(result.nodes, result.edges, result.ways)
    return store


@pytest.fixture
def city_snapshot(city_store: GraphStore):
    return GraphLoader(city_store).load_all()


OSM_SAMPLE = """<?xml version="1.0" encoding="UTF-8"?>
<osm version="0.6">
  <node id="1" lat="-9.6650" lon="-35.7350"/>
  <node id="2" lat="-9.6650" lon="-35.7250"/>
  <node id="3" lat="-9.6550" lon="-35.7250"/>
  <node id="4" lat="-9.6550" lon="-35.7350"/>
  <node id="99" lat="-9.7000" lon="-35.8000"/>
  <way id="100">
    <nd ref="1"/><nd ref="2"/><nd ref="3"/>
    <tag k="highway" v="primary"/>
    <tag k="name" v="Avenida Fernandes Lima"/>
  </way>
  <way id="101">
    <nd ref="3"/><nd ref="4"/>
    <tag k="highway" v="residential"/>
    <tag k="oneway" v="yes"/>
  </way>
  <way id="102">
    <nd ref="4"/><nd ref="1"/>
    <tag k="highway" v="footway"/>
  </way>
  <way id="103">
    <nd ref="1"/><nd ref="99"/>
    <tag k="highway" v="service"/>
    <tag k="access" v="private"/>
  </way>
</osm>
"""


@pytest.fixture
def osm_file(tmp_path: Path) -> Path:
    '''Quadra em Maceió: 1-2-3 primary, 3->4 mão única, footway e via privada filtradas.'''
    path = tmp_path / "map.osm"
    path.write_text(OSM_SAMPLE, encoding="utf-8")
    return path
