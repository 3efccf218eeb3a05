from collections import Counter
from typing import Dict, List

import networkx as nx

from georoute.models import GraphSnapshot


def to_networkx(snapshot: GraphSnapshot) -> nx.DiGraph:
    '''
    Converte o snapshot em um nx.DiGraph.
    Nodes: id, y (lat), x (lon). Edges: u, v, d (km), cost, highway, way_id.
    '''
    G = nx.DiGraph()
    for node_id, node in snapshot.nodes.items():
        G.add_node(node_id, y=node.lat, x=node.lon)
    for u, neighbors in snapshot.graph.items():
        for v, edge in neighbors.items():
            G.add_edge(u, v, d=edge.distance, cost=edge.cost, highway=edge.highway, way_id=edge.way_id)
    return G


def check_graph(snapshot: GraphSnapshot, top_degrees: int = 10, top_components: int = 5) -> Dict[str, object]:
    '''
    Diagnóstico de qualidade do grafo: conectividade, distribuição de graus,
    componentes fracamente conexas e recomendações.

    Parâmetros
    ----------
    snapshot       : GraphSnapshot carregado
    top_degrees    : quantos graus (maiores primeiro) listar
    top_components : quantas componentes (maiores primeiro) listar

    Retorno
    -------
    dict : relatório com contagens, componentes e lista de avisos

    Observações
    -----------
    Grau = número de vizinhos distintos ignorando a direção das arestas.
    Nós sem nenhuma aresta não contam como componente.
    '''
    G = to_networkx(snapshot)
    undirected = G.to_undirected(as_view=True)

    total_nodes = G.number_of_nodes()
    degrees = dict(undirected.degree())
    connected_nodes = sum(1 for d in degrees.values() if d > 0)
    isolated_nodes = total_nodes - connected_nodes
    degree_distribution = Counter(degrees.values())

    components: List[set] = sorted(
        (c for c in nx.weakly_connected_components(G) if len(c) > 1),
        key=len, reverse=True,
    )
    largest = len(components[0]) if components else 0

    warnings: List[str] = []
    if total_nodes and isolated_nodes > total_nodes * 0.1:
        warnings.append(f"{isolated_nodes / total_nodes:.2%} dos nós estão isolados; revise a importação do OSM.")
    if len(components) > 10:
        warnings.append(f"Grafo tem {len(components)} componentes desconexas; rotas só existem dentro de uma componente.")
    if components and largest < connected_nodes * 0.8:
        warnings.append(f"Maior componente tem apenas {largest / connected_nodes:.2%} dos nós conectados; grafo fragmentado.")
    if snapshot.skipped_edges:
        warnings.append(f"{snapshot.skipped_edges} arestas referenciam nós inexistentes.")

    return {
        "total_nodes": total_nodes,
        "total_edges": G.number_of_edges(),
        "connected_nodes": connected_nodes,
        "isolated_nodes": isolated_nodes,
        "degree_distribution": sorted(degree_distribution.items(), reverse=True)[:top_degrees],
        "component_count": len(components),
        "largest_components": [len(c) for c in components[:top_components]],
        "largest_component_share": (largest / connected_nodes) if connected_nodes else 0.0,
        "invalid_edges": snapshot.skipped_edges,
        "warnings": warnings,
    }
