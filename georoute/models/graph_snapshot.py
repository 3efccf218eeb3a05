from typing import Dict, NamedTuple
from .node import Node
from .edge import Edge

Graph = Dict[str, Dict[str, Edge]]


class GraphSnapshot(NamedTuple):
    '''
    Fotografia imutável do grafo em memória.
    - nodes[id] = Node
    - graph[u][v] = Edge (todo nó conhecido tem uma entrada, possivelmente vazia)

    Observações
    -----------
    Substituída por inteiro a cada recarga; quem obteve uma referência
    continua usando a versão antiga até terminar a consulta.
    '''
    nodes: Dict[str, Node]
    graph: Graph
    edge_count: int = 0
    skipped_edges: int = 0
