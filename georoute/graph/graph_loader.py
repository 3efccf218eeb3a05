import logging
import threading
from typing import Dict, Optional

from georoute.errors import GraphNotLoadedError, StoreError
from georoute.models import Edge, Graph, GraphSnapshot, Node
from georoute.store import GraphStore


class GraphLoader:
    '''
    Carrega nós e arestas do GraphStore e expõe o grafo em memória como
    um GraphSnapshot imutável.

    Observações
    -----------
    - A construção acontece em variáveis locais; só o snapshot pronto é
      publicado, sob lock. Leitores veem o grafo antigo inteiro ou o novo
      inteiro, nunca uma mistura.
    - Recarregar é idempotente: cada carga substitui totalmente a anterior.
    - Se a carga falhar, o snapshot anterior continua valendo.
    '''

    def __init__(self, store: GraphStore) -> None:
        self.store = store
        self._lock = threading.Lock()
        self._snapshot: Optional[GraphSnapshot] = None

    def load_all(self) -> GraphSnapshot:
        '''
        Lê as coleções completas e publica um novo snapshot.

        Retorno
        -------
        GraphSnapshot : o snapshot recém-publicado

        Erros
        -----
        StoreError : coleções ausentes/ilegíveis (snapshot anterior mantido)
        '''
        nodes_df = self.store.read_nodes()
        edges_df = self.store.read_edges()

        try:
            nodes: Dict[str, Node] = {
                str(osmid): Node(id=str(osmid), lat=float(lat), lon=float(lon))
                for osmid, lat, lon in zip(nodes_df["osmid"], nodes_df["y"], nodes_df["x"])
            }
        except (TypeError, ValueError) as exc:
            raise StoreError(f"Coordenadas inválidas na coleção de nós: {exc}") from exc

        # todo nó conhecido é um endpoint válido, mesmo sem arestas de saída
        graph: Graph = {node_id: {} for node_id in nodes}
        edge_count = 0
        skipped = 0
        for u, v, distance, cost, highway, way_id in zip(
            edges_df["u"], edges_df["v"], edges_df["distance"],
            edges_df["cost"], edges_df["highway"], edges_df["way_id"],
        ):
            if u not in nodes or v not in nodes:
                skipped += 1
                logging.warning("Aresta %s -> %s referencia nó inexistente; ignorada", u, v)
                continue
            try:
                edge = Edge(u=u, v=v, distance=float(distance), cost=float(cost),
                            highway=str(highway), way_id=str(way_id))
            except (TypeError, ValueError):
                skipped += 1
                logging.warning("Aresta %s -> %s com distância/custo inválido; ignorada", u, v)
                continue
            current = graph[u].get(v)
            # ways paralelas entre o mesmo par: fica o segmento mais curto
            if current is None:
                edge_count += 1
                graph[u][v] = edge
            elif edge.distance < current.distance:
                graph[u][v] = edge

        snapshot = GraphSnapshot(nodes=nodes, graph=graph, edge_count=edge_count, skipped_edges=skipped)
        with self._lock:
            self._snapshot = snapshot

        logging.info("Grafo carregado: %d nós, %d arestas (%d ignoradas).", len(nodes), edge_count, skipped)
        return snapshot

    def is_loaded(self) -> bool:
        with self._lock:
            return self._snapshot is not None

    def get_graph(self) -> GraphSnapshot:
        '''Snapshot atual; quem o obtém pode usá-lo sem lock até o fim da consulta.'''
        with self._lock:
            snapshot = self._snapshot
        if snapshot is None:
            raise GraphNotLoadedError("Grafo ainda não foi carregado.")
        return snapshot
