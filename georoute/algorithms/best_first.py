import heapq
import logging
import time
from typing import Dict, List, Mapping, Optional, Set, Tuple

from georoute.constants import MAX_SEARCH_ITERATIONS
from georoute.models import Edge, Node, SearchResult
from georoute.utils import _haversine_km

INF = float("inf")


class BestFirstSearch:
    '''
    Esqueleto comum das buscas em grafo (A*, Dijkstra, Greedy).

    Contrato
    --------
    find_path(nodes, graph, start_id, goal_id) -> SearchResult | None

    - nodes[id] = Node; graph[u][v] = Edge
    - origem/destino ausentes de graph -> None (não é exceção)
    - start_id == goal_id -> caminho [start_id], 0 passos, 0 km, sem busca
    - fronteira esgotada ou limite de iterações atingido -> None

    Observações
    -----------
    - O custo acumulado g(n) é sempre a soma das distâncias (km).
    - Cada variante define apenas a prioridade na fila, a partir de
      g(n) e de λ(n) = Haversine(n, destino).
    - Empates na heap são desfeitos pelo id do nó (determinismo por execução).
    '''

    name: str = ""
    uses_heuristic: bool = True
    optimal: bool = True

    def __init__(self, max_iterations: int = MAX_SEARCH_ITERATIONS) -> None:
        self.max_iterations = max_iterations

    def priority(self, cost_from_start: float, heuristic_to_goal: float) -> float:
        raise NotImplementedError

    def find_path(self, nodes: Mapping[str, Node], graph: Mapping[str, Mapping[str, Edge]],
                  start_id: str, goal_id: str) -> Optional[SearchResult]:
        '''
        Executa a busca entre dois nós do grafo em memória.

        Parâmetros
        ----------
        nodes    : Mapping[str, Node] (coordenadas para a heurística)
        graph    : Mapping[str, Mapping[str, Edge]] (adjacência dirigida)
        start_id : id do nó de origem
        goal_id  : id do nó de destino

        Retorno
        -------
        SearchResult | None : caminho, passos, distância (km), tempo (ms) e
                              nós expandidos; None se não houver caminho
        '''
        started = time.perf_counter()
        if start_id not in graph or goal_id not in graph:
            logging.warning("%s: nó não existe no grafo: %s ou %s", self.name, start_id, goal_id)
            return None

        if start_id == goal_id:
            return SearchResult(path=[start_id], steps=0, distance=0.0,
                                elapsed_time=_elapsed_ms(started), expanded=0)

        goal_node = nodes.get(goal_id)
        start_node = nodes.get(start_id)
        if self.uses_heuristic and (goal_node is None or start_node is None):
            logging.warning("%s: sem coordenadas para %s ou %s", self.name, start_id, goal_id)
            return None

        def λ(node: Node) -> float:
            if not self.uses_heuristic:
                return 0.0
            return _haversine_km(node.lat, node.lon, goal_node.lat, goal_node.lon)

        # Estruturas da busca
        distance_from_source: Dict[str, float] = {start_id: 0.0}
        predecessor: Dict[str, str] = {}
        expanded_nodes: Set[str] = set()
        initial_priority = self.priority(0.0, λ(start_node) if start_node is not None else 0.0)
        frontier_heap: List[Tuple[float, str]] = [(initial_priority, start_id)]

        iterations = 0
        while frontier_heap and iterations < self.max_iterations:
            iterations += 1
            _, current_node_id = heapq.heappop(frontier_heap)
            if current_node_id in expanded_nodes:
                continue  # entrada obsoleta

            if current_node_id == goal_id:
                path, total_distance = self._reconstruct_path(graph, predecessor, start_id, goal_id)
                logging.debug("%s encontrou caminho após %d iterações", self.name, iterations)
                return SearchResult(path=path, steps=len(path) - 1, distance=total_distance,
                                    elapsed_time=_elapsed_ms(started),
                                    expanded=len(expanded_nodes) + 1)

            expanded_nodes.add(current_node_id)

            for neighbor_node_id, edge in graph.get(current_node_id, {}).items():
                if neighbor_node_id in expanded_nodes:
                    continue
                neighbor_node = nodes.get(neighbor_node_id)
                if neighbor_node is None:
                    logging.warning("%s: aresta %s -> %s aponta para nó sem coordenadas; ignorada",
                                    self.name, current_node_id, neighbor_node_id)
                    continue

                tentative_cost_from_start = distance_from_source[current_node_id] + edge.distance
                if tentative_cost_from_start < distance_from_source.get(neighbor_node_id, INF):
                    distance_from_source[neighbor_node_id] = tentative_cost_from_start
                    predecessor[neighbor_node_id] = current_node_id
                    heapq.heappush(
                        frontier_heap,
                        (self.priority(tentative_cost_from_start, λ(neighbor_node)), neighbor_node_id),
                    )

        if iterations >= self.max_iterations:
            logging.warning("%s atingiu o limite de %d iterações sem chegar a %s",
                            self.name, self.max_iterations, goal_id)
        else:
            logging.info("%s não encontrou caminho após %d iterações", self.name, iterations)
        return None

    @staticmethod
    def _reconstruct_path(graph: Mapping[str, Mapping[str, Edge]], predecessor: Dict[str, str],
                          start_id: str, goal_id: str) -> Tuple[List[str], float]:
        '''
        Reconstrói a lista de nós do caminho a partir do dicionário de
        predecessores {nó: nó_anterior}, somando as distâncias das arestas.
        '''
        path = [goal_id]
        total_distance = 0.0
        node_cursor = goal_id
        while node_cursor != start_id:
            prev_node_id = predecessor[node_cursor]
            total_distance += graph[prev_node_id][node_cursor].distance
            node_cursor = prev_node_id
            path.append(node_cursor)
        path.reverse()
        return path, total_distance

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, max_iterations={self.max_iterations})"


def _elapsed_ms(started: float) -> float:
    return (time.perf_counter() - started) * 1000.0
