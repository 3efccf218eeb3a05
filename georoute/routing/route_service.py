import logging
from typing import Dict, List, Mapping, Optional, Sequence, Tuple, Union

from georoute.algorithms import AlgorithmRegistry, default_registry
from georoute.constants import DEFAULT_ALGORITHM, DEFAULT_SNAP_CANDIDATES
from georoute.errors import (
    AlgorithmNotRegistered,
    GeoRouteError,
    InvalidInput,
    NodeNotFound,
    NoPathFound,
)
from georoute.graph import GraphLoader
from georoute.models import GraphSnapshot
from georoute.snapping import NodeSnapper
from georoute.store import GraphStore
from .graph_report import check_graph

Coordinate = Union[Sequence[float], Mapping[str, float]]


class RouteService:
    '''
    Fachada de consulta do roteador: resolve origem/destino (ids ou
    coordenadas), executa o algoritmo escolhido e monta a resposta.

    Observações
    -----------
    - Erros de consulta viram respostas estruturadas
      {"success": False, "error": <tipo>, "message": ...}; nunca derrubam o processo.
    - O grafo é carregado sob demanda na primeira consulta.
    - Cada consulta usa um único snapshot do início ao fim.
    '''

    def __init__(self, loader: GraphLoader, registry: AlgorithmRegistry, snapper: NodeSnapper) -> None:
        self.loader = loader
        self.registry = registry
        self.snapper = snapper

    @classmethod
    def from_store(cls, store: GraphStore, registry: Optional[AlgorithmRegistry] = None,
                   k: int = DEFAULT_SNAP_CANDIDATES) -> "RouteService":
        '''Monta o serviço padrão sobre um GraphStore (snapping pela consulta espacial do store).'''
        return cls(
            loader=GraphLoader(store),
            registry=registry if registry is not None else default_registry(),
            snapper=NodeSnapper(store.nearest_node_ids, k=k),
        )

    # ------------------------------------------------------------------
    # Rotas
    # ------------------------------------------------------------------
    def find_route(self, start_id: Optional[str] = None, goal_id: Optional[str] = None,
                   start: Optional[Coordinate] = None, goal: Optional[Coordinate] = None,
                   algorithm: str = DEFAULT_ALGORITHM) -> Dict[str, object]:
        '''
        Calcula uma rota. Para cada ponta informe um id de nó OU uma
        coordenada (lat, lon); a coordenada tem precedência.

        Retorno
        -------
        dict : sucesso -> {success, algorithm, path [(lat, lon)...], distance_m,
               duration_s, steps, elapsed_time_ms, start_point, end_point}
               falha   -> {success: False, error, message}
        '''
        try:
            return self._find_route(start_id, goal_id, start, goal, algorithm)
        except GeoRouteError as exc:
            logging.info("Rota recusada (%s): %s", exc.kind, exc)
            return _failure(exc.kind, str(exc))
        except Exception as exc:  # noqa: BLE001
            logging.exception("Falha inesperada ao calcular rota: %s", exc)
            return _failure("internal_error", "Erro interno ao calcular a rota.")

    def _find_route(self, start_id, goal_id, start, goal, algorithm) -> Dict[str, object]:
        start_coord = _parse_coordinate(start, "origem") if start is not None else None
        goal_coord = _parse_coordinate(goal, "destino") if goal is not None else None
        if start_coord is None and not start_id:
            raise InvalidInput("Informe o id ou as coordenadas da origem.")
        if goal_coord is None and not goal_id:
            raise InvalidInput("Informe o id ou as coordenadas do destino.")

        algorithm = algorithm or DEFAULT_ALGORITHM
        if algorithm not in self.registry:
            raise AlgorithmNotRegistered(f"Algoritmo '{algorithm}' não existe")

        snapshot = self.snapshot()
        source_node_id = self._resolve(snapshot, start_id, start_coord, "origem")
        target_node_id = self._resolve(snapshot, goal_id, goal_coord, "destino")

        logging.info("Calculando rota: %s → %s com %s", source_node_id, target_node_id, algorithm)
        result = self.registry.run(algorithm, nodes=snapshot.nodes, graph=snapshot.graph,
                                   start_id=source_node_id, goal_id=target_node_id)
        if result is None or not result.path:
            raise NoPathFound(
                "Não há caminho entre os dois pontos; eles podem estar em regiões não conectadas."
            )

        nodes, graph = snapshot.nodes, snapshot.graph
        duration_h = sum(graph[a][b].cost for a, b in zip(result.path[:-1], result.path[1:]))
        source, target = nodes[source_node_id], nodes[target_node_id]
        logging.info("Rota encontrada: %d nós, %.2f km", len(result.path), result.distance)
        return {
            "success": True,
            "algorithm": algorithm,
            "path": [(nodes[node_id].lat, nodes[node_id].lon) for node_id in result.path],
            "distance_m": result.distance * 1000.0,
            "duration_s": duration_h * 3600.0,
            "steps": result.steps,
            "elapsed_time_ms": result.elapsed_time,
            "start_point": {"id": source.id, "lat": source.lat, "lon": source.lon},
            "end_point": {"id": target.id, "lat": target.lat, "lon": target.lon},
        }

    def _resolve(self, snapshot: GraphSnapshot, node_id: Optional[str],
                 coord: Optional[Tuple[float, float]], label: str) -> str:
        if coord is not None:
            lat, lon = coord
            node_id = self.snapper.best_endpoint_for(lat, lon, snapshot.nodes, snapshot.graph)
            if node_id is None:
                raise NodeNotFound(f"Nenhum nó de via perto do ponto de {label}; escolha um ponto mais perto de uma rua.")
            return node_id
        node_id = str(node_id)
        if node_id not in snapshot.nodes:
            raise NodeNotFound(f"Nó de {label} não encontrado: {node_id}")
        return node_id

    # ------------------------------------------------------------------
    # Operações auxiliares
    # ------------------------------------------------------------------
    def list_algorithms(self) -> List[str]:
        return self.registry.list()

    def reload_graph(self) -> Dict[str, object]:
        try:
            snapshot = self.loader.load_all()
        except GeoRouteError as exc:
            logging.error("Falha ao recarregar grafo: %s", exc)
            return _failure(exc.kind, str(exc))
        except Exception as exc:  # noqa: BLE001
            logging.exception("Falha inesperada ao recarregar grafo: %s", exc)
            return _failure("internal_error", str(exc))
        return {"success": True, "message": f"Grafo recarregado: {len(snapshot.nodes)} nós."}

    def graph_stats(self) -> Dict[str, object]:
        '''
        Contagens do grafo em memória. total_edges é reportado como
        equivalente não dirigido (arestas dirigidas / 2).
        '''
        try:
            snapshot = self.snapshot()
        except GeoRouteError as exc:
            return _failure(exc.kind, str(exc))
        except Exception as exc:  # noqa: BLE001
            logging.exception("Falha inesperada ao carregar o grafo: %s", exc)
            return _failure("internal_error", str(exc))

        connected_nodes = 0
        directed_edges = 0
        for neighbors in snapshot.graph.values():
            directed_edges += len(neighbors)
            if neighbors:
                connected_nodes += 1
        total_nodes = len(snapshot.nodes)
        return {
            "success": True,
            "total_nodes": total_nodes,
            "connected_nodes": connected_nodes,
            "isolated_nodes": total_nodes - connected_nodes,
            "total_edges": directed_edges / 2,
            "graph_loaded": True,
        }

    def list_nodes(self) -> List[Dict[str, object]]:
        '''
        Todos os nós em memória como {id, lat, lon}. Auxiliar de
        inspeção: não devolve resposta estruturada.

        Erros
        -----
        StoreError : grafo ainda não carregado e coleções ausentes/ilegíveis
        '''
        snapshot = self.snapshot()
        return [{"id": n.id, "lat": n.lat, "lon": n.lon} for n in snapshot.nodes.values()]

    def check_graph(self) -> Dict[str, object]:
        '''Relatório de conectividade do grafo em memória, com "success".'''
        try:
            report = check_graph(self.snapshot())
        except GeoRouteError as exc:
            return _failure(exc.kind, str(exc))
        except Exception as exc:  # noqa: BLE001
            logging.exception("Falha inesperada no diagnóstico do grafo: %s", exc)
            return _failure("internal_error", str(exc))
        return {"success": True, **report}

    def snapshot(self) -> GraphSnapshot:
        '''Snapshot atual, carregando o grafo na primeira chamada.'''
        if not self.loader.is_loaded():
            self.loader.load_all()
        return self.loader.get_graph()


def _parse_coordinate(value: Coordinate, label: str) -> Tuple[float, float]:
    '''
    Aceita (lat, lon) ou {"lat": .., "lon"|"lng": ..}; valida faixa.
    '''
    try:
        if isinstance(value, Mapping):
            lat = value["lat"]
            lon = value["lon"] if "lon" in value else value["lng"]
        else:
            lat, lon = value
        lat, lon = float(lat), float(lon)
    except (KeyError, TypeError, ValueError) as exc:
        raise InvalidInput(f"Coordenada de {label} inválida: {value!r}") from exc
    if not (-90.0 <= lat <= 90.0) or not (-180.0 <= lon <= 180.0):
        raise InvalidInput(f"Coordenada de {label} fora da faixa: ({lat}, {lon})")
    return lat, lon


def _failure(kind: str, message: str) -> Dict[str, object]:
    return {"success": False, "error": kind, "message": message}
