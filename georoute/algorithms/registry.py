import logging
from typing import Dict, List, Mapping, Optional, Protocol

from georoute.errors import AlgorithmNotRegistered, InvalidAlgorithmError, InvalidInput
from georoute.models import Edge, Node, SearchResult
from .astar import AStar
from .dijkstra import Dijkstra
from .greedy_best_first import GreedyBestFirst


class PathfindingAlgorithm(Protocol):
    name: str

    def find_path(self, nodes: Mapping[str, Node], graph: Mapping[str, Mapping[str, Edge]],
                  start_id: str, goal_id: str) -> Optional[SearchResult]:
        ...


class AlgorithmRegistry:
    '''
    Tabela nome -> algoritmo de busca.

    Observações
    -----------
    Não é um singleton: a aplicação cria um registro na inicialização e o
    repassa ao RouteService. Após a inicialização só há leituras.
    '''

    def __init__(self) -> None:
        self._algorithms: Dict[str, PathfindingAlgorithm] = {}

    def register(self, algorithm: PathfindingAlgorithm) -> PathfindingAlgorithm:
        '''
        Registra um algoritmo. Exige 'name' (str não vazia) e 'find_path' chamável.
        Registrar de novo o mesmo nome substitui o anterior.

        Erros
        -----
        InvalidAlgorithmError : objeto sem name/find_path válidos
        '''
        name = getattr(algorithm, "name", None)
        if not isinstance(name, str) or not name.strip() or not callable(getattr(algorithm, "find_path", None)):
            raise InvalidAlgorithmError(
                "Algoritmo inválido: precisa de name e find_path(nodes, graph, start_id, goal_id)"
            )
        self._algorithms[name] = algorithm
        logging.info("Algoritmo registrado: %s", name)
        return algorithm

    def get(self, name: str) -> Optional[PathfindingAlgorithm]:
        return self._algorithms.get(name)

    def list(self) -> List[str]:
        '''Nomes registrados, na ordem de registro.'''
        return list(self._algorithms)

    def __contains__(self, name: object) -> bool:
        return name in self._algorithms

    def run(self, name: str, nodes: Optional[Mapping[str, Node]] = None,
            graph: Optional[Mapping[str, Mapping[str, Edge]]] = None,
            start_id: Optional[str] = None, goal_id: Optional[str] = None) -> Optional[SearchResult]:
        '''
        Executa o algoritmo 'name'.

        Erros
        -----
        AlgorithmNotRegistered : nome desconhecido
        InvalidInput           : nodes, graph, start_id ou goal_id ausente
        '''
        algorithm = self._algorithms.get(name)
        if algorithm is None:
            raise AlgorithmNotRegistered(f"Algoritmo '{name}' não registrado")
        if nodes is None or graph is None or start_id in (None, "") or goal_id in (None, ""):
            raise InvalidInput("Parâmetros ausentes: nodes, graph, start_id ou goal_id")

        logging.info("Executando %s de %s → %s", name, start_id, goal_id)
        return algorithm.find_path(nodes, graph, start_id, goal_id)


def default_registry() -> AlgorithmRegistry:
    '''Registro com os três algoritmos do pacote: astar, dijkstra, greedy_best_first.'''
    registry = AlgorithmRegistry()
    for algorithm in (AStar(), Dijkstra(), GreedyBestFirst()):
        registry.register(algorithm)
    return registry
