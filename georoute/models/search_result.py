from dataclasses import dataclass
from typing import List

@dataclass(frozen=True)
class SearchResult:
    '''
    Resultado de uma busca de caminho.
    - path: ids dos nós de origem a destino (inclusivos)
    - steps: quantidade de arestas no caminho (len(path) - 1)
    - distance: soma das distâncias das arestas percorridas (km)
    - elapsed_time: duração do cálculo (ms, relógio de parede)
    - expanded: nós retirados da fronteira durante a busca
    '''
    path: List[str]
    steps: int
    distance: float
    elapsed_time: float
    expanded: int = 0
