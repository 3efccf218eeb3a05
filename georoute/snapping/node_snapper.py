import logging
from typing import Callable, List, Mapping, Optional, Sequence

from georoute.constants import DEFAULT_SNAP_CANDIDATES
from georoute.models import Edge, Node
from georoute.utils import _priority_for_tag

# (lat, lon, k) -> ids dos k nós mais próximos, do mais próximo ao mais distante
CandidateLookup = Callable[[float, float, int], Sequence[str]]


class NodeSnapper:
    '''
    Resolve uma coordenada arbitrária para o nó do grafo mais adequado como
    origem/destino de rota.

    Passos
    ------
    1) consulta espacial: até k candidatos mais próximos (GraphStore);
    2) descarta candidatos ausentes do grafo em memória (store e memória
       podem estar dessincronizados);
    3) pontua cada candidato pela maior prioridade de via entre suas
       arestas de saída (candidato sem arestas de saída é ignorado);
    4) vence a maior pontuação; empate fica com o mais próximo;
    5) se ninguém pontuou acima de zero, usa o candidato mais próximo.

    Observações
    -----------
    O fallback do passo 5 garante resultado sempre que houver ao menos um
    candidato no grafo, mesmo que seja uma calçada (footway).
    '''

    def __init__(self, candidate_lookup: CandidateLookup, k: int = DEFAULT_SNAP_CANDIDATES) -> None:
        self.candidate_lookup = candidate_lookup
        self.k = k

    def candidates_for(self, lat: float, lon: float, nodes: Mapping[str, Node]) -> List[str]:
        '''Candidatos da consulta espacial presentes em memória, do mais próximo ao mais distante.'''
        found = self.candidate_lookup(float(lat), float(lon), self.k)
        valid = [str(node_id) for node_id in found if str(node_id) in nodes]
        if len(valid) < len(found):
            logging.debug("Snapping: %d de %d candidatos fora do grafo em memória",
                          len(found) - len(valid), len(found))
        return valid

    def best_endpoint_for(self, lat: float, lon: float, nodes: Mapping[str, Node],
                          graph: Mapping[str, Mapping[str, Edge]]) -> Optional[str]:
        '''
        Escolhe o melhor nó para (lat, lon).

        Parâmetros
        ----------
        lat, lon : coordenadas do ponto (graus decimais)
        nodes    : mapa de nós em memória
        graph    : adjacência em memória

        Retorno
        -------
        str | None : id do nó escolhido; None se nenhum candidato estiver no grafo
        '''
        candidates = self.candidates_for(lat, lon, nodes)
        if not candidates:
            logging.info("Snapping: nenhum nó do grafo perto de (%.6f, %.6f)", lat, lon)
            return None

        best_node_id: Optional[str] = None
        best_score = -1
        for node_id in candidates:
            outgoing = graph.get(node_id)
            if not outgoing:
                continue
            score = max(_priority_for_tag(edge.highway) for edge in outgoing.values())
            if score > best_score:
                best_node_id, best_score = node_id, score

        if best_score <= 0:
            # só calçadas/trilhas (ou nada com saída): aceita o mais próximo
            return candidates[0]
        return best_node_id

    def nearest_node_for(self, lat: float, lon: float, nodes: Mapping[str, Node]) -> Optional[str]:
        '''Nó em memória mais próximo de (lat, lon), sem pontuação de via.'''
        candidates = self.candidates_for(lat, lon, nodes)
        return candidates[0] if candidates else None
