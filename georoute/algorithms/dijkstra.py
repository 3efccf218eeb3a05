from .best_first import BestFirstSearch


class Dijkstra(BestFirstSearch):
    '''
    Dijkstra: prioridade = g(n), a distância acumulada (sem heurística).
    Ótimo para pesos não negativos.
    '''

    name = "dijkstra"
    uses_heuristic = False

    def priority(self, cost_from_start: float, heuristic_to_goal: float) -> float:
        return cost_from_start
