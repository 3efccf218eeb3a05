from .best_first import BestFirstSearch


class AStar(BestFirstSearch):
    '''
    A*: f(n) = g(n) + λ(n), onde g(n) é a distância acumulada e λ(n) a
    distância Haversine (linha reta) até o destino.

    Observações
    -----------
    - Como cada aresta mede pelo menos a distância em linha reta entre seus
      extremos, λ é admissível e consistente: mesma distância ótima do
      Dijkstra, normalmente expandindo menos nós.
    '''

    name = "astar"

    def priority(self, cost_from_start: float, heuristic_to_goal: float) -> float:
        return cost_from_start + heuristic_to_goal
