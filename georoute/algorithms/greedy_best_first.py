from .best_first import BestFirstSearch


class GreedyBestFirst(BestFirstSearch):
    '''
    Greedy Best-First: prioridade = λ(n) apenas, ignorando o custo acumulado.

    Observações
    -----------
    - NÃO garante o caminho mais curto. É um modo aproximado, exposto pelo
      mesmo contrato dos algoritmos ótimos; quem chama deve tratar a
      distância retornada como estimativa.
    - Costuma expandir bem menos nós que A*/Dijkstra.
    '''

    name = "greedy_best_first"
    optimal = False

    def priority(self, cost_from_start: float, heuristic_to_goal: float) -> float:
        return heuristic_to_goal
