from typing import Optional, Sequence

from georoute.routing import RouteService
from .print_route import print_route

def cli_route(service: RouteService, algorithm: str,
              start_id: Optional[str] = None, goal_id: Optional[str] = None,
              start: Optional[Sequence[float]] = None, goal: Optional[Sequence[float]] = None) -> int:
    '''
    Calcula a rota e imprime o resultado; em caso de falha imprime o tipo
    do erro e a mensagem.

    Retorno
    -------
    int : 0 com rota; 1 caso contrário
    '''

    route = service.find_route(start_id=start_id, goal_id=goal_id, start=start, goal=goal, algorithm=algorithm)
    if not route["success"]:
        print(f"[{route['error']}] {route['message']}")
        return 1
    print_route(route)
    return 0
