from typing import Mapping

from georoute.utils import _format_seconds_hms

def print_route(route: Mapping[str, object]) -> None:
    '''
    Imprime a sequência de pontos da rota e, ao final, distância, tempo
    estimado, passos e tempo de cálculo.

    Parâmetros
    ----------
    route : resposta de sucesso de RouteService.find_route
    '''

    for index, (lat, lon) in enumerate(route["path"]):
        print(f"{index:>4} | {lat:.7f}, {lon:.7f}")
    label = route["algorithm"]
    print(f"Distância total ({label}): {route['distance_m']:.1f} m")
    print(f"Tempo total estimado ({label}): {_format_seconds_hms(route['duration_s'])} ({route['duration_s']:.1f} s)")
    print(f"Passos: {route['steps']} | cálculo: {route['elapsed_time_ms']:.2f} ms")
