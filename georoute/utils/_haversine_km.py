import math
from georoute.constants import EARTH_RADIUS_KM

def _haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    '''
    Calcula a distância Haversine entre dois pontos (lat, lon) em QUILÔMETROS.

    Parâmetros
    ----------
    lat1, lon1 : float (ponto A, graus decimais)
    lat2, lon2 : float (ponto B, graus decimais)

    Retorno
    ----------
    float : distância em km ao longo da superfície da Terra (raio 6371 km)
    '''

    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    dphi = phi2 - phi1
    dlmb = math.radians(lon2 - lon1)
    a = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlmb / 2) ** 2
    # arredondamentos podem empurrar 'a' para fora de [0, 1]
    a = min(1.0, max(0.0, a))
    return 2.0 * EARTH_RADIUS_KM * math.asin(math.sqrt(a))
