from georoute.constants import SPEED_LIMITS_KMH, DEFAULT_SPEED_KMH
from ._normalize_tag import _normalize_tag

def _speed_kmh_for_tag(tag: str | None) -> float:
    '''
    Retorna a velocidade média (km/h) associada ao tipo de via.
    Tags desconhecidas caem na velocidade conservadora DEFAULT_SPEED_KMH.

    Parâmetros
    ----------
    tag : str | None (highway)

    Retorno
    ----------
    float : velocidade em km/h (sempre > 0)
    '''

    return float(SPEED_LIMITS_KMH.get(_normalize_tag(tag), DEFAULT_SPEED_KMH))
