from typing import Sequence
from georoute.constants import ALLOWED_HIGHWAYS, FORBIDDEN_ACCESS
from georoute.models import WayTags
from georoute.utils import _normalize_tag

def is_relevant_way(node_ids: Sequence[str], tags: WayTags) -> bool:
    '''
    Define se uma way deve ser incluída no grafo.

    Regras
    ------
    - Exige ao menos 2 referências a nós.
    - Exige 'highway' presente e pertencente a ALLOWED_HIGHWAYS.
    - Exclui access=private|no e area=yes.

    Parâmetros
    ----------
    node_ids : sequência de IDs de nós da way
    tags     : WayTags da way

    Retorno
    -------
    bool : True se a way for relevante; False caso contrário.
    '''

    if len(node_ids) < 2:
        return False
    highway = _normalize_tag(tags.highway)
    if not highway or highway not in ALLOWED_HIGHWAYS:
        return False
    if _normalize_tag(tags.access) in FORBIDDEN_ACCESS:
        return False
    if _normalize_tag(tags.area) == "yes":
        return False
    return True
