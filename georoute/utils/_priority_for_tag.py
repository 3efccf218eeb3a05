from georoute.constants import HIGHWAY_PRIORITY
from ._normalize_tag import _normalize_tag

def _priority_for_tag(tag: str | None) -> int:
    '''
    Prioridade da via para o snapping. Variantes "_link" herdam a
    prioridade da via base; tags desconhecidas valem 0.
    '''

    t = _normalize_tag(tag)
    if t.endswith("_link"):
        t = t[: -len("_link")]
    return HIGHWAY_PRIORITY.get(t, 0)
