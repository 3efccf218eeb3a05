from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Tuple

# Tags consultadas pela lógica de roteamento; o resto vai para WayTags.extra
_KNOWN_TAGS = ("highway", "access", "oneway", "name", "area")

@dataclass(frozen=True)
class WayTags:
    '''
    Tags de uma way com campos nomeados para o que decide o roteamento
    (highway, access, oneway, name, area). Demais tags ficam em 'extra'
    apenas para proveniência/depuração.
    '''
    highway: Optional[str] = None
    access: Optional[str] = None
    oneway: Optional[str] = None
    name: Optional[str] = None
    area: Optional[str] = None
    extra: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, tags: Optional[Mapping[str, object]]) -> "WayTags":
        '''
        Constrói WayTags a partir do dicionário cru de tags do OSM.

        Parâmetros
        ----------
        tags : Mapping[str, object] | None

        Retorno
        -------
        WayTags : valores convertidos para str; None quando ausentes
        '''
        tags = dict(tags or {})
        known = {k: (None if tags.get(k) is None else str(tags[k])) for k in _KNOWN_TAGS}
        extra = {str(k): str(v) for k, v in tags.items() if k not in _KNOWN_TAGS}
        return cls(extra=extra, **known)

    def as_dict(self) -> Dict[str, str]:
        '''Volta ao formato de dicionário (somente chaves presentes).'''
        out = {k: getattr(self, k) for k in _KNOWN_TAGS if getattr(self, k) is not None}
        out.update(self.extra)
        return out


@dataclass(frozen=True)
class Way:
    '''
    Caminho tipado do OSM: id, sequência ordenada de nós e tags.
    Mantido para proveniência; não é consultado em tempo de busca.
    '''
    id: str
    node_ids: Tuple[str, ...]
    tags: WayTags
