from dataclasses import dataclass

@dataclass(frozen=True)
class Edge:
    '''
    Aresta dirigida u->v com:
    - distance: comprimento Haversine do segmento (km)
    - cost: tempo de travessia em horas (distance / velocidade do highway)
    - highway: classificação da via
    - way_id: way de origem (proveniência)

    Observações
    -----------
    Dataclass imutável (frozen=True): o grafo em memória é compartilhado
    entre consultas concorrentes e nunca é alterado após a carga.
    '''
    u: str
    v: str
    distance: float
    cost: float
    highway: str
    way_id: str

    def reversed(self) -> "Edge":
        '''Mesma aresta no sentido v->u (distância e custo idênticos).'''
        return Edge(u=self.v, v=self.u, distance=self.distance, cost=self.cost,
                    highway=self.highway, way_id=self.way_id)

    def as_record(self) -> dict:
        return {
            "u": self.u, "v": self.v,
            "distance": self.distance, "cost": self.cost,
            "highway": self.highway, "way_id": self.way_id,
        }
