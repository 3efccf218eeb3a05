from dataclasses import dataclass

@dataclass(frozen=True)
class Node:
    '''
    Ponto geográfico usado como vértice do grafo.
    - id: token estável vindo do OSM (sempre string)
    - lat, lon: graus decimais
    '''
    id: str
    lat: float
    lon: float

    def as_record(self) -> dict:
        return {"osmid": self.id, "y": self.lat, "x": self.lon}
