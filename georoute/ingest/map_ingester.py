import logging
import math
from collections import abc
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Tuple

from georoute.constants import MIN_SEGMENT_KM, ONEWAY_FORWARD, ONEWAY_REVERSE
from georoute.errors import IngestionError
from georoute.models import Edge, Node, Way, WayTags
from georoute.utils import _haversine_km, _normalize_tag, _speed_kmh_for_tag
from .is_relevant_way import is_relevant_way


@dataclass
class IngestStats:
    '''Contadores informativos de uma importação (não fazem parte do contrato).'''
    total_ways: int = 0
    accepted_ways: int = 0
    skipped_ways: int = 0
    skipped_segments: int = 0
    nodes: int = 0
    edges: int = 0


@dataclass
class IngestResult:
    nodes: List[Node] = field(default_factory=list)
    ways: List[Way] = field(default_factory=list)
    edges: List[Edge] = field(default_factory=list)
    stats: IngestStats = field(default_factory=IngestStats)


class MapIngester:
    '''
    Converte dados crus de mapa (pontos + ways + tags) em nós, ways e
    arestas dirigidas com distância (km) e custo de tempo (h).

    Observações
    -----------
    - Determinístico: mesma entrada, mesma saída (ordem inclusive).
    - Só os pontos referenciados por ways aceitas viram nós; isso evita
      nós soltos vindos de vias filtradas.
    - oneway in {'yes','true','1'} -> (u→v); oneway == '-1' -> (v→u);
      caso contrário -> (u→v) e (v→u).
    '''

    def __init__(self, min_segment_km: float = MIN_SEGMENT_KM) -> None:
        self.min_segment_km = min_segment_km

    def ingest(self, raw: Mapping[str, Iterable[Mapping[str, object]]]) -> IngestResult:
        '''
        Executa a importação completa.

        Parâmetros
        ----------
        raw : {"nodes": [{id, lat, lon}, ...], "ways": [{id, nodes, tags}, ...]}

        Retorno
        -------
        IngestResult : nós usados, ways aceitas, arestas e estatísticas

        Erros
        -----
        IngestionError : coleções ausentes ou registros malformados
        '''
        if not isinstance(raw, Mapping):
            raise IngestionError("Dados de mapa devem ser um mapeamento com 'nodes' e 'ways'.")
        for key in ("nodes", "ways"):
            collection = raw.get(key)
            if collection is None:
                raise IngestionError(f"Coleção obrigatória ausente nos dados de mapa: '{key}'")
            if (not isinstance(collection, abc.Iterable)
                    or isinstance(collection, (str, bytes, abc.Mapping))):
                raise IngestionError(f"Coleção '{key}' deve ser uma sequência de registros: {collection!r}")

        result = IngestResult()
        stats = result.stats

        # Passo 1: todos os pontos, sem filtro
        points = self._collect_points(raw["nodes"])
        logging.info("Pontos lidos: %d", len(points))

        # Passo 2 e 3: filtra ways e gera arestas
        used: Dict[str, None] = {}  # dict preserva a ordem de primeiro uso
        for raw_way in raw["ways"]:
            stats.total_ways += 1
            way = self._parse_way(raw_way)
            if not is_relevant_way(way.node_ids, way.tags):
                stats.skipped_ways += 1
                continue

            stats.accepted_ways += 1
            for nid in way.node_ids:
                used.setdefault(nid, None)
            result.ways.append(way)
            self._emit_edges(way, points, result)

        # Passo 4: apenas nós usados (e conhecidos)
        result.nodes = [
            Node(id=nid, lat=points[nid][0], lon=points[nid][1])
            for nid in used
            if nid in points
        ]

        stats.nodes = len(result.nodes)
        stats.edges = len(result.edges)
        logging.info(
            "Ways aceitas: %d / %d (ignoradas: %d) | nós: %d | arestas: %d | segmentos descartados: %d",
            stats.accepted_ways, stats.total_ways, stats.skipped_ways,
            stats.nodes, stats.edges, stats.skipped_segments,
        )
        return result

    def _collect_points(self, raw_nodes: Iterable[Mapping[str, object]]) -> Dict[str, Tuple[float, float]]:
        points: Dict[str, Tuple[float, float]] = {}
        for record in raw_nodes:
            try:
                lat, lon = float(record["lat"]), float(record["lon"])
                node_id = str(record["id"])
            except (KeyError, TypeError, ValueError) as exc:
                raise IngestionError(f"Ponto malformado: {record!r}") from exc
            # nan/inf passam por float() mas quebram a distância
            if not (math.isfinite(lat) and math.isfinite(lon)):
                raise IngestionError(f"Coordenada não finita no ponto {node_id}: ({lat}, {lon})")
            points[node_id] = (lat, lon)
        return points

    def _parse_way(self, raw_way: Mapping[str, object]) -> Way:
        try:
            way_id = str(raw_way["id"])
            refs = raw_way.get("nodes") or []
            node_ids = tuple(str(ref) for ref in refs)
            tags = WayTags.from_dict(raw_way.get("tags"))
        except (KeyError, TypeError, AttributeError, ValueError) as exc:
            raise IngestionError(f"Way malformada: {raw_way!r}") from exc
        return Way(id=way_id, node_ids=node_ids, tags=tags)

    def _emit_edges(self, way: Way, points: Dict[str, Tuple[float, float]], result: IngestResult) -> None:
        highway = _normalize_tag(way.tags.highway)
        oneway = _normalize_tag(way.tags.oneway)
        speed_kmh = _speed_kmh_for_tag(highway)

        for u, v in zip(way.node_ids[:-1], way.node_ids[1:]):
            if u not in points or v not in points:
                result.stats.skipped_segments += 1
                continue
            lat_u, lon_u = points[u]
            lat_v, lon_v = points[v]
            distance_km = _haversine_km(lat_u, lon_u, lat_v, lon_v)
            if distance_km < self.min_segment_km:
                result.stats.skipped_segments += 1
                continue

            forward = Edge(u=u, v=v, distance=distance_km, cost=distance_km / speed_kmh,
                           highway=highway, way_id=way.id)
            if oneway in ONEWAY_FORWARD:
                result.edges.append(forward)
            elif oneway == ONEWAY_REVERSE:
                result.edges.append(forward.reversed())
            else:
                result.edges.append(forward)
                result.edges.append(forward.reversed())
