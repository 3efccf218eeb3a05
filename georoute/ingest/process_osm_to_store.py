import logging
from pathlib import Path

from georoute.store import GraphStore
from .map_ingester import IngestResult, MapIngester
from .osm_xml import read_osm_map

def process_osm_to_store(osm_path: Path, store: GraphStore) -> IngestResult:
    '''
    Pipeline de alto nível: lê o OSM, filtra/gera arestas e substitui por
    completo o grafo persistido.

    Parâmetros
    ----------
    osm_path : caminho do arquivo OSM de entrada
    store    : GraphStore de destino

    Retorno
    -------
    IngestResult : o que foi gravado (com estatísticas)

    Observações
    -----------
    Qualquer IngestionError interrompe antes da escrita; nada é gravado.
    '''

    logging.info("Lendo mapa de %s", osm_path)
    raw = read_osm_map(Path(osm_path))

    logging.info("Filtrando ways e gerando arestas...")
    result = MapIngester().ingest(raw)

    logging.info("Gravando grafo em %s", store.data_dir)
    store.replace_all(result.nodes, result.edges, result.ways)
    return result
