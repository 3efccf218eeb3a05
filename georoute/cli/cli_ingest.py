from pathlib import Path

from georoute.ingest import process_osm_to_store
from georoute.store import GraphStore

def cli_ingest(osm_in: str, data_dir: str) -> None:
    '''
    Importa o arquivo OSM e substitui o grafo persistido em data_dir.
    Imprime o resumo da importação.

    Parâmetros
    ----------
    osm_in   : str (caminho do .osm)
    data_dir : str (diretório do GraphStore)
    '''

    store = GraphStore(Path(data_dir))
    result = process_osm_to_store(Path(osm_in).expanduser().resolve(), store)
    stats = result.stats
    print(f"Ways aceitas: {stats.accepted_ways} / {stats.total_ways} (ignoradas: {stats.skipped_ways})")
    print(f"Nós: {stats.nodes} | Arestas: {stats.edges} | Segmentos descartados: {stats.skipped_segments}")
