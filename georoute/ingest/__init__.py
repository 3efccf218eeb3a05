from .is_relevant_way import is_relevant_way
from .map_ingester import IngestResult, IngestStats, MapIngester
from .osm_xml import iter_ways, parse_nodes, read_osm_map
from .process_osm_to_store import process_osm_to_store

__all__ = [
    "is_relevant_way",
    "IngestResult",
    "IngestStats",
    "MapIngester",
    "iter_ways",
    "parse_nodes",
    "read_osm_map",
    "process_osm_to_store",
]
