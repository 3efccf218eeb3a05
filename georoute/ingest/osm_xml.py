import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Dict, Iterator, List

from georoute.errors import IngestionError

def parse_nodes(osm_path: Path) -> Iterator[Dict[str, object]]:
    '''
    Itera sobre os <node> do arquivo OSM produzindo {id, lat, lon}.
    Nenhum filtro é aplicado aqui.

    Parâmetros
    ----------
    osm_path : caminho do arquivo .osm de entrada

    Yield
    -----
    dict : {"id": str, "lat": float, "lon": float}

    Observações
    -----------
    - Usa iterparse no evento "end" e limpa os elementos para reduzir uso de memória.
    - Nó sem id/lat/lon ou com coordenada não numérica é erro fatal (IngestionError).
    '''

    for _, elem in _iterparse(osm_path):
        if elem.tag == "node":
            try:
                yield {
                    "id": elem.attrib["id"],
                    "lat": float(elem.attrib["lat"]),
                    "lon": float(elem.attrib["lon"]),
                }
            except (KeyError, ValueError) as exc:
                raise IngestionError(f"Nó malformado em {osm_path}: {elem.attrib!r}") from exc
            finally:
                elem.clear()


def iter_ways(osm_path: Path) -> Iterator[Dict[str, object]]:
    '''
    Itera sobre as ways do arquivo OSM e produz id, lista ordenada de IDs de
    nós e dicionário de tags. Não aplica filtro aqui.

    Yield
    -----
    dict : {"id": str, "nodes": List[str], "tags": Dict[str, str]}
    '''

    for _, elem in _iterparse(osm_path):
        if elem.tag == "way":
            try:
                way = {
                    "id": elem.attrib["id"],
                    "nodes": [nd.attrib["ref"] for nd in elem.findall("nd")],
                    "tags": {t.attrib["k"]: t.attrib.get("v", "") for t in elem.findall("tag")},
                }
            except KeyError as exc:
                raise IngestionError(f"Way malformada em {osm_path}: {elem.attrib!r}") from exc
            finally:
                elem.clear()
            yield way


def read_osm_map(osm_path: Path) -> Dict[str, List[Dict[str, object]]]:
    '''
    Lê o arquivo OSM inteiro no formato cru esperado pelo MapIngester:
    {"nodes": [...], "ways": [...]}.
    '''

    osm_path = Path(osm_path)
    if not osm_path.exists():
        raise IngestionError(f"Arquivo de entrada não existe: {osm_path}")
    return {"nodes": list(parse_nodes(osm_path)), "ways": list(iter_ways(osm_path))}


def _iterparse(osm_path: Path):
    try:
        yield from ET.iterparse(str(osm_path), events=("end",))
    except ET.ParseError as exc:
        raise IngestionError(f"XML inválido em {osm_path}: {exc}") from exc
