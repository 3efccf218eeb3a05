import csv
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

import numpy as np
import pandas as pd

from georoute.constants import (
    EARTH_RADIUS_KM,
    EDGE_COLUMNS, EDGES_FILE,
    NODE_COLUMNS, NODES_FILE,
    WAY_COLUMNS, WAY_NODES_SEPARATOR, WAYS_FILE,
)
from georoute.errors import StoreError
from georoute.models import Edge, Node, Way, WayTags

_FILES = {"nodes": NODES_FILE, "edges": EDGES_FILE, "ways": WAYS_FILE}
_COLUMNS = {"nodes": NODE_COLUMNS, "edges": EDGE_COLUMNS, "ways": WAY_COLUMNS}
# colunas de id lidas como texto para preservar tokens como "007"
_STR_COLUMNS = {
    "nodes": {"osmid": str},
    "edges": {"u": str, "v": str, "highway": str, "way_id": str},
    "ways": {"id": str, "nodes": str, "tags": str},
}


class GraphStore:
    '''
    Armazenamento persistente do grafo em um diretório de CSVs:
    - nodes.csv : osmid, y (lat), x (lon)
    - edges.csv : u, v, distance (km), cost (h), highway, way_id
    - ways.csv  : id, nodes (ids separados por ';'), tags (JSON)

    Observações
    -----------
    - Escrita com csv (stdlib), leitura com pandas, como nos CSVs de nós/arestas.
    - replace_all grava tudo em arquivos temporários e só então substitui os
      arquivos finais: uma importação que falha no meio não deixa estado parcial.
    - nearest_node_ids calcula Haversine vetorizado sobre a tabela de nós.
    '''

    def __init__(self, data_dir: Path) -> None:
        self.data_dir = Path(data_dir).expanduser()
        self._nodes_cache: Optional[Tuple[Optional[int], pd.DataFrame]] = None

    def path_for(self, collection: str) -> Path:
        if collection not in _FILES:
            raise StoreError(f"Coleção desconhecida: {collection!r}")
        return self.data_dir / _FILES[collection]

    # ------------------------------------------------------------------
    # Escrita
    # ------------------------------------------------------------------
    def replace_all(self, nodes: Iterable[Node], edges: Iterable[Edge], ways: Iterable[Way]) -> None:
        '''
        Descarta as três coleções e grava as novas (drop-and-recreate).

        Parâmetros
        ----------
        nodes : nós a persistir
        edges : arestas dirigidas
        ways  : ways aceitas (proveniência)
        '''
        self.data_dir.mkdir(parents=True, exist_ok=True)
        staged: Dict[str, Path] = {}
        try:
            staged["nodes"] = self._stage("nodes", (n.as_record() for n in nodes))
            staged["edges"] = self._stage("edges", (e.as_record() for e in edges))
            staged["ways"] = self._stage("ways", (self._way_record(w) for w in ways))
        except Exception:
            for tmp in staged.values():
                tmp.unlink(missing_ok=True)
            raise

        for collection, tmp in staged.items():
            os.replace(tmp, self.path_for(collection))
            logging.info("Coleção gravada: %s", self.path_for(collection))
        self._nodes_cache = None

    def drop(self, collection: str) -> None:
        path = self.path_for(collection)
        if path.exists():
            path.unlink()
            logging.info("Coleção removida: %s", path)
        if collection == "nodes":
            self._nodes_cache = None

    def insert_nodes(self, nodes: Iterable[Node]) -> None:
        self._append("nodes", (n.as_record() for n in nodes))
        self._nodes_cache = None

    def insert_edges(self, edges: Iterable[Edge]) -> None:
        self._append("edges", (e.as_record() for e in edges))

    def insert_ways(self, ways: Iterable[Way]) -> None:
        self._append("ways", (self._way_record(w) for w in ways))

    # ------------------------------------------------------------------
    # Leitura
    # ------------------------------------------------------------------
    def read_nodes(self) -> pd.DataFrame:
        '''
        Tabela de nós (osmid como str, y/x como float). Mantida em cache
        enquanto o arquivo não for modificado, pois o snapping consulta
        a tabela a cada rota.
        '''
        path = self.path_for("nodes")
        try:
            mtime = path.stat().st_mtime_ns
        except OSError:
            mtime = None
        if self._nodes_cache is None or mtime is None or self._nodes_cache[0] != mtime:
            self._nodes_cache = (mtime, self._read("nodes"))
        return self._nodes_cache[1]

    def read_edges(self) -> pd.DataFrame:
        return self._read("edges")

    def read_ways(self) -> List[Way]:
        df = self._read("ways")
        ways: List[Way] = []
        for way_id, node_ids, tags in zip(df["id"], df["nodes"], df["tags"]):
            ids = tuple(node_ids.split(WAY_NODES_SEPARATOR)) if node_ids else ()
            ways.append(Way(id=way_id, node_ids=ids, tags=WayTags.from_dict(json.loads(tags or "{}"))))
        return ways

    def find_node(self, node_id: str) -> Optional[Node]:
        '''Busca exata por id; None se não existir.'''
        df = self.read_nodes()
        match = df[df["osmid"] == str(node_id)]
        if match.empty:
            return None
        row = match.iloc[0]
        return Node(id=row["osmid"], lat=float(row["y"]), lon=float(row["x"]))

    def nearest_node_ids(self, lat: float, lon: float, k: int = 10) -> List[str]:
        '''
        Retorna os ids dos k nós armazenados mais próximos de (lat, lon),
        do mais próximo para o mais distante.

        Parâmetros
        ----------
        lat, lon : coordenadas de consulta (graus decimais)
        k        : quantidade máxima de candidatos

        Retorno
        -------
        List[str] : ids ordenados por distância Haversine crescente
        '''
        df = self.read_nodes()
        if df.empty or k <= 0:
            return []
        distances = _haversine_km_vectorized(float(lat), float(lon), df["y"].to_numpy(), df["x"].to_numpy())
        # mergesort é estável: empates mantêm a ordem do arquivo
        order = np.argsort(distances, kind="mergesort")[:k]
        return [df["osmid"].iat[i] for i in order]

    # ------------------------------------------------------------------
    # Auxiliares
    # ------------------------------------------------------------------
    def _read(self, collection: str) -> pd.DataFrame:
        path = self.path_for(collection)
        if not path.exists():
            raise StoreError(f"Coleção '{collection}' não encontrada em {path}")
        try:
            df = pd.read_csv(path, dtype=_STR_COLUMNS[collection], keep_default_na=False)
        except (OSError, ValueError, pd.errors.ParserError) as exc:
            raise StoreError(f"Falha ao ler coleção '{collection}' em {path}: {exc}") from exc
        missing = [c for c in _COLUMNS[collection] if c not in df.columns]
        if missing:
            raise StoreError(f"Coleção '{collection}' sem colunas obrigatórias: {missing}")
        return df

    def _stage(self, collection: str, records: Iterable[dict]) -> Path:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{collection}_", suffix=".csv", dir=self.data_dir)
        tmp = Path(tmp_name)
        try:
            with os.fdopen(fd, "w", newline="", encoding="utf-8") as f:
                self._write_rows(f, collection, records, header=True)
        except Exception:
            tmp.unlink(missing_ok=True)
            raise
        return tmp

    def _append(self, collection: str, records: Iterable[dict]) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        path = self.path_for(collection)
        write_header = not path.exists()
        with path.open("a", newline="", encoding="utf-8") as f:
            self._write_rows(f, collection, records, header=write_header)

    @staticmethod
    def _write_rows(f, collection: str, records: Iterable[dict], header: bool) -> None:
        writer = csv.DictWriter(f, fieldnames=_COLUMNS[collection])
        if header:
            writer.writeheader()
        for record in records:
            writer.writerow(record)

    @staticmethod
    def _way_record(way: Way) -> dict:
        return {
            "id": way.id,
            "nodes": WAY_NODES_SEPARATOR.join(way.node_ids),
            "tags": json.dumps(way.tags.as_dict(), ensure_ascii=False, sort_keys=True),
        }


def _haversine_km_vectorized(lat: float, lon: float, lats: np.ndarray, lons: np.ndarray) -> np.ndarray:
    phi1 = np.radians(lat)
    phi2 = np.radians(lats.astype(float))
    dphi = phi2 - phi1
    dlmb = np.radians(lons.astype(float) - lon)
    a = np.sin(dphi / 2) ** 2 + np.cos(phi1) * np.cos(phi2) * np.sin(dlmb / 2) ** 2
    return 2.0 * EARTH_RADIUS_KM * np.arcsin(np.sqrt(np.clip(a, 0.0, 1.0)))
