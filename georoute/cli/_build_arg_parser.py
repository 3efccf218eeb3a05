import argparse
import os

from georoute.constants import DATA_DIR_ENV, DEFAULT_ALGORITHM, DEFAULT_DATA_DIR, DEFAULT_SNAP_CANDIDATES

# CLI
def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="georoute",
        description=(
            "Roteamento sobre malha viária do OpenStreetMap.\n"
            " - ingest     : OSM (.osm) -> nodes.csv, edges.csv, ways.csv\n"
            " - stats      : contagens do grafo\n"
            " - check      : diagnóstico de conectividade\n"
            " - nearest    : nó mais próximo de uma coordenada\n"
            " - route      : rota entre dois pontos (ids ou lat/lon)\n"
            " - algorithms : algoritmos disponíveis"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--data-dir", dest="data_dir",
        default=os.environ.get(DATA_DIR_ENV, DEFAULT_DATA_DIR),
        help=f"Diretório dos CSVs do grafo (padrão: ${DATA_DIR_ENV} ou '{DEFAULT_DATA_DIR}')",
    )
    parser.add_argument("--log-level", dest="log_level", default="INFO", help="Nível de log (ex.: INFO, DEBUG)")

    sub = parser.add_subparsers(dest="command", required=True)

    ingest = sub.add_parser("ingest", help="Importa um arquivo .osm para o GraphStore")
    ingest.add_argument("--in", dest="osm_in", required=True, help="Caminho do arquivo .osm de entrada")

    sub.add_parser("stats", help="Imprime |V|, |E| e nós isolados")
    sub.add_parser("check", help="Diagnóstico de conectividade do grafo")
    sub.add_parser("algorithms", help="Lista os algoritmos registrados")

    nearest = sub.add_parser("nearest", help="Nó mais adequado para uma coordenada")
    nearest.add_argument("lat", type=float)
    nearest.add_argument("lon", type=float)
    nearest.add_argument("-k", dest="k", type=int, default=DEFAULT_SNAP_CANDIDATES,
                         help="Quantidade de candidatos da consulta espacial")

    route = sub.add_parser("route", help="Calcula uma rota")
    route.add_argument("--from-id", dest="start_id", help="Id do nó de origem")
    route.add_argument("--to-id", dest="goal_id", help="Id do nó de destino")
    route.add_argument("--from", dest="start", nargs=2, type=float, metavar=("LAT", "LON"),
                       help="Coordenadas da origem")
    route.add_argument("--to", dest="goal", nargs=2, type=float, metavar=("LAT", "LON"),
                       help="Coordenadas do destino")
    route.add_argument("--algorithm", "-a", dest="algorithm", default=DEFAULT_ALGORITHM,
                       help=f"Algoritmo de busca (padrão: {DEFAULT_ALGORITHM})")
    return parser
