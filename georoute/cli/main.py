#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
============================================================================
georoute: linha de comando
----------------------------------------------------------------------------
Importa um arquivo OSM para o GraphStore (CSVs) e consulta o grafo:

  georoute --data-dir data ingest --in map.osm
  georoute --data-dir data stats
  georoute --data-dir data route --from -9.6684 -35.7032 --to -9.6380 -35.7196

Códigos de saída
----------------
0 sucesso; 1 consulta sem resultado; 2 falha de importação/armazenamento.
============================================================================
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from georoute.errors import GeoRouteError
from georoute.routing import RouteService
from georoute.snapping import NodeSnapper
from georoute.store import GraphStore
from ._build_arg_parser import _build_arg_parser
from .cli_algorithms import cli_algorithms
from .cli_check import cli_check
from .cli_ingest import cli_ingest
from .cli_nearest import cli_nearest
from .cli_route import cli_route
from .cli_stats import cli_stats

def main(argv: List[str] | None = None) -> int:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )

    data_dir = Path(args.data_dir).expanduser().resolve()

    try:
        if args.command == "ingest":
            cli_ingest(args.osm_in, str(data_dir))
            logging.info("Concluído.")
            return 0

        service = RouteService.from_store(GraphStore(data_dir))
        if args.command == "algorithms":
            return cli_algorithms(service)
        if args.command == "stats":
            return cli_stats(service)
        if args.command == "check":
            return cli_check(service)
        if args.command == "nearest":
            service.snapper = NodeSnapper(service.snapper.candidate_lookup, k=args.k)
            return cli_nearest(service, args.lat, args.lon)
        if args.command == "route":
            return cli_route(service, args.algorithm, start_id=args.start_id, goal_id=args.goal_id,
                             start=args.start, goal=args.goal)
    except GeoRouteError as exc:
        logging.error("Falha (%s): %s", exc.kind, exc)
        return 2

    parser.print_usage()
    return 1

if __name__ == "__main__":
    raise SystemExit(main())
