from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from roadgraph.cli._build_arg_parser import _build_arg_parser
from roadgraph.cli.cli_build import cli_build
from roadgraph.cli.cli_nearest import cli_nearest
from roadgraph.cli.cli_stats import cli_stats


def _resolve(path: str | None) -> Path | None:
    if path is None:
        return None
    return Path(path).expanduser().resolve()


def main(argv: List[str] | None = None) -> int:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )

    osm_path = _resolve(getattr(args, "osm_in", None))
    nodes_csv = _resolve(getattr(args, "nodes_csv", None))
    edges_csv = _resolve(getattr(args, "edges_csv", None))

    if args.command == "stats" and osm_path is None and (nodes_csv is None or edges_csv is None):
        parser.error("stats: informe --in ou --nodes e --edges")

    if args.command in ("build", "stats") and osm_path is not None:
        inputs = [osm_path]
    else:
        inputs = [nodes_csv, edges_csv]
    for path in inputs:
        if not path.exists():
            logging.error("Arquivo de entrada não existe: %s", path)
            return 1

    try:
        if args.command == "build":
            cli_build(osm_path, nodes_csv, edges_csv, clean=args.clean)
        elif args.command == "stats":
            cli_stats(osm_path, nodes_csv, edges_csv)
        else:
            cli_nearest(nodes_csv, edges_csv, args.lat, args.lon)
    except Exception as exc:  # noqa: BLE001
        logging.exception("Falha ao processar: %s", exc)
        return 2

    logging.info("Concluído.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
