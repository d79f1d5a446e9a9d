import argparse


# CLI
def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="roadgraph",
        description=(
            "Constrói o grafo de vias a partir de um arquivo OSM (.osm):\n"
            " - nodes: osmid,y,x,name\n"
            " - edges: u,v,d (d em metros)"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--log-level", dest="log_level", default="INFO", help="Nível de log (ex.: INFO, DEBUG)")
    sub = parser.add_subparsers(dest="command", required=True)

    build = sub.add_parser("build", help="Lê o .osm e grava os CSVs de nós e arestas")
    build.add_argument("--in", dest="osm_in", required=True, help="Caminho do arquivo .osm de entrada")
    build.add_argument("--nodes", dest="nodes_csv", required=True, help="Caminho do CSV de nós (saída)")
    build.add_argument("--edges", dest="edges_csv", required=True, help="Caminho do CSV de arestas (saída)")
    build.add_argument("--clean", action="store_true", help="Remove nós sem nenhuma aresta")

    stats = sub.add_parser("stats", help="Imprime |V| e |E|")
    stats.add_argument("--in", dest="osm_in", help="Arquivo .osm de entrada")
    stats.add_argument("--nodes", dest="nodes_csv", help="CSV de nós")
    stats.add_argument("--edges", dest="edges_csv", help="CSV de arestas")

    nearest = sub.add_parser("nearest", help="Nó conectado mais próximo de uma coordenada")
    nearest.add_argument("--nodes", dest="nodes_csv", required=True, help="CSV de nós")
    nearest.add_argument("--edges", dest="edges_csv", required=True, help="CSV de arestas")
    nearest.add_argument("lat", type=float)
    nearest.add_argument("lon", type=float)
    return parser
