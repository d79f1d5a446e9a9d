from pathlib import Path
from typing import Optional

from roadgraph.csv_io import load_graph
from roadgraph.graph_builder import build_graph


def cli_stats(osm_path: Optional[Path], nodes_csv: Optional[Path], edges_csv: Optional[Path]) -> None:
    '''
    Carrega o grafo (do .osm ou dos CSVs) e imprime estatísticas básicas: |V| e |E|.

    Parâmetros
    ----------
    osm_path  : Path | None (arquivo .osm; tem prioridade sobre os CSVs)
    nodes_csv : Path | None (caminho para CSV de nós)
    edges_csv : Path | None (caminho para CSV de arestas)

    Retorno
    -------
    None
    '''

    if osm_path is not None:
        graph = build_graph(osm_path)
    else:
        graph = load_graph(nodes_csv, edges_csv)
    print(f"RoadGraph |V|={graph.node_count()} |E|={graph.edge_count()}")
