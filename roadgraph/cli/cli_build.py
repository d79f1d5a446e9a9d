import logging
from pathlib import Path

from roadgraph.csv_io import write_edges_csv, write_nodes_csv
from roadgraph.graph_builder import build_graph


def cli_build(osm_path: Path, nodes_csv: Path, edges_csv: Path, clean: bool = False) -> None:
    '''
    Pipeline de alto nível: lê o OSM, constrói o grafo e grava os dois CSVs.
    '''
    graph = build_graph(osm_path, clean=clean)

    logging.info("Gravando CSV de nós em %s", nodes_csv)
    write_nodes_csv(graph, nodes_csv)

    logging.info("Gravando CSV de arestas em %s", edges_csv)
    write_edges_csv(graph, edges_csv)
