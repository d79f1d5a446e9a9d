from pathlib import Path

from roadgraph.csv_io import load_graph


def cli_nearest(nodes_csv: Path, edges_csv: Path, lat: float, lon: float) -> None:
    '''
    Imprime o osmid do nó conectado mais próximo de (lat, lon) e a distância em metros.
    '''
    graph = load_graph(nodes_csv, edges_csv)
    node_id = graph.closest(lat, lon)
    if node_id is None:
        print("Grafo sem arestas.")
        return
    dist_m = graph.distance_to_point(node_id, lat, lon)
    print(f"{node_id} {dist_m:.3f}")
