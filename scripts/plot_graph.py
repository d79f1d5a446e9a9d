import sys
from pathlib import Path

import matplotlib.pyplot as plt
import networkx as nx

from roadgraph.graph_builder import build_graph

if __name__ == "__main__":
    osm_file = Path(sys.argv[1]) if len(sys.argv) > 1 else Path(__file__).resolve().parent.parent / "data" / "map.osm"
    graph = build_graph(osm_file, clean=True)
    G = graph.G

    print(f"Nós: {graph.node_count()}, Arcos: {graph.edge_count()}")

    pos = {n: (G.nodes[n]['x'], G.nodes[n]['y']) for n in G.nodes()}
    plt.figure(figsize=(10, 10))
    nx.draw(G, pos, node_size=5, edge_color='gray', arrowsize=5)
    plt.show()
