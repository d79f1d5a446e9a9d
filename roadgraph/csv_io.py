import csv
from pathlib import Path

import pandas as pd

from .constantes import NAME_KEY
from .graph_db import GraphDB


def write_nodes_csv(graph: GraphDB, csv_path: Path) -> None:
    '''
    Escreve o CSV de nós com colunas (osmid, y, x, name), onde y = latitude e
    x = longitude. A saída é ordenada pelo ID do nó para garantir determinismo.

    Parâmetros
    ----------
    graph    : grafo de origem
    csv_path : caminho do arquivo CSV de saída
    '''

    csv_path.parent.mkdir(parents=True, exist_ok=True)
    with csv_path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["osmid", "y", "x", "name"])
        for osmid in sorted(graph.vertices()):
            name = (graph.get_node_tags(osmid) or {}).get(NAME_KEY, "")
            writer.writerow([osmid, f"{graph.lat(osmid):.10f}", f"{graph.lon(osmid):.10f}", name])


def write_edges_csv(graph: GraphDB, csv_path: Path) -> None:
    '''
    Escreve um arco dirigido por linha com colunas (u, v, d); 'd' é a
    distância Haversine em metros. Arestas paralelas geram linhas repetidas.
    '''

    csv_path.parent.mkdir(parents=True, exist_ok=True)
    with csv_path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["u", "v", "d"])
        for u in sorted(graph.vertices()):
            for v in graph.adjacent(u):
                writer.writerow([u, v, f"{graph.distance(u, v):.3f}"])


def load_graph(nodes_csv: Path, edges_csv: Path) -> GraphDB:
    '''
    Lê os CSVs de nós (osmid,y,x[,name]) e arcos (u,v[,d]) e reconstrói o grafo.

    Parâmetros
    ----------
    nodes_csv : caminho do CSV de nós
    edges_csv : caminho do CSV de arcos

    Retorno
    -------
    GraphDB : instância pronta para consulta

    Observações
    -----------
    - Não lê 'd'; a distância é recalculada a partir das coordenadas.
    '''
    graph = GraphDB()

    # Nós; tudo como texto: nomes como "101" ou "NA" não podem virar número ou ausência
    nodes_df = pd.read_csv(nodes_csv, dtype=str, keep_default_na=False)
    has_name = "name" in nodes_df.columns
    for row in nodes_df.itertuples(index=False):
        osmid = int(row.osmid)
        graph.add_node(osmid, float(row.y), float(row.x))
        if has_name and row.name:
            graph.set_node_tag(osmid, NAME_KEY, row.name)

    # Arcos
    edges_df = pd.read_csv(edges_csv)
    for u, v in zip(edges_df["u"], edges_df["v"]):
        graph.add_edge(int(u), int(v))

    return graph
