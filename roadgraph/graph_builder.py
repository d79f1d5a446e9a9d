import logging

from .graph_db import GraphDB
from .handler import GraphBuildingHandler
from .parser_xml import OSMSource, drive, iter_element_events


def build_graph(osm_path: OSMSource, clean: bool = False) -> GraphDB:
    '''
    Cria o grafo de vias em memória a partir de um arquivo OSM.
    Nodes: osmid, latitude, longitude, tags
    Edges: u -> v, dois arcos por par consecutivo de nós de uma via permitida

    Parâmetros
    ----------
    osm_path : caminho do arquivo .osm (ou arquivo binário aberto)
    clean    : remove os nós que ficaram sem nenhuma aresta

    Retorno
    -------
    GraphDB : grafo preenchido
    '''
    graph = GraphDB()
    handler = GraphBuildingHandler(graph)

    logging.info("Lendo %s", osm_path)
    drive(handler, iter_element_events(osm_path))

    logging.info(
        "Vias: %d lidas, %d roteáveis, %d descartadas; %d pares de nós solicitados, %d arcos no grafo",
        handler.ways_seen, handler.ways_kept, handler.ways_discarded, handler.edges_added,
        graph.edge_count(),
    )
    if graph.skipped_edges:
        logging.warning("%d arcos ignorados por referenciarem nós fora do arquivo", graph.skipped_edges)
    if graph.skipped_tags:
        logging.warning("%d tags de nome ignoradas por referenciarem nós fora do arquivo", graph.skipped_tags)

    if clean:
        removed = graph.clean()
        logging.info("%d nós sem arestas removidos", removed)

    return graph
