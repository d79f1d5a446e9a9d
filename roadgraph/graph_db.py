import logging
from typing import Dict, Iterable, List, Optional, Protocol

import networkx as nx

from .utils import compute_haversine_meters


class GraphStore(Protocol):
    '''Operações que o GraphBuildingHandler exige do armazenamento do grafo.'''

    def add_node(self, node_id: int, lat: float, lon: float) -> None: ...

    def add_way(self, way_id: int) -> None: ...

    def set_way_tag(self, way_id: int, key: str, value: str) -> None: ...

    def get_way_tag(self, way_id: int, key: str) -> Optional[str]: ...

    def set_node_tag(self, node_id: int, key: str, value: str) -> None: ...

    def get_node_tags(self, node_id: int) -> Optional[Dict[str, str]]: ...

    def add_edge(self, u: int, v: int) -> None: ...


class GraphDB:
    '''
    Grafo de vias em memória sobre um nx.MultiDiGraph.
    - Nós: osmid com atributos y (lat), x (lon) e tags (dict)
    - Arcos: u -> v dirigidos; arestas paralelas são mantidas
    - ways[way_id] = dict de tags reconhecidas da via

    Observações
    -----------
    Uma aresta não dirigida é registrada como dois arcos (u->v e v->u).
    Arcos ou tags endereçados a um nó inexistente (via que sai do recorte
    do mapa) são ignorados e contados em 'skipped_edges' e 'skipped_tags'.
    '''

    def __init__(self) -> None:
        self.G: nx.MultiDiGraph = nx.MultiDiGraph()
        self.ways: Dict[int, Dict[str, str]] = {}
        self.skipped_edges: int = 0
        self.skipped_tags: int = 0

    # -------------------------------------------------
    # Operações usadas pelo construtor
    # -------------------------------------------------
    def add_node(self, node_id: int, lat: float, lon: float) -> None:
        if node_id in self.G:
            self.G.nodes[node_id].update(y=lat, x=lon)
            return
        self.G.add_node(node_id, y=lat, x=lon, tags={})

    def add_way(self, way_id: int) -> None:
        self.ways.setdefault(way_id, {})

    def set_way_tag(self, way_id: int, key: str, value: str) -> None:
        self.ways.setdefault(way_id, {})[key] = value

    def get_way_tag(self, way_id: int, key: str) -> Optional[str]:
        tags = self.ways.get(way_id)
        if tags is None:
            return None
        return tags.get(key)

    def set_node_tag(self, node_id: int, key: str, value: str) -> None:
        if node_id not in self.G:
            self.skipped_tags += 1
            logging.debug("Tag %s ignorada: nó %s não existe", key, node_id)
            return
        self.G.nodes[node_id]["tags"][key] = value

    def get_node_tags(self, node_id: int) -> Optional[Dict[str, str]]:
        if node_id not in self.G:
            return None
        return self.G.nodes[node_id]["tags"]

    def add_edge(self, u: int, v: int) -> None:
        if u not in self.G or v not in self.G:
            self.skipped_edges += 1
            logging.debug("Arco %s -> %s ignorado: extremidade fora do grafo", u, v)
            return
        self.G.add_edge(u, v)

    # -------------------------------------------------
    # Consultas
    # -------------------------------------------------
    def vertices(self) -> Iterable[int]:
        return list(self.G.nodes)

    def adjacent(self, v: int) -> List[int]:
        '''
        Retorna os vizinhos de saída de v, um por arco (duplicatas mantidas).
        '''
        return [w for _, w in self.G.out_edges(v)]

    def lat(self, v: int) -> float:
        return self.G.nodes[v]["y"]

    def lon(self, v: int) -> float:
        return self.G.nodes[v]["x"]

    def way_ids(self) -> List[int]:
        return list(self.ways)

    def way_tags(self, way_id: int) -> Dict[str, str]:
        return dict(self.ways.get(way_id, {}))

    def node_count(self) -> int:
        return self.G.number_of_nodes()

    def edge_count(self) -> int:
        '''
        Quantidade de arcos dirigidos (cada aresta não dirigida conta duas vezes).
        '''
        return self.G.number_of_edges()

    def distance(self, v: int, w: int) -> float:
        return compute_haversine_meters(self.lat(v), self.lon(v), self.lat(w), self.lon(w))

    def distance_to_point(self, v: int, lat: float, lon: float) -> float:
        return compute_haversine_meters(self.lat(v), self.lon(v), lat, lon)

    def closest(self, lat: float, lon: float) -> Optional[int]:
        '''
        Encontra o nó conectado mais próximo de (lat, lon) por busca linear.

        Parâmetros
        ----------
        lat : latitude em graus decimais
        lon : longitude em graus decimais

        Retorno
        -------
        int | None : osmid do nó mais próximo; None se nenhum nó tiver arcos
        '''
        best_id: Optional[int] = None
        best_d = float("inf")
        for n, data in self.G.nodes(data=True):
            if self.G.degree(n) == 0:
                continue
            d = compute_haversine_meters(lat, lon, data["y"], data["x"])
            if d < best_d:
                best_d, best_id = d, n
        return best_id

    def clean(self) -> int:
        '''
        Remove os nós sem nenhum arco (pontos soltos e nós de vias descartadas).

        Retorno
        -------
        int : quantidade de nós removidos
        '''
        isolated = list(nx.isolates(self.G))
        self.G.remove_nodes_from(isolated)
        return len(isolated)
