import logging
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Deque, Dict, Mapping, Optional, TypeVar

from .constantes import (
    ALLOWED_HIGHWAY_TYPES,
    HIGHWAY_KEY,
    NAME_KEY,
    ND_ELEMENT,
    NODE_ELEMENT,
    TAG_ELEMENT,
    WAY_ELEMENT,
    WAY_TAG_KEYS,
)
from .errors import MalformedInputError, StructuralInvariantError
from .graph_db import GraphStore

T = TypeVar("T")


class ParseMode(Enum):
    IDLE = "idle"
    NODE = "node"
    WAY = "way"


@dataclass
class ParseState:
    '''
    Estado do construtor entre eventos.
    - mode: tipo da última entidade aberta (node/way)
    - active_way: id da via aberta
    - pending_refs: ids dos <nd> da via aberta, na ordem do documento
    - last_node: id do último <node> aberto (None enquanto nenhum foi aberto)
    '''
    mode: ParseMode = ParseMode.IDLE
    active_way: Optional[int] = None
    pending_refs: Deque[int] = field(default_factory=deque)
    last_node: Optional[int] = None


def _parse_attr(attributes: Mapping[str, str], key: str, convert: Callable[[str], T], element: str) -> T:
    raw = attributes.get(key)
    if raw is None:
        raise MalformedInputError(f"<{element}> sem o atributo '{key}'")
    try:
        return convert(raw)
    except ValueError as exc:
        raise MalformedInputError(f"<{element}> com {key}={raw!r} inválido") from exc


class GraphBuildingHandler:
    '''
    Visitante dos eventos de abertura/fechamento de elementos do XML do OSM.
    Constrói o grafo de vias em uma única passada, sem materializar a árvore.

    - <node>: cria o vértice e passa a ser o "último nó aberto"
    - <way>: registra a via; seus <nd> vão para a fila pendente
    - <tag> em via: apenas highway, maxspeed e name são repassados
    - <tag k="name"> em nó: nome do último nó aberto
    - </way>: se o highway for permitido, liga os nós consecutivos da fila
      com arestas nos dois sentidos e propaga o nome da via aos nós sem nome

    Parâmetros
    ----------
    graph          : armazenamento que recebe vértices, tags e arcos
    state          : estado inicial (um novo ParseState por padrão)
    reset_on_close : volta ao modo IDLE ao fechar <node>/<way>; por padrão o
                     modo só muda quando outra entidade é aberta

    Observações
    -----------
    Os erros (MalformedInputError, StructuralInvariantError) são fatais e
    propagam para quem está dirigindo os eventos.
    '''

    def __init__(self, graph: GraphStore, state: Optional[ParseState] = None,
                 reset_on_close: bool = False) -> None:
        self.graph = graph
        self.state = state if state is not None else ParseState()
        self.reset_on_close = reset_on_close

        self.ways_seen = 0
        self.ways_kept = 0
        self.ways_discarded = 0
        self.edges_added = 0

        self._way_tag_setters: Dict[str, Callable[[int, str], None]] = {
            key: self._way_tag_setter(key) for key in WAY_TAG_KEYS
        }

    def _way_tag_setter(self, key: str) -> Callable[[int, str], None]:
        def setter(way_id: int, value: str) -> None:
            self.graph.set_way_tag(way_id, key, value)
        return setter

    def on_element_open(self, name: str, attributes: Mapping[str, str]) -> None:
        mode = self.state.mode
        if name == NODE_ELEMENT:
            self._open_node(attributes)
        elif name == WAY_ELEMENT:
            self._open_way(attributes)
        elif mode is ParseMode.WAY and name == ND_ELEMENT:
            self.state.pending_refs.append(_parse_attr(attributes, "ref", int, name))
        elif mode is ParseMode.WAY and name == TAG_ELEMENT:
            self._way_tag(attributes)
        elif mode is ParseMode.NODE and name == TAG_ELEMENT and attributes.get("k") == NAME_KEY:
            self._node_name(attributes)

    def on_element_close(self, name: str) -> None:
        if name == WAY_ELEMENT:
            self._close_way()
        if self.reset_on_close and name in (NODE_ELEMENT, WAY_ELEMENT):
            self.state.mode = ParseMode.IDLE

    def _open_node(self, attributes: Mapping[str, str]) -> None:
        node_id = _parse_attr(attributes, "id", int, NODE_ELEMENT)
        lat = _parse_attr(attributes, "lat", float, NODE_ELEMENT)
        lon = _parse_attr(attributes, "lon", float, NODE_ELEMENT)

        self.graph.add_node(node_id, lat, lon)
        self.state.mode = ParseMode.NODE
        self.state.last_node = node_id

    def _open_way(self, attributes: Mapping[str, str]) -> None:
        way_id = _parse_attr(attributes, "id", int, WAY_ELEMENT)

        self.graph.add_way(way_id)
        self.state.mode = ParseMode.WAY
        self.state.active_way = way_id
        self.state.pending_refs.clear()

    def _way_tag(self, attributes: Mapping[str, str]) -> None:
        setter = self._way_tag_setters.get(attributes.get("k", ""))
        if setter is None:
            return
        setter(self.state.active_way, attributes.get("v", ""))

    def _node_name(self, attributes: Mapping[str, str]) -> None:
        if self.state.last_node is None:
            raise StructuralInvariantError("<tag k=\"name\"> dentro de <node> sem nenhum nó aberto")
        self.graph.set_node_tag(self.state.last_node, NAME_KEY, attributes.get("v", ""))

    def _close_way(self) -> None:
        way_id = self.state.active_way
        refs = self.state.pending_refs
        self.ways_seen += 1

        highway = self.graph.get_way_tag(way_id, HIGHWAY_KEY)
        if highway is None or highway not in ALLOWED_HIGHWAY_TYPES:
            # A fila precisa ser esvaziada aqui, senão os <nd> vazam para a próxima via
            refs.clear()
            self.ways_discarded += 1
            logging.debug("Via %s descartada (highway=%s)", way_id, highway)
            return

        if not refs:
            raise StructuralInvariantError(f"via {way_id} (highway={highway}) sem nenhum <nd>")

        way_name = self.graph.get_way_tag(way_id, NAME_KEY)
        current = refs.popleft()
        while refs:
            self._propagate_name(current, way_name)
            nxt = refs.popleft()
            self.graph.add_edge(current, nxt)
            self.graph.add_edge(nxt, current)
            self.edges_added += 1
            current = nxt
        self._propagate_name(current, way_name)
        self.ways_kept += 1

    def _propagate_name(self, node_id: int, way_name: Optional[str]) -> None:
        if way_name is None:
            return
        tags = self.graph.get_node_tags(node_id)
        if tags is None or tags.get(NAME_KEY) is None:
            self.graph.set_node_tag(node_id, NAME_KEY, way_name)
