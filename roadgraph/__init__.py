from .errors import MalformedInputError, RoadGraphError, StructuralInvariantError
from .graph_builder import build_graph
from .graph_db import GraphDB, GraphStore
from .handler import GraphBuildingHandler, ParseMode, ParseState
from .parser_xml import drive, iter_element_events

__all__ = [
    "GraphBuildingHandler",
    "GraphDB",
    "GraphStore",
    "MalformedInputError",
    "ParseMode",
    "ParseState",
    "RoadGraphError",
    "StructuralInvariantError",
    "build_graph",
    "drive",
    "iter_element_events",
]
