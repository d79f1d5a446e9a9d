from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional, Tuple

import pytest

from roadgraph.handler import GraphBuildingHandler

SAMPLE_OSM = """<?xml version="1.0" encoding="UTF-8"?>
<osm version="0.6" generator="tests">
  <bounds minlat="0.0" minlon="0.0" maxlat="0.01" maxlon="0.01"/>
  <node id="1" lat="0.0" lon="0.0"/>
  <node id="2" lat="0.0" lon="0.001"/>
  <node id="3" lat="0.001" lon="0.001">
    <tag k="name" v="Praça Central"/>
    <tag k="amenity" v="fountain"/>
  </node>
  <node id="4" lat="0.002" lon="0.002"/>
  <node id="5" lat="0.003" lon="0.003"/>
  <way id="10">
    <nd ref="1"/>
    <nd ref="2"/>
    <nd ref="3"/>
    <tag k="highway" v="residential"/>
    <tag k="name" v="Oak St"/>
    <tag k="maxspeed" v="30"/>
    <tag k="surface" v="asphalt"/>
  </way>
  <way id="11">
    <nd ref="3"/>
    <nd ref="4"/>
    <tag k="highway" v="footway"/>
  </way>
  <way id="12">
    <nd ref="4"/>
    <nd ref="5"/>
    <tag k="building" v="yes"/>
  </way>
  <relation id="100">
    <member type="way" ref="10" role=""/>
    <tag k="type" v="route"/>
  </relation>
</osm>
"""


class RecordingStore:
    '''Armazenamento falso que registra cada chamada feita pelo handler.'''

    def __init__(self) -> None:
        self.calls: List[Tuple] = []
        self.node_tags: Dict[int, Dict[str, str]] = {}
        self.way_tags: Dict[int, Dict[str, str]] = {}

    def add_node(self, node_id: int, lat: float, lon: float) -> None:
        self.calls.append(("add_node", node_id, lat, lon))
        self.node_tags.setdefault(node_id, {})

    def add_way(self, way_id: int) -> None:
        self.calls.append(("add_way", way_id))
        self.way_tags.setdefault(way_id, {})

    def set_way_tag(self, way_id: int, key: str, value: str) -> None:
        self.calls.append(("set_way_tag", way_id, key, value))
        self.way_tags.setdefault(way_id, {})[key] = value

    def get_way_tag(self, way_id: int, key: str) -> Optional[str]:
        return self.way_tags.get(way_id, {}).get(key)

    def set_node_tag(self, node_id: int, key: str, value: str) -> None:
        self.calls.append(("set_node_tag", node_id, key, value))
        self.node_tags.setdefault(node_id, {})[key] = value

    def get_node_tags(self, node_id: int) -> Optional[Dict[str, str]]:
        return self.node_tags.get(node_id)

    def add_edge(self, u: int, v: int) -> None:
        self.calls.append(("add_edge", u, v))

    @property
    def edges(self) -> List[Tuple[int, int]]:
        return [(c[1], c[2]) for c in self.calls if c[0] == "add_edge"]

    def calls_named(self, name: str) -> List[Tuple]:
        return [c for c in self.calls if c[0] == name]


@pytest.fixture
def store() -> RecordingStore:
    return RecordingStore()


@pytest.fixture
def handler(store: RecordingStore) -> GraphBuildingHandler:
    return GraphBuildingHandler(store)


@pytest.fixture
def sample_osm(tmp_path: Path) -> Path:
    path = tmp_path / "map.osm"
    path.write_text(SAMPLE_OSM, encoding="utf-8")
    return path
