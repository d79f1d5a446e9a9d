import xml.etree.ElementTree as ET
from pathlib import Path
from typing import BinaryIO, Dict, Iterable, Iterator, Optional, Tuple, Union

from .constantes import NODE_ELEMENT, WAY_ELEMENT
from .handler import GraphBuildingHandler

ElementEvent = Tuple[str, str, Optional[Dict[str, str]]]
OSMSource = Union[str, Path, BinaryIO]


def iter_element_events(source: OSMSource) -> Iterator[ElementEvent]:
    '''
    Itera sobre o arquivo OSM produzindo os eventos de abertura e fechamento
    de cada elemento, na ordem do documento.

    Parâmetros
    ----------
    source : caminho do arquivo .osm ou arquivo binário já aberto

    Yield
    -----
    ("start", tag, atributos) ao abrir um elemento
    ("end", tag, None) ao fechá-lo

    Observações
    -----------
    - Usa iterparse e limpeza de elementos para controlar a memória.
    - XML mal formado propaga ET.ParseError.
    '''

    if isinstance(source, Path):
        source = str(source)
    for event, elem in ET.iterparse(source, events=("start", "end")):
        if event == "start":
            yield "start", elem.tag, dict(elem.attrib)
        else:
            yield "end", elem.tag, None
            if elem.tag in (NODE_ELEMENT, WAY_ELEMENT):
                elem.clear()


def drive(handler: GraphBuildingHandler, events: Iterable[ElementEvent]) -> None:
    '''
    Entrega cada evento ao handler. O primeiro erro interrompe a leitura.
    '''
    for event, name, attributes in events:
        if event == "start":
            handler.on_element_open(name, attributes or {})
        else:
            handler.on_element_close(name)
