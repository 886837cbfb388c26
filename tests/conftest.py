from pathlib import Path
from typing import Dict, List, Mapping

import pytest
from rdflib import RDF
from rdflib import Graph as RDFGraph

from spdx2_import import SpdxTwoImport, TripleIndex
from spdx2_import.index import TripleValue

PROJECT_DIR = Path(__file__).parent.parent

TERMS = "http://spdx.org/rdf/terms#"
SPDX_URL = "http://spdx.org/licenses/"
SIMPLE_DOC = "http://example.com/spdx/simple#"

HASH_SUFFIX = "0123456789abcdef0123456789abcdef"


def get_rdf_path(path: str) -> str:
    return f"{PROJECT_DIR}/tests/data/rdf/{path}"


def get_rdf_graph(path: str) -> RDFGraph:
    g = RDFGraph()
    g.parse(get_rdf_path(path), format="xml")
    return g


def literal(value: str) -> TripleValue:
    return TripleValue("literal", value)


def uri(value: str) -> TripleValue:
    return TripleValue("uri", value)


def bnode(value: str) -> TripleValue:
    return TripleValue("bnode", value)


def spdx_type(name: str) -> TripleValue:
    return uri(TERMS + name)


def make_index(nodes: Mapping[str, Mapping[str, List[TripleValue]]]) -> TripleIndex:
    """Build a TripleIndex from short predicate names.

    "type" is expanded to `rdf:type`, anything else to the SPDX terms namespace.
    Unlike an rdflib Graph, value order (and duplicates) are kept as given.
    """
    index: Dict[str, Dict[str, List[TripleValue]]] = {}
    for node_id, properties in nodes.items():
        index[node_id] = {
            (str(RDF.type) if p == "type" else TERMS + p): values
            for p, values in properties.items()
        }

    return TripleIndex(index)


def make_import(nodes: Mapping[str, Mapping[str, List[TripleValue]]]) -> SpdxTwoImport:
    return SpdxTwoImport(make_index(nodes))


@pytest.fixture
def simple_import() -> SpdxTwoImport:
    return SpdxTwoImport.from_file(get_rdf_path("simple.rdf"))
