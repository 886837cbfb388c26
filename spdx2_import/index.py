__all__ = ["TripleValue", "Node", "PropertyMap", "TripleIndex", "build_index"]

from collections import defaultdict
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import (
    DefaultDict,
    Dict,
    Iterable,
    Iterator,
    List,
    Mapping,
    Tuple,
    Union,
)

from rdflib import BNode
from rdflib import Graph as RDFGraph
from rdflib import Literal, URIRef

from .typings import NodeId, PredicateUri, RDFTerm, RDFTriples
from .utils import logger


@dataclass(frozen=True)
class TripleValue:
    """The object of a triple, as stored in the index.

    :param type: One of "literal", "uri" or "bnode". Any other value
        denotes an RDF term kind this package does not understand.
    :type type: str
    :param value: The lexical form of a Literal, the URI string of a URIRef,
        or the label of a BNode.
    :type value: str
    """

    type: str
    value: str

    @classmethod
    def from_rdf_term(cls, t: RDFTerm) -> "TripleValue":
        if isinstance(t, URIRef):
            return cls("uri", str(t))
        if isinstance(t, BNode):
            return cls("bnode", str(t))
        if isinstance(t, Literal):
            return cls("literal", str(t))

        return cls(type(t).__name__.lower(), str(t))


PropertyMap = Mapping[PredicateUri, Tuple[TripleValue, ...]]


@dataclass(frozen=True)
class Node:
    """A dereferenced index entry: a node id along with its properties."""

    id: NodeId
    properties: PropertyMap = field(compare=False, repr=False)


class TripleIndex(Mapping[NodeId, PropertyMap]):
    """A read-only mapping of node id -> predicate URI -> ordered values.

    The index is built once per document and is never written to
    afterwards, so a single instance can be shared by any number
    of extraction calls.

    :param index: A nested mapping of node id -> predicate URI -> values.
    :type index: Mapping[str, Mapping[str, Iterable[TripleValue]]]
    """

    def __init__(
        self, index: Mapping[NodeId, Mapping[PredicateUri, Iterable[TripleValue]]]
    ) -> None:
        self.__index: Dict[NodeId, PropertyMap] = {
            node_id: MappingProxyType(
                {p: tuple(values) for p, values in properties.items()}
            )
            for node_id, properties in index.items()
        }

    def __getitem__(self, node_id: NodeId) -> PropertyMap:
        return self.__index[node_id]

    def __iter__(self) -> Iterator[NodeId]:
        return iter(self.__index)

    def __len__(self) -> int:
        return len(self.__index)

    def node(self, node_id: NodeId) -> Node:
        """Dereference **node_id** into a Node.

        :raise KeyError: If **node_id** is not indexed.
        """
        return Node(node_id, self.__index[node_id])

    def nodes(self) -> Iterator[Node]:
        for node_id, properties in self.__index.items():
            yield Node(node_id, properties)


def build_index(rdf_graph: Union[RDFGraph, RDFTriples]) -> TripleIndex:
    """Build a TripleIndex from an already parsed RDF Graph.

    For example, given the following snippet:
    -----------------------------
    @prefix spdx: <http://spdx.org/rdf/terms#> .

    ex:file spdx:copyrightText "(c) Alice" .
    ex:file spdx:licenseConcluded _:b0 .
    -----------------------------
    The index would look like:
    ```
    {
        "ex:file": {
            "spdx:copyrightText": (TripleValue("literal", "(c) Alice"),),
            "spdx:licenseConcluded": (TripleValue("bnode", "b0"),),
        }
    }
    ```

    The order of the values of a given (subject, predicate) pair is the order
    in which **rdf_graph** yields its statements.

    :param rdf_graph: The RDF Graph, or any iterable of (s, p, o) RDF terms.
    :type rdf_graph: rdflib.graph.Graph | Iterable[Tuple[RDFTerm, URIRef, RDFTerm]]
    :return: The immutable index.
    :rtype: spdx2_import.index.TripleIndex
    """
    statements: RDFTriples = (
        rdf_graph.triples((None, None, None))
        if isinstance(rdf_graph, RDFGraph)
        else rdf_graph
    )

    index: DefaultDict[NodeId, DefaultDict[PredicateUri, List[TripleValue]]]
    index = defaultdict(lambda: defaultdict(list))

    for s, p, o in statements:
        index[str(s)][str(p)].append(TripleValue.from_rdf_term(o))

    logger.debug(f"Indexed {len(index)} nodes")

    return TripleIndex(index)
