__all__ = [
    "NodeId",
    "PredicateUri",
    "RDFTerm",
    "RDFTriple",
    "RDFTriples",
    "Checksums",
]

from typing import Dict, Iterable, Tuple, Union

from rdflib import BNode, Literal, URIRef

NodeId = str  # URI or blank node label
PredicateUri = str

RDFTerm = Union[URIRef, BNode, Literal]
RDFTriple = Tuple[RDFTerm, URIRef, RDFTerm]
RDFTriples = Iterable[RDFTriple]

Checksums = Dict[str, str]  # algorithm -> hex digest
