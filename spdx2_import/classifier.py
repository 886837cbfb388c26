__all__ = ["NodeKind", "is_of_type", "classify"]

from enum import Enum
from typing import Any

from .index import Node
from .namespaces import RDF_TYPE, SPDX


class NodeKind(Enum):
    FILE = "File"
    LICENSE = "License"
    EXTRACTED_LICENSING_INFO = "ExtractedLicensingInfo"
    CONJUNCTIVE_LICENSE_SET = "ConjunctiveLicenseSet"
    DISJUNCTIVE_LICENSE_SET = "DisjunctiveLicenseSet"
    UNKNOWN = ""


def is_of_type(node: Any, type_name: str) -> bool:
    """Check whether **node** is an instance of the SPDX class **type_name**.

    A node with zero, or more than one, `rdf:type` statements is never
    considered to be of any type.

    :param node: The node in question. Anything other than a Node is
        never of any type.
    :type node: spdx2_import.index.Node | Any
    :param type_name: The local name of the SPDX class (e.g "File").
    :type type_name: str
    :rtype: bool
    """
    if not isinstance(node, Node):
        return False

    types = node.properties.get(RDF_TYPE, ())
    return (
        len(types) == 1
        and types[0].type == "uri"
        and types[0].value == str(SPDX[type_name])
    )


def classify(node: Any) -> NodeKind:
    for kind in NodeKind:
        if kind is not NodeKind.UNKNOWN and is_of_type(node, kind.value):
            return kind

    return NodeKind.UNKNOWN
