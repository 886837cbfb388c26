__all__ = ["PropertyAccessor", "PropertyValue"]

from typing import Any, List, Optional, Union

from .data import Diagnostic
from .index import Node, TripleIndex
from .namespaces import SPDX
from .typings import NodeId
from .utils import report

# A literal's text, an external reference, or a dereferenced Node
PropertyValue = Union[str, Node]


class PropertyAccessor:
    """Reads SPDX properties of indexed nodes, dereferencing the
    URIs & BNodes that point to other indexed nodes.

    :param index: The index of the SPDX document.
    :type index: spdx2_import.index.TripleIndex
    """

    def __init__(self, index: TripleIndex) -> None:
        self.__index = index

    @property
    def index(self) -> TripleIndex:
        return self.__index

    def get_values(
        self,
        node_or_id: Union[Node, NodeId],
        key: str,
        diagnostics: Optional[List[Diagnostic]] = None,
    ) -> List[PropertyValue]:
        """Return the values of the SPDX property **key** of a node.

        - A Literal is returned as its text.
        - A URIRef or BNode that is itself indexed is returned as
          the dereferenced Node.
        - A URIRef or BNode that is not indexed is returned as its string
          (e.g a canonical license URL).

        Any other kind of value is logged and skipped.

        :param node_or_id: The node, or its id.
        :type node_or_id: spdx2_import.index.Node | str
        :param key: The local name of the predicate (e.g "licenseConcluded").
        :type key: str
        :param diagnostics: Where to record non-fatal data errors.
        :type diagnostics: List[spdx2_import.data.Diagnostic] | None
        :return: The values, in document order.
        :rtype: List[str | spdx2_import.index.Node]
        """
        if isinstance(node_or_id, Node):
            node = node_or_id
        elif isinstance(node_or_id, str) and node_or_id in self.__index:
            node = self.__index.node(node_or_id)
        else:
            return []

        values: List[PropertyValue] = []
        for entry in node.properties.get(str(SPDX[key]), ()):
            if entry.type == "literal":
                values.append(entry.value)

            elif entry.type in ("uri", "bnode"):
                if entry.value in self.__index:
                    values.append(self.__index.node(entry.value))
                else:
                    values.append(entry.value)

            else:
                m = f"Can not handle '{key}' value '{entry.value}' ({entry.type})"
                report(diagnostics, node.id, m)

        return values

    def get_value(
        self,
        node_or_id: Union[Node, NodeId],
        key: str,
        default: Any = None,
        diagnostics: Optional[List[Diagnostic]] = None,
    ) -> Any:
        """Return the value of the SPDX property **key** of a node if it
        has exactly one value, or **default** otherwise.
        """
        values = self.get_values(node_or_id, key, diagnostics)
        if len(values) == 1:
            return values[0]

        return default
