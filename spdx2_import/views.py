"""Fixed-shape views over the SPDX nodes of a TripleIndex.

Each view is populated with one accessor call per field. License nodes are
classified once into the `LicenseNode` tagged union, which the resolver then
matches on.
"""

__all__ = [
    "NoAssertion",
    "LicenseReference",
    "ExtractedLicenseView",
    "LicenseView",
    "LicenseSetView",
    "UnrecognizedLicense",
    "LicenseNode",
    "ChecksumView",
    "FileView",
    "classify_license",
    "read_checksum",
    "read_file",
]

from dataclasses import dataclass
from typing import Any, List, Optional, Tuple, Union
from urllib.parse import unquote

from .accessor import PropertyAccessor, PropertyValue
from .classifier import NodeKind, classify
from .data import Diagnostic
from .index import Node
from .namespaces import NOASSERTION_IDS, SPDX_LICENSES
from .typings import NodeId


@dataclass(frozen=True)
class NoAssertion:
    value: str


@dataclass(frozen=True)
class LicenseReference:
    """A license of the canonical SPDX License List."""

    license_id: str


@dataclass(frozen=True)
class ExtractedLicenseView:
    node_id: NodeId
    license_id: Any
    name: Optional[str]
    extracted_text: Optional[str]


@dataclass(frozen=True)
class LicenseView:
    node_id: NodeId
    license_id: Any
    name: Optional[str]
    license_text: Optional[str]


@dataclass(frozen=True)
class LicenseSetView:
    node_id: NodeId
    kind: NodeKind
    members: Tuple[PropertyValue, ...]

    @property
    def is_disjunctive(self) -> bool:
        return self.kind is NodeKind.DISJUNCTIVE_LICENSE_SET


@dataclass(frozen=True)
class UnrecognizedLicense:
    value: str
    reason: str


LicenseNode = Union[
    NoAssertion,
    LicenseReference,
    ExtractedLicenseView,
    LicenseView,
    LicenseSetView,
    UnrecognizedLicense,
]


@dataclass(frozen=True)
class ChecksumView:
    node_id: NodeId
    algorithm: Optional[str]
    checksum_value: Optional[str]


@dataclass(frozen=True)
class FileView:
    node_id: NodeId
    checksums: Tuple[PropertyValue, ...]
    license_info_in_file: Tuple[PropertyValue, ...]
    license_concluded: Tuple[PropertyValue, ...]
    copyright_texts: Tuple[PropertyValue, ...]


def _text(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def classify_license(
    accessor: PropertyAccessor,
    value: Any,
    diagnostics: Optional[List[Diagnostic]] = None,
) -> LicenseNode:
    """Classify a license value (an id string or a dereferenced Node).

    String values are classified in the following order:

    1. "No assertion" references (either spelling, any case).
    2. Ids of nodes defined within the document, which are
       dereferenced and classified as Nodes.
    3. URLs of the canonical SPDX License List.

    :param accessor: The property accessor of the current document.
    :type accessor: spdx2_import.accessor.PropertyAccessor
    :param value: The license value, as returned by the accessor.
    :type value: str | spdx2_import.index.Node | Any
    :param diagnostics: Where to record non-fatal data errors found while
        reading the license value.
    :type diagnostics: List[spdx2_import.data.Diagnostic] | None
    :rtype: spdx2_import.views.LicenseNode
    """
    if isinstance(value, str):
        if value.lower() in NOASSERTION_IDS:
            return NoAssertion(value)

        if value in accessor.index:
            return classify_license(accessor, accessor.index.node(value), diagnostics)

        if value.startswith(str(SPDX_LICENSES)):
            return LicenseReference(unquote(value[len(str(SPDX_LICENSES)) :]))

        return UnrecognizedLicense(value, "Can not handle license with id")

    if not isinstance(value, Node):
        m = f"Can not handle license of type '{type(value).__name__}'"
        return UnrecognizedLicense(repr(value), m)

    kind = classify(value)

    def single(key: str) -> Any:
        return accessor.get_value(value, key, diagnostics=diagnostics)

    if kind is NodeKind.EXTRACTED_LICENSING_INFO:
        return ExtractedLicenseView(
            value.id,
            single("licenseId"),
            _text(single("name")),
            _text(single("extractedText")),
        )

    if kind is NodeKind.LICENSE:
        return LicenseView(
            value.id,
            single("licenseId"),
            _text(single("name")),
            _text(single("licenseText")),
        )

    if kind in (NodeKind.CONJUNCTIVE_LICENSE_SET, NodeKind.DISJUNCTIVE_LICENSE_SET):
        members = accessor.get_values(value, "member", diagnostics)
        return LicenseSetView(value.id, kind, tuple(members))

    return UnrecognizedLicense(value.id, "Can not handle license node of unknown type")


def read_checksum(
    accessor: PropertyAccessor,
    value: PropertyValue,
    diagnostics: Optional[List[Diagnostic]] = None,
) -> ChecksumView:
    if not isinstance(value, Node):
        return ChecksumView(str(value), None, None)

    algorithm = accessor.get_value(value, "algorithm", diagnostics=diagnostics)
    if isinstance(algorithm, Node):
        algorithm = algorithm.id

    checksum_value = accessor.get_value(value, "checksumValue", diagnostics=diagnostics)
    return ChecksumView(value.id, _text(algorithm), _text(checksum_value))


def read_file(
    accessor: PropertyAccessor,
    node: Node,
    diagnostics: Optional[List[Diagnostic]] = None,
) -> FileView:
    def values(key: str) -> Tuple[PropertyValue, ...]:
        return tuple(accessor.get_values(node, key, diagnostics))

    return FileView(
        node.id,
        values("checksum"),
        values("licenseInfoInFile"),
        values("licenseConcluded"),
        values("copyrightText"),
    )
