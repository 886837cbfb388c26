__all__ = ["Diagnostic", "FileFacts", "ItemKind", "LicenseFactItem"]

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


class ItemKind(Enum):
    """How a license fact was obtained.

    - REFERENCE: resolved against the canonical SPDX license list.
    - CANDIDATE: a license defined inside the document, carrying its own text.
    - MARKER: a synthetic entry flagging that the following items are
      alternatives of a disjunctive license set.
    """

    REFERENCE = "reference"
    CANDIDATE = "candidate"
    MARKER = "marker"


@dataclass(frozen=True)
class LicenseFactItem:
    """A single license fact resolved from a license expression.

    :param id: The license short identifier, without any `LicenseRef-` prefix.
    :type id: str
    :param kind: How the fact was obtained.
    :type kind: spdx2_import.data.ItemKind
    :param name: The full license name (candidates only).
    :type name: str | None
    :param text: The license body text, if the document carries one.
    :type text: str | None
    :param is_local_ref: Whether the original id used the `LicenseRef-`
        document-local namespace.
    :type is_local_ref: bool
    """

    id: str
    kind: ItemKind = ItemKind.REFERENCE
    name: Optional[str] = None
    text: Optional[str] = None
    is_local_ref: bool = False


@dataclass(frozen=True)
class Diagnostic:
    """A non-fatal data error found while extracting facts."""

    node_id: str
    reason: str


@dataclass
class FileFacts:
    file_id: str
    licenses_declared_in_file: List[LicenseFactItem] = field(default_factory=list)
    license_concluded: List[LicenseFactItem] = field(default_factory=list)
    copyright_texts: List[str] = field(default_factory=list)
    checksums: Dict[str, str] = field(default_factory=dict)
    diagnostics: List[Diagnostic] = field(default_factory=list)
