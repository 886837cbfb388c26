#!/usr/bin/env python3
from typing import Any, FrozenSet, List, Optional, Union
from urllib.parse import unquote

from .accessor import PropertyAccessor
from .controller import SpdxTwoImportController
from .data import Diagnostic, ItemKind, LicenseFactItem
from .index import Node
from .namespaces import LICENSE_REF_PREFIX
from .utils import logger, report
from .views import (
    ExtractedLicenseView,
    LicenseReference,
    LicenseSetView,
    LicenseView,
    NoAssertion,
    UnrecognizedLicense,
    classify_license,
)

DUAL_LICENSE = "Dual-license"

# Deepest chain of nested license sets that is expanded
MAX_LICENSE_SET_DEPTH = 64


def strip_license_ref_prefix(license_id: str) -> str:
    """Strip the `LicenseRef-` prefix of a license id (if any), and URL-decode it.

    For example:
    - `LicenseRef-Custom%20License -> "Custom License"`
    - `MIT -> "MIT"`

    :param license_id: The license id
    :type license_id: str
    :return: The decoded license id without its local-namespace prefix
    :rtype: str
    """
    if license_id.startswith(LICENSE_REF_PREFIX):
        license_id = license_id[len(LICENSE_REF_PREFIX) :]

    return unquote(license_id)


class LicenseResolver:
    """Flattens (possibly nested) SPDX license expressions into
    an ordered list of license facts.

    :param accessor: The property accessor of the current document.
    :type accessor: spdx2_import.accessor.PropertyAccessor
    :param controller: The controller deciding how de-duplicated
        Extracted Licensing Info ids are recognized.
    :type controller: spdx2_import.controller.SpdxTwoImportController
    """

    def __init__(
        self, accessor: PropertyAccessor, controller: SpdxTwoImportController
    ) -> None:
        self.__accessor = accessor
        self.__cntrl = controller

    def parse_license(
        self, license: Any, diagnostics: Optional[List[Diagnostic]] = None
    ) -> List[LicenseFactItem]:
        """Resolve a license value into its license facts.

        - "No assertion" yields no facts.
        - A canonical SPDX License List URL yields one REFERENCE item.
        - An ExtractedLicensingInfo or License node yields one CANDIDATE item.
        - A Conjunctive/Disjunctive License Set yields the facts of its members,
          in document order. A Disjunctive License Set of more than one member
          is preceded by a "Dual-license" MARKER item.

        Malformed or unresolvable values never raise: they are logged, recorded
        in **diagnostics**, and yield no facts.
        So do license sets nested more than MAX_LICENSE_SET_DEPTH levels deep.

        :param license: The license value: an id string, or a dereferenced Node.
        :type license: str | spdx2_import.index.Node
        :param diagnostics: Where to record non-fatal data errors.
        :type diagnostics: List[spdx2_import.data.Diagnostic] | None
        :return: The license facts, in document order.
        :rtype: List[spdx2_import.data.LicenseFactItem]
        """
        return self.__parse_license(license, diagnostics, frozenset())

    def parse_license_id(
        self, license_id: Any, diagnostics: Optional[List[Diagnostic]] = None
    ) -> List[LicenseFactItem]:
        if not isinstance(license_id, str):
            report(diagnostics, repr(license_id), "License id is not a string")
            return []

        return self.parse_license(license_id, diagnostics)

    def __parse_license(
        self,
        license: Any,
        diagnostics: Optional[List[Diagnostic]],
        ancestors: FrozenSet[str],
    ) -> List[LicenseFactItem]:
        license_node = classify_license(self.__accessor, license, diagnostics)
        ref = license.id if isinstance(license, Node) else license
        logger.debug(f"Resolving {type(license_node).__name__} {ref!r}")

        if isinstance(license_node, NoAssertion):
            return []

        if isinstance(license_node, LicenseReference):
            return [LicenseFactItem(license_node.license_id)]

        if isinstance(license_node, (ExtractedLicenseView, LicenseView)):
            return self.__parse_license_candidate(license_node, diagnostics)

        if isinstance(license_node, LicenseSetView):
            return self.__parse_license_set(license_node, diagnostics, ancestors)

        if isinstance(license_node, UnrecognizedLicense):
            report(diagnostics, license_node.value, license_node.reason)
            return []

        raise ValueError(f"Unable to process {license_node}")  # pragma: no cover

    def __parse_license_candidate(
        self,
        license_node: Union[ExtractedLicenseView, LicenseView],
        diagnostics: Optional[List[Diagnostic]],
    ) -> List[LicenseFactItem]:
        if not isinstance(license_node.license_id, str):
            m = "Missing, ambiguous or non-string licenseId"
            report(diagnostics, license_node.node_id, m)
            return []

        license_id = strip_license_ref_prefix(license_node.license_id)
        is_local_ref = LICENSE_REF_PREFIX in license_node.license_id

        if isinstance(license_node, ExtractedLicenseView):
            text = license_node.extracted_text

            deduplicated_id = self.__cntrl.deduplicate_license_id(license_id)
            if deduplicated_id is not None:
                item = LicenseFactItem(deduplicated_id, ItemKind.CANDIDATE, text=text)
                return [item]
        else:
            text = license_node.license_text

        name = license_node.name if license_node.name is not None else license_id
        item = LicenseFactItem(license_id, ItemKind.CANDIDATE, name, text, is_local_ref)
        return [item]

    def __parse_license_set(
        self,
        license_node: LicenseSetView,
        diagnostics: Optional[List[Diagnostic]],
        ancestors: FrozenSet[str],
    ) -> List[LicenseFactItem]:
        if license_node.node_id in ancestors:
            m = "License set contains itself"
            report(diagnostics, license_node.node_id, m)
            return []

        if len(ancestors) >= MAX_LICENSE_SET_DEPTH:
            m = "License expression nested too deeply"
            report(diagnostics, license_node.node_id, m)
            return []

        output: List[LicenseFactItem] = []
        if license_node.is_disjunctive and len(license_node.members) > 1:
            output.append(LicenseFactItem(DUAL_LICENSE, ItemKind.MARKER))

        ancestors = ancestors | {license_node.node_id}
        for member in license_node.members:
            output.extend(self.__parse_license(member, diagnostics, ancestors))

        return output
