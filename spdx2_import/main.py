#!/usr/bin/env python3
import logging
from typing import Any, Dict, Iterable, List, Optional, Union

from rdflib import Graph as RDFGraph
from rich.console import Group
from rich.live import Live

from .abc import AbstractSpdxTwoImport
from .accessor import PropertyAccessor, PropertyValue
from .classifier import is_of_type
from .controller import SpdxTwoImportController
from .data import Diagnostic, FileFacts, LicenseFactItem
from .exception import SpdxTwoImportParseException
from .index import Node, TripleIndex, build_index
from .namespaces import CHECKSUM_ALGORITHM_PREFIX
from .resolver import LicenseResolver
from .typings import Checksums
from .utils import get_bar_progress, get_spinner_progress, logger, report
from .views import read_checksum, read_file


class SpdxTwoImport(AbstractSpdxTwoImport):
    """SpdxTwoImport: Extract the license & copyright facts
    of the files described by an SPDX-2 document.

    :param rdf_graph: The parsed SPDX document, or an already built index of it.
    :type rdf_graph: rdflib.graph.Graph | spdx2_import.index.TripleIndex
    :param controller: The controller used to resolve Extracted Licensing Info.
    :type controller: spdx2_import.controller.SpdxTwoImportController
    :param logging_lvl: Defaults to logging.INFO. Other useful options are
        logging.DEBUG (more verbose), and logging.WARNING (less verbose).
    :type logging_lvl: str | int
    :raise TypeError: On invalid parameter types
    """

    def __init__(
        self,
        rdf_graph: Union[RDFGraph, TripleIndex],
        controller: SpdxTwoImportController = SpdxTwoImportController(),
        logging_lvl: Union[str, int] = logging.INFO,
    ):
        self.set_logging(logging_lvl)

        if not isinstance(controller, SpdxTwoImportController):
            msg = "**controller** parameter must inherit from SpdxTwoImportController"
            raise TypeError(msg)

        if isinstance(rdf_graph, TripleIndex):
            index = rdf_graph
        elif isinstance(rdf_graph, RDFGraph):
            with get_spinner_progress("(RDF → SPDX): Index Graph") as sp:
                sp.add_task("")
                index = build_index(rdf_graph)
        else:
            msg = "**rdf_graph** parameter must be an rdflib Graph or a TripleIndex"
            raise TypeError(msg)

        self.__index = index
        self.__cntrl = controller
        self.__accessor = PropertyAccessor(index)
        self.__resolver = LicenseResolver(self.__accessor, controller)

        logger.info(f"Instantiated SpdxTwoImport with {len(index)} indexed nodes")

    @property
    def index(self) -> TripleIndex:
        return self.__index

    @property
    def controller(self) -> SpdxTwoImportController:
        return self.__cntrl

    def set_logging(self, level: Union[int, str]) -> None:
        logger.setLevel(level)

    @classmethod
    def from_file(
        cls,
        filename: str,
        uri: Optional[str] = None,
        format: str = "xml",
        **kwargs: Any,
    ) -> "SpdxTwoImport":
        """Parse an SPDX document and build its index.

        :param filename: The path (or URL) of the SPDX document.
        :type filename: str
        :param uri: The base URI of the document, used to resolve
            relative references. Defaults to the document location.
        :type uri: str | None
        :param format: The RDF serialization of the document, as understood
            by rdflib. Defaults to "xml" (RDF/XML).
        :type format: str
        :param kwargs: Keyword arguments passed to the SpdxTwoImport constructor.
        :type kwargs: Any
        :return: The SpdxTwoImport instance of the document.
        :rtype: spdx2_import.main.SpdxTwoImport
        :raise spdx2_import.exception.SpdxTwoImportParseException: If rdflib
            is unable to parse the document.
        """
        rdf_graph = RDFGraph()

        try:
            with get_spinner_progress(f"(RDF → SPDX): Parse '{filename}'") as sp:
                sp.add_task("")
                rdf_graph.parse(filename, format=format, publicID=uri)
        except Exception as e:
            logger.error(f"Error parsing '{filename}': {e}")
            raise SpdxTwoImportParseException(str(e), filename, format) from e

        logger.debug(f"Parsed {len(rdf_graph)} statements from '{filename}'")

        return cls(rdf_graph, **kwargs)

    ##########
    # Public #
    ##########

    def get_all_file_ids(self) -> List[str]:
        """Return the ids of every SPDX File of the document.

        The order is the iteration order of the index, and each
        file id appears exactly once.

        :rtype: List[str]
        """
        return [node.id for node in self.__index.nodes() if is_of_type(node, "File")]

    def get_hashes_map(
        self, file_id: str, diagnostics: Optional[List[Diagnostic]] = None
    ) -> Checksums:
        """Return the checksums of an SPDX File.

        For example, the checksum algorithm
        `http://spdx.org/rdf/terms#checksumAlgorithm_sha1` is mapped to "sha1".

        :param file_id: The id of the SPDX File.
        :type file_id: str
        :param diagnostics: Where to record non-fatal data errors.
        :type diagnostics: List[spdx2_import.data.Diagnostic] | None
        :return: A mapping of checksum algorithm to checksum value. Empty if
            **file_id** is not an SPDX File.
        :rtype: Dict[str, str]
        """
        node = self.__get_node(file_id)
        if not is_of_type(node, "File"):
            return {}

        return self.__get_hashes_map(
            self.__accessor.get_values(node, "checksum", diagnostics), diagnostics
        )

    def get_license_info_in_file_for_file(
        self, file_id: str, diagnostics: Optional[List[Diagnostic]] = None
    ) -> List[LicenseFactItem]:
        return self.__get_license_info_for_file(
            file_id, "licenseInfoInFile", diagnostics
        )

    def get_concluded_license_info_for_file(
        self, file_id: str, diagnostics: Optional[List[Diagnostic]] = None
    ) -> List[LicenseFactItem]:
        return self.__get_license_info_for_file(
            file_id, "licenseConcluded", diagnostics
        )

    def get_copyright_texts_for_file(
        self, file_id: str, diagnostics: Optional[List[Diagnostic]] = None
    ) -> List[str]:
        return self.__get_copyright_texts(
            self.__accessor.get_values(file_id, "copyrightText", diagnostics),
            diagnostics,
        )

    def get_data_for_file(self, file_id: str) -> FileFacts:
        """Extract the license & copyright facts of an SPDX File.

        Data errors found along the way never abort the extraction: the
        affected facts are left out, and the errors are returned via
        `FileFacts.diagnostics`.

        :param file_id: The id of the SPDX File.
        :type file_id: str
        :return: The facts of the file.
        :rtype: spdx2_import.data.FileFacts
        """
        facts = FileFacts(file_id)

        node = self.__get_node(file_id)
        if node is None:
            report(facts.diagnostics, file_id, "Unknown file id")
            return facts

        file = read_file(self.__accessor, node, facts.diagnostics)

        facts.licenses_declared_in_file = self.__parse_licenses(
            file.license_info_in_file, facts.diagnostics
        )
        facts.license_concluded = self.__parse_licenses(
            file.license_concluded, facts.diagnostics
        )
        facts.copyright_texts = self.__get_copyright_texts(
            file.copyright_texts, facts.diagnostics
        )
        if is_of_type(node, "File"):
            facts.checksums = self.__get_hashes_map(file.checksums, facts.diagnostics)

        return facts

    def get_data_for_all_files(self) -> Dict[str, FileFacts]:
        """Extract the license & copyright facts of every SPDX File.

        :return: A mapping of file id to file facts.
        :rtype: Dict[str, spdx2_import.data.FileFacts]
        """
        file_ids = self.get_all_file_ids()
        data: Dict[str, FileFacts] = {}

        bar_progress = get_bar_progress("(SPDX → Facts): Files", "#08479E")
        bar_progress_task = bar_progress.add_task("", total=len(file_ids))

        with Live(Group(bar_progress)):
            for file_id in file_ids:
                bar_progress.advance(bar_progress_task)

                logger.debug(f"Extracting facts of '{file_id}'")

                data[file_id] = self.get_data_for_file(file_id)

        n = sum(len(facts.diagnostics) for facts in data.values())
        logger.info(f"Extracted facts of {len(data)} files ({n} data errors)")

        return data

    def parse_license(
        self, license: Any, diagnostics: Optional[List[Diagnostic]] = None
    ) -> List[LicenseFactItem]:
        """Resolve a license value (an id string, or a dereferenced Node)
        into its license facts.

        See :func:`spdx2_import.resolver.LicenseResolver.parse_license`.
        """
        return self.__resolver.parse_license(license, diagnostics)

    ###########
    # Private #
    ###########

    def __get_node(self, node_id: str) -> Optional[Node]:
        if node_id in self.__index:
            return self.__index.node(node_id)

        return None

    def __get_license_info_for_file(
        self, file_id: str, key: str, diagnostics: Optional[List[Diagnostic]]
    ) -> List[LicenseFactItem]:
        licenses = self.__accessor.get_values(file_id, key, diagnostics)
        return self.__parse_licenses(licenses, diagnostics)

    def __parse_licenses(
        self,
        licenses: Iterable[PropertyValue],
        diagnostics: Optional[List[Diagnostic]],
    ) -> List[LicenseFactItem]:
        output: List[LicenseFactItem] = []
        for license in licenses:
            output.extend(self.__resolver.parse_license(license, diagnostics))

        return output

    def __get_copyright_texts(
        self,
        values: Iterable[PropertyValue],
        diagnostics: Optional[List[Diagnostic]],
    ) -> List[str]:
        texts: List[str] = []
        for value in values:
            if isinstance(value, str):
                texts.append(value.strip())
            else:
                report(diagnostics, value.id, "Can not handle non-text copyrightText")

        return texts

    def __get_hashes_map(
        self,
        values: Iterable[PropertyValue],
        diagnostics: Optional[List[Diagnostic]],
    ) -> Checksums:
        hashes: Checksums = {}
        for value in values:
            checksum = read_checksum(self.__accessor, value, diagnostics)

            if checksum.algorithm is None or checksum.checksum_value is None:
                m = "Can not handle checksum without one algorithm and checksumValue"
                report(diagnostics, checksum.node_id, m)
                continue

            algorithm = checksum.algorithm
            if algorithm.startswith(CHECKSUM_ALGORITHM_PREFIX):
                algorithm = algorithm[len(CHECKSUM_ALGORITHM_PREFIX) :]

            hashes[algorithm] = checksum.checksum_value

        return hashes
