from typing import Any, List

import pytest
from rdflib import Graph as RDFGraph

from spdx2_import import (
    Diagnostic,
    FileFacts,
    ItemKind,
    LicenseFactItem,
    SpdxTwoImport,
    SpdxTwoImportController,
)
from spdx2_import.exception import SpdxTwoImportParseException
from spdx2_import.index import TripleValue
from spdx2_import.resolver import DUAL_LICENSE

from .conftest import (
    SIMPLE_DOC,
    SPDX_URL,
    TERMS,
    bnode,
    get_rdf_graph,
    get_rdf_path,
    literal,
    make_import,
    spdx_type,
    uri,
)

FILE_1 = SIMPLE_DOC + "SPDXRef-File1"
FILE_2 = SIMPLE_DOC + "SPDXRef-File2"
FILE_3 = SIMPLE_DOC + "SPDXRef-File3"
PACKAGE = SIMPLE_DOC + "SPDXRef-Package"

MIT = LicenseFactItem("MIT")
CUSTOM = LicenseFactItem(
    "Custom",
    ItemKind.CANDIDATE,
    "Custom License",
    "Permission is granted to do anything.",
    True,
)
MARKER = LicenseFactItem(DUAL_LICENSE, ItemKind.MARKER)


@pytest.mark.parametrize("rdf_graph", [None, "simple.rdf", {}])
def test_constructor_bad_graph(rdf_graph: Any) -> None:
    with pytest.raises(TypeError):
        SpdxTwoImport(rdf_graph)


def test_constructor_bad_controller() -> None:
    with pytest.raises(TypeError):
        SpdxTwoImport(RDFGraph(), None)  # type: ignore


def test_constructor_from_rdf_graph() -> None:
    spdx = SpdxTwoImport(get_rdf_graph("simple.rdf"))

    assert sorted(spdx.get_all_file_ids()) == [FILE_1, FILE_2, FILE_3]


def test_from_file_invalid_document() -> None:
    with pytest.raises(SpdxTwoImportParseException) as e:
        SpdxTwoImport.from_file(get_rdf_path("invalid.rdf"))

    assert e.value.filename == get_rdf_path("invalid.rdf")
    assert e.value.format == "xml"


def test_from_file_missing_document() -> None:
    with pytest.raises(SpdxTwoImportParseException):
        SpdxTwoImport.from_file(get_rdf_path("missing.rdf"))


def test_from_file_kwargs() -> None:
    controller = SpdxTwoImportController()
    spdx = SpdxTwoImport.from_file(get_rdf_path("simple.rdf"), controller=controller)

    assert spdx.controller is controller


def test_get_all_file_ids(simple_import: SpdxTwoImport) -> None:
    file_ids = simple_import.get_all_file_ids()

    assert len(file_ids) == len(set(file_ids)) == 3
    assert set(file_ids) == {FILE_1, FILE_2, FILE_3}


def test_get_hashes_map(simple_import: SpdxTwoImport) -> None:
    assert simple_import.get_hashes_map(FILE_1) == {
        "sha1": "2fd4e1c67a2d28fced849ee1bb76e7391b93eb12",
        "md5": "9e107d9d372bb6826bd81d3542a419d6",
    }
    assert simple_import.get_hashes_map(FILE_3) == {
        "sha256": "d7a8fbb307d7809469ca9abcb0082e4f8d5651e46d3cdb762d02d0bf37c9e592"
    }


@pytest.mark.parametrize("node_id", [PACKAGE, SIMPLE_DOC + "missing"])
def test_get_hashes_map_not_a_file(simple_import: SpdxTwoImport, node_id: str) -> None:
    assert simple_import.get_hashes_map(node_id) == {}


def test_get_data_for_file_1(simple_import: SpdxTwoImport) -> None:
    facts = simple_import.get_data_for_file(FILE_1)

    assert facts.file_id == FILE_1
    assert facts.copyright_texts == ["Copyright (c) 2017 Alice"]
    assert sorted(facts.checksums) == ["md5", "sha1"]

    # RDF Graphs are unordered: only the marker position is guaranteed
    assert facts.license_concluded[0] == MARKER
    assert {item.id for item in facts.license_concluded[1:]} == {"MIT", "Apache-2.0"}
    assert all(i.kind is ItemKind.REFERENCE for i in facts.license_concluded[1:])

    assert set(facts.licenses_declared_in_file) == {MIT, CUSTOM}
    assert len(facts.licenses_declared_in_file) == 2

    assert facts.diagnostics == []


def test_get_data_for_file_2(simple_import: SpdxTwoImport) -> None:
    facts = simple_import.get_data_for_file(FILE_2)

    assert sorted(facts.copyright_texts) == [
        "Copyright (c) 2018 Bob",
        "Copyright (c) 2019 Carol",
    ]
    assert facts.checksums == {"sha1": "de9f2c7fd25e1b3afad3e85a0bd17d9b100db4b3"}

    # Conjunctive set of a canonical license & a single-member disjunctive set
    assert set(facts.license_concluded) == {LicenseFactItem("GPL-2.0-only"), CUSTOM}
    assert len(facts.license_concluded) == 2

    # NOASSERTION & the dangling reference are left out, the sibling is kept
    assert facts.licenses_declared_in_file == [
        LicenseFactItem("Foo-bar", ItemKind.CANDIDATE, text="Foo bar license text")
    ]
    assert facts.diagnostics == [
        Diagnostic(
            "http://example.com/other#LicenseRef-Missing",
            "Can not handle license with id",
        )
    ]


def test_get_data_for_file_3(simple_import: SpdxTwoImport) -> None:
    facts = simple_import.get_data_for_file(FILE_3)

    assert facts.license_concluded == [
        LicenseFactItem(
            "MIT",
            ItemKind.CANDIDATE,
            "MIT License (vendored)",
            "Permission is hereby granted, free of charge...",
            True,
        )
    ]
    assert facts.licenses_declared_in_file == []
    assert facts.copyright_texts == []
    assert facts.diagnostics == []


def test_get_data_for_file_individually(simple_import: SpdxTwoImport) -> None:
    facts = simple_import.get_data_for_file(FILE_2)

    assert simple_import.get_license_info_in_file_for_file(FILE_2) == (
        facts.licenses_declared_in_file
    )
    assert simple_import.get_copyright_texts_for_file(FILE_2) == facts.copyright_texts
    assert simple_import.get_hashes_map(FILE_2) == facts.checksums
    assert set(simple_import.get_concluded_license_info_for_file(FILE_2)) == set(
        facts.license_concluded
    )

    diagnostics: List[Diagnostic] = []
    simple_import.get_license_info_in_file_for_file(FILE_2, diagnostics)
    assert diagnostics == facts.diagnostics


def test_get_data_for_all_files(simple_import: SpdxTwoImport) -> None:
    data = simple_import.get_data_for_all_files()

    assert set(data) == {FILE_1, FILE_2, FILE_3}
    assert all(isinstance(facts, FileFacts) for facts in data.values())
    assert data[FILE_3] == simple_import.get_data_for_file(FILE_3)

    for facts in data.values():
        for text in facts.copyright_texts:
            assert text == text.strip()


def test_get_data_for_unknown_file(simple_import: SpdxTwoImport) -> None:
    facts = simple_import.get_data_for_file(SIMPLE_DOC + "missing")

    assert facts == FileFacts(
        SIMPLE_DOC + "missing",
        diagnostics=[Diagnostic(SIMPLE_DOC + "missing", "Unknown file id")],
    )


def test_get_data_for_non_file_node(simple_import: SpdxTwoImport) -> None:
    facts = simple_import.get_data_for_file(PACKAGE)

    assert facts.checksums == {}
    assert facts.license_concluded == []


def test_ordered_index() -> None:
    spdx = make_import(
        {
            "file": {
                "type": [spdx_type("File")],
                "checksum": [bnode("c0"), bnode("c1"), bnode("c2")],
                "licenseConcluded": [bnode("or")],
                "licenseInfoInFile": [
                    uri(SPDX_URL + "GPL-2.0-only"),
                    uri("http://example.com/other#LicenseRef-Missing"),
                    uri(SPDX_URL + "MIT"),
                ],
                "copyrightText": [
                    literal("\t(c) Alice "),
                    literal("(c) Bob"),
                    literal("(c) Alice"),
                ],
            },
            "c0": {
                "type": [spdx_type("Checksum")],
                "algorithm": [uri(TERMS + "checksumAlgorithm_sha1")],
                "checksumValue": [literal("aaa")],
            },
            "c1": {
                "type": [spdx_type("Checksum")],
                "algorithm": [uri(TERMS + "checksumAlgorithm_sha1")],
                "checksumValue": [literal("bbb")],
            },
            "c2": {
                "type": [spdx_type("Checksum")],
                "algorithm": [uri("http://example.com/ns#crc32")],
                "checksumValue": [literal("ccc")],
            },
            "or": {
                "type": [spdx_type("DisjunctiveLicenseSet")],
                "member": [
                    uri(SPDX_URL + "MIT"),
                    uri(SPDX_URL + "Apache-2.0"),
                    uri(SPDX_URL + "GPL-2.0-only"),
                ],
            },
        }
    )

    facts = spdx.get_data_for_file("file")

    assert [item.id for item in facts.license_concluded] == [
        DUAL_LICENSE,
        "MIT",
        "Apache-2.0",
        "GPL-2.0-only",
    ]
    assert [item.id for item in facts.licenses_declared_in_file] == [
        "GPL-2.0-only",
        "MIT",
    ]
    assert facts.copyright_texts == ["(c) Alice", "(c) Bob", "(c) Alice"]
    assert facts.checksums == {"sha1": "bbb", "http://example.com/ns#crc32": "ccc"}
    assert [d.node_id for d in facts.diagnostics] == [
        "http://example.com/other#LicenseRef-Missing"
    ]


def test_malformed_checksums() -> None:
    spdx = make_import(
        {
            "file": {
                "type": [spdx_type("File")],
                "checksum": [
                    bnode("no-value"),
                    bnode("two-algorithms"),
                    literal("sha1:abc"),
                    bnode("ok"),
                ],
            },
            "no-value": {"algorithm": [uri(TERMS + "checksumAlgorithm_md5")]},
            "two-algorithms": {
                "algorithm": [
                    uri(TERMS + "checksumAlgorithm_md5"),
                    uri(TERMS + "checksumAlgorithm_sha1"),
                ],
                "checksumValue": [literal("abc")],
            },
            "ok": {
                "algorithm": [uri(TERMS + "checksumAlgorithm_sha1")],
                "checksumValue": [literal("def")],
            },
        }
    )

    diagnostics: List[Diagnostic] = []
    assert spdx.get_hashes_map("file", diagnostics) == {"sha1": "def"}
    assert [d.node_id for d in diagnostics] == [
        "no-value",
        "two-algorithms",
        "sha1:abc",
    ]


def test_non_text_copyright() -> None:
    spdx = make_import(
        {
            "file": {
                "type": [spdx_type("File")],
                "copyrightText": [bnode("agent"), literal(" (c) Alice ")],
            },
            "agent": {"name": [literal("Alice")]},
        }
    )

    facts = spdx.get_data_for_file("file")

    assert facts.copyright_texts == ["(c) Alice"]
    assert [d.node_id for d in facts.diagnostics] == ["agent"]


def test_parse_license(simple_import: SpdxTwoImport) -> None:
    assert simple_import.parse_license(SPDX_URL + "MIT") == [MIT]
    assert simple_import.parse_license(SIMPLE_DOC + "LicenseRef-Custom") == [CUSTOM]
    assert simple_import.parse_license(TERMS + "NOASSERTION") == []


def test_checksum_with_unhandled_value_kind() -> None:
    spdx = make_import(
        {
            "file": {
                "type": [spdx_type("File")],
                "checksum": [bnode("c0")],
            },
            "c0": {
                "algorithm": [uri(TERMS + "checksumAlgorithm_sha1")],
                "checksumValue": [TripleValue("variable", "v")],
            },
        }
    )

    facts = spdx.get_data_for_file("file")

    assert facts.checksums == {}
    assert [d.node_id for d in facts.diagnostics] == ["c0", "c0"]
    assert "checksumValue" in facts.diagnostics[0].reason
