#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from abc import ABC
from typing import Any, Dict, List, Optional

from .data import FileFacts, LicenseFactItem
from .typings import Checksums


class AbstractSpdxTwoImport(ABC):
    def __init__(self) -> None:
        raise NotImplementedError  # pragma: no cover

    @classmethod
    def from_file(
        cls, filename: str, uri: Optional[str], format: str, **kwargs: Any
    ) -> "AbstractSpdxTwoImport":
        raise NotImplementedError  # pragma: no cover

    def get_all_file_ids(self) -> List[str]:
        raise NotImplementedError  # pragma: no cover

    def get_hashes_map(self, file_id: str) -> Checksums:
        raise NotImplementedError  # pragma: no cover

    def get_license_info_in_file_for_file(self, file_id: str) -> List[LicenseFactItem]:
        raise NotImplementedError  # pragma: no cover

    def get_concluded_license_info_for_file(
        self, file_id: str
    ) -> List[LicenseFactItem]:
        raise NotImplementedError  # pragma: no cover

    def get_copyright_texts_for_file(self, file_id: str) -> List[str]:
        raise NotImplementedError  # pragma: no cover

    def get_data_for_file(self, file_id: str) -> FileFacts:
        raise NotImplementedError  # pragma: no cover

    def get_data_for_all_files(self) -> Dict[str, FileFacts]:
        raise NotImplementedError  # pragma: no cover

    def parse_license(self, license: Any) -> List[LicenseFactItem]:
        raise NotImplementedError  # pragma: no cover


class AbstractSpdxTwoImportController(ABC):
    def deduplicate_license_id(self, license_id: str) -> Optional[str]:
        raise NotImplementedError  # pragma: no cover
