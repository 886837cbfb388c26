#!/usr/bin/env python3
import re
from typing import Optional

from .abc import AbstractSpdxTwoImportController

UNIQUENESS_SUFFIX_LENGTH = 32
UNIQUENESS_SUFFIX_REGEX = re.compile(r"[A-Za-z0-9]{%d}" % UNIQUENESS_SUFFIX_LENGTH)


class SpdxTwoImportController(AbstractSpdxTwoImportController):
    """Controller used when resolving Extracted Licensing Info.

    Responsible for recognizing Extracted Licensing Info identifiers that
    were made unique by an earlier SPDX export step, by appending a
    `-<32 alphanumeric characters>` suffix to the license short name
    (e.g "Foo-bar-0123456789abcdef0123456789abcdef").

    Such licenses are reported under their original short name, along with
    their extracted text only.
    """

    def deduplicate_license_id(self, license_id: str) -> Optional[str]:
        """Strip the uniqueness suffix of an Extracted Licensing Info
        identifier, if it carries one.

        Users are welcome to overwrite this method via their own
        implementation of the `SpdxTwoImportController` Class, if their
        documents were exported with a different uniqueness scheme.

        :param license_id: The license identifier, already stripped of
            its `LicenseRef-` prefix and URL-decoded.
        :type license_id: str
        :return: The license identifier without its uniqueness suffix,
            or None if **license_id** does not carry one.
        :rtype: str | None
        """
        n = UNIQUENESS_SUFFIX_LENGTH + 1

        if (
            len(license_id) > n
            and license_id[-n] == "-"
            and UNIQUENESS_SUFFIX_REGEX.fullmatch(license_id[-n + 1 :])
        ):
            return license_id[:-n]

        return None
