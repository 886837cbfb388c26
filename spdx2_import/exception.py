from typing import Optional


class SpdxTwoImportException(Exception):
    """Base exception for spdx2_import."""

    pass


class SpdxTwoImportParseException(SpdxTwoImportException):
    """Exception for SPDX documents that can not be parsed."""

    def __init__(self, error: str, filename: str, format: Optional[str]) -> None:
        """Initialize parse exception.

        :param error: The error message from the RDF parser
        :type error: str
        :param filename: The document that failed to parse
        :type filename: str
        :param format: The RDF serialization the document was parsed as
        :type format: str | None
        """
        self.error = error
        self.filename = filename
        self.format = format
        super().__init__(f"Unable to parse '{filename}' as {format}: {error}")
