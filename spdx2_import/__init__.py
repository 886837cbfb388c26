from .controller import SpdxTwoImportController
from .data import Diagnostic, FileFacts, ItemKind, LicenseFactItem
from .index import TripleIndex, build_index
from .main import SpdxTwoImport

__all__ = [
    "SpdxTwoImport",
    "SpdxTwoImportController",
    "TripleIndex",
    "build_index",
    "Diagnostic",
    "FileFacts",
    "ItemKind",
    "LicenseFactItem",
]
