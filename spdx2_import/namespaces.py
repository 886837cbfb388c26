__all__ = [
    "SPDX",
    "SPDX_LICENSES",
    "LICENSE_REF_PREFIX",
    "CHECKSUM_ALGORITHM_PREFIX",
    "NOASSERTION_IDS",
    "RDF_TYPE",
]

from rdflib import RDF, Namespace

# SPDX-2 RDF vocabulary (classes & predicates)
SPDX = Namespace("http://spdx.org/rdf/terms#")

# Base URL of the canonical SPDX License List,
# e.g <http://spdx.org/licenses/Apache-2.0>
SPDX_LICENSES = Namespace("http://spdx.org/licenses/")

# Marks document-local license identifiers, e.g "LicenseRef-Custom"
LICENSE_REF_PREFIX = "LicenseRef-"

# e.g <http://spdx.org/rdf/terms#checksumAlgorithm_sha1>
CHECKSUM_ALGORITHM_PREFIX = str(SPDX) + "checksumAlgorithm_"

# Lowercased spellings of "no assertion" license references
NOASSERTION_IDS = frozenset(
    {
        "noassertion",
        str(SPDX) + "noassertion",
        str(SPDX_LICENSES) + "noassertion",
    }
)

RDF_TYPE = str(RDF.type)
