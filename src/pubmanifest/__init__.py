"""pubmanifest - Pre-publish checks for package manifests.

pubmanifest validates a parsed package.json against the fields a publishable
package needs, reporting hard errors and soft warnings separately.
"""

__version__ = "0.1.0"
__description__ = "Pre-publish validation for package manifests"

from pubmanifest.config import PubManifestConfig
from pubmanifest.validation import InvalidManifestError, ValidationReport, validate_manifest

__all__ = [
    "__version__",
    "__description__",
    "PubManifestConfig",
    "InvalidManifestError",
    "ValidationReport",
    "validate_manifest",
]
