"""Validation layer for package manifests.

Checks a parsed manifest for the fields a publishable package needs. Missing
required fields and malformed structures are errors; missing recommended
fields are warnings.
"""

from .framework import (
    Findings,
    InvalidManifestError,
    ManifestRule,
    ManifestValidator,
    Severity,
    ValidationReport,
    ValueKind,
    kind_of,
)
from .rules import (
    REQUIRED_FIELDS,
    MarkerFieldRule,
    RecommendedFieldRule,
    RequiredFieldsRule,
    SubKeyRequirement,
    default_rules,
)
from .validators import (
    validate_bugs,
    validate_engines,
    validate_homepage,
    validate_manifest,
    validate_repository,
)

__all__ = [
    "Findings",
    "InvalidManifestError",
    "ManifestRule",
    "ManifestValidator",
    "Severity",
    "ValidationReport",
    "ValueKind",
    "kind_of",
    "REQUIRED_FIELDS",
    "MarkerFieldRule",
    "RecommendedFieldRule",
    "RequiredFieldsRule",
    "SubKeyRequirement",
    "default_rules",
    "validate_bugs",
    "validate_engines",
    "validate_homepage",
    "validate_manifest",
    "validate_repository",
]
