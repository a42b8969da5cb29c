"""Single-field validators and the default manifest entry point."""

from collections.abc import Mapping
from typing import Any

from .framework import Findings, ManifestValidator, ValidationReport
from .rules import BUGS_RULE, ENGINES_RULE, HOMEPAGE_RULE, REPOSITORY_RULE


def validate_repository(record: Mapping[str, Any]) -> Findings:
    """``repository`` may be a shorthand string or an object with type and url."""
    return REPOSITORY_RULE.check(record)


def validate_bugs(record: Mapping[str, Any]) -> Findings:
    """``bugs`` may be a string or an object with url."""
    return BUGS_RULE.check(record)


def validate_homepage(record: Mapping[str, Any]) -> Findings:
    return HOMEPAGE_RULE.check(record)


def validate_engines(record: Mapping[str, Any]) -> Findings:
    """``engines`` must be an object; a missing ``node`` key is only a warning."""
    return ENGINES_RULE.check(record)


def _build_default_validator() -> ManifestValidator:
    validator = ManifestValidator()
    validator.create_default_rules()
    return validator


_default_validator = _build_default_validator()


def validate_manifest(record: Mapping[str, Any]) -> ValidationReport:
    """Validate a parsed package manifest against the publishable-package rules.

    Args:
        record: Parsed manifest (e.g. the contents of package.json)

    Returns:
        ValidationReport; ``valid`` is False iff at least one error was found

    Raises:
        InvalidManifestError: If record is None or not a mapping
    """
    return _default_validator.validate(record)
