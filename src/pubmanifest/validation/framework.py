"""Core validation framework for package manifests.

Rules are pure: each one reads the manifest record and returns its own
``Findings``. The ``ManifestValidator`` runs its rules in order and folds
their findings into a single immutable ``ValidationReport``.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class InvalidManifestError(TypeError):
    """Raised when the value handed to the validator is not a mapping."""


class Severity(str, Enum):
    """Severity class of a rule or sub-key requirement."""
    REQUIRED = "required"        # absence is an error
    RECOMMENDED = "recommended"  # absence is a warning


class ValueKind(str, Enum):
    """JSON-like type tag of a manifest value."""
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"
    NULL = "null"


def kind_of(value: Any) -> ValueKind:
    """Classify a manifest value into a single ValueKind.

    ``bool`` is checked before numbers since it subclasses ``int``.

    Raises:
        InvalidManifestError: For values no JSON document can produce
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, Mapping):
        return ValueKind.OBJECT
    if isinstance(value, (list, tuple, set, frozenset)):
        return ValueKind.ARRAY
    raise InvalidManifestError(f"Unsupported manifest value type: {type(value).__name__}")


@dataclass(frozen=True)
class Findings:
    """Errors and warnings produced by one rule."""
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()

    def __add__(self, other: "Findings") -> "Findings":
        if not isinstance(other, Findings):
            return NotImplemented
        return Findings(self.errors + other.errors, self.warnings + other.warnings)

    @classmethod
    def error(cls, message: str) -> "Findings":
        return cls(errors=(message,))

    @classmethod
    def warning(cls, message: str) -> "Findings":
        return cls(warnings=(message,))

    def __bool__(self) -> bool:
        return bool(self.errors or self.warnings)


@dataclass(frozen=True)
class ValidationReport:
    """Result of validating one manifest."""
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()

    @property
    def valid(self) -> bool:
        """A manifest is valid iff no errors were found. Warnings never count."""
        return not self.errors

    @classmethod
    def from_findings(cls, findings: Findings) -> "ValidationReport":
        return cls(errors=findings.errors, warnings=findings.warnings)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            "valid": self.valid,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
        }


class ManifestRule(ABC):
    """Base class for manifest rules."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Rule name for identification."""

    @abstractmethod
    def check(self, record: Mapping[str, Any]) -> Findings:
        """Inspect the record and return this rule's findings.

        Args:
            record: Parsed manifest. Must not be mutated.

        Returns:
            Findings with zero or more errors and warnings
        """

    @abstractmethod
    def describe(self) -> dict:
        """Describe the rule as plain data."""


class ManifestValidator:
    """Runs an ordered list of rules over a manifest record."""

    def __init__(self, rules: list[ManifestRule] | None = None):
        self.rules: list[ManifestRule] = list(rules or [])

    def add_rule(self, rule: ManifestRule) -> None:
        """Add a validation rule."""
        self.rules.append(rule)

    def create_default_rules(self) -> None:
        """Install the publishable-package rule set."""
        from .rules import default_rules

        for rule in default_rules():
            self.add_rule(rule)

    def validate(self, record: Mapping[str, Any]) -> ValidationReport:
        """Run every rule over the record.

        Args:
            record: Parsed manifest mapping

        Returns:
            ValidationReport with all errors and warnings, in rule order

        Raises:
            InvalidManifestError: If record is None or not a mapping
        """
        if not isinstance(record, Mapping):
            raise InvalidManifestError(
                f"Manifest must be a mapping, got {type(record).__name__}"
            )

        findings = Findings()
        logger.debug(f"Running {len(self.rules)} manifest rules")

        for rule in self.rules:
            logger.debug(f"Executing rule: {rule.name}")
            try:
                findings = findings + rule.check(record)
            except Exception as e:
                logger.error(f"Rule {rule.name} failed with error: {e}")
                findings = findings + Findings.error(f"Rule {rule.name} failed: {e}")

        report = ValidationReport.from_findings(findings)
        logger.info(
            f"Manifest validation finished: {len(report.errors)} errors, "
            f"{len(report.warnings)} warnings"
        )
        return report
