"""Manifest rules for publishable packages.

The rule set is data: required fields, the publish marker, and one
``RecommendedFieldRule`` per structured field with its accepted shapes and
sub-key requirements. All of them share the generic checks below.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .framework import Findings, ManifestRule, Severity, ValueKind, kind_of

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = (
    "name",
    "version",
    "description",
    "main",
    "types",
    "files",
    "keywords",
    "author",
    "license",
)

PUBLISH_MARKER_FIELD = "publishConfig"


@dataclass(frozen=True)
class SubKeyRequirement:
    """A key that must (or should) be present when a field is an object."""
    key: str
    severity: Severity
    message: str


class RequiredFieldsRule(ManifestRule):
    """Every listed top-level key must be present.

    Presence is about the key only: ``None`` or ``""`` still count.
    """

    def __init__(self, fields: tuple[str, ...] = REQUIRED_FIELDS):
        self.fields = tuple(fields)

    @property
    def name(self) -> str:
        return "required_fields"

    def check(self, record: Mapping[str, Any]) -> Findings:
        return Findings(errors=tuple(
            f"Missing required field: {field}"
            for field in self.fields
            if field not in record
        ))

    def describe(self) -> dict:
        return {
            "name": self.name,
            "severity": Severity.REQUIRED.value,
            "fields": list(self.fields),
        }


class MarkerFieldRule(ManifestRule):
    """A single key whose presence alone is required. Contents are not inspected."""

    def __init__(self, field: str = PUBLISH_MARKER_FIELD, message: str | None = None):
        self.field = field
        self.message = message or f"Missing {field} field"

    @property
    def name(self) -> str:
        return "publish_config" if self.field == PUBLISH_MARKER_FIELD else f"marker:{self.field}"

    def check(self, record: Mapping[str, Any]) -> Findings:
        if self.field not in record:
            return Findings.error(self.message)
        return Findings()

    def describe(self) -> dict:
        return {
            "name": self.name,
            "severity": Severity.REQUIRED.value,
            "fields": [self.field],
        }


class RecommendedFieldRule(ManifestRule):
    """An optional field with a shape policy.

    Absent -> warning. Present with a kind outside ``accepts`` -> error.
    Present as an object -> each sub-key requirement is checked
    independently, producing an error or a warning per its severity.
    """

    def __init__(
        self,
        field: str,
        accepts: tuple[ValueKind, ...],
        shape_message: str,
        sub_keys: tuple[SubKeyRequirement, ...] = (),
    ):
        if sub_keys and ValueKind.OBJECT not in accepts:
            raise ValueError(f"{field}: sub-key requirements need the object shape")
        self.field = field
        self.accepts = tuple(accepts)
        self.shape_message = shape_message
        self.sub_keys = tuple(sub_keys)

    @property
    def name(self) -> str:
        return self.field

    def check(self, record: Mapping[str, Any]) -> Findings:
        if self.field not in record:
            return Findings.warning(f"Missing recommended field: {self.field}")

        value = record[self.field]
        kind = kind_of(value)
        if kind not in self.accepts:
            logger.debug(f"{self.field} has unsupported kind {kind.value}")
            return Findings.error(self.shape_message)

        if kind is not ValueKind.OBJECT:
            return Findings()

        errors = []
        warnings = []
        for requirement in self.sub_keys:
            if requirement.key in value:
                continue
            if requirement.severity is Severity.REQUIRED:
                errors.append(requirement.message)
            else:
                warnings.append(requirement.message)
        return Findings(tuple(errors), tuple(warnings))

    def describe(self) -> dict:
        return {
            "name": self.name,
            "severity": Severity.RECOMMENDED.value,
            "fields": [self.field],
            "accepts": [kind.value for kind in self.accepts],
            "subKeys": [
                {"key": req.key, "severity": req.severity.value}
                for req in self.sub_keys
            ],
        }


REPOSITORY_RULE = RecommendedFieldRule(
    "repository",
    accepts=(ValueKind.OBJECT, ValueKind.STRING),
    shape_message="repository must be an object with type and url, or a string",
    sub_keys=(
        SubKeyRequirement("type", Severity.REQUIRED, "repository.type is required"),
        SubKeyRequirement("url", Severity.REQUIRED, "repository.url is required"),
    ),
)

BUGS_RULE = RecommendedFieldRule(
    "bugs",
    accepts=(ValueKind.OBJECT, ValueKind.STRING),
    shape_message="bugs must be an object with url, or a string",
    sub_keys=(
        SubKeyRequirement("url", Severity.REQUIRED, "bugs.url is required when bugs is an object"),
    ),
)

HOMEPAGE_RULE = RecommendedFieldRule(
    "homepage",
    accepts=(ValueKind.STRING,),
    shape_message="homepage must be a string",
)

ENGINES_RULE = RecommendedFieldRule(
    "engines",
    accepts=(ValueKind.OBJECT,),
    shape_message="engines must be an object",
    sub_keys=(
        SubKeyRequirement(
            "node",
            Severity.RECOMMENDED,
            "engines.node is recommended to specify Node.js compatibility",
        ),
    ),
)

RECOMMENDED_FIELD_RULES = (REPOSITORY_RULE, BUGS_RULE, HOMEPAGE_RULE, ENGINES_RULE)


def default_rules() -> list[ManifestRule]:
    """Rules for a publishable package, in evaluation order."""
    return [
        RequiredFieldsRule(),
        MarkerFieldRule(),
        *RECOMMENDED_FIELD_RULES,
    ]
