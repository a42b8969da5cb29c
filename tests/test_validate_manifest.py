"""End-to-end tests for validate_manifest."""

import copy

import pytest

from pubmanifest import InvalidManifestError, validate_manifest
from pubmanifest.validation import REQUIRED_FIELDS

RECOMMENDED_WARNINGS = [
    "Missing recommended field: repository",
    "Missing recommended field: bugs",
    "Missing recommended field: homepage",
    "Missing recommended field: engines",
]


class TestCompleteManifests:
    """Manifests that should pass."""

    def test_complete_manifest_has_no_findings(self, complete_manifest):
        result = validate_manifest(complete_manifest)

        assert result.valid is True
        assert result.errors == ()
        assert result.warnings == ()

    def test_missing_recommended_fields_only_warn(self, required_only_manifest):
        result = validate_manifest(required_only_manifest)

        assert result.valid is True
        assert len(result.errors) == 0
        assert list(result.warnings) == RECOMMENDED_WARNINGS

    def test_required_and_some_recommended(self, required_only_manifest):
        pkg = {
            **required_only_manifest,
            "name": "@scope/test-package",
            "repository": {
                "type": "git",
                "url": "git+https://github.com/scope/test-package.git",
            },
            "engines": {"node": ">=18.0.0"},
        }

        result = validate_manifest(pkg)

        assert result.valid is True
        assert result.warnings == (
            "Missing recommended field: bugs",
            "Missing recommended field: homepage",
        )


class TestRequiredFields:
    """Required field and publishConfig checks."""

    def test_name_and_version_only(self):
        result = validate_manifest({"name": "test-package", "version": "1.0.0"})

        assert result.valid is False
        assert "Missing required field: description" in result.errors
        assert "Missing required field: main" in result.errors
        assert "Missing required field: name" not in result.errors

    def test_missing_publish_config(self, required_only_manifest):
        del required_only_manifest["publishConfig"]

        result = validate_manifest(required_only_manifest)

        assert result.valid is False
        assert result.errors == ("Missing publishConfig field",)

    def test_publish_config_contents_not_inspected(self, required_only_manifest):
        required_only_manifest["publishConfig"] = None

        assert validate_manifest(required_only_manifest).valid is True

    @pytest.mark.parametrize("value", [None, "", 0, False, []])
    def test_falsy_values_count_as_present(self, required_only_manifest, value):
        required_only_manifest["description"] = value

        result = validate_manifest(required_only_manifest)

        assert "Missing required field: description" not in result.errors

    def test_empty_record(self):
        result = validate_manifest({})

        assert result.valid is False
        assert list(result.errors) == [
            *(f"Missing required field: {field}" for field in REQUIRED_FIELDS),
            "Missing publishConfig field",
        ]
        assert list(result.warnings) == RECOMMENDED_WARNINGS

    def test_adding_required_field_only_removes_its_error(self):
        before = validate_manifest({"name": "pkg"})
        after = validate_manifest({"name": "pkg", "main": "index.js"})

        assert len(after.errors) == len(before.errors) - 1
        assert set(after.errors) == set(before.errors) - {"Missing required field: main"}


class TestStructuredFields:
    """Shape checks reached through the full validator."""

    def test_repository_object_missing_url(self, required_only_manifest):
        required_only_manifest["repository"] = {"type": "git"}

        result = validate_manifest(required_only_manifest)

        assert result.valid is False
        assert [e for e in result.errors if e.startswith("repository")] == [
            "repository.url is required"
        ]

    @pytest.mark.parametrize("repository", [
        "github:user/repo",
        {"type": "git", "url": "git+https://github.com/user/repo.git"},
    ])
    def test_repository_alternatives(self, required_only_manifest, repository):
        required_only_manifest["repository"] = repository

        result = validate_manifest(required_only_manifest)

        assert result.valid is True
        assert not any("repository" in w for w in result.warnings)

    def test_bugs_object_missing_url(self, required_only_manifest):
        required_only_manifest["bugs"] = {"email": "test@example.com"}

        result = validate_manifest(required_only_manifest)

        assert result.valid is False
        assert "bugs.url is required when bugs is an object" in result.errors

    def test_bugs_as_string(self, required_only_manifest):
        required_only_manifest["bugs"] = "https://github.com/test/test/issues"

        result = validate_manifest(required_only_manifest)

        assert result.valid is True
        assert len(result.errors) == 0

    def test_homepage_object(self, required_only_manifest):
        required_only_manifest["homepage"] = {"url": "https://example.com"}

        result = validate_manifest(required_only_manifest)

        assert result.valid is False
        assert "homepage must be a string" in result.errors

    def test_engines_string(self, required_only_manifest):
        required_only_manifest["engines"] = "node >=18"

        result = validate_manifest(required_only_manifest)

        assert result.valid is False
        assert "engines must be an object" in result.errors

    def test_engines_without_node_is_still_valid(self, required_only_manifest):
        required_only_manifest["engines"] = {"npm": ">=9.0.0"}

        result = validate_manifest(required_only_manifest)

        assert result.valid is True
        assert "engines.node is recommended to specify Node.js compatibility" in result.warnings

    def test_findings_follow_evaluation_order(self):
        pkg = {
            "repository": 42,
            "bugs": {},
            "homepage": ["https://example.com"],
            "engines": {},
        }

        result = validate_manifest(pkg)

        assert list(result.errors[-3:]) == [
            "repository must be an object with type and url, or a string",
            "bugs.url is required when bugs is an object",
            "homepage must be a string",
        ]
        assert result.errors[9] == "Missing publishConfig field"
        assert result.warnings == (
            "engines.node is recommended to specify Node.js compatibility",
        )


class TestReportProperties:
    """Invariants that hold for any input."""

    @pytest.mark.parametrize("pkg", [
        {},
        {"name": "pkg"},
        {"engines": {"npm": "9"}},
        {"homepage": 1, "bugs": True},
    ])
    def test_valid_iff_no_errors(self, pkg):
        result = validate_manifest(pkg)

        assert result.valid == (len(result.errors) == 0)

    def test_warnings_do_not_affect_validity(self, required_only_manifest):
        result = validate_manifest(required_only_manifest)

        assert result.warnings
        assert result.valid is True

    def test_idempotent(self, required_only_manifest):
        required_only_manifest["repository"] = {}

        assert validate_manifest(required_only_manifest) == validate_manifest(required_only_manifest)

    def test_record_not_mutated(self, complete_manifest):
        complete_manifest["repository"] = {"type": "git"}
        snapshot = copy.deepcopy(complete_manifest)

        validate_manifest(complete_manifest)

        assert complete_manifest == snapshot

    @pytest.mark.parametrize("record", [None, "package.json", ["name"], 42])
    def test_non_mapping_record_rejected(self, record):
        with pytest.raises(InvalidManifestError):
            validate_manifest(record)
