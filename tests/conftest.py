"""Shared fixtures for pubmanifest tests."""

import pytest


@pytest.fixture
def required_only_manifest():
    """Manifest with every required field and publishConfig, nothing recommended."""
    return {
        "name": "test-package",
        "version": "1.0.0",
        "description": "Test package",
        "main": "./dist/index.js",
        "types": "./dist/index.d.ts",
        "files": ["dist"],
        "keywords": ["test"],
        "author": "Test Author",
        "license": "MIT",
        "publishConfig": {
            "access": "public",
        },
    }


@pytest.fixture
def complete_manifest(required_only_manifest):
    """Manifest with all required and recommended fields."""
    return {
        **required_only_manifest,
        "repository": {
            "type": "git",
            "url": "git+https://github.com/test/test.git",
        },
        "bugs": {
            "url": "https://github.com/test/test/issues",
        },
        "homepage": "https://github.com/test/test#readme",
        "engines": {
            "node": ">=18.0.0",
        },
    }
