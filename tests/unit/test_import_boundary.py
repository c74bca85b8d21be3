"""Unit tests for the import boundary checking script.

Tests verify that the hexagonal architecture import rules are enforced:
- domain/ imports NOTHING from other govmeta layers
- application/ imports from domain/ only
- infrastructure/ imports from domain/ and application/
- bootstrap/ may import from every layer
"""

import ast
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent.parent / "scripts"))

from check_imports import (  # noqa: E402
    ALLOWED_IMPORTS,
    LAYER_HIERARCHY,
    check_file_imports,
    check_import_boundaries,
    format_violations,
    get_import_module,
)

PACKAGE_DIR = Path(__file__).parent.parent.parent / "govmeta"


class TestLayerHierarchy:
    """Test that the layer hierarchy is correctly defined."""

    def test_domain_is_innermost(self) -> None:
        """Domain should be the innermost layer (level 0)."""
        assert LAYER_HIERARCHY["domain"] == 0

    def test_bootstrap_is_outermost(self) -> None:
        """Bootstrap should be the outermost layer."""
        assert LAYER_HIERARCHY["bootstrap"] == max(LAYER_HIERARCHY.values())


class TestAllowedImports:
    """Test that the allowed imports are correctly defined."""

    def test_domain_imports_nothing(self) -> None:
        """Domain should not be allowed to import any govmeta layers."""
        assert ALLOWED_IMPORTS["domain"] == set()

    def test_application_imports_domain_only(self) -> None:
        """Application can only import from domain."""
        assert ALLOWED_IMPORTS["application"] == {"domain"}

    def test_infrastructure_imports_domain_and_application(self) -> None:
        """Infrastructure can import from domain and application."""
        assert ALLOWED_IMPORTS["infrastructure"] == {"domain", "application"}


class TestGetImportModule:
    """Test the get_import_module helper function."""

    def test_import_from_statement(self) -> None:
        """Extraction from 'from x import y'."""
        node = ast.parse("from govmeta.domain.models import Document").body[0]
        assert isinstance(node, ast.ImportFrom)
        assert get_import_module(node) == "govmeta.domain.models"

    def test_none_for_relative_import(self) -> None:
        """Relative imports have no module."""
        node = ast.parse("from . import something").body[0]
        assert isinstance(node, ast.ImportFrom)
        assert get_import_module(node) is None


class TestCheckFileImports:
    """Test check_file_imports against a temporary package tree."""

    @pytest.fixture
    def package_dir(self, tmp_path: Path) -> Path:
        package_dir = tmp_path / "govmeta"
        for layer in LAYER_HIERARCHY:
            (package_dir / layer).mkdir(parents=True)
            (package_dir / layer / "__init__.py").write_text("")
        return package_dir

    def test_valid_application_to_domain(self, package_dir: Path) -> None:
        """Application can import from domain."""
        service = package_dir / "application" / "service.py"
        service.write_text("from govmeta.domain.models import Document")

        assert check_file_imports(service, package_dir) == []

    def test_third_party_imports_ignored(self, package_dir: Path) -> None:
        """Imports outside govmeta are never violations."""
        module = package_dir / "domain" / "module.py"
        module.write_text("import structlog\nfrom pydantic import BaseModel")

        assert check_file_imports(module, package_dir) == []

    def test_violation_domain_imports_application(self, package_dir: Path) -> None:
        """Domain importing application is detected with its line number."""
        module = package_dir / "domain" / "bad.py"
        module.write_text("import os\nfrom govmeta.application.services import x")

        violations = check_file_imports(module, package_dir)

        assert len(violations) == 1
        assert violations[0][1] == 2
        assert "domain layer cannot import from application" in violations[0][2]

    def test_violation_application_imports_infrastructure(self, package_dir: Path) -> None:
        """Application importing infrastructure is detected."""
        service = package_dir / "application" / "bad.py"
        service.write_text("from govmeta.infrastructure.adapters import MetadataClient")

        violations = check_file_imports(service, package_dir)

        assert "application layer cannot import from infrastructure" in violations[0][2]

    def test_format_violations(self, package_dir: Path) -> None:
        """Violations are formatted with a total."""
        module = package_dir / "domain" / "bad.py"
        module.write_text("from govmeta.bootstrap import x")

        output = format_violations(check_file_imports(module, package_dir))

        assert "Total: 1 violation(s)" in output


class TestProjectBoundaries:
    """The real package respects its own layering."""

    def test_no_violations_in_govmeta(self) -> None:
        """govmeta has no import boundary violations."""
        assert check_import_boundaries(PACKAGE_DIR) == []
