"""Unit tests for the import boundary checking script.

The secure_admin package follows hexagonal layering:
- config/ and domain/ import NOTHING from other package layers
- application/ imports from domain/ only
- infrastructure/ imports from domain/, application/ and config/
- api/ imports from application/ and domain/
"""

import ast
import sys
from pathlib import Path

import pytest

import secure_admin

sys.path.insert(0, str(Path(__file__).parent.parent.parent / "scripts"))

from check_imports import (  # noqa: E402
    ALLOWED_IMPORTS,
    Violation,
    check_file_imports,
    check_import_boundaries,
    format_violations,
    module_name,
    resolve_imports,
)


def _first_import(source: str) -> ast.Import | ast.ImportFrom:
    node = ast.parse(source).body[0]
    assert isinstance(node, (ast.Import, ast.ImportFrom))
    return node


class TestLayerRules:
    """Allowed imports per layer."""

    def test_inner_layers_import_nothing(self) -> None:
        assert ALLOWED_IMPORTS["domain"] == frozenset()
        assert ALLOWED_IMPORTS["config"] == frozenset()

    def test_application_imports_domain_only(self) -> None:
        assert ALLOWED_IMPORTS["application"] == {"domain"}

    def test_infrastructure_may_read_config(self) -> None:
        assert ALLOWED_IMPORTS["infrastructure"] == {"domain", "application", "config"}

    def test_api_never_imports_infrastructure(self) -> None:
        assert "infrastructure" not in ALLOWED_IMPORTS["api"]

    def test_bootstrap_is_unchecked(self) -> None:
        assert "bootstrap" not in ALLOWED_IMPORTS


class TestResolveImports:
    """Absolute and relative import resolution."""

    def test_absolute_from(self) -> None:
        node = _first_import("from secure_admin.domain.models import Identity")
        assert resolve_imports(node, "secure_admin.api.models.admin", False) == [
            "secure_admin.domain.models"
        ]

    def test_every_name_of_plain_import(self) -> None:
        node = _first_import("import os, secure_admin.api.models")
        assert resolve_imports(node, "secure_admin.domain.x", False) == [
            "os",
            "secure_admin.api.models",
        ]

    def test_parent_relative_import(self) -> None:
        node = _first_import("from ..errors import NotAdminError")
        assert resolve_imports(node, "secure_admin.domain.models.identity", False) == [
            "secure_admin.domain.errors"
        ]

    def test_relative_import_from_package_init(self) -> None:
        node = _first_import("from .admin import NotAdminError")
        assert resolve_imports(node, "secure_admin.domain.errors", True) == [
            "secure_admin.domain.errors.admin"
        ]

    def test_bare_relative_import_names_submodules(self) -> None:
        node = _first_import("from .. import adapters, stubs")
        assert resolve_imports(
            node, "secure_admin.infrastructure.observability.logging", False
        ) == [
            "secure_admin.infrastructure.adapters",
            "secure_admin.infrastructure.stubs",
        ]

    def test_module_name(self, tmp_path: Path) -> None:
        package_dir = tmp_path / "secure_admin"
        assert (
            module_name(package_dir / "domain" / "models" / "__init__.py", package_dir)
            == "secure_admin.domain.models"
        )
        assert (
            module_name(package_dir / "config" / "admin_config.py", package_dir)
            == "secure_admin.config.admin_config"
        )


class TestCheckFileImports:
    """Test check_file_imports against a temporary package tree."""

    @pytest.fixture
    def package_dir(self, tmp_path: Path) -> Path:
        package_dir = tmp_path / "secure_admin"
        for layer in ["config", "domain", "application", "infrastructure", "api", "bootstrap"]:
            (package_dir / layer).mkdir(parents=True)
            (package_dir / layer / "__init__.py").write_text("")
        return package_dir

    def _write(self, package_dir: Path, relative: str, source: str) -> Path:
        path = package_dir / relative
        path.write_text(source)
        return path

    @pytest.mark.parametrize(
        ("relative", "source"),
        [
            ("domain/mod.py", "import re\nfrom dataclasses import dataclass"),
            ("domain/mod.py", "from secure_admin.domain.errors import NotAdminError"),
            ("application/svc.py", "from ..domain.models import Identity"),
            ("infrastructure/store.py", "from secure_admin.application.ports import AdminStoreProtocol"),
            ("infrastructure/validator.py", "from secure_admin.config import SecureAdminConfig"),
            ("api/models.py", "from secure_admin.domain.models import AdminView"),
            ("bootstrap/wire.py", "from secure_admin.infrastructure.adapters import InMemoryAdminStore"),
        ],
    )
    def test_allowed(self, package_dir: Path, relative: str, source: str) -> None:
        path = self._write(package_dir, relative, source)
        assert check_file_imports(path, package_dir) == []

    @pytest.mark.parametrize(
        ("relative", "source", "message"),
        [
            (
                "domain/bad.py",
                "from secure_admin.application.services import SecureAdminService",
                "domain layer cannot import from application",
            ),
            (
                "domain/bad.py",
                "from ..config import SecureAdminConfig",
                "domain layer cannot import from config",
            ),
            (
                "config/bad.py",
                "from secure_admin.domain.models import Identity",
                "config layer cannot import from domain",
            ),
            (
                "application/bad.py",
                "from ..infrastructure.adapters import InMemoryAdminStore",
                "application layer cannot import from infrastructure",
            ),
            (
                "infrastructure/bad.py",
                "import logging, secure_admin.api.models",
                "infrastructure layer cannot import from api",
            ),
            (
                "api/bad.py",
                "from secure_admin.infrastructure.stubs import AdminStoreStub",
                "api layer cannot import from infrastructure",
            ),
        ],
    )
    def test_violation(
        self, package_dir: Path, relative: str, source: str, message: str
    ) -> None:
        path = self._write(package_dir, relative, source)

        violations = check_file_imports(path, package_dir)

        assert violations == [Violation(str(path), 1, message)]

    def test_lazy_import_inside_function_detected(self, package_dir: Path) -> None:
        path = self._write(
            package_dir,
            "domain/lazy.py",
            "def f():\n    from secure_admin.infrastructure import adapters\n",
        )

        violations = check_file_imports(path, package_dir)

        assert len(violations) == 1
        assert violations[0].line == 2


class TestCheckImportBoundaries:
    """Test the package-wide scan."""

    def test_secure_admin_package_is_clean(self) -> None:
        package_dir = Path(secure_admin.__file__).parent
        violations = check_import_boundaries(package_dir)
        assert violations == [], format_violations(violations)

    def test_nonexistent_directory(self) -> None:
        assert check_import_boundaries(Path("/nonexistent/path")) == []

    def test_scans_nested_files(self, tmp_path: Path) -> None:
        nested = tmp_path / "secure_admin" / "domain" / "models"
        nested.mkdir(parents=True)
        (nested / "nested.py").write_text("from secure_admin.api import models")

        violations = check_import_boundaries(tmp_path / "secure_admin")

        assert len(violations) == 1
        assert "nested.py" in violations[0].path

    def test_format_violations(self) -> None:
        report = format_violations(
            [Violation("a.py", 3, "domain layer cannot import from api")]
        )
        assert "a.py:3: domain layer cannot import from api" in report
        assert "Total: 1 violation(s)" in report
        assert format_violations([]) == ""
