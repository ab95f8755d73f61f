"""
Smoke tests to verify all critical dependencies are installed correctly.

These tests confirm that:
1. Python 3.11+ is installed
2. All core dependencies are importable
3. Project version is accessible
"""

import sys


class TestPythonVersion:
    """Verify Python version requirements."""

    def test_python_311_or_higher(self) -> None:
        assert sys.version_info >= (3, 11), (
            f"Python 3.11+ required, "
            f"got {sys.version_info.major}.{sys.version_info.minor}"
        )


class TestCoreDependencies:
    """Verify core library dependencies."""

    def test_pydantic_v2(self) -> None:
        """Pydantic v2 must be installed."""
        import pydantic

        major_version = int(pydantic.VERSION.split(".")[0])
        assert major_version >= 2, f"Pydantic v2 required, got {pydantic.VERSION}"

    def test_structlog_configuration(self) -> None:
        """structlog can be bound with context."""
        import structlog

        logger = structlog.get_logger()
        bound_logger = logger.bind(namespace="admin", operation="test")
        assert bound_logger is not None

    def test_hypothesis_import(self) -> None:
        """hypothesis must be importable."""
        from hypothesis import given, strategies

        assert given is not None
        assert strategies is not None


class TestProjectVersion:
    """Verify project metadata is accessible."""

    def test_version_accessible(self, project_version: str) -> None:
        assert isinstance(project_version, str)
        assert len(project_version) > 0

    def test_version_format(self, project_version: str) -> None:
        parts = project_version.split(".")
        assert len(parts) >= 2, f"Version must be semver format, got {project_version}"
