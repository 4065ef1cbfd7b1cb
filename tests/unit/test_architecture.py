"""Tests to verify the package's layered structure."""

from pathlib import Path

import pytest

# Compute project root relative to this test file
PROJECT_ROOT = Path(__file__).parent.parent.parent


@pytest.fixture
def package_path() -> Path:
    """Return the box_equality package path."""
    return PROJECT_ROOT / "box_equality"


def test_main_layers_exist(package_path: Path) -> None:
    """Verify all main layer directories exist."""
    for layer in ["domain", "application", "infrastructure", "api"]:
        assert (package_path / layer).is_dir(), f"Missing layer: {layer}"
        assert (package_path / layer / "__init__.py").is_file(), (
            f"Missing {layer}/__init__.py"
        )


def test_domain_subdirectories_exist(package_path: Path) -> None:
    """Verify domain layer has required subdirectories."""
    domain = package_path / "domain"
    for subdir in ["models", "ports", "services", "collections", "errors"]:
        assert (domain / subdir).is_dir(), f"Missing domain subdir: {subdir}"
        assert (domain / subdir / "__init__.py").is_file(), (
            f"Missing {subdir}/__init__.py"
        )


def test_domain_uses_no_third_party_libraries(package_path: Path) -> None:
    """Domain stays pure: no structlog or pydantic."""
    for py_file in (package_path / "domain").rglob("*.py"):
        content = py_file.read_text()
        for forbidden in ("import structlog", "from pydantic", "import pydantic"):
            assert forbidden not in content, f"{py_file} contains {forbidden}"


def test_box_equality_error_exists() -> None:
    """Verify base exception class is defined."""
    from box_equality.domain.exceptions import BoxEqualityError

    assert issubclass(BoxEqualityError, Exception)


def test_domain_errors_inherit_from_base() -> None:
    from box_equality.domain import BoxEqualityError, DuplicateKeyError
    from box_equality.domain.errors import InvalidDimensionError

    assert issubclass(DuplicateKeyError, BoxEqualityError)
    assert issubclass(InvalidDimensionError, BoxEqualityError)


def test_box_equality_error_accepts_message() -> None:
    from box_equality.domain.exceptions import BoxEqualityError

    assert str(BoxEqualityError("test message")) == "test message"
    assert str(BoxEqualityError()) == ""


def test_project_version(project_version: str) -> None:
    assert project_version == "0.1.0"
