"""
Smoke tests to verify all critical dependencies are installed correctly.

These tests confirm that:
1. Python 3.10+ is installed
2. All core dependencies are importable
"""

import sys


class TestPythonVersion:
    """Verify Python version requirements."""

    def test_python_310_or_higher(self) -> None:
        assert sys.version_info >= (3, 10), (
            f"Python 3.10+ required, "
            f"got {sys.version_info.major}.{sys.version_info.minor}"
        )


class TestCoreDependencies:
    """Verify core dependencies."""

    def test_pydantic_v2(self) -> None:
        """Pydantic v2 must be installed (model_dump_json is used for reports)."""
        import pydantic

        major_version = int(pydantic.VERSION.split(".")[0])
        assert major_version >= 2, f"Pydantic v2 required, got {pydantic.VERSION}"

    def test_structlog_import(self) -> None:
        import structlog

        assert structlog.get_logger() is not None

    def test_dotenv_import(self) -> None:
        from dotenv import load_dotenv

        assert callable(load_dotenv)
