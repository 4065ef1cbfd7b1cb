"""Unit tests for DemoConfig.

Tests for demonstration configuration including:
- Default values
- Environment variable loading
- Input validation
"""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest

from box_equality.config.demo_config import DemoConfig

ENV_KEYS = (
    "BOX_DEMO_DEMONSTRATIONS",
    "BOX_DEMO_LOG_ENVIRONMENT",
    "BOX_DEMO_OUTPUT_FORMAT",
)


@pytest.fixture
def clean_env():
    """Environment without any BOX_DEMO_* variable."""
    env = {k: v for k, v in os.environ.items() if k not in ENV_KEYS}
    with patch.dict(os.environ, env, clear=True):
        yield


class TestDemoConfig:
    """Tests for DemoConfig dataclass."""

    class TestDefaults:
        """Tests for default configuration values."""

        def test_default_demonstrations(self) -> None:
            assert DemoConfig().demonstrations == ("comparer", "equatable")

        def test_default_log_environment(self) -> None:
            assert DemoConfig().log_environment == "development"

        def test_default_output_format(self) -> None:
            assert DemoConfig().output_format == "text"

        def test_environment_defaults_match_constructor(self, clean_env) -> None:
            assert DemoConfig.from_environment() == DemoConfig()

    class TestValidation:
        """Tests for input validation."""

        def test_empty_demonstrations_rejected(self) -> None:
            with pytest.raises(ValueError, match="must not be empty"):
                DemoConfig(demonstrations=())

        def test_unknown_demonstration_rejected(self) -> None:
            with pytest.raises(ValueError, match="unknown demonstrations"):
                DemoConfig(demonstrations=("comparer", "identity"))

        def test_unknown_log_environment_rejected(self) -> None:
            with pytest.raises(ValueError, match="log_environment"):
                DemoConfig(log_environment="staging")

        def test_unknown_output_format_rejected(self) -> None:
            with pytest.raises(ValueError, match="output_format"):
                DemoConfig(output_format="xml")

    class TestFromEnvironment:
        """Tests for environment variable loading."""

        def test_defaults_without_environment(self, clean_env) -> None:
            assert DemoConfig.from_environment() == DemoConfig()

        def test_reads_all_variables(self, clean_env) -> None:
            with patch.dict(
                os.environ,
                {
                    "BOX_DEMO_DEMONSTRATIONS": "equatable",
                    "BOX_DEMO_LOG_ENVIRONMENT": "production",
                    "BOX_DEMO_OUTPUT_FORMAT": "json",
                },
            ):
                config = DemoConfig.from_environment()

            assert config.demonstrations == ("equatable",)
            assert config.log_environment == "production"
            assert config.output_format == "json"

        def test_list_is_trimmed_and_lowercased(self, clean_env) -> None:
            with patch.dict(
                os.environ, {"BOX_DEMO_DEMONSTRATIONS": " Equatable , comparer ,"}
            ):
                config = DemoConfig.from_environment()

            assert config.demonstrations == ("equatable", "comparer")

        def test_blank_values_fall_back_to_defaults(self, clean_env) -> None:
            with patch.dict(
                os.environ,
                {"BOX_DEMO_DEMONSTRATIONS": " , ", "BOX_DEMO_OUTPUT_FORMAT": "  "},
            ):
                config = DemoConfig.from_environment()

            assert config == DemoConfig()

        def test_invalid_value_raises(self, clean_env) -> None:
            with patch.dict(os.environ, {"BOX_DEMO_OUTPUT_FORMAT": "yaml"}):
                with pytest.raises(ValueError):
                    DemoConfig.from_environment()
