"""Configuration module for Box Equality.

Available Configurations:
- DemoConfig: which demonstrations run and how their output is rendered
"""

from box_equality.config.demo_config import (
    OUTPUT_FORMATS,
    DemoConfig,
)

__all__ = [
    "OUTPUT_FORMATS",
    "DemoConfig",
]
