"""
Configuration module.

Default parameters, YAML overrides and validation for data sources,
the dashboard timeline and VRE projection scenarios.
"""
from .defaults import DefaultConfig, get_default_config
from .loader import ConfigLoader
from .validation import ConfigValidator, ValidationError

__all__ = [
    "ConfigLoader",
    "ConfigValidator",
    "DefaultConfig",
    "ValidationError",
    "get_default_config",
]
