"""Configuration schema and loading system for cut lists.

This package provides JSON-based configuration loading and validation
for cut lists. It includes Pydantic models for schema validation, a
configuration loader with comprehensive error handling, and advisory
checks.

Public API:
    - CutListConfiguration: Root configuration model
    - PartConfig: Named part and its cuts
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - config_to_request: Convert a configuration to a CutRequest
    - validate_config: Check board settings and every cut, then advisories
    - check_advisories: Warnings for a valid CutRequest
    - ValidationResult: Container for validation results
"""

from lumber_cuts.application.config.adapter import config_to_lines, config_to_request
from lumber_cuts.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from lumber_cuts.application.config.schema import (
    SUPPORTED_VERSIONS,
    CutListConfiguration,
    PartConfig,
)
from lumber_cuts.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    check_advisories,
    validate_config,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "ConfigError",
    "CutListConfiguration",
    "PartConfig",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "check_advisories",
    "config_to_lines",
    "config_to_request",
    "load_config",
    "load_config_from_dict",
    "validate_config",
]
