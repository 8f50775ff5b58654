"""Configuration services - JSON config loading and validation"""

from .configuration_service import (
    ConfigurationService,
    get_config_service,
    init_config_service
)
from .config_validator import (
    ConfigValidator,
    ValidationResult,
    ValidationReport,
    get_validator,
    validate_configs_on_startup
)

__all__ = [
    "ConfigurationService",
    "get_config_service",
    "init_config_service",
    "ConfigValidator",
    "ValidationResult",
    "ValidationReport",
    "get_validator",
    "validate_configs_on_startup"
]
