"""
Configuration Validator Service
Validates configuration files against JSON schemas and checks that the matcher
configuration covers every searchable component kind
"""

import json
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Tuple, Any, Optional

from jsonschema import validate, ValidationError, SchemaError

from flowsearch.models.components import ComponentKind
from flowsearch.services.search.matcher_factory import MatcherFactory

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """Result of a validation check"""
    is_valid: bool
    errors: List[str]
    warnings: List[str]
    config_name: str

    def add_error(self, error: str):
        """Add an error message"""
        self.errors.append(error)
        self.is_valid = False

    def add_warning(self, warning: str):
        """Add a warning message"""
        self.warnings.append(warning)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "config_name": self.config_name,
            "is_valid": self.is_valid,
            "errors": self.errors,
            "warnings": self.warnings,
            "error_count": len(self.errors),
            "warning_count": len(self.warnings)
        }


@dataclass
class ValidationReport:
    """Complete validation report for all configs"""
    results: List[ValidationResult]
    overall_valid: bool
    timestamp: str

    @classmethod
    def create(cls, results: List[ValidationResult]):
        """Create report from results"""
        return cls(
            results=results,
            overall_valid=all(r.is_valid for r in results),
            timestamp=datetime.now(timezone.utc).isoformat()
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "overall_valid": self.overall_valid,
            "timestamp": self.timestamp,
            "total_configs": len(self.results),
            "valid_configs": sum(1 for r in self.results if r.is_valid),
            "invalid_configs": sum(1 for r in self.results if not r.is_valid),
            "total_errors": sum(len(r.errors) for r in self.results),
            "total_warnings": sum(len(r.warnings) for r in self.results),
            "results": [r.to_dict() for r in self.results]
        }


class ConfigValidator:
    """
    Configuration validator with JSON schema validation and consistency checks
    """

    def __init__(self, config_dir: Optional[Path] = None, schema_dir: Optional[Path] = None):
        """
        Initialize validator

        Args:
            config_dir: Path to config directory (defaults to flowsearch/config)
            schema_dir: Path to schema directory (defaults to flowsearch/config/schemas)
        """
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"
        if schema_dir is None:
            schema_dir = Path(__file__).parent.parent.parent / "config" / "schemas"

        self.config_dir = Path(config_dir)
        self.schema_dir = Path(schema_dir)

        self._schema_cache: Dict[str, Dict[str, Any]] = {}

        logger.info(f"ConfigValidator initialized - config_dir: {self.config_dir}, schema_dir: {self.schema_dir}")

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Load JSON schema from schemas directory

        Args:
            schema_name: Name of schema file (without .schema.json extension)

        Raises:
            FileNotFoundError: If schema file doesn't exist
            json.JSONDecodeError: If schema is invalid JSON
        """
        if schema_name in self._schema_cache:
            return self._schema_cache[schema_name]

        schema_path = self.schema_dir / f"{schema_name}.schema.json"

        if not schema_path.exists():
            raise FileNotFoundError(f"Schema file not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        self._schema_cache[schema_name] = schema
        logger.debug(f"Loaded schema: {schema_name}")

        return schema

    def load_config(self, config_name: str) -> Dict[str, Any]:
        """
        Load configuration file

        Raises:
            FileNotFoundError: If config file doesn't exist
            json.JSONDecodeError: If config is invalid JSON
        """
        config_path = self.config_dir / f"{config_name}.json"

        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, "r", encoding="utf-8") as f:
            config = json.load(f)

        return config

    def validate_config_schema(self, config_name: str, schema_name: Optional[str] = None) -> ValidationResult:
        """
        Validate config file against its JSON schema

        Args:
            config_name: Name of config file to validate
            schema_name: Name of schema (defaults to config_name)

        Returns:
            ValidationResult with errors and warnings
        """
        if schema_name is None:
            schema_name = config_name

        result = ValidationResult(
            is_valid=True,
            errors=[],
            warnings=[],
            config_name=config_name
        )

        try:
            config = self.load_config(config_name)
            schema = self.load_schema(schema_name)

            validate(instance=config, schema=schema)

            logger.info(f"✓ Config '{config_name}' passed schema validation")

        except FileNotFoundError as e:
            result.add_error(f"File not found: {str(e)}")
        except json.JSONDecodeError as e:
            result.add_error(f"Invalid JSON: {str(e)}")
        except ValidationError as e:
            result.add_error(f"Schema validation failed: {e.message}")
            if e.path:
                result.add_error(f"  Path: {'.'.join(str(p) for p in e.path)}")
        except SchemaError as e:
            result.add_error(f"Invalid schema: {str(e)}")

        return result

    def validate_matcher_coverage(self) -> ValidationResult:
        """
        Validate that matchers.json covers the component model

        Checks:
        - Every configured kind is a known ComponentKind
        - Every ComponentKind has matchers configured
        - Every matcher name is known to the MatcherFactory
        - Repeated matcher names within a kind (warning only)

        Returns:
            ValidationResult with coverage errors
        """
        result = ValidationResult(
            is_valid=True,
            errors=[],
            warnings=[],
            config_name="matcher_coverage"
        )

        try:
            config = self.load_config("matchers")
        except (FileNotFoundError, json.JSONDecodeError) as e:
            result.add_error(f"Coverage check failed: {str(e)}")
            return result

        configured = config.get("component_kinds", {})
        known_kinds = {kind.value for kind in ComponentKind}

        for kind_name, matcher_names in configured.items():
            if kind_name not in known_kinds:
                result.add_error(f"Unknown component kind '{kind_name}' in matchers.json")

            for name in matcher_names:
                if name not in MatcherFactory.MATCHER_CLASSES:
                    result.add_error(f"Unknown matcher '{name}' configured for '{kind_name}'")

            for name in sorted({n for n in matcher_names if matcher_names.count(n) > 1}):
                result.add_warning(
                    f"Matcher '{name}' listed more than once for '{kind_name}'; its matches will be repeated"
                )

        for kind_name in sorted(known_kinds - set(configured)):
            result.add_error(f"Component kind '{kind_name}' has no matchers configured")

        for warning in result.warnings:
            logger.warning(warning)

        if result.is_valid:
            logger.info("✓ Matcher coverage validation passed")

        return result

    def validate_all(self) -> ValidationReport:
        """
        Run all validations and generate comprehensive report

        Returns:
            ValidationReport with all results
        """
        logger.info("Starting configuration validation...")

        results = [
            self.validate_config_schema("matchers"),
            self.validate_matcher_coverage(),
        ]

        report = ValidationReport.create(results)

        if report.overall_valid:
            logger.info("✅ All configuration validations passed")
        else:
            logger.error(f"❌ Configuration validation failed with {report.to_dict()['total_errors']} errors")

        return report


# Singleton instance
_validator: Optional[ConfigValidator] = None


def get_validator() -> ConfigValidator:
    """Get singleton validator instance"""
    global _validator
    if _validator is None:
        _validator = ConfigValidator()
    return _validator


def validate_configs_on_startup(validator: Optional[ConfigValidator] = None) -> Tuple[bool, Dict[str, Any]]:
    """
    Validate all configs on application startup

    Args:
        validator: Validator to use (defaults to the singleton)

    Returns:
        Tuple of (is_valid, report_dict)
    """
    validator = validator or get_validator()
    report = validator.validate_all()

    if not report.overall_valid:
        logger.error("Configuration validation failed on startup")
        logger.error(f"Report: {json.dumps(report.to_dict(), indent=2)}")

    return report.overall_valid, report.to_dict()
