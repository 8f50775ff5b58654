"""
flowsearch - Startup
Logging configuration and matcher registry bootstrap
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Optional

import structlog
from dotenv import load_dotenv

from .exceptions import MatcherConfigurationError
from .services.config.config_validator import ConfigValidator, validate_configs_on_startup
from .services.config.configuration_service import init_config_service
from .services.search.matcher_factory import MatcherFactory
from .services.search.registry import MatcherRegistry, init_matcher_registry


def configure_logging():
    """
    Configure structured logging using structlog.

    - Production (ENV=production): JSON output for log aggregation
    - Development (ENV=development): Human-readable console output
    - LOG_FILE_PATH set: additionally writes to a rotating log file
    """
    env = os.getenv("ENV", "development").lower()
    log_level_str = os.getenv("LOG_LEVEL", "INFO").upper()
    log_level = getattr(logging, log_level_str, logging.INFO)

    timestamper = structlog.processors.TimeStamper(fmt="iso")

    # Shared processors for all environments
    shared_processors = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.contextvars.merge_contextvars,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        timestamper,
    ]

    if env == "production":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=sys.stdout.isatty(),
            exception_formatter=structlog.dev.plain_traceback
        )

    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        cache_logger_on_first_use=True,
    )

    # Route standard library logging through the same renderer
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    root_logger = logging.getLogger()

    # Remove existing handlers so repeated calls don't duplicate output
    root_logger.handlers.clear()

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setFormatter(formatter)
    root_logger.addHandler(stdout_handler)

    log_file_path = os.getenv("LOG_FILE_PATH")
    if log_file_path:
        log_file_path = str(Path(log_file_path).resolve())
        os.makedirs(os.path.dirname(log_file_path), exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            filename=log_file_path,
            maxBytes=10 * 1024 * 1024,  # 10MB per file
            backupCount=5,
            encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    root_logger.setLevel(log_level)

    return structlog.get_logger(__name__)


def create_matcher_registry(
    config_dir: Optional[str] = None,
    setup_logging: bool = True
) -> MatcherRegistry:
    """
    Build and install the global matcher registry.

    Loads .env, configures logging, validates matchers.json and registers one
    matcher per configured component kind. Meant to run once at process start.

    Args:
        config_dir: Config directory override (defaults to $FLOWSEARCH_CONFIG_DIR
            or the packaged config)
        setup_logging: Configure structlog and the root logger

    Returns:
        The installed MatcherRegistry

    Raises:
        MatcherConfigurationError: If the configuration is invalid
    """
    load_dotenv()

    if setup_logging:
        logger = configure_logging()
    else:
        logger = structlog.get_logger(__name__)

    logger.info("Starting flowsearch matcher registry...")

    config_service = init_config_service(config_dir)

    validator = ConfigValidator(config_dir=config_service.config_dir)
    is_valid, report = validate_configs_on_startup(validator)
    if not is_valid:
        errors = [e for r in report["results"] for e in r["errors"]]
        raise MatcherConfigurationError(f"Invalid matcher configuration: {errors}")

    factory = MatcherFactory(config_service.get_matcher_config())
    registry = factory.create_registry()

    logger.info("matcher registry ready", matchers=registry.get_matcher_info())
    return init_matcher_registry(registry)
