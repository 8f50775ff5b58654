"""
Configuration Service
Centralized configuration management with caching
"""

import json
import os
from functools import lru_cache
from typing import Dict, List, Any, Optional
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_DIR_ENV = "FLOWSEARCH_CONFIG_DIR"


class ConfigurationService:
    """
    Centralized service for loading and caching search configurations

    Loads configurations from JSON files in the config directory with:
    - LRU caching, configs are read once per process
    - Error handling
    - Reload support
    """

    def __init__(self, config_dir: Optional[str] = None):
        """
        Initialize ConfigurationService

        Args:
            config_dir: Path to configuration directory. If None, uses
                $FLOWSEARCH_CONFIG_DIR, then the packaged flowsearch/config
        """
        if config_dir is None:
            config_dir = os.getenv(CONFIG_DIR_ENV)

        if config_dir is None:
            self.config_dir = Path(__file__).parent.parent.parent / "config"
        else:
            self.config_dir = Path(config_dir)

        logger.info(f"ConfigurationService initialized with config_dir: {self.config_dir}")

    @lru_cache(maxsize=32)
    def load_config(self, config_name: str) -> Dict[str, Any]:
        """
        Load configuration from JSON file with caching

        Args:
            config_name: Name of config file (without .json extension)

        Returns:
            Dict containing configuration data

        Raises:
            FileNotFoundError: If config file not found
            json.JSONDecodeError: If config file is invalid JSON
        """
        config_path = self.config_dir / f"{config_name}.json"

        if not config_path.exists():
            logger.error(f"Config file not found: {config_name}.json")
            raise FileNotFoundError(f"Config file not found: {config_path}")

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in {config_name}.json: {e}")
            raise

        logger.info(f"Loaded config: {config_name} (version: {config.get('version', 'N/A')})")
        return config

    def reload_config(self, config_name: str) -> Dict[str, Any]:
        """
        Force reload of configuration (clears cache)

        Args:
            config_name: Name of config file to reload

        Returns:
            Freshly loaded configuration
        """
        self.load_config.cache_clear()
        logger.info(f"Cache cleared, reloading config: {config_name}")
        return self.load_config(config_name)

    def get_matcher_config(self) -> Dict[str, Any]:
        """Get matcher configuration"""
        return self.load_config("matchers")

    def get_component_kind_matchers(self, kind: str) -> List[str]:
        """
        Get the ordered matcher names configured for a component kind

        Args:
            kind: Component kind value (e.g., "connection", "processor")

        Returns:
            List of matcher names, empty if the kind is not configured
        """
        kinds = self.get_matcher_config().get("component_kinds", {})
        if kind not in kinds:
            logger.warning(f"Component kind not found in matcher config: {kind}")
            return []
        return list(kinds[kind])


# Global singleton instance
_config_service: Optional[ConfigurationService] = None


def get_config_service() -> ConfigurationService:
    """
    Get global ConfigurationService singleton instance

    Returns:
        ConfigurationService instance
    """
    global _config_service
    if _config_service is None:
        _config_service = ConfigurationService()
    return _config_service


def init_config_service(config_dir: Optional[str] = None) -> ConfigurationService:
    """
    Initialize global ConfigurationService with custom config directory

    Args:
        config_dir: Path to configuration directory

    Returns:
        ConfigurationService instance
    """
    global _config_service
    _config_service = ConfigurationService(config_dir)
    logger.info("Global ConfigurationService initialized")
    return _config_service
