"""
Matcher Factory

Builds the matcher registry from matchers.json so that supporting a new
component kind, or searching another attribute group of an existing one,
is a configuration change rather than a code change.

Configuration-Driven Design:
- "component_kinds" maps each kind to an ordered list of matcher names
- Names resolve through MATCHER_CLASSES (name -> module.ClassName)
- Several names for one kind are chained into a CompositeMatcher

Unlike a search strategy, a missing matcher hides a whole class of
components from results, so every problem here raises at startup.

Usage:
    from flowsearch.services.search.matcher_factory import MatcherFactory

    factory = MatcherFactory(matcher_config)
    registry = factory.create_registry()
"""

import logging
from importlib import import_module
from typing import Any, Dict, List

from flowsearch.exceptions import MatcherConfigurationError
from flowsearch.models.components import ComponentKind
from .matchers.base import AttributeMatcher, CompositeMatcher
from .registry import MatcherRegistry

logger = logging.getLogger(__name__)

_MATCHERS_MODULE = "flowsearch.services.search.matchers"


class MatcherFactory:
    """
    Factory for creating attribute matchers from configuration.
    """

    # Matcher class mapping (matcher_name -> module.ClassName)
    MATCHER_CLASSES = {
        "basic": (f"{_MATCHERS_MODULE}.basic", "BasicMatcher"),
        "connectivity": (f"{_MATCHERS_MODULE}.connectivity", "ConnectivityMatcher"),
        "connection_relationship": (f"{_MATCHERS_MODULE}.connection", "ConnectionRelationshipMatcher"),
        "priorities": (f"{_MATCHERS_MODULE}.connection", "PrioritiesMatcher"),
        "expiration": (f"{_MATCHERS_MODULE}.connection", "ExpirationMatcher"),
        "back_pressure": (f"{_MATCHERS_MODULE}.connection", "BackPressureMatcher"),
        "processor_metadata": (f"{_MATCHERS_MODULE}.processor", "ProcessorMetadataMatcher"),
        "property": (f"{_MATCHERS_MODULE}.processor", "PropertyMatcher"),
        "relationship": (f"{_MATCHERS_MODULE}.processor", "RelationshipMatcher"),
        "label": (f"{_MATCHERS_MODULE}.label", "LabelMatcher"),
        "target_uri": (f"{_MATCHERS_MODULE}.label", "TargetUriMatcher"),
    }

    def __init__(self, matcher_config: Dict[str, Any]):
        """
        Initialize matcher factory.

        Args:
            matcher_config: Full matchers.json dict
        """
        self.matcher_config = matcher_config
        self.kinds_config: Dict[str, List[str]] = matcher_config.get("component_kinds", {})

        logger.info(f"MatcherFactory initialized with {len(self.kinds_config)} component kinds")

    def create_registry(self) -> MatcherRegistry:
        """
        Create a registry holding one matcher per configured kind.

        Returns:
            Populated MatcherRegistry

        Raises:
            MatcherConfigurationError: On unknown kinds, unknown matcher names
                or a kind with no matchers listed
        """
        registry = MatcherRegistry()

        for kind_name, matcher_names in self.kinds_config.items():
            try:
                kind = ComponentKind(kind_name)
            except ValueError:
                raise MatcherConfigurationError(f"Unknown component kind in config: '{kind_name}'") from None

            registry.register_matcher(kind, self.create_kind_matcher(kind, matcher_names))

        logger.info(f"MatcherFactory registered {len(registry.registered_kinds())} component kinds")
        return registry

    def create_kind_matcher(self, kind: ComponentKind, matcher_names: List[str]) -> AttributeMatcher:
        """
        Create the matcher for one kind, chaining several in listed order.

        Args:
            kind: Component kind being configured
            matcher_names: Ordered matcher names from config
        """
        if not matcher_names:
            raise MatcherConfigurationError(f"No matchers configured for component kind '{kind.value}'")

        matchers = [self.create_matcher(name) for name in matcher_names]
        logger.debug(f"  {kind.value}: {matcher_names}")

        if len(matchers) == 1:
            return matchers[0]
        return CompositeMatcher(matchers)

    def create_matcher(self, matcher_name: str) -> AttributeMatcher:
        """
        Create a single matcher instance.

        Args:
            matcher_name: Matcher name (e.g., "basic", "connectivity")

        Raises:
            MatcherConfigurationError: If the name is unknown or cannot be imported
        """
        if matcher_name not in self.MATCHER_CLASSES:
            raise MatcherConfigurationError(f"Unknown matcher '{matcher_name}'")

        module_path, class_name = self.MATCHER_CLASSES[matcher_name]

        try:
            module = import_module(module_path)
            matcher_class = getattr(module, class_name)
        except (ImportError, AttributeError) as e:
            raise MatcherConfigurationError(
                f"Failed to import {class_name} from {module_path}: {e}"
            ) from e

        return matcher_class()
