"""
Matcher Registry

Maps each component kind to the single attribute matcher responsible for
it and dispatches components to their matcher.

Registration happens once at startup; afterwards the registry is only read,
so dispatch needs no locking and can run on any number of threads.
"""

from typing import Dict, List, Optional, Union

import structlog

from flowsearch.exceptions import DuplicateMatcherError, UnsupportedComponentKind
from flowsearch.models.components import ComponentKind
from flowsearch.models.search import ComponentSearchResult, SearchQuery
from .matchers.base import AttributeMatcher

logger = structlog.get_logger(__name__)


def _resolve_kind(kind: Union[ComponentKind, str]) -> ComponentKind:
    if isinstance(kind, ComponentKind):
        return kind
    try:
        return ComponentKind(kind)
    except ValueError:
        raise UnsupportedComponentKind(kind) from None


class MatcherRegistry:
    """
    Registry of attribute matchers keyed by component kind.

    Usage:
        registry = MatcherRegistry()
        registry.register_matcher(ComponentKind.CONNECTION, ConnectivityMatcher())
        matches = registry.dispatch(connection, SearchQuery(term="csv"))
    """

    def __init__(self):
        """Initialize empty registry"""
        self._matchers: Dict[ComponentKind, AttributeMatcher] = {}

    def register_matcher(self, kind: Union[ComponentKind, str], matcher: AttributeMatcher) -> None:
        """
        Register the matcher for a component kind.

        Args:
            kind: Component kind (enum member or its string value)
            matcher: AttributeMatcher instance

        Raises:
            DuplicateMatcherError: If the kind already has a matcher
            UnsupportedComponentKind: If kind is not a known component kind
        """
        kind = _resolve_kind(kind)

        if kind in self._matchers:
            raise DuplicateMatcherError(kind.value)

        self._matchers[kind] = matcher
        logger.info("registered matcher", component_kind=kind.value, matcher=matcher.get_name())

    def get_matcher(self, kind: Union[ComponentKind, str]) -> AttributeMatcher:
        """
        Get matcher by component kind.

        Raises:
            UnsupportedComponentKind: If no matcher is registered for kind
        """
        resolved = _resolve_kind(kind)
        matcher = self._matchers.get(resolved)
        if matcher is None:
            raise UnsupportedComponentKind(resolved.value)
        return matcher

    def has_matcher(self, kind: Union[ComponentKind, str]) -> bool:
        try:
            return _resolve_kind(kind) in self._matchers
        except UnsupportedComponentKind:
            return False

    def registered_kinds(self) -> List[ComponentKind]:
        """List registered kinds in registration order"""
        return list(self._matchers.keys())

    def dispatch(self, component, query: SearchQuery) -> List[str]:
        """
        Run the matcher registered for the component's kind.

        Args:
            component: Any component view exposing a `kind` tag
            query: Search query

        Returns:
            Match strings in inspection order; empty when nothing matches

        Raises:
            UnsupportedComponentKind: If the component has no kind or no
                matcher is registered for it
        """
        kind = getattr(component, "kind", None)
        if kind is None:
            raise UnsupportedComponentKind(type(component).__name__)

        matcher = self.get_matcher(kind)

        matches: List[str] = []
        matcher.match(component, query, matches)
        return matches

    def search_component(self, component, query: SearchQuery) -> Optional[ComponentSearchResult]:
        """
        Dispatch a component and package its matches.

        Returns:
            ComponentSearchResult, or None when no attribute matched
        """
        matches = self.dispatch(component, query)
        if not matches:
            return None

        return ComponentSearchResult(
            identifier=component.identifier,
            name=component.name,
            kind=_resolve_kind(component.kind),
            parent_group_id=getattr(component, "parent_group_id", None),
            matches=matches
        )

    def get_matcher_info(self) -> Dict[str, str]:
        """
        Get matcher names per registered kind.

        Returns:
            Dict of {kind: matcher_name}
        """
        return {kind.value: matcher.get_name() for kind, matcher in self._matchers.items()}


# Singleton instance (initialized at startup)
_registry_instance: Optional[MatcherRegistry] = None


def init_matcher_registry(registry: MatcherRegistry) -> MatcherRegistry:
    """
    Install the global MatcherRegistry instance.

    Args:
        registry: Fully configured registry

    Returns:
        The installed registry
    """
    global _registry_instance

    if _registry_instance is not None:
        logger.warning("MatcherRegistry already initialized, replacing it")

    _registry_instance = registry
    logger.info("global MatcherRegistry initialized", kinds=[k.value for k in registry.registered_kinds()])
    return _registry_instance


def get_matcher_registry() -> MatcherRegistry:
    """
    Get global MatcherRegistry instance.

    Raises:
        RuntimeError: If init_matcher_registry() has not been called
    """
    if _registry_instance is None:
        raise RuntimeError(
            "MatcherRegistry not initialized. Call init_matcher_registry() first."
        )
    return _registry_instance


def reset_matcher_registry() -> None:
    """Drop the global registry (used by tests)"""
    global _registry_instance
    _registry_instance = None
