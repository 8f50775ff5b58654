"""Search services - attribute matchers, their registry and factory"""

from .registry import (
    MatcherRegistry,
    init_matcher_registry,
    get_matcher_registry,
    reset_matcher_registry
)
from .matcher_factory import MatcherFactory

__all__ = [
    "MatcherRegistry",
    "init_matcher_registry",
    "get_matcher_registry",
    "reset_matcher_registry",
    "MatcherFactory"
]
