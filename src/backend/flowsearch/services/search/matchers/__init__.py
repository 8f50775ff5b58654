"""Attribute matchers, one focused matcher per group of searchable attributes"""

from .base import (
    MATCH_SEPARATOR,
    AttributeMatcher,
    CompositeMatcher,
    add_if_matching,
    add_all_matching
)
from .basic import BasicMatcher
from .connectivity import ConnectivityMatcher
from .connection import (
    ConnectionRelationshipMatcher,
    PrioritiesMatcher,
    ExpirationMatcher,
    BackPressureMatcher
)
from .processor import (
    ProcessorMetadataMatcher,
    PropertyMatcher,
    RelationshipMatcher
)
from .label import LabelMatcher, TargetUriMatcher

__all__ = [
    "MATCH_SEPARATOR",
    "AttributeMatcher",
    "CompositeMatcher",
    "add_if_matching",
    "add_all_matching",
    "BasicMatcher",
    "ConnectivityMatcher",
    "ConnectionRelationshipMatcher",
    "PrioritiesMatcher",
    "ExpirationMatcher",
    "BackPressureMatcher",
    "ProcessorMetadataMatcher",
    "PropertyMatcher",
    "RelationshipMatcher",
    "LabelMatcher",
    "TargetUriMatcher"
]
