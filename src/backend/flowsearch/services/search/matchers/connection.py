"""
Connection Detail Matchers

Queue configuration of a connection: the relationships routed through it,
its prioritizers, FlowFile expiration and back pressure thresholds.
"""

from typing import List

from flowsearch.models.components import Connection
from flowsearch.models.search import SearchQuery
from .base import AttributeMatcher, add_all_matching, add_if_matching

# Expiration value meaning "never expire"
NO_EXPIRATION = "0 sec"


class ConnectionRelationshipMatcher(AttributeMatcher):
    """Relationships selected for routing through the connection"""

    def match(self, component: Connection, query: SearchQuery, matches: List[str]) -> None:
        add_all_matching(query.term, component.selected_relationships, "Relationship", matches)


class PrioritiesMatcher(AttributeMatcher):
    """Prioritizers applied to the connection's queue, in priority order"""

    def match(self, component: Connection, query: SearchQuery, matches: List[str]) -> None:
        add_all_matching(query.term, component.prioritizers, "Prioritizer", matches)


class ExpirationMatcher(AttributeMatcher):
    """FlowFile expiration, only when one is actually configured"""

    def match(self, component: Connection, query: SearchQuery, matches: List[str]) -> None:
        expiration = component.flow_file_expiration
        if not expiration or expiration.strip() == NO_EXPIRATION:
            return
        add_if_matching(query.term, expiration, "FlowFile expiration", matches)


class BackPressureMatcher(AttributeMatcher):
    """Back pressure data size and object count thresholds"""

    def match(self, component: Connection, query: SearchQuery, matches: List[str]) -> None:
        term = query.term

        add_if_matching(term, component.back_pressure_data_size_threshold, "Back pressure data size", matches)

        count = component.back_pressure_object_threshold
        add_if_matching(term, None if count is None else str(count), "Back pressure count", matches)
