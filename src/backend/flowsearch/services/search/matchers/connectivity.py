"""
Connectivity Matcher

Matches a connection against the identity attributes of the two components
it links. Only the source and destination themselves are inspected, never
their own relations, so the cost stays bounded by the number of ends.
"""

from typing import List

from flowsearch.models.components import Connection
from flowsearch.models.search import SearchQuery
from .base import AttributeMatcher, add_if_matching


class ConnectivityMatcher(AttributeMatcher):
    """Source and destination id, name and comments of a connection"""

    def match(self, component: Connection, query: SearchQuery, matches: List[str]) -> None:
        term = query.term

        source = component.source
        add_if_matching(term, source.identifier, "Source id", matches)
        add_if_matching(term, source.name, "Source name", matches)
        add_if_matching(term, source.comments, "Source comments", matches)

        destination = component.destination
        add_if_matching(term, destination.identifier, "Destination id", matches)
        add_if_matching(term, destination.name, "Destination name", matches)
        add_if_matching(term, destination.comments, "Destination comments", matches)
