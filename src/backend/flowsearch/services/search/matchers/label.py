"""
Label and Remote Group Matchers
"""

from typing import List

from flowsearch.models.components import Label, RemoteProcessGroup
from flowsearch.models.search import SearchQuery
from .base import AttributeMatcher, add_all_matching, add_if_matching


class LabelMatcher(AttributeMatcher):
    """Text shown on a canvas label"""

    def match(self, component: Label, query: SearchQuery, matches: List[str]) -> None:
        add_if_matching(query.term, component.value, "Value", matches)


class TargetUriMatcher(AttributeMatcher):
    """Target URIs of a remote process group"""

    def match(self, component: RemoteProcessGroup, query: SearchQuery, matches: List[str]) -> None:
        add_all_matching(query.term, component.target_uris, "URLs", matches)
