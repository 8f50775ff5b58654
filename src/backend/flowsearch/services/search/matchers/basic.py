"""
Basic Matcher

Identity attributes every component kind carries.
"""

from typing import List

from flowsearch.models.search import SearchQuery
from .base import AttributeMatcher, add_if_matching


class BasicMatcher(AttributeMatcher):
    """Id, version control id, name and comments"""

    def match(self, component, query: SearchQuery, matches: List[str]) -> None:
        term = query.term

        add_if_matching(term, component.identifier, "Id", matches)
        add_if_matching(term, getattr(component, "versioned_component_id", None), "Version Control ID", matches)
        add_if_matching(term, component.name, "Name", matches)
        add_if_matching(term, component.comments, "Comments", matches)
