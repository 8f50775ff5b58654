"""
Processor Matchers

Searchable attributes specific to processing nodes: type and bundle,
configured properties and the relationships the processor exposes.
"""

from typing import List

from flowsearch.models.components import Processor
from flowsearch.models.search import SearchQuery
from .base import MATCH_SEPARATOR, AttributeMatcher, add_all_matching, add_if_matching


class ProcessorMetadataMatcher(AttributeMatcher):
    """Processor type and the bundle that provides it"""

    def match(self, component: Processor, query: SearchQuery, matches: List[str]) -> None:
        term = query.term

        add_if_matching(term, component.processor_type, "Type", matches)
        add_if_matching(term, component.bundle, "Bundle", matches)


class PropertyMatcher(AttributeMatcher):
    """
    Property names and values.

    A matching value is reported together with its property name
    ("Property value: Directory - /data/in") since the bare value is
    rarely meaningful on its own.
    """

    def match(self, component: Processor, query: SearchQuery, matches: List[str]) -> None:
        term = query.term

        for name, value in component.properties.items():
            add_if_matching(term, name, "Property name", matches)

            if value is not None and term.casefold() in value.casefold():
                matches.append(f"Property value{MATCH_SEPARATOR}{name} - {value}")


class RelationshipMatcher(AttributeMatcher):
    """Relationships the processor can route to"""

    def match(self, component: Processor, query: SearchQuery, matches: List[str]) -> None:
        add_all_matching(query.term, component.relationships, "Relationship", matches)
