"""
Base Attribute Matcher Interface

Defines the contract shared by every attribute matcher and the substring
match primitive they all report through.

A matcher knows which attributes of one component kind (and of the
components it directly references) are searchable. It inspects them in a
fixed, declared order and appends "<Label>: <value>" strings to the
accumulator it is given. Matchers are stateless and never mutate the
component or the query, so a single instance is safely shared across
threads.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Sequence

from flowsearch.models.search import SearchQuery

MATCH_SEPARATOR = ": "


def add_if_matching(
    term: str,
    value: Optional[str],
    label: str,
    matches: List[str]
) -> None:
    """
    Append "<label>: <value>" when value contains term, ignoring case.

    Args:
        term: Search term (already validated as non-blank)
        value: Candidate attribute value; None is a normal optional attribute
        label: Human-readable attribute label
        matches: Accumulator to append to
    """
    if value is None:
        return

    if term.casefold() in value.casefold():
        matches.append(f"{label}{MATCH_SEPARATOR}{value}")


def add_all_matching(
    term: str,
    values: Iterable[Optional[str]],
    label: str,
    matches: List[str]
) -> None:
    """Apply add_if_matching to every value, keeping their order"""
    for value in values:
        add_if_matching(term, value, label, matches)


class AttributeMatcher(ABC):
    """
    Abstract base class for attribute matchers.

    Implementations must be deterministic: the same component and query
    always produce the same match strings in the same order.
    """

    @abstractmethod
    def match(self, component, query: SearchQuery, matches: List[str]) -> None:
        """
        Append a labeled entry for every searchable attribute containing the term.

        Args:
            component: Component of the kind this matcher is registered for
            query: Search query
            matches: Accumulator owned by the caller
        """
        pass

    def get_name(self) -> str:
        """
        Get the name of this matcher.

        Returns:
            Matcher name (e.g., "connectivity", "basic")
        """
        return self.__class__.__name__.replace("Matcher", "").lower()


class CompositeMatcher(AttributeMatcher):
    """
    Runs several attribute matchers in order against one accumulator.

    Lets the registry keep exactly one matcher per component kind while a
    kind's searchable attributes stay split across focused matchers.
    """

    def __init__(self, matchers: Sequence[AttributeMatcher]):
        self._matchers = tuple(matchers)

    @property
    def matchers(self) -> Sequence[AttributeMatcher]:
        return self._matchers

    def match(self, component, query: SearchQuery, matches: List[str]) -> None:
        for matcher in self._matchers:
            matcher.match(component, query, matches)

    def get_name(self) -> str:
        return "+".join(m.get_name() for m in self._matchers)
