"""
Search Data Models

Query value passed to every matcher and the per-component result record
produced by the dispatcher.
"""

from typing import Any, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from flowsearch.exceptions import InvalidQuery
from flowsearch.models.components import ComponentKind


def _require_term(term: Any) -> None:
    if not isinstance(term, str) or not term.strip():
        raise InvalidQuery("Search term must not be empty")


class SearchQuery(BaseModel):
    """
    Immutable search request.

    The term must already be trimmed by the caller; a blank term is rejected
    rather than treated as "match everything". Filters are carried along for
    the orchestrator as (name, value) pairs and are never interpreted by the
    matchers.

    Every construction route (constructor, model_validate, model_validate_json,
    model_copy with updates) raises InvalidQuery for a blank term.
    """
    model_config = ConfigDict(frozen=True)

    term: str
    filters: Tuple[Tuple[str, str], ...] = ()

    def __init__(self, **data):
        # Checked ahead of pydantic validation so callers see InvalidQuery, not ValidationError
        _require_term(data.get("term"))
        super().__init__(**data)

    @field_validator("filters", mode="before")
    @classmethod
    def _freeze_filters(cls, value):
        if isinstance(value, Mapping):
            return tuple(value.items())
        return value

    @classmethod
    def of(cls, term: str, **filters: str) -> "SearchQuery":
        """Build a query, raising InvalidQuery for a blank term"""
        return cls(term=term, filters=filters)

    @classmethod
    def model_validate(cls, obj: Any, **kwargs) -> "SearchQuery":
        query = super().model_validate(obj, **kwargs)
        _require_term(query.term)
        return query

    @classmethod
    def model_validate_json(cls, json_data, **kwargs) -> "SearchQuery":
        query = super().model_validate_json(json_data, **kwargs)
        _require_term(query.term)
        return query

    def model_copy(self, *, update: Optional[Mapping[str, Any]] = None, deep: bool = False) -> "SearchQuery":
        if not update:
            return super().model_copy(deep=deep)
        # Updates go back through the constructor so they are validated too
        return type(self)(**{**dict(self), **update})

    def get_filter(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Value of the first filter with this name"""
        for filter_name, value in self.filters:
            if filter_name == name:
                return value
        return default


class ComponentSearchResult(BaseModel):
    """Matches found for a single component"""
    identifier: str
    name: str
    kind: ComponentKind
    parent_group_id: Optional[str] = None
    matches: List[str] = Field(default_factory=list)
