"""
Search Errors

Error taxonomy for the attribute-matching core. Matchers themselves never
raise for well-formed components; every failure originates either at query
construction, at startup registration, or at dispatch-time kind resolution.
"""


class FlowSearchError(Exception):
    """Base class for all flowsearch errors"""


class InvalidQuery(FlowSearchError, ValueError):
    """Search term is empty or whitespace-only"""


class UnsupportedComponentKind(FlowSearchError, LookupError):
    """Dispatch requested for a component kind with no registered matcher"""

    def __init__(self, kind):
        self.kind = kind
        super().__init__(f"No matcher registered for component kind: {kind!r}")


class MatcherConfigurationError(FlowSearchError):
    """Matcher registry could not be configured at startup"""


class DuplicateMatcherError(MatcherConfigurationError):
    """A matcher is already registered for this component kind"""

    def __init__(self, kind):
        self.kind = kind
        super().__init__(f"Matcher already registered for component kind: {kind}")
