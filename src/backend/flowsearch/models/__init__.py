"""Models package - flow component views and search data structures"""

from .components import (
    ComponentKind,
    Connectable,
    FlowComponent,
    Processor,
    InputPort,
    OutputPort,
    Funnel,
    Label,
    ProcessGroup,
    RemoteProcessGroup,
    Connection
)

from .search import (
    SearchQuery,
    ComponentSearchResult
)

__all__ = [
    "ComponentKind",
    "Connectable",
    "FlowComponent",
    "Processor",
    "InputPort",
    "OutputPort",
    "Funnel",
    "Label",
    "ProcessGroup",
    "RemoteProcessGroup",
    "Connection",
    "SearchQuery",
    "ComponentSearchResult"
]
