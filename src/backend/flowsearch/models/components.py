"""
Flow Component Models

Read-only views of the dataflow graph components that the matchers inspect.
The matching core never owns or mutates these; every model is frozen.

Any external component model can take part in a search as long as it exposes
the Connectable accessor surface and a `kind` tag.
"""

from enum import Enum
from typing import ClassVar, Dict, List, Optional, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field


class ComponentKind(str, Enum):
    """Kinds of flow-graph components that can be searched"""
    PROCESSOR = "processor"
    INPUT_PORT = "input_port"
    OUTPUT_PORT = "output_port"
    FUNNEL = "funnel"
    LABEL = "label"
    PROCESS_GROUP = "process_group"
    REMOTE_PROCESS_GROUP = "remote_process_group"
    CONNECTION = "connection"


@runtime_checkable
class Connectable(Protocol):
    """
    Minimal accessor surface of a component referenced by another component
    (e.g. the source or destination of a connection).
    """

    @property
    def identifier(self) -> str:
        ...

    @property
    def name(self) -> str:
        ...

    @property
    def comments(self) -> Optional[str]:
        ...


class FlowComponent(BaseModel):
    """Common attributes shared by every flow component"""
    model_config = ConfigDict(frozen=True)

    kind: ClassVar[ComponentKind]

    identifier: str
    name: str = ""
    comments: Optional[str] = None
    versioned_component_id: Optional[str] = None  # Set once the component is under version control
    parent_group_id: Optional[str] = None


class Processor(FlowComponent):
    """Processing node"""
    kind: ClassVar[ComponentKind] = ComponentKind.PROCESSOR

    processor_type: str
    bundle: Optional[str] = None
    properties: Dict[str, Optional[str]] = Field(default_factory=dict)
    relationships: List[str] = Field(default_factory=list)


class InputPort(FlowComponent):
    kind: ClassVar[ComponentKind] = ComponentKind.INPUT_PORT


class OutputPort(FlowComponent):
    kind: ClassVar[ComponentKind] = ComponentKind.OUTPUT_PORT


class Funnel(FlowComponent):
    kind: ClassVar[ComponentKind] = ComponentKind.FUNNEL


class Label(FlowComponent):
    """Free-text annotation placed on the canvas"""
    kind: ClassVar[ComponentKind] = ComponentKind.LABEL

    value: Optional[str] = None


class ProcessGroup(FlowComponent):
    kind: ClassVar[ComponentKind] = ComponentKind.PROCESS_GROUP


class RemoteProcessGroup(FlowComponent):
    """Reference to a group running on a remote instance"""
    kind: ClassVar[ComponentKind] = ComponentKind.REMOTE_PROCESS_GROUP

    target_uris: List[str] = Field(default_factory=list)


class Connection(FlowComponent):
    """
    Edge linking two components.

    Source and destination are kept as the instances supplied by the caller:
    any FlowComponent, or any external view satisfying Connectable.
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: ClassVar[ComponentKind] = ComponentKind.CONNECTION

    source: Connectable
    destination: Connectable
    selected_relationships: List[str] = Field(default_factory=list)
    prioritizers: List[str] = Field(default_factory=list)
    flow_file_expiration: Optional[str] = None  # e.g. "30 sec"; "0 sec" means never
    back_pressure_object_threshold: Optional[int] = None
    back_pressure_data_size_threshold: Optional[str] = None  # e.g. "1 GB"
