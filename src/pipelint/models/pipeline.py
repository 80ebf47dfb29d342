"""Models for pipeline documents: pipelines, nodes, ports and links."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator


class NodeType(str, Enum):
    """Node variants relevant to validation."""
    EXECUTION_NODE = "execution_node"
    SUPER_NODE = "super_node"
    OTHER = "other"


class Link(BaseModel):
    """Directed edge from the upstream node `node_id_ref` into an input port."""
    id: str | None = None
    node_id_ref: str
    port_id_ref: str | None = None


class Port(BaseModel):
    """Input or output port of a node."""
    id: str | None = None
    links: list[Link] = Field(default_factory=list)


class UiData(BaseModel):
    """Editor display metadata."""
    label: str | None = None


class NodeAppData(BaseModel):
    """Application data attached to a node."""
    ui_data: UiData = Field(default_factory=UiData)
    component_parameters: dict[str, Any] | None = None


class SubflowRef(BaseModel):
    """Reference from a super-node to its nested pipeline."""
    pipeline_id_ref: str | None = None


class Node(BaseModel):
    """A single node of a pipeline."""
    id: str
    type: NodeType = NodeType.OTHER
    op: str | None = None
    app_data: NodeAppData = Field(default_factory=NodeAppData)
    inputs: list[Port] = Field(default_factory=list)
    outputs: list[Port] = Field(default_factory=list)
    subflow_ref: SubflowRef | None = None

    @field_validator("type", mode="before")
    @classmethod
    def normalize_type(cls, v):
        """Map unrecognized node types to OTHER."""
        if isinstance(v, NodeType):
            return v
        try:
            return NodeType(v)
        except ValueError:
            return NodeType.OTHER

    @property
    def label(self) -> str | None:
        return self.app_data.ui_data.label

    @property
    def display_name(self) -> str:
        """Label when present, node id otherwise."""
        return self.label or self.id

    def iter_links(self):
        """Yield (input index, link index, link) in document order."""
        for i, port in enumerate(self.inputs):
            for j, link in enumerate(port.links):
                yield i, j, link


class Pipeline(BaseModel):
    """An ordered sequence of nodes."""
    id: str | None = None
    nodes: list[Node] = Field(default_factory=list)


class PipelineDocument(BaseModel):
    """Top-level pipeline document."""
    id: str | None = None
    version: str | None = None
    primary_pipeline: str | None = None
    pipelines: list[Pipeline]

    @property
    def total_nodes(self) -> int:
        return sum(len(pipeline.nodes) for pipeline in self.pipelines)
