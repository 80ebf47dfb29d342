"""Pydantic data models for pipeline documents, component specs and problems."""

from pipelint.models.component import (
    ComponentSpec,
    GroupInfo,
    ParameterData,
    ParameterDeclaration,
    ParameterInfo,
    SpecAppData,
    SpecProperties,
    UiHints,
)
from pipelint.models.pipeline import (
    Link,
    Node,
    NodeAppData,
    NodeType,
    Pipeline,
    PipelineDocument,
    Port,
    SubflowRef,
    UiData,
)
from pipelint.models.problem import Problem, ProblemInfo, ProblemType

__all__ = [
    "ComponentSpec",
    "GroupInfo",
    "ParameterData",
    "ParameterDeclaration",
    "ParameterInfo",
    "SpecAppData",
    "SpecProperties",
    "UiHints",
    "Link",
    "Node",
    "NodeAppData",
    "NodeType",
    "Pipeline",
    "PipelineDocument",
    "Port",
    "SubflowRef",
    "UiData",
    "Problem",
    "ProblemInfo",
    "ProblemType",
]
