"""Validation rules over the link graph and node configuration.

Each rule validates one aspect of a pipeline document and appends its
problems in document order.
"""

import logging

from ..catalog import ComponentCatalog
from ..config import ValidationConfig
from ..graph.models import EdgeSpec, NodeRef, PipelineGraph
from ..models.pipeline import NodeType
from ..models.problem import Problem, ProblemInfo, ProblemType
from .framework import ValidationResult, ValidationRule
from .properties import check_node

logger = logging.getLogger(__name__)


def cycle_groups(graph: PipelineGraph) -> list[list[Problem]]:
    """Problems per cyclic group of nodes, pipeline by pipeline."""
    return [
        cycle_problems(graph, cycle, pipeline_index)
        for pipeline_index in graph.pipeline_indexes()
        for cycle in graph.detect_cycles(pipeline_index)
    ]


def detect_cycles(graph: PipelineGraph) -> list[Problem]:
    """One circularReference problem per node that sits on a cycle."""
    return [problem for group in cycle_groups(graph) for problem in group]


def cycle_problems(graph: PipelineGraph, cycle: list[EdgeSpec], pipeline_index: int) -> list[Problem]:
    """Problems for the nodes of one cyclic group, given the link closing into each."""
    problems = []

    for closing in cycle:
        node_id = closing.target
        ref = graph.get_node(node_id, pipeline_index)
        upstream = _display_name(graph.get_node(closing.source, pipeline_index), closing.source)
        problems.append(Problem(
            message=f"The connection between nodes '{upstream}' and "
                    f"'{_display_name(ref, node_id)}' is part of a circular reference.",
            path=list(closing.path),
            info=ProblemInfo(
                type=ProblemType.CIRCULAR_REFERENCE,
                pipeline_id=ref.pipeline_id if ref else None,
                node_id=node_id,
                link_id=closing.link_id,
            ),
        ))

    return problems


def resolve_references(graph: PipelineGraph, catalog: ComponentCatalog,
                       resolve_components: bool = True) -> list[Problem]:
    """One missingComponent problem per link whose target cannot be resolved.

    A target resolves when a node with that id exists anywhere in the
    document. With `resolve_components`, an execution node target must also
    have a component spec for its op.
    """
    problems = []

    for edge in graph.edges:
        target = graph.get_node(edge.source, edge.pipeline_index) or graph.get_node(edge.source)
        reason = _unresolved_reason(edge, target, catalog, resolve_components)
        if reason is None:
            continue

        owner = graph.get_node(edge.target, edge.pipeline_index)
        problems.append(Problem(
            message=f"Node '{_display_name(owner, edge.target)}' {reason}.",
            path=list(edge.path),
            info=ProblemInfo(
                type=ProblemType.MISSING_COMPONENT,
                pipeline_id=owner.pipeline_id if owner else None,
                node_id=edge.target,
                link_id=edge.link_id,
            ),
        ))

    return problems


def _unresolved_reason(edge: EdgeSpec, target: NodeRef | None, catalog: ComponentCatalog,
                       resolve_components: bool) -> str | None:
    if target is None:
        return f"is connected to node '{edge.source}' which cannot be found"

    node = target.node
    if resolve_components and node.type == NodeType.EXECUTION_NODE and node.op not in catalog:
        return f"is connected to node '{node.display_name}' whose component '{node.op}' cannot be found"
    return None


def _display_name(ref: NodeRef | None, fallback: str) -> str:
    return ref.node.display_name if ref else fallback


class CycleDetectionRule(ValidationRule):
    """Detect circular references in the link graph."""

    @property
    def name(self) -> str:
        return "cycle_detection"

    def validate(self, graph: PipelineGraph, catalog: ComponentCatalog,
                 config: ValidationConfig, result: ValidationResult) -> None:
        groups = cycle_groups(graph)
        result.increment_counter("cycles_detected", len(groups))
        for problems in groups:
            result.extend(problems)


class ReferentialIntegrityRule(ValidationRule):
    """Validate that every link points at a known node."""

    @property
    def name(self) -> str:
        return "referential_integrity"

    def validate(self, graph: PipelineGraph, catalog: ComponentCatalog,
                 config: ValidationConfig, result: ValidationResult) -> None:
        result.increment_counter("links_checked", len(graph.edges))
        problems = resolve_references(graph, catalog, config.resolve_components)
        if problems:
            logger.debug(f"{len(problems)} of {len(graph.edges)} links unresolved")
        result.extend(problems)


class NodePropertiesRule(ValidationRule):
    """Validate that required parameters of every node are configured."""

    @property
    def name(self) -> str:
        return "node_properties"

    def validate(self, graph: PipelineGraph, catalog: ComponentCatalog,
                 config: ValidationConfig, result: ValidationResult) -> None:
        for ref in graph.property_nodes():
            result.increment_counter("nodes_checked")
            result.extend(check_node(
                ref.node,
                catalog,
                config.runtime_key_prefixes,
                pipeline_id=ref.pipeline_id,
                path=ref.path,
            ))
