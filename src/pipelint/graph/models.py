"""Link graph over the nodes of a pipeline document."""

from collections.abc import Iterator
from dataclasses import dataclass, field

from pipelint.models.pipeline import Node, NodeType, Pipeline, PipelineDocument


@dataclass(frozen=True)
class NodeRef:
    """A node together with its position in the document."""
    node: Node
    pipeline_index: int
    node_index: int
    pipeline_id: str | None = None

    @property
    def path(self) -> list[str | int]:
        """Document path of the node."""
        return ["pipelines", self.pipeline_index, "nodes", self.node_index]


@dataclass(frozen=True)
class EdgeSpec:
    """Directed edge `source -> target` created by one link on `target`."""
    source: str  # node_id_ref
    target: str  # Node owning the link
    link_id: str | None
    pipeline_index: int
    path: tuple[str | int, ...] = ()


@dataclass
class PipelineGraph:
    """Nodes and links of a document, in document order."""
    nodes: list[NodeRef] = field(default_factory=list)
    edges: list[EdgeSpec] = field(default_factory=list)
    _by_pipeline: dict[tuple[int, str], NodeRef] = field(default_factory=dict, repr=False)
    _by_id: dict[str, NodeRef] = field(default_factory=dict, repr=False)

    @classmethod
    def from_document(cls, document: PipelineDocument) -> "PipelineGraph":
        graph = cls()
        for p, pipeline in enumerate(document.pipelines):
            graph._add_pipeline(pipeline, p)
        return graph

    @classmethod
    def from_pipeline(cls, pipeline: Pipeline) -> "PipelineGraph":
        return cls()._add_pipeline(pipeline, 0)

    def _add_pipeline(self, pipeline: Pipeline, pipeline_index: int) -> "PipelineGraph":
        for n, node in enumerate(pipeline.nodes):
            ref = NodeRef(node, pipeline_index, n, pipeline.id)
            self.nodes.append(ref)
            self._by_pipeline.setdefault((pipeline_index, node.id), ref)
            self._by_id.setdefault(node.id, ref)
            for i, j, link in node.iter_links():
                self.edges.append(EdgeSpec(
                    source=link.node_id_ref,
                    target=node.id,
                    link_id=link.id,
                    pipeline_index=pipeline_index,
                    path=tuple(ref.path + ["inputs", i, "links", j]),
                ))
        return self

    @property
    def node_ids(self) -> set[str]:
        """Ids of every node in the document, super-nodes included."""
        return set(self._by_id)

    def get_node(self, node_id: str, pipeline_index: int | None = None) -> NodeRef | None:
        """Find a node by id, optionally within one pipeline."""
        if pipeline_index is None:
            return self._by_id.get(node_id)
        return self._by_pipeline.get((pipeline_index, node_id))

    def property_nodes(self) -> Iterator[NodeRef]:
        """Nodes subject to property validation (super-nodes skipped)."""
        for ref in self.nodes:
            if ref.node.type != NodeType.SUPER_NODE:
                yield ref

    def pipeline_indexes(self) -> list[int]:
        return sorted({ref.pipeline_index for ref in self.nodes})

    def adjacency(self, pipeline_index: int) -> dict[str, list[EdgeSpec]]:
        """Outgoing edges per node id within one pipeline, in document order."""
        graph: dict[str, list[EdgeSpec]] = {}
        for edge in self.edges:
            if edge.pipeline_index != pipeline_index:
                continue
            if edge.source not in graph:
                graph[edge.source] = []
            graph[edge.source].append(edge)
        return graph

    def detect_cycles(self, pipeline_index: int) -> list[list[EdgeSpec]]:
        """Detect cycles among the nodes of one pipeline.

        Nodes are grouped into strongly connected components. Every component
        with more than one node, or with a self-link, is returned as one edge
        per member: the link into that member which closes a cycle. Members
        are listed in depth-first order from the first one the search reached.
        """
        graph = self.adjacency(pipeline_index)
        order = [ref.node.id for ref in self.nodes if ref.pipeline_index == pipeline_index]

        cycles: list[list[EdgeSpec]] = []
        for root, members in self._strongly_connected(graph, order):
            self_link = any(edge.target == root for edge in graph.get(root, []))
            if len(members) > 1 or self_link:
                cycles.append(self._closing_edges(graph, root, members))
        return cycles

    @staticmethod
    def _strongly_connected(graph: dict[str, list[EdgeSpec]],
                            order: list[str]) -> list[tuple[str, set[str]]]:
        """Tarjan's algorithm without recursion, components ordered by root discovery."""
        index: dict[str, int] = {}
        lowlink: dict[str, int] = {}
        stack: list[str] = []
        on_stack: set[str] = set()
        components: list[tuple[str, set[str]]] = []

        for start in order:
            if start in index:
                continue

            index[start] = lowlink[start] = len(index)
            stack.append(start)
            on_stack.add(start)
            work: list[tuple[str, int]] = [(start, 0)]

            while work:
                node, i = work[-1]
                edges = graph.get(node, [])
                if i < len(edges):
                    work[-1] = (node, i + 1)
                    neighbor = edges[i].target
                    if neighbor not in index:
                        index[neighbor] = lowlink[neighbor] = len(index)
                        stack.append(neighbor)
                        on_stack.add(neighbor)
                        work.append((neighbor, 0))
                    elif neighbor in on_stack:
                        lowlink[node] = min(lowlink[node], index[neighbor])
                    continue

                work.pop()
                if work:
                    parent = work[-1][0]
                    lowlink[parent] = min(lowlink[parent], lowlink[node])

                if lowlink[node] == index[node]:
                    members: set[str] = set()
                    while True:
                        member = stack.pop()
                        on_stack.discard(member)
                        members.add(member)
                        if member == node:
                            break
                    components.append((node, members))

        components.sort(key=lambda component: index[component[0]])
        return components

    @staticmethod
    def _closing_edges(graph: dict[str, list[EdgeSpec]], root: str,
                       members: set[str]) -> list[EdgeSpec]:
        """Link into each member of a component, in depth-first order from root.

        A member is closed by the edge that first reached it; the root by the
        first edge found leading back into it.
        """
        discovered = [root]
        closing: dict[str, EdgeSpec] = {}
        work: list[tuple[str, int]] = [(root, 0)]

        while work:
            node, i = work[-1]
            edges = graph.get(node, [])
            if i >= len(edges):
                work.pop()
                continue

            work[-1] = (node, i + 1)
            edge = edges[i]
            neighbor = edge.target
            if neighbor not in members:
                continue
            if neighbor == root:
                closing.setdefault(root, edge)
            elif neighbor not in closing:
                closing[neighbor] = edge
                discovered.append(neighbor)
                work.append((neighbor, 0))

        return [closing[node_id] for node_id in discovered]
