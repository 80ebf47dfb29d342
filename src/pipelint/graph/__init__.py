"""Link graph over pipeline nodes, used for reference and cycle checks."""

from .models import EdgeSpec, NodeRef, PipelineGraph

__all__ = [
    "PipelineGraph",
    "NodeRef",
    "EdgeSpec",
]
