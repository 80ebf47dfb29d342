"""pipelint - validation engine for visual data/ML pipeline documents.

pipelint checks a serialized pipeline document against a catalog of component
specifications and reports circular references, unresolved links and
required parameters left unset.
"""

__version__ = "0.1.0"
__description__ = "Validation engine for visual data/ML pipeline documents"

from pipelint.api import get_node_problems, validate, validate_document, validate_loaded
from pipelint.catalog import ComponentCatalog
from pipelint.config import PipelintConfig
from pipelint.loader import LoadOutcome, LoadResult, load
from pipelint.models import ComponentSpec, Pipeline, PipelineDocument, Problem, ProblemType

__all__ = [
    "__version__",
    "__description__",
    "validate",
    "validate_document",
    "validate_loaded",
    "get_node_problems",
    "load",
    "LoadOutcome",
    "LoadResult",
    "ComponentCatalog",
    "ComponentSpec",
    "Pipeline",
    "PipelineDocument",
    "PipelintConfig",
    "Problem",
    "ProblemType",
]
