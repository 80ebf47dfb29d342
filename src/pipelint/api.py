"""Library entry points used by the pipeline editor.

The entry points are pure: they never raise for malformed input and keep no
state between calls.
"""

from typing import Any

from pipelint.catalog import ComponentCatalog
from pipelint.config import PipelintConfig
from pipelint.graph.models import PipelineGraph
from pipelint.loader import LoadResult, load, load_pipeline
from pipelint.models.problem import Problem
from pipelint.validation.framework import ValidationFramework, ValidationResult
from pipelint.validation.properties import check_node


def validate_document(raw: str | bytes | None, specs: Any = None,
                      config: PipelintConfig | None = None) -> ValidationResult:
    """Validate a serialized pipeline document, returning problems and counters."""
    return validate_loaded(load(raw), specs, config)


def validate_loaded(loaded: LoadResult, specs: Any = None,
                    config: PipelintConfig | None = None) -> ValidationResult:
    """Validate a document already run through the loader."""
    if not loaded.ok:
        return ValidationResult()

    framework = ValidationFramework(config)
    framework.create_default_rules()
    return framework.validate(
        PipelineGraph.from_document(loaded.document),
        ComponentCatalog.from_specs(specs),
    )


def validate(raw: str | bytes | None, specs: Any = None,
             config: PipelintConfig | None = None) -> list[Problem]:
    """Validate a serialized pipeline document.

    Args:
        raw: Pipeline document as JSON text
        specs: Component specs (models, raw mappings, or a catalog)
        config: Optional settings; defaults when omitted

    Returns:
        Circular reference problems, then missing component problems, then
        missing property problems. Empty for unreadable documents.
    """
    return validate_document(raw, specs, config).problems


def get_node_problems(pipeline: Any, specs: Any = None,
                      config: PipelintConfig | None = None) -> list[Problem]:
    """Property problems for the nodes of a single, already-parsed pipeline."""
    parsed = load_pipeline(pipeline)
    if parsed is None:
        return []

    config = config or PipelintConfig()
    catalog = ComponentCatalog.from_specs(specs)
    prefixes = config.validation.runtime_key_prefixes

    problems = []
    for ref in PipelineGraph.from_pipeline(parsed).property_nodes():
        problems.extend(check_node(
            ref.node,
            catalog,
            prefixes,
            pipeline_id=parsed.id,
            path=["nodes", ref.node_index],
        ))
    return problems
