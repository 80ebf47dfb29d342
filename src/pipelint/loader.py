"""Tolerant loading of serialized pipeline documents.

A document that cannot be read is not an error: it simply has nothing to
validate. `load` never raises for malformed input; it reports what went wrong
through `LoadOutcome` so callers can map every failure to an empty result.
"""

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import ValidationError

from pipelint.models.pipeline import Pipeline, PipelineDocument

logger = logging.getLogger(__name__)


class LoadOutcome(str, Enum):
    """Result of reading a pipeline document."""
    OK = "ok"
    INVALID_SYNTAX = "invalid_syntax"
    MISSING_PIPELINES = "missing_pipelines"
    INVALID_SHAPE = "invalid_shape"


@dataclass(frozen=True)
class LoadResult:
    """Loaded document, or the reason there is none."""
    outcome: LoadOutcome
    document: PipelineDocument | None = None
    detail: str | None = None

    @property
    def ok(self) -> bool:
        return self.outcome == LoadOutcome.OK


def load(raw: str | bytes | None) -> LoadResult:
    """Deserialize raw text into a PipelineDocument.

    Args:
        raw: Serialized pipeline document (JSON text)

    Returns:
        LoadResult carrying the document when the outcome is OK
    """
    if raw is None:
        return _failed(LoadOutcome.INVALID_SYNTAX, "no input")

    try:
        data = json.loads(raw)
    except (ValueError, TypeError, RecursionError) as e:
        return _failed(LoadOutcome.INVALID_SYNTAX, str(e))

    return load_data(data)


def load_data(data: Any) -> LoadResult:
    """Validate already-deserialized data into a PipelineDocument."""
    if not isinstance(data, dict) or not isinstance(data.get("pipelines"), list):
        return _failed(LoadOutcome.MISSING_PIPELINES, "document has no 'pipelines' list")

    try:
        document = PipelineDocument.model_validate(data)
    except ValidationError as e:
        return _failed(LoadOutcome.INVALID_SHAPE, f"{e.error_count()} shape errors")

    logger.debug(f"Loaded document with {len(document.pipelines)} pipelines, {document.total_nodes} nodes")
    return LoadResult(LoadOutcome.OK, document)


def load_pipeline(data: Any) -> Pipeline | None:
    """Coerce a single pipeline (model or mapping) for node-level checks."""
    if isinstance(data, Pipeline):
        return data
    if not isinstance(data, dict):
        logger.debug(f"Ignoring pipeline of type {type(data).__name__}")
        return None

    try:
        return Pipeline.model_validate(data)
    except ValidationError as e:
        logger.debug(f"Ignoring malformed pipeline: {e.error_count()} shape errors")
        return None


def _failed(outcome: LoadOutcome, detail: str) -> LoadResult:
    logger.debug(f"Nothing to validate ({outcome.value}): {detail}")
    return LoadResult(outcome, None, detail)
