"""Validation problem models reported back to the editor."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ProblemType(str, Enum):
    """Kinds of validation problems."""
    MISSING_COMPONENT = "missingComponent"
    CIRCULAR_REFERENCE = "circularReference"
    MISSING_PROPERTY = "missingProperty"


class ProblemInfo(BaseModel):
    """Structured context identifying what a problem refers to."""
    type: ProblemType
    pipeline_id: str | None = Field(alias="pipelineID", default=None)
    node_id: str = Field(alias="nodeID")
    link_id: str | None = Field(alias="linkID", default=None)
    property: str | None = None

    model_config = ConfigDict(populate_by_name=True)


class Problem(BaseModel):
    """A single validation finding."""
    message: str
    path: list[str | int] = Field(default_factory=list)  # Location inside the document
    info: ProblemInfo

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def __str__(self) -> str:
        return f"[{self.info.type.value}] {self.message}"
