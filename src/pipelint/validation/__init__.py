"""Validation layer for pipeline documents.

Rules check the link graph (cycles, unresolved references) and each node's
configuration against its component spec.
"""

from .framework import ValidationFramework, ValidationResult, ValidationRule
from .properties import check_node, required_parameters, storage_key, storage_keys
from .rules import (
    CycleDetectionRule,
    NodePropertiesRule,
    ReferentialIntegrityRule,
    detect_cycles,
    resolve_references,
)

__all__ = [
    "ValidationFramework",
    "ValidationResult",
    "ValidationRule",
    "CycleDetectionRule",
    "ReferentialIntegrityRule",
    "NodePropertiesRule",
    "check_node",
    "detect_cycles",
    "resolve_references",
    "required_parameters",
    "storage_key",
    "storage_keys",
]
