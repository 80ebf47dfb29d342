"""Core validation framework for pipeline documents.

Validation is split into pluggable rules that each add problems and counters
to a shared result. Rules are pure functions of the graph, the component
catalog and the configuration.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from ..catalog import ComponentCatalog
from ..config import PipelintConfig, ValidationConfig
from ..graph.models import PipelineGraph
from ..models.problem import Problem, ProblemType

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """Problems and counters collected during one validation run."""
    problems: list[Problem] = field(default_factory=list)
    counters: dict[str, int] = field(default_factory=dict)

    @property
    def valid(self) -> bool:
        return not self.problems

    @property
    def exit_code(self) -> int:
        """Exit code for CI: 0 = no problems, 1 = problems found."""
        return 0 if self.valid else 1

    def add_problem(self, problem: Problem) -> None:
        self.problems.append(problem)

    def extend(self, problems: list[Problem]) -> None:
        self.problems.extend(problems)

    def increment_counter(self, name: str, value: int = 1) -> None:
        """Increment a counter."""
        self.counters[name] = self.counters.get(name, 0) + value

    def problems_of_type(self, problem_type: ProblemType) -> list[Problem]:
        return [p for p in self.problems if p.info.type == problem_type]

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            "valid": self.valid,
            "exit_code": self.exit_code,
            "counters": self.counters,
            "problems": [problem.to_dict() for problem in self.problems],
        }


class ValidationRule(ABC):
    """Base class for validation rules."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Rule name for identification."""
        pass

    @abstractmethod
    def validate(self, graph: PipelineGraph, catalog: ComponentCatalog,
                 config: ValidationConfig, result: ValidationResult) -> None:
        """Execute validation rule.

        Args:
            graph: Nodes and links of the document
            catalog: Component specs by op
            config: Validation settings
            result: Validation result to update with problems/counters
        """
        pass


class ValidationFramework:
    """Runs validation rules in order over one document."""

    def __init__(self, config: PipelintConfig | None = None):
        self.config = config or PipelintConfig()
        self.rules: list[ValidationRule] = []

    def add_rule(self, rule: ValidationRule) -> None:
        """Add a validation rule."""
        self.rules.append(rule)

    def validate(self, graph: PipelineGraph, catalog: ComponentCatalog) -> ValidationResult:
        """Run all rules over the graph.

        Args:
            graph: Nodes and links of the document
            catalog: Component specs by op

        Returns:
            ValidationResult with problems in rule order
        """
        result = ValidationResult()

        logger.debug(f"Running {len(self.rules)} validation rules over {len(graph.nodes)} nodes")

        for rule in self.rules:
            logger.debug(f"Executing rule: {rule.name}")
            rule.validate(graph, catalog, self.config.validation, result)

        logger.debug(f"Validation found {len(result.problems)} problems")
        return result

    def create_default_rules(self) -> None:
        """Create default rules: cycles, then references, then properties."""
        from .rules import CycleDetectionRule, NodePropertiesRule, ReferentialIntegrityRule

        validation = self.config.validation
        if validation.check_cycles:
            self.add_rule(CycleDetectionRule())
        if validation.check_references:
            self.add_rule(ReferentialIntegrityRule())
        if validation.check_properties:
            self.add_rule(NodePropertiesRule())
