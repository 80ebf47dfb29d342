"""Required-parameter checks for a single node.

What a component requires and what a node provides are computed separately:
`required_parameters` and `storage_keys` look only at the spec, `is_missing`
only at the configured value.
"""

import logging
from collections.abc import Sequence
from typing import Any

from pipelint.catalog import ComponentCatalog
from pipelint.models.component import ComponentSpec
from pipelint.models.pipeline import Node, NodeType
from pipelint.models.problem import Problem, ProblemInfo, ProblemType

logger = logging.getLogger(__name__)

DEFAULT_RUNTIME_KEY_PREFIXES = ("elyra_",)


def storage_key(parameter_id: str, spec: ComponentSpec,
                prefixes: Sequence[str] = DEFAULT_RUNTIME_KEY_PREFIXES) -> str:
    """Key under component_parameters where a parameter's value is stored.

    An explicit `data.storage_key` on the parameter hint wins. Otherwise a
    runtime prefix is stripped (`elyra_filename` is stored as `filename`).
    """
    info = spec.get_parameter_info(parameter_id)
    if info is not None and info.data.storage_key:
        return info.data.storage_key

    for prefix in prefixes:
        if parameter_id.startswith(prefix) and len(parameter_id) > len(prefix):
            return parameter_id[len(prefix):]
    return parameter_id


def storage_keys(spec: ComponentSpec,
                 prefixes: Sequence[str] = DEFAULT_RUNTIME_KEY_PREFIXES) -> dict[str, str]:
    """Declared mapping of every known parameter id to its storage key."""
    properties = spec.properties
    parameter_ids = [info.parameter_ref for info in properties.uihints.parameter_info]
    parameter_ids += list(properties.current_parameters)
    parameter_ids += [declaration.id for declaration in properties.parameters]

    return {pid: storage_key(pid, spec, prefixes) for pid in dict.fromkeys(parameter_ids)}


def has_default(value: Any) -> bool:
    """Non-empty strings and numbers are defaults; booleans, collections and null are not."""
    if isinstance(value, bool):
        return False
    if isinstance(value, str):
        return value != ""
    return isinstance(value, (int, float))


def required_parameters(spec: ComponentSpec,
                        prefixes: Sequence[str] = DEFAULT_RUNTIME_KEY_PREFIXES) -> list[str]:
    """Parameter ids a node of this component must configure.

    Union of parameters flagged `data.required` in the UI hints and
    parameters declared with a non-empty default in `current_parameters`,
    de-duplicated by storage key. UI hints come first, in declaration order.
    """
    properties = spec.properties
    candidates = [info.parameter_ref for info in properties.uihints.parameter_info if info.data.required]
    candidates += [pid for pid, value in properties.current_parameters.items() if has_default(value)]

    required: list[str] = []
    seen_keys: set[str] = set()
    for pid in candidates:
        key = storage_key(pid, spec, prefixes)
        if key in seen_keys:
            continue
        seen_keys.add(key)
        required.append(pid)
    return required


def is_missing(parameters: dict[str, Any] | None, key: str) -> bool:
    """A value is missing when absent, null or the empty string."""
    if not parameters or key not in parameters:
        return True
    value = parameters[key]
    return value is None or value == ""


def check_node(node: Node, catalog: ComponentCatalog | Any,
               prefixes: Sequence[str] = DEFAULT_RUNTIME_KEY_PREFIXES,
               pipeline_id: str | None = None,
               path: Sequence[str | int] = ()) -> list[Problem]:
    """Report every required parameter the node leaves unset.

    Args:
        node: Node to check
        catalog: Component specs (catalog, models or raw mappings)
        prefixes: Runtime key prefixes stripped when resolving storage keys
        pipeline_id: Owning pipeline id, copied into problems
        path: Document path of the node

    Returns:
        One missingProperty problem per missing parameter
    """
    if node.type == NodeType.SUPER_NODE:
        return []

    spec = ComponentCatalog.from_specs(catalog).get(node.op)
    if spec is None:
        return []

    parameters = node.app_data.component_parameters
    problems = []
    for pid in required_parameters(spec, prefixes):
        key = storage_key(pid, spec, prefixes)
        if not is_missing(parameters, key):
            continue

        info = spec.get_parameter_info(pid)
        label = info.display_label if info else pid
        problems.append(Problem(
            message=f"The property '{label}' on node '{node.display_name}' is required.",
            path=list(path) + ["app_data", "component_parameters", key],
            info=ProblemInfo(
                type=ProblemType.MISSING_PROPERTY,
                pipeline_id=pipeline_id,
                node_id=node.id,
                property=pid,
            ),
        ))

    if problems:
        logger.debug(f"Node {node.id}: {len(problems)} missing properties")
    return problems
