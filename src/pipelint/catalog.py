"""Component catalog: the spec lookup used by validation."""

import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from pipelint.models.component import ComponentSpec

logger = logging.getLogger(__name__)


class ComponentCatalog:
    """Component specifications keyed by op. First spec for an op wins."""

    def __init__(self, specs: Iterable[ComponentSpec] = ()):
        self._specs: dict[str, ComponentSpec] = {}
        for spec in specs:
            self.add(spec)

    def add(self, spec: ComponentSpec) -> None:
        if spec.op in self._specs:
            logger.debug(f"Duplicate spec for op '{spec.op}' ignored")
            return
        self._specs[spec.op] = spec

    def get(self, op: str | None) -> ComponentSpec | None:
        if op is None:
            return None
        return self._specs.get(op)

    def __contains__(self, op: object) -> bool:
        return op in self._specs

    def __len__(self) -> int:
        return len(self._specs)

    def __iter__(self):
        return iter(self._specs.values())

    @classmethod
    def from_specs(cls, specs: Any) -> "ComponentCatalog":
        """Build a catalog from whatever the caller holds.

        Accepts a catalog, an iterable of ComponentSpec models or raw spec
        mappings, a mapping of op to spec, or None. Entries that cannot be
        read as a spec are skipped.
        """
        if isinstance(specs, ComponentCatalog):
            return specs
        if specs is None:
            return cls()
        if isinstance(specs, ComponentSpec):
            return cls([specs])

        if isinstance(specs, Mapping):
            # A single raw spec, or op -> spec
            entries = [specs] if "op" in specs else list(specs.values())
        elif isinstance(specs, Iterable) and not isinstance(specs, (str, bytes)):
            entries = list(specs)
        else:
            logger.warning(f"Ignoring component specs of type {type(specs).__name__}")
            return cls()

        catalog = cls()
        for i, entry in enumerate(entries):
            spec = _coerce_spec(entry, i)
            if spec is not None:
                catalog.add(spec)
        return catalog

    @classmethod
    def load(cls, paths: Iterable[str | Path]) -> "ComponentCatalog":
        """Load specs from JSON files or directories of JSON files.

        Each file may hold one spec or a list of specs.

        Raises:
            FileNotFoundError: If a path does not exist
            ValueError: If a file is not valid JSON
        """
        entries: list[Any] = []
        for path in paths:
            path = Path(path)
            if not path.exists():
                raise FileNotFoundError(f"Component spec path not found: {path}")

            files = sorted(path.glob("*.json")) if path.is_dir() else [path]
            for file_path in files:
                try:
                    with open(file_path, encoding="utf-8") as f:
                        data = json.load(f)
                except json.JSONDecodeError as e:
                    raise ValueError(f"Invalid JSON in component spec {file_path}: {e}")

                if isinstance(data, list):
                    entries.extend(data)
                else:
                    entries.append(data)

        logger.info(f"Read {len(entries)} component specs")
        return cls.from_specs(entries)


def _coerce_spec(entry: Any, index: int) -> ComponentSpec | None:
    if isinstance(entry, ComponentSpec):
        return entry
    if not isinstance(entry, Mapping):
        logger.warning(f"Skipping component spec #{index}: not an object")
        return None

    try:
        return ComponentSpec.model_validate(dict(entry))
    except ValidationError as e:
        logger.warning(f"Skipping component spec #{index} ({entry.get('op', 'no op')}): {e.error_count()} errors")
        return None
