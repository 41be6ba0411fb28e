"""One analysis run: build the tree, derive cycles, dependents and warnings."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from module_graph.analysis import (
    parse_circular,
    parse_dependents,
    parse_warnings,
    shorten_id,
    shorten_tree,
)
from module_graph.builder import DependencyTreeBuilder, ImportSource
from module_graph.models import DependencyTree, ParseOptions
from module_graph.resolver import FileSystem


@dataclass
class AnalysisReport:
    entries: list[str] = field(default_factory=list)
    tree: DependencyTree = field(default_factory=dict)
    circulars: list[list[str]] = field(default_factory=list)
    dependents: dict[str, list[str]] = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "entries": list(self.entries),
            "tree": {
                key: None if deps is None else [dep.to_dict() for dep in deps]
                for key, deps in self.tree.items()
            },
            "circulars": [list(chain) for chain in self.circulars],
            "dependents": {key: list(value) for key, value in self.dependents.items()},
            "warnings": list(self.warnings),
        }


def analyze(
    entries: Iterable[str],
    imports: ImportSource,
    options: ParseOptions | None = None,
    transform: bool = False,
    fs: FileSystem | None = None,
) -> AnalysisReport:
    """Build the dependency tree for ``entries`` and run every analysis on it."""
    options = options or ParseOptions()
    builder = DependencyTreeBuilder(options, fs=fs)
    entry_ids = [builder.absolute_path(entry) for entry in entries]
    tree = builder.build(entry_ids, imports)

    if transform:
        tree = shorten_tree(options.context, tree)
        entry_ids = [shorten_id(options.context, entry) for entry in entry_ids]

    dependents = parse_dependents(tree)
    return AnalysisReport(
        entries=entry_ids,
        tree=tree,
        circulars=parse_circular(tree),
        dependents=dependents,
        warnings=parse_warnings(tree, dependents, fs=builder.fs),
    )


def load_imports(path: Path) -> dict[str, list[str]]:
    """Read a ``{"file": ["request", ...]}`` edge list."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"{path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain an object of file -> requests")
    for file, requests in data.items():
        if not isinstance(requests, list) or not all(isinstance(r, str) for r in requests):
            raise ValueError(f"Requests for {file!r} must be a list of strings")
    return data
