"""Warning derivation for skipped and lost modules."""

from __future__ import annotations

import json

from module_graph.analysis.dependents import parse_dependents
from module_graph.models import DependencyTree
from module_graph.resolver.base import FileSystem
from module_graph.resolver.node_fs import NodeFileSystem


def _quote(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


def parse_warnings(
    tree: DependencyTree,
    dependents: dict[str, list[str]] | None = None,
    fs: FileSystem | None = None,
) -> list[str]:
    """Describe every unexamined module and every failed import in ``tree``.

    ``skip`` lines name a leaf and its first two importers, ``lose`` lines a
    request that resolved to nothing. Builtin leaves are grouped into one
    trailing ``node`` line. The result is sorted.
    """
    if dependents is None:
        dependents = parse_dependents(tree)
    fs = fs or NodeFileSystem()

    warnings: list[str] = []
    builtin: dict[str, None] = {}  # ordered set
    for key, deps in tree.items():
        if deps is None:
            if fs.find_builtin(key):
                builtin[key] = None
                continue
            parents = dependents.get(key, [])
            total = len(parents)
            line = f"skip {_quote(key)}, issuers: " + ", ".join(_quote(p) for p in parents[:2])
            if total > 2:
                line += f" ({total - 2} more...)"
            warnings.append(line)
        else:
            for dep in deps:
                if dep.id is None:
                    warnings.append(f"lose {_quote(dep.request)} from {_quote(dep.issuer)}")

    if builtin:
        warnings.append("node " + ", ".join(_quote(b) for b in builtin))
    return sorted(warnings)
