"""Reverse dependency index: who imports each module."""

from __future__ import annotations

from module_graph.models import DependencyTree


def parse_dependents(tree: DependencyTree) -> dict[str, list[str]]:
    output: dict[str, list[str]] = {}
    for key, deps in tree.items():
        if not deps:
            continue
        for dep in deps:
            if dep.id is not None:
                output.setdefault(dep.id, []).append(key)
    for issuers in output.values():
        issuers.sort()
    return output
