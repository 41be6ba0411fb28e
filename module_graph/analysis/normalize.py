"""Rewrite absolute module ids in a tree relative to a project root."""

from __future__ import annotations

import os

from module_graph.models import Dependency, DependencyTree


def shorten_id(context: str, module_id: str) -> str:
    # Opaque ids (packages, builtins) and already-shortened ids stay as they are
    if not os.path.isabs(module_id):
        return module_id
    try:
        return os.path.relpath(module_id, context)
    except ValueError:
        # Different drives on Windows
        return module_id


def shorten_tree(context: str, tree: DependencyTree) -> DependencyTree:
    output: DependencyTree = {}
    for key, deps in tree.items():
        short_key = shorten_id(context, key)
        if deps is None:
            output[short_key] = None
            continue
        output[short_key] = [
            Dependency(
                request=dep.request,
                issuer=short_key,
                id=None if dep.id is None else shorten_id(context, dep.id),
            )
            for dep in deps
        ]
    return output
