"""Circular import detection."""

from __future__ import annotations

from module_graph.models import DependencyTree


def parse_circular(tree: DependencyTree) -> list[list[str]]:
    """Find circular import chains, in discovery order.

    Each chain runs from the first occurrence of the repeated module up to
    the module that imports it again. A module's edges are expanded once
    globally, but it can still close a cycle on any path that reaches it.
    """
    circulars: list[list[str]] = []
    working = dict(tree)

    for root in tree:
        stack: list[tuple[str, tuple[str, ...]]] = [(root, ())]
        while stack:
            module_id, used = stack.pop()
            if module_id in used:
                circulars.append(list(used[used.index(module_id):]))
                continue
            deps = working.pop(module_id, None)
            if deps is None:
                continue
            path = used + (module_id,)
            # Reversed so the first edge is expanded first
            for dep in reversed(deps):
                if dep.id is not None:
                    stack.append((dep.id, path))

    return circulars
