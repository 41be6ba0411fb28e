"""Indented, numbered terminal rendering of trees, cycles and warnings."""

from __future__ import annotations

import math

import click

from module_graph.models import DependencyTree


def _digits(count: int) -> int:
    if count <= 0:
        return 0
    return math.ceil(math.log10(count))


def pretty_tree(tree: DependencyTree, entries: list[str], prefix: str = "  ") -> str:
    lines: list[str] = []
    id_map: dict[str, int] = {}
    digits = _digits(len(tree))

    stack: list[tuple[str, str, bool]] = [
        (entry, prefix, i < len(entries) - 1) for i, entry in enumerate(entries)
    ]
    stack.reverse()

    while stack:
        item, item_prefix, has_more = stack.pop()
        is_new = item not in id_map
        if is_new:
            id_map[item] = len(id_map)
        line = click.style(f"{item_prefix}- {str(id_map[item]).zfill(digits)}) ", dim=True)
        deps = tree.get(item)
        if not is_new:
            lines.append(line + click.style(item, dim=True))
            continue
        if deps is None:
            lines.append(line + click.style(item, fg="bright_yellow"))
            continue
        lines.append(line + click.style(item, fg="bright_white"))
        child_prefix = item_prefix + ("·   " if has_more else "    ")
        # Reversed so the first dependency is printed first
        for i in range(len(deps) - 1, -1, -1):
            dep = deps[i]
            stack.append((dep.id or dep.request, child_prefix, i < len(deps) - 1))

    return "\n".join(lines)


def pretty_circular(circulars: list[list[str]], prefix: str = "  ") -> str:
    digits = _digits(len(circulars))
    arrow = click.style(" -> ", dim=True)
    return "\n".join(
        click.style(f"{prefix}{str(index).zfill(digits)}) ", dim=True)
        + arrow.join(click.style(item, fg="bright_cyan") for item in chain)
        for index, chain in enumerate(circulars, start=1)
    )


def pretty_warning(warnings: list[str], prefix: str = "  ") -> str:
    digits = _digits(len(warnings))
    return "\n".join(
        click.style(f"{prefix}{str(index).zfill(digits)}) ", dim=True)
        + click.style(line, fg="bright_yellow")
        for index, line in enumerate(warnings, start=1)
    )
