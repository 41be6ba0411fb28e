"""Read-only analyses over a dependency tree."""

from __future__ import annotations

from module_graph.analysis.circular import parse_circular
from module_graph.analysis.dependents import parse_dependents
from module_graph.analysis.diagnostics import parse_warnings
from module_graph.analysis.normalize import shorten_id, shorten_tree

__all__ = [
    "parse_circular",
    "parse_dependents",
    "parse_warnings",
    "shorten_id",
    "shorten_tree",
]
